"""Hand files over to the desktop: open them or show them in a file manager."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


def _spawn(args: list[str]) -> subprocess.Popen | None:
    try:
        return subprocess.Popen(args)
    except OSError:
        return None


def open_path(path: str | os.PathLike[str]) -> subprocess.Popen | None:
    """Open ``path`` with the program the system associates with it.

    Returns the started process, or None if it could not be started.
    """
    target = str(path)
    if sys.platform.startswith("win"):
        return _spawn(["cmd", "/C", "start", "", target])
    if sys.platform == "darwin":
        return _spawn(["open", target])
    return _spawn(["xdg-open", target])


def reveal_path(path: str | os.PathLike[str]) -> subprocess.Popen | None:
    """Show ``path`` selected in the system file manager.

    Returns the started process, or None if it could not be started.
    """
    target = str(path)
    if sys.platform.startswith("win"):
        return _spawn(["explorer", "/select,", target])
    if sys.platform == "darwin":
        return _spawn(["open", "-R", target])
    return _spawn(["xdg-open", str(Path(path).parent)])