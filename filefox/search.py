"""Recursive, case-insensitive search for files and folders by name."""

from __future__ import annotations

import os
import queue
import threading
from collections.abc import Callable, Iterator
from pathlib import Path


def _walk(root: Path) -> Iterator[Path]:
    """Yield ``root`` and everything below it, skipping unreadable parts."""
    if not os.path.lexists(root):
        return
    yield root
    if not root.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(root):
        base = Path(dirpath)
        for name in (*dirnames, *filenames):
            yield base / name


def _search(root: Path, needle: str, cancelled: threading.Event | None = None) -> list[Path]:
    found = []
    for path in _walk(root):
        if cancelled is not None and cancelled.is_set():
            break
        if needle in path.name.lower():
            found.append(path)
    return found


def find_entries(start_path: str | os.PathLike[str], query: str) -> list[Path]:
    """Return every path under ``start_path`` (itself included) whose name
    contains ``query``, ignoring case."""
    return _search(Path(start_path), query.lower())


class SearchJob:
    """A search running on a background thread.

    ``on_done`` is called from the worker thread once results are ready.
    """

    def __init__(
        self,
        start_path: str | os.PathLike[str],
        query: str,
        on_done: Callable[[], None] | None = None,
    ) -> None:
        self.start_path = Path(start_path)
        self.query = query
        self.finished = False
        self._on_done = on_done
        self._results: queue.Queue[list[Path]] = queue.Queue(maxsize=1)
        self._cancelled = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="filefox-search", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        try:
            found = _search(self.start_path, self.query.lower(), self._cancelled)
        except OSError:
            return
        if self._cancelled.is_set():
            return
        self._results.put(found)
        if self._on_done is not None:
            self._on_done()

    @property
    def running(self) -> bool:
        return not self.finished

    def poll(self) -> list[Path] | None:
        """Return the results once they are ready, exactly once; otherwise None."""
        if self.finished:
            return None
        try:
            found = self._results.get_nowait()
        except queue.Empty:
            if not self._thread.is_alive() and self._results.empty():
                self.finished = True
            return None
        self.finished = True
        return found

    def cancel(self) -> None:
        """Stop the search and discard whatever it finds."""
        self._cancelled.set()
        self.finished = True