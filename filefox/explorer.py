"""Directory browsing state: listing, navigation, renaming, deleting, searching."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from filefox.search import SearchJob


@dataclass(frozen=True)
class Entry:
    """One item of a directory listing."""

    name: str
    is_dir: bool

    def label(self) -> str:
        """The displayed name; folders carry a trailing slash."""
        return f"{self.name}/" if self.is_dir else self.name


class Explorer:
    """The state of one file-browsing view."""

    def __init__(self, current_dir: str | os.PathLike[str] | None = None) -> None:
        if current_dir is None:
            try:
                current_dir = Path.cwd()
            except OSError:
                current_dir = Path("")
        self.current_dir = Path(current_dir)
        self.entries: list[Entry] = []
        self.filtered_entries: list[Entry] | None = None
        self.search_results: list[Path] | None = None
        self.search_query = ""
        self._job: SearchJob | None = None
        self.refresh()

    @property
    def is_searching(self) -> bool:
        return self._job is not None

    def _stop_job(self) -> None:
        if self._job is not None:
            self._job.cancel()
            self._job = None

    def refresh(self) -> None:
        """Re-read the current directory and drop any search state.

        Raises OSError if the directory cannot be read; the listing is then empty.
        """
        self.filtered_entries = None
        self.search_results = None
        self._stop_job()
        self.entries = []
        with os.scandir(self.current_dir) as listing:
            found = [Entry(item.name, item.is_dir()) for item in listing]
        self.entries = sorted(found, key=Entry.label)

    def navigate_to(self, name: str | os.PathLike[str]) -> bool:
        """Enter the folder ``name``; return whether the directory changed."""
        target = self.current_dir / name
        if not target.is_dir():
            return False
        self.current_dir = target
        self.refresh()
        return True

    def navigate_up(self) -> bool:
        """Go to the parent folder; return whether the directory changed."""
        parent = self.current_dir.parent
        if parent == self.current_dir:
            return False
        self.current_dir = parent
        self.refresh()
        return True

    def rename_entry(self, old_name: str, new_name: str) -> None:
        """Rename an entry of the current directory. Raises OSError on failure."""
        (self.current_dir / old_name).rename(self.current_dir / new_name)
        self.refresh()

    def delete_entry(self, name: str) -> None:
        """Delete a file, or a folder with all it holds. Raises OSError on failure."""
        target = self.current_dir / name
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
        self.refresh()

    def start_search(self, query: str, on_done: Callable[[], None] | None = None) -> None:
        """Search below the current directory in the background.

        An empty query clears the results instead.
        """
        self.search_query = query
        self._stop_job()
        self.search_results = None
        if not query:
            return
        self._job = SearchJob(self.current_dir, query.lower(), on_done)

    def poll_search(self) -> list[Path] | None:
        """Collect results of a running search; return the current results."""
        if self._job is not None:
            found = self._job.poll()
            if found is not None:
                self.search_results = found
                self._job = None
            elif self._job.finished:
                self._job = None
        return self.search_results

    def cancel_search(self) -> None:
        """Stop any search and drop its results."""
        self._stop_job()
        self.search_results = None

    def visible_entries(self) -> list[Entry]:
        """The entries to show: the filtered ones if a filter is set."""
        if self.filtered_entries is not None:
            return self.filtered_entries
        return self.entries