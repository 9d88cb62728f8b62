"""Desktop window for browsing, renaming, deleting and searching files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from filefox.explorer import Entry, Explorer
from filefox.launch import open_path, reveal_path

TITLE = "FileFox"
SEARCH_TITLE = "What do you want to search?"
_POLL_MS = 100


def status_text(explorer: Explorer) -> str:
    """The line describing the search state; empty when no search is shown."""
    query = explorer.search_query
    if explorer.is_searching:
        return f"Searching for: '{query}'..."
    if explorer.search_results is not None:
        if not explorer.search_results:
            return f"No results found for: '{query}'"
        return f"Results for: '{query}'"
    return ""


def _report(action: str, exc: OSError) -> None:
    print(f"Error while {action}: {exc}", file=sys.stderr)


class FileFoxApp:
    """The main window: a directory listing with context actions and search."""

    def __init__(self, root, explorer: Explorer | None = None) -> None:
        import tkinter as tk

        self._tk = tk
        self.root = root
        self.explorer = explorer if explorer is not None else Explorer()
        self._rows: list[Entry | Path] = []
        self._search_window = None

        root.title(TITLE)

        header = tk.Label(root, text=TITLE, font=("TkDefaultFont", 16, "bold"), anchor="w")
        header.pack(fill="x", padx=8, pady=(8, 0))

        nav = tk.Frame(root)
        nav.pack(fill="x", padx=8, pady=4)
        tk.Button(nav, text="\u2b06 Up", command=self._go_up).pack(side="left")
        self._path_label = tk.Label(nav, anchor="w")
        self._path_label.pack(side="left", fill="x", expand=True, padx=8)

        self._status_label = tk.Label(root, anchor="w")
        self._status_label.pack(fill="x", padx=8)

        body = tk.Frame(root)
        body.pack(fill="both", expand=True, padx=8, pady=(0, 8))
        scrollbar = tk.Scrollbar(body, orient="vertical")
        self._list = tk.Listbox(body, activestyle="none", yscrollcommand=scrollbar.set)
        scrollbar.config(command=self._list.yview)
        scrollbar.pack(side="right", fill="y")
        self._list.pack(side="left", fill="both", expand=True)

        self._list.bind("<Double-Button-1>", self._on_double_click)
        self._list.bind("<Button-3>", self._on_context)
        if sys.platform == "darwin":
            self._list.bind("<Button-2>", self._on_context)

        self.render()
        self.root.after(_POLL_MS, self._tick)

    # --- drawing -----------------------------------------------------------

    def render(self) -> None:
        """Redraw the path, the search state and the listing."""
        tk = self._tk
        ex = self.explorer
        self._path_label.config(text=f"Current Path: {ex.current_dir}")
        self._status_label.config(text=status_text(ex))
        self._list.delete(0, tk.END)
        if ex.search_results is not None:
            self._rows = list(ex.search_results)
            labels = [str(path) for path in self._rows]
        else:
            self._rows = list(ex.visible_entries())
            labels = [entry.label() for entry in self._rows]
        for label in labels:
            self._list.insert(tk.END, label)

    def _tick(self) -> None:
        was_searching = self.explorer.is_searching
        self.explorer.poll_search()
        if was_searching and not self.explorer.is_searching:
            self.render()
        self.root.after(_POLL_MS, self._tick)

    # --- rows and events ---------------------------------------------------

    def _row_at(self, event) -> Entry | Path | None:
        if not self._rows:
            return None
        index = self._list.nearest(event.y)
        if not 0 <= index < len(self._rows):
            return None
        self._list.selection_clear(0, self._tk.END)
        self._list.selection_set(index)
        return self._rows[index]

    def _on_double_click(self, event) -> None:
        row = self._row_at(event)
        if row is not None:
            self._activate(row)

    def _on_context(self, event) -> None:
        row = self._row_at(event)
        if row is None:
            return
        menu = self._tk.Menu(self.root, tearoff=0)
        if isinstance(row, Path):
            menu.add_command(label="Open", command=lambda: self._activate(row))
            menu.add_command(label="Show in explorer", command=lambda: reveal_path(row))
        else:
            menu.add_command(label="Open", command=lambda: self._activate(row))
            menu.add_command(label="Delete", command=lambda: self._delete(row))
            menu.add_command(label="Rename", command=lambda: self._rename(row))
            menu.add_command(label="Search", command=self._open_search)
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()

    # --- actions -----------------------------------------------------------

    def _activate(self, row: Entry | Path) -> None:
        if isinstance(row, Path):
            if row.is_dir():
                self._enter(row)
            else:
                open_path(row)
            return
        if row.is_dir:
            try:
                self.explorer.navigate_to(row.name)
            except OSError as exc:
                _report(f"loading directory {self.explorer.current_dir}", exc)
            self.render()
        else:
            open_path(self.explorer.current_dir / row.name)

    def _enter(self, path: Path) -> None:
        self.explorer.current_dir = path
        try:
            self.explorer.refresh()
        except OSError as exc:
            _report(f"loading directory {path}", exc)
        self.render()

    def _go_up(self) -> None:
        try:
            self.explorer.navigate_up()
        except OSError as exc:
            _report(f"loading directory {self.explorer.current_dir}", exc)
        self.render()

    def _delete(self, entry: Entry) -> None:
        try:
            self.explorer.delete_entry(entry.name)
        except OSError as exc:
            _report(f"deleting {self.explorer.current_dir / entry.name}", exc)
        self.render()

    def _rename(self, entry: Entry) -> None:
        from tkinter import simpledialog

        new_name = simpledialog.askstring(
            "Rename", "New name:", initialvalue=entry.name, parent=self.root
        )
        if new_name:
            try:
                self.explorer.rename_entry(entry.name, new_name)
            except OSError as exc:
                old = self.explorer.current_dir / entry.name
                new = self.explorer.current_dir / new_name
                _report(f"renaming {old} to {new}", exc)
        self.render()

    # --- search popup ------------------------------------------------------

    def _open_search(self) -> None:
        tk = self._tk
        ex = self.explorer
        ex.search_query = ""
        ex.search_results = None
        self.render()
        if self._search_window is not None:
            self._search_window.lift()
            return

        window = tk.Toplevel(self.root)
        window.title(SEARCH_TITLE)
        window.resizable(False, False)
        window.transient(self.root)
        self._search_window = window

        query = tk.StringVar(window)
        field = tk.Entry(window, textvariable=query, width=40)
        field.pack(fill="x", padx=8, pady=8)
        field.focus_set()

        buttons = tk.Frame(window)
        buttons.pack(fill="x", padx=8, pady=(0, 8))

        def search(_event=None) -> None:
            if self.explorer.is_searching:
                return
            self.explorer.start_search(query.get())
            close()
            self.render()

        def cancel() -> None:
            self.explorer.cancel_search()
            close()
            self.render()

        def close() -> None:
            window.destroy()
            self._search_window = None

        state = "disabled" if ex.is_searching else "normal"
        tk.Button(buttons, text="Search", command=search, state=state).pack(side="left")
        tk.Button(buttons, text="Cancel", command=cancel).pack(side="left", padx=4)
        field.bind("<Return>", search)
        window.protocol("WM_DELETE_WINDOW", close)


def main(argv: list[str] | None = None) -> int:
    """Start the file browser window."""
    parser = argparse.ArgumentParser(prog="filefox", description="Browse and search files.")
    parser.add_argument("directory", nargs="?", default=None, help="folder to open")
    args = parser.parse_args(argv)

    try:
        explorer = Explorer(args.directory)
    except OSError as exc:
        _report(f"loading directory {args.directory}", exc)
        return 1

    import tkinter as tk

    root = tk.Tk()
    root.geometry("800x600")
    FileFoxApp(root, explorer)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())