# filefox

A small desktop file explorer. It shows the contents of a folder and lets you
move through the folder tree, open, rename and delete entries, and search for
files and folders by name.

## Installing

```
pip install .
```

The window is built with Tkinter, which comes with most Python installations.
The package has no other dependencies.

## Running

```
filefox [directory]
```

The window opens in `directory`, or in the current working directory if none
is given. If the folder cannot be read, an error is printed and the command
exits with status 1.

## The window

- The top of the window shows the current path and an **Up** button that goes
  to the parent folder.
- The listing shows the entries of the current folder, sorted by name. Folders
  end in `/`.
- Double-clicking a folder enters it. Double-clicking a file opens it in the
  program the system uses for that file type.
- The right-click menu on an entry has **Open**, **Delete**, **Rename** and
  **Search**.
  - **Delete** removes a file. A folder is removed together with everything in
    it.
  - **Rename** opens a dialog with the current name filled in. The new name is
    applied when you confirm a non-empty name.
  - **Search** opens a small window that asks for a search term. Press Enter or
    **Search** to start; **Cancel** closes the window and clears any results.
- A search looks through the current folder and all of its subfolders in the
  background. It lists every file and folder whose name contains the term,
  ignoring case. A status line shows `Searching for: '...'...` while it runs,
  then `Results for: '...'` or `No results found for: '...'`.
- In the result list, double-clicking or **Open** enters a folder or opens a
  file. **Show in explorer** shows the path in the system file manager.
- Moving to another folder clears the search results.
- Errors while reading, renaming or deleting are printed to standard error; the
  window keeps running.

## Using it from Python

The folder logic works without the window:

```python
from filefox.explorer import Explorer
from filefox.search import find_entries

explorer = Explorer("/some/folder")   # defaults to the current directory
for entry in explorer.visible_entries():
    print(entry.label())              # folders end in "/"

explorer.navigate_to("subfolder")     # returns False if it is not a folder
explorer.navigate_up()                # returns False at the top of the tree

for path in find_entries("/some/folder", "report"):
    print(path)
```

`find_entries` includes the start folder itself when its name matches.

`Explorer` holds the listing in `entries` (a list of `Entry` objects with
`name` and `is_dir`), and `visible_entries()` returns `filtered_entries`
instead when that is set. `refresh()` re-reads the folder and drops any search
state. `rename_entry(old_name, new_name)` and `delete_entry(name)` act on
entries of the current folder. These methods raise `OSError` when the file
system refuses.

Searching in the background:

- `Explorer.start_search(query, on_done=None)` starts a search below the
  current folder. `on_done` is called from the worker thread once results are
  ready. An empty query just clears the results.
- `Explorer.poll_search()` collects the results when they are ready and returns
  the current results, or `None`.
- `Explorer.is_searching` tells whether a search is still running.
- `Explorer.cancel_search()` stops a search and drops its results.

`filefox.search.SearchJob` is the background search on its own. Its `poll()`
method returns the results once, when they are ready, and `cancel()` discards
them.

`filefox.launch.open_path(path)` opens a path in its default application.
`filefox.launch.reveal_path(path)` shows a path in the system file manager.
On Linux this opens the containing folder with `xdg-open`. Both return the
started process, or `None` if it could not be started.

`filefox.gui.status_text(explorer)` returns the search status line that the
window shows.

## Limits

- Only one search runs at a time; starting a new one stops the old one.
- Nothing in the window sets `filtered_entries`; it can only be set from code.
- There is no copy, move, create-folder or undo.

## Tests

```
pip install .[test]
pytest
```