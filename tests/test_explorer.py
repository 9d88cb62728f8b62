import time
from pathlib import Path

import pytest

from filefox.explorer import Entry, Explorer


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "beta").mkdir()
    (tmp_path / "beta" / "inner.txt").write_text("x")
    (tmp_path / "alpha.txt").write_text("x")
    (tmp_path / "Zed.log").write_text("x")
    return tmp_path


def _finish(explorer, timeout=5.0):
    deadline = time.monotonic() + timeout
    while explorer.is_searching:
        explorer.poll_search()
        if time.monotonic() > deadline:
            raise AssertionError("search did not finish")
        time.sleep(0.01)
    return explorer.search_results


def test_entry_label_marks_folders():
    assert Entry("docs", True).label() == "docs/"
    assert Entry("a.txt", False).label() == "a.txt"


def test_listing_is_sorted_by_label(tree):
    explorer = Explorer(tree)
    labels = [e.label() for e in explorer.entries]
    assert labels == sorted(labels)
    assert set(labels) == {"beta/", "alpha.txt", "Zed.log"}


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Explorer(tmp_path / "missing")


def test_navigate_into_and_up(tree):
    explorer = Explorer(tree)
    assert explorer.navigate_to("beta") is True
    assert explorer.current_dir == tree / "beta"
    assert [e.label() for e in explorer.entries] == ["inner.txt"]
    assert explorer.navigate_up() is True
    assert explorer.current_dir == tree


def test_navigate_to_file_or_missing_does_nothing(tree):
    explorer = Explorer(tree)
    assert explorer.navigate_to("alpha.txt") is False
    assert explorer.navigate_to("nope") is False
    assert explorer.current_dir == tree


def test_navigate_up_at_root_stays(tree):
    root = Path(tree.anchor)
    explorer = Explorer(root)
    assert explorer.navigate_up() is False
    assert explorer.current_dir == root


def test_rename_updates_listing(tree):
    explorer = Explorer(tree)
    explorer.rename_entry("alpha.txt", "omega.txt")
    names = {e.name for e in explorer.entries}
    assert "omega.txt" in names and "alpha.txt" not in names
    assert (tree / "omega.txt").is_file()


def test_rename_missing_raises(tree):
    explorer = Explorer(tree)
    with pytest.raises(FileNotFoundError):
        explorer.rename_entry("ghost", "other")


def test_delete_file_and_folder(tree):
    explorer = Explorer(tree)
    explorer.delete_entry("alpha.txt")
    explorer.delete_entry("beta")
    assert [e.name for e in explorer.entries] == ["Zed.log"]
    assert not (tree / "beta").exists()


def test_delete_missing_raises(tree):
    explorer = Explorer(tree)
    with pytest.raises(FileNotFoundError):
        explorer.delete_entry("ghost")


def test_search_finds_nested_entries(tree):
    explorer = Explorer(tree)
    explorer.start_search("INNER")
    assert explorer.search_query == "INNER"
    assert _finish(explorer) == [tree / "beta" / "inner.txt"]
    assert explorer.is_searching is False


def test_empty_query_clears_results(tree):
    explorer = Explorer(tree)
    explorer.start_search("alpha")
    _finish(explorer)
    explorer.start_search("")
    assert explorer.search_results is None
    assert explorer.is_searching is False


def test_cancel_search(tree):
    explorer = Explorer(tree)
    explorer.start_search("a")
    explorer.cancel_search()
    assert explorer.is_searching is False
    assert explorer.poll_search() is None


def test_refresh_drops_search_results(tree):
    explorer = Explorer(tree)
    explorer.start_search("zed")
    assert _finish(explorer) == [tree / "Zed.log"]
    explorer.refresh()
    assert explorer.search_results is None


def test_visible_entries_prefers_filter(tree):
    explorer = Explorer(tree)
    assert explorer.visible_entries() == explorer.entries
    subset = explorer.entries[:1]
    explorer.filtered_entries = subset
    assert explorer.visible_entries() == subset
    explorer.refresh()
    assert explorer.visible_entries() == explorer.entries