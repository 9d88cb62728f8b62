import sys
from pathlib import Path
from unittest import mock

from filefox.launch import open_path, reveal_path


def test_open_on_windows_uses_start(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    with mock.patch("filefox.launch.subprocess.Popen") as popen:
        process = open_path(Path("C:/data/a.txt"))
    popen.assert_called_once_with(["cmd", "/C", "start", "", str(Path("C:/data/a.txt"))])
    assert process is popen.return_value


def test_reveal_on_windows_selects_in_explorer(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    with mock.patch("filefox.launch.subprocess.Popen") as popen:
        process = reveal_path("C:/data/a.txt")
    popen.assert_called_once_with(["explorer", "/select,", "C:/data/a.txt"])
    assert process is popen.return_value


def test_open_on_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    with mock.patch("filefox.launch.subprocess.Popen") as popen:
        process = open_path("/tmp/a.txt")
    popen.assert_called_once_with(["open", "/tmp/a.txt"])
    assert process is popen.return_value


def test_reveal_on_linux_opens_parent(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    with mock.patch("filefox.launch.subprocess.Popen") as popen:
        process = reveal_path("/srv/files/a.txt")
    args = popen.call_args.args[0]
    assert args[-1] == str(Path("/srv/files/a.txt").parent)
    assert len(args) == 2
    assert process is popen.return_value


def test_open_returns_none_when_launcher_missing(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    with mock.patch("filefox.launch.subprocess.Popen", side_effect=FileNotFoundError):
        assert open_path("/tmp/a.txt") is None


def test_reveal_returns_none_on_os_error(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    with mock.patch("filefox.launch.subprocess.Popen", side_effect=OSError):
        assert reveal_path("C:/a.txt") is None