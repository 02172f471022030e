import subprocess
from unittest.mock import patch

import pytest

from serene.launcher import activate, launch_application, open_file, row_icon
from serene.results import Application, FileResult


def test_launch_application_runs_through_shell():
    with patch("serene.launcher.subprocess.Popen") as popen:
        process = launch_application("firefox --new-window")
    assert process is popen.return_value
    args, kwargs = popen.call_args
    assert args[0] == "firefox --new-window"
    assert kwargs["shell"] is True


def test_open_file_uses_xdg_open():
    with patch("serene.launcher.subprocess.Popen") as popen:
        process = open_file("/tmp/some file.txt")
    assert process is popen.return_value
    args, kwargs = popen.call_args
    assert args[0] == ["xdg-open", "/tmp/some file.txt"]
    assert kwargs["shell"] is False
    assert kwargs["stdout"] == subprocess.DEVNULL


def test_activate_application_launches_exec():
    app = Application(name="Editor", exec="gedit", desktop_file="/x/gedit.desktop")
    with patch("serene.launcher.subprocess.Popen") as popen:
        result = activate(app)
    assert result is popen.return_value
    assert popen.call_args[0][0] == "gedit"


def test_activate_file_opens_path():
    item = FileResult(path="/home/u/notes.txt", name="notes.txt")
    with patch("serene.launcher.subprocess.Popen") as popen:
        result = activate(item)
    assert result is popen.return_value
    assert popen.call_args[0][0] == ["xdg-open", "/home/u/notes.txt"]


def test_activate_nothing_selected():
    with patch("serene.launcher.subprocess.Popen") as popen:
        result = activate(None)
    assert result is None
    assert popen.call_count == 0


def test_row_icon_named_application_icon():
    assert row_icon(Application(name="Editor", icon="accessories-text-editor")) == (
        "accessories-text-editor"
    )


def test_row_icon_application_without_icon():
    assert row_icon(Application(name="Tool")) == "applications-system"


def test_row_icon_application_missing_icon_file(tmp_path):
    missing = str(tmp_path / "nope.png")
    assert row_icon(Application(name="Tool", icon=missing)) == "applications-system"


def test_row_icon_application_icon_file(tmp_path):
    icon = tmp_path / "tool.png"
    icon.write_bytes(b"\x89PNG")
    assert row_icon(Application(name="Tool", icon=str(icon))) == str(icon)


def test_row_icon_directory():
    item = FileResult(path="/home/u/Music", name="Music", is_directory=True,
                      mime_type="inode/directory")
    assert row_icon(item) == "folder"


def test_row_icon_image_preview(tmp_path):
    image = tmp_path / "photo.png"
    image.write_bytes(b"\x89PNG")
    item = FileResult(path=str(image), name="photo.png", mime_type="image/png")
    assert row_icon(item) == str(image)


def test_row_icon_missing_image_falls_back_to_mime_icon(tmp_path):
    item = FileResult(path=str(tmp_path / "gone.png"), name="gone.png",
                      mime_type="image/png")
    assert row_icon(item) == "image-png"


def test_row_icon_without_mime_type():
    item = FileResult(path="/x/y", name="y", mime_type="")
    assert row_icon(item) == "text-x-generic"


def test_row_icon_rejects_other_types():
    with pytest.raises(TypeError):
        row_icon("not an item")