import pytest

from serene.details import ItemDetails, describe, format_file_size
from serene.results import Application, FileResult


def test_format_small_sizes_stay_in_bytes():
    assert format_file_size(0) == "0.0 B"
    assert format_file_size(1023).endswith(" B")


def test_format_kilobyte():
    assert format_file_size(1024) == "1.0 KB"


@pytest.mark.parametrize("power,unit", [(2, "MB"), (3, "GB"), (4, "TB")])
def test_format_units(power, unit):
    assert format_file_size(1024**power).endswith(" " + unit)
    assert format_file_size(1024**power).startswith("1.0 ")


def test_format_caps_at_terabytes():
    assert format_file_size(1024**5) == "1024.0 TB"


def test_describe_none():
    assert describe(None) is None


def test_describe_application():
    app = Application(
        name="Editor", exec="edit", icon="edit-icon", comment="Edits text",
        desktop_file="/apps/editor.desktop",
    )
    assert describe(app) == ItemDetails(
        icon="edit-icon",
        name="Editor",
        description="Edits text",
        path="/apps/editor.desktop",
        size="",
        type_name="Application",
    )


def test_describe_directory():
    folder = FileResult("/home/u/Music", "Music", True, "inode/directory", 1.0)
    details = describe(folder)
    assert details.icon == "folder"
    assert details.size == "Directory"
    assert details.type_name == "inode/directory"
    assert details.path == "/home/u/Music"


def test_describe_file():
    file = FileResult("/home/u/a.txt", "a.txt", False, "text/plain", 1.0)
    details = describe(file)
    assert details.icon == "text/plain"
    assert details.size == "File"
    assert details.description == ""
    assert details.name == "a.txt"


def test_describe_unsupported_type():
    with pytest.raises(TypeError):
        describe("not an item")