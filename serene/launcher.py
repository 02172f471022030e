"""Opening search results and choosing the icon shown for each row."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Union

from serene.results import Application, FileResult

DEFAULT_APP_ICON = "applications-system"
DIRECTORY_ICON = "folder"
GENERIC_FILE_ICON = "text-x-generic"

Item = Union[Application, FileResult]


def _spawn(command, shell: bool) -> subprocess.Popen:
    return subprocess.Popen(
        command,
        shell=shell,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def launch_application(exec_command: str) -> subprocess.Popen:
    """Run an application's command line in the background through the shell."""
    return _spawn(exec_command, shell=True)


def open_file(path: str) -> subprocess.Popen:
    """Open a file or directory with the desktop's default handler."""
    return _spawn(["xdg-open", str(path)], shell=False)


def activate(item: Optional[Item]) -> Optional[subprocess.Popen]:
    """Launch an application or open a file; nothing happens for no selection."""
    if isinstance(item, Application):
        return launch_application(item.exec)
    if isinstance(item, FileResult):
        return open_file(item.path)
    return None


def _mime_type_icon(mime_type: str) -> str:
    if not mime_type:
        return GENERIC_FILE_ICON
    return mime_type.replace("/", "-")


def row_icon(item: Item) -> str:
    """The icon for a row: a themed icon name or the path of an image file."""
    if isinstance(item, Application):
        if not item.icon:
            return DEFAULT_APP_ICON
        if item.icon.startswith("/"):
            return item.icon if Path(item.icon).is_file() else DEFAULT_APP_ICON
        return item.icon
    if isinstance(item, FileResult):
        if item.is_directory:
            return DIRECTORY_ICON
        if item.mime_type.startswith("image/") and Path(item.path).is_file():
            return item.path
        return _mime_type_icon(item.mime_type)
    raise TypeError(f"no icon for {type(item).__name__}")