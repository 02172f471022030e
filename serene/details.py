"""Text shown in the details pane for a selected result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from serene.results import Application, FileResult

_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_file_size(size: int) -> str:
    """A byte count in the largest unit up to TB, with one decimal."""
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(_UNITS) - 1:
        value /= 1024.0
        unit += 1
    return f"{value:.1f} {_UNITS[unit]}"


@dataclass(frozen=True)
class ItemDetails:
    """The fields of the details pane."""

    icon: str
    name: str
    description: str
    path: str
    size: str
    type_name: str


def describe(item: Optional[Union[Application, FileResult]]) -> Optional[ItemDetails]:
    """Details for an application or file; None when nothing is selected."""
    if item is None:
        return None
    if isinstance(item, Application):
        return ItemDetails(
            icon=item.icon,
            name=item.name,
            description=item.comment,
            path=item.desktop_file,
            size="",
            type_name="Application",
        )
    if isinstance(item, FileResult):
        return ItemDetails(
            icon="folder" if item.is_directory else item.mime_type,
            name=item.name,
            description="",
            path=item.path,
            size="Directory" if item.is_directory else "File",
            type_name=item.mime_type,
        )
    raise TypeError(f"cannot describe {type(item).__name__}")