"""Search result records shared by the searchers and the result list."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Union

APPLICATION_MIME = "application/x-desktop"


@dataclass(frozen=True)
class Application:
    """An installed application described by a .desktop file."""

    name: str = ""
    exec: str = ""
    icon: str = ""
    comment: str = ""
    desktop_file: str = ""
    terminal: bool = False


@dataclass(frozen=True)
class FileResult:
    """A file or directory that matched a query."""

    path: str
    name: str
    is_directory: bool = False
    mime_type: str = ""
    match_score: float = 0.0


class ResultType(enum.Enum):
    APPLICATION = "application"
    FILE = "file"


@dataclass(frozen=True)
class Result:
    """A single entry of a combined search, either an application or a file."""

    kind: ResultType
    name: str = ""
    path: str = ""
    icon: str = ""
    exec: str = ""
    comment: str = ""
    desktop_file: str = ""
    terminal: bool = False
    is_directory: bool = False
    mime_type: str = ""
    match_score: float = 0.0

    @classmethod
    def from_application(cls, app: Application) -> "Result":
        return cls(
            kind=ResultType.APPLICATION,
            name=app.name,
            path=app.desktop_file,
            icon=app.icon,
            exec=app.exec,
            comment=app.comment,
            desktop_file=app.desktop_file,
            terminal=app.terminal,
            is_directory=False,
            mime_type=APPLICATION_MIME,
            match_score=1.0,
        )

    @classmethod
    def from_file(cls, file: FileResult) -> "Result":
        return cls(
            kind=ResultType.FILE,
            name=file.name,
            path=file.path,
            icon=file.mime_type,
            terminal=False,
            is_directory=file.is_directory,
            mime_type=file.mime_type,
            match_score=file.match_score,
        )

    def to_application(self) -> Application:
        return Application(
            name=self.name,
            exec=self.exec,
            icon=self.icon,
            comment=self.comment,
            desktop_file=self.desktop_file,
            terminal=self.terminal,
        )

    def to_file_result(self) -> FileResult:
        return FileResult(
            path=self.path,
            name=self.name,
            is_directory=self.is_directory,
            mime_type=self.mime_type,
            match_score=self.match_score,
        )


def build_items(results: Iterable[Result]) -> List[Union[Application, FileResult]]:
    """Turn combined results into the application and file items shown in a list."""
    items: List[Union[Application, FileResult]] = []
    for result in results:
        if result.kind is ResultType.APPLICATION:
            items.append(result.to_application())
        elif result.kind is ResultType.FILE:
            items.append(result.to_file_result())
    return items