"""Discovery and lookup of installed applications from .desktop files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from serene.results import Application

logger = logging.getLogger(__name__)

DESKTOP_ENTRY = "[Desktop Entry]"

_FIELDS = (
    ("name", re.compile(r"Name=(.*)")),
    ("exec", re.compile(r"Exec\s*=\s*(.*)")),
    ("icon", re.compile(r"Icon=(.*)")),
    ("comment", re.compile(r"Comment=(.*)")),
    ("terminal", re.compile(r"Terminal=(.*)")),
)

PathLike = Union[str, Path]


def parse_desktop_file(path: PathLike) -> Application:
    """Read the [Desktop Entry] section of a .desktop file.

    Raises OSError if the file cannot be read.
    """
    path = Path(path)
    fields = {}
    in_entry = False
    with path.open(encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            if line.startswith("["):
                if line != DESKTOP_ENTRY:
                    break
                in_entry = True
                continue
            if not in_entry:
                continue
            for field, pattern in _FIELDS:
                match = pattern.fullmatch(line)
                if match:
                    fields[field] = match.group(1)
                    break

    terminal = fields.pop("terminal", None) == "true"
    name = fields.pop("name", "") or path.stem
    return Application(name=name, terminal=terminal, desktop_file=str(path), **fields)


def default_application_dirs(home: Optional[PathLike] = None) -> List[Path]:
    """The directories searched for .desktop files."""
    home_path = Path(home) if home is not None else Path.home()
    return [
        Path("/usr/share/applications"),
        home_path / ".local" / "share" / "applications",
        Path("/usr/local/share/applications"),
    ]


class AppSearcher:
    """Holds the installed applications and finds them by name or command."""

    def __init__(self, directories: Optional[Iterable[PathLike]] = None):
        if directories is None:
            directories = default_application_dirs()
        self.directories = [Path(d) for d in directories]
        self.applications: List[Application] = []
        self.load_applications()

    def load_applications(self) -> List[Application]:
        """Scan the directories and keep every application that has a command."""
        found: List[Application] = []
        for directory in self.directories:
            if not directory.is_dir():
                continue
            for entry in sorted(directory.iterdir()):
                if entry.suffix != ".desktop":
                    continue
                try:
                    app = parse_desktop_file(entry)
                except OSError as exc:
                    logger.error("Failed to open desktop file: %s (%s)", entry, exc)
                    continue
                if app.exec:
                    found.append(app)
        found.sort(key=lambda app: app.name)
        self.applications = found
        return found

    def search(self, query: str) -> List[Application]:
        """Applications whose name or command contains the query, ignoring case."""
        needle = query.lower()
        seen = set()
        matches: List[Application] = []
        for app in self.applications:
            if needle in app.name.lower() or needle in app.exec.lower():
                key = (app.name, app.exec)
                if key not in seen:
                    seen.add(key)
                    matches.append(app)
        return matches