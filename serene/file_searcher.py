"""Ranked file-name search over a user's home directory."""

from __future__ import annotations

import logging
import os
import string
import subprocess
from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Union

from serene.results import FileResult

logger = logging.getLogger(__name__)

COMMON_DIRS = (
    "Desktop",
    "Documents",
    "Music",
    "Public",
    "Videos",
    "Downloads",
    "Pictures",
    "Templates",
)

SKIP_MARKERS = (
    ".tmp",
    ".temp",
    ".swp",
    ".git",
    ".cache",
    ".config",
    ".local",
    ".unlinked2",
    ".resolved",
    ".linked",
)

COMMON_TYPES = frozenset(
    "pdf doc docx txt jpg jpeg png mp3 mp4 mov zip rar xls xlsx ppt pptx svg gif".split()
)
PROGRAMMING_TYPES = frozenset("cpp h hpp java py js ts php rb go rs swift".split())
FEATURED_NAMES = frozenset(
    {"documents", "downloads", "pictures", "music", "videos", "desktop"}
)

FALLBACK_MIME = "application/octet-stream"
DIRECTORY_MIME = "inode/directory"
COMMON_DIR_BOOST = 1.5

_HEX_DIGITS = frozenset(string.hexdigits)

PathLike = Union[str, Path]


def should_skip_file(filename: str) -> bool:
    """True for hidden, temporary or hash-named entries."""
    if filename.startswith("."):
        return True
    if any(marker in filename for marker in SKIP_MARKERS):
        return True
    return len(filename) >= 32 and all(c in _HEX_DIGITS for c in filename)


def is_hidden_path(path: PathLike) -> bool:
    """True if any component of the path starts with a dot."""
    return any(part.startswith(".") for part in Path(path).parts)


def file_type_score(filename: str) -> float:
    """Weight of a file name by its extension."""
    lower = filename.lower()
    if "." not in lower:
        return 1.1
    extension = lower.rsplit(".", 1)[1]
    if extension in COMMON_TYPES:
        return 1.2
    if extension in PROGRAMMING_TYPES:
        return 0.8
    return 1.0


def match_score(filename: str, query: str) -> Optional[float]:
    """Score of a file name against a query, or None if it does not match."""
    if not query:
        return None
    lower_name = filename.lower()
    lower_query = query.lower()
    position = lower_name.find(lower_query)
    if position < 0:
        return None
    if position == 0:
        score = 1.0
    else:
        score = 0.5 + 0.5 * len(lower_query) / len(lower_name)
    score *= file_type_score(filename)
    if lower_name in FEATURED_NAMES:
        score *= 1.3
    return score


def query_mime_type(path: PathLike) -> str:
    """Ask xdg-mime for the MIME type of a file."""
    try:
        completed = subprocess.run(
            ["xdg-mime", "query", "filetype", str(path)],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return FALLBACK_MIME
    output = completed.stdout or ""
    if output.endswith("\n"):
        output = output[:-1]
    return output or FALLBACK_MIME


def _list_dir(path: Path) -> List[Path]:
    return sorted(path.iterdir())


class _Collection:
    """Results gathered during one search, unique by path, up to a limit."""

    def __init__(self, limit: int):
        self.limit = limit
        self.results: List[FileResult] = []
        self._paths: Set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.results) >= self.limit

    def __contains__(self, path: str) -> bool:
        return path in self._paths

    def add(self, result: FileResult) -> None:
        self._paths.add(result.path)
        self.results.append(result)


def _by_score(results: Iterable[FileResult]) -> List[FileResult]:
    return sorted(results, key=lambda result: result.match_score, reverse=True)


class FileSearcher:
    """Searches the common user folders first, then the rest of the home directory."""

    def __init__(
        self,
        home: Optional[PathLike] = None,
        mime_resolver: Optional[Callable[[str], str]] = None,
    ):
        if home is None:
            home = os.environ.get("HOME")
        self.home = None if home is None else str(home)
        self._resolve_mime = mime_resolver or query_mime_type
        self._mime_cache: dict = {}

    def search(self, query: str, max_results: int = 20) -> List[FileResult]:
        """Files and directories whose name contains the query, best first."""
        if not query or self.home is None:
            return []
        found = _Collection(max_results)
        searched = self._search_common_directories(query, found)
        if not found.full:
            self._search_remaining_directories(query, found, searched)
        return _by_score(found.results)

    def refine_search(
        self,
        current_results: Iterable[FileResult],
        query: str,
        max_results: int = 20,
    ) -> List[FileResult]:
        """Re-score earlier results against a new query, keeping those that match."""
        current = list(current_results)
        if not query:
            return current
        refined: List[FileResult] = []
        for result in current:
            if len(refined) >= max_results:
                break
            score = match_score(result.name, query)
            if score is not None:
                refined.append(replace(result, match_score=score))
        return _by_score(refined)

    def get_mime_type(self, path: PathLike) -> str:
        return self._resolve_mime(str(path))

    def _cached_mime_type(self, path: str) -> str:
        try:
            return self._mime_cache[path]
        except KeyError:
            mime = self.get_mime_type(path)
            self._mime_cache[path] = mime
            return mime

    def _add_result(
        self, path: Path, query: str, found: _Collection, multiplier: float = 1.0
    ) -> None:
        name = path.name
        score = match_score(name, query)
        if score is None:
            return
        key = str(path)
        if key in found:
            return
        is_directory = path.is_dir()
        mime = DIRECTORY_MIME if is_directory else self._cached_mime_type(key)
        found.add(FileResult(key, name, is_directory, mime, score * multiplier))

    def _search_directory(self, path: Path, query: str, found: _Collection) -> None:
        try:
            if not should_skip_file(path.name):
                self._add_result(path, query, found)
            if not path.is_dir():
                return

            entries = _list_dir(path)
            for entry in entries:
                if found.full:
                    break
                if not is_hidden_path(entry) and not should_skip_file(entry.name):
                    self._add_result(entry, query, found)

            for entry in entries:
                if found.full:
                    break
                if entry.is_dir() and not is_hidden_path(entry):
                    for sub in _list_dir(entry):
                        if found.full:
                            break
                        if not is_hidden_path(sub) and not should_skip_file(sub.name):
                            self._add_result(sub, query, found)
        except OSError as exc:
            logger.warning("Error searching directory %s: %s", path, exc)

    def _search_common_directories(self, query: str, found: _Collection) -> Set[str]:
        searched: Set[str] = set()
        for name in COMMON_DIRS:
            full = Path(self.home) / name
            if not full.exists():
                continue
            searched.add(str(full))
            self._add_result(full, query, found, COMMON_DIR_BOOST)
            if not found.full:
                self._search_directory(full, query, found)
        return searched

    def _search_remaining_directories(
        self, query: str, found: _Collection, searched: Set[str]
    ) -> None:
        for entry in _list_dir(Path(self.home)):
            if found.full:
                break
            if str(entry) not in searched:
                self._search_directory(entry, query, found)