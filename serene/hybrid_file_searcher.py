"""File search that serves indexed user folders and caches recent queries."""

from __future__ import annotations

import logging
import os
import time
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from serene.file_searcher import (
    COMMON_DIRS,
    DIRECTORY_MIME,
    FileSearcher,
    should_skip_file,
)
from serene.results import FileResult

logger = logging.getLogger(__name__)

MAX_CACHE_SIZE = 100

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CachedSearch:
    """The results of one earlier query and when they were found."""

    query: str
    results: List[FileResult] = field(default_factory=list)
    timestamp: float = 0.0


def _walk(root: str) -> Iterator[os.DirEntry]:
    with os.scandir(root) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)
    for entry in entries:
        yield entry
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)


class HybridFileSearcher:
    """Looks names up in an index of the user folders, falling back to a live search."""

    def __init__(
        self,
        home: Optional[PathLike] = None,
        file_searcher: Optional[FileSearcher] = None,
    ):
        if home is None:
            home = os.environ.get("HOME")
        self.home = None if home is None else str(home)
        self.file_searcher = file_searcher or FileSearcher(self.home)
        self.index: Dict[str, List[FileResult]] = {}
        self._cache: deque = deque(maxlen=MAX_CACHE_SIZE)
        self.frequent_dirs: List[str] = []
        if self.home is not None:
            for name in COMMON_DIRS:
                full = f"{self.home}/{name}"
                if os.path.exists(full):
                    self.frequent_dirs.append(full)

    def initialize(self) -> None:
        """Index every user folder that still exists."""
        logger.info("Initializing hybrid file searcher...")
        for directory in self.frequent_dirs:
            if os.path.exists(directory):
                self.index_directory(directory)

    def index_directory(self, path: PathLike) -> None:
        """Add every visible file and directory below a path to the index."""
        logger.info("Indexing directory: %s", path)
        try:
            for entry in _walk(str(path)):
                is_file = entry.is_file()
                is_directory = entry.is_dir()
                if not (is_file or is_directory):
                    continue
                name = entry.name
                if should_skip_file(name):
                    continue
                mime = (
                    self.file_searcher.get_mime_type(entry.path)
                    if is_file
                    else DIRECTORY_MIME
                )
                result = FileResult(entry.path, name, is_directory, mime)
                self.index.setdefault(name, []).append(result)
                logger.debug("Indexed: %s (%s)", name, "dir" if is_directory else "file")
        except OSError as exc:
            logger.error("Error indexing directory %s: %s", path, exc)

    def is_frequent_directory(self, path: PathLike) -> bool:
        """True if the path lies under one of the user folders."""
        text = str(path)
        return any(text.startswith(directory) for directory in self.frequent_dirs)

    def search(self, query: str) -> List[FileResult]:
        """Cached results, else index hits, else a live search; the outcome is cached."""
        for cached in self._cache:
            if cached.query == query:
                return list(cached.results)

        results: List[FileResult] = []
        for name, entries in self.index.items():
            if query in name:
                results.extend(entries)

        if not results:
            results = self.file_searcher.search(query)

        self._cache.appendleft(CachedSearch(query, list(results), time.time()))
        return results

    def recent_searches(self) -> List[CachedSearch]:
        """Cached searches, newest first."""
        return list(self._cache)