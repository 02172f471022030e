"""Combined search over installed applications and files."""

from __future__ import annotations

from typing import List, Optional

from serene.app_searcher import AppSearcher
from serene.file_searcher import FileSearcher
from serene.results import Result


class Engine:
    """Runs a query against applications and files, applications first."""

    def __init__(
        self,
        app_searcher: Optional[AppSearcher] = None,
        file_searcher: Optional[FileSearcher] = None,
    ):
        self.app_searcher = app_searcher if app_searcher is not None else AppSearcher()
        self.file_searcher = (
            file_searcher if file_searcher is not None else FileSearcher()
        )

    def search(self, query: str, max_results: int = 20) -> List[Result]:
        apps = self.app_searcher.search(query)
        files = self.file_searcher.search(query, max_results)
        return [Result.from_application(app) for app in apps] + [
            Result.from_file(file) for file in files
        ]