"""Command-line front end: search applications and files, optionally open the top hit."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from serene.app_searcher import AppSearcher, default_application_dirs
from serene.engine import Engine
from serene.file_searcher import FileSearcher
from serene.launcher import activate
from serene.results import Result, build_items

MAX_RESULTS = 5


def run_query(engine, query: str, limit: int = MAX_RESULTS) -> List[Result]:
    """At most `limit` results for a query; an empty query yields nothing."""
    if not query:
        return []
    return list(engine.search(query, limit))[:limit]


def _format(result: Result) -> str:
    return f"{result.kind.value}\t{result.name}\t{result.path}"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serene", description="Search installed applications and files."
    )
    parser.add_argument("query", nargs="*", help="text to search for")
    parser.add_argument(
        "-n", "--limit", type=int, default=MAX_RESULTS, help="maximum results"
    )
    parser.add_argument("--home", help="home directory to search for files")
    parser.add_argument(
        "--app-dir",
        action="append",
        dest="app_dirs",
        help="directory holding .desktop files (repeatable)",
    )
    parser.add_argument(
        "--launch", action="store_true", help="open the first result"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    if args.limit < 1:
        print("serene: --limit must be at least 1", file=sys.stderr)
        return 2
    query = " ".join(args.query)

    app_dirs = args.app_dirs
    if app_dirs is None:
        app_dirs = default_application_dirs(args.home)
    engine = Engine(AppSearcher(app_dirs), FileSearcher(args.home))

    results = run_query(engine, query, args.limit)
    if not results:
        return 1
    for result in results:
        print(_format(result))
    if args.launch:
        activate(build_items(results[:1])[0])
    return 0


if __name__ == "__main__":
    sys.exit(main())