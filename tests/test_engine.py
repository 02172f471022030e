import pytest

from serene.app_searcher import AppSearcher
from serene.engine import Engine
from serene.file_searcher import FileSearcher
from serene.results import ResultType


@pytest.fixture
def engine(tmp_path):
    apps = tmp_path / "apps"
    apps.mkdir()
    (apps / "repos.desktop").write_text(
        "[Desktop Entry]\nName=Repos Tool\nExec=repos-tool\nIcon=git\n"
    )
    (apps / "other.desktop").write_text("[Desktop Entry]\nName=Other\nExec=other\n")
    home = tmp_path / "home"
    home.mkdir()
    (home / "Documents").mkdir()
    (home / "Documents" / "repos").mkdir()
    (home / "repos.txt").write_text("x")
    return Engine(
        AppSearcher([apps]),
        FileSearcher(home, mime_resolver=lambda path: "text/plain"),
    )


def test_search_repos_applications_first(engine):
    results = engine.search("repos")
    kinds = [result.kind for result in results]
    assert kinds[0] is ResultType.APPLICATION
    assert kinds[1:] == [ResultType.FILE] * (len(kinds) - 1)
    assert results[0].name == "Repos Tool"
    assert results[0].mime_type == "application/x-desktop"
    assert results[0].match_score == 1.0


def test_search_repos_finds_files(engine):
    names = sorted(r.name for r in engine.search("repos") if r.kind is ResultType.FILE)
    assert names == ["repos", "repos.txt"]


def test_file_results_carry_mime_as_icon(engine):
    files = [r for r in engine.search("repos") if r.kind is ResultType.FILE]
    for result in files:
        assert result.icon == result.mime_type
        assert not result.terminal


def test_max_results_limits_files(engine):
    results = engine.search("repos", max_results=1)
    files = [r for r in results if r.kind is ResultType.FILE]
    assert len(files) == 1


def test_empty_query_finds_no_files(engine):
    results = engine.search("")
    assert all(r.kind is ResultType.APPLICATION for r in results)
    assert len(results) == 2