# serene

A quick launcher for Linux desktops. Give it a few letters and serene finds
matching desktop applications (from `.desktop` entries) and files in your
home directory. It can then launch the application or open the file.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the command

```
serene firefox
```

This prints up to five matches, one per line, as tab-separated fields:
the kind (`application` or `file`), the name, and the path (the `.desktop`
file for an application). Applications come first, then files ranked by how
well their names match the query. All words given on the command line are
joined with spaces into one query.

Options:

- `-n N`, `--limit N`: print at most `N` results (default 5, must be at
  least 1).
- `--home DIR`: search for files under `DIR` instead of `$HOME`; it also
  sets where `~/.local/share/applications` is looked for.
- `--app-dir DIR`: read `.desktop` files from `DIR`; may be given more than
  once, and replaces the default directories.
- `--launch`: after printing, launch the first result (or open it, if it is
  a file).

The command exits with 0 when something was found, 1 when nothing was, and
2 when `--limit` is below 1.

By default applications are read from `/usr/share/applications`,
`~/.local/share/applications` and `/usr/local/share/applications`. Only
entries with an `Exec=` line are kept. Files are looked up first in the usual
user folders (Desktop, Documents, Music, Public, Videos, Downloads, Pictures,
Templates), which get a score boost, and then in the rest of the home
directory, two levels deep. Hidden, temporary and hash-named files are
skipped. File types are looked up with `xdg-mime`; files are opened with
`xdg-open`; application commands are run through the shell in the
background.

## Using it as a library

```python
from serene.engine import Engine

engine = Engine()
for result in engine.search("notes", 5):
    print(result.kind, result.name, result.path)
```

The building blocks:

- `serene.app_searcher.AppSearcher`: reads `.desktop` entries from a list of
  directories and matches them case-insensitively by name or command.
  `parse_desktop_file` reads a single entry; `default_application_dirs`
  gives the default directories.
- `serene.file_searcher.FileSearcher`: walks the home directory and scores
  file names against a query (`search`), or re-scores earlier results
  against a new query (`refine_search`). A custom MIME resolver can be passed
  in place of `xdg-mime`. The scoring helpers `match_score`,
  `file_type_score`, `should_skip_file` and `is_hidden_path` are public.
- `serene.hybrid_file_searcher.HybridFileSearcher`: indexes the usual user
  folders with `initialize`, answers queries from that index (falling back
  to a live `FileSearcher` search), and keeps the last 100 searches, newest
  first, in `recent_searches`.
- `serene.engine.Engine`: runs a query against an `AppSearcher` and a
  `FileSearcher` and returns `Result` records, applications first.
- `serene.results`: the `Application`, `FileResult` and `Result` records,
  `ResultType`, and `build_items`, which turns results back into
  applications and files.
- `serene.details.describe`: the icon, name, description, path, size label
  and type shown for a selected item; `format_file_size` renders byte
  counts.
- `serene.launcher`: `activate` launches an application or opens a file;
  `row_icon` picks the icon name (or image path) for a result row.

## What it does not do

serene has no graphical search window: there is no window, list view or
details pane on screen. The command line is the only front end, and the
`details` and `launcher.row_icon` helpers only produce the text a display
would show. The command does not use the `HybridFileSearcher` index or
cache; each run searches live.