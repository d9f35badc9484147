# calcifer

The model behind a small, keyboard-driven code editor. It is plain Python
with no third-party dependencies. Each module works on its own, so you can
drive the modules from your own user interface or use them in scripts.

## What is inside

- **`calcifer.syntax`**: `Syntax` rules for Rust, Python, JavaScript, Lua,
  shell, SQL and Pendragon. The rules hold keywords, types, special words and
  comment markers, and `is_keyword`, `is_type` and `is_special` look words up
  in them. Rules that are not case-sensitive (SQL, or those made with
  `Syntax.simple`) upper-case the word before the lookup. `TokenType.from_char`
  classifies a single character, and `describe()` gives a readable name such
  as `"Numeric Float"`.
- **`calcifer.paths`**: `format_path` shows the last three components of a
  path as a prompt (`a/b/c>`). `to_syntax` picks the `Syntax` for a file
  extension and falls back to shell rules. `floor_index` rounds a position
  down to an index.
- **`calcifer.tabs`**: `Tab` is an open document. `Tab.from_path` loads a file
  and turns every four spaces into a tab. A file that cannot be read becomes
  an `untitled` tab whose text is the error message. `refresh()` reloads the
  tab from disk.
- **`calcifer.search`**: `SearchWindow` finds text in the current tab or
  across all tabs. `find_result` steps through the matches and scrolls the tab
  to the match it reaches. `replace` substitutes the text in every tab that
  has a match.
- **`calcifer.project`**: `Project` is a board of `Category` columns that hold
  `Item` cards, stored as JSON with `save_to_code` and `update_from_code`. The
  last column is always the `+` placeholder. `navigate` moves the selection,
  or with `move_item=True` the selected item, in a `Direction`.
- **`calcifer.file_tree`**: `generate_folder_entry` reads one level of a
  directory into `FileEntry` objects. Directories come first and hidden
  entries are skipped. `update_file_tree` reads the directories whose
  `get_file_path_id` is in the set of opened ones.
- **`calcifer.terminal`**: `send_command` runs a command through `sh` in the
  background, and `CommandEntry.update()` collects its output as `Line`
  objects. A `cd` command changes the working directory of the process
  instead. `error_text()` returns all stderr lines.
- **`calcifer.state`**: `AppState` records the open tabs, the theme index and
  the zoom. `save_state` and `load_state` write and read it as JSON, and
  `save_path` gives the default location under `~/.config/calcifer/`.

## Examples

Look words up in a syntax:

```python
from calcifer.syntax import Syntax

sql = Syntax.sql()
sql.is_keyword("select")   # True
sql.is_type("varchar")     # True

ini = Syntax.simple(";").with_keywords({"INCLUDE"})
ini.is_keyword("include")  # True: simple rules are not case-sensitive
```

Search in open tabs:

```python
from calcifer.tabs import Tab
from calcifer.search import SearchWindow

tabs = [Tab(code="let a = 1;\nlet b = 2;")]
search = SearchWindow(search_text="let")
selected = search.search(tabs, 0)
search.status()            # (" 1/2 ", False)
```

Work with a project board:

```python
from calcifer.project import Direction, Project

board = Project()
board.add_category()
board.add_item(0)
board.add_item(0)
board.navigate(Direction.DOWN)
text = board.save_to_code()

other = Project()
other.update_from_code(text)
```

Run a shell command and collect its output:

```python
from calcifer.terminal import send_command

entry = send_command("echo hello")
while not entry.finished:
    entry.update()
for line in entry.result:
    print(line.text, "(stderr)" if line.is_error else "")
```

Persist session state:

```python
from pathlib import Path
from calcifer.state import AppState, save_state, load_state

save_state(AppState(tabs=[Path("notes.txt")], theme=0, zoom=1.0), Path("save.json"))
restored = load_state(Path("save.json"))
```

## What it does not do

calcifer has no window, no editing widget and no command to start an editor.
It does not colour text: `Syntax` only holds the word lists and comment
markers, and `TokenType` only classifies single characters. There is no lexer
that splits a whole text into tokens, and there are no colour themes.
`AppState.theme` is a plain index that calcifer stores without giving it a
meaning. Saving a tab, asking for confirmation before closing, and the
editing commands (indent, unindent, comment toggling) are left to the program
that uses these modules.

## Requirements

Python 3.10 or newer. `calcifer.terminal` starts commands through `sh` and
uses non-blocking pipes, so it is meant for POSIX systems.