# kabmat

A terminal program for managing kanban boards, driven by vim-like keybindings.

Boards hold columns, columns hold cards, and every card can carry a
description and a checklist. All boards live in one plain-text file,
`~/.local/share/kabmat/data`. Before each save the previous contents of that
file are copied to `~/.local/share/kabmat/data_bkp`.

## Installation

```
pip install .
```

The interface is built on the standard `curses` module, so it needs a
terminal with colour support; without one, `kabmat` prints
"Your terminal does not support color" and exits with status 1.

## Usage

```
kabmat [OPTION]...
```

Run without options, `kabmat` opens the main menu, which lists your boards.
The data file and its directory are created on first run if missing.

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | print the help message |
| `-v`, `--version` | print the program version |
| `-l`, `--list` | list all boards |
| `-c`, `--create <name>` | create a new board named `<name>` |
| `-o`, `--open <name>` | open the board named `<name>` |
| `-d`, `--delete <name>` | delete every board named `<name>` |
| `-t`, `--text` | do not start the terminal interface |
| `-b`, `--card-at-bottom` | when a card moves to another column, put it at the bottom instead of the top |

Options are applied in the order given. `-h`, `-v` and `-l` also keep the
interface from starting. For example, this creates a board without opening
the interface:

```
kabmat -c Work -t
```

An unknown option, an option missing its value, an empty board name or a
board that does not exist is reported on standard error as `ERROR: ...`, and
the exit status is 1.

## Keybindings

Press `?` in the main menu or on a board to see every keybinding. The most
common ones:

- Main menu: `j`/`k` move the highlight, `c` creates a board, `r`/`e`
  renames it, `d` deletes it, `<Enter>` opens it, `q` quits.
- Board: `h`/`l` focus another column, `j`/`k` focus another card,
  `H`/`L` move a card to the neighbouring column, `J`/`K` move it within its
  column, `C`/`E`/`D` create, rename and delete columns, `c`/`e`/`d` create,
  edit and delete cards. `q` returns to the main menu, or quits if the board
  was opened with `-o`.
- Card editor: `<Tab>` switches between content and description, `c` (in
  normal mode) opens the checklist, `<Enter>` saves, `<Esc>`/`q` cancels.
- Checklist: `c` adds an item, `e` edits it, `<Space>` toggles it, `d`
  deletes it, `J`/`K` move it.

Input fields have a normal and an insert mode, as in vim: `i`, `a`, `I`, `A`
and `S` enter insert mode, `<Esc>` leaves it.

## Data file format

Indentation sets the level of each line:

```
Board name
 Column title
  Card content
   +finished checklist item
   -open checklist item
    first description line
    second description line
```

## Using it as a library

The model (`kabmat.model`) and the storage layer (`kabmat.storage`) work
without the terminal interface. `DataManager` reads the data file when it is
created (by default the one above; pass `data_file` and `backup_file` to use
others) and rewrites it after every change. The file must already exist;
problems are raised as `kabmat.storage.DataError`.

```python
from pathlib import Path

from kabmat.model import Card
from kabmat.storage import DataManager

Path("boards.txt").touch()
manager = DataManager(data_file="boards.txt", backup_file="boards.bak")
manager.create_board("Work")
board = manager.get_board("Work")
manager.create_column(board, "Todo")
manager.add_card(board.columns[0], Card("Write report"))
print(manager.board_names())
```

`parse_boards` and `dump_boards` in `kabmat.storage` convert between lines
of the data file format and `Board` objects directly.

## Running the tests

```
pip install .[test]
pytest
```