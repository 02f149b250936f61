"""Reading, writing and editing the boards held in the data file."""

import shutil
from pathlib import Path

from .config import default_backup_file, default_data_file
from .model import Board, Card, ChecklistItem
from .text import trim_spaces

_DESCRIPTION = "    "
_CHECKLIST = "   "
_CARD = "  "
_COLUMN = " "


class DataError(Exception):
    """The data file is missing, unreadable, malformed, or an edit is invalid."""

    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line


def _syntax_error(line_number, what):
    return DataError(f"[line {line_number}] reading {what}", line=line_number)


def parse_boards(lines):
    """Build boards from the lines of a data file.

    Indentation sets the level: none for a board, one space for a column,
    two for a card, three for a checklist item and four for a description line.
    """
    boards = []
    reading_board = reading_column = reading_card = False

    for line_number, line in enumerate(lines, start=1):
        line = line.removesuffix("\n")

        if line.startswith(_DESCRIPTION):
            if not reading_card or not boards[-1].columns[-1].cards:
                raise _syntax_error(line_number, "a description without a card")
            boards[-1].columns[-1].cards[-1].description += line[4:] + "\n"
        elif line.startswith(_CHECKLIST):
            if not reading_card or not boards[-1].columns[-1].cards:
                raise _syntax_error(line_number, "a checklist item without a card")
            entry = trim_spaces(line)
            item = ChecklistItem(content=entry[1:], done=entry.startswith("+"))
            boards[-1].columns[-1].cards[-1].add_checklist_item(item)
        elif line.startswith(_CARD):
            if not reading_column:
                raise _syntax_error(line_number, "a card without a column")
            boards[-1].columns[-1].add_card(Card(trim_spaces(line)))
            reading_card = True
        elif line.startswith(_COLUMN):
            if not reading_board:
                raise _syntax_error(line_number, "a column without a board")
            boards[-1].add_column(line)
            reading_column = True
        else:
            reading_board = True
            reading_column = reading_card = False
            boards.append(Board(trim_spaces(line)))

    for board in boards:
        for column in board.columns:
            for card in column.cards:
                if card.description:
                    card.description = card.description[:-1]

    return boards


def dump_boards(boards):
    """Render boards in the data file format."""
    out = []
    for board in boards:
        out.append(board.name + "\n")
        for column in board.columns:
            out.append(_COLUMN + column.title + "\n")
            for card in column.cards:
                out.append(_CARD + card.content + "\n")
                for item in card.checklist:
                    mark = "+" if item.done else "-"
                    out.append(_CHECKLIST + mark + item.content + "\n")
                if card.description:
                    description = card.description.replace("\n", "\n" + _DESCRIPTION)
                    out.append(_DESCRIPTION + description + "\n")
    return "".join(out)


def _open_text(path, mode):
    return open(path, mode, encoding="utf-8", errors="surrogateescape", newline="")


class DataManager:
    """All boards of the data file, kept in sync with the file on every edit."""

    def __init__(self, data_file=None, backup_file=None):
        self.data_file = Path(data_file) if data_file else default_data_file()
        self.backup_file = Path(backup_file) if backup_file else default_backup_file()

        try:
            with _open_text(self.data_file, "r") as handle:
                text = handle.read()
        except OSError as err:
            raise DataError(
                f'Couldn\'t read data from file "{self.data_file}"'
            ) from err

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()

        try:
            self.boards = parse_boards(lines)
        except DataError as err:
            raise DataError(
                f'incorrect syntax in data file "{self.data_file}": {err}',
                line=err.line,
            ) from err

    def add_board(self, name):
        """Add a board in memory only."""
        self.boards.append(Board(trim_spaces(name)))

    def create_board(self, name):
        """Add a board and append it to the data file."""
        name = trim_spaces(name)
        if not name:
            raise DataError("Can't create a board with empty name")
        try:
            with _open_text(self.data_file, "a") as handle:
                handle.write(name + "\n")
        except OSError as err:
            raise DataError(f'Couldn\'t open data file "{self.data_file}"') from err
        self.boards.append(Board(name))

    def rename_board(self, old_name, new_name):
        new_name = trim_spaces(new_name)
        if not new_name:
            raise DataError("Board name can't be empty")
        self.get_board(old_name).name = new_name
        self._save()

    def delete_board(self, name):
        """Remove every board with this name."""
        self.get_board(name)
        self.boards = [board for board in self.boards if board.name != name]
        self._save()

    def move_board_up(self, board_index):
        moved = False
        if board_index > 0:
            self._swap_boards(board_index, board_index - 1)
            moved = True
        self._save()
        return moved

    def move_board_down(self, board_index):
        moved = False
        if board_index < len(self.boards) - 1:
            self._swap_boards(board_index, board_index + 1)
            moved = True
        self._save()
        return moved

    def _swap_boards(self, first, second):
        self.boards[first], self.boards[second] = self.boards[second], self.boards[first]

    def get_board(self, name):
        """Return the first board with this name."""
        for board in self.boards:
            if board.name == name:
                return board
        raise DataError(f'No board named "{name}" was found')

    def board_names(self):
        return [board.name for board in self.boards]

    def create_column(self, board, title):
        board.add_column(title)
        self._save()

    def rename_column(self, board, column_index, new_title):
        board.rename_column(column_index, new_title)
        self._save()

    def delete_column(self, board, column_index):
        board.delete_column(column_index)
        self._save()

    def move_column_left(self, board, column_index):
        return self._save_if(board.move_column_left(column_index))

    def move_column_right(self, board, column_index):
        return self._save_if(board.move_column_right(column_index))

    def add_card(self, column, card):
        column.add_card(card)
        self._save()

    def update_card(self, column, card_index, card):
        column.update_card(card_index, card)
        self._save()

    def delete_card(self, column, card_index):
        column.delete_card(card_index)
        self._save()

    def move_card_up(self, column, card_index):
        return self._save_if(column.move_card_up(card_index))

    def move_card_down(self, column, card_index):
        return self._save_if(column.move_card_down(card_index))

    def move_card_to_prev_column(self, board, card_index, src_index, dist_index, config):
        return self._save_if(
            board.move_card_to_prev_column(card_index, src_index, dist_index, config)
        )

    def move_card_to_next_column(self, board, card_index, src_index, dist_index, config):
        return self._save_if(
            board.move_card_to_next_column(card_index, src_index, dist_index, config)
        )

    def add_checklist_item(self, card, item):
        card.add_checklist_item(item)
        self._save()

    def update_checklist_item(self, card, item_index, item):
        card.update_checklist_item(item_index, item)
        self._save()

    def delete_checklist_item(self, card, item_index):
        card.delete_checklist_item(item_index)
        self._save()

    def move_checklist_item_up(self, card, item_index):
        return self._save_if(card.move_checklist_item_up(item_index))

    def move_checklist_item_down(self, card, item_index):
        return self._save_if(card.move_checklist_item_down(item_index))

    def _save_if(self, changed):
        if changed:
            self._save()
        return changed

    def _save(self):
        """Back up the data file, then rewrite it from the boards in memory."""
        try:
            shutil.copyfile(self.data_file, self.backup_file)
            with _open_text(self.data_file, "w") as handle:
                handle.write(dump_boards(self.boards))
        except OSError as err:
            raise DataError(f'Couldn\'t open data file "{self.data_file}"') from err