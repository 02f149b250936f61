"""Screen showing one board: its columns side by side and their cards."""

import curses

from .cardinfo import CardInfo
from .columnwin import ColumnWin
from .input import Input
from .model import Card
from .scrollable import ScrollableWindow
from .text import center_text, shorten_label
from .widgets import ConfirmDialog, Footer, Header, Help, key_code, write

_COLUMNS_IN_VIEW = 3
_COLUMN_GAP = 2
_CREATE_HINT = "C to create a new column"


def _ctrl(letter):
    return chr(ord(letter) & 0x1F)


class BoardScreen:
    """Full-screen view of a board with keys to edit columns and cards."""

    def __init__(
        self, board_name, data_manager, config, from_tui, screen, new_window=None
    ):
        self.screen = screen
        self._new_window = new_window or curses.newwin
        max_y, max_x = screen.getmaxyx()
        self.height = max_y - 4
        self.width = max_x - 2
        self.start_y = 2
        self.start_x = 1

        self.window = self._new_window(
            self.height, self.width, self.start_y, self.start_x
        )
        self.window.keypad(True)
        self.screen.refresh()

        self.data_manager = data_manager
        self.config = config
        self.board = data_manager.get_board(board_name)
        self.from_tui = from_tui

        self.columns = []
        self.columns_view = ScrollableWindow(
            lambda: self.columns,
            self._draw_columns,
            _COLUMNS_IN_VIEW,
            window=self._new_window(
                self.height, self.width, self.start_y, self.start_x
            ),
        )
        self._setup_columns()
        self.focused_index = 0

        self._actions = {
            "q": self._quit,
            "?": self._show_help,
            "h": self._focus_left,
            "l": self._focus_right,
            "k": lambda: self._on_focused_column(ColumnWin.focus_prev),
            "j": lambda: self._on_focused_column(ColumnWin.focus_next),
            "g": lambda: self._on_focused_column(ColumnWin.focus_first),
            "G": lambda: self._on_focused_column(ColumnWin.focus_last),
            "H": lambda: self._move_card_sideways(-1),
            "L": lambda: self._move_card_sideways(1),
            "K": lambda: self._on_focused_column(
                lambda column: column.move_focused_card_up(self.data_manager)
            ),
            "J": lambda: self._on_focused_column(
                lambda column: column.move_focused_card_down(self.data_manager)
            ),
            _ctrl("p"): self._move_column_left,
            _ctrl("h"): self._move_column_left,
            _ctrl("n"): self._move_column_right,
            _ctrl("l"): self._move_column_right,
            "C": self._create_column,
            "E": self._rename_column,
            "D": self._delete_column,
            "c": self._create_card,
            "e": self._edit_card,
            "d": self._delete_card,
        }

    @property
    def columns_count(self):
        return len(self.columns)

    def _setup_columns(self):
        # two columns of gap between each pair of shown columns
        column_width = (self.width - 4) // _COLUMNS_IN_VIEW
        self.columns = [
            ColumnWin(
                self.height,
                column_width,
                self.start_y,
                column,
                new_window=self._new_window,
            )
            for column in self.board.columns
        ]

    # loop

    def show(self):
        """Draw the board and handle keys until the screen is closed."""
        Header(self.screen, self.board.name).show()
        Footer(self.screen, True, True).show()
        self.columns_view.scroll_to_top()
        while (key := self.window.getch()) != 0:
            if self.handle_key_press(key):
                break

    def handle_key_press(self, key):
        """Handle one key; return True when the screen should close.

        Quitting a board opened straight from the command line ends the program.
        """
        code = key_code(key)
        char = chr(code) if 0 <= code < 256 else ""
        action = self._actions.get(char)
        if action is None:
            return False
        return bool(action())

    # drawing

    def _draw_columns(self, shown_columns, view_window):
        self.window.refresh()
        if shown_columns:
            view_window.refresh()
            for position, column in enumerate(shown_columns):
                column.show(position * (column.width + _COLUMN_GAP) + self.start_x)
            self._focus_current()
        else:
            x, hint = center_text(_CREATE_HINT, self.width)
            write(view_window, 0, x, hint)
            view_window.refresh()

    def _focus_current(self):
        shown = self.columns_view.current_window()
        for column in shown:
            column.unfocus()
        if 0 <= self.focused_index < len(shown):
            shown[self.focused_index].focus()

    def _focused_column_index(self):
        return self.columns_view.offset + self.focused_index

    # actions

    def _quit(self):
        if self.from_tui:
            return True
        raise SystemExit(0)

    def _screen_size(self):
        return self.screen.getmaxyx()

    def _show_help(self):
        max_y, max_x = self._screen_size()
        height = int(max_y * 0.5)
        width = int(max_x * 0.6)
        start_y = max_y // 2 - height // 2
        start_x = max_x // 2 - width // 2
        Help(
            self.screen,
            window=self._new_window(height, width, start_y, start_x),
            text_window=self._new_window(
                height - 2, width - 2, start_y + 1, start_x + 1
            ),
        ).show()
        self._focus_current()

    def _step_focus_left(self):
        self.focused_index -= 1
        if self.focused_index == -1:
            self.focused_index = 0
            self.columns_view.scroll_up()
            return True
        return False

    def _step_focus_right(self):
        self.focused_index = min(self.columns_count - 1, self.focused_index + 1)
        limit = self.columns_view.max_items_in_win
        if self.focused_index == limit:
            self.focused_index = limit - 1
            self.columns_view.scroll_down()
            return True
        return False

    def _focus_left(self):
        if self.columns and not self._step_focus_left():
            self._focus_current()

    def _focus_right(self):
        if self.columns and not self._step_focus_right():
            self._focus_current()

    def _on_focused_column(self, act):
        if not self.columns:
            return
        shown = self.columns_view.current_window()
        if 0 <= self.focused_index < len(shown):
            act(shown[self.focused_index])

    def _move_card_sideways(self, step):
        if not self.columns:
            return
        src_index = self._focused_column_index()
        source = self.columns[src_index]
        if source.cards_count == 0:
            return
        dist_index = src_index + step
        card_index = source.absolute_focused_index()
        move = (
            self.data_manager.move_card_to_prev_column
            if step < 0
            else self.data_manager.move_card_to_next_column
        )
        if not move(self.board, card_index, src_index, dist_index, self.config):
            return

        source.update_cards()
        source.show(source.start_x)
        if card_index == source.cards_count:
            source.focus_last()

        target = self.columns[dist_index]
        target.update_cards()
        target.show(target.start_x)
        self._focus_current()

    def _move_column_left(self):
        if not self.columns:
            return
        if self.data_manager.move_column_left(self.board, self._focused_column_index()):
            self._setup_columns()
            if not self._step_focus_left():
                self.columns_view.draw()

    def _move_column_right(self):
        if not self.columns:
            return
        if self.data_manager.move_column_right(
            self.board, self._focused_column_index()
        ):
            self._setup_columns()
            if not self._step_focus_right():
                self.columns_view.draw()

    def _create_column(self):
        title = self._ask(" New Column Name ", "", True)
        if not title:
            return
        self.data_manager.create_column(self.board, title)
        self._setup_columns()
        self.focused_index = min(
            self.columns_view.max_items_in_win - 1, self.columns_count - 1
        )
        self.columns_view.scroll_to_bottom()

    def _rename_column(self):
        if not self.columns:
            return
        index = self._focused_column_index()
        new_title = self._ask(" Rename Column ", self.board.columns[index].title, True)
        if new_title:
            self.data_manager.rename_column(self.board, index, new_title)
            self.columns_view.draw()

    def _delete_column(self):
        if not self.columns:
            return
        index = self._focused_column_index()
        title = self.columns[index].column.title
        if not self._confirm(f'Delete column "{shorten_label(title)}"?'):
            return
        prev_offset = self.columns_view.offset
        self.data_manager.delete_column(self.board, index)
        self._setup_columns()
        if self.columns:
            self.focused_index = min(self.focused_index, self.columns_count - 1)
        self.columns_view.scroll_to_offset(prev_offset)

    def _create_card(self):
        if not self.columns:
            return
        card = Card("")
        canceled = self._open_card(card)
        if canceled or not card.content:
            return
        column = self.columns[self._focused_column_index()].column
        self.data_manager.add_card(column, card)
        self._setup_columns()
        self._on_focused_column(ColumnWin.focus_last)
        self.columns_view.draw()

    def _edit_card(self):
        if not self.columns:
            return
        column_index = self._focused_column_index()
        column_win = self.columns[column_index]
        column = column_win.column
        if not column.cards:
            return
        card_index = column_win.absolute_focused_index()
        card = column.cards[card_index]
        canceled = self._open_card(card)
        if canceled or not card.content:
            return

        prev_offset = column_win.cards_window_offset
        prev_focused = column_win.focused_index
        self.data_manager.update_card(column, card_index, card)
        self._setup_columns()
        restored = self.columns[column_index]
        restored.cards_window_offset = prev_offset
        restored.focused_index = prev_focused
        self.columns_view.draw()

    def _delete_card(self):
        if not self.columns:
            return
        column_index = self._focused_column_index()
        column_win = self.columns[column_index]
        column = column_win.column
        if not column.cards:
            return
        card_index = column_win.absolute_focused_index()
        content = column.cards[card_index].content
        if not self._confirm(f'Delete card "{shorten_label(content)}"?'):
            return

        prev_offset = column_win.cards_window_offset
        prev_focused = column_win.focused_index
        self.data_manager.delete_card(column, card_index)
        self._setup_columns()
        restored = self.columns[column_index]
        restored.cards_window_offset = prev_offset
        if restored.cards_count > 0:
            prev_focused = min(prev_focused, restored.cards_count - 1)
        restored.focused_index = prev_focused
        self.columns_view.draw()

    # dialogs

    def _ask(self, title, content="", focused=False):
        max_y, max_x = self._screen_size()
        height = 3
        width = int(max_x * 0.4)
        start_y = max_y // 2 - height // 2
        start_x = max_x // 2 - width // 2
        field = Input(
            height,
            width,
            start_y,
            start_x,
            content,
            title,
            focused,
            window=self._new_window(height, width, start_y, start_x),
            screen=self.screen,
        )
        field.show(grab_input=True)
        value = field.value()
        self.columns_view.draw()
        return value

    def _open_card(self, card):
        max_y, max_x = self._screen_size()
        height = int(max_y * 0.4)
        width = int(max_x * 0.5)
        start_y = max_y // 2 - height // 2
        start_x = max_x // 2 - width // 2
        editor = CardInfo(
            height,
            width,
            start_y,
            start_x,
            card,
            screen=self.screen,
            new_window=self._new_window,
        )
        canceled = editor.show(self.data_manager)
        self.columns_view.draw()
        return canceled

    def _confirm(self, message):
        max_y, max_x = self._screen_size()
        height = 5
        width = len(message) + 4
        start_y = max_y // 2 - height // 2
        start_x = max_x // 2 - width // 2
        dialog = ConfirmDialog(
            height,
            width,
            start_y,
            start_x,
            message,
            window=self._new_window(height, width, start_y, start_x),
        )
        confirmed = dialog.show()
        self.columns_view.draw()
        return confirmed