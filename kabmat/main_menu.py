"""Start screen listing all boards, with keys to manage and open them."""

import curses

from .board_screen import BoardScreen
from .config import ColorPair
from .input import Input
from .scrollable import ScrollableWindow
from .text import center_text, shorten_label
from .widgets import ConfirmDialog, Footer, Help, draw_border, key_code, write

_MENU_TITLE = " Boards "
_CREATE_HINT = "c to create a new board"


def _color(pair):
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def _recolor(window, y, x, count, attr):
    try:
        window.chgat(y, x, count, attr)
    except curses.error:
        pass


class MainMenu:
    """Box in the middle of the screen with the list of board names."""

    def __init__(self, data_manager, config, screen, new_window=None):
        self.screen = screen
        self._new_window = new_window or curses.newwin
        max_y, max_x = screen.getmaxyx()
        self.height = int(max_y * 0.3)
        self.width = int(max_x * 0.2)
        self.start_y = max_y // 2 - self.height // 2
        self.start_x = max_x // 2 - self.width // 2

        self.window = self._new_window(
            self.height, self.width, self.start_y, self.start_x
        )
        self.window.keypad(True)
        self.screen.refresh()

        self.data_manager = data_manager
        self.config = config
        self.boards_names = list(data_manager.board_names())
        self.highlighted_index = 0

        view_height = self.height - 3
        self._view_width = self.width - 2
        self.menu_view = ScrollableWindow(
            lambda: self.boards_names,
            self._draw_menu_items,
            view_height,
            window=self._new_window(
                view_height, self._view_width, self.start_y + 2, self.start_x + 1
            ),
        )

        self._actions = {
            "q": lambda: True,
            "?": self._show_help,
            "k": self._highlight_above,
            "j": self._highlight_below,
            "g": self._highlight_first,
            "G": self._highlight_last,
            "K": self._move_board_up,
            "J": self._move_board_down,
            "d": self._delete_board,
            "c": self._create_board,
            "e": self._rename_board,
            "r": self._rename_board,
            "\n": self._open_board,
        }

    @property
    def boards_count(self):
        return len(self.boards_names)

    # loop

    def show(self):
        """Draw the menu and handle keys until "q" is pressed."""
        Footer(self.screen, True, True).show()
        self.menu_view.scroll_to_top()
        self._setup_window()
        while (key := self.window.getch()) != 0:
            if self.handle_key_press(key):
                break

    def handle_key_press(self, key):
        """Handle one key; return True when the program should quit."""
        code = key_code(key)
        char = chr(code) if 0 <= code < 256 else ""
        action = self._actions.get(char)
        if action is None:
            return False
        return bool(action())

    # drawing

    def _setup_window(self):
        draw_border(self.window, _color(ColorPair.BORDER))
        x, title = center_text(_MENU_TITLE, self.width)
        write(self.window, 0, x, title)
        self.window.refresh()
        self.menu_view.draw()

    def _draw_menu_items(self, shown_boards, view_window):
        if shown_boards:
            for row, name in enumerate(shown_boards):
                x, fitted = center_text(name, self._view_width)
                write(view_window, row, x, fitted)
            self._highlight_current()
        else:
            _recolor(view_window, 0, 0, self._view_width, curses.A_NORMAL)
            x, hint = center_text(_CREATE_HINT, self._view_width)
            write(view_window, 0, x, hint)
        self.window.refresh()
        view_window.refresh()

    def _highlight_current(self):
        if not self.boards_names:
            return
        view_window = self.menu_view.window
        for row in range(self.menu_view.max_items_in_win):
            _recolor(view_window, row, 0, self._view_width, curses.A_NORMAL)
        _recolor(
            view_window,
            self.highlighted_index,
            0,
            self._view_width,
            _color(ColorPair.FOOTER),
        )
        self.window.refresh()
        view_window.refresh()

    # highlight

    def _highlighted_board_index(self):
        return self.menu_view.offset + self.highlighted_index

    def _highlighted_board(self):
        return self.boards_names[self._highlighted_board_index()]

    def _highlight_above(self):
        if not self.boards_names:
            return
        self.highlighted_index -= 1
        if self.highlighted_index == -1:
            self.highlighted_index = 0
            self.menu_view.scroll_up()
        else:
            self._highlight_current()

    def _highlight_below(self):
        if not self.boards_names:
            return
        self.highlighted_index = min(self.boards_count - 1, self.highlighted_index + 1)
        limit = self.menu_view.max_items_in_win
        if self.highlighted_index == limit:
            self.highlighted_index = limit - 1
            self.menu_view.scroll_down()
        else:
            self._highlight_current()

    def _highlight_first(self):
        if self.boards_names:
            self.highlighted_index = 0
            self.menu_view.scroll_to_top()

    def _highlight_last(self):
        if self.boards_names:
            self.highlighted_index = min(
                self.menu_view.max_items_in_win - 1, self.boards_count - 1
            )
            self.menu_view.scroll_to_bottom()

    # actions

    def _move_board_up(self):
        if not self.boards_names:
            return
        prev_offset = self.menu_view.offset
        if self.data_manager.move_board_up(self._highlighted_board_index()):
            self.boards_names = list(self.data_manager.board_names())
            self.menu_view.scroll_to_offset(prev_offset)
            self._highlight_above()

    def _move_board_down(self):
        if not self.boards_names:
            return
        prev_offset = self.menu_view.offset
        if self.data_manager.move_board_down(self._highlighted_board_index()):
            self.boards_names = list(self.data_manager.board_names())
            self.menu_view.scroll_to_offset(prev_offset)
            self._highlight_below()

    def _delete_board(self):
        if not self.boards_names:
            return
        name = self._highlighted_board()
        confirmed = self._confirm(f'Delete board "{shorten_label(name)}"?')
        self._setup_window()
        if not confirmed:
            return
        prev_offset = self.menu_view.offset
        self.data_manager.delete_board(name)
        self.boards_names = list(self.data_manager.board_names())
        self.highlighted_index = max(
            0, min(self.highlighted_index, self.boards_count - 1)
        )
        self.menu_view.scroll_to_offset(prev_offset)

    def _create_board(self):
        name = self._ask(" New Board Name ", "", True)
        if not name:
            return
        self.data_manager.create_board(name)
        self.boards_names = list(self.data_manager.board_names())
        self.highlighted_index = min(
            self.menu_view.max_items_in_win - 1, self.boards_count - 1
        )
        self.menu_view.scroll_to_bottom()

    def _rename_board(self):
        if not self.boards_names:
            return
        old_name = self._highlighted_board()
        new_name = self._ask(" Rename Board ", old_name, True)
        if not new_name:
            return
        offset = self.menu_view.offset
        self.data_manager.rename_board(old_name, new_name)
        self.boards_names = list(self.data_manager.board_names())
        self.menu_view.scroll_to_offset(offset)

    def _open_board(self):
        if not self.boards_names:
            return
        board_screen = BoardScreen(
            self._highlighted_board(),
            self.data_manager,
            self.config,
            True,
            self.screen,
            new_window=self._new_window,
        )
        board_screen.show()

        self.screen.erase()
        self.screen.refresh()
        Footer(self.screen, True, True).show()
        self._setup_window()

    def _show_help(self):
        max_y, max_x = self.screen.getmaxyx()
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
        self._setup_window()

    # dialogs

    def _confirm(self, message):
        max_y, max_x = self.screen.getmaxyx()
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
        return dialog.show()

    def _ask(self, title, content="", focused=False):
        max_y, max_x = self.screen.getmaxyx()
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
        self._setup_window()
        return value