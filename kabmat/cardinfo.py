"""Window for editing a card's content and description."""

import curses

from .checklist import ChecklistWindow
from .config import ColorPair, Mode
from .input import Input
from .widgets import color_attr, draw_border, key_code, write

_ESCAPE = "\x1b"


def _screen_size(screen):
    if screen is not None:
        return screen.getmaxyx()
    return curses.LINES, curses.COLS


def _set_cursor(visibility):
    try:
        curses.curs_set(visibility)
    except curses.error:
        pass


def _key_char(key):
    code = key_code(key)
    return chr(code) if 0 <= code < 256 else ""


class CardInfo:
    """Editor with a content field, a description field and a checklist."""

    def __init__(
        self, height, width, start_y, start_x, card, screen=None, new_window=None
    ):
        self.height = height
        self.width = width
        self.start_y = start_y
        self.start_x = start_x
        self.card = card
        self.screen = screen
        self._new_window = new_window or curses.newwin
        self.window = self._new_window(height, width, start_y, start_x)
        self.focused_input = None
        self.focused_content_input = True

    def _make_input(self, height, width, start_y, start_x, content, title):
        return Input(
            height,
            width,
            start_y,
            start_x,
            content,
            title,
            window=self._new_window(height, width, start_y, start_x),
            screen=self.screen,
        )

    def show(self, data_manager):
        """Edit the card until submitted or cancelled; return True if cancelled.

        The card's content and description take the fields' values either way.
        """
        content_input = self._make_input(
            3,
            self.width - 2,
            self.start_y + 1,
            self.start_x + 1,
            self.card.content,
            " Content ",
        )
        description_input = self._make_input(
            self.height - 5,
            self.width - 2,
            self.start_y + 4,
            self.start_x + 1,
            self.card.description,
            " Description ",
        )
        self.focused_input = content_input
        self.focused_content_input = True
        self._setup_window(content_input, description_input, False)

        done = canceled = False
        while not done and (key := self.window.getch()) != 0:
            char = _key_char(key)
            focused = self.focused_input
            if char in (_ESCAPE, "q"):
                if focused.mode == Mode.NORMAL:
                    done = canceled = True
                else:
                    focused.handle_key_press(key)
            elif char == "\n":
                if not self.focused_content_input and focused.mode == Mode.INSERT:
                    focused.handle_key_press(key)
                else:
                    done = True
            elif char == "\t":
                self._switch_focus(content_input, description_input)
            elif char == "c" and focused.mode == Mode.NORMAL and self.card.content:
                self._open_checklist(data_manager)
                self._setup_window(content_input, description_input, True)
            else:
                focused.handle_key_press(key)

        self.card.content = content_input.value()
        self.card.description = description_input.value()

        content_input.clean_up()
        description_input.clean_up()
        self.window.erase()
        self.window.refresh()
        return canceled

    def _switch_focus(self, content_input, description_input):
        self.focused_content_input = not self.focused_content_input
        if self.focused_content_input:
            description_input.unfocus()
            content_input.focus()
            self.focused_input = content_input
        else:
            content_input.unfocus()
            description_input.focus()
            self.focused_input = description_input

    def _open_checklist(self, data_manager):
        max_y, max_x = _screen_size(self.screen)
        height = int(max_y * 0.4) + 2
        width = int(max_x * 0.3)
        start_y = max_y // 2 - height // 2
        start_x = max_x // 2 - width // 2

        _set_cursor(0)
        checklist = ChecklistWindow(
            height,
            width,
            start_y,
            start_x,
            self.card,
            data_manager,
            screen=self.screen,
            new_window=self._new_window,
        )
        checklist.show()
        _set_cursor(1)

    def _setup_window(self, content_input, description_input, just_redraw):
        draw_border(self.window, color_attr(ColorPair.BORDER))
        title = " Card Info "
        write(self.window, 0, self.width // 2 - len(title) // 2, title)
        if self.screen is not None:
            self.screen.refresh()
        self.window.refresh()

        content_input.show(False, just_redraw)
        description_input.show(False, just_redraw)
        self.focused_input.focus()