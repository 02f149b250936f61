"""Simple terminal widgets: footer, header, confirmation dialog and help."""

import curses

from .config import NAME, VERSION, ColorPair, Mode
from .scrollable import ScrollableWindow

# Each section: (name, groups); each group: (subheading, key column width,
# (key, description) pairs, trailing note).
_HELP_SECTIONS = (
    ("Help Window", (
        (None, 4, (
            ("k", "scroll up one line"),
            ("j", "scroll down one line"),
            ("q", "close the window"),
        ), None),
    )),
    ("Main Menu", (
        (None, 10, (
            ("q", "quit"),
            ("?", "show this help window"),
            ("k", "highlight the above board name"),
            ("j", "highlight the below board name"),
            ("g", "highlight the first board name"),
            ("G", "highlight the last board name"),
            ("K", "move highlighted board up"),
            ("J", "move highlighted board down"),
            ("d", "delete the currently highlighted board"),
            ("r, e", "rename the currently highlighted board"),
            ("c", "create a new board and highlight it"),
            ("<Enter>", "open the currently highlighted board"),
        ), None),
    )),
    ("Input Field", (
        ("Normal mode", 11, (
            ("<Esc>, q", "cancel and close the input field"),
            ("<Enter>", "submit and close the input field"),
            ("h", "move cursor one character to the left"),
            ("l", "move cursor one character to the right"),
            ("0", "move cursor to the start of the line"),
            ("$", "move cursor to the end of the line"),
            ("k", "move cursor up one line (in multi-row input only)"),
            ("j", "move cursor down one line (in multi-row input only)"),
            ("g", "move cursor to the first line (in multi-row input only)"),
            ("G", "move cursor to the last line (in multi-row input only)"),
            ("i", "change mode to insert"),
            ("a", "move cursor one character to the right and change mode to insert"),
            ("I", "move cursor to the start of the line and change mode to insert"),
            ("A", "move cursor to the end of the line and change mode to insert"),
            ("S", "delete everything on the line and change mode to insert"),
            ("d", "delete line under cursor (in multi-row input only)"),
        ), None),
        ("Insert mode", 23, (
            ("<Esc>", "change mode to normal"),
            ("<Enter>", "submit and close the input field "
                        "(or add a new line in multi-row input)"),
            ("<Backspace>/<Delete>", "delete the character before the cursor"),
        ), "(Any other key is inserted before the cursor)"),
    )),
    ("Confirmation Window", (
        (None, 13, (
            ("<Enter>, y", "confirm action (yes)"),
            ("<Esc>, n", "cancel action (no)"),
        ), None),
    )),
    ("Board Screen", (
        (None, 15, (
            ("q", "quit to where the board was opened from (main menu or cli)"),
            ("?", "show this help message"),
            ("h", "focus the left column"),
            ("l", "focus the right column"),
            ("k", "focus the above card"),
            ("j", "focus the below card"),
            ("g", "focus the first card"),
            ("G", "focus the last card"),
            ("H", "move focused card to the left column"),
            ("L", "move focused card to the right column"),
            ("K", "move focused card up"),
            ("J", "move focused card down"),
            ("<C-h>, <C-p>", "move focused column to the left"),
            ("<C-l>, <C-n>", "move focused column to the right"),
            ("C", "create a new column"),
            ("E", "edit title of focused column"),
            ("D", "delete focused column"),
            ("c", "create a new card in focused column"),
            ("e", "edit focused card"),
            ("d", "delete focused card"),
        ), None),
    )),
    ("Card Info Window", (
        (None, 11, (
            ("<Esc>, q", "cancel and close (if in normal mode)"),
            ("<Enter>", "submit and close (if in normal mode)"),
            ("<Tab>", "switch focused input (content or description)"),
            ("c", "open checklist items window"),
        ), "(Any other key gets handled by the focused input)"),
    )),
    ("Checklist Window", (
        (None, 10, (
            ("q", "close the window"),
            ("k", "highlight the item above"),
            ("j", "highlight the item below"),
            ("g", "highlight the first item"),
            ("G", "highlight the last item"),
            ("K", "move highlighted item up"),
            ("J", "move highlighted item down"),
            ("c", "add a new item to the list"),
            ("e", "edit content of highlighted item"),
            ("<Space>", "toggle highlighted item (done/not done)"),
            ("d", "delete highlighted item"),
        ), None),
    )),
)


def _build_help_lines():
    lines = []
    for section_number, (name, groups) in enumerate(_HELP_SECTIONS):
        if section_number:
            lines.extend(["", ""])
        lines.append(f"{name} keybindings:")
        for group_number, (subheading, width, pairs, note) in enumerate(groups):
            indent = "  " if subheading else ""
            if group_number:
                lines.append("")
            if subheading:
                lines.append(f"{indent}{subheading}:")
            lines.extend(f"{indent}{key.ljust(width)}{text}" for key, text in pairs)
            if note:
                lines.append(f"{indent}{note}")
    return lines


HELP_LINES = _build_help_lines()

ESCAPE = 27
ENTER = ord("\n")


def color_attr(pair):
    """Attribute bits selecting colour pair ``pair``."""
    return (int(pair) << 8) & curses.A_COLOR


def key_code(key):
    """Turn a key given as a one-character string or a code into a code."""
    return ord(key) if isinstance(key, str) else int(key)


def write(window, y, x, text, attr=0):
    """Put text on a window, ignoring text that falls outside of it."""
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def draw_border(window, attr=0):
    """Draw a box around the window, in the given attribute if any."""
    if attr:
        window.attron(attr)
    window.box()
    if attr:
        window.attroff(attr)


def mode_label(mode):
    return " NORMAL " if mode == Mode.NORMAL else " INSERT "


class Footer:
    """Bottom status line with the mode, program name and a help hint."""

    def __init__(self, screen, show_mode, show_help_hint):
        self.screen = screen
        self.show_mode = show_mode
        self.show_help_hint = show_help_hint
        self.mode = Mode.NORMAL

    def show(self):
        y_max, x_max = self.screen.getmaxyx()
        row = y_max - 1

        if self.show_mode:
            write(self.screen, row, 0, mode_label(self.mode), color_attr(ColorPair.MODE))

        info = f"{NAME} {VERSION}"
        write(self.screen, row, x_max // 2 - len(info) // 2, info)

        if self.show_help_hint:
            write(self.screen, row, x_max - 11, "? for help")

        self.screen.chgat(row, 8, x_max, color_attr(ColorPair.FOOTER))
        self.screen.refresh()


class Header:
    """Top line with the board name centred."""

    def __init__(self, screen, board_name):
        self.screen = screen
        self.board_name = board_name

    def show(self):
        _, max_x = self.screen.getmaxyx()
        write(self.screen, 0, max_x // 2 - len(self.board_name) // 2, self.board_name)
        self.screen.chgat(0, 0, max_x, color_attr(ColorPair.HEADER))
        self.screen.refresh()


class ConfirmDialog:
    """A yes/no question in a small bordered window."""

    def __init__(self, height, width, start_y, start_x, message, window=None):
        self.height = height
        self.width = width
        self.start_y = start_y
        self.start_x = start_x
        self.message = message
        self.window = (
            window if window is not None else curses.newwin(height, width, start_y, start_x)
        )

    def handle_key_press(self, key):
        """Return True for yes, False for no, None for keys that decide nothing."""
        code = key_code(key)
        if code in (ENTER, ord("y")):
            return True
        if code in (ESCAPE, ord("n")):
            return False
        return None

    def show(self):
        """Ask the question and wait for an answer."""
        window = self.window
        middle = self.width // 2

        draw_border(window, color_attr(ColorPair.BORDER))
        title = " Confirm "
        write(window, 0, middle - len(title) // 2, title)
        window.refresh()

        write(window, 1, 2, self.message)
        hint = color_attr(ColorPair.KEY_HINT)
        write(window, 3, middle - 4, "y", hint)
        write(window, 3, middle - 3, "es")
        write(window, 3, middle + 2, "n", hint)
        write(window, 3, middle + 3, "o")
        window.refresh()

        while (key := window.getch()) != 0:
            answer = self.handle_key_press(key)
            if answer is not None:
                window.erase()
                window.refresh()
                return answer
        return False


class Help:
    """Scrollable window listing every key binding."""

    def __init__(self, screen, window=None, text_window=None):
        max_y, max_x = screen.getmaxyx()
        self.height = int(max_y * 0.5)
        self.width = int(max_x * 0.6)
        self.start_y = max_y // 2 - self.height // 2
        self.start_x = max_x // 2 - self.width // 2

        self.window = (
            window
            if window is not None
            else curses.newwin(self.height, self.width, self.start_y, self.start_x)
        )
        self.text_window = (
            text_window
            if text_window is not None
            else curses.newwin(
                self.height - 2, self.width - 2, self.start_y + 1, self.start_x + 1
            )
        )

    def show(self):
        draw_border(self.window, color_attr(ColorPair.BORDER))
        title = " Help "
        write(self.window, 0, self.width // 2 - len(title) // 2, title)

        view = ScrollableWindow(
            HELP_LINES, self._draw_lines, self.height - 2, self.text_window
        )
        view.scroll_to_top()

        while (key := self.window.getch()) != 0:
            code = key_code(key)
            if code == ord("q"):
                break
            if code == ord("k"):
                view.scroll_up()
            elif code == ord("j"):
                view.scroll_down()

        self.window.erase()
        self.window.refresh()

    def _draw_lines(self, shown_lines, text_window):
        for row, line in enumerate(shown_lines):
            write(text_window, row, 0, line)
        self.window.refresh()
        text_window.refresh()