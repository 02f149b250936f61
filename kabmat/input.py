"""A bordered text field with vim-like normal and insert modes."""

import curses

from .config import ColorPair, Mode
from .scrollable import ScrollableWindow
from .text import trim_spaces
from .widgets import color_attr, draw_border, mode_label, write

_ESCAPE = "\x1b"
_BACKSPACE_KEYS = ("\b", "\x7f")


def _key_char(key):
    """Turn a key code or one-character string into a character ('' if none)."""
    if isinstance(key, str):
        return key[:1]
    code = int(key)
    return chr(code) if 0 <= code < 256 else ""


def _set_cursor(visibility):
    try:
        curses.curs_set(visibility)
    except curses.error:
        pass


class Input:
    """An editable field.

    Fields taller than three rows hold several lines that wrap at the inner
    width; three-row fields hold a single line that scrolls sideways.
    """

    def __init__(
        self,
        height,
        width,
        start_y,
        start_x,
        content="",
        title="",
        focused=False,
        window=None,
        screen=None,
    ):
        self.height = height
        self.width = width
        self.start_y = start_y
        self.start_x = start_x
        self.window = (
            window if window is not None else curses.newwin(height, width, start_y, start_x)
        )
        self.screen = screen

        self.cursor_y = 1
        self.cursor_x = 1
        self.multi_row = height > 3

        self.content = []
        self.line_has_newline = []
        self.first_line_chars = []

        if self.multi_row:
            self._split_lines(content)
        else:
            self.first_line_chars = list(content)

        self.content_view = ScrollableWindow(
            lambda: self.content, self._draw_content, height - 2
        )
        self.first_line_view = ScrollableWindow(
            lambda: self.first_line_chars, self._draw_first_line, width - 3
        )

        self.focused = focused
        self.title = title
        self.mode = Mode.NORMAL

    def _split_lines(self, content):
        line_width = self.width - 2
        if not content:
            self.content = [""]
            self.line_has_newline = [True]
            return
        current = ""
        last = len(content) - 1
        for position, char in enumerate(content):
            if char != "\n":
                current += char
            if char == "\n" or len(current) == line_width or position == last:
                self.content.append(current)
                self.line_has_newline.append(char == "\n")
                current = ""

    # drawing

    def show(self, grab_input=False, just_redraw=False):
        """Draw the field and, if asked, edit it until it is submitted or cancelled."""
        _set_cursor(1)
        view = self.content_view if self.multi_row else self.first_line_view
        if just_redraw:
            view.draw()
        else:
            view.scroll_to_top()

        if grab_input:
            while (key := self.window.getch()) != 0:
                if self.handle_key_press(key):
                    break
            self.clean_up()

    def clean_up(self):
        """Hide the cursor, clear the field and go back to normal mode."""
        _set_cursor(0)
        self.window.erase()
        self.window.refresh()
        self._change_mode(Mode.NORMAL)

    def value(self):
        """The text entered, with surrounding spaces removed."""
        if self.multi_row:
            parts = []
            last = len(self.content) - 1
            for index, line in enumerate(self.content):
                parts.append(line)
                if len(line) < self.width - 2 and index < last:
                    parts.append("\n")
            text = "".join(parts)
        else:
            text = "".join(self.first_line_chars)
        return trim_spaces(text)

    def _place_cursor(self):
        try:
            self.window.move(self.cursor_y, self.cursor_x)
        except curses.error:
            pass

    def _draw_content(self, shown_lines, _view_window):
        self.window.erase()
        for row, line in enumerate(shown_lines):
            write(self.window, row + 1, 1, line)
        if self.focused:
            self.focus()
        else:
            self.unfocus()
        self.window.refresh()

    def _draw_first_line(self, shown_chars, _view_window):
        self.window.erase()
        if self.focused:
            self.focus()
        else:
            self.unfocus()
        if shown_chars:
            write(self.window, 1, 1, "".join(shown_chars))
        self._place_cursor()
        self.window.refresh()

    def focus(self):
        draw_border(self.window, color_attr(ColorPair.BORDER))
        write(self.window, 0, 1, self.title)
        self._place_cursor()
        self.window.refresh()
        self.focused = True

    def unfocus(self):
        self.window.box()
        write(self.window, 0, 1, self.title)
        self.window.refresh()
        self._change_mode(Mode.NORMAL)
        self.focused = False

    # keys

    def handle_key_press(self, key):
        """Handle one key; return True when editing is finished."""
        char = _key_char(key)
        if self.mode == Mode.NORMAL:
            return self._normal_key(char)
        return self._insert_key(char)

    def _normal_key(self, char):
        if char in (_ESCAPE, "q"):
            if self.multi_row:
                self.content = []
            else:
                self.first_line_chars = []
            return True
        if char == "\n":
            return True

        motions = {
            "h": self._cursor_left,
            "l": self._cursor_right,
            "0": self._cursor_to_first_char,
            "$": self._cursor_to_last_char,
            "k": self._cursor_up,
            "j": self._cursor_down,
            "g": self._cursor_to_first_line,
            "G": self._cursor_to_last_line,
        }
        if char in motions:
            motions[char]()
        elif char == "i":
            self._change_mode(Mode.INSERT)
        elif char == "a":
            self._change_mode(Mode.INSERT)
            if self.multi_row:
                self._advance_at_line_end()
            else:
                self._cursor_right()
        elif char == "I":
            self._cursor_to_first_char()
            self._change_mode(Mode.INSERT)
        elif char == "A":
            self._cursor_to_last_char()
            self._normal_key("a")
        elif char == "S":
            self._clear_line()
        elif char == "d":
            self._delete_line()
        return False

    def _advance_at_line_end(self):
        """Step right, opening or entering the next line at the right edge."""
        if self.cursor_x != self.width - 2:
            self._cursor_right()
            return
        prev_offset = self.content_view.offset
        index = self._line_index()
        if self.line_has_newline[index] or index == len(self.content) - 1:
            self.line_has_newline[index] = False
            self.content.insert(index + 1, "")
            self.content_view.scroll_to_offset(prev_offset)
            self.line_has_newline.insert(self._line_index() + 1, True)
            self._cursor_down()
        else:
            self._cursor_to_first_char()
            self._cursor_down()

    def _clear_line(self):
        if self.multi_row:
            if self.content:
                self.content[self._line_index()] = ""
                self.content_view.draw()
        else:
            self.first_line_chars = []
            self.first_line_view.start = 0
            self.first_line_view.end = 0
        self._cursor_to_first_char()
        self._change_mode(Mode.INSERT)

    def _delete_line(self):
        if not (self.multi_row and self.content):
            return
        prev_offset = self.content_view.offset
        index = self._line_index()
        del self.content[index]
        del self.line_has_newline[index]

        if not self.content:
            self.content.append("")
            self.line_has_newline.append(True)

        self.cursor_y = max(min(self.cursor_y, len(self.content)), 1)
        self.content_view.scroll_to_offset(prev_offset, redraw=False)
        line = self.content[min(self._line_index(), len(self.content) - 1)]
        self.cursor_x = max(min(self.cursor_x, len(line)), 1)
        self.content_view.scroll_to_offset(prev_offset)

    def _insert_key(self, char):
        if char == _ESCAPE:
            self._cursor_left()
            self._change_mode(Mode.NORMAL)
        elif char == "\n":
            if not self.multi_row:
                self._change_mode(Mode.NORMAL)
                return True
            self._break_line()
        elif char in _BACKSPACE_KEYS:
            if self.multi_row:
                self._backspace_multi()
            else:
                self._backspace_single()
        elif char:
            if self.multi_row:
                self._insert_multi(char)
            else:
                self._insert_single(char)
        return False

    def _break_line(self):
        prev_offset = self.content_view.offset
        index = self._line_index()
        line = self.content[index]
        split = self.cursor_x - 1
        self.content[index] = line[:split]
        self.line_has_newline[index] = True
        self.content.insert(index + 1, line[split:])
        self.content_view.scroll_to_offset(prev_offset)
        self.line_has_newline.insert(self._line_index() + 1, True)
        self._cursor_to_first_char()
        self._cursor_down()

    def _backspace_multi(self):
        if not self.content:
            return
        prev_offset = self.content_view.offset
        deleted = 0
        moved_up = False

        if self.cursor_x - 1 > 0:
            index = self._line_index()
            line = self.content[index]
            cut = self.cursor_x - 2
            self.content[index] = line[:cut] + line[cut + 1:]
            deleted = 1
            self._cursor_left()
        elif self._line_index() > 0:
            above = self._line_index() - 1
            if self.line_has_newline[above]:
                self.line_has_newline[above] = False
                deleted = (self.width - 2) - len(self.content[above])
                if deleted > 0:
                    self._cursor_up()
                    self._cursor_to_last_char()
                    moved_up = True
            else:
                self.content[above] = self.content[above][:-1]
                deleted = 1
                self._cursor_up()
                self._cursor_to_last_char()
                moved_up = True

        if deleted <= 0:
            return

        self._pull_lines_up(self._line_index())

        if (
            len(self.content_view.current_window()) >= self.content_view.max_items_in_win
            and prev_offset > 0
            and moved_up
        ):
            self.content_view.scroll_up()
            self._cursor_down()

        self.content_view.draw()

    def _pull_lines_up(self, index):
        """Refill wrapped lines from the ones below after text was removed."""
        while index < len(self.content) - 1:
            room = max(0, (self.width - 2) - len(self.content[index]))
            if self.line_has_newline[index]:
                break
            following = self.content[index + 1]
            self.content[index] += following[:room]
            self.content[index + 1] = following[room:]
            if not self.content[index + 1]:
                self.line_has_newline[index] = self.line_has_newline[index + 1]
                del self.content[index + 1]
                del self.line_has_newline[index + 1]
            index += 1

    def _backspace_single(self):
        if not self.first_line_chars:
            return
        view = self.first_line_view
        position = view.start + self.cursor_x - 2
        if position < 0:
            return
        prev_offset = view.offset
        del self.first_line_chars[position]
        view.scroll_to_offset(prev_offset)
        if len(view.current_window()) >= view.max_items_in_win and prev_offset > 0:
            view.scroll_up()
        else:
            self._cursor_left()

    def _insert_multi(self, char):
        prev_offset = self.content_view.offset
        index = self._line_index()
        line = self.content[index]
        at = self.cursor_x - 1
        self.content[index] = line[:at] + char + line[at:]
        self.content_view.scroll_to_offset(prev_offset)

        line_width = self.width - 2
        position = index
        while position < len(self.content):
            if len(self.content[position]) > line_width:
                extra = self.content[position][-1]
                self.content[position] = self.content[position][:-1]
                if position == len(self.content) - 1:
                    self.content.append(extra)
                    self.line_has_newline.append(False)
                elif not self.line_has_newline[position]:
                    self.content[position + 1] = extra + self.content[position + 1]
                else:
                    self.content.insert(position + 1, extra)
                    self.line_has_newline[position] = False
                    self.line_has_newline.insert(position + 1, True)
            position += 1

        self.content_view.scroll_to_offset(prev_offset)
        self._advance_at_line_end()

    def _insert_single(self, char):
        view = self.first_line_view
        prev_offset = view.offset
        self.first_line_chars.insert(view.start + self.cursor_x - 1, char)
        view.scroll_to_offset(prev_offset)
        self._cursor_right()

    # cursor

    def _line_index(self):
        return self.content_view.offset + self.cursor_y - 1

    def _refresh_cursor(self):
        self._place_cursor()
        self.window.refresh()

    def _has_text(self):
        return bool(self.content) if self.multi_row else bool(self.first_line_chars)

    def _cursor_left(self):
        self.cursor_x -= 1
        if self.cursor_x < 1:
            self.cursor_x = 1
            if not self.multi_row:
                self.first_line_view.scroll_up()
        else:
            self._refresh_cursor()

    def _cursor_right(self):
        if not self._has_text():
            return
        extra = 1 if self.mode == Mode.INSERT else 0
        if self.multi_row:
            line = self.content[self._line_index()]
            self.cursor_x = max(min(len(line) + extra, self.cursor_x + 1), 1)
        else:
            self.cursor_x = min(len(self.first_line_chars) + 1, self.cursor_x + 1)

        limit = self.first_line_view.max_items_in_win
        if self.cursor_x == limit + 2:
            self.cursor_x = limit + 1
            if not self.multi_row:
                self.first_line_view.scroll_down()
        else:
            self._refresh_cursor()

    def _clamp_x_to_line(self, line):
        self.cursor_x = max(min(len(line), self.cursor_x), 1)

    def _cursor_up(self):
        if not (self.multi_row and self.content):
            return
        self.cursor_y -= 1
        if self.cursor_y == 0:
            self.cursor_y = 1
            self.content_view.scroll_up()
        self._clamp_x_to_line(self.content[self._line_index()])
        self._refresh_cursor()

    def _cursor_down(self):
        if not (self.multi_row and self.content):
            return
        self.cursor_y = max(min(len(self.content), self.cursor_y + 1), 1)
        limit = self.content_view.max_items_in_win
        if self.cursor_y == limit + 1:
            self.cursor_y = limit
            self.content_view.scroll_down()
        self._clamp_x_to_line(self.content[self._line_index()])
        self._refresh_cursor()

    def _cursor_to_first_char(self):
        self.cursor_x = 1
        self._refresh_cursor()
        if not self.multi_row:
            self.first_line_view.scroll_to_top()

    def _cursor_to_last_char(self):
        if not self._has_text():
            return
        if self.multi_row:
            extra = 1 if self.mode == Mode.INSERT else 0
            line = self.content[self._line_index()]
            self.cursor_x = max(len(line) + extra, 1)
            self._refresh_cursor()
        else:
            self.cursor_x = min(
                len(self.first_line_chars) + 1,
                self.first_line_view.max_items_in_win + 1,
            )
            self.first_line_view.scroll_to_bottom()

    def _cursor_to_first_line(self):
        if not (self.multi_row and self.content):
            return
        self.cursor_y = 1
        self._clamp_x_to_line(self.content[0])
        self.content_view.scroll_to_top()

    def _cursor_to_last_line(self):
        if not (self.multi_row and self.content):
            return
        self.cursor_y = max(min(len(self.content), self.content_view.max_items_in_win), 1)
        self._clamp_x_to_line(self.content[-1])
        self.content_view.scroll_to_bottom()

    def _change_mode(self, mode):
        self.mode = mode
        if self.screen is not None:
            max_y, _ = self.screen.getmaxyx()
            write(self.screen, max_y - 1, 0, mode_label(mode), color_attr(ColorPair.MODE))
            self.screen.refresh()
        self._place_cursor()
        self.window.refresh()