"""Window for viewing and editing the checklist of a card."""

import curses

from .config import ColorPair
from .input import Input
from .model import ChecklistItem
from .scrollable import ScrollableWindow
from .text import center_text, fit_text
from .widgets import color_attr, draw_border, key_code, write

_ADD_HINT = "c to add a checklist item"
_INPUT_TITLE = " Checklist Item "


def _screen_size(screen):
    if screen is not None:
        return screen.getmaxyx()
    return curses.LINES, curses.COLS


def _recolor(window, y, x, count, attr):
    try:
        window.chgat(y, x, count, attr)
    except curses.error:
        pass


def progress_bar(done_count, total, width):
    """Progress line "[====    ]  50%" for a window ``width`` columns wide.

    Returns an empty string when there is nothing to count.
    """
    if total <= 0:
        return ""
    inner = max(width - 9, 0)
    percent = int(done_count / total * 100)
    bar = "=" * int(percent / 100.0 * inner)
    return f"[{bar:<{inner}}] {percent:3d}%"


class ChecklistWindow:
    """Scrollable list of a card's checklist items with keys to edit them."""

    def __init__(
        self,
        height,
        width,
        start_y,
        start_x,
        card,
        data_manager,
        screen=None,
        new_window=None,
    ):
        self.height = height
        self.width = width
        self.start_y = start_y
        self.start_x = start_x
        self.card = card
        self.data_manager = data_manager
        self.screen = screen
        self._new_window = new_window or curses.newwin
        self.window = self._new_window(height, width, start_y, start_x)

        self.highlighted_index = 0
        self.items_view = ScrollableWindow(
            lambda: self.card.checklist, self._draw_items, height - 3
        )
        self._item_actions = {
            "k": self._highlight_above,
            "j": self._highlight_below,
            "g": self._highlight_first,
            "G": self._highlight_last,
            "K": self._move_item_up,
            "J": self._move_item_down,
            " ": self._toggle_item,
            "e": self._edit_item,
            "d": self._delete_item,
        }

    # loop

    def show(self):
        """Run the window until it is closed with "q"."""
        self.items_view.scroll_to_top()
        while (key := self.window.getch()) != 0:
            if self.handle_key_press(key):
                break
        self.window.erase()
        self.window.refresh()

    def handle_key_press(self, key):
        """Handle one key; return True when the window should close."""
        code = key_code(key)
        char = chr(code) if 0 <= code < 256 else ""
        if char == "q":
            return True
        if char == "c":
            self._add_item()
        elif self.card.checklist:
            action = self._item_actions.get(char)
            if action is not None:
                action()
        return False

    # actions

    def _highlighted_item_index(self):
        return self.items_view.offset + self.highlighted_index

    def _highlight_first(self):
        self.highlighted_index = 0
        self.items_view.scroll_to_top()

    def _move_item_up(self):
        moved = self.data_manager.move_checklist_item_up(
            self.card, self._highlighted_item_index()
        )
        if moved:
            self.items_view.draw()
            self._highlight_above()

    def _move_item_down(self):
        moved = self.data_manager.move_checklist_item_down(
            self.card, self._highlighted_item_index()
        )
        if moved:
            self.items_view.draw()
            self._highlight_below()

    def _toggle_item(self):
        index = self._highlighted_item_index()
        item = self.card.checklist[index]
        self.data_manager.update_checklist_item(
            self.card, index, ChecklistItem(item.content, not item.done)
        )
        self.items_view.draw()

    def _add_item(self):
        content = self._ask()
        if not content:
            return
        self.data_manager.add_checklist_item(self.card, ChecklistItem(content, False))
        self.highlighted_index = min(
            self.items_view.max_items_in_win - 1, len(self.card.checklist) - 1
        )
        self.items_view.scroll_to_bottom()

    def _edit_item(self):
        index = self._highlighted_item_index()
        item = self.card.checklist[index]
        new_content = self._ask(item.content)
        if new_content:
            offset = self.items_view.offset
            self.data_manager.update_checklist_item(
                self.card, index, ChecklistItem(new_content, item.done)
            )
            self.items_view.scroll_to_offset(offset)

    def _delete_item(self):
        index = self._highlighted_item_index()
        prev_offset = self.items_view.offset
        self.data_manager.delete_checklist_item(self.card, index)
        count = len(self.card.checklist)
        self.highlighted_index = max(0, min(self.highlighted_index, count - 1))
        self.items_view.scroll_to_offset(prev_offset)

    def _ask(self, content=""):
        """Ask for an item's text in a one-line input field."""
        max_y, max_x = _screen_size(self.screen)
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
            _INPUT_TITLE,
            True,
            window=self._new_window(height, width, start_y, start_x),
            screen=self.screen,
        )
        field.show(grab_input=True)
        value = field.value()
        self.items_view.draw()
        return value

    # highlight

    def _highlight_current(self):
        if not self.card.checklist:
            return
        for row in range(self.items_view.max_items_in_win):
            _recolor(self.window, row + 2, 1, self.width - 2, curses.A_NORMAL)
        _recolor(
            self.window,
            self.highlighted_index + 2,
            1,
            self.width - 2,
            color_attr(ColorPair.FOOTER),
        )
        self.window.refresh()

    def _highlight_above(self):
        self.highlighted_index -= 1
        if self.highlighted_index == -1:
            self.highlighted_index = 0
            self.items_view.scroll_up()
        else:
            self._highlight_current()

    def _highlight_below(self):
        self.highlighted_index = min(
            len(self.card.checklist) - 1, self.highlighted_index + 1
        )
        limit = self.items_view.max_items_in_win
        if self.highlighted_index == limit:
            self.highlighted_index = limit - 1
            self.items_view.scroll_down()
        else:
            self._highlight_current()

    def _highlight_last(self):
        self.highlighted_index = min(
            self.items_view.max_items_in_win - 1, len(self.card.checklist) - 1
        )
        self.items_view.scroll_to_bottom()

    # drawing

    def _setup_window(self):
        draw_border(self.window, color_attr(ColorPair.BORDER))
        title = " Checklist"
        items = self.card.checklist
        if items:
            done = sum(1 for item in items if item.done)
            title += f" [{done}/{len(items)}]"
            write(self.window, 1, 1, progress_bar(done, len(items), self.width))
        title += " "
        write(self.window, 0, self.width // 2 - len(title) // 2, title)
        if self.screen is not None:
            self.screen.refresh()
        self.window.refresh()

    def _draw_items(self, shown_items, _view_window):
        self.window.erase()
        self._setup_window()
        if shown_items:
            for row, item in enumerate(shown_items):
                mark = "x" if item.done else " "
                line = f"[{mark}] {item.content}"
                write(self.window, row + 2, 1, fit_text(line, self.width))
            self._highlight_current()
        else:
            x, hint = center_text(_ADD_HINT, self.width)
            write(self.window, 1, x, hint)
        self.window.refresh()