"""A column of a board drawn as a bordered box holding card boxes."""

import curses

from .cardwin import CardWin
from .config import ColorPair
from .scrollable import ScrollableWindow
from .text import center_text
from .widgets import color_attr, draw_border, write

_CARD_HEIGHT = 3
_CREATE_HINT = "c to create a new card"


class ColumnWin:
    """Box for one column; scrolls through its cards and tracks the focused one."""

    def __init__(self, height, width, start_y, column, new_window=None):
        self.height = height
        self.width = width
        self.start_y = start_y
        self.start_x = 0
        self.column = column
        self._new_window = new_window or curses.newwin
        self.window = self._new_window(height, width, start_y, 0)

        self.cards = []
        self.cards_view = ScrollableWindow(
            lambda: self.cards, self._draw_cards, (height - 2) // _CARD_HEIGHT
        )
        self.update_cards()

        self.focused_index = 0
        self.cards_window_offset = 0

    @property
    def cards_count(self):
        return len(self.cards)

    def update_cards(self):
        """Rebuild the card boxes from the column's cards."""
        card_width = self.width - 2
        self.cards = [
            CardWin(
                _CARD_HEIGHT,
                card_width,
                card,
                window=self._new_window(_CARD_HEIGHT, card_width, 0, 0),
            )
            for card in self.column.cards
        ]

    def _draw_title(self, attr=0):
        x, title = center_text(f" {self.column.title} ", self.width)
        write(self.window, 0, x, title, attr)

    def show(self, start_x):
        """Place the column at ``start_x`` and draw it with its visible cards."""
        self.start_x = start_x
        try:
            self.window.mvwin(self.start_y, self.start_x)
        except curses.error:
            pass
        self.window.box()
        self._draw_title()
        self.window.refresh()
        self.cards_view.scroll_to_offset(self.cards_window_offset)

    def _draw_cards(self, shown_cards, _view_window):
        if shown_cards:
            for row, card_win in enumerate(shown_cards):
                card_win.show(self.start_y + row * card_win.height + 1, self.start_x + 1)
        else:
            x, hint = center_text(_CREATE_HINT, self.width)
            write(self.window, 1, x, hint)
        self.window.refresh()

    def _sync_view(self):
        self.cards_view.scroll_to_offset(self.cards_window_offset, redraw=False)

    def focus(self):
        draw_border(self.window, color_attr(ColorPair.BORDER))
        self._draw_title(color_attr(ColorPair.FOOTER))
        self.window.refresh()
        self.focus_current()

    def unfocus(self):
        self.window.box()
        self._draw_title()
        self.window.refresh()
        self._sync_view()
        for card_win in self.cards_view.current_window():
            card_win.unfocus()

    def focus_current(self):
        """Redraw the visible cards with the focused one highlighted."""
        if not self.cards:
            return
        self.focused_index = min(self.focused_index, self.cards_count - 1)
        self._sync_view()
        shown = self.cards_view.current_window()
        for card_win in shown:
            card_win.unfocus()
        if 0 <= self.focused_index < len(shown):
            shown[self.focused_index].focus()

    def focus_prev(self):
        if not self.cards:
            return
        self._sync_view()
        self.focused_index -= 1
        if self.focused_index == -1:
            self.focused_index = 0
            self.cards_window_offset = max(0, self.cards_window_offset - 1)
            self.cards_view.scroll_up()
        self.focus_current()

    def focus_next(self):
        if not self.cards:
            return
        self._sync_view()
        self.focused_index = min(self.cards_count - 1, self.focused_index + 1)
        limit = self.cards_view.max_items_in_win
        if self.focused_index == limit:
            self.focused_index = limit - 1
            self.cards_window_offset = min(
                self.cards_count - limit, self.cards_window_offset + 1
            )
            self.cards_view.scroll_down()
        self.focus_current()

    def focus_first(self):
        if not self.cards:
            return
        self._sync_view()
        self.focused_index = 0
        self.cards_window_offset = 0
        self.cards_view.scroll_to_top()
        self.focus_current()

    def focus_last(self):
        if not self.cards:
            return
        self._sync_view()
        limit = self.cards_view.max_items_in_win
        self.focused_index = min(self.cards_count - 1, limit - 1)
        self.cards_window_offset = max(self.cards_count - limit, 0)
        self.cards_view.scroll_to_bottom()
        self.focus_current()

    def move_focused_card_up(self, data_manager):
        if not self.cards:
            return
        self._sync_view()
        if data_manager.move_card_up(self.column, self.absolute_focused_index()):
            self.update_cards()
            self.cards_view.scroll_to_offset(self.cards_window_offset)
            self.focus_prev()

    def move_focused_card_down(self, data_manager):
        if not self.cards:
            return
        self._sync_view()
        if data_manager.move_card_down(self.column, self.absolute_focused_index()):
            self.update_cards()
            self.cards_view.scroll_to_offset(self.cards_window_offset)
            self.focus_next()

    def absolute_focused_index(self):
        """Index of the focused card within the whole column."""
        return self.cards_window_offset + self.focused_index