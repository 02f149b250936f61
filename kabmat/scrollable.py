"""A view over part of a list that can be scrolled up and down."""


class ScrollableWindow:
    """Shows at most ``max_items_in_win`` consecutive items of a list.

    ``items`` is either a sequence or a callable returning the current
    sequence, so the owner can replace its list without telling the view.
    ``draw_callback`` is called with the visible items and ``window``.
    """

    def __init__(self, items, draw_callback, max_items_in_win, window=None):
        self._items = items
        self.draw_callback = draw_callback
        self.max_items_in_win = max_items_in_win
        self.window = window
        self.start = 0
        self.end = 0

    @property
    def items(self):
        return self._items() if callable(self._items) else self._items

    @items.setter
    def items(self, value):
        self._items = value

    @property
    def offset(self):
        """Index of the first visible item."""
        return self.start

    def _span(self, count):
        return min(count, self.max_items_in_win)

    def draw(self):
        """Clear the window and hand the visible items to the callback."""
        if self.window is not None:
            self.window.erase()
        self.draw_callback(self.current_window() if self.items else [], self.window)

    def _finish(self, redraw):
        if redraw:
            self.draw()

    def scroll_up(self, redraw=True):
        count = len(self.items)
        if count > 0:
            self.start = max(0, self.start - 1)
            self.end = self.start + self._span(count)
        self._finish(redraw)

    def scroll_down(self, redraw=True):
        count = len(self.items)
        if count > 0:
            self.end = min(count, self.end + 1)
            self.start = self.end - self._span(count)
        self._finish(redraw)

    def scroll_to_top(self, redraw=True):
        count = len(self.items)
        if count > 0:
            self.start = 0
            self.end = self._span(count)
        self._finish(redraw)

    def scroll_to_bottom(self, redraw=True):
        count = len(self.items)
        if count > 0:
            self.end = count
            self.start = count - self._span(count)
        self._finish(redraw)

    def scroll_to_offset(self, offset, redraw=True):
        """Show items from ``offset``, as far as the list allows."""
        count = len(self.items)
        if count > 0:
            self.start = max(0, min(offset, count - self.max_items_in_win))
            self.end = self.start + self._span(count)
        self._finish(redraw)

    def current_window(self):
        """The items currently in view."""
        items = self.items
        return list(items[self.start:min(self.end, len(items))])