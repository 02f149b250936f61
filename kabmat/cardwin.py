"""A card drawn as a small box inside a column."""

import curses

from .config import ColorPair
from .text import fit_text
from .widgets import color_attr, draw_border, write


def checklist_overview(card):
    """"[done/total]" for a card with a checklist, else an empty string."""
    if not card.checklist:
        return ""
    done = sum(1 for item in card.checklist if item.done)
    return f"[{done}/{len(card.checklist)}]"


class CardWin:
    """Box showing one card's content and checklist progress."""

    def __init__(self, height, width, card, window=None):
        self.height = height
        self.width = width
        self.start_y = 0
        self.start_x = 0
        self.card = card
        self.window = window if window is not None else curses.newwin(height, width, 0, 0)

    def show(self, start_y, start_x):
        """Move the box to the given place and draw the card's content."""
        self.start_y = start_y
        self.start_x = start_x
        try:
            self.window.mvwin(start_y, start_x)
        except curses.error:
            pass
        self.window.box()
        write(self.window, 1, 1, fit_text(self.card.content, self.width))

    def _draw_frame(self, border_attr, overview_attr):
        draw_border(self.window, border_attr)
        overview = checklist_overview(self.card)
        if overview:
            write(self.window, 0, self.width - len(overview) - 2, overview, overview_attr)
        self.window.refresh()

    def focus(self):
        self._draw_frame(color_attr(ColorPair.BORDER), color_attr(ColorPair.FOOTER))

    def unfocus(self):
        self._draw_frame(0, 0)