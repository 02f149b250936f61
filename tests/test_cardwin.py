from kabmat.cardwin import CardWin, checklist_overview
from kabmat.config import ColorPair
from kabmat.model import Card, ChecklistItem
from kabmat.text import fit_text
from kabmat.widgets import color_attr


class FakeWindow:
    def __init__(self):
        self.texts = []
        self.boxes = 0
        self.attrs = []
        self.refreshes = 0
        self.position = None

    def addstr(self, y, x, text, attr=0):
        self.texts.append((y, x, text, attr))

    def box(self):
        self.boxes += 1

    def attron(self, attr):
        self.attrs.append(("on", attr))

    def attroff(self, attr):
        self.attrs.append(("off", attr))

    def refresh(self):
        self.refreshes += 1

    def mvwin(self, y, x):
        self.position = (y, x)


def card_with(done_flags):
    card = Card("task")
    for index, done in enumerate(done_flags):
        card.add_checklist_item(ChecklistItem(f"item {index}", done))
    return card


def test_overview_counts_done_items():
    assert checklist_overview(card_with([True, False])) == "[1/2]"


def test_overview_empty_without_checklist():
    assert checklist_overview(Card("task")) == ""


def test_overview_all_done_has_equal_counts():
    text = checklist_overview(card_with([True, True, True]))
    done, total = text.strip("[]").split("/")
    assert done == total


def test_show_moves_and_draws_content():
    window = FakeWindow()
    card_win = CardWin(3, 20, Card("Write report"), window=window)
    card_win.show(5, 7)
    assert window.position == (5, 7)
    assert (card_win.start_y, card_win.start_x) == (5, 7)
    assert (1, 1, "Write report", 0) in window.texts
    assert window.boxes == 1


def test_show_shortens_long_content():
    window = FakeWindow()
    content = "a very long card content indeed"
    CardWin(3, 10, Card(content), window=window).show(0, 0)
    assert window.texts[0][2] == fit_text(content, 10)
    assert len(window.texts[0][2]) <= 10 - 2


def test_focus_uses_colours_and_right_aligns_overview():
    window = FakeWindow()
    card_win = CardWin(3, 30, card_with([False, True]), window=window)
    card_win.focus()
    assert ("on", color_attr(ColorPair.BORDER)) in window.attrs
    y, x, text, attr = window.texts[0]
    assert (y, text, attr) == (0, checklist_overview(card_win.card), color_attr(ColorPair.FOOTER))
    assert x + len(text) == 30 - 2
    assert window.refreshes == 1


def test_unfocus_plain_overview():
    window = FakeWindow()
    card_win = CardWin(3, 30, card_with([False]), window=window)
    card_win.unfocus()
    assert window.attrs == []
    assert window.texts[0][2:] == (checklist_overview(card_win.card), 0)


def test_no_overview_without_checklist():
    window = FakeWindow()
    CardWin(3, 30, Card("plain"), window=window).focus()
    assert window.texts == []
    assert window.boxes == 1