from collections import deque

import pytest

from kabmat.board_screen import BoardScreen
from kabmat.config import Config
from kabmat.model import Board, Card, Column


class FakeWindow:
    def __init__(self, keys, height=0, width=0, y=0, x=0):
        self.keys = keys
        self.size = (height, width)
        self.writes = []

    def getch(self):
        return self.keys.popleft() if self.keys else 0

    def getmaxyx(self):
        return self.size

    def addstr(self, y, x, text, attr=0):
        self.writes.append(text)

    def erase(self):
        pass

    def refresh(self):
        pass

    def box(self):
        pass

    def attron(self, attr):
        pass

    def attroff(self, attr):
        pass

    def chgat(self, *args):
        pass

    def mvwin(self, y, x):
        pass

    def move(self, y, x):
        pass

    def keypad(self, flag):
        pass


class RecordingStore:
    def __init__(self, boards):
        self.boards = boards
        self.writes = 0

    def get_board(self, name):
        for board in self.boards:
            if board.name == name:
                return board
        raise KeyError(name)

    def _save(self):
        self.writes += 1

    def create_column(self, board, title):
        board.add_column(title)
        self._save()

    def rename_column(self, board, index, title):
        board.rename_column(index, title)
        self._save()

    def delete_column(self, board, index):
        board.delete_column(index)
        self._save()

    def move_column_left(self, board, index):
        moved = board.move_column_left(index)
        if moved:
            self._save()
        return moved

    def move_column_right(self, board, index):
        moved = board.move_column_right(index)
        if moved:
            self._save()
        return moved

    def add_card(self, column, card):
        column.add_card(card)
        self._save()

    def update_card(self, column, index, card):
        column.update_card(index, card)
        self._save()

    def delete_card(self, column, index):
        column.delete_card(index)
        self._save()

    def move_card_up(self, column, index):
        moved = column.move_card_up(index)
        if moved:
            self._save()
        return moved

    def move_card_down(self, column, index):
        moved = column.move_card_down(index)
        if moved:
            self._save()
        return moved

    def move_card_to_prev_column(self, board, card, src, dist, config):
        moved = board.move_card_to_prev_column(card, src, dist, config)
        if moved:
            self._save()
        return moved

    def move_card_to_next_column(self, board, card, src, dist, config):
        moved = board.move_card_to_next_column(card, src, dist, config)
        if moved:
            self._save()
        return moved


def make_board(*titles):
    board = Board("Work")
    for title in titles:
        board.add_column(title)
    return board


def make_screen(board, from_tui=True, config=None):
    keys = deque()
    created = []

    def new_window(height, width, y, x):
        window = FakeWindow(keys, height, width, y, x)
        created.append(window)
        return window

    screen = FakeWindow(keys, 40, 120)
    store = RecordingStore([board])
    board_screen = BoardScreen(
        board.name, store, config or Config(), from_tui, screen, new_window
    )
    board_screen.columns_view.scroll_to_top()
    return board_screen, store, keys, screen, created


def feed(keys, text):
    keys.extend(ord(char) for char in text)


def test_columns_follow_board():
    board = make_board("Todo", "Doing", "Done")
    view, _, _, _, _ = make_screen(board)
    assert [win.column for win in view.columns] == board.columns


def test_show_writes_board_name_in_header():
    board = make_board("Todo")
    view, _, keys, screen, _ = make_screen(board)
    feed(keys, "l")
    view.show()
    assert "Work" in screen.writes


def test_empty_board_shows_hint():
    board = make_board()
    _, _, _, _, created = make_screen(board)
    assert any("C to create a new column" in w.writes for w in created)


def test_focus_moves_right_and_left():
    board = make_board("Todo", "Done")
    view, _, _, _, _ = make_screen(board)
    view.handle_key_press("l")
    assert view.focused_index == 1
    view.handle_key_press("l")
    assert view.focused_index == 1
    view.handle_key_press("h")
    view.handle_key_press("h")
    assert view.focused_index == 0


def test_focus_scrolls_past_visible_columns():
    board = make_board("A", "B", "C", "D")
    view, _, _, _, _ = make_screen(board)
    for _ in range(3):
        view.handle_key_press("l")
    assert view.focused_index == view.columns_view.max_items_in_win - 1
    assert view.columns_view.offset == 1
    assert view.columns_view.current_window()[-1].column.title == "D"


def test_move_card_to_previous_column():
    board = make_board("Todo", "Done")
    board.columns[1].add_card(Card("write report"))
    view, store, _, _, _ = make_screen(board)
    view.handle_key_press("l")
    view.handle_key_press("H")
    assert [c.content for c in board.columns[0].cards] == ["write report"]
    assert board.columns[1].cards == []
    assert store.writes == 1


def test_move_card_left_from_first_column_does_nothing():
    board = make_board("Todo", "Done")
    board.columns[0].add_card(Card("x"))
    view, store, _, _, _ = make_screen(board)
    view.handle_key_press("H")
    assert [c.content for c in board.columns[0].cards] == ["x"]
    assert store.writes == 0


def test_move_card_to_next_column_goes_to_top_by_default():
    board = make_board("Todo", "Done")
    board.columns[0].add_card(Card("new"))
    board.columns[1].add_card(Card("old"))
    view, _, _, _, _ = make_screen(board)
    view.handle_key_press("L")
    assert [c.content for c in board.columns[1].cards] == ["new", "old"]


def test_move_card_to_next_column_bottom_when_configured():
    board = make_board("Todo", "Done")
    board.columns[0].add_card(Card("new"))
    board.columns[1].add_card(Card("old"))
    view, _, _, _, _ = make_screen(
        board, config=Config(move_card_to_column_bottom=True)
    )
    view.handle_key_press("L")
    assert [c.content for c in board.columns[1].cards] == ["old", "new"]


def test_ctrl_l_moves_column_right():
    board = make_board("Todo", "Done")
    view, _, _, _, _ = make_screen(board)
    view.handle_key_press(chr(ord("l") & 0x1F))
    assert [c.title for c in board.columns] == ["Done", "Todo"]
    assert view.focused_index == 1
    view.handle_key_press(chr(ord("p") & 0x1F))
    assert [c.title for c in board.columns] == ["Todo", "Done"]
    assert view.focused_index == 0


def test_ctrl_h_on_first_column_keeps_order():
    board = make_board("Todo", "Done")
    view, store, _, _, _ = make_screen(board)
    view.handle_key_press(chr(ord("h") & 0x1F))
    assert [c.title for c in board.columns] == ["Todo", "Done"]
    assert store.writes == 0


def test_create_column_from_input():
    board = make_board("Todo")
    view, _, keys, _, _ = make_screen(board)
    feed(keys, "i  Review \n")
    view.handle_key_press("C")
    assert [c.title for c in board.columns] == ["Todo", "Review"]
    assert view.columns[view.focused_index].column.title == "Review"


def test_cancelled_column_input_creates_nothing():
    board = make_board("Todo")
    view, store, keys, _, _ = make_screen(board)
    feed(keys, "iAbc\x1bq")
    view.handle_key_press("C")
    assert [c.title for c in board.columns] == ["Todo"]
    assert store.writes == 0


def test_delete_column_confirmed_and_refused():
    board = make_board("Todo", "Done")
    view, _, keys, _, created = make_screen(board)
    feed(keys, "n")
    view.handle_key_press("D")
    assert len(board.columns) == 2
    assert any('Delete column "Todo"?' in w.writes for w in created)
    feed(keys, "y")
    view.handle_key_press("D")
    assert [c.title for c in board.columns] == ["Done"]
    assert len(view.columns) == 1


def test_create_card_in_focused_column():
    board = make_board("Todo")
    board.columns[0].add_card(Card("first"))
    view, _, keys, _, _ = make_screen(board)
    feed(keys, "iAdd\n")
    view.handle_key_press("c")
    assert [c.content for c in board.columns[0].cards] == ["first", "Add"]
    assert view.columns[0].cards_count == 2


def test_edit_focused_card():
    board = make_board("Todo")
    board.columns[0].add_card(Card("Old"))
    view, store, keys, _, _ = make_screen(board)
    feed(keys, "SNew\n")
    view.handle_key_press("e")
    assert board.columns[0].cards[0].content == "New"
    assert store.writes == 1


def test_delete_focused_card_after_confirmation():
    board = make_board("Todo")
    board.columns[0].add_card(Card("a"))
    board.columns[0].add_card(Card("b"))
    view, _, keys, _, _ = make_screen(board)
    feed(keys, "y")
    view.handle_key_press("d")
    assert [c.content for c in board.columns[0].cards] == ["b"]
    assert view.columns[0].focused_index == 0


def test_move_card_down_in_column():
    board = make_board("Todo")
    board.columns[0].add_card(Card("a"))
    board.columns[0].add_card(Card("b"))
    view, _, _, _, _ = make_screen(board)
    view.handle_key_press("J")
    assert [c.content for c in board.columns[0].cards] == ["b", "a"]
    assert view.columns[0].absolute_focused_index() == 1


def test_focus_next_card():
    board = make_board("Todo")
    board.columns[0].add_card(Card("a"))
    board.columns[0].add_card(Card("b"))
    view, _, _, _, _ = make_screen(board)
    view.handle_key_press("j")
    assert view.columns[0].absolute_focused_index() == 1
    view.handle_key_press("g")
    assert view.columns[0].absolute_focused_index() == 0


def test_quit_from_menu_returns_true():
    view, _, _, _, _ = make_screen(make_board("Todo"))
    assert view.handle_key_press("q") is True


def test_quit_from_command_line_exits():
    view, _, _, _, _ = make_screen(make_board("Todo"), from_tui=False)
    with pytest.raises(SystemExit):
        view.handle_key_press("q")


def test_unknown_key_keeps_screen_open():
    view, _, _, _, _ = make_screen(make_board("Todo"))
    assert view.handle_key_press("z") is False


def test_missing_board_raises():
    keys = deque()
    screen = FakeWindow(keys, 40, 120)
    store = RecordingStore([make_board("Todo")])
    with pytest.raises(KeyError):
        BoardScreen(
            "Nope", store, Config(), True, screen,
            lambda h, w, y, x: FakeWindow(keys, h, w, y, x),
        )