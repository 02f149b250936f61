import pytest

from kabmat.scrollable import ScrollableWindow


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, shown, window):
        self.calls.append((list(shown), window))


class FakeWindow:
    def __init__(self):
        self.erased = 0

    def erase(self):
        self.erased += 1


@pytest.fixture
def items():
    return list(range(10))


def test_scroll_to_top_shows_first_items(items):
    view = ScrollableWindow(items, Recorder(), 3)
    view.scroll_to_top()
    assert view.current_window() == items[:3]
    assert view.offset == 0


def test_scroll_down_moves_one(items):
    view = ScrollableWindow(items, Recorder(), 3)
    view.scroll_to_top()
    view.scroll_down()
    assert view.current_window() == items[1:4]


def test_scroll_down_stops_at_bottom(items):
    view = ScrollableWindow(items, Recorder(), 3)
    view.scroll_to_bottom()
    view.scroll_down()
    assert view.current_window() == items[-3:]


def test_scroll_up_stops_at_top(items):
    view = ScrollableWindow(items, Recorder(), 3)
    view.scroll_to_top()
    view.scroll_up()
    assert view.current_window() == items[:3]


def test_scroll_up_after_bottom(items):
    view = ScrollableWindow(items, Recorder(), 3)
    view.scroll_to_bottom()
    view.scroll_up()
    assert view.current_window() == items[-4:-1]


def test_scroll_to_offset_clamps(items):
    view = ScrollableWindow(items, Recorder(), 3)
    view.scroll_to_offset(100)
    assert view.current_window() == items[-3:]
    view.scroll_to_offset(2)
    assert view.current_window() == items[2:5]


def test_fewer_items_than_window():
    data = ["a", "b"]
    view = ScrollableWindow(data, Recorder(), 5)
    view.scroll_to_bottom()
    assert view.current_window() == data
    view.scroll_to_offset(1)
    assert view.current_window() == data


def test_draw_passes_visible_items_and_window(items):
    recorder = Recorder()
    window = FakeWindow()
    view = ScrollableWindow(items, recorder, 4, window)
    view.scroll_to_top()
    assert recorder.calls == [(items[:4], window)]
    assert window.erased == 1


def test_no_redraw_skips_callback(items):
    recorder = Recorder()
    view = ScrollableWindow(items, recorder, 4)
    view.scroll_to_bottom(redraw=False)
    view.scroll_up(False)
    assert recorder.calls == []
    assert view.current_window() == items[-5:-1]


def test_empty_list_draws_nothing():
    recorder = Recorder()
    view = ScrollableWindow([], recorder, 4)
    view.scroll_down()
    assert recorder.calls == [([], None)]
    assert view.current_window() == []


def test_callable_source_follows_replacement():
    holder = {"items": [1, 2, 3]}
    view = ScrollableWindow(lambda: holder["items"], Recorder(), 2)
    view.scroll_to_bottom()
    holder["items"] = [7, 8, 9, 10]
    view.scroll_to_bottom()
    assert view.current_window() == [9, 10]


def test_window_size_never_exceeds_maximum(items):
    view = ScrollableWindow(items, Recorder(), 4)
    view.scroll_to_top()
    for _ in range(20):
        view.scroll_down()
        assert len(view.current_window()) == 4