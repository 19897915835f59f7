import curses

from cell_widget import CellWidget


class Store:
    def __init__(self, text):
        self.cells = {(1, 1): text}
        self.changes = []
        self.keys = []

    def get_text(self, row, col):
        return self.cells.get((row, col), "")

    def on_change(self, row, col, text):
        self.changes.append((row, col, text))
        self.cells[(row, col)] = text

    def on_key_down(self, ch):
        self.keys.append(ch)
        return True


def _widget(text, read_only=False):
    store = Store(text)
    widget = CellWidget(
        1,
        1,
        get_text=store.get_text,
        on_key_down=store.on_key_down,
        on_change=None if read_only else store.on_change,
    )
    widget.focus()
    return widget, store


def test_focus_puts_caret_at_end():
    widget, _ = _widget("Oslo")
    assert widget.focused
    assert widget.caret == 4


def test_typing_appends_at_caret():
    widget, store = _widget("Osl")
    widget.handle_key(ord("o"))
    assert store.get_text(1, 1) == "Oslo"
    assert store.changes == [(1, 1, "Oslo")]
    assert widget.caret == 4


def test_backspace_and_delete():
    widget, store = _widget("abcd")
    widget.handle_key(curses.KEY_BACKSPACE)
    assert store.get_text(1, 1) == "abc"
    widget.handle_key(curses.KEY_HOME)
    widget.handle_key(curses.KEY_DC)
    assert store.get_text(1, 1) == "bc"
    assert widget.caret == 0


def test_backspace_at_start_changes_nothing():
    widget, store = _widget("ab")
    widget.handle_key(1)  # Ctrl+A
    assert widget.handle_key(127)
    assert store.changes == []


def test_ctrl_u_and_ctrl_k_kill_text():
    widget, store = _widget("hello world")
    widget.caret = 5
    widget.handle_key(11)  # Ctrl+K
    assert store.get_text(1, 1) == "hello"
    widget.handle_key(21)  # Ctrl+U
    assert store.get_text(1, 1) == ""
    assert widget.caret == 0


def test_arrows_go_to_navigation_handler_not_the_text():
    widget, store = _widget("abc")
    assert widget.handle_key(curses.KEY_LEFT)
    assert store.keys == [curses.KEY_LEFT]
    assert widget.caret == 3
    assert store.changes == []


def test_read_only_widget_ignores_edits_but_navigates():
    widget, store = _widget("1", read_only=True)
    assert widget.read_only
    assert not widget.handle_key(ord("9"))
    assert not widget.handle_key(curses.KEY_BACKSPACE)
    assert store.get_text(1, 1) == "1"
    assert widget.handle_key(curses.KEY_DOWN)
    assert store.keys == [curses.KEY_DOWN]


def test_visible_text_scrolls_to_keep_caret_in_view():
    widget, _ = _widget("abcdefghij")
    assert widget.visible_text(4) == "hij"
    assert widget.caret_offset() == 3
    widget.handle_key(curses.KEY_HOME)
    assert widget.visible_text(4) == "abcd"
    assert widget.caret_offset() == 0


def test_blurred_widget_shows_leading_text():
    widget, _ = _widget("abcdefghij")
    widget.blur()
    assert widget.visible_text(4) == "abcd"
