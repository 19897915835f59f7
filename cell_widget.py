import curses

DIRECTIONAL_KEYS = (curses.KEY_RIGHT, curses.KEY_DOWN, curses.KEY_LEFT, curses.KEY_UP)


class CellWidget:
    """Editable text widget bound to one header label or body cell.

    The text itself lives in the grid state and is read through ``get_text``;
    the widget only keeps a caret and reports edits through
    ``on_change(row, col, text)``. Read-only widgets have no ``on_change`` and
    ignore editing keys, but still pass directional keys to ``on_key_down``.
    """

    def __init__(self, row, col, get_text, on_key_down, on_change=None):
        self.row = row
        self.col = col
        self.get_text = get_text
        self.on_key_down = on_key_down
        self.on_change = on_change
        self.caret = 0
        self.hscroll = 0
        self.focused = False

    @property
    def read_only(self) -> bool:
        return self.on_change is None

    @property
    def text(self) -> str:
        return self.get_text(self.row, self.col)

    def focus(self):
        self.focused = True
        self.caret = len(self.text)
        self.hscroll = 0

    def blur(self):
        self.focused = False
        self.hscroll = 0

    # ---------- keys ----------
    def handle_key(self, ch: int) -> bool:
        if ch in DIRECTIONAL_KEYS:
            return bool(self.on_key_down(ch))
        if self.read_only:
            return False

        text = self.text
        self.caret = max(0, min(self.caret, len(text)))
        new_text = text

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.caret > 0:
                new_text = text[: self.caret - 1] + text[self.caret :]
                self.caret -= 1
        elif ch == curses.KEY_DC:
            new_text = text[: self.caret] + text[self.caret + 1 :]
        elif ch in (curses.KEY_HOME, 1):  # Ctrl+A
            self.caret = 0
            return True
        elif ch in (curses.KEY_END, 5):  # Ctrl+E
            self.caret = len(text)
            return True
        elif ch == 21:  # Ctrl+U
            new_text = text[self.caret :]
            self.caret = 0
        elif ch == 11:  # Ctrl+K
            new_text = text[: self.caret]
        elif 32 <= ch <= 126:
            new_text = text[: self.caret] + chr(ch) + text[self.caret :]
            self.caret += 1
        else:
            return False

        if new_text != text:
            self.on_change(self.row, self.col, new_text)
        return True

    # ---------- display ----------
    def visible_text(self, width: int) -> str:
        """Slice of the text that fits ``width`` and keeps the caret in view."""
        text = self.text
        width = max(1, width)
        if not self.focused:
            return text[:width]
        caret = max(0, min(self.caret, len(text)))
        if caret < self.hscroll:
            self.hscroll = caret
        elif caret > self.hscroll + width - 1:
            self.hscroll = caret - (width - 1)
        self.hscroll = max(0, min(self.hscroll, max(0, len(text) - width + 1)))
        return text[self.hscroll : self.hscroll + width]

    def caret_offset(self) -> int:
        return self.caret - self.hscroll
