import curses
import logging

log = logging.getLogger("revealgrid.navigation")


class NavigationController:
    """Turns directional input into frontier growth and cursor movement.

    Moving forward (right/down) may reveal cells; moving back (left/up) only
    travels inside the revealed region. Every successful move asks for focus
    on the destination through ``request_focus(row, col)``.
    """

    def __init__(self, state, request_focus):
        self.state = state
        self.request_focus = request_focus

    def _move_to(self, row, col, reason):
        self.state.cursor = (row, col)
        log.debug("%s -> (%d, %d), revealed=%d", reason, row, col, self.state.revealed_count)
        self.request_focus(row, col)
        return True

    def _max_index(self):
        return max(self.state.total_cells - 1, 0)

    def _cursor_index(self):
        r, c = self.state.cursor
        return self.state.linear_index(r, c)

    # ---------- commands ----------
    def advance(self):
        if self.state.is_empty:
            return False
        target = min(self._cursor_index() + 1, self._max_index())
        self.state.reveal_through(target)
        r, c = self.state.cell_at(target)
        return self._move_to(r, c, "advance")

    def advance_row(self):
        if self.state.is_empty:
            return False
        next_row = min(self.state.cursor[0] + 1, self.state.total_rows - 1)
        end_of_row = self.state.linear_index(next_row, self.state.total_cols - 1)
        self.state.reveal_through(end_of_row)
        return self._move_to(next_row, 0, "advance_row")

    def retreat(self):
        if self.state.is_empty:
            return False
        prev = max(self._cursor_index() - 1, 0)
        if prev >= self.state.revealed_count:
            return False
        r, c = self.state.cell_at(prev)
        return self._move_to(r, c, "retreat")

    def retreat_row(self):
        if self.state.is_empty:
            return False
        row, col = self.state.cursor
        prev_row = max(row - 1, 0)
        if self.state.linear_index(prev_row, col) >= self.state.revealed_count:
            return False
        return self._move_to(prev_row, col, "retreat_row")

    def focus_initial(self):
        if self.state.is_empty:
            return False
        self.request_focus(0, 0)
        return True

    # ---------- key dispatch ----------
    def handle_key(self, ch):
        if ch == curses.KEY_RIGHT:
            self.advance()
        elif ch == curses.KEY_DOWN:
            self.advance_row()
        elif ch == curses.KEY_LEFT:
            self.retreat()
        elif ch == curses.KEY_UP:
            self.retreat_row()
        else:
            return False
        return True
