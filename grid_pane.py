# ~/Apps/revealgrid/grid_pane.py
import curses

from widget_registry import WidgetRegistry


class GridPane:
    PAIR_CELL_TEXT = 1
    PAIR_ID_COLUMN = 2
    PAIR_CELL_FOCUSED = 3
    MAX_COL_WIDTH = 40
    PLACEHOLDER_WIDTH = 4
    MIN_COL_WIDTH = 3

    def __init__(self, editor, registry=None, max_col_width=None, placeholder_width=None):
        self.editor = editor
        self.registry = registry if registry is not None else WidgetRegistry()
        self.max_col_width = max_col_width or self.MAX_COL_WIDTH
        self.placeholder_width = placeholder_width or self.PLACEHOLDER_WIDTH
        self.id_attr = curses.A_DIM
        self.focus_attr = curses.A_REVERSE
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_ID_COLUMN, curses.COLOR_CYAN, -1)
            curses.init_pair(
                self.PAIR_CELL_FOCUSED, curses.COLOR_BLACK, curses.COLOR_WHITE
            )
            self.id_attr = curses.color_pair(self.PAIR_ID_COLUMN) | curses.A_DIM
            self.focus_attr = curses.color_pair(self.PAIR_CELL_FOCUSED)
        except curses.error:
            pass

        self.focused_widget = None
        self.row_offset = 0
        self.col_offset = 0
        self.caret_yx = None

    @property
    def state(self):
        return self.editor.state

    # ---------- widgets ----------
    def sync_widgets(self):
        """Keep the registry shaped like the grid and bound to revealed cells."""
        state = self.state
        self.registry.resize(state.total_rows, state.total_cols)
        for r in range(state.total_rows):
            for c in range(state.total_cols):
                if not state.is_revealed(r, c):
                    self.registry.unbind(r, c)
                elif self.registry.get(r, c) is None:
                    self.registry.bind(r, c, self.editor.make_widget(r, c))

        fw = self.focused_widget
        if fw is not None and self.registry.get(fw.row, fw.col) is not fw:
            fw.blur()
            self.focused_widget = None

    def apply_focus(self, scheduler):
        """Run the deferred focus request; returns True when focus moved."""
        widget = scheduler.flush(self.registry, current=self.focused_widget)
        if widget is None:
            return False
        moved = widget is not self.focused_widget
        self.focused_widget = widget
        return moved

    # ---------- layout ----------
    def visible_row_count(self) -> int:
        """Rows whose first cell is revealed; later rows are left out."""
        state = self.state
        if state.total_cols == 0 or state.revealed_count == 0:
            return 0
        return min(state.total_rows, (state.revealed_count - 1) // state.total_cols + 1)

    def get_col_width(self, col_idx):
        state = self.state
        if col_idx < 0 or col_idx >= state.total_cols:
            return self.max_col_width
        max_len = None
        for r in range(state.total_rows):
            if not state.is_revealed(r, col_idx):
                break
            max_len = max(max_len or 0, len(state.cell_text(r, col_idx)))
        if max_len is None:
            return self.placeholder_width
        return max(self.MIN_COL_WIDTH, min(self.max_col_width, max_len + 2))

    def _focus_target(self):
        fw = self.focused_widget
        if fw is not None:
            return fw.row, fw.col
        return self.state.cursor

    def adjust_viewport(self, widths, avail_w, avail_h, visible_rows):
        target_row, target_col = self._focus_target()

        # columns
        if target_col < self.col_offset:
            self.col_offset = target_col
        while self.col_offset < target_col:
            used = sum(w + 1 for w in widths[self.col_offset : target_col + 1])
            if used <= avail_w:
                break
            self.col_offset += 1
        self.col_offset = max(0, min(self.col_offset, max(0, len(widths) - 1)))

        # body rows (the header is always pinned)
        body_h = max(1, avail_h - 1)
        if target_row >= 1:
            body_idx = target_row - 1
            if body_idx < self.row_offset:
                self.row_offset = body_idx
            elif body_idx >= self.row_offset + body_h:
                self.row_offset = body_idx - body_h + 1
        max_offset = max(0, visible_rows - 1 - body_h)
        self.row_offset = max(0, min(self.row_offset, max_offset))

    # ---------- rendering ----------
    def _cell_attr(self, row, col, focused):
        attr = curses.A_NORMAL
        if self.state.is_id_column(col):
            attr |= self.id_attr
        if row == 0:
            attr |= curses.A_BOLD
        if focused:
            attr |= self.focus_attr
        return attr

    def draw(self, win):
        win.erase()
        self.caret_yx = None
        self.sync_widgets()

        state = self.state
        h, w = win.getmaxyx()
        visible_rows = self.visible_row_count()
        if visible_rows == 0:
            win.refresh()
            return

        widths = [self.get_col_width(c) for c in range(state.total_cols)]
        self.adjust_viewport(widths, w, h, visible_rows)

        body_h = max(0, h - 1)
        rows = [0] + list(
            range(1 + self.row_offset, min(visible_rows, 1 + self.row_offset + body_h))
        )

        for y, r in enumerate(rows):
            x = 0
            for c in range(self.col_offset, state.total_cols):
                if x >= w:
                    break
                cw = min(widths[c], max(1, w - x - 1))
                widget = self.registry.get(r, c) if state.is_revealed(r, c) else None
                if widget is None:
                    # unrevealed cell: inert blank placeholder
                    text = " " * cw
                    attr = curses.A_NORMAL
                else:
                    focused = widget is self.focused_widget
                    text = widget.visible_text(cw).ljust(cw)
                    attr = self._cell_attr(r, c, focused)
                    if focused and not widget.read_only:
                        self.caret_yx = (y, x + widget.caret_offset())
                try:
                    win.addnstr(y, x, text, cw, attr)
                except curses.error:
                    pass
                x += cw + 1

        if self.caret_yx is not None:
            try:
                win.move(*self.caret_yx)
            except curses.error:
                self.caret_yx = None

        win.refresh()
