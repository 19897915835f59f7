import logging

from cell_widget import CellWidget
from grid_state import GridState
from navigation import NavigationController

log = logging.getLogger("revealgrid.editor")


class TableEditor:
    """The progressive table component: state, navigation and widget wiring."""

    def __init__(self, records, scheduler, set_status_cb=None):
        self.state = GridState(records)
        self.scheduler = scheduler
        self._set_status = set_status_cb or (lambda *_: None)
        self.nav = NavigationController(self.state, self.scheduler.request_focus)

    # ---------- lifecycle ----------
    def mount(self):
        return self.nav.focus_initial()

    def set_records(self, records):
        self.state.set_records(records)
        self.nav.focus_initial()
        self._set_status(
            f"Loaded {self.state.row_count} records x {self.state.col_count} columns", 3
        )

    def set_headers(self, labels):
        self.state.set_headers(labels)
        self.nav.focus_initial()

    # ---------- handlers ----------
    def on_key_down(self, ch):
        return self.nav.handle_key(ch)

    def on_change_header(self, col, text):
        return self.state.set_header_label(col, text)

    def on_change_cell(self, row, col, text):
        return self.state.set_cell_value(row, col, text)

    def _on_change(self, row, col, text):
        if row == 0:
            self.on_change_header(col, text)
        else:
            self.on_change_cell(row, col, text)

    # ---------- widgets ----------
    def make_widget(self, row, col):
        on_change = None if self.state.is_id_column(col) else self._on_change
        return CellWidget(
            row,
            col,
            get_text=self.state.cell_text,
            on_key_down=self.on_key_down,
            on_change=on_change,
        )

    def handle_key(self, ch, focused_widget):
        """Route a keystroke to the widget that owns keyboard focus."""
        if focused_widget is None:
            return False
        return focused_widget.handle_key(ch)
