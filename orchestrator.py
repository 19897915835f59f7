# ~/Apps/revealgrid/orchestrator.py
import curses
import logging
import time

from focus_scheduler import FocusScheduler
from grid_pane import GridPane
from screen_layout import ScreenLayout
from status_bar import render_hints, render_status
from table_editor import TableEditor
from widget_registry import WidgetRegistry

log = logging.getLogger("revealgrid.orchestrator")

KEY_CTRL_C = 3
KEY_CTRL_R = 18
KEY_CTRL_X = 24


class Orchestrator:
    def __init__(self, stdscr, records, config, source=None, reload_records=None):
        self.stdscr = stdscr
        curses.curs_set(1)
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.config = config
        self.source = source
        self._reload_records = reload_records

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        self.layout = ScreenLayout(stdscr, show_hints=config.get("SHOW_KEY_HINTS", True))
        # keys are read from the table window so the cursor stays on the caret
        self.layout.table_win.keypad(True)
        self.layout.table_win.timeout(100)

        self.scheduler = FocusScheduler()
        self.registry = WidgetRegistry()
        self.editor = TableEditor(records, self.scheduler, self._set_status)
        self.grid = GridPane(
            self.editor,
            self.registry,
            max_col_width=config.get("MAX_COL_WIDTH"),
            placeholder_width=config.get("PLACEHOLDER_WIDTH"),
        )

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _reload(self):
        if self._reload_records is None:
            self._set_status("Nothing to reload", 3)
            return
        try:
            records = self._reload_records()
        except Exception as e:
            log.debug("reload failed: %s", e)
            self._set_status(f"Reload failed: {e}"[: self.layout.W - 2], 4)
            return
        self.editor.set_records(records)

    # ---------------- UI ----------------

    def _draw_status(self):
        state = self.editor.state
        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "source": self.source,
                "total_rows": state.total_rows,
                "total_cols": state.total_cols,
                "revealed": state.revealed_count,
                "total_cells": state.total_cells,
                "cursor": state.cursor,
            },
            w,
        )
        try:
            sw.addnstr(0, 0, text, max(0, w - 1))
        except curses.error:
            pass
        sw.refresh()

        hw = self.layout.hint_win
        if hw is not None:
            hw.erase()
            _, hw_w = hw.getmaxyx()
            try:
                hw.addnstr(0, 0, render_hints(hw_w), max(0, hw_w - 1), curses.A_DIM)
            except curses.error:
                pass
            hw.refresh()

    def redraw(self):
        # grid last so the terminal cursor ends on the focused cell's caret
        self._draw_status()
        self.grid.draw(self.layout.table_win)
        try:
            curses.curs_set(1 if self.grid.caret_yx is not None else 0)
        except curses.error:
            pass

    def frame(self):
        """Draw, then run deferred focus now that just-revealed cells exist."""
        self.redraw()
        if self.grid.apply_focus(self.scheduler):
            self.redraw()

    # ---------------- main loop ----------------

    def handle_key(self, ch):
        if ch in (KEY_CTRL_C, KEY_CTRL_X):
            return False
        if ch == KEY_CTRL_R:
            self._reload()
            return True
        self.editor.handle_key(ch, self.grid.focused_widget)
        return True

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.editor.mount()
        self.frame()

        while True:
            ch = self.layout.table_win.getch()

            if ch == -1:
                self.frame()
                continue

            if not self.handle_key(ch):
                break

            self.frame()
