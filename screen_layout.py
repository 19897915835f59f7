import curses


class ScreenLayout:
    def __init__(self, stdscr, show_hints=True):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: table (main), status bar (1 line), optional key-hint line
        self.status_h = 1
        self.hint_h = 1 if show_hints else 0

        self.table_h = max(1, self.H - self.status_h - self.hint_h)

        # the table owns the terminal cursor (caret of the focused cell)
        self.table_win = curses.newwin(self.table_h, self.W, 0, 0)

        self.status_win = curses.newwin(self.status_h, self.W, self.table_h, 0)
        # do not let status bar steal cursor
        self.status_win.leaveok(True)

        self.hint_win = None
        if self.hint_h:
            self.hint_win = curses.newwin(
                self.hint_h, self.W, self.table_h + self.status_h, 0
            )
            self.hint_win.leaveok(True)
