import logging

log = logging.getLogger("revealgrid.focus")


class FocusScheduler:
    """Defers focus transfers until after the next draw.

    Only the most recent request is kept, so a burst of moves between two
    frames focuses the last destination and never an intermediate cell.
    """

    def __init__(self):
        self.pending: tuple[int, int] | None = None

    @property
    def has_pending(self) -> bool:
        return self.pending is not None

    def request_focus(self, row: int, col: int):
        self.pending = (row, col)

    def flush(self, registry, current=None):
        """Focus the pending target through ``registry``.

        Returns the newly focused widget, or None when nothing was pending or
        the target no longer resolves (the request is dropped either way).
        """
        if self.pending is None:
            return None
        row, col = self.pending
        self.pending = None

        widget = registry.get(row, col)
        if widget is None:
            log.debug("dropped focus request for (%d, %d)", row, col)
            return None

        if current is not None and current is not widget:
            current.blur()
        widget.focus()
        return widget
