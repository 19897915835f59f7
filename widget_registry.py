class WidgetRegistry:
    """Row/column table of live cell widgets, owned by the render layer."""

    def __init__(self):
        self._table: list[list] = []

    @property
    def shape(self) -> tuple[int, int]:
        rows = len(self._table)
        cols = len(self._table[0]) if rows else 0
        return rows, cols

    def resize(self, total_rows: int, total_cols: int):
        total_rows = max(0, total_rows)
        total_cols = max(0, total_cols)
        old = self._table
        self._table = [
            [
                old[r][c] if r < len(old) and c < len(old[r]) else None
                for c in range(total_cols)
            ]
            for r in range(total_rows)
        ]

    def _in_range(self, row: int, col: int) -> bool:
        return 0 <= row < len(self._table) and 0 <= col < len(self._table[row])

    def bind(self, row: int, col: int, widget) -> bool:
        if not self._in_range(row, col):
            return False
        self._table[row][col] = widget
        return True

    def unbind(self, row: int, col: int):
        if self._in_range(row, col):
            self._table[row][col] = None

    def get(self, row: int, col: int):
        if not self._in_range(row, col):
            return None
        return self._table[row][col]

    def bound_count(self) -> int:
        return sum(1 for row in self._table for w in row if w is not None)
