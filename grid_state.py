import logging

from schema_deriver import (
    ID_COLUMN,
    ID_COLUMN_INDEX,
    derive_columns,
    derive_headers,
    derive_values,
)

log = logging.getLogger("revealgrid.state")


class GridState:
    """Headers, body values, reveal frontier and cursor for one table.

    Grid row 0 is the header row, rows 1..row_count are the records. Cells are
    ordered row-major through ``linear_index``; a cell is revealed when its
    index is below ``revealed_count``.
    """

    def __init__(self, records=None):
        self.records: list = []
        self.columns: list[str] = []
        self.headers: list[str] = []
        self.values: list[list[str]] = []
        self.revealed_count = 0
        self.cursor: tuple[int, int] = (0, 0)
        self.set_records(records)

    # ---------- shape ----------
    @property
    def row_count(self) -> int:
        return len(self.values)

    @property
    def col_count(self) -> int:
        return len(self.headers)

    @property
    def total_rows(self) -> int:
        return self.row_count + 1

    @property
    def total_cols(self) -> int:
        return self.col_count

    @property
    def total_cells(self) -> int:
        return self.total_rows * self.total_cols

    @property
    def is_empty(self) -> bool:
        return self.total_cells == 0

    # ---------- indexing ----------
    def linear_index(self, row: int, col: int) -> int:
        return row * self.total_cols + col

    def cell_at(self, index: int) -> tuple[int, int]:
        if self.total_cols == 0:
            return (0, 0)
        return self.clamp(index // self.total_cols, index % self.total_cols)

    def clamp(self, row: int, col: int) -> tuple[int, int]:
        row = max(0, min(self.total_rows - 1, row))
        col = max(0, min(max(0, self.total_cols - 1), col))
        return (row, col)

    def is_revealed(self, row: int, col: int) -> bool:
        return self.linear_index(row, col) < self.revealed_count

    def is_id_column(self, col: int) -> bool:
        return col == ID_COLUMN_INDEX

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.total_rows and 0 <= col < self.total_cols

    def cell_text(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            return ""
        if row == 0:
            return self.headers[col]
        return self.values[row - 1][col]

    # ---------- frontier ----------
    def reveal_through(self, index: int) -> int:
        grown = min(max(self.revealed_count, index + 1), self.total_cells)
        if grown != self.revealed_count:
            log.debug("reveal %d -> %d", self.revealed_count, grown)
            self.revealed_count = grown
        return self.revealed_count

    # ---------- mutators ----------
    def set_header_label(self, col: int, text: str) -> bool:
        if self.is_id_column(col):
            log.debug("ignored edit of %s header", ID_COLUMN)
            return False
        if not 0 <= col < self.col_count:
            return False
        self.headers[col] = text
        return True

    def set_cell_value(self, grid_row: int, col: int, text: str) -> bool:
        if grid_row == 0:
            return False
        if self.is_id_column(col):
            log.debug("ignored edit of %s cell in row %d", ID_COLUMN, grid_row)
            return False
        if not self.in_bounds(grid_row, col):
            return False
        self.values[grid_row - 1][col] = text
        return True

    def reset_for_new_shape(self, columns, records):
        self.records = list(records or [])
        self.columns = list(columns or [])
        self.headers = derive_headers(self.columns)
        self.values = derive_values(self.records, self.columns)
        self.revealed_count = 0 if self.is_empty else 1
        self.cursor = (0, 0)
        log.debug(
            "structural reset: %d rows x %d cols", self.total_rows, self.total_cols
        )

    def set_records(self, records):
        records = list(records or [])
        self.reset_for_new_shape(derive_columns(records), records)

    def set_headers(self, labels):
        """Apply a new header set; a shape change, so the frontier resets."""
        labels = [str(label) for label in (labels or [])]
        columns = list(self.columns)
        headers = derive_headers(columns)
        for col in range(len(headers)):
            if self.is_id_column(col):
                continue
            if col < len(labels):
                headers[col] = labels[col]
        self.reset_for_new_shape(columns, self.records)
        self.headers = headers
