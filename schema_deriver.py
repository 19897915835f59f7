from cell_coercion import stringify_cell

ID_COLUMN = "ID"
ID_COLUMN_INDEX = 0


def _iter_records(records):
    # keys are compared as text, so 1 and "1" name the same column
    for record in records or []:
        if isinstance(record, dict):
            yield {str(k): v for k, v in record.items()}
        else:
            yield {}


def unique_ordered_keys(records) -> list[str]:
    seen = set()
    keys: list[str] = []
    for record in _iter_records(records):
        for key in record.keys():
            if key in seen:
                continue
            seen.add(key)
            keys.append(key)
    return keys


def derive_columns(records) -> list[str]:
    """Column names for a record list.

    The synthetic ID column always sits at index 0, followed by every record
    key in order of first appearance. An empty or missing record list still
    yields the ID column.
    """
    return [ID_COLUMN] + unique_ordered_keys(records)


def derive_headers(columns) -> list[str]:
    return [str(name) for name in columns]


def row_ordinal(body_row: int) -> str:
    return str(body_row + 1)


def derive_values(records, columns) -> list[list[str]]:
    values: list[list[str]] = []
    for body_row, record in enumerate(_iter_records(records)):
        row = []
        for col, key in enumerate(columns):
            if col == ID_COLUMN_INDEX:
                row.append(row_ordinal(body_row))
            else:
                row.append(stringify_cell(record.get(str(key))))
        values.append(row)
    return values
