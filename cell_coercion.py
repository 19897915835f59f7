import numpy as np
import pandas as pd


def is_missing(value):
    if value is None:
        return True
    try:
        missing = pd.isna(value)
    except (TypeError, ValueError):
        return False
    # pd.isna on list-likes returns an array; only scalars count as missing
    return isinstance(missing, (bool, np.bool_)) and bool(missing)


def stringify_cell(value):
    """Display text for a record value.

    Missing values become ``""``, booleans ``true``/``false``, and integral
    floats drop their ``.0``. Everything else is ``str(value)``: ``inf`` stays
    ``inf``, integral floats of 1e21 and above print every digit, and lists
    keep their Python form (``[1, 2]``).
    """
    if is_missing(value):
        return ""

    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, float) and value.is_integer():
        return str(int(value))

    return str(value)
