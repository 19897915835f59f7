import os
import time

KEY_HINTS = (
    "Keys: Right reveal/move to next cell, Down reveal next row "
    "(header counts as row 1), Left/Up move back | ^R reload | ^X quit"
)


def render_status(context, width):
    """
    context keys: status_msg, status_until, source, total_rows, total_cols,
                   revealed, total_cells, cursor
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        source = context.get("source") or "sample"
        if source != "sample":
            source = os.path.basename(source)
        rows = context.get("total_rows", 0)
        cols = context.get("total_cols", 0)
        revealed = context.get("revealed", 0)
        total = context.get("total_cells", 0)
        r, c = context.get("cursor", (0, 0))
        text = (
            f" {source} | {rows}x{cols} | revealed {revealed}/{total} | cell {r},{c}"
        )

    return text.ljust(width)[:width]


def render_hints(width):
    return f" {KEY_HINTS}".ljust(width)[:width]
