"""Helpers for None-terminated tables of strings."""


def table_len(table):
    """Number of entries before the first None; a missing table has none."""
    if table is None:
        return 0
    count = 0
    for entry in table:
        if entry is None:
            break
        count += 1
    return count


def table_clear(table):
    """Remove every entry of ``table`` in place."""
    if table is None:
        return
    table.clear()