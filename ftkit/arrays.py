"""Applying functions over sequences."""


def array_foreach(items, func):
    """Call ``func`` on each item; does nothing without items or a function."""
    if not items or func is None:
        return
    for item in items:
        func(item)


def array_map(items, func):
    """New list of ``func`` applied to each item.

    Without items or a function, ``items`` itself is returned.
    """
    if not items or func is None:
        return items
    return [func(item) for item in items]