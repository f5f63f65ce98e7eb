"""Element lookup on forward-only iterators.

These helpers fetch the n-th element of a single pass iteration without
materializing it. Only the most recent element is retained, so infinite
iterators are fine. A cursor is any iterator; it is consumed up to and
including the requested position and cannot be restarted.
"""

__all__ = [
    "cursor_element_at",
    "cursor_first_element",
    "element_at",
    "first_element",
]

import mirror


def cursor_element_at(cursor, index):
    """Get the element at a zero based position of an iterator.

    Args:
        cursor: (Iterator) Iterator to advance
        index: (int) Position of the element to return

    Returns:
        The element at position `index`

    Raises:
        ArgumentRangeError: If index is negative or the iterator is
            exhausted before reaching it
    """
    if index < 0:
        raise mirror.ArgumentRangeError("index", index)
    element = None
    steps = 0
    for element in cursor:
        steps += 1
        if steps > index:
            break
    if steps <= index:
        raise mirror.ArgumentRangeError("index", index)
    return element


def cursor_first_element(cursor):
    """Get the first element of an iterator.

    Raises:
        ArgumentRangeError: If the iterator is empty
    """
    return cursor_element_at(cursor, 0)


def element_at(iterable, index):
    """Get the element at a zero based position of an iterable.

    A fresh iterator is taken from the iterable.

    Raises:
        ArgumentNullError: If iterable is None
        ArgumentRangeError: If index is negative or past the end
    """
    mirror.argument_not_none(iterable, "iterable")
    return cursor_element_at(iter(iterable), index)


def first_element(iterable):
    """Get the first element of an iterable.

    Raises:
        ArgumentNullError: If iterable is None
        ArgumentRangeError: If the iterable is empty
    """
    mirror.argument_not_none(iterable, "iterable")
    return cursor_element_at(iter(iterable), 0)
