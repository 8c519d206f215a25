"""
Index sequences for Fenwick trees stored in one-based arrays (slot 0
unused). This is the textbook form of the bit tricks; see zero_based for
the form used by fenwick.array.
"""
from fenwick.config import ALL_ONES, ONE_BASED_LIMIT, as_word


def next_down(x):
    # clear the lowest set bit
    return x & ((x - 1) & ALL_ONES)


def next_up(x):
    # carry into the lowest zero above the lowest set bit
    return ((x | ((x - 1) & ALL_ONES)) + 1) & ALL_ONES


def down(init):
    """
    Yields the nodes whose sum is a[1] + ... + a[init], starting at init.
    The sequence has popcount(init) elements.
    """
    init = as_word(init, "init")
    if init == 0:
        raise ValueError("one-based index must be >= 1")
    return _down(init)


def _down(x):
    while x != 0:
        yield x
        x = next_down(x)


def up(init, limit_inclusive):
    """
    Yields the nodes covering a[init], i.e. the slots to increment when
    a[init] changes, in a tree of size limit_inclusive.

    Empty when init > limit_inclusive.
    """
    init = as_word(init, "init")
    limit_inclusive = as_word(limit_inclusive, "limit_inclusive")
    if init == 0:
        raise ValueError("one-based index must be >= 1")
    if limit_inclusive > ONE_BASED_LIMIT:
        raise ValueError(
            f"limit_inclusive {limit_inclusive} exceeds {ONE_BASED_LIMIT}"
        )
    return _up(init, limit_inclusive)


def _up(x, limit_inclusive):
    while x <= limit_inclusive:
        yield x
        x = next_up(x)
