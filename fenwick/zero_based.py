"""
Index sequences for Fenwick trees stored in zero-based arrays.

The step functions are the one-based ones shifted by one:

    zero_based.down(i) == [x - 1 for x in one_based.down(i + 1)]
    zero_based.up(i, n) == [x - 1 for x in one_based.up(i + 1, n)]

rewritten so that both i == 0 and i == ALL_ONES stay inside the word.
Arithmetic wraps modulo 2**WORD_BITS and ALL_ONES plays the role of -1.

The sequences can be nested to address multi-dimensional trees, e.g. for
a 2-D tree f of shape (n, m):

    for ii in up(i, n):
        for jj in up(j, m):
            f[ii, jj] += delta

    s = 0
    for ii in down(i):
        for jj in down(j):
            s += f[ii, jj]
"""
from fenwick.config import ALL_ONES, as_word


def next_down(x):
    return ((x & ((x + 1) & ALL_ONES)) - 1) & ALL_ONES


def next_up(x):
    # set the lowest zero bit
    return x | ((x + 1) & ALL_ONES)


def down(init):
    """
    Yields the slots whose sum is a[0] + ... + a[init], starting at init.

    down(0) is [0]; down(ALL_ONES) is empty.
    """
    return _down(as_word(init, "init"))


def _down(x):
    while x != ALL_ONES:
        yield x
        x = next_down(x)


def up(init, limit_exclusive):
    """
    Yields the slots to increment when a[init] changes, in an array of
    length limit_exclusive. Requires init < limit_exclusive.
    """
    init = as_word(init, "init")
    limit_exclusive = as_word(limit_exclusive, "limit_exclusive")
    if init >= limit_exclusive:
        raise ValueError(
            f"init {init} must be less than limit_exclusive {limit_exclusive}"
        )
    return _up(init, limit_exclusive)


def _up(x, limit_exclusive):
    while x < limit_exclusive:
        yield x
        x = next_up(x)
