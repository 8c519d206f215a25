from fenwick.config import ALL_ONES, as_word


def lowbit(x):
    """
    Returns the least-significant set bit of the unsigned word x, i.e.
    keeps only the rightmost 1 of its binary representation. Returns 0
    for x == 0.

    For non-zero x this equals 1 << (number of trailing zeros of x).

    >>> lowbit(0b1010111010000)
    16
    """
    x = as_word(x, "x")
    # two's complement negation within the word
    return x & ((~x + 1) & ALL_ONES)
