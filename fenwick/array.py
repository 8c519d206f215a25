"""
A 1-D Fenwick tree stored in a caller-owned zero-based sequence of the same
length as the logical array a.

Values only need += and an additive identity, so ints, floats, Fractions,
numpy scalars or any monoid-like type will do.

>>> fw = [0] * 10
>>> update(fw, 0, 3)
>>> update(fw, 5, 9)
>>> prefix_sum(fw, 4), prefix_sum(fw, 5)
(3, 12)
"""
import logging

from fenwick.config import as_index
from fenwick.zero_based import down, next_up, up

logger = logging.getLogger(__name__)


def _check_index(fenwick, i):
    i = as_index(i)
    if not 0 <= i < len(fenwick):
        raise IndexError(f"index {i} out of range for length {len(fenwick)}")
    return i


def update(fenwick, i, delta):
    """
    Conceptually performs a[i] += delta.

    Raises IndexError, before touching the array, if i is out of range.
    """
    i = _check_index(fenwick, i)
    for j in up(i, len(fenwick)):
        fenwick[j] += delta


def prefix_sum(fenwick, i, zero=0):
    """
    Returns a[0] + ... + a[i], accumulated onto zero.
    """
    i = _check_index(fenwick, i)
    s = zero
    for j in down(i):
        s += fenwick[j]
    return s


def range_sum(fenwick, left, right, zero=0):
    # right inclusive; the value type must also support subtraction
    left = _check_index(fenwick, left)
    right = _check_index(fenwick, right)
    if left > right:
        raise IndexError(f"empty range [{left}, {right}]")
    s = prefix_sum(fenwick, right, zero)
    if left > 0:
        s = s - prefix_sum(fenwick, left - 1, zero)
    return s


def build(values):
    """
    Converts a sequence holding the logical values a[0..n] into Fenwick
    form in place, in linear time. Afterwards prefix_sum(values, i) is
    a[0] + ... + a[i].
    """
    n = len(values)
    logger.debug("building fenwick array of length %d", n)
    for i in range(n):
        j = next_up(i)
        if j < n:
            values[j] += values[i]
