import logging
import numpy as np
import numba

logger = logging.getLogger(__name__)


@numba.njit(cache=True)
def update(fenwick, i, v):
    """
    updates the fenwick array, is equivalent to adding v to the
    value at position i in the original array.
    """
    n = fenwick.size
    if i < 0 or i >= n:
        raise IndexError("index out of range")

    # uint64 mixed with int64 literals would promote to float64
    j = np.int64(i)
    # Traverse all nodes covering i
    while j < n:
        fenwick[j] += v
        j = j | (j + 1)


@numba.njit(cache=True)
def prefix_sum(fenwick, i):
    if i < 0 or i >= fenwick.size:
        raise IndexError("index out of range")

    s = 0
    j = np.int64(i)
    # -1 is the all-ones sentinel in int64
    while j >= 0:
        s += fenwick[j]
        j = (j & (j + 1)) - 1
    return s


@numba.njit(cache=True)
def range_sum(fenwick, left, right):
    # right inclusive
    if left < 0 or left > right:
        raise IndexError("empty or negative range")
    lo = np.int64(left)
    s = prefix_sum(fenwick, np.int64(right))
    if lo > 0:
        s -= prefix_sum(fenwick, lo - 1)
    return s


@numba.njit(cache=True)
def build(values):
    n = values.size
    for i in range(n):
        j = i | (i + 1)
        if j < n:
            values[j] += values[i]


def construct(arr):
    """
    Returns a new fenwick array holding the values of arr.
    """
    fenwick = np.array(arr, copy=True)
    if fenwick.ndim != 1:
        raise ValueError("expected a 1-D array")
    logger.debug("constructing fenwick array of length %d", fenwick.size)
    build(fenwick)
    return fenwick
