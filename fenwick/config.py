import operator

# All index arithmetic is modular on a fixed word.
WORD_BITS = 64
ALL_ONES = (1 << WORD_BITS) - 1

# one_based.up steps to (x | (x-1)) + 1, which must not wrap
ONE_BASED_LIMIT = ALL_ONES >> 1


def as_index(x, name="index"):
    # bool is an int but never a meaningful index
    if isinstance(x, bool):
        raise TypeError(f"{name} must be an integer, not bool")
    return operator.index(x)


def as_word(x, name="index"):
    """
    Returns x as a plain int. Raises TypeError for non-integers and
    ValueError if x does not fit in an unsigned word.
    """
    x = as_index(x, name)
    if x < 0 or x > ALL_ONES:
        raise ValueError(f"{name} {x} outside [0, 2**{WORD_BITS})")
    return x
