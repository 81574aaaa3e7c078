"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def normalize_index(obj, key, size):
    """Validate an integer index and turn it into a positive one.

    Args:
        obj (Any): the indexed object, used to build error messages.
        key (int): index, negative values count from the end.
        size (int): length of the indexed object.

    Return:
        (int): an index in `[0, size)`.
    """
    if not isint(key):
        raise TypeError(
            obj.__class__.__name__ + " indices must be integers or "
            "slices, not " + key.__class__.__name__)

    if key < -size or key >= size:
        raise IndexError(obj.__class__.__name__ + " index out of range")

    return key + size if key < 0 else key
