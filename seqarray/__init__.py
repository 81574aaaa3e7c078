"""
A python library providing arrays with a javascript-like interface.

The seqarray package contains the :class:`Array` container, a mutable
sequence (wrapping a plain list) with a rich and chainable set of methods:
element access, insertion and removal at arbitrary positions,
concatenation, stable sorting driven by a comparison predicate, searching,
higher-order iteration (every, some, filter, map, find...) and joining to
text.

Mutating methods (:meth:`Array.splice`, :meth:`Array.sort`...) have a
non-mutating twin (:meth:`Array.to_spliced`, :meth:`Array.to_sorted`...)
which leaves the original array untouched and returns a new one.

Errors raised by the functions passed to the methods are wrapped into
:class:`EvaluationError` by default, see :func:`seterr`.
"""

from .array import Array
from .errors import EvaluationError, seterr
from .functional import array_from, array_of, reduce

__all__ = [
    "Array",
    "EvaluationError",
    "seterr",
    "array_from",
    "array_of",
    "reduce",
]
