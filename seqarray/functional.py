from .array import Array
from .errors import check_callable, evaluate


def reduce(sequence, initial, combine):
    """Fold the items of a sequence from left to right.

    The result is :code:`combine(...combine(combine(initial, x0), x1)..., xn)`,
    its type does not need to match the type of the items.

    Args:
        sequence (Iterable): an :class:`Array` or any other iterable.
        initial (Any): initial value of the accumulator.
        combine (Callable[[Any, Any], Any]): takes the current accumulator
            and an item and returns the new accumulator.

    Example:

        >>> seqarray.reduce(Array([1, 2, 3]), 0, lambda acc, x: acc + x)
        6
        >>> seqarray.reduce(Array(['a', 'bb']), {}, lambda d, s: {**d, s: len(s)})
        {'a': 1, 'bb': 2}
    """
    check_callable(combine, "combine")
    accumulator = initial
    for i, item in enumerate(sequence):
        accumulator = evaluate(combine, (accumulator, item), i, "reduce")

    return accumulator


def array_of(*items, default=None):
    """Build an :class:`Array` from the arguments.

    Example:

        >>> seqarray.array_of(1, 2, 3)
        Array([1, 2, 3])
    """
    return Array(items, default=default)


def array_from(iterable, transform=None, default=None):
    """Build an :class:`Array` from an iterable.

    Args:
        iterable (Iterable): source of the items.
        transform (Optional[Callable[[Any], Any]]): optional function to apply
            on each item.
        default (Any): default value of the new array.
    """
    if transform is None:
        return Array(iterable, default=default)

    check_callable(transform, "transform")
    return Array(
        (evaluate(transform, (item,), i, "array_from")
         for i, item in enumerate(iterable)),
        default=default)
