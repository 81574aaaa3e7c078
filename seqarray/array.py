"""The :class:`Array` container."""

import functools
import operator

from .errors import check_callable, evaluate
from .utils import clip, get_logger, isint, normalize_index

logger = get_logger(__name__)

_inherit = object()  # marker for arguments defaulting to the array's own value


def sort_key(less, swap, where):
    """Turn a `less(a, b)` predicate into a key function for sorting.

    With `swap`, the predicate is evaluated with its arguments exchanged,
    which yields a descending order where equal elements still keep
    their relative position.
    """
    if less is None:
        less = operator.lt
    else:
        check_callable(less, "less")

    def compare(a, b):
        if swap:
            a, b = b, a

        if evaluate(less, (a, b), None, where):
            return -1
        elif evaluate(less, (b, a), None, where):
            return 1
        else:
            return 0

    return functools.cmp_to_key(compare)


class Array(object):
    """A mutable sequence with a javascript-like chainable API.

    Args:
        items (Iterable): initial content, copied.
        default (Any): value standing for "no element", returned by
            :meth:`pop` and :meth:`shift` on an empty array and by
            :meth:`find` and :meth:`find_last` when nothing matches.

    Example:

        >>> a = Array([3, 1, 2])
        >>> a.push(5).unshift(0).sort().join("-")
        '0-1-2-3-5'
        >>> Array([], default=0).pop()
        0
    """

    def __init__(self, items=(), default=None):
        self.items = list(items)
        self.default = default

    def _derive(self, items, default=_inherit):
        if default is _inherit:
            default = self.default
        return self.__class__(items, default=default)

    def _where(self, method):
        return self.__class__.__name__ + "." + method

    # Access ------------------------------------------------------------------

    def at(self, index):
        """Return the element at `index`.

        Negative indices count from the end, indices out of range raise
        :class:`IndexError`.
        """
        return self.items[normalize_index(self, index, len(self.items))]

    def length(self):
        return len(self.items)

    def concat(self, *others):
        """Return a new array with the items of `others` appended.

        The array itself is left untouched, see :meth:`merge` for the in
        place version.

        Args:
            others (Iterable): arrays or any other iterables, their
                content is added in order.
        """
        items = list(self.items)
        for other in others:
            items.extend(other.items if isinstance(other, Array) else other)

        return self._derive(items)

    def merge(self, *others):
        """Append the items of `others` in place and return the array.

        See :meth:`concat` for a version which leaves the array untouched.
        """
        for other in others:
            self.items.extend(other.items if isinstance(other, Array) else other)

        return self

    # Positional mutations ----------------------------------------------------

    def push(self, item):
        """Add an item at the end and return the array."""
        self.items.append(item)
        return self

    def pop(self):
        """Remove and return the last item, or the default value if empty."""
        if len(self.items) == 0:
            return self.default

        return self.items.pop()

    def shift(self):
        """Remove and return the first item, or the default value if empty.

        Remaining items are moved one position down.
        """
        if len(self.items) == 0:
            return self.default

        return self.items.pop(0)

    def unshift(self, item):
        """Insert an item at the beginning and return the array."""
        self.items.insert(0, item)
        return self

    def _splice_range(self, start, delete_count, where):
        if not isint(start) or not isint(delete_count):
            raise TypeError("start and delete_count must be integers")

        size = len(self.items)
        first = clip(start, 0, size)
        end = clip(first + delete_count, first, size)

        if first != start or end - first != delete_count:
            logger.debug("{}: range [{}, {}) clamped to [{}, {})".format(
                where, start, start + delete_count, first, end))

        return first, end

    def splice(self, start, delete_count, *elements):
        """Remove and/or insert items in place.

        Args:
            start (int): position where items are removed and `elements`
                inserted, clipped to `[0, len(self)]`.
            delete_count (int): number of items to remove. The removal
                stops at the end of the array and non-positive values
                remove nothing.
            elements (Any): new items to insert at `start`.

        Return:
            The array itself.

        Example:

            >>> a = Array(['a', 'b', 'c', 'd'])
            >>> a.splice(1, 2, 'x')
            Array(['a', 'x', 'd'])
            >>> a.splice(-10, 1)  # out of range indices are clipped
            Array(['x', 'd'])
        """
        first, end = self._splice_range(
            start, delete_count, self._where("splice"))
        self.items[first:end] = elements
        return self

    def to_spliced(self, start, delete_count, *elements):
        """Same as :meth:`splice` but return a modified copy instead."""
        first, end = self._splice_range(
            start, delete_count, self._where("to_spliced"))
        return self._derive(
            self.items[:first] + list(elements) + self.items[end:])

    def remove_at(self, index):
        """Remove the item at `index` if any and return the array."""
        return self.splice(index, 1)

    def to_removed(self, index):
        """Return a copy without the item at `index`."""
        return self.to_spliced(index, 1)

    # Ordering ----------------------------------------------------------------

    def sort(self, less=None):
        """Sort the items in place and return the array.

        The sort is stable: items which compare equal keep their relative
        order.

        Args:
            less (Optional[Callable[[Any, Any], bool]]): returns whether its
                first argument goes before the second one. Defaults to the
                `<` operator.
        """
        self.items.sort(key=sort_key(less, False, self._where("sort")))
        return self

    def to_sorted(self, less=None):
        """Same as :meth:`sort` but return a sorted copy instead."""
        return self._derive(sorted(
            self.items, key=sort_key(less, False, self._where("to_sorted"))))

    def reverse(self, less=None):
        """Sort the items in descending order in place and return the array.

        `less` takes the same form as for :meth:`sort`, it is evaluated with
        swapped arguments so that equal items keep their relative order
        (this is not the same as sorting and then inverting the order).

        Example:

            >>> tasks = Array([('a', 1), ('b', 2), ('c', 1)])
            >>> tasks.reverse(lambda x, y: x[1] < y[1])
            Array([('b', 2), ('a', 1), ('c', 1)])
        """
        self.items.sort(key=sort_key(less, True, self._where("reverse")))
        return self

    def to_reversed(self, less=None):
        """Same as :meth:`reverse` but return a sorted copy instead."""
        return self._derive(sorted(
            self.items, key=sort_key(less, True, self._where("to_reversed"))))

    # Iteration ---------------------------------------------------------------

    def every(self, predicate):
        """Return whether all items satisfy `predicate` (True if empty)."""
        check_callable(predicate, "predicate")
        where = self._where("every")
        for i, item in enumerate(self.items):
            if not evaluate(predicate, (item,), i, where):
                return False

        return True

    def some(self, predicate):
        """Return whether at least one item satisfies `predicate`."""
        return self._first_index(predicate, "some") >= 0

    def includes(self, predicate):
        return self._first_index(predicate, "includes") >= 0

    def filter(self, predicate):
        """Return a new array with the items that satisfy `predicate`."""
        check_callable(predicate, "predicate")
        where = self._where("filter")
        return self._derive([
            item for i, item in enumerate(self.items)
            if evaluate(predicate, (item,), i, where)])

    def map(self, transform, default=_inherit):
        """Return a new array with the results of `transform` on each item.

        Args:
            transform (Callable[[Any], Any]): function to apply.
            default (Any): default value of the new array, defaults to the
                default value of this one.

        Example:

            >>> Array([1, 2, 3]).map(lambda x: x * 10)
            Array([10, 20, 30])
        """
        check_callable(transform, "transform")
        where = self._where("map")
        return self._derive(
            [evaluate(transform, (item,), i, where)
             for i, item in enumerate(self.items)],
            default)

    # Search ------------------------------------------------------------------

    def _first_index(self, predicate, method):
        check_callable(predicate, "predicate")
        where = self._where(method)
        for i, item in enumerate(self.items):
            if evaluate(predicate, (item,), i, where):
                return i

        return -1

    def _last_index(self, predicate, method):
        check_callable(predicate, "predicate")
        where = self._where(method)
        for i in range(len(self.items) - 1, -1, -1):
            if evaluate(predicate, (self.items[i],), i, where):
                return i

        return -1

    def find(self, predicate):
        """Search the first item which satisfies `predicate`.

        Return:
            (Tuple[Any, bool]): The item and True, or the default value and
            False if no item matches.

        Example:

            >>> tasks = Array([{'id': 1}, {'id': 2}])
            >>> tasks.find(lambda t: t['id'] == 2)
            ({'id': 2}, True)
            >>> tasks.find(lambda t: t['id'] == 9)
            (None, False)
        """
        i = self._first_index(predicate, "find")
        if i < 0:
            return self.default, False

        return self.items[i], True

    def find_last(self, predicate):
        """Same as :meth:`find` but search from the end."""
        i = self._last_index(predicate, "find_last")
        if i < 0:
            return self.default, False

        return self.items[i], True

    def index_of(self, predicate):
        """Return the index of the first item satisfying `predicate` or -1."""
        return self._first_index(predicate, "index_of")

    def last_index_of(self, predicate):
        """Return the index of the last item satisfying `predicate` or -1."""
        return self._last_index(predicate, "last_index_of")

    # Rendering ---------------------------------------------------------------

    def join(self, separator=","):
        """Return the string representations of the items joined by `separator`.

        Example:

            >>> Array(['a', 'b', 'c']).join('-')
            'a-b-c'
            >>> Array([1, 2, 3]).join()
            '1,2,3'
        """
        return separator.join(str(item) for item in self.items)

    def to_string(self):
        """Return the string representations of the items concatenated."""
        return self.join("")

    # Python protocols --------------------------------------------------------

    def copy(self):
        return self._derive(self.items)

    def to_list(self):
        return list(self.items)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __reversed__(self):
        return reversed(self.items)

    def __contains__(self, item):
        return item in self.items

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._derive(self.items[key])

        return self.at(key)

    def __setitem__(self, key, value):
        if isinstance(key, slice):
            self.items[key] = value
        else:
            self.items[normalize_index(self, key, len(self.items))] = value

    def __eq__(self, other):
        if isinstance(other, Array):
            return self.items == other.items
        elif isinstance(other, list):
            return self.items == other
        else:
            return NotImplemented

    __hash__ = None

    def __repr__(self):
        if self.default is None:
            return "{}({!r})".format(self.__class__.__name__, self.items)
        else:
            return "{}({!r}, default={!r})".format(
                self.__class__.__name__, self.items, self.default)
