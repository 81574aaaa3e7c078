from random import randint
import pytest
from seqarray import Array, EvaluationError, array_from, array_of, reduce


def test_reduce():
    assert reduce(Array([1, 2, 3]), 0, lambda acc, x: acc + x) == 6
    assert reduce(Array(), 42, lambda acc, x: acc + x) == 42

    data = [randint(0, 100) for _ in range(100)]
    assert reduce(data, 0, lambda acc, x: acc + x) == sum(data)
    assert reduce(iter(data), [], lambda acc, x: acc + [x]) == data

    # the result type may differ from the item type
    words = Array(['a', 'bb', 'ccc'])
    assert reduce(words, 0, lambda acc, w: acc + len(w)) == 6
    assert reduce(words, '', lambda acc, w: w + acc) == 'cccbba'

    with pytest.raises(TypeError):
        reduce(words, 0, None)


def test_reduce_order():
    calls = []

    def combine(acc, x):
        calls.append((acc, x))
        return acc * 10 + x

    assert reduce(Array([1, 2, 3]), 0, combine) == 123
    assert calls == [(0, 1), (1, 2), (12, 3)]


def test_array_of():
    arr = array_of(1, 'a', None)
    assert isinstance(arr, Array)
    assert arr == [1, 'a', None]
    assert array_of() == []
    assert array_of(default=0).pop() == 0


def test_array_from():
    assert array_from(range(5)) == [0, 1, 2, 3, 4]
    assert array_from(range(5), lambda x: x * x) == [0, 1, 4, 9, 16]
    assert array_from("abc", str.upper, default='').default == ''

    with pytest.raises(TypeError):
        array_from(range(5), 3)

    with pytest.raises(EvaluationError) as excinfo:
        array_from([1, 0], lambda x: 1 / x)
    assert str(excinfo.value) == "Failed to evaluate item 1 in array_from"
