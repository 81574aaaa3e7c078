import logging
import pytest
from seqarray.utils import isint, clip, get_logger, normalize_index


def test_isint():
    assert isint(3)
    assert isint(-3)
    assert not isint(3.)
    assert not isint("3")
    assert not isint(None)


def test_clip():
    assert clip(5, 0, 10) == 5
    assert clip(-5, 0, 10) == 0
    assert clip(15, 0, 10) == 10


def test_normalize_index():
    arr = list(range(10))

    assert [normalize_index(arr, i, 10) for i in range(10)] == arr
    assert [normalize_index(arr, i - 10, 10) for i in range(10)] == arr

    for key in [10, -11, 100]:
        with pytest.raises(IndexError):
            normalize_index(arr, key, 10)

    with pytest.raises(IndexError):
        normalize_index(arr, 0, 0)

    with pytest.raises(TypeError) as excinfo:
        normalize_index(arr, slice(1, 2), 10)
    assert str(excinfo.value) == \
        "list indices must be integers or slices, not slice"


def test_get_logger():
    logger = get_logger("seqarray.test")
    assert logger.name == "seqarray.test"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
