import numpy as np
import pytest

from rationax import largest_type, next_type


def test_next_type_widens_each_step():
    """Every base type widens to the next larger one"""
    assert next_type(np.int8) is np.int16
    assert next_type(np.int16) is np.int32
    assert next_type(np.int32) is np.int64


def test_next_type_widest_maps_to_itself():
    """No wider type exists for int64, so it maps onto itself"""
    assert next_type(np.int64) is np.int64


def test_next_type_accepts_dtype_names():
    assert next_type("int8") is np.int16
    assert next_type(np.dtype("int32")) is np.int64


def test_largest_type():
    assert largest_type(np.int8, np.int32) is np.int32
    assert largest_type(np.int64, np.int16) is np.int64
    assert largest_type(np.int16, np.int16) is np.int16


def test_largest_type_is_symmetric():
    types = [np.int8, np.int16, np.int32, np.int64]
    for t in types:
        for u in types:
            assert largest_type(t, u) is largest_type(u, t)


@pytest.mark.parametrize("bad", [np.uint16, np.float32, int])
def test_traits_reject_unsupported_types(bad):
    with pytest.raises(TypeError):
        next_type(bad)
    with pytest.raises(TypeError):
        largest_type(np.int8, bad)
