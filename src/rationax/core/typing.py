from __future__ import annotations

from functools import lru_cache
from typing import Any, Union

import numpy as np

from rationax.core.constants import SIGNED_INTEGER_TYPES

# numpy scalar types that can parameterize a Rational
SignedIntegerType = Union[
    type[np.int8],
    type[np.int16],
    type[np.int32],
    type[np.int64],
]

# Types that can be mixed with a Rational as a degenerate n/1 operand
IntegerLike = Union[
    int,
    np.signedinteger,
]


def is_integer_like(x: Any) -> bool:
    if isinstance(x, bool | np.bool_):
        return False
    return isinstance(x, int | np.signedinteger)


def as_base_type(t: Any) -> type[np.signedinteger]:
    """
    Normalizes a base type argument to one of the supported numpy scalar types.

    Args:
        t (Any): numpy scalar type, np.dtype or dtype name (e.g. "int32")

    Returns:
        type[np.signedinteger]: The matching entry of SIGNED_INTEGER_TYPES
    """
    if t is int or t is bool:
        raise TypeError(f"Python {t.__name__} is not a valid base type, use one of {_type_names()}")
    try:
        scalar_type = np.dtype(t).type
    except TypeError as e:
        raise TypeError(f"Invalid base type {t!r}, use one of {_type_names()}") from e
    if scalar_type not in SIGNED_INTEGER_TYPES:
        raise TypeError(f"Base type must be a signed integer type, got {np.dtype(t).name}")
    return scalar_type


def base_type_of(x: Any) -> type[np.signedinteger] | None:
    """Base type carried by a scalar, or None for plain python integers."""
    if isinstance(x, np.signedinteger):
        return as_base_type(type(x))
    return None


@lru_cache(maxsize=None)
def limits(t: type[np.signedinteger]) -> tuple[int, int]:
    info = np.iinfo(t)
    return int(info.min), int(info.max)


def fits(value: int, t: type[np.signedinteger]) -> bool:
    lo, hi = limits(t)
    return lo <= value <= hi


def _type_names() -> str:
    return ", ".join(np.dtype(t).name for t in SIGNED_INTEGER_TYPES)
