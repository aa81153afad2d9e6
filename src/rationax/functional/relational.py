# ruff: noqa: F811
from rationax.core.rational import Rational
from rationax.core.typing import IntegerLike
from rationax.functional.utils import dispatch


def sign(x: Rational) -> int:
    numerator, _ = x.as_integer_ratio()
    return (numerator > 0) - (numerator < 0)


def difference_sign(x: Rational | IntegerLike, y: Rational | IntegerLike) -> int:
    """
    Sign of the numerator of x - y.

    Reducing the difference divides by a positive gcd and narrowing does not change the sign,
    so the unreduced cross-multiplied numerator is used. Python integers cannot overflow here,
    which keeps comparisons total even where the difference itself would not fit the base type.

    Args:
        x (Rational | IntegerLike): left operand, scalars are treated as x/1
        y (Rational | IntegerLike): right operand, scalars are treated as y/1

    Returns:
        int: -1, 0 or 1
    """
    xn, xd = x.as_integer_ratio() if isinstance(x, Rational) else (int(x), 1)
    yn, yd = y.as_integer_ratio() if isinstance(y, Rational) else (int(y), 1)
    numerator = yd * xn - xd * yn
    return (numerator > 0) - (numerator < 0)


## Equality ###########################
# canonical form makes pairwise comparison of the components sufficient
@dispatch
def equal(x: Rational, y: Rational) -> bool:
    return x.as_integer_ratio() == y.as_integer_ratio()


@dispatch
def equal(x: Rational, y: IntegerLike) -> bool:
    numerator, denominator = x.as_integer_ratio()
    return denominator == 1 and numerator == int(y)


@dispatch
def equal(x: IntegerLike, y: Rational) -> bool:
    return equal(y, x)


def not_equal(x: Rational | IntegerLike, y: Rational | IntegerLike) -> bool:
    return not equal(x, y)


## Ordering ###########################
@dispatch
def less(x: Rational, y: Rational) -> bool:
    return difference_sign(y, x) > 0


@dispatch
def less(x: Rational, y: IntegerLike) -> bool:
    return difference_sign(y, x) > 0


@dispatch
def less(x: IntegerLike, y: Rational) -> bool:
    return difference_sign(y, x) > 0


@dispatch
def greater(x: Rational, y: Rational) -> bool:
    return difference_sign(x, y) > 0


@dispatch
def greater(x: Rational, y: IntegerLike) -> bool:
    return difference_sign(x, y) > 0


@dispatch
def greater(x: IntegerLike, y: Rational) -> bool:
    return difference_sign(x, y) > 0


def less_equal(x: Rational | IntegerLike, y: Rational | IntegerLike) -> bool:
    return not greater(x, y)


def greater_equal(x: Rational | IntegerLike, y: Rational | IntegerLike) -> bool:
    return not less(x, y)
