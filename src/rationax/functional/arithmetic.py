# ruff: noqa: F811
import numpy as np

from rationax.core.rational import Rational
from rationax.core.traits import largest_type
from rationax.core.typing import IntegerLike, base_type_of
from rationax.core.utils import checked
from rationax.functional.utils import dispatch


def result_type(x: Rational | IntegerLike, y: Rational | IntegerLike) -> type[np.signedinteger]:
    """
    Base type of the result of a binary operation. A plain python integer adopts the base type
    of the Rational operand, numpy integer scalars take part with their own type.
    """
    types = []
    for v in (x, y):
        t = v.base_type if isinstance(v, Rational) else base_type_of(v)
        if t is not None:
            types.append(t)
    assert types, "Internal error: binary operation without Rational operand"
    if len(types) == 1:
        return types[0]
    return largest_type(types[0], types[1])


## Negation ###########################
def negative(x: Rational) -> Rational:
    numerator, denominator = x.as_integer_ratio()
    return Rational._from_canonical(
        checked(-numerator, x.base_type, "negated numerator"),
        denominator,
        x.base_type,
    )


## Addition ###########################
@dispatch
def add(x: Rational, y: Rational) -> Rational:
    total = x.astype(result_type(x, y))
    total += y
    return total


@dispatch
def add(x: Rational, y: IntegerLike) -> Rational:
    total = x.astype(result_type(x, y))
    total += y
    return total


@dispatch
def add(x: IntegerLike, y: Rational) -> Rational:
    return add(y, x)


## Subtraction ###########################
@dispatch
def subtract(x: Rational, y: Rational) -> Rational:
    difference = x.astype(result_type(x, y))
    difference -= y
    return difference


@dispatch
def subtract(x: Rational, y: IntegerLike) -> Rational:
    difference = x.astype(result_type(x, y))
    difference -= y
    return difference


@dispatch
def subtract(x: IntegerLike, y: Rational) -> Rational:
    # not commutative, x - y == (-y) + x. The scalar is widened first, so -y never has to fit
    # the narrower base type of y
    difference = Rational(x, 1, base_type=result_type(x, y))
    difference -= y
    return difference


## Multiplication ###########################
@dispatch
def multiply(x: Rational, y: Rational) -> Rational:
    product = x.astype(result_type(x, y))
    product *= y
    return product


@dispatch
def multiply(x: Rational, y: IntegerLike) -> Rational:
    product = x.astype(result_type(x, y))
    product *= y
    return product


@dispatch
def multiply(x: IntegerLike, y: Rational) -> Rational:
    return multiply(y, x)


## Division ###########################
@dispatch
def divide(x: Rational, y: Rational) -> Rational:
    quotient = x.astype(result_type(x, y))
    quotient /= y
    return quotient


@dispatch
def divide(x: Rational, y: IntegerLike) -> Rational:
    quotient = x.astype(result_type(x, y))
    quotient /= y
    return quotient


@dispatch
def divide(x: IntegerLike, y: Rational) -> Rational:
    quotient = Rational(x, 1, base_type=result_type(x, y))
    quotient /= y
    return quotient
