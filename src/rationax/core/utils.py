from __future__ import annotations

import logging

import numpy as np

from rationax.core.typing import fits, limits

logger = logging.getLogger(__name__)


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm (repeated remainder).

    Operates on absolute values, since python's % follows floored division and would
    otherwise produce a divisor with the sign of b.

    Args:
        a (int): first operand
        b (int): second operand

    Returns:
        int: non-negative greatest common divisor, 0 only if both operands are 0. Same result as
        math.gcd.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def simplify(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Reduces a numerator/denominator pair to lowest terms with the sign on the numerator.
    Zero is always represented as 0/1.

    Args:
        numerator (int): raw numerator
        denominator (int): raw denominator, must not be zero

    Returns:
        tuple[int, int]: canonical (numerator, denominator)
    """
    if denominator == 0:
        raise ZeroDivisionError(f"Rational with zero denominator: {numerator}/0")
    if numerator == 0:
        return 0, 1

    common_divisor = gcd(numerator, denominator)
    numerator //= common_divisor
    denominator //= common_divisor

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    return numerator, denominator


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer quotient rounded toward zero."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def checked(value: int, t: type[np.signedinteger], what: str) -> int:
    if not fits(value, t):
        lo, hi = limits(t)
        logger.debug(f"Overflow in {what}: {value} not in [{lo}, {hi}]")
        raise OverflowError(f"{what} {value} does not fit into {np.dtype(t).name} [{lo}, {hi}]")
    return value
