from __future__ import annotations

from typing import Any, Self

import numpy as np

from rationax.core.constants import DEFAULT_BASE_TYPE
from rationax.core.traits import largest_type, next_type
from rationax.core.typing import IntegerLike, as_base_type, base_type_of, is_integer_like
from rationax.core.utils import checked, simplify, truncating_div


class Rational:
    """
    Exact rational number over a signed integer base type.

    The value is always kept in canonical form: the denominator is positive, numerator and
    denominator share no common divisor and zero is represented as 0/1. Arithmetic is
    computed in the next wider integer type (see next_type) and the reduced result is
    narrowed back to the base type. Every narrowing is checked and raises OverflowError
    instead of wrapping around.
    """

    __slots__ = ("_num", "_den", "_base_type")

    # mutable value, see set and the compound assignment operators
    __hash__ = None  # type: ignore[assignment]

    # numpy scalars on the left defer to the reflected operators instead of building object arrays
    __array_ufunc__ = None

    def __init__(
        self,
        numerator: IntegerLike = 0,
        denominator: IntegerLike = 1,
        base_type: Any = None,
    ):
        if base_type is None:
            base_type = _infer_base_type(numerator, denominator)
        self._base_type = as_base_type(base_type)
        self._num, self._den = self._normalized(numerator, denominator)

    @classmethod
    def _from_canonical(cls, numerator: int, denominator: int, base_type: type[np.signedinteger]) -> Self:
        obj = cls.__new__(cls)
        obj._num = numerator
        obj._den = denominator
        obj._base_type = base_type
        return obj

    @classmethod
    def from_rational(cls, other: Rational, base_type: Any) -> Self:
        """
        Converts a Rational to another base type. Numerator and denominator are copied
        without renormalization, since the source is already in canonical form.

        Args:
            other (Rational): source value
            base_type (Any): target base type

        Returns:
            Self: the converted value
        """
        if not isinstance(other, Rational):
            raise TypeError(f"Expected Rational, got {type(other).__name__}")
        target = as_base_type(base_type)
        numerator = checked(other._num, target, "numerator")
        denominator = checked(other._den, target, "denominator")
        return cls._from_canonical(numerator, denominator, target)

    def astype(self, base_type: Any) -> Rational:
        return Rational.from_rational(self, base_type)

    def _normalized(self, numerator: Any, denominator: Any) -> tuple[int, int]:
        for v in (numerator, denominator):
            if not is_integer_like(v):
                raise TypeError(f"Rational components must be integers, got {type(v).__name__}: {v!r}")
        n, d = simplify(int(numerator), int(denominator))
        checked(n, self._base_type, "numerator")
        checked(d, self._base_type, "denominator")
        return n, d

    def set(self, numerator: IntegerLike, denominator: IntegerLike) -> Self:
        """Sets numerator and denominator in place and normalizes. Returns self for chaining."""
        self._num, self._den = self._normalized(numerator, denominator)
        return self

    @property
    def numerator(self) -> np.signedinteger:
        return self._base_type(self._num)

    @property
    def denominator(self) -> np.signedinteger:
        return self._base_type(self._den)

    @property
    def base_type(self) -> type[np.signedinteger]:
        return self._base_type

    def as_integer_ratio(self) -> tuple[int, int]:
        return self._num, self._den

    def copy(self) -> Rational:
        return Rational._from_canonical(self._num, self._den, self._base_type)

    def __copy__(self) -> Rational:
        return self.copy()

    def __deepcopy__(self, memo) -> Rational:
        return self.copy()

    def _operand(self, other: Any) -> Rational:
        # right hand side of a compound assignment, brought to this base type
        if isinstance(other, Rational):
            return other if other._base_type is self._base_type else other.astype(self._base_type)
        return Rational(other, 1, base_type=self._base_type)

    def _assign_widened(self, numerator: int, denominator: int, what: str) -> Self:
        wide = next_type(self._base_type)
        checked(numerator, wide, f"intermediate {what} numerator")
        checked(denominator, wide, f"intermediate {what} denominator")
        n, d = simplify(numerator, denominator)
        # narrow back, leaving self untouched on failure
        checked(n, self._base_type, f"{what} numerator")
        checked(d, self._base_type, f"{what} denominator")
        self._num, self._den = n, d
        return self

    # Compound assignment ###########################
    def __iadd__(self, other: Rational | IntegerLike) -> Self:
        if not _is_operand(other):
            return NotImplemented
        r = self._operand(other)
        wide = next_type(self._base_type)
        left = checked(r._den * self._num, wide, "intermediate addition term")
        right = checked(self._den * r._num, wide, "intermediate addition term")
        return self._assign_widened(left + right, self._den * r._den, "addition")

    def __isub__(self, other: Rational | IntegerLike) -> Self:
        if not _is_operand(other):
            return NotImplemented
        r = self._operand(other)
        wide = next_type(self._base_type)
        left = checked(r._den * self._num, wide, "intermediate subtraction term")
        right = checked(self._den * r._num, wide, "intermediate subtraction term")
        return self._assign_widened(left - right, self._den * r._den, "subtraction")

    def __imul__(self, other: Rational | IntegerLike) -> Self:
        if not _is_operand(other):
            return NotImplemented
        r = self._operand(other)
        return self._assign_widened(self._num * r._num, self._den * r._den, "multiplication")

    def __itruediv__(self, other: Rational | IntegerLike) -> Self:
        if not _is_operand(other):
            return NotImplemented
        r = self._operand(other)
        if r._num == 0:
            raise ZeroDivisionError(f"Cannot divide {self} by zero")
        return self._assign_widened(r._den * self._num, r._num * self._den, "division")

    # Increment / decrement ###########################
    def increment(self) -> Self:
        return self.set(self._num + self._den, self._den)

    def decrement(self) -> Self:
        return self.set(self._num - self._den, self._den)

    def post_increment(self) -> Rational:
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> Rational:
        previous = self.copy()
        self.decrement()
        return previous

    # Binary operators ###########################
    def __add__(self, other: Rational | IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import add

        return add(self, other)

    def __radd__(self, other: IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import add

        return add(other, self)

    def __sub__(self, other: Rational | IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import subtract

        return subtract(self, other)

    def __rsub__(self, other: IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import subtract

        return subtract(other, self)

    def __mul__(self, other: Rational | IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import multiply

        return multiply(self, other)

    def __rmul__(self, other: IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import multiply

        return multiply(other, self)

    def __truediv__(self, other: Rational | IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import divide

        return divide(self, other)

    def __rtruediv__(self, other: IntegerLike) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.arithmetic import divide

        return divide(other, self)

    def __neg__(self) -> Rational:
        from rationax.functional.arithmetic import negative

        return negative(self)

    def __pos__(self) -> Rational:
        """Unary plus: +x"""
        return self.copy()

    def __abs__(self) -> Rational:
        return -self if self._num < 0 else self.copy()

    # Comparison operators ###########################
    def __eq__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.relational import equal

        return equal(self, other)

    def __ne__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.relational import not_equal

        return not_equal(self, other)

    def __lt__(self, other: Rational | IntegerLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.relational import less

        return less(self, other)

    def __gt__(self, other: Rational | IntegerLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.relational import greater

        return greater(self, other)

    def __le__(self, other: Rational | IntegerLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.relational import less_equal

        return less_equal(self, other)

    def __ge__(self, other: Rational | IntegerLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from rationax.functional.relational import greater_equal

        return greater_equal(self, other)

    # Conversions ###########################
    def __int__(self) -> int:
        return truncating_div(self._num, self._den)

    def __trunc__(self) -> int:
        return int(self)

    def __float__(self) -> float:
        # int / int is correctly rounded, also for values beyond float precision
        return self._num / self._den

    def __bool__(self) -> bool:
        return self._num != 0

    def __str__(self) -> str:
        from rationax.io.stream import format_rational

        return format_rational(self)

    def __repr__(self) -> str:
        return f"Rational({self._num}/{self._den}, {np.dtype(self._base_type).name})"


def _is_operand(x: Any) -> bool:
    return isinstance(x, Rational) or is_integer_like(x)


def _infer_base_type(numerator: Any, denominator: Any) -> type[np.signedinteger]:
    types = [t for t in (base_type_of(numerator), base_type_of(denominator)) if t is not None]
    if not types:
        return DEFAULT_BASE_TYPE
    if len(types) == 1:
        return types[0]
    return largest_type(types[0], types[1])
