import numpy as np

from rationax import (
    Rational,
    equal,
    greater,
    greater_equal,
    less,
    less_equal,
    not_equal,
    sign,
)
from rationax.functional.relational import difference_sign


def test_equality_of_canonical_forms():
    assert Rational(2, 4) == Rational(1, 2)
    assert Rational(-1, 2) == Rational(1, -2)
    assert Rational(1, 2) != Rational(1, 3)
    assert not (Rational(1, 2) != Rational(3, 6))


def test_equality_across_base_types():
    assert Rational(1, 2, np.int8) == Rational(1, 2, np.int64)
    assert Rational(-3, 4, np.int16) != Rational(3, 4, np.int32)


def test_equality_with_scalars():
    """A Rational equals a scalar only if its denominator is 1"""
    assert Rational(4, 2) == 2
    assert 2 == Rational(4, 2)
    assert Rational(0, 5) == 0
    assert Rational(1, 2) != 0
    assert Rational(3, 2) != 1
    assert Rational(3, 1, np.int8) == np.int64(3)


def test_equality_with_unsupported_types():
    assert Rational(1, 2) != 0.5
    assert not (Rational(1, 2) == "1/2")


def test_ordering():
    assert Rational(1, 3) < Rational(1, 2)
    assert Rational(1, 2) > Rational(1, 3)
    assert Rational(-1, 2) < 0
    assert Rational(2, 1) >= 2
    assert Rational(2, 1) <= 2
    assert not (Rational(1, 2) < Rational(1, 2))
    assert not (Rational(1, 2) > Rational(1, 2))


def test_ordering_with_scalar_on_the_left():
    assert 0 > Rational(-1, 2)
    assert 1 < Rational(3, 2)
    assert 2 <= Rational(5, 2)
    assert not (3 <= Rational(5, 2))


def test_ordering_at_base_type_limits():
    """Comparisons stay correct where the difference does not fit the base type"""
    hi = Rational(127, 1, np.int8)
    lo = Rational(-128, 1, np.int8)
    assert hi > lo
    assert lo < hi
    assert lo <= hi
    assert not (hi <= lo)


def test_sorting():
    values = [Rational(1, 2), Rational(-1, 3), Rational(2, 1), Rational(0, 1), Rational(1, 3)]
    assert sorted(values) == [Rational(-1, 3), Rational(0, 1), Rational(1, 3), Rational(1, 2), Rational(2, 1)]


def test_sign():
    assert sign(Rational(-3, 4)) == -1
    assert sign(Rational(0, 4)) == 0
    assert sign(Rational(3, 4)) == 1


def test_difference_sign():
    assert difference_sign(Rational(1, 2), Rational(1, 3)) == 1
    assert difference_sign(Rational(1, 3), Rational(1, 2)) == -1
    assert difference_sign(Rational(2, 4), Rational(1, 2)) == 0
    assert difference_sign(1, Rational(1, 2)) == 1


def test_functional_api():
    """Test the free comparison functions in every operand order"""
    assert equal(Rational(1, 2), Rational(2, 4))
    assert equal(3, Rational(6, 2))
    assert not_equal(Rational(1, 2), 1)
    assert less(Rational(1, 3), Rational(1, 2))
    assert less(0, Rational(1, 2))
    assert greater(Rational(1, 2), 0)
    assert less_equal(1, Rational(3, 2))
    assert less_equal(Rational(3, 2), Rational(3, 2))
    assert greater_equal(Rational(3, 2), 1)
    assert not greater_equal(Rational(-1, 2), 0)
