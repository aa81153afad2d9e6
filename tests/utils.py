import math

from rationax import Rational
from rationax.core.typing import fits


def assert_canonical(r: Rational):
    numerator, denominator = r.as_integer_ratio()
    assert denominator > 0
    assert math.gcd(abs(numerator), denominator) == 1
    if numerator == 0:
        assert denominator == 1
    assert fits(numerator, r.base_type)
    assert fits(denominator, r.base_type)
