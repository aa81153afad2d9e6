from rationax.core.constants import DEFAULT_BASE_TYPE
from rationax.core.rational import Rational
from rationax.core.traits import largest_type, next_type
from rationax.functional.arithmetic import add, divide, multiply, negative, subtract
from rationax.functional.relational import (
    equal,
    greater,
    greater_equal,
    less,
    less_equal,
    not_equal,
    sign,
)
from rationax.io.stream import (
    TokenStream,
    format_rational,
    parse_rational,
    read_rational,
    write_rational,
)


__all__ = [
    "Rational",
    "DEFAULT_BASE_TYPE",
    "next_type",
    "largest_type",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negative",
    "equal",
    "not_equal",
    "less",
    "greater",
    "less_equal",
    "greater_equal",
    "sign",
    "TokenStream",
    "format_rational",
    "parse_rational",
    "read_rational",
    "write_rational",
]
