from __future__ import annotations

import io
import logging
from typing import Any, TextIO

import numpy as np

from rationax.core.constants import RATIONAL_DELIMITER
from rationax.core.rational import Rational
from rationax.core.typing import as_base_type, fits, limits

logger = logging.getLogger(__name__)


def format_rational(r: Rational) -> str:
    numerator, denominator = r.as_integer_ratio()
    return f"{numerator}{RATIONAL_DELIMITER}{denominator}"


class TokenStream:
    """
    Character stream with a sticky failure state for reading integer tokens.

    Once a read fails, every following read fails as well until clear() is called, so a
    sequence of reads can be checked once at the end.
    """

    def __init__(self, source: str | TextIO):
        self._source: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._pushback: str = ""
        self._failed = False
        self._eof = False

    @property
    def failed(self) -> bool:
        return self._failed

    @property
    def eof(self) -> bool:
        return self._eof

    @property
    def good(self) -> bool:
        return not self._failed and not self._eof

    def __bool__(self) -> bool:
        return not self._failed

    def fail(self) -> None:
        self._failed = True

    def clear(self) -> None:
        self._failed = False
        self._eof = False

    def _get(self) -> str:
        if self._pushback:
            c, self._pushback = self._pushback, ""
            return c
        c = self._source.read(1)
        if not c:
            self._eof = True
        return c

    def _peek(self) -> str:
        if not self._pushback:
            self._pushback = self._source.read(1)
            if not self._pushback:
                self._eof = True
        return self._pushback

    def _skip_whitespace(self) -> None:
        while self._peek().isspace():
            self._get()

    def ignore(self, count: int = 1) -> None:
        """Discards up to count characters. Does nothing on a failed stream."""
        if self._failed:
            return
        for _ in range(count):
            if not self._get():
                break

    def at_end(self) -> bool:
        """True if only whitespace is left in the stream."""
        self._skip_whitespace()
        return self._peek() == ""

    def read_integer(self, base_type: Any) -> int | None:
        """
        Reads a decimal integer token: leading whitespace, optional sign, digits.

        Args:
            base_type (Any): the token must be representable in this base type

        Returns:
            int | None: the value, or None if the read failed (stream is marked as failed)
        """
        if self._failed:
            return None
        t = as_base_type(base_type)

        self._skip_whitespace()
        sign = ""
        if self._peek() in ("+", "-"):
            sign = self._get()

        # the whole digit run is consumed, but only as many significant digits as the widest
        # value of t are buffered
        max_digits = len(str(abs(limits(t)[0])))
        digits = ""
        seen_digit = False
        too_long = False
        while _is_digit(self._peek()):
            c = self._get()
            seen_digit = True
            if not digits and c == "0":
                continue
            if len(digits) < max_digits:
                digits += c
            else:
                too_long = True

        if not seen_digit:
            logger.debug(f"Expected integer token, got {self._peek()!r}")
            self.fail()
            return None
        if too_long:
            logger.debug(f"Integer token longer than {max_digits} digits does not fit into {np.dtype(t).name}")
            self.fail()
            return None
        value = int(sign + (digits or "0"))
        if not fits(value, t):
            logger.debug(f"Integer token {value} does not fit into {np.dtype(t).name}")
            self.fail()
            return None
        return value


def write_rational(stream: TextIO, r: Rational) -> TextIO:
    stream.write(format_rational(r))
    return stream


def read_rational(stream: TokenStream, target: Rational) -> TokenStream:
    """
    Reads "<numerator><delimiter><denominator>" into target. The delimiter is any single
    character and is not validated.

    If the input is malformed the target is reset to 0/1 and the stream is left in the failed
    state for the caller to inspect. No exception is raised for bad input.

    Args:
        stream (TokenStream): input
        target (Rational): receives the parsed, normalized value

    Returns:
        TokenStream: the stream, for chaining
    """
    numerator = stream.read_integer(target.base_type)
    stream.ignore(1)
    denominator = stream.read_integer(target.base_type)

    if not stream.failed:
        assert numerator is not None and denominator is not None
        try:
            target.set(numerator, denominator)
        except (ZeroDivisionError, OverflowError) as e:
            logger.debug(f"Cannot build Rational from {numerator}, {denominator}: {e}")
            stream.fail()

    if stream.failed:
        logger.debug("Rational input failed, resetting target to 0/1")
        target.set(0, 1)
    return stream


def parse_rational(text: str, base_type: Any = None) -> Rational:
    """
    Parses a single rational from text like "3/4". Unlike read_rational, malformed text
    (including trailing characters) raises ValueError.
    """
    stream = TokenStream(text)
    result = Rational(0, 1, base_type=base_type)
    read_rational(stream, result)
    if stream.failed or not stream.at_end():
        raise ValueError(f"Invalid rational literal: {text!r}")
    return result


def _is_digit(c: str) -> bool:
    # str.isdigit also accepts non-decimal unicode digits
    return len(c) == 1 and c in "0123456789"
