"""Cursor-based helpers for scanning numbers and tokens out of text."""

from __future__ import annotations

import math
import sys

_WHITESPACE = frozenset(" \t\n\r")
_NUMBER_MAX = sys.float_info.max


def _is_num(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_integral_digit(ch: str, base: int) -> bool:
    """Return True if ``ch`` is a valid digit in the given base."""
    if _is_num(ch):
        return ord(ch) - ord("0") < base
    if _is_alpha(ch):
        limit = min(base, 36) - 10
        return (
            ord("a") <= ord(ch) < ord("a") + limit
            or ord("A") <= ord(ch) < ord("A") + limit
        )
    return False


def _digit_value(ch: str) -> int:
    if _is_num(ch):
        return ord(ch) - ord("0")
    if ch >= "a":
        return ord(ch) - ord("a") + 10
    return ord(ch) - ord("A") + 10


class TextCursor:
    """A read position over a slice ``text[pos:end]``.

    Parsing methods advance ``pos`` past what they consume. A failed
    ``parse_integer`` or ``parse_number`` raises ``ValueError`` and leaves
    the position where it was.
    """

    __slots__ = ("text", "pos", "end")

    def __init__(self, text: str, pos: int = 0, end: int | None = None) -> None:
        self.text = text
        self.end = len(text) if end is None else end
        self.pos = pos

    def __repr__(self) -> str:
        return f"TextCursor(remaining={self.remaining!r})"

    @property
    def remaining(self) -> str:
        """The text not yet consumed."""
        return self.text[self.pos:self.end]

    @property
    def at_end(self) -> bool:
        return self.pos >= self.end

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < self.end else ""

    def skip(self, token: str) -> bool:
        """Consume ``token`` if the text continues with it."""
        if self.text.startswith(token, self.pos, self.end):
            self.pos += len(token)
            return True
        return False

    def skip_until(self, token: str) -> bool:
        """Advance to the next occurrence of ``token`` without consuming it.

        If there is none, the cursor moves to the end and False is returned.
        """
        index = self.text.find(token, self.pos, self.end)
        if index == -1:
            self.pos = self.end
            return False
        self.pos = index
        return self.pos < self.end

    def read_until(self, token: str) -> str | None:
        """Return the text up to the next ``token``, or None if it is absent."""
        start = self.pos
        if not self.skip_until(token):
            return None
        return self.text[start:self.pos]

    def skip_ws(self) -> bool:
        """Skip whitespace; return True if text remains."""
        while self.pos < self.end and self.text[self.pos] in _WHITESPACE:
            self.pos += 1
        return self.pos < self.end

    def skip_ws_delimiter(self, delimiter: str) -> bool:
        """Skip whitespace around at most one ``delimiter``.

        Returns False if the cursor is at neither whitespace nor the
        delimiter, or if no text remains afterwards.
        """
        ch = self._peek()
        if ch and ch not in _WHITESPACE and ch != delimiter:
            return False
        if self.skip_ws() and self._peek() == delimiter:
            self.pos += 1
            self.skip_ws()
        return self.pos < self.end

    def skip_ws_comma(self) -> bool:
        return self.skip_ws_delimiter(",")

    def parse_integer(self, base: int = 10, bits: int = 32, signed: bool = True) -> int:
        """Parse an integer that fits a ``bits``-wide (un)signed type."""
        if not 2 <= base <= 36:
            raise ValueError(f"unsupported base: {base}")
        int_max = (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1
        max_multiplier = int_max // base
        start = self.pos
        negative = False

        if self._peek() == "+":
            self.pos += 1
        elif signed and self._peek() == "-":
            self.pos += 1
            negative = True

        if self.at_end or not is_integral_digit(self._peek(), base):
            self.pos = start
            raise ValueError("expected an integer")

        value = 0
        while True:
            digit = _digit_value(self.text[self.pos])
            self.pos += 1
            if value > max_multiplier or (
                value == max_multiplier and digit > int_max % base + int(negative)
            ):
                self.pos = start
                raise ValueError("integer out of range")
            value = base * value + digit
            if self.at_end or not is_integral_digit(self._peek(), base):
                break

        return -value if negative else value

    def parse_number(self) -> float:
        """Parse a decimal number with optional fraction and exponent.

        An ``e`` followed by ``x`` or ``m`` is left alone, so that units
        such as ``em`` and ``ex`` stay unconsumed.
        """
        start = self.pos
        try:
            return self._parse_number()
        except ValueError:
            self.pos = start
            raise

    def _parse_number(self) -> float:
        integer = 0.0
        fraction = 0.0
        sign = 1
        expsign = 1
        exponent = 0

        if self._peek() == "+":
            self.pos += 1
        elif self._peek() == "-":
            self.pos += 1
            sign = -1

        ch = self._peek()
        if not ch or not (_is_num(ch) or ch == "."):
            raise ValueError("expected a number")

        if ch != ".":
            while _is_num(self._peek()):
                integer = 10.0 * integer + (ord(self._peek()) - ord("0"))
                self.pos += 1

        if self._peek() == ".":
            self.pos += 1
            if not _is_num(self._peek()):
                raise ValueError("expected digits after decimal point")
            divisor = 1.0
            while _is_num(self._peek()):
                fraction = 10.0 * fraction + (ord(self._peek()) - ord("0"))
                divisor *= 10.0
                self.pos += 1
            fraction /= divisor

        if self._peek() in ("e", "E") and self._peek(1) not in ("x", "m"):
            self.pos += 1
            if self._peek() == "+":
                self.pos += 1
            elif self._peek() == "-":
                self.pos += 1
                expsign = -1
            if not _is_num(self._peek()):
                raise ValueError("expected exponent digits")
            while _is_num(self._peek()):
                exponent = 10 * exponent + (ord(self._peek()) - ord("0"))
                self.pos += 1

        number = sign * (integer + fraction)
        if exponent:
            try:
                number *= math.pow(10.0, expsign * exponent)
            except OverflowError:
                number = math.inf if number > 0 else (-math.inf if number < 0 else math.nan)

        if not (-_NUMBER_MAX <= number <= _NUMBER_MAX):
            raise ValueError("number out of range")
        return number