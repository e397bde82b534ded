"""Integer literal token parsing.

Turns the source spelling of an integer literal (``0x0_01u32``, ``255``,
``0o377``...) into a :class:`ParsedLiteral`: the detected base, the digit
body with separators and type suffix removed, and the sign.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .exceptions import NegativeUnsupportedError, NotAnIntegerError

_SUFFIX_START = frozenset(string.ascii_letters)
_SUFFIX_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_FLOAT_SUFFIXES = frozenset({"f32", "f64"})


class Base(Enum):
    """Numeric base of a literal, keyed by its human-readable form name."""

    DECIMAL = ("decimal", 10, "", None)
    HEX = ("hex", 16, "0x", 4)
    OCTAL = ("octal", 8, "0o", None)
    BINARY = ("binary", 2, "0b", 1)

    def __init__(self, form: str, radix: int, prefix: str, bits_per_digit: Optional[int]) -> None:
        self.form = form
        self.radix = radix
        self.prefix = prefix
        self.bits_per_digit = bits_per_digit

    @property
    def digits(self) -> str:
        if self is Base.HEX:
            return string.hexdigits
        return string.digits[: self.radix]

    @classmethod
    def from_prefix(cls, text: str) -> "Base":
        """Return the base selected by the first two characters of *text*."""

        for base in (cls.HEX, cls.OCTAL, cls.BINARY):
            if text.startswith(base.prefix):
                return base
        return cls.DECIMAL


@dataclass(frozen=True)
class ParsedLiteral:
    """A syntactically valid integer literal.

    ``digits`` is the digit body without base prefix, separators or suffix,
    and is never empty.
    """

    text: str
    base: Base
    digits: str
    suffix: str = ""
    negative: bool = False

    @property
    def leading_zeros(self) -> int:
        """Number of ``0`` digits before the first non-zero digit."""

        return len(self.digits) - len(self.digits.lstrip("0"))

    @property
    def value(self) -> int:
        return int(self.digits, self.base.radix)


def _split_digits(body: str, base: Base) -> tuple[str, str]:
    allowed = base.digits + "_"
    end = 0
    while end < len(body) and body[end] in allowed:
        end += 1
    return body[:end], body[end:]


def _valid_suffix(suffix: str, base: Base) -> bool:
    if not suffix:
        return True
    if suffix[0] not in _SUFFIX_START or not set(suffix) <= _SUFFIX_CHARS:
        return False
    if base is not Base.HEX and (suffix[0] in "eE" or suffix in _FLOAT_SUFFIXES):
        # Exponent or float type suffix: a float literal, not an integer.
        return False
    return True


def parse_literal(text: str, *, locator: Optional[Any] = None) -> ParsedLiteral:
    """Parse *text* as a non-negative integer literal.

    Raises :class:`NotAnIntegerError` when *text* is not an integer literal
    and :class:`NegativeUnsupportedError` when a valid literal carries a
    leading minus sign. ``locator`` is attached to any raised error.
    """

    if not isinstance(text, str):
        raise NotAnIntegerError("expected integer literal", locator=locator)

    token = text.strip()
    if not token:
        raise NotAnIntegerError("unexpected end of input, expected integer literal", locator=locator)

    negative = token.startswith("-")
    if negative:
        token = token[1:].lstrip()

    if not token or token[0] not in string.digits:
        raise NotAnIntegerError("expected integer literal", locator=locator)

    base = Base.from_prefix(token)
    raw_digits, suffix = _split_digits(token[len(base.prefix) :], base)
    digits = raw_digits.replace("_", "")
    if not digits or not _valid_suffix(suffix, base):
        raise NotAnIntegerError("expected integer literal", locator=locator)

    if negative:
        raise NegativeUnsupportedError(locator=locator)

    return ParsedLiteral(text=text, base=base, digits=digits, suffix=suffix)


__all__ = ["Base", "ParsedLiteral", "parse_literal"]
