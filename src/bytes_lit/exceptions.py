"""Custom exception hierarchy for the bytes-lit encoder."""
from __future__ import annotations

from typing import Any, Optional


class BytesLitError(Exception):
    """Base class for all bytes-lit errors."""


class ConfigurationError(BytesLitError):
    """Raised when a policy, output format or setting is invalid."""


class EncodeError(BytesLitError):
    """Raised when a literal cannot be encoded into bytes.

    ``locator`` is whatever the caller passed alongside the literal (a span,
    a ``path:line`` string, ...). It is carried unchanged so the caller can
    point its diagnostic at the offending source.
    """

    kind = "EncodeError"

    def __init__(self, message: str, *, locator: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.locator = locator

    def __str__(self) -> str:
        return self.message


class NotAnIntegerError(EncodeError):
    """Raised when the input is not an integer literal."""

    kind = "NotAnInteger"


class NegativeUnsupportedError(EncodeError):
    """Raised when the literal carries a leading minus sign."""

    kind = "NegativeUnsupported"

    def __init__(self, *, locator: Optional[Any] = None) -> None:
        super().__init__("negative values unsupported", locator=locator)


class LeadingZerosUnsupportedError(EncodeError):
    """Raised when zero padding cannot be mapped onto whole bits."""

    kind = "LeadingZerosUnsupported"

    def __init__(self, base: str, *, locator: Optional[Any] = None) -> None:
        super().__init__(
            f"leading zeros are not preserved or supported on integer literals in {base} form",
            locator=locator,
        )
        self.base = base


class UnsupportedFormError(EncodeError):
    """Raised when a policy only accepts hex and binary literals."""

    kind = "UnsupportedForm"

    def __init__(self, *, locator: Optional[Any] = None) -> None:
        super().__init__(
            "only positive hex (0x) and binary (0b) integer literals are supported",
            locator=locator,
        )


__all__ = [
    "BytesLitError",
    "ConfigurationError",
    "EncodeError",
    "LeadingZerosUnsupportedError",
    "NegativeUnsupportedError",
    "NotAnIntegerError",
    "UnsupportedFormError",
]
