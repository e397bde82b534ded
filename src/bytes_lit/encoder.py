"""Integer literal to big-endian byte array encoding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, Union

from .exceptions import ConfigurationError, EncodeError, LeadingZerosUnsupportedError, UnsupportedFormError
from .literal import Base, ParsedLiteral, parse_literal

logger = logging.getLogger(__name__)


class EncodingPolicy(str, Enum):
    """How leading zero digits of a literal map onto leading zero bytes.

    ``EXACT`` keeps hex and binary zero padding as zero bits and refuses
    padded decimal and octal literals. ``MINIMAL`` always drops padding and
    produces the fewest bytes that hold the value. ``MINIMAL_HEX_BINARY``
    behaves like ``MINIMAL`` but only accepts hex and binary literals.
    """

    EXACT = "exact"
    MINIMAL = "minimal"
    MINIMAL_HEX_BINARY = "minimal-hex-binary"

    @classmethod
    def coerce(cls, value: Union["EncodingPolicy", str]) -> "EncodingPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().replace("_", "-"))
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ConfigurationError(f"unsupported policy '{value}' (expected one of: {choices})") from None

    @property
    def preserves_padding(self) -> bool:
        return self is EncodingPolicy.EXACT

    def accepts(self, base: Base) -> bool:
        if self is EncodingPolicy.MINIMAL_HEX_BINARY:
            return base.bits_per_digit is not None
        return True


def _leading_zero_bits(literal: ParsedLiteral, policy: EncodingPolicy, locator: Optional[Any]) -> int:
    if not policy.preserves_padding:
        return 0

    count = literal.leading_zeros
    bits_per_digit = literal.base.bits_per_digit
    if bits_per_digit is not None:
        return count * bits_per_digit
    if count > 0:
        raise LeadingZerosUnsupportedError(literal.base.form, locator=locator)
    return 0


def to_bytes_be(value: int, length: int) -> bytes:
    """Return *value* as exactly *length* big-endian bytes."""

    assert value >= 0, "value must be non-negative"
    assert length * 8 >= value.bit_length(), "length too small for value"
    return value.to_bytes(length, "big")


def encode_literal(
    literal: ParsedLiteral,
    policy: Union[EncodingPolicy, str] = EncodingPolicy.EXACT,
    *,
    locator: Optional[Any] = None,
) -> bytes:
    """Encode an already parsed literal under *policy*."""

    policy = EncodingPolicy.coerce(policy)
    if not policy.accepts(literal.base):
        raise UnsupportedFormError(locator=locator)

    zero_bits = _leading_zero_bits(literal, policy, locator)
    value = literal.value
    total_bits = zero_bits + value.bit_length()
    total_len = max(1, (total_bits + 7) // 8)

    logger.debug(
        "encoded %s literal %r: %d leading zero digit(s), %d padding bit(s), %d byte(s)",
        literal.base.form,
        literal.text,
        literal.leading_zeros,
        zero_bits,
        total_len,
    )
    return to_bytes_be(value, total_len)


def encode(
    text: str,
    policy: Union[EncodingPolicy, str] = EncodingPolicy.EXACT,
    *,
    locator: Optional[Any] = None,
) -> bytes:
    """Encode the integer literal *text* into a big-endian byte string.

    The result always holds at least one byte. Failures raise a subclass of
    :class:`~bytes_lit.exceptions.EncodeError` carrying *locator* unchanged.

    >>> encode("0x0001")
    b'\\x00\\x01'
    >>> encode("0x0001", "minimal")
    b'\\x01'
    """

    policy = EncodingPolicy.coerce(policy)
    literal = parse_literal(text, locator=locator)
    return encode_literal(literal, policy, locator=locator)


@dataclass(frozen=True)
class EncodeOutcome:
    """Result of encoding one literal of a batch."""

    text: str
    locator: Optional[Any]
    data: Optional[bytes] = None
    error: Optional[EncodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        item: dict = {"literal": self.text, "locator": self.locator}
        if self.error is not None:
            item["error"] = self.error.message
            item["kind"] = self.error.kind
        else:
            item["bytes"] = list(self.data or b"")
        return item


def encode_many(
    items: Iterable[Tuple[str, Optional[Any]]],
    policy: Union[EncodingPolicy, str] = EncodingPolicy.EXACT,
) -> List[EncodeOutcome]:
    """Encode ``(text, locator)`` pairs, collecting failures instead of raising."""

    policy = EncodingPolicy.coerce(policy)
    outcomes: List[EncodeOutcome] = []
    for text, locator in items:
        try:
            data = encode(text, policy, locator=locator)
        except EncodeError as exc:
            logger.debug("failed to encode %r at %s: %s", text, locator, exc)
            outcomes.append(EncodeOutcome(text=text, locator=locator, error=exc))
            continue
        outcomes.append(EncodeOutcome(text=text, locator=locator, data=data))
    return outcomes


__all__ = [
    "EncodeOutcome",
    "EncodingPolicy",
    "encode",
    "encode_literal",
    "encode_many",
    "to_bytes_be",
]
