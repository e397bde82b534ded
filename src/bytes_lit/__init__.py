"""Convert integer literals into big-endian byte arrays."""

from .encoder import EncodeOutcome, EncodingPolicy, encode, encode_literal, encode_many
from .exceptions import (
    BytesLitError,
    ConfigurationError,
    EncodeError,
    LeadingZerosUnsupportedError,
    NegativeUnsupportedError,
    NotAnIntegerError,
    UnsupportedFormError,
)
from .literal import Base, ParsedLiteral, parse_literal
from .render import render, to_numpy

__version__ = "0.1.0"

__all__ = [
    "Base",
    "BytesLitError",
    "ConfigurationError",
    "EncodeError",
    "EncodeOutcome",
    "EncodingPolicy",
    "LeadingZerosUnsupportedError",
    "NegativeUnsupportedError",
    "NotAnIntegerError",
    "ParsedLiteral",
    "UnsupportedFormError",
    "encode",
    "encode_literal",
    "encode_many",
    "parse_literal",
    "render",
    "to_numpy",
]
