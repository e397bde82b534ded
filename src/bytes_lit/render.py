"""Rendering of encoded byte arrays into array syntax."""

from __future__ import annotations

import json
from typing import Callable, Dict

import numpy as np
from numpy.typing import NDArray

from .exceptions import ConfigurationError


def _ensure_bytes(data: bytes) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise ConfigurationError("data must be bytes")
    if not data:
        raise ConfigurationError("an encoded byte array holds at least one byte")
    return bytes(data)


def to_numpy(data: bytes) -> NDArray[np.uint8]:
    """Return *data* as a one-dimensional ``uint8`` array."""

    return np.frombuffer(_ensure_bytes(data), dtype=np.uint8).copy()


def render_rust(data: bytes) -> str:
    """Render as a Rust ``u8`` array expression, e.g. ``[1u8, 0u8]``."""

    return "[" + ", ".join(f"{b}u8" for b in _ensure_bytes(data)) + "]"


def render_python(data: bytes) -> str:
    return repr(_ensure_bytes(data))


def render_c(data: bytes) -> str:
    return "{" + ", ".join(f"0x{b:02x}" for b in _ensure_bytes(data)) + "}"


def render_hex(data: bytes) -> str:
    return _ensure_bytes(data).hex()


def render_list(data: bytes) -> str:
    return json.dumps(list(_ensure_bytes(data)))


def render_numpy(data: bytes) -> str:
    return repr(to_numpy(data))


RENDERERS: Dict[str, Callable[[bytes], str]] = {
    "rust": render_rust,
    "python": render_python,
    "c": render_c,
    "hex": render_hex,
    "list": render_list,
    "json": render_list,
    "numpy": render_numpy,
}

FORMATS = tuple(RENDERERS)


def render(data: bytes, fmt: str = "rust") -> str:
    """Render *data* using the output format named *fmt*."""

    try:
        renderer = RENDERERS[fmt.lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            f"unsupported output format '{fmt}' (expected one of: {', '.join(FORMATS)})"
        ) from None
    return renderer(data)


__all__ = [
    "FORMATS",
    "RENDERERS",
    "render",
    "render_c",
    "render_hex",
    "render_list",
    "render_numpy",
    "render_python",
    "render_rust",
    "to_numpy",
]
