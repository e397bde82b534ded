"""Runtime settings for the bytes-lit command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .encoder import EncodingPolicy
from .exceptions import ConfigurationError
from .render import FORMATS
from .utils.logging import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

POLICY_ENV = "BYTES_LIT_POLICY"
FORMAT_ENV = "BYTES_LIT_FORMAT"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """Defaults applied when the command line does not override them."""

    policy: EncodingPolicy = EncodingPolicy.EXACT
    output_format: str = "rust"
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "policy", EncodingPolicy.coerce(self.policy))
        fmt = str(self.output_format).lower()
        if fmt not in FORMATS:
            raise ConfigurationError(f"unsupported output format '{self.output_format}'")
        object.__setattr__(self, "output_format", fmt)
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(f"unsupported log level '{self.log_level}'")
        object.__setattr__(self, "log_level", level)

    def to_dict(self) -> dict:
        return {
            "policy": self.policy.value,
            "output_format": self.output_format,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError("settings must be a mapping")
        unknown = set(data) - {"policy", "output_format", "log_level"}
        if unknown:
            raise ConfigurationError(f"unknown settings: {', '.join(sorted(unknown))}")
        return cls(**dict(data))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        data = {}
        if env.get(POLICY_ENV):
            data["policy"] = env[POLICY_ENV]
        if env.get(FORMAT_ENV):
            data["output_format"] = env[FORMAT_ENV]
        if env.get(LOG_LEVEL_ENV):
            data["log_level"] = env[LOG_LEVEL_ENV]
        return cls.from_dict(data)


__all__ = ["FORMAT_ENV", "POLICY_ENV", "Settings"]
