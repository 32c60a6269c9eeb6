"""Core utilities shared across zmkview."""

from .errors import (
    ConfigError,
    KeymapError,
    KeymapParseError,
    ParseError,
    ZmkViewError,
)


__all__ = [
    "ConfigError",
    "KeymapError",
    "KeymapParseError",
    "ParseError",
    "ZmkViewError",
]
