"""Keymap parsing and layout models."""

from .geometry import CORNE_42, TOTAL_KEYS, KeyboardGeometry
from .models import (
    Binding,
    BindingType,
    KeymapConfig,
    KeymapMetadata,
    Layer,
    RawLayer,
    ValidationResult,
    get_key_id,
    parse_key_id,
)
from .parsers import (
    ZmkKeymapParser,
    create_zmk_keymap_parser,
    get_supported_bindings,
    parse_binding,
    parse_keymap_file,
    parse_keymap_path,
    validate_keymap_file,
    validate_keymap_path,
)


__all__ = [
    "CORNE_42",
    "TOTAL_KEYS",
    "Binding",
    "BindingType",
    "KeyboardGeometry",
    "KeymapConfig",
    "KeymapMetadata",
    "Layer",
    "RawLayer",
    "ValidationResult",
    "ZmkKeymapParser",
    "create_zmk_keymap_parser",
    "get_key_id",
    "get_supported_bindings",
    "parse_binding",
    "parse_key_id",
    "parse_keymap_file",
    "parse_keymap_path",
    "validate_keymap_file",
    "validate_keymap_path",
]
