"""zmkview - ZMK keymap parser for a 42-key split keyboard viewer."""

from importlib.metadata import distribution

from .keymap import (
    Binding,
    BindingType,
    KeymapConfig,
    Layer,
    ValidationResult,
    get_supported_bindings,
    parse_binding,
    parse_keymap_file,
    validate_keymap_file,
)


__version__ = distribution(__package__ or "zmkview").version

__all__ = [
    "Binding",
    "BindingType",
    "KeymapConfig",
    "Layer",
    "ValidationResult",
    "__version__",
    "get_supported_bindings",
    "parse_binding",
    "parse_keymap_file",
    "validate_keymap_file",
]
