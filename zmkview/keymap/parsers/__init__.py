"""Keymap text parsers."""

from .binding_parser import (
    BindingClassifier,
    BindingKind,
    create_binding_classifier,
    get_supported_bindings,
    parse_binding,
)
from .keymap_parser import (
    ZmkKeymapParser,
    create_zmk_keymap_parser,
    parse_keymap_file,
    parse_keymap_path,
    validate_keymap_file,
    validate_keymap_path,
)
from .layer_extractor import LayerExtractor, create_layer_extractor, split_bindings
from .normalizer import LayoutNormalizer
from .preprocessor import preprocess
from .tokenizer import Token, TokenType, tokenize
from .validator import KeymapValidator


__all__ = [
    "BindingClassifier",
    "BindingKind",
    "KeymapValidator",
    "LayerExtractor",
    "LayoutNormalizer",
    "Token",
    "TokenType",
    "ZmkKeymapParser",
    "create_binding_classifier",
    "create_layer_extractor",
    "create_zmk_keymap_parser",
    "get_supported_bindings",
    "parse_binding",
    "parse_keymap_file",
    "parse_keymap_path",
    "preprocess",
    "split_bindings",
    "tokenize",
    "validate_keymap_file",
    "validate_keymap_path",
]
