"""ZMK keymap parser producing KeymapConfig models."""

import logging
from pathlib import Path

from zmkview.core.errors import KeymapParseError, ParseError
from zmkview.keymap.models import KeymapConfig, KeymapMetadata, ValidationResult

from .layer_extractor import LayerExtractor
from .normalizer import LayoutNormalizer
from .validator import KeymapValidator


class ZmkKeymapParser:
    """Parser for converting ZMK keymap text into a KeymapConfig.

    Pipeline: extract layers from the token stream of the raw text (comments
    are dropped there, so error positions refer to the original source), then
    normalize, classifying every binding. Parsing is all-or-nothing: any
    structural problem raises KeymapParseError and no partial config is
    returned.
    """

    def __init__(
        self,
        extractor: LayerExtractor | None = None,
        normalizer: LayoutNormalizer | None = None,
        validator: KeymapValidator | None = None,
        metadata: KeymapMetadata | None = None,
    ) -> None:
        """Initialize the keymap parser with explicit dependencies.

        Args:
            extractor: Layer extractor for the keymap block
            normalizer: Layout normalizer mapping bindings to key ids
            validator: Advisory validator
            metadata: Metadata template copied into every parse result
        """
        self.logger = logging.getLogger(__name__)
        self.extractor = extractor or LayerExtractor()
        self.normalizer = normalizer or LayoutNormalizer()
        self.validator = validator or KeymapValidator(
            extractor=self.extractor,
            total_keys=self.normalizer.geometry.total_keys,
        )
        self.metadata = metadata or KeymapMetadata()

    def parse(self, content: str) -> KeymapConfig:
        """Parse keymap file content.

        Args:
            content: Raw keymap file content

        Returns:
            Parsed KeymapConfig

        Raises:
            KeymapParseError: If the keymap block is missing or malformed,
                has no layers, or a layer has the wrong number of bindings
        """
        try:
            raw_layers = self.extractor.extract(content)
            if not raw_layers:
                raise ParseError("No layers found in keymap file")
            layers = self.normalizer.normalize(raw_layers)
        except ParseError as e:
            exc_info = self.logger.isEnabledFor(logging.DEBUG)
            self.logger.error("Failed to parse keymap: %s", e, exc_info=exc_info)
            raise KeymapParseError(f"Failed to parse keymap file: {e}") from e

        metadata = self.metadata.model_copy(
            update={"total_keys": self.normalizer.geometry.total_keys}
        )
        self.logger.debug("Parsed keymap with %d layers", len(layers))
        return KeymapConfig(layers=layers, metadata=metadata)

    def validate(self, content: str) -> ValidationResult:
        """Run advisory validation; never raises."""
        return self.validator.validate(content)

    def parse_path(self, keymap_file: Path) -> KeymapConfig:
        """Read a UTF-8 keymap file and parse it.

        Raises:
            FileNotFoundError: If the file does not exist
            KeymapParseError: If parsing fails
        """
        return self.parse(keymap_file.read_text(encoding="utf-8"))

    def validate_path(self, keymap_file: Path) -> ValidationResult:
        """Read a UTF-8 keymap file and validate it."""
        return self.validate(keymap_file.read_text(encoding="utf-8"))


def create_zmk_keymap_parser(
    metadata: KeymapMetadata | None = None,
) -> ZmkKeymapParser:
    """Create ZMK keymap parser with default dependencies.

    Args:
        metadata: Optional metadata defaults for parse results

    Returns:
        Configured ZmkKeymapParser instance
    """
    return ZmkKeymapParser(metadata=metadata)


_default_parser = create_zmk_keymap_parser()


def parse_keymap_file(content: str) -> KeymapConfig:
    """Parse keymap file content with the default parser."""
    return _default_parser.parse(content)


def validate_keymap_file(content: str) -> ValidationResult:
    """Validate keymap file content with the default parser."""
    return _default_parser.validate(content)


def parse_keymap_path(keymap_file: Path) -> KeymapConfig:
    """Parse a keymap file from disk with the default parser."""
    return _default_parser.parse_path(keymap_file)


def validate_keymap_path(keymap_file: Path) -> ValidationResult:
    """Validate a keymap file from disk with the default parser."""
    return _default_parser.validate_path(keymap_file)
