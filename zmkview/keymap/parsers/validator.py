"""Advisory validation of keymap content."""

import logging

from zmkview.core.errors import ParseError
from zmkview.keymap.geometry import TOTAL_KEYS
from zmkview.keymap.models import RawLayer, ValidationResult

from .layer_extractor import LayerExtractor


class KeymapValidator:
    """Collects every structural problem in a keymap without raising."""

    def __init__(
        self,
        extractor: LayerExtractor | None = None,
        total_keys: int = TOTAL_KEYS,
    ) -> None:
        self.logger = logging.getLogger(__name__)
        self.extractor = extractor or LayerExtractor()
        self.total_keys = total_keys

    def validate(self, content: str) -> ValidationResult:
        """Validate keymap file content.

        Args:
            content: Raw keymap file content

        Returns:
            ValidationResult with all findings in discovery order
        """
        errors: list[str] = []

        if "keymap" not in content:
            errors.append("Missing keymap block")
        if "bindings" not in content:
            errors.append("Missing bindings definition")

        layers: list[RawLayer] = []
        try:
            layers = self.extractor.extract(content)
        except ParseError as e:
            errors.append(str(e))

        errors.extend(self.check_layers(layers))

        if errors:
            self.logger.debug("Keymap validation found %d problems", len(errors))
        return ValidationResult(valid=not errors, errors=errors)

    def validate_layers(self, layers: list[RawLayer]) -> ValidationResult:
        """Validate already extracted layers."""
        errors = self.check_layers(layers)
        return ValidationResult(valid=not errors, errors=errors)

    def check_layers(self, layers: list[RawLayer]) -> list[str]:
        """Return layer count, binding count and empty binding findings."""
        if not layers:
            return ["No layers found"]

        errors = []
        for index, layer in enumerate(layers):
            if len(layer.bindings) != self.total_keys:
                errors.append(
                    f'Layer {index} ("{layer.name}") has {len(layer.bindings)} '
                    f"bindings, expected {self.total_keys}"
                )
            for position, binding in enumerate(layer.bindings):
                if not binding or not binding.strip():
                    errors.append(
                        f"Layer {index} has empty binding at position {position}"
                    )
        return errors
