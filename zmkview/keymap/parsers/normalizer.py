"""Mapping of row-major binding lists onto logical key ids."""

import logging

from zmkview.core.errors import ParseError
from zmkview.keymap.geometry import CORNE_42, KeyboardGeometry
from zmkview.keymap.models import Binding, Layer, RawLayer, get_key_id

from .binding_parser import BindingClassifier


class LayoutNormalizer:
    """Converts raw layers into layers keyed by ``L{layer}_R{row}C{col}``."""

    def __init__(
        self,
        classifier: BindingClassifier | None = None,
        geometry: KeyboardGeometry = CORNE_42,
    ) -> None:
        self.logger = logging.getLogger(__name__)
        self.classifier = classifier or BindingClassifier()
        self.geometry = geometry

    def normalize(self, raw_layers: list[RawLayer]) -> list[Layer]:
        """Normalize every raw layer.

        Args:
            raw_layers: Layers in source order

        Returns:
            Normalized layers with ids "0", "1", ...

        Raises:
            ParseError: If any layer does not have exactly the expected
                number of bindings; no partial result is returned
        """
        return [
            self.normalize_layer(raw_layer, index)
            for index, raw_layer in enumerate(raw_layers)
        ]

    def normalize_layer(self, raw_layer: RawLayer, layer_index: int) -> Layer:
        """Normalize a single raw layer at the given source index."""
        expected = self.geometry.total_keys
        actual = len(raw_layer.bindings)
        if actual != expected:
            raise ParseError(
                f'Layer "{raw_layer.name}" has {actual} bindings, expected {expected}'
            )

        keys: dict[str, Binding] = {}
        bindings = iter(raw_layer.bindings)
        for row, col in self.geometry.positions():
            keys[get_key_id(layer_index, row, col)] = self.classifier.classify(
                next(bindings)
            )

        self.logger.debug(
            "Normalized layer %d (%s) with %d keys",
            layer_index,
            raw_layer.name,
            len(keys),
        )
        return Layer(id=str(layer_index), name=raw_layer.name, keys=keys)
