"""Keymap layout models produced by the keymap parser."""

import re
from enum import Enum

from pydantic import ConfigDict, Field

from zmkview.models.base import ZmkViewBaseModel


KEY_ID_PATTERN = re.compile(r"^L(?P<layer>\d+)_R(?P<row>\d+)C(?P<col>\d+)$")


def get_key_id(layer: int | str, row: int, col: int) -> str:
    """Build the key identifier addressing one binding slot of a layer."""
    return f"L{layer}_R{row}C{col}"


def parse_key_id(key_id: str) -> tuple[int, int, int]:
    """Split a key identifier into its (layer, row, col) parts.

    Raises:
        ValueError: If the identifier is not of the form L{layer}_R{row}C{col}
    """
    match = KEY_ID_PATTERN.match(key_id)
    if not match:
        raise ValueError(f"Invalid key id: {key_id!r}")
    return int(match["layer"]), int(match["row"]), int(match["col"])


class BindingType(str, Enum):
    """Semantic category of a key binding."""

    KEYCODE = "keycode"
    LAYER = "layer"
    MODIFIER = "modifier"
    COMBO = "combo"


class Binding(ZmkViewBaseModel):
    """Action assigned to one key on one layer."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Canonical code, e.g. 'MT(LSHIFT, A)'")
    label: str | None = Field(default=None, description="Display string")
    type: BindingType = Field(description="Binding category")

    @property
    def display_label(self) -> str:
        """Label to render, falling back to the code when no label is set."""
        return self.label if self.label is not None else self.code


class RawLayer(ZmkViewBaseModel):
    """Layer as extracted from source text, before classification."""

    name: str
    bindings: list[str] = Field(default_factory=list)


class Layer(ZmkViewBaseModel):
    """Normalized layer with bindings addressed by key id."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    keys: dict[str, Binding] = Field(default_factory=dict)


class KeymapMetadata(ZmkViewBaseModel):
    """Descriptive metadata attached to a parsed keymap."""

    name: str = "Parsed ZMK Keymap"
    version: str = "1.0.0"
    layout: str = "ZMK"
    total_keys: int = Field(default=42, alias="totalKeys")


class KeymapConfig(ZmkViewBaseModel):
    """Complete parsed keymap: ordered layers plus metadata."""

    layers: list[Layer] = Field(default_factory=list)
    metadata: KeymapMetadata = Field(default_factory=KeymapMetadata)

    def get_layer(self, layer_id: str) -> Layer | None:
        """Return the layer with the given id, or None."""
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def get_binding(self, layer_id: str, key_id: str) -> Binding | None:
        """Return the binding stored under key_id in a layer, or None."""
        layer = self.get_layer(layer_id)
        if layer is None:
            return None
        return layer.keys.get(key_id)


class ValidationResult(ZmkViewBaseModel):
    """Outcome of advisory keymap validation."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
