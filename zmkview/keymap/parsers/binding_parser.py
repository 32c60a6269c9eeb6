"""Classification of ZMK binding strings into Binding models."""

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from zmkview.keymap.models import Binding, BindingType
from zmkview.keymap.symbols import ZMK_KEY_LABELS


logger = logging.getLogger(__name__)


class BindingKind(str, Enum):
    """Recognized binding syntaxes, plus RAW for anything else."""

    TRANSPARENT = "transparent"
    NONE = "none"
    KEYPRESS = "keypress"
    MOMENTARY = "momentary"
    MOD_TAP = "mod_tap"
    LAYER_TAP = "layer_tap"
    TOGGLE = "toggle"
    STICKY = "sticky"
    COMBO = "combo"
    RAW = "raw"


@dataclass(frozen=True)
class BindingMatcher:
    """Pattern for one binding kind and the builder for its Binding."""

    kind: BindingKind
    pattern: re.Pattern[str]
    build: Callable[["BindingClassifier", re.Match[str]], Binding]


def _transparent(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    return Binding(code="TRANS", label="▽", type=BindingType.KEYCODE)


def _none(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    return Binding(code="NONE", label="", type=BindingType.KEYCODE)


def _keypress(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    key = match["key"].upper()
    return Binding(code=key, label=classifier.key_label(key), type=BindingType.KEYCODE)


def _momentary(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    layer = match["layer"]
    return Binding(code=f"MO({layer})", label=f"L{layer}", type=BindingType.LAYER)


def _mod_tap(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    modifier = match["mod"].upper()
    key = match["key"].upper()
    return Binding(
        code=f"MT({modifier}, {key})",
        label=f"{classifier.key_label(modifier)}/{classifier.key_label(key)}",
        type=BindingType.MODIFIER,
    )


def _layer_tap(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    layer = match["layer"]
    key = match["key"].upper()
    return Binding(
        code=f"LT({layer}, {key})",
        label=f"L{layer}/{classifier.key_label(key)}",
        type=BindingType.LAYER,
    )


def _toggle(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    layer = match["layer"]
    return Binding(code=f"TG({layer})", label=f"TG{layer}", type=BindingType.LAYER)


def _sticky(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    modifier = match["mod"].upper()
    return Binding(
        code=f"SK({modifier})",
        label=f"SK({classifier.key_label(modifier)})",
        type=BindingType.MODIFIER,
    )


def _combo(classifier: "BindingClassifier", match: re.Match[str]) -> Binding:
    name = match["name"]
    return Binding(code=f"COMBO_{name.upper()}", label=name, type=BindingType.COMBO)


# Order matters: argument-less forms are tried first
DEFAULT_MATCHERS: tuple[BindingMatcher, ...] = (
    BindingMatcher(
        BindingKind.TRANSPARENT, re.compile(r"^&trans$", re.I), _transparent
    ),
    BindingMatcher(BindingKind.NONE, re.compile(r"^&none$", re.I), _none),
    BindingMatcher(
        BindingKind.KEYPRESS,
        re.compile(r"^&kp\s+(?P<key>[A-Z0-9_]+)$", re.I),
        _keypress,
    ),
    BindingMatcher(
        BindingKind.MOMENTARY, re.compile(r"^&mo\s+(?P<layer>\d+)$", re.I), _momentary
    ),
    BindingMatcher(
        BindingKind.MOD_TAP,
        re.compile(r"^&mt\s+(?P<mod>[A-Z0-9_]+)\s+(?P<key>[A-Z0-9_]+)$", re.I),
        _mod_tap,
    ),
    BindingMatcher(
        BindingKind.LAYER_TAP,
        re.compile(r"^&lt\s+(?P<layer>\d+)\s+(?P<key>[A-Z0-9_]+)$", re.I),
        _layer_tap,
    ),
    BindingMatcher(
        BindingKind.TOGGLE, re.compile(r"^&tog\s+(?P<layer>\d+)$", re.I), _toggle
    ),
    BindingMatcher(
        BindingKind.STICKY, re.compile(r"^&sk\s+(?P<mod>[A-Z0-9_]+)$", re.I), _sticky
    ),
    BindingMatcher(
        BindingKind.COMBO, re.compile(r"^&combo_(?P<name>[A-Za-z0-9_]+)$", re.I), _combo
    ),
)

SUPPORTED_BINDINGS: tuple[str, ...] = (
    "&kp KEY - Keypress",
    "&mo LAYER - Momentary layer",
    "&mt MOD KEY - Mod-tap",
    "&lt LAYER KEY - Layer-tap",
    "&tog LAYER - Toggle layer",
    "&sk MOD - Sticky key",
    "&trans - Transparent",
    "&none - No operation",
)


class BindingClassifier:
    """Maps binding strings such as ``&mt LSHIFT A`` to Binding models.

    Classification is total: strings matching no known syntax are kept
    verbatim as keycode bindings.
    """

    def __init__(
        self,
        key_labels: Mapping[str, str] | None = None,
        matchers: tuple[BindingMatcher, ...] = DEFAULT_MATCHERS,
    ) -> None:
        """Initialize classifier.

        Args:
            key_labels: Key name to display symbol table
            matchers: Matchers tried in order
        """
        self.key_labels = ZMK_KEY_LABELS if key_labels is None else key_labels
        self.matchers = matchers

    def key_label(self, key: str) -> str:
        """Display label for an upper-cased key name."""
        return self.key_labels.get(key, key)

    def classify_kind(self, token: str) -> BindingKind:
        """Return which binding syntax the token uses."""
        text = token.strip()
        for matcher in self.matchers:
            if matcher.pattern.match(text):
                return matcher.kind
        return BindingKind.RAW

    def classify(self, token: str) -> Binding:
        """Convert a single binding string into a Binding."""
        text = token.strip()
        for matcher in self.matchers:
            match = matcher.pattern.match(text)
            if match:
                return matcher.build(self, match)

        logger.debug("Unrecognized binding kept verbatim: %r", text)
        return Binding(code=text, label=text, type=BindingType.KEYCODE)


_default_classifier = BindingClassifier()


def parse_binding(token: str) -> Binding:
    """Parse a ZMK binding string with the default symbol table.

    Args:
        token: Binding text, e.g. ``"&kp TAB"``

    Returns:
        Classified Binding; unknown syntaxes fall back to a raw keycode
    """
    return _default_classifier.classify(token)


def get_supported_bindings() -> list[str]:
    """Return descriptions of the supported binding syntaxes."""
    return list(SUPPORTED_BINDINGS)


def create_binding_classifier(
    key_labels: Mapping[str, str] | None = None,
) -> BindingClassifier:
    """Create a binding classifier, optionally with a custom symbol table."""
    return BindingClassifier(key_labels=key_labels)
