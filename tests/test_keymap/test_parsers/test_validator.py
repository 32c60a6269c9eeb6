"""Tests for advisory keymap validation."""

import pytest

from zmkview.keymap.models import RawLayer
from zmkview.keymap.parsers.validator import KeymapValidator


@pytest.fixture
def validator():
    return KeymapValidator()


class TestKeymapValidator:
    """Test that validation collects problems instead of raising."""

    def test_valid_keymap(self, validator, sample_keymap_content):
        result = validator.validate(sample_keymap_content)

        assert result.valid is True
        assert result.errors == []

    def test_plain_text_reports_every_problem(self, validator):
        result = validator.validate("hello world")

        assert result.valid is False
        assert result.errors == [
            "Missing keymap block",
            "Missing bindings definition",
            "No keymap block found",
            "No layers found",
        ]

    def test_empty_content(self, validator):
        result = validator.validate("")
        assert result.valid is False
        assert "Missing keymap block" in result.errors

    def test_short_layer(self, validator, make_keymap, base_bindings):
        content = make_keymap([("base", base_bindings[:-1])])
        result = validator.validate(content)

        assert result.valid is False
        assert result.errors == ['Layer 0 ("base_layer") has 41 bindings, expected 42']

    def test_reports_every_bad_layer(self, validator, make_keymap, base_bindings):
        content = make_keymap(
            [
                ("base", base_bindings),
                ("short", base_bindings[:40]),
                ("long", base_bindings + ["&kp A"]),
            ]
        )
        result = validator.validate(content)

        assert result.errors == [
            'Layer 1 ("short_layer") has 40 bindings, expected 42',
            'Layer 2 ("long_layer") has 43 bindings, expected 42',
        ]

    def test_keymap_without_layers(self, validator):
        content = '/ { keymap { compatible = "zmk,keymap"; }; };'
        result = validator.validate(content)

        assert result.errors == ["Missing bindings definition", "No layers found"]

    def test_unterminated_block_is_reported_with_position(self, validator):
        content = "/ {\n  keymap {\n    base { bindings = <&kp A>; };\n"
        result = validator.validate(content)

        assert result.errors == [
            "Unterminated keymap block (line 2, column 3)",
            "No layers found",
        ]

    def test_comment_marker_inside_string(self, validator, sample_keymap_content):
        content = sample_keymap_content.replace(
            'display-name = "base"', 'display-name = "Nav//Sym"'
        )
        assert validator.validate(content).errors == []

    def test_never_raises_on_garbage(self, validator):
        result = validator.validate("keymap { { { bindings = < & >")
        assert result.valid is False

    def test_validate_layers_reports_empty_bindings(self, validator, base_bindings):
        bindings = list(base_bindings)
        bindings[5] = ""
        bindings[7] = "   "
        result = validator.validate_layers([RawLayer(name="base", bindings=bindings)])

        assert result.errors == [
            "Layer 0 has empty binding at position 5",
            "Layer 0 has empty binding at position 7",
        ]

    def test_validate_layers_empty(self, validator):
        result = validator.validate_layers([])
        assert result.errors == ["No layers found"]

    def test_custom_total_keys(self):
        validator = KeymapValidator(total_keys=2)
        result = validator.validate_layers(
            [RawLayer(name="tiny", bindings=["&kp A", "&kp B"])]
        )
        assert result.valid is True
