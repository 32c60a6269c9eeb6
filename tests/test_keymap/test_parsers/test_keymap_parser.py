"""Tests for the ZMK keymap parser."""

from pathlib import Path

import pytest

from zmkview import parse_keymap_file, validate_keymap_file
from zmkview.core.errors import KeymapError, KeymapParseError, ParseError
from zmkview.keymap.models import BindingType, KeymapMetadata
from zmkview.keymap.parsers import (
    ZmkKeymapParser,
    create_zmk_keymap_parser,
    parse_keymap_path,
    validate_keymap_path,
)


@pytest.fixture
def parser():
    return create_zmk_keymap_parser()


class TestZmkKeymapParser:
    """Test end to end keymap parsing."""

    def test_factory(self):
        assert isinstance(create_zmk_keymap_parser(), ZmkKeymapParser)

    def test_parse_sample(self, parser, sample_keymap_content):
        keymap = parser.parse(sample_keymap_content)

        assert [layer.name for layer in keymap.layers] == ["base_layer", "lower_layer"]
        assert [layer.id for layer in keymap.layers] == ["0", "1"]
        assert all(len(layer.keys) == 42 for layer in keymap.layers)

    def test_parsed_bindings(self, parser, sample_keymap_content):
        keymap = parser.parse(sample_keymap_content)

        tab = keymap.get_binding("0", "L0_R0C0")
        assert tab is not None
        assert (tab.code, tab.label, tab.type) == ("TAB", "⇥", BindingType.KEYCODE)

        assert keymap.get_binding("0", "L0_R3C10").code == "MO(2)"
        assert keymap.get_binding("1", "L1_R0C0").code == "TRANS"
        assert keymap.get_binding("1", "L1_R0C2").label == "⇧/A"
        assert keymap.get_binding("1", "L1_R0C3").code == "LT(2, SPACE)"
        assert keymap.get_binding("1", "L1_R0C6").type == BindingType.COMBO
        assert keymap.get_binding("1", "L1_R3C11").code == "F"

    def test_thumb_row_columns(self, parser, sample_keymap_content):
        keys = parser.parse(sample_keymap_content).get_layer("1").keys

        thumbs = {key_id: keys[key_id].code for key_id in keys if "_R3" in key_id}
        assert thumbs == {
            "L1_R3C0": "A",
            "L1_R3C1": "B",
            "L1_R3C2": "C",
            "L1_R3C9": "D",
            "L1_R3C10": "E",
            "L1_R3C11": "F",
        }

    def test_default_metadata(self, parser, sample_keymap_content):
        metadata = parser.parse(sample_keymap_content).metadata

        assert metadata.name == "Parsed ZMK Keymap"
        assert metadata.version == "1.0.0"
        assert metadata.layout == "ZMK"
        assert metadata.total_keys == 42

    def test_custom_metadata(self, sample_keymap_content):
        parser = create_zmk_keymap_parser(
            KeymapMetadata(name="My Corne", version="2.0.0", total_keys=7)
        )
        metadata = parser.parse(sample_keymap_content).metadata

        assert metadata.name == "My Corne"
        assert metadata.version == "2.0.0"
        assert metadata.total_keys == 42

    def test_serialization_uses_total_keys_alias(self, parser, sample_keymap_content):
        data = parser.parse(sample_keymap_content).to_dict()

        assert data["metadata"]["totalKeys"] == 42
        assert data["layers"][0]["keys"]["L0_R0C0"] == {
            "code": "TAB",
            "label": "⇥",
            "type": "keycode",
        }

    def test_source_comments_are_ignored(self, parser, make_keymap, base_bindings):
        content = make_keymap([("base", base_bindings)]).replace(
            "&kp Q", "/* &kp X */ &kp Q"
        )
        keymap = parser.parse(content)

        assert keymap.get_binding("0", "L0_R0C1").code == "Q"

    def test_layer_count_error(self, parser, make_keymap, base_bindings):
        content = make_keymap([("base", base_bindings[:-1])])

        with pytest.raises(KeymapParseError) as exc:
            parser.parse(content)
        assert str(exc.value) == (
            'Failed to parse keymap file: Layer "base_layer" has 41 bindings, '
            "expected 42"
        )
        assert isinstance(exc.value.__cause__, ParseError)

    def test_comment_markers_inside_strings(self, parser, sample_keymap_content):
        content = sample_keymap_content.replace(
            'display-name = "base"', 'display-name = "Nav//Sym /* x"'
        )
        keymap = parser.parse(content)

        assert [layer.name for layer in keymap.layers] == ["base_layer", "lower_layer"]
        assert parser.validate(content).valid is True

    def test_error_position_refers_to_source_lines(self, parser):
        content = "/ {\n\n\n  keymap {\n    base { bindings = <&kp A>; };\n"

        with pytest.raises(KeymapParseError) as exc:
            parser.parse(content)
        assert str(exc.value).endswith("Unterminated keymap block (line 4, column 3)")
        assert (exc.value.__cause__.line, exc.value.__cause__.column) == (4, 3)

    def test_missing_keymap_block(self, parser):
        with pytest.raises(
            KeymapParseError, match="^Failed to parse keymap file: No keymap block"
        ):
            parser.parse("hello world")

    def test_no_layers(self, parser):
        with pytest.raises(KeymapParseError, match="No layers found in keymap file"):
            parser.parse('/ { keymap { compatible = "zmk,keymap"; }; };')

    def test_parse_error_is_keymap_error(self, parser):
        with pytest.raises(KeymapError):
            parser.parse("")

    def test_parse_is_deterministic(self, parser, sample_keymap_content):
        assert parser.parse(sample_keymap_content) == parser.parse(
            sample_keymap_content
        )

    def test_parse_path(self, parser, sample_keymap_file):
        keymap = parser.parse_path(sample_keymap_file)
        assert len(keymap.layers) == 2

    def test_parse_path_missing_file(self, parser, tmp_path):
        with pytest.raises(FileNotFoundError):
            parser.parse_path(tmp_path / "missing.keymap")

    def test_validate_delegates_to_validator(self, parser):
        assert parser.validate("hello world").valid is False


class TestModuleFunctions:
    """Test the module level convenience functions."""

    def test_parse_keymap_file(self, sample_keymap_content):
        assert len(parse_keymap_file(sample_keymap_content).layers) == 2

    def test_validate_keymap_file(self, sample_keymap_content):
        assert validate_keymap_file(sample_keymap_content).valid is True

    def test_validate_keymap_file_invalid(self):
        result = validate_keymap_file("hello world")
        assert result.valid is False
        assert len(result.errors) == 4

    def test_path_functions(self, sample_keymap_file: Path):
        assert len(parse_keymap_path(sample_keymap_file).layers) == 2
        assert validate_keymap_path(sample_keymap_file).valid is True

    def test_validation_and_parsing_agree(self, make_keymap, base_bindings):
        for bindings in (base_bindings, base_bindings[:-1]):
            content = make_keymap([("base", bindings)])
            valid = validate_keymap_file(content).valid
            try:
                parse_keymap_file(content)
                parsed = True
            except KeymapParseError:
                parsed = False
            assert valid is parsed
