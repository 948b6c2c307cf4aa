"""Tests for color input parsing."""

import pytest

from huekit.models import ColorFormat
from huekit.parser import input_to_rgb, is_valid_css_unit, string_input_to_object


class TestCssUnit:
    """Test the scalar CSS unit check."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["12", "-1.5", "+3", ".5", "50%", 12, 0, 2.5, "999"])
    def test_valid_units(self, value):
        assert is_valid_css_unit(value)

    @pytest.mark.unit
    def test_integers_of_any_size(self):
        assert is_valid_css_unit(10**5000)
        assert is_valid_css_unit(-10**5000)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["abc", "", None, True, "%"])
    def test_invalid_units(self, value):
        assert not is_valid_css_unit(value)


class TestStringInput:
    """Test matching color strings against the supported notations."""

    @pytest.mark.unit
    def test_named_color(self):
        assert string_input_to_object("red") == {
            "r": 255,
            "g": 0,
            "b": 0,
            "format": ColorFormat.NAME,
        }

    @pytest.mark.unit
    def test_names_are_case_insensitive_and_trimmed(self):
        assert string_input_to_object("  AliceBlue ")["format"] is ColorFormat.NAME

    @pytest.mark.unit
    def test_transparent(self):
        assert string_input_to_object("transparent") == {
            "r": 0,
            "g": 0,
            "b": 0,
            "a": 0,
            "format": ColorFormat.NAME,
        }

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        ["rgb 255 0 0", "rgb(255, 0, 0)", "rgb (255, 0, 0)", "RGB(255,0,0)"],
    )
    def test_rgb_functional_forms(self, text):
        assert string_input_to_object(text) == {"r": "255", "g": "0", "b": "0"}

    @pytest.mark.unit
    def test_rgba(self):
        assert string_input_to_object("rgba 255, 0, 0, .5") == {
            "r": "255",
            "g": "0",
            "b": "0",
            "a": ".5",
        }

    @pytest.mark.unit
    def test_hsla(self):
        assert string_input_to_object("hsla(0, 100%, 50%, 0.5)") == {
            "h": "0",
            "s": "100%",
            "l": "50%",
            "a": "0.5",
        }

    @pytest.mark.unit
    def test_hsv_and_hsva(self):
        assert string_input_to_object("hsv 251.1 0.887 .918") == {
            "h": "251.1",
            "s": "0.887",
            "v": ".918",
        }
        assert string_input_to_object("hsva 251.1 0.887 0.918 0.5")["a"] == "0.5"

    @pytest.mark.unit
    def test_cmyk(self):
        assert string_input_to_object("cmyk(0, 100, 100, 0)") == {
            "c": "0",
            "m": "100",
            "y": "100",
            "k": "0",
        }

    @pytest.mark.unit
    def test_hex_lengths(self):
        assert string_input_to_object("#ff0000")["format"] is ColorFormat.HEX
        assert string_input_to_object("f00")["format"] is ColorFormat.HEX
        assert string_input_to_object("#ff000080")["format"] is ColorFormat.HEX8
        assert string_input_to_object("#f008")["format"] is ColorFormat.HEX8

    @pytest.mark.unit
    def test_short_hex_digits_are_doubled(self):
        record = string_input_to_object("#1234")
        assert (record["r"], record["g"], record["b"]) == (0x11, 0x22, 0x33)
        assert record["a"] == pytest.approx(0x44 / 255)

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["this is not a color", "#red", "##123456", "#12345", ""])
    def test_no_match(self, text):
        assert string_input_to_object(text) is None


class TestInputToRgb:
    """Test conversion of any input to bounded RGB."""

    @pytest.mark.unit
    def test_rgb_mapping(self):
        parsed = input_to_rgb({"r": 255, "g": 0, "b": 0})
        assert parsed.ok
        assert parsed.format is ColorFormat.RGB
        assert (parsed.r, parsed.g, parsed.b, parsed.a) == (255, 0, 0, 1)

    @pytest.mark.unit
    def test_percentage_rgb_is_prgb(self):
        assert input_to_rgb("rgb(100%, 0%, 0%)").format is ColorFormat.PRGB

    @pytest.mark.unit
    def test_shapes_are_tried_rgb_then_hsv_then_hsl(self):
        parsed = input_to_rgb({"h": 0, "s": "100%", "v": "100%", "l": "0%"})
        assert parsed.format is ColorFormat.HSV
        assert parsed.r == 255

    @pytest.mark.unit
    def test_cmyk_mapping(self):
        parsed = input_to_rgb({"c": 0, "m": 100, "y": 100, "k": 0})
        assert parsed.ok
        assert parsed.format is ColorFormat.CMYK
        assert (parsed.r, parsed.g, parsed.b) == (255, 0, 0)

    @pytest.mark.unit
    def test_format_override(self):
        assert input_to_rgb({"r": 1, "g": 2, "b": 3, "format": "hex8"}).format is ColorFormat.HEX8
        assert input_to_rgb({"r": 1, "g": 2, "b": 3, "format": "bogus"}).format is ColorFormat.RGB

    @pytest.mark.unit
    def test_alpha_is_carried_and_normalized(self):
        assert input_to_rgb({"r": 1, "g": 2, "b": 3, "a": 0.25}).a == 0.25
        assert input_to_rgb({"r": 1, "g": 2, "b": 3, "a": 5}).a == 1
        assert input_to_rgb("rgba 255 0 0 100").a == 1

    @pytest.mark.unit
    def test_channels_are_clamped(self):
        parsed = input_to_rgb({"r": 300, "g": -20, "b": "100%"})
        assert (parsed.r, parsed.g, parsed.b) == (255, 0, 255)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [
            "this is not a color",
            {"r": "invalid", "g": "invalid", "b": "invalid"},
            {"h": "invalid", "s": "invalid", "l": "invalid"},
            {"h": "invalid", "s": "invalid", "v": "invalid"},
            42,
            None,
        ],
    )
    def test_unparseable_input_is_black(self, value):
        parsed = input_to_rgb(value)
        assert not parsed.ok
        assert parsed.format is None
        assert (parsed.r, parsed.g, parsed.b, parsed.a) == (0, 0, 0, 1)
