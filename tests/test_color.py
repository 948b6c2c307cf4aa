"""Tests for the Color model."""

import pytest
from pydantic import ValidationError

from huekit import Color, InvalidOptionsError, equals, parse_color
from huekit.models import ColorFormat, ParseOptions


class TestParse:
    """Test creating colors from the supported inputs."""

    @pytest.mark.unit
    def test_hex_and_name_agree(self, red):
        assert Color.parse("#f00") == red
        assert Color.parse("ff0000") == red
        assert Color.parse("#ff0000ff") == red

    @pytest.mark.unit
    def test_inferred_formats(self):
        assert Color.parse("red").format is ColorFormat.NAME
        assert Color.parse("#f00").format is ColorFormat.HEX
        assert Color.parse("#f00f").format is ColorFormat.HEX8
        assert Color.parse("rgb 255 0 0").format is ColorFormat.RGB
        assert Color.parse("rgb(100%, 0%, 0%)").format is ColorFormat.PRGB
        assert Color.parse("hsl(0, 100%, 50%)").format is ColorFormat.HSL
        assert Color.parse("hsv(0, 100%, 100%)").format is ColorFormat.HSV
        assert Color.parse("cmyk(0, 100, 100, 0)").format is ColorFormat.CMYK

    @pytest.mark.unit
    def test_hsl_strings(self):
        assert Color.parse("hsl(251.1, 0.887, .918)").to_hsl_string() == "hsl(251, 89%, 92%)"
        assert Color.parse("hsl 251 100 .38").to_hex_string() == "#2400c2"

    @pytest.mark.unit
    def test_hsv_strings(self):
        assert Color.parse("hsv 251.1 0.887 .918").to_hsv_string() == "hsv(251, 89%, 92%)"

    @pytest.mark.unit
    def test_existing_color_passes_through(self, red):
        assert Color.parse(red) is red

    @pytest.mark.unit
    def test_parse_color_function(self, red):
        assert parse_color("#ff0000") == red

    @pytest.mark.unit
    def test_original_input_is_kept(self):
        assert Color.parse("red").original_input == "red"
        mapping = {"r": 255, "g": 0, "b": 0}
        assert Color.parse(mapping).original_input == mapping

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input_is_invalid_black(self, value):
        color = Color.parse(value)
        assert not color.is_valid
        assert color.original_input == ""
        assert color.to_hex_string() == "#000000"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        ["not a color", "#red", {"r": "invalid", "g": 0, "b": 0}, 42],
    )
    def test_invalid_input_never_raises(self, value):
        color = Color.parse(value)
        assert not color.is_valid
        assert color.to_string() == "#000000"
        assert color.to_rgb_string() == "rgb(0, 0, 0)"

    @pytest.mark.unit
    def test_huge_integer_channels_are_clamped(self):
        color = Color.parse({"r": 10**400, "g": -10**400, "b": 0})
        assert color.is_valid
        assert color.to_hex_string() == "#ff0000"
        assert Color.parse({"r": 10**5000, "g": 0, "b": 0}).to_hex_string() == "#ff0000"
        assert Color.parse({"h": 10**400, "s": 1, "l": 0.5}).is_valid

    @pytest.mark.unit
    def test_huge_integer_alpha_is_opaque(self):
        color = Color.parse({"r": 255, "g": 0, "b": 0, "a": 10**400})
        assert color.a == 1
        assert color.to_rgb_string() == "rgb(255, 0, 0)"

    @pytest.mark.unit
    def test_format_option(self):
        assert Color.parse("red", format="hex").to_string() == "#ff0000"
        assert Color.parse("red", {"format": "hsl"}).to_string() == "hsl(0, 100%, 50%)"
        assert Color.parse("red", ParseOptions(format=ColorFormat.RGB)).to_string() == "rgb(255, 0, 0)"

    @pytest.mark.unit
    def test_unknown_option_is_rejected(self):
        with pytest.raises(InvalidOptionsError):
            Color.parse("red", {"colour": "hex"})
        with pytest.raises(InvalidOptionsError):
            Color.parse("red", format="bogus")

    @pytest.mark.unit
    def test_colors_are_frozen(self, red):
        with pytest.raises(ValidationError):
            red.r = 0


class TestAlpha:
    """Test alpha normalization at parse time."""

    @pytest.mark.unit
    @pytest.mark.parametrize("alpha", [-1, 100, "asdfasd", 1.01, float("nan")])
    def test_invalid_alpha_is_opaque(self, alpha):
        color = Color.parse({"r": 255, "g": 0, "b": 0, "a": alpha})
        assert color.a == 1
        assert color.to_rgb_string() == "rgb(255, 0, 0)"

    @pytest.mark.unit
    def test_negative_zero_alpha(self):
        color = Color.parse({"r": 0, "g": 0, "b": 0, "a": -0.0})
        assert color.to_rgb_string() == "rgba(0, 0, 0, 0)"

    @pytest.mark.unit
    def test_round_a(self):
        assert Color.parse("#ff000080").round_a == 0.5

    @pytest.mark.unit
    def test_set_alpha_returns_new_color(self, red):
        faded = red.set_alpha(0.5)
        assert faded.a == 0.5
        assert red.a == 1
        assert red.set_alpha(5).a == 1
        assert red.set_alpha("x").a == 1


class TestProperties:
    """Test brightness and luminance."""

    @pytest.mark.unit
    def test_brightness(self):
        assert Color.parse("white").get_brightness() == 255
        assert Color.parse("black").get_brightness() == 0
        assert Color.parse("black").is_dark()
        assert Color.parse("white").is_light()

    @pytest.mark.unit
    def test_luminance(self):
        assert Color.parse("white").get_luminance() == pytest.approx(1)
        assert Color.parse("black").get_luminance() == 0
        assert Color.parse("red").get_luminance() == pytest.approx(0.2126)


class TestAccessors:
    """Test structured accessors."""

    @pytest.mark.unit
    def test_to_rgb(self, red):
        assert red.to_rgb() == {"r": 255, "g": 0, "b": 0, "a": 1}

    @pytest.mark.unit
    def test_to_percentage_rgb(self, red):
        assert red.to_percentage_rgb() == {"r": "100%", "g": "0%", "b": "0%", "a": 1}

    @pytest.mark.unit
    def test_to_hsl_and_hsv(self, red):
        assert red.to_hsl() == {"h": 0, "s": 1, "l": 0.5, "a": 1}
        assert red.to_hsv() == {"h": 0, "s": 1, "v": 1, "a": 1}

    @pytest.mark.unit
    def test_to_cmyk(self, red):
        assert red.to_cmyk() == {"c": 0, "m": 100, "y": 100, "k": 0, "a": 1}


class TestSerializers:
    """Test string output."""

    @pytest.mark.unit
    def test_hex(self, red):
        assert red.to_hex() == "ff0000"
        assert red.to_hex_string(True) == "#f00"
        assert red.to_hex8_string() == "#ff0000ff"
        assert red.to_hex8_string(True) == "#f00f"

    @pytest.mark.unit
    def test_functional_strings(self, red, translucent_red):
        assert red.to_rgb_string() == "rgb(255, 0, 0)"
        assert translucent_red.to_rgb_string() == "rgba(255, 0, 0, 0.5)"
        assert red.to_percentage_rgb_string() == "rgb(100%, 0%, 0%)"
        assert translucent_red.to_percentage_rgb_string() == "rgba(100%, 0%, 0%, 0.5)"
        assert red.to_hsl_string() == "hsl(0, 100%, 50%)"
        assert translucent_red.to_hsl_string() == "hsla(0, 100%, 50%, 0.5)"
        assert red.to_hsv_string() == "hsv(0, 100%, 100%)"
        assert translucent_red.to_hsv_string() == "hsva(0, 100%, 100%, 0.5)"

    @pytest.mark.unit
    def test_cmyk_string_has_no_alpha(self, red, translucent_red):
        assert red.to_cmyk_string() == "cmyk(0, 100, 100, 0)"
        assert translucent_red.to_cmyk_string() == "cmyk(0, 100, 100, 0)"

    @pytest.mark.unit
    def test_to_name(self, red, translucent_red):
        assert red.to_name() == "red"
        assert Color.parse("#123456").to_name() is False
        assert translucent_red.to_name() is False
        assert Color.parse("transparent").to_name() == "transparent"

    @pytest.mark.unit
    def test_filter_string(self, red):
        assert red.to_filter_string() == (
            "progid:DXImageTransform.Microsoft.gradient("
            "startColorstr=#ffff0000,endColorstr=#ffff0000)"
        )
        assert red.to_filter_string("blue").endswith("endColorstr=#ff0000ff)")

    @pytest.mark.unit
    def test_filter_string_with_gradient_type(self):
        color = Color.parse("red", gradient_type="linear")
        assert color.to_filter_string() == (
            "progid:DXImageTransform.Microsoft.gradient("
            "GradientType = 1, startColorstr=#ffff0000,endColorstr=#ffff0000)"
        )


class TestToString:
    """Test format dispatch in to_string."""

    @pytest.mark.unit
    def test_own_format(self):
        assert Color.parse("red").to_string() == "red"
        assert Color.parse("#f00").to_string() == "#ff0000"
        assert Color.parse("rgb 255 0 0").to_string() == "rgb(255, 0, 0)"
        assert str(Color.parse("red")) == "red"

    @pytest.mark.unit
    def test_translucent_hex_becomes_rgba(self):
        color = Color.parse("#ff000080")
        assert color.to_string() == "rgba(255, 0, 0, 0.5)"
        assert color.to_string("hex8") == "#ff000080"

    @pytest.mark.unit
    def test_transparent(self):
        color = Color.parse("transparent")
        assert color.to_string() == "transparent"
        assert color.to_string("rgb") == "rgba(0, 0, 0, 0)"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fmt,expected",
        [
            ("hex3", "#f00"),
            ("hex4", "#f00f"),
            ("hex6", "#ff0000"),
            ("hex8", "#ff0000ff"),
            ("prgb", "rgb(100%, 0%, 0%)"),
            ("hsl", "hsl(0, 100%, 50%)"),
            ("hsv", "hsv(0, 100%, 100%)"),
            ("cmyk", "cmyk(0, 100, 100, 0)"),
            (ColorFormat.RGB, "rgb(255, 0, 0)"),
            ("bogus", "#ff0000"),
        ],
    )
    def test_explicit_formats(self, red, fmt, expected):
        assert red.to_string(fmt) == expected

    @pytest.mark.unit
    def test_nameless_color_falls_back_to_hex(self, translucent_red):
        assert Color.parse("#123456").to_string("name") == "#123456"
        assert translucent_red.to_string("name") == "#ff0000"


class TestEquality:
    """Test equality and hashing."""

    @pytest.mark.unit
    def test_equal_colors(self, red):
        assert Color.parse("#f00") == red
        assert hash(Color.parse("#f00")) == hash(red)
        assert Color.parse("blue") != red

    @pytest.mark.unit
    def test_invalid_black_differs_from_black(self):
        assert Color.parse("not a color") != Color.parse("black")

    @pytest.mark.unit
    def test_clone(self, red):
        copy = red.clone()
        assert copy == red
        assert copy is not red

    @pytest.mark.integration
    def test_notations_agree(self, conversion):
        expected = Color.parse(conversion["hex"])
        for key in ("hex8", "rgb", "hsl", "hsv"):
            assert equals(conversion[key], conversion["hex"]), key
            assert Color.parse(conversion[key]) == expected, key
        assert expected.to_hex8_string() == conversion["hex8"]


class TestTransforms:
    """Test transforms that return new colors."""

    @pytest.mark.unit
    def test_lighten_and_darken(self, red):
        assert red.lighten(20).to_hex_string() == "#ff6666"
        assert red.darken(20).to_hex_string() == "#990000"
        assert red.lighten(100).to_hex_string() == "#ffffff"
        assert red.darken(100).to_hex_string() == "#000000"

    @pytest.mark.unit
    def test_transform_output_uses_hsl_format(self, red):
        assert red.lighten(20).to_string() == "hsl(0, 100%, 70%)"

    @pytest.mark.unit
    def test_transforms_do_not_modify_the_original(self, red):
        red.lighten(20)
        assert red.to_hex_string() == "#ff0000"

    @pytest.mark.unit
    def test_saturation(self, red):
        assert red.desaturate(100).to_hex_string() == "#808080"
        assert red.greyscale().to_hex_string() == "#808080"
        assert red.saturate(10).to_hex_string() == "#ff0000"

    @pytest.mark.unit
    def test_brighten(self):
        assert Color.parse("#000").brighten().to_hex_string() == "#191919"
        assert Color.parse("#000").brighten(100).to_hex_string() == "#ffffff"

    @pytest.mark.unit
    def test_spin(self, red):
        assert red.spin(120).to_hex_string() == "#00ff00"
        assert red.spin(-120).to_hex_string() == "#0000ff"
        assert red.spin(480).to_hex_string() == "#00ff00"
        assert red.spin(0).to_hex_string() == "#ff0000"

    @pytest.mark.unit
    def test_complement(self, red):
        assert red.complement().to_hex_string() == "#00ffff"

    @pytest.mark.unit
    def test_transforms_keep_alpha(self, translucent_red):
        assert translucent_red.lighten(20).a == 0.5
        assert translucent_red.spin(90).a == 0.5


class TestSchemes:
    """Test color harmonies."""

    @pytest.mark.unit
    def test_triad(self, red):
        assert [c.to_hex_string() for c in red.triad()] == ["#ff0000", "#00ff00", "#0000ff"]

    @pytest.mark.unit
    def test_tetrad(self, red):
        scheme = red.tetrad()
        assert scheme[0] is red
        assert [c.to_hex_string() for c in scheme] == ["#ff0000", "#80ff00", "#00ffff", "#7f00ff"]

    @pytest.mark.unit
    def test_splitcomplement(self, red):
        scheme = red.splitcomplement()
        assert scheme[0] is red
        assert [c.to_hex_string() for c in scheme] == ["#ff0000", "#ccff00", "#0066ff"]

    @pytest.mark.unit
    def test_rotations_drop_alpha(self, translucent_red):
        scheme = translucent_red.triad()
        assert scheme[0].a == 0.5
        assert all(c.a == 1 for c in scheme[1:])

    @pytest.mark.unit
    def test_analogous(self, red):
        scheme = red.analogous()
        assert [c.to_hex_string() for c in scheme] == [
            "#ff0000",
            "#ff0066",
            "#ff0033",
            "#ff0000",
            "#ff3300",
            "#ff6600",
        ]
        assert len(red.analogous(results=3, slices=10)) == 3

    @pytest.mark.unit
    def test_monochromatic(self, red):
        scheme = red.monochromatic()
        assert [c.to_hex_string() for c in scheme] == [
            "#ff0000",
            "#2b0000",
            "#550000",
            "#800000",
            "#aa0000",
            "#d40000",
        ]
        assert len(red.monochromatic(results=3)) == 3


class TestMix:
    """Test blending two colors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "amount,expected",
        [(50, "#800080"), (0, "#ff0000"), (100, "#0000ff"), (None, "#800080")],
    )
    def test_mix_red_and_blue(self, amount, expected):
        assert Color.parse("#f00").mix("#00f", amount).to_hex_string() == expected

    @pytest.mark.unit
    def test_mix_blends_alpha(self):
        mixed = Color.parse("rgba(255, 0, 0, 0)").mix("rgba(255, 0, 0, 1)")
        assert mixed.a == 0.5


class TestRoundTrip:
    """Re-parsing a color's own serializations gives the same color."""

    @pytest.mark.integration
    @pytest.mark.parametrize("value", ["#336699", "#fa0a0a", "#abcdef", "#010203", "#fefefe"])
    def test_structured_forms(self, value):
        color = Color.parse(value)
        for form in (color.to_rgb(), color.to_hsl(), color.to_hsv()):
            assert Color.parse(form).to_hex_string() == value, form

    @pytest.mark.integration
    @pytest.mark.parametrize("value", ["#336699", "#fa0a0a", "#abcdef"])
    def test_string_forms_within_tolerance(self, value):
        color = Color.parse(value)
        expected = color.to_rgb()
        for text in (color.to_hsl_string(), color.to_hsv_string(), color.to_percentage_rgb_string()):
            rgb = Color.parse(text).to_rgb()
            for key in ("r", "g", "b"):
                assert abs(rgb[key] - expected[key]) <= 2, text

    @pytest.mark.unit
    def test_near_miss_has_no_name(self):
        assert Color.parse("#f00").to_name() == "red"
        assert Color.parse("#fa0a0a").to_name() is False

    @pytest.mark.unit
    def test_spin_wraps_any_amount(self):
        color = Color.parse({"h": 10, "s": 1, "l": 0.5})
        assert color.spin(-380) == color.spin(-20)
        assert color.spin(730) == color.spin(10)
