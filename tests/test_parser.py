import pytest

from huelab.core.errors import (
    ColorValueError,
    ContextDependentColorError,
    UnrecognizedColorError,
    UnsupportedFormatError,
)
from huelab.core.types import CMYK, HSB, HSL, HSLA, LAB, RGB, RGBA, XYZ, ColorFormat
from huelab.shared.parser import detect_format, ensure_color, parse_color, parse_to_rgb


def test_channel_out_of_range_names_the_field():
    with pytest.raises(ColorValueError) as exc:
        parse_color("rgb(256, 0, 0)")
    assert exc.value.field == "red"
    assert exc.value.code == "OUT_OF_RANGE_VALUE"
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("text, field", [
    ("rgb(0, -1, 0)", "green"),
    ("rgba(0, 0, 0, 1.5)", "alpha"),
    ("hsl(361, 50%, 50%)", "hue"),
    ("hsl(10, 101%, 50%)", "saturation"),
    ("hsb(10, 50%, 120%)", "brightness"),
    ("cmyk(0%, 0%, 0%, 101%)", "key"),
    ("lab(50, 129, 0)", "a"),
    ("lab(101, 0, 0)", "L"),
    ("xyz(-1, 0, 0)", "x"),
])
def test_range_errors(text, field):
    with pytest.raises(ColorValueError) as exc:
        parse_color(text)
    assert exc.value.field == field


def test_function_notations():
    assert parse_color("rgb(255, 128, 0)") == RGB(255, 128, 0)
    assert parse_color("RGBA(255,128,0,0.5)") == RGBA(255, 128, 0, 0.5)
    assert parse_color("hsl(210, 50%, 40%)") == HSL(210, 50, 40)
    assert parse_color("hsv(0, 100%, 100%)") == HSB(0, 100, 100)
    assert parse_color("cmyk(0%, 100%, 100%, 0%)") == CMYK(0, 100, 100, 0)
    assert parse_color("lab(53.24, 80.09, 67.2)") == LAB(53.24, 80.09, 67.2)
    assert parse_color("xyz(41.246, 21.267, 1.933)") == XYZ(41.246, 21.267, 1.933)
    assert parse_color("255, 128, 0") == RGB(255, 128, 0)


def test_full_circle_hue_is_normalized():
    assert parse_color("hsl(360, 50%, 50%)").h == 0


def test_keywords():
    assert parse_color("RebeccaPurple") == RGB(102, 51, 153)
    assert parse_color("transparent") == RGBA(0, 0, 0, 0.0)
    with pytest.raises(ContextDependentColorError) as exc:
        parse_color("currentColor")
    assert exc.value.code == "CONTEXT_DEPENDENT_COLOR"


def test_unmatched_input_is_none():
    assert parse_color("not a color") is None
    assert parse_color("") is None
    assert parse_color("rgb(1, 2)") is None
    assert parse_to_rgb("#12") is None


def test_detect_format():
    assert detect_format("#fff") is ColorFormat.HEX
    assert detect_format("navy") is ColorFormat.HEX
    assert detect_format("rgba(1, 2, 3, 0.5)") is ColorFormat.RGBA
    assert detect_format("hsv(0, 100%, 100%)") is ColorFormat.HSV
    assert detect_format("hsb(0, 100%, 100%)") is ColorFormat.HSB
    assert detect_format("1, 2, 3") is ColorFormat.RGB
    assert detect_format("nothing") is None


def test_hint_restricts_grammar():
    assert parse_color("255, 0, 0", hint="rgb") == RGB(255, 0, 0)
    assert parse_color("ff0000", hint=ColorFormat.HEX) == RGB(255, 0, 0)
    assert parse_color("#ff0000", hint="hsl") is None
    with pytest.raises(UnsupportedFormatError):
        parse_color("#ff0000", hint="hwb")


def test_parse_to_rgb_funnels_into_rgb():
    assert parse_to_rgb("hsla(120, 100%, 50%, 0.5)") == RGBA(0, 255, 0, 0.5)
    assert parse_to_rgb("cmyk(0%, 100%, 100%, 0%)") == RGB(255, 0, 0)
    assert parse_to_rgb("#F00F") == RGBA(255, 0, 0, 1.0)


def test_ensure_color():
    assert ensure_color("red") == RGB(255, 0, 0)
    assert ensure_color(HSL(0, 100, 50)) == RGB(255, 0, 0)
    assert ensure_color(RGB(1, 2, 3)) == RGB(1, 2, 3)
    with pytest.raises(UnrecognizedColorError):
        ensure_color("nope")
    with pytest.raises(UnrecognizedColorError):
        ensure_color(None)


def test_space_before_parenthesis():
    assert parse_color("rgb (255, 0, 0)") == RGB(255, 0, 0)
    assert parse_color("HSLA (120, 100%, 50%, 0.5)") == HSLA(120, 100, 50, 0.5)
    assert detect_format("cmyk  (0, 0, 0, 0)") is ColorFormat.CMYK


def test_error_payload():
    with pytest.raises(ColorValueError) as exc:
        parse_color("hsl(20, 50%, 140%)")
    data = exc.value.to_dict()
    assert data["code"] == "OUT_OF_RANGE_VALUE"
    assert data["context"]["field"] == "lightness"
    assert data["context"]["range"] == (0.0, 100.0)
    assert "lightness value 140" in data["message"]
