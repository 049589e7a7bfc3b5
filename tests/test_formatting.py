import pytest

from huelab.core.errors import UnsupportedFormatError
from huelab.core.types import HSL, LAB, RGB, RGBA, ColorFormat
from huelab.shared.clamping import round_half_up, to_byte
from huelab.shared.formatting import format_color, format_colorspace, format_number, resolve_format


def test_format_number_drops_trailing_zero():
    assert format_number(2.0) == "2"
    assert format_number(0.8) == "0.8"
    assert format_number(-3) == "-3"


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0


def test_to_byte_clamps():
    assert to_byte(300) == 255
    assert to_byte(-3) == 0
    assert to_byte(127.5) == 128


def test_canonical_strings():
    assert format_color(RGB(255, 0, 0)) == "#ff0000"
    assert format_color(RGBA(255, 0, 0, 0.5), "hex") == "#ff000080"
    assert format_color(RGB(255, 0, 0), "rgba") == "rgba(255, 0, 0, 1)"
    assert format_color(RGB(255, 0, 0), "hsv") == "hsv(0, 100%, 100%)"
    assert format_colorspace("hsl", HSL(209.6, 49.5, 40.2)) == "hsl(210, 50%, 40%)"
    assert format_colorspace("lab", LAB(53.24, 80.09, 67.2)) == "lab(53.24%, 80.09, 67.2)"


def test_resolve_format():
    assert resolve_format("HSV") is ColorFormat.HSV
    assert resolve_format(ColorFormat.LAB) is ColorFormat.LAB
    with pytest.raises(UnsupportedFormatError) as exc:
        resolve_format("hwb")
    assert exc.value.code == "UNSUPPORTED_FORMAT"


def test_displayed_hue_wraps_below_full_circle():
    from huelab.core.types import HSB
    from huelab.logic.convert.engine import convert

    assert convert("#ff0001").hsl == "hsl(0, 100%, 50%)"
    assert format_colorspace("hsb", HSB(359.7, 100, 100)) == "hsb(0, 100%, 100%)"
    assert format_colorspace("hsla", (359.5, 50, 50, 1.0)) == "hsla(0, 50%, 50%, 1)"
