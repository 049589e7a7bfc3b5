import pytest

from huelab.core.errors import ColorValueError, UnrecognizedColorError, UnsupportedOperationError
from huelab.core.types import RGB, RGBA
from huelab.logic.mix.engine import mix_colors


def _within_one(a, b):
    return all(abs(x - y) <= 1 for x, y in zip(a, b))


def test_ratio_endpoints():
    assert _within_one(mix_colors("#000000", "#ffffff", 0).color, (0, 0, 0))
    assert _within_one(mix_colors("#000000", "#ffffff", 1).color, (255, 255, 255))
    assert _within_one(mix_colors("#336699", "#ff8800", 0).color, (51, 102, 153))


def test_lab_midpoint_is_perceptual_gray():
    r, g, b = mix_colors("#000000", "#ffffff").color
    assert r == g == b
    assert 110 < r < 125


def test_multiply():
    assert mix_colors("#ff8000", "#808080", mode="multiply").color == RGB(128, 64, 0)


def test_screen():
    assert mix_colors("#000000", "#808080", mode="screen").color == RGB(128, 128, 128)


def test_overlay():
    assert mix_colors("rgb(100, 200, 0)", "#ffffff", mode="overlay").color == RGB(200, 255, 0)


def test_alpha_interpolates_when_both_present():
    result = mix_colors("rgba(255, 0, 0, 0.2)", "rgba(0, 0, 255, 0.8)", 0.25)
    assert isinstance(result.color, RGBA)
    assert result.color.a == pytest.approx(0.35)
    assert round(result.color.a, 4) == result.color.a


def test_alpha_inherited_from_one_side():
    assert mix_colors("rgba(255, 0, 0, 0.5)", "#0000ff").color.a == 0.5
    assert mix_colors("#ff0000", "rgba(0, 0, 255, 0.25)").color.a == 0.25
    assert isinstance(mix_colors("#ff0000", "#0000ff").color, RGB)


def test_result_carries_conversions():
    result = mix_colors("#ff8000", "#808080", mode="Multiply")
    assert result.mode == "multiply"
    assert result.hex == "#804000"
    assert result.conversion.rgb == "rgb(128, 64, 0)"
    data = result.to_dict()
    assert data["mode"] == "multiply"
    assert data["mix_ratio"] == 0.5


def test_errors():
    with pytest.raises(ColorValueError) as exc:
        mix_colors("#000", "#fff", 1.5)
    assert exc.value.field == "ratio"
    with pytest.raises(UnsupportedOperationError):
        mix_colors("#000", "#fff", mode="dodge")
    with pytest.raises(UnrecognizedColorError):
        mix_colors("#000", "nope")
