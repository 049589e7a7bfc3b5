import pytest

from huelab.core import config as c
from huelab.core.errors import UnrecognizedColorError, UnsupportedFormatError, UnsupportedOperationError
from huelab.logic.harmony.engine import HarmonyOptions, generate_all_harmonies, generate_harmony


def test_triadic_red():
    result = generate_harmony("#ff0000", "triadic")
    assert result.type == "triadic"
    assert result.base_color == "#ff0000"
    assert result.colors == ["#ff0000", "#00ff00", "#0000ff"]


def test_complementary_red():
    assert generate_harmony("red", "complementary").colors == ["#ff0000", "#00ffff"]


def test_tetradic_is_reported_as_square():
    tetradic = generate_harmony("#ff0000", "tetradic")
    square = generate_harmony("#ff0000", "square")
    assert tetradic.type == "square"
    assert tetradic.colors == square.colors
    assert len(tetradic.colors) == 4


def test_set_sizes():
    assert len(generate_harmony("#336699", "split-complementary").colors) == 3
    assert len(generate_harmony("#336699", "double-complementary").colors) == 4


@pytest.mark.parametrize("count, base_index", [(3, 1), (4, 2), (5, 2)])
def test_analogous_keeps_base_in_the_middle(count, base_index):
    options = HarmonyOptions(analogous_count=count)
    result = generate_harmony("#ff0000", "analogous", options=options)
    assert len(result.colors) == count
    assert result.colors[base_index] == "#ff0000"


@pytest.mark.parametrize("harmony_type", c.HARMONY_TYPES)
def test_hues_stay_on_the_wheel(harmony_type):
    options = HarmonyOptions(angle_adjustment=-275.0, analogous_angle=45.0)
    result = generate_harmony("hsl(350, 80%, 40%)", harmony_type, options=options)
    for hsl in result.raw_values:
        assert 0 <= hsl.h < 360


def test_output_format_and_type_aliases():
    result = generate_harmony("#ff0000", "Split_Complementary", output_format="rgb")
    assert result.type == "split-complementary"
    assert result.base_color == "rgb(255, 0, 0)"
    assert result.to_dict()["colors"] == result.colors


def test_errors():
    with pytest.raises(UnsupportedOperationError):
        generate_harmony("#ff0000", "pentadic")
    with pytest.raises(UnsupportedFormatError):
        generate_harmony("#ff0000", "triadic", output_format="hwb")
    with pytest.raises(UnrecognizedColorError):
        generate_harmony("not a color", "triadic")


def test_all_harmonies():
    results = generate_all_harmonies("#336699")
    assert set(results) == set(c.HARMONY_TYPES) - {"square"}
    assert results["tetradic"].type == "square"
