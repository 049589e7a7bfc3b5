import random

import pytest

from huelab.core.errors import UnsupportedOperationError
from huelab.core.types import RGB
from huelab.logic.vision.engine import (
    COLOR_BLINDNESS_INFO,
    COLOR_BLINDNESS_TYPES,
    are_colors_distinguishable,
    find_color_blind_safe_alternative,
    generate_color_blind_safe_palette,
    simulate_all,
    simulate_color_blindness,
    simulated_distance,
)

SAFE_TYPES = ("protanopia", "deuteranopia", "tritanopia")


@pytest.mark.parametrize("color", ["#ff0000", "#336699", "rgb(12, 200, 77)", "#ffffff"])
def test_achromatopsia_is_gray(color):
    r, g, b = simulate_color_blindness(color, "achromatopsia")
    assert r == g == b


@pytest.mark.parametrize("cb_type", COLOR_BLINDNESS_TYPES)
def test_white_stays_white(cb_type):
    assert all(v >= 254 for v in simulate_color_blindness("#ffffff", cb_type))


def test_zero_intensity_is_identity():
    r, g, b = simulate_color_blindness("#336699", "protanopia", intensity=0)
    assert abs(r - 51) <= 1
    assert abs(g - 102) <= 1
    assert abs(b - 153) <= 1


def test_type_names_are_case_insensitive():
    assert simulate_color_blindness("red", "Deuteranopia") == simulate_color_blindness("red", "deuteranopia")
    with pytest.raises(UnsupportedOperationError):
        simulate_color_blindness("red", "monochromacy")


def test_simulate_all():
    results = simulate_all("#336699")
    assert list(results) == COLOR_BLINDNESS_TYPES
    assert set(COLOR_BLINDNESS_INFO) == set(COLOR_BLINDNESS_TYPES)
    assert results["protanopia"].info.name == "Protanopia"
    assert results["protanopia"].hex.startswith("#")


def test_distinguishable():
    assert are_colors_distinguishable("#000000", "#ffffff", "protanopia")
    assert not are_colors_distinguishable("#336699", "#336699", "tritanopia")
    assert simulated_distance("#336699", "#336699", "protanopia") == 0


def test_safe_alternative():
    alternative = find_color_blind_safe_alternative("#ff0000", ["#ff0000"])
    assert isinstance(alternative, RGB)
    for cb_type in SAFE_TYPES:
        assert are_colors_distinguishable(alternative, "#ff0000", cb_type)


def test_safe_palette():
    palette = generate_color_blind_safe_palette(["#336699"], 5, rng=random.Random(7))
    assert palette[0] == RGB(51, 102, 153)
    assert 1 <= len(palette) <= 5
    for i, first in enumerate(palette):
        for second in palette[i + 1:]:
            for cb_type in SAFE_TYPES:
                assert simulated_distance(first, second, cb_type) >= 30


def test_safe_palette_is_reproducible():
    first = generate_color_blind_safe_palette(["red"], 4, rng=random.Random(1))
    second = generate_color_blind_safe_palette(["red"], 4, rng=random.Random(1))
    assert first == second


def test_safe_palette_of_nothing():
    assert generate_color_blind_safe_palette([], 5) == []


def test_safe_alternative_gives_up_when_the_grid_is_exhausted():
    grays = [f"hsl(0, 0%, {lightness}%)" for lightness in (30, 40, 50, 60, 70)]
    assert find_color_blind_safe_alternative("#808080", grays) is None


def test_safe_palette_stops_early_when_no_candidate_qualifies():
    palette = generate_color_blind_safe_palette(["#336699"], 60, rng=random.Random(11))
    assert 1 <= len(palette) < 60
