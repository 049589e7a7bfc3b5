import pytest

from huelab.core import config as c
from huelab.core.luminance import relative_luminance
from huelab.core.types import RGB
from huelab.logic.accessibility.engine import (
    BLACK,
    WHITE,
    check_contrast,
    contrast_ratio,
    find_accessible_color,
    get_contrast_report,
    suggest_accessible_pairs,
)


def test_black_on_white():
    result = check_contrast("#000000", "#ffffff")
    assert result.ratio == pytest.approx(21.0)
    assert all(result.passes)
    assert result.recommendation == c.RECOMMEND_EXCELLENT


def test_identical_colors():
    result = check_contrast("#336699", "#336699")
    assert result.ratio == pytest.approx(1.0)
    assert not any(result.passes)
    assert result.recommendation == c.RECOMMEND_POOR


@pytest.mark.parametrize("a, b", [
    ("#336699", "#ffffff"),
    ("red", "rgb(12, 200, 77)"),
    ("hsl(40, 80%, 60%)", "#000"),
])
def test_contrast_is_symmetric_and_bounded(a, b):
    ratio = contrast_ratio(a, b)
    assert ratio == pytest.approx(contrast_ratio(b, a))
    assert 1.0 <= ratio <= 21.0


def test_ratio_rounded_to_two_decimals():
    ratio = check_contrast("#336699", "#ffffff").ratio
    assert round(ratio, 2) == ratio


def test_passing_color_is_returned_unchanged():
    found = find_accessible_color("#000000", "#ffffff")
    assert found.color == BLACK
    assert found.hex == "#000000"


def test_darkens_on_light_background():
    found = find_accessible_color("#999999", "#ffffff")
    assert found.contrast >= 4.5
    assert contrast_ratio(found.color, "#ffffff") >= 4.5
    assert relative_luminance(found.color) < relative_luminance(RGB(153, 153, 153))


def test_lightens_on_dark_background():
    found = find_accessible_color("#336699", "#000000")
    assert found.contrast >= 4.5
    assert relative_luminance(found.color) > relative_luminance(RGB(51, 102, 153))


def test_without_hue_answers_black_or_white():
    assert find_accessible_color("#999999", "#ffffff", maintain_hue=False).color == BLACK
    assert find_accessible_color("#333333", "#000000", maintain_hue=False).color == WHITE


def test_unreachable_target_returns_best_effort():
    found = find_accessible_color("#808080", "#808080", target_contrast=21)
    assert 1.0 < found.contrast < 21


def test_contrast_report():
    report = get_contrast_report("#000000")
    assert set(report) == {"white", "black", "gray"}
    assert report["white"].ratio == pytest.approx(21.0)
    assert report["black"].ratio == pytest.approx(1.0)


def test_suggested_pairs():
    pairs = suggest_accessible_pairs("#336699")
    assert 0 < len(pairs) <= 5
    contrasts = [pair.contrast for pair in pairs]
    assert contrasts == sorted(contrasts, reverse=True)
    for pair in pairs:
        assert pair.contrast >= c.WCAG_AA_LARGE
        assert pair.passes.aa_large
        assert relative_luminance(pair.foreground) <= relative_luminance(pair.background)
        assert pair.foreground_hex.startswith("#")
    assert len(suggest_accessible_pairs("#336699", 2)) == 2
