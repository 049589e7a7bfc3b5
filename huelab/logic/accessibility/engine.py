#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/logic/accessibility/engine.py

from itertools import combinations
from typing import Dict, List, NamedTuple, Optional

from huelab.core import config as c
from huelab.core import conversions as conv
from huelab.core.contrast import WcagLevels, get_contrast_ratio_rgb, get_recommendation, get_wcag_levels
from huelab.core.luminance import relative_luminance
from huelab.core.types import RGB, opaque
from huelab.shared.clamping import round_half_up
from huelab.shared.parser import ensure_color

BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)
GRAY = RGB(*c.REPORT_GRAY)


class ContrastResult(NamedTuple):
    ratio: float
    passes: WcagLevels
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "ratio": self.ratio,
            "passes": self.passes._asdict(),
            "recommendation": self.recommendation,
        }


class AccessibleColor(NamedTuple):
    color: RGB
    hex: str
    contrast: float


class ColorPair(NamedTuple):
    foreground: RGB
    background: RGB
    contrast: float
    passes: WcagLevels

    @property
    def foreground_hex(self) -> str:
        return conv.rgb_to_hex(*self.foreground)

    @property
    def background_hex(self) -> str:
        return conv.rgb_to_hex(*self.background)


def contrast_ratio(color_a, color_b) -> float:
    """WCAG contrast ratio of two colors, 1.0 to 21.0, order-independent."""
    return get_contrast_ratio_rgb(ensure_color(color_a), ensure_color(color_b))


def check_contrast(foreground, background) -> ContrastResult:
    """
    Grade a foreground/background pair against WCAG 2.1.

    The reported ratio is rounded to two decimals; the pass flags are
    decided on the unrounded ratio.
    """
    ratio = contrast_ratio(foreground, background)
    levels = get_wcag_levels(ratio)
    return ContrastResult(
        ratio=round_half_up(ratio, 2),
        passes=levels,
        recommendation=get_recommendation(levels),
    )


def _accessible(color: RGB, contrast: float) -> AccessibleColor:
    return AccessibleColor(color, conv.rgb_to_hex(*color), contrast)


def find_accessible_color(
    target,
    background,
    target_contrast: float = c.DEFAULT_TARGET_CONTRAST,
    maintain_hue: bool = True,
    prefer_darker: Optional[bool] = None,
) -> AccessibleColor:
    """
    Nearest color to ``target`` reaching ``target_contrast`` on ``background``.

    With ``maintain_hue`` the lightness of ``target`` is walked one unit at
    a time toward 0 (darker) or 100 (lighter); the first step that reaches
    the target wins, otherwise the step with the best contrast is returned.
    Without it the answer is black or white. The direction follows
    ``prefer_darker`` or, when that is None, darkens on light backgrounds.
    """
    target_rgb = opaque(ensure_color(target))
    bg_rgb = opaque(ensure_color(background))

    current = get_contrast_ratio_rgb(target_rgb, bg_rgb)
    if current >= target_contrast:
        return _accessible(target_rgb, current)

    if prefer_darker is None:
        should_darken = relative_luminance(bg_rgb) > c.DARK_BACKGROUND_LUMINANCE
    else:
        should_darken = prefer_darker

    if not maintain_hue:
        black_contrast = get_contrast_ratio_rgb(BLACK, bg_rgb)
        white_contrast = get_contrast_ratio_rgb(WHITE, bg_rgb)
        if should_darken and black_contrast >= target_contrast:
            return _accessible(BLACK, black_contrast)
        if not should_darken and white_contrast >= target_contrast:
            return _accessible(WHITE, white_contrast)
        if black_contrast > white_contrast:
            return _accessible(BLACK, black_contrast)
        return _accessible(WHITE, white_contrast)

    hsl = conv.rgb_to_hsl(*target_rgb)
    start = int(round_half_up(hsl.l))
    if should_darken:
        lightness_steps = range(start, -1, -c.LIGHTNESS_STEP)
    else:
        lightness_steps = range(start, int(c.PERCENT) + 1, c.LIGHTNESS_STEP)

    best = None
    best_contrast = 0.0
    for lightness in lightness_steps:
        candidate = conv.hsl_to_rgb(hsl.h, hsl.s, lightness)
        contrast = get_contrast_ratio_rgb(candidate, bg_rgb)
        if contrast >= target_contrast:
            return _accessible(candidate, contrast)
        if contrast > best_contrast:
            best, best_contrast = candidate, contrast
    return _accessible(best, best_contrast)


def get_contrast_report(color) -> Dict[str, ContrastResult]:
    """Contrast of ``color`` against white, black and mid gray."""
    rgb = ensure_color(color)
    return {
        "white": check_contrast(rgb, WHITE),
        "black": check_contrast(rgb, BLACK),
        "gray": check_contrast(rgb, GRAY),
    }


def suggest_accessible_pairs(base_color, count: int = c.PAIR_DEFAULT_COUNT) -> List[ColorPair]:
    """
    Text/background pairs built from lightness variants of ``base_color``.

    Every two lightness levels of the grid at least 30 apart form a
    candidate; candidates passing at least WCAG AA for large text are
    ranked by contrast. The darker color of each pair is the foreground.
    """
    base = conv.color_to_hsl(ensure_color(base_color))

    pairs = []
    for l1, l2 in combinations(c.PAIR_LIGHTNESS_GRID, 2):
        if abs(l1 - l2) < c.PAIR_MIN_LIGHTNESS_GAP:
            continue
        color1 = conv.hsl_to_rgb(base.h, base.s, l1)
        color2 = conv.hsl_to_rgb(base.h, base.s, l2)
        result = check_contrast(color1, color2)
        if not result.passes.aa_large:
            continue
        if relative_luminance(color1) < relative_luminance(color2):
            fg, bg = color1, color2
        else:
            fg, bg = color2, color1
        pairs.append(ColorPair(fg, bg, result.ratio, result.passes))

    pairs.sort(key=lambda pair: pair.contrast, reverse=True)
    return pairs[:count]
