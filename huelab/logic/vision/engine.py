#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/logic/vision/engine.py

import math
import random
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

from huelab.core import config as c
from huelab.core import conversions as conv
from huelab.core.conversions import _linear_to_srgb, _srgb_to_linear
from huelab.core.errors import UnsupportedOperationError
from huelab.core.types import RGB, opaque
from huelab.shared.clamping import to_byte
from huelab.shared.parser import ensure_color

COLOR_BLINDNESS_TYPES = list(c.CB_MATRICES)


class ColorBlindnessInfo(NamedTuple):
    type: str
    name: str
    description: str
    prevalence: str
    severity: str


COLOR_BLINDNESS_INFO: Dict[str, ColorBlindnessInfo] = {
    "protanopia": ColorBlindnessInfo(
        "protanopia", "Protanopia",
        "Complete absence of red photoreceptors (L-cones)",
        "1.3% of males, 0.02% of females", "severe",
    ),
    "protanomaly": ColorBlindnessInfo(
        "protanomaly", "Protanomaly",
        "Shifted spectral sensitivity of red photoreceptors",
        "1.3% of males, 0.02% of females", "moderate",
    ),
    "deuteranopia": ColorBlindnessInfo(
        "deuteranopia", "Deuteranopia",
        "Complete absence of green photoreceptors (M-cones)",
        "1.2% of males, 0.01% of females", "severe",
    ),
    "deuteranomaly": ColorBlindnessInfo(
        "deuteranomaly", "Deuteranomaly",
        "Shifted spectral sensitivity of green photoreceptors",
        "5% of males, 0.4% of females", "moderate",
    ),
    "tritanopia": ColorBlindnessInfo(
        "tritanopia", "Tritanopia",
        "Complete absence of blue photoreceptors (S-cones)",
        "0.001% (very rare)", "severe",
    ),
    "tritanomaly": ColorBlindnessInfo(
        "tritanomaly", "Tritanomaly",
        "Shifted spectral sensitivity of blue photoreceptors",
        "0.01% (rare)", "mild",
    ),
    "achromatopsia": ColorBlindnessInfo(
        "achromatopsia", "Achromatopsia",
        "Complete color blindness, seeing only in grayscale",
        "0.003% (extremely rare)", "severe",
    ),
    "achromatomaly": ColorBlindnessInfo(
        "achromatomaly", "Achromatomaly",
        "Partial color blindness with severely reduced color discrimination",
        "Very rare", "moderate",
    ),
}


class SimulatedColor(NamedTuple):
    simulated: RGB
    hex: str
    info: ColorBlindnessInfo


def _matrix(cb_type: str):
    key = str(cb_type).strip().lower()
    try:
        return c.CB_MATRICES[key]
    except KeyError:
        raise UnsupportedOperationError("color blindness type", cb_type, COLOR_BLINDNESS_TYPES) from None


def simulate_color_blindness(color, cb_type: str, intensity: float = 100) -> RGB:
    """
    How ``color`` appears under a color vision deficiency.

    The deficiency matrix is applied to linear RGB. ``intensity`` (0..100)
    blends linearly between the original stimulus and the full simulation.
    """
    matrix = _matrix(cb_type)
    r, g, b = opaque(ensure_color(color))
    factor = max(0.0, min(c.PERCENT, intensity)) / c.PERCENT

    r_lin, g_lin, b_lin = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)

    rr_sim = r_lin * matrix[0][0] + g_lin * matrix[0][1] + b_lin * matrix[0][2]
    gg_sim = r_lin * matrix[1][0] + g_lin * matrix[1][1] + b_lin * matrix[1][2]
    bb_sim = r_lin * matrix[2][0] + g_lin * matrix[2][1] + b_lin * matrix[2][2]

    if factor < 1.0:
        rr_sim = (1 - factor) * r_lin + factor * rr_sim
        gg_sim = (1 - factor) * g_lin + factor * gg_sim
        bb_sim = (1 - factor) * b_lin + factor * bb_sim

    return RGB(
        to_byte(_linear_to_srgb(rr_sim) * c.RGB_MAX),
        to_byte(_linear_to_srgb(gg_sim) * c.RGB_MAX),
        to_byte(_linear_to_srgb(bb_sim) * c.RGB_MAX),
    )


def simulate_all(color, intensity: float = 100) -> Dict[str, SimulatedColor]:
    """Every deficiency type applied to one color."""
    rgb = ensure_color(color)
    out = {}
    for cb_type in COLOR_BLINDNESS_TYPES:
        simulated = simulate_color_blindness(rgb, cb_type, intensity)
        out[cb_type] = SimulatedColor(simulated, conv.rgb_to_hex(*simulated), COLOR_BLINDNESS_INFO[cb_type])
    return out


def simulated_distance(color1, color2, cb_type: str) -> float:
    """Euclidean RGB distance of two colors as seen under ``cb_type``."""
    return math.dist(
        simulate_color_blindness(color1, cb_type),
        simulate_color_blindness(color2, cb_type),
    )


def are_colors_distinguishable(
    color1,
    color2,
    cb_type: str,
    threshold: float = c.CB_DEFAULT_THRESHOLD,
) -> bool:
    return simulated_distance(color1, color2, cb_type) >= threshold


def find_color_blind_safe_alternative(
    original,
    reference_colors: Iterable,
    types: Sequence[str] = c.CB_DEFAULT_TYPES,
) -> Optional[RGB]:
    """
    First hue/lightness variant of ``original`` that stays distinguishable
    from every reference color under every listed deficiency, or None.
    """
    hsl = conv.color_to_hsl(ensure_color(original))
    references = [ensure_color(ref) for ref in reference_colors]

    for hue_shift in c.CB_HUE_SHIFTS:
        for lightness_shift in c.CB_LIGHTNESS_SHIFTS:
            candidate = conv.hsl_to_rgb(
                conv.normalize_hue(hsl.h + hue_shift),
                hsl.s,
                max(0.0, min(c.PERCENT, hsl.l + lightness_shift)),
            )
            if all(
                are_colors_distinguishable(candidate, ref, cb_type)
                for ref in references
                for cb_type in types
            ):
                return candidate
    return None


def generate_color_blind_safe_palette(
    base_colors: Sequence,
    count: int = c.CB_PALETTE_COUNT,
    rng=None,
) -> List[RGB]:
    """
    Greedy palette that stays distinguishable under the three dichromacies.

    The first base color seeds the palette. Each further slot samples 100
    random HSL candidates and keeps the one whose smallest simulated
    distance to the palette is largest, provided every distance reaches 30.
    Generation stops early when no candidate qualifies. ``rng`` is anything
    with ``uniform`` (the ``random`` module or a ``random.Random``).
    """
    if not base_colors:
        return []
    rng = rng or random
    palette: List[RGB] = [opaque(ensure_color(base_colors[0]))]
    s_lo, s_hi = c.CB_PALETTE_SATURATION
    l_lo, l_hi = c.CB_PALETTE_LIGHTNESS

    while len(palette) < count:
        best = None
        best_min_distance = 0.0
        for _ in range(c.CB_PALETTE_ATTEMPTS):
            candidate = conv.hsl_to_rgb(
                conv.normalize_hue(rng.uniform(0.0, c.HUE_MAX)),
                rng.uniform(s_lo, s_hi),
                rng.uniform(l_lo, l_hi),
            )
            distances = [
                simulated_distance(candidate, existing, cb_type)
                for existing in palette
                for cb_type in c.CB_DEFAULT_TYPES
            ]
            min_distance = min(distances)
            if min_distance >= c.CB_PALETTE_THRESHOLD and min_distance > best_min_distance:
                best, best_min_distance = candidate, min_distance
        if best is None:
            break
        palette.append(best)
    return palette
