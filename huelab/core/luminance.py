#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/core/luminance.py

from . import config as c
from .types import Color, opaque


def _wcag_linear(channel: float) -> float:
    v = channel / c.RGB_MAX
    if v <= c.WCAG_LINEAR_TH:
        return v / c.WCAG_LINEAR_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: int, g: int, b: int) -> float:
    """WCAG 2.x relative luminance of an sRGB color, 0 (black) to 1 (white)."""
    return (
        c.LUMA_R * _wcag_linear(r) +
        c.LUMA_G * _wcag_linear(g) +
        c.LUMA_B * _wcag_linear(b)
    )


def relative_luminance(color: Color) -> float:
    """Relative luminance of a color; alpha is ignored."""
    return get_luminance(*opaque(color))
