#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/core/contrast.py

from typing import NamedTuple

from . import config as c
from .luminance import relative_luminance
from .types import Color


class WcagLevels(NamedTuple):
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool


def get_contrast_ratio_rgb(c1: Color, c2: Color) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
    """
    y1 = relative_luminance(c1)
    y2 = relative_luminance(c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def get_wcag_levels(ratio: float) -> WcagLevels:
    """Which WCAG success criteria a contrast ratio satisfies."""
    return WcagLevels(
        aa_normal=ratio >= c.WCAG_AA_NORMAL,
        aa_large=ratio >= c.WCAG_AA_LARGE,
        aaa_normal=ratio >= c.WCAG_AAA_NORMAL,
        aaa_large=ratio >= c.WCAG_AAA_LARGE,
    )


def get_recommendation(levels: WcagLevels) -> str:
    """Qualitative verdict for a set of WCAG levels."""
    if levels.aaa_normal:
        return c.RECOMMEND_EXCELLENT
    if levels.aa_normal:
        return c.RECOMMEND_GOOD
    if levels.aa_large:
        return c.RECOMMEND_LARGE_ONLY
    if levels.aaa_large:
        return c.RECOMMEND_AAA_LARGE
    return c.RECOMMEND_POOR
