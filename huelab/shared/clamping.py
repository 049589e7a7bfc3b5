#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/shared/clamping.py

import math

from huelab.core import config as c


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.RGB_MAX, v))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves toward positive infinity instead of to even."""
    if digits == 0:
        return float(math.floor(value + 0.5))
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def to_byte(v: float) -> int:
    """Round and clamp a channel value into a 0..255 integer."""
    return int(round_half_up(_clamp255(v)))
