#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/logic/mix/engine.py

from typing import Callable, Dict, NamedTuple, Optional

from huelab.core import config as c
from huelab.core import conversions as conv
from huelab.core.errors import ColorValueError, UnsupportedOperationError
from huelab.core.types import RGB, Color, ColorFormat, alpha_of, opaque, with_alpha
from huelab.logic.convert.engine import ConversionResult, build_result
from huelab.shared.clamping import round_half_up, to_byte
from huelab.shared.parser import ensure_color


class MixResult(NamedTuple):
    color: Color
    hex: str
    conversion: ConversionResult
    ratio: float
    mode: str

    def to_dict(self) -> dict:
        out = self.conversion.to_dict()
        out["mix_ratio"] = self.ratio
        out["mode"] = self.mode
        return out


def _mix_lab(rgb1: RGB, rgb2: RGB, t: float) -> RGB:
    """Linear interpolation in CIE LAB."""
    lab1 = conv.rgb_to_lab(*rgb1)
    lab2 = conv.rgb_to_lab(*rgb2)
    L = lab1.l * (1 - t) + lab2.l * t
    a = lab1.a * (1 - t) + lab2.a * t
    b = lab1.b * (1 - t) + lab2.b * t
    return conv.lab_to_rgb(L, a, b)


def _multiply(base: int, blend: int) -> float:
    return base * blend / c.RGB_MAX


def _screen(base: int, blend: int) -> float:
    return c.RGB_MAX - (c.RGB_MAX - base) * (c.RGB_MAX - blend) / c.RGB_MAX


def _overlay(base: int, blend: int) -> float:
    if base < c.OVERLAY_MIDPOINT:
        return 2 * base * blend / c.RGB_MAX
    return c.RGB_MAX - 2 * (c.RGB_MAX - base) * (c.RGB_MAX - blend) / c.RGB_MAX


_CHANNEL_BLENDS: Dict[str, Callable[[int, int], float]] = {
    "multiply": _multiply,
    "screen": _screen,
    "overlay": _overlay,
}


def _mix_alpha(color1: Color, color2: Color, t: float) -> Optional[float]:
    a1 = alpha_of(color1)
    a2 = alpha_of(color2)
    if a1 is not None and a2 is not None:
        return round_half_up(a1 * (1 - t) + a2 * t, c.ALPHA_DECIMALS)
    if a1 is not None:
        return a1
    return a2


def mix_colors(color1, color2, ratio: float = 0.5, mode: str = "normal") -> MixResult:
    """
    Mix two colors.

    ``normal`` interpolates in LAB by ``ratio`` (0 gives ``color1``, 1 gives
    ``color2``). ``multiply``, ``screen`` and ``overlay`` composite the RGB
    channels of ``color2`` onto ``color1`` and ignore ``ratio`` except for
    alpha. Alpha present on both inputs is interpolated; alpha present on
    one input is inherited.
    """
    key = str(mode).strip().lower()
    if key not in c.BLEND_MODES:
        raise UnsupportedOperationError("blend mode", mode, c.BLEND_MODES)
    if not 0.0 <= ratio <= 1.0:
        raise ColorValueError("ratio", ratio, 0.0, 1.0)

    first = ensure_color(color1)
    second = ensure_color(color2)
    rgb1, rgb2 = opaque(first), opaque(second)

    if key == "normal":
        mixed = _mix_lab(rgb1, rgb2, ratio)
    else:
        blend = _CHANNEL_BLENDS[key]
        mixed = RGB(*(to_byte(blend(base, top)) for base, top in zip(rgb1, rgb2)))

    color = with_alpha(mixed, _mix_alpha(first, second, ratio))
    conversion = build_result(color, [ColorFormat(fmt) for fmt in c.DEFAULT_TARGET_FORMATS])
    return MixResult(
        color=color,
        hex=conversion.formatted["hex"],
        conversion=conversion,
        ratio=ratio,
        mode=key,
    )
