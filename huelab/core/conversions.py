#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/core/conversions.py

import functools
import math
import re
from typing import Optional

from . import config as c
from .types import CMYK, HSB, HSL, HSLA, LAB, RGB, RGBA, XYZ, Color, ColorValue, opaque
from huelab.shared.clamping import _clamp01, round_half_up, to_byte

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")


def normalize_hue(h: float) -> float:
    """Bring a hue angle into [0, 360)."""
    while h < 0:
        h += c.HUE_MAX
    while h >= c.HUE_MAX:
        h -= c.HUE_MAX
    return h


# ==========================================
# Hex
# ==========================================

def hex_to_rgb(hex_code: str) -> Optional[Color]:
    """Decode 3, 4, 6 or 8 hex digits (leading '#' optional)."""
    h = hex_code.strip()
    if h.startswith("#"):
        h = h[1:]
    if len(h) not in (3, 4, 6, 8) or not _HEX_DIGITS.match(h):
        return None

    if len(h) in (3, 4):
        r, g, b = (int(ch * 2, 16) for ch in h[:3])
        if len(h) == 4:
            return RGBA(r, g, b, int(h[3], 16) / c.HEX_NIBBLE_MAX)
        return RGB(r, g, b)

    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    if len(h) == 8:
        return RGBA(r, g, b, int(h[6:8], 16) / c.RGB_MAX)
    return RGB(r, g, b)


def rgb_to_hex(r: float, g: float, b: float, a: Optional[float] = None) -> str:
    """Encode channels as lowercase hex, appending an alpha byte when given."""
    out = f"#{to_byte(r):02x}{to_byte(g):02x}{to_byte(b):02x}"
    if a is not None:
        out += f"{to_byte(_clamp01(a) * c.RGB_MAX):02x}"
    return out


# ==========================================
# Cylindrical Models
# ==========================================

def _hue_from_rgb(r_f: float, g_f: float, b_f: float, cmax: float, delta: float) -> float:
    if cmax == r_f:
        h = (g_f - b_f) / delta + (c.HSL_HUE_MOD if g_f < b_f else 0.0)
    elif cmax == g_f:
        h = (b_f - r_f) / delta + c.DIV_2
    else:
        h = (r_f - g_f) / delta + 4.0
    return h * (c.HUE_MAX / c.HSL_HUE_MOD)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB to HSL (h in degrees, s and l in percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return HSL(0.0, 0.0, L * c.PERCENT)

    if L > 0.5:
        s = delta / (c.DIV_2 - cmax - cmin)
    else:
        s = delta / (cmax + cmin)
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSL(h, s * c.PERCENT, L * c.PERCENT)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, L: float) -> RGB:
    """Convert HSL to RGB."""
    h = h / c.HUE_MAX
    s = s / c.PERCENT
    L = L / c.PERCENT
    if s == 0:
        r = g = b = L
    else:
        q = L * (1 + s) if L < 0.5 else L + s - L * s
        p = 2 * L - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return RGB(to_byte(r * c.RGB_MAX), to_byte(g * c.RGB_MAX), to_byte(b * c.RGB_MAX))


def rgb_to_hsb(r: int, g: int, b: int) -> HSB:
    """Convert RGB to HSB (a.k.a. HSV)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    s = 0.0 if cmax == 0 else delta / cmax
    h = 0.0 if delta == 0 else _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSB(h, s * c.PERCENT, cmax * c.PERCENT)


def hsb_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSB (a.k.a. HSV) to RGB."""
    h = h / c.HUE_MAX
    s = s / c.PERCENT
    v = v / c.PERCENT
    i = int(math.floor(h * c.HSL_HUE_MOD))
    f = h * c.HSL_HUE_MOD - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q
    return RGB(to_byte(r * c.RGB_MAX), to_byte(g * c.RGB_MAX), to_byte(b * c.RGB_MAX))


# ==========================================
# Subtractive Model
# ==========================================

def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    """Convert RGB to CMYK (percent)."""
    r_n, g_n, b_n = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    k = c.UNIT - max(r_n, g_n, b_n)
    if k == c.UNIT:
        return CMYK(0.0, 0.0, 0.0, c.PERCENT)
    denom = c.UNIT - k
    cy = (c.UNIT - r_n - k) / denom
    m = (c.UNIT - g_n - k) / denom
    y = (c.UNIT - b_n - k) / denom
    return CMYK(cy * c.PERCENT, m * c.PERCENT, y * c.PERCENT, k * c.PERCENT)


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK (percent) to RGB."""
    k_f = c.UNIT - k / c.PERCENT
    r = c.RGB_MAX * (c.UNIT - cy / c.PERCENT) * k_f
    g = c.RGB_MAX * (c.UNIT - m / c.PERCENT) * k_f
    b = c.RGB_MAX * (c.UNIT - y / c.PERCENT) * k_f
    return RGB(to_byte(r), to_byte(g), to_byte(b))


# ==========================================
# CIE XYZ / LAB
# ==========================================

def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an sRGB component given on the 0..255 scale."""
    c_norm = color_comp / c.RGB_MAX
    if c_norm > c.SRGB_TO_LINEAR_TH:
        return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA
    return c_norm / c.SRGB_SLOPE


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component, result on the 0..1 scale."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_xyz(r: int, g: int, b: int) -> XYZ:
    """Convert RGB to CIE XYZ (D65, 0..100 scale, 3 decimals)."""
    r_lin = _srgb_to_linear(r) * c.XYZ_SCALING
    g_lin = _srgb_to_linear(g) * c.XYZ_SCALING
    b_lin = _srgb_to_linear(b) * c.XYZ_SCALING
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return XYZ(
        round_half_up(x, c.XYZ_DECIMALS),
        round_half_up(y, c.XYZ_DECIMALS),
        round_half_up(z, c.XYZ_DECIMALS),
    )


def xyz_to_rgb(x: float, y: float, z: float) -> RGB:
    """Convert CIE XYZ to RGB, clamping out-of-gamut channels."""
    x_n, y_n, z_n = x / c.XYZ_SCALING, y / c.XYZ_SCALING, z / c.XYZ_SCALING
    r_lin = x_n * c.M_XYZ_SRGB_R[0] + y_n * c.M_XYZ_SRGB_R[1] + z_n * c.M_XYZ_SRGB_R[2]
    g_lin = x_n * c.M_XYZ_SRGB_G[0] + y_n * c.M_XYZ_SRGB_G[1] + z_n * c.M_XYZ_SRGB_G[2]
    b_lin = x_n * c.M_XYZ_SRGB_B[0] + y_n * c.M_XYZ_SRGB_B[1] + z_n * c.M_XYZ_SRGB_B[2]
    return RGB(
        to_byte(_linear_to_srgb(r_lin) * c.RGB_MAX),
        to_byte(_linear_to_srgb(g_lin) * c.RGB_MAX),
        to_byte(_linear_to_srgb(b_lin) * c.RGB_MAX),
    )


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    cubed = t * t * t
    return cubed if cubed > c.LAB_E else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(x: float, y: float, z: float) -> LAB:
    """Convert XYZ to CIE LAB (2 decimals)."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return LAB(
        round_half_up(L, c.LAB_DECIMALS),
        round_half_up(a, c.LAB_DECIMALS),
        round_half_up(b, c.LAB_DECIMALS),
    )


def lab_to_xyz(L: float, a: float, b: float) -> XYZ:
    """Convert LAB to CIE XYZ (3 decimals)."""
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return XYZ(
        round_half_up(_xyz_f_inv(x_r) * c.D65_X, c.XYZ_DECIMALS),
        round_half_up(_xyz_f_inv(y_r) * c.D65_Y, c.XYZ_DECIMALS),
        round_half_up(_xyz_f_inv(z_r) * c.D65_Z, c.XYZ_DECIMALS),
    )


def rgb_to_lab(r: int, g: int, b: int) -> LAB:
    """Direct RGB to LAB conversion."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Direct LAB to RGB conversion."""
    return xyz_to_rgb(*lab_to_xyz(L, a, b))


# ==========================================
# Hub Dispatch
# ==========================================

def to_rgb(value: ColorValue) -> Color:
    """Funnel any parsed color value into RGB, keeping alpha as RGBA."""
    if isinstance(value, (RGB, RGBA)):
        return value
    if isinstance(value, HSLA):
        r, g, b = hsl_to_rgb(*value.hsl)
        return RGBA(r, g, b, value.a)
    if isinstance(value, HSL):
        return hsl_to_rgb(*value)
    if isinstance(value, HSB):
        return hsb_to_rgb(*value)
    if isinstance(value, CMYK):
        return cmyk_to_rgb(*value)
    if isinstance(value, LAB):
        return lab_to_rgb(*value)
    if isinstance(value, XYZ):
        return xyz_to_rgb(*value)
    raise TypeError(f"not a color value: {value!r}")


def color_to_hsl(color: Color) -> HSL:
    """HSL of the opaque part of a color."""
    return rgb_to_hsl(*opaque(color))


# Apply LRU caching to the pure scalar conversions of this module
for _fn in (
    hex_to_rgb, rgb_to_hex,
    rgb_to_hsl, hsl_to_rgb,
    rgb_to_hsb, hsb_to_rgb,
    rgb_to_cmyk, cmyk_to_rgb,
    rgb_to_xyz, xyz_to_rgb,
    xyz_to_lab, lab_to_xyz,
    rgb_to_lab, lab_to_rgb,
):
    globals()[_fn.__name__] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_fn)
