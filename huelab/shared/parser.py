#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/shared/parser.py

"""
Color string recognition.

Detection runs in a fixed order because the grammars overlap: named
colors, then '#'-prefixed hex, then the function-call notations, then a
bare ``r, g, b`` triple. A string that matches nothing yields ``None``;
a string that matches a grammar but carries an out-of-range number raises
:class:`~huelab.core.errors.ColorValueError` naming the field.
"""

import re
from typing import Callable, List, Optional, Tuple

from huelab.constants.color_names import COLOR_NAMES, CURRENT_COLOR, TRANSPARENT
from huelab.core import config as c
from huelab.core import conversions as conv
from huelab.core.errors import ColorValueError, ContextDependentColorError, UnrecognizedColorError
from huelab.core.types import (
    CMYK, HSB, HSL, HSLA, LAB, RGB, RGBA, XYZ,
    Color, ColorFormat, ColorValue,
)
from .formatting import resolve_format

# Regex building blocks:
#   _INT   -> optional minus sign followed by digits (e.g., "255", "-3")
#   _NUM   -> integer or decimal (e.g., "50", "12.5", "-0.25", ".5")
#   _SEP   -> comma with optional surrounding whitespace
_INT = r"(-?\d+)"
_NUM = r"(-?(?:\d+(?:\.\d*)?|\.\d+))"
_PCT = _NUM + r"%?"
_SEP = r"\s*,\s*"


def _func(name: str, *fields: str) -> re.Pattern:
    return re.compile(
        r"^" + name + r"\s*\(\s*" + _SEP.join(fields) + r"\s*\)$",
        re.IGNORECASE,
    )


_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_RGBA_RE = _func("rgba", _INT, _INT, _INT, _NUM)
_RGB_RE = _func("rgb", _INT, _INT, _INT)
_HSLA_RE = _func("hsla", _NUM, _PCT, _PCT, _NUM)
_HSL_RE = _func("hsl", _NUM, _PCT, _PCT)
_HSB_RE = _func("hs[bv]", _NUM, _PCT, _PCT)
_CMYK_RE = _func("cmyk", _PCT, _PCT, _PCT, _PCT)
_LAB_RE = _func("lab", _PCT, _NUM, _NUM)
_XYZ_RE = _func("xyz", _NUM, _NUM, _NUM)
_BARE_RGB_RE = re.compile(r"^" + _INT + _SEP + _INT + _SEP + _INT + r"$")


# ==========================================
# Field Validation
# ==========================================

def _check(field: str, value: float, minimum: float, maximum: float) -> float:
    if value < minimum or value > maximum:
        raise ColorValueError(field, value, minimum, maximum)
    return value


def _channel(field: str, token: str) -> int:
    return int(_check(field, int(token), 0, int(c.RGB_MAX)))


def _alpha(token: str) -> float:
    return _check("alpha", float(token), 0.0, c.UNIT)


def _hue(token: str) -> float:
    return conv.normalize_hue(_check("hue", float(token), 0.0, c.HUE_MAX))


def _percent(field: str, token: str) -> float:
    return _check(field, float(token), 0.0, c.PERCENT)


# ==========================================
# Grammar Builders
# ==========================================

def _build_rgb(m: re.Match) -> RGB:
    return RGB(_channel("red", m.group(1)), _channel("green", m.group(2)), _channel("blue", m.group(3)))


def _build_rgba(m: re.Match) -> RGBA:
    r, g, b = _build_rgb(m)
    return RGBA(r, g, b, _alpha(m.group(4)))


def _build_hsl(m: re.Match) -> HSL:
    return HSL(_hue(m.group(1)), _percent("saturation", m.group(2)), _percent("lightness", m.group(3)))


def _build_hsla(m: re.Match) -> HSLA:
    h, s, l = _build_hsl(m)
    return HSLA(h, s, l, _alpha(m.group(4)))


def _build_hsb(m: re.Match) -> HSB:
    return HSB(_hue(m.group(1)), _percent("saturation", m.group(2)), _percent("brightness", m.group(3)))


def _build_cmyk(m: re.Match) -> CMYK:
    return CMYK(
        _percent("cyan", m.group(1)),
        _percent("magenta", m.group(2)),
        _percent("yellow", m.group(3)),
        _percent("key", m.group(4)),
    )


def _build_lab(m: re.Match) -> LAB:
    lo, hi = c.LAB_AB_RANGE
    return LAB(
        _check("L", float(m.group(1)), *c.LAB_L_RANGE),
        _check("a", float(m.group(2)), lo, hi),
        _check("b", float(m.group(3)), lo, hi),
    )


def _build_xyz(m: re.Match) -> XYZ:
    return XYZ(
        _check("x", float(m.group(1)), 0.0, float("inf")),
        _check("y", float(m.group(2)), 0.0, float("inf")),
        _check("z", float(m.group(3)), 0.0, float("inf")),
    )


_Grammar = Tuple[ColorFormat, re.Pattern, Callable[[re.Match], ColorValue]]

# Detection order after named colors and hex
GRAMMARS: List[_Grammar] = [
    (ColorFormat.RGBA, _RGBA_RE, _build_rgba),
    (ColorFormat.RGB, _RGB_RE, _build_rgb),
    (ColorFormat.HSLA, _HSLA_RE, _build_hsla),
    (ColorFormat.HSL, _HSL_RE, _build_hsl),
    (ColorFormat.HSB, _HSB_RE, _build_hsb),
    (ColorFormat.CMYK, _CMYK_RE, _build_cmyk),
    (ColorFormat.LAB, _LAB_RE, _build_lab),
    (ColorFormat.XYZ, _XYZ_RE, _build_xyz),
    (ColorFormat.RGB, _BARE_RGB_RE, _build_rgb),
]

# Grammars tried when the caller names the format up front
_HINTED = {
    ColorFormat.RGB: (_RGB_RE, _BARE_RGB_RE),
    ColorFormat.RGBA: (_RGBA_RE,),
    ColorFormat.HSL: (_HSL_RE,),
    ColorFormat.HSLA: (_HSLA_RE,),
    ColorFormat.HSB: (_HSB_RE,),
    ColorFormat.HSV: (_HSB_RE,),
    ColorFormat.CMYK: (_CMYK_RE,),
    ColorFormat.LAB: (_LAB_RE,),
    ColorFormat.XYZ: (_XYZ_RE,),
}

_BUILDERS = {pattern: builder for _, pattern, builder in GRAMMARS}


# ==========================================
# Named Colors & Hex
# ==========================================

def lookup_named_color(name: str) -> Optional[Color]:
    """Resolve a CSS color keyword (any case) to RGB, RGBA or None."""
    key = name.strip().lower()
    if key == TRANSPARENT:
        return RGBA(0, 0, 0, 0.0)
    if key == CURRENT_COLOR:
        raise ContextDependentColorError(name.strip())
    hex_code = COLOR_NAMES.get(key)
    if hex_code is None:
        return None
    return conv.hex_to_rgb(hex_code)


def _is_named(value: str) -> bool:
    key = value.lower()
    return key in COLOR_NAMES or key in (TRANSPARENT, CURRENT_COLOR)


def parse_hex(value: str) -> Optional[Color]:
    """Named color or 3/4/6/8 digit hex, '#' optional."""
    s = value.strip()
    if _is_named(s):
        return lookup_named_color(s)
    return conv.hex_to_rgb(s)


# ==========================================
# Public API
# ==========================================

def detect_format(value: str) -> Optional[ColorFormat]:
    """Classify a color string without validating its numbers."""
    s = value.strip()
    if not s:
        return None
    if _is_named(s) or _HEX_RE.match(s):
        return ColorFormat.HEX
    for fmt, pattern, _ in GRAMMARS:
        if pattern.match(s):
            if fmt is ColorFormat.HSB and s[:3].lower() == "hsv":
                return ColorFormat.HSV
            return fmt
    return None


def parse_color(value: str, hint=None) -> Optional[ColorValue]:
    """
    Parse a color string into its typed value.

    Args:
        value: raw color text, e.g. ``"#336699cc"`` or ``"hsl(210, 50%, 40%)"``.
        hint: optional ColorFormat (or its name) restricting the grammar.

    Returns:
        RGB, RGBA, HSL, HSLA, HSB, CMYK, LAB or XYZ; None when nothing matches.

    Raises:
        ColorValueError: a field is outside its valid range.
        ContextDependentColorError: the input is ``currentcolor``.
        UnsupportedFormatError: ``hint`` names no known format.
    """
    if value is None:
        return None
    s = value.strip()

    if hint is not None:
        fmt = resolve_format(hint)
        if fmt is ColorFormat.HEX:
            return parse_hex(s)
        for pattern in _HINTED[fmt]:
            m = pattern.match(s)
            if m:
                return _BUILDERS[pattern](m)
        return None

    if detect_format(s) is ColorFormat.HEX:
        return parse_hex(s)
    for _, pattern, builder in GRAMMARS:
        m = pattern.match(s)
        if m:
            return builder(m)
    return None


def parse_to_rgb(value: str, hint=None) -> Optional[Color]:
    """Parse a color string and funnel it into RGB (RGBA when alpha is present)."""
    parsed = parse_color(value, hint)
    if parsed is None:
        return None
    return conv.to_rgb(parsed)


def ensure_color(value) -> Color:
    """
    Accept a color string or any typed color value and return RGB/RGBA.
    Used by the derived-color algorithms, which need a color to work on.
    """
    if isinstance(value, (RGB, RGBA)):
        return value
    if isinstance(value, (HSL, HSLA, HSB, CMYK, LAB, XYZ)):
        return conv.to_rgb(value)
    color = parse_to_rgb(value) if isinstance(value, str) else None
    if color is None:
        raise UnrecognizedColorError(value)
    return color
