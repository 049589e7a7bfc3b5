#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/shared/formatting.py

from huelab.core import config as c
from huelab.core import conversions as conv
from huelab.core.types import HSLA, RGBA, ColorFormat, Color, ColorValue, alpha_of, opaque
from huelab.core.errors import UnsupportedFormatError
from .clamping import round_half_up, to_byte


def format_number(value: float) -> str:
    """Shortest text for a number: integral values lose their '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _whole(value: float) -> str:
    return format_number(round_half_up(value))


def _hue(value: float) -> str:
    return format_number(conv.normalize_hue(round_half_up(value)))


def format_colorspace(fmt: str, value: ColorValue) -> str:
    """Canonical text of a value already expressed in ``fmt``."""
    fmt = resolve_format(fmt).value
    if fmt == 'hex':
        return conv.rgb_to_hex(value[0], value[1], value[2], alpha_of(value))
    elif fmt == 'rgb':
        return f"rgb({to_byte(value[0])}, {to_byte(value[1])}, {to_byte(value[2])})"
    elif fmt == 'rgba':
        r, g, b, a = value
        return f"rgba({to_byte(r)}, {to_byte(g)}, {to_byte(b)}, {format_number(a)})"
    elif fmt == 'hsl':
        h, s, l = value
        return f"hsl({_hue(h)}, {_whole(s)}%, {_whole(l)}%)"
    elif fmt == 'hsla':
        h, s, l, a = value
        return f"hsla({_hue(h)}, {_whole(s)}%, {_whole(l)}%, {format_number(a)})"
    elif fmt in ('hsb', 'hsv'):
        h, s, b = value
        return f"{fmt}({_hue(h)}, {_whole(s)}%, {_whole(b)}%)"
    elif fmt == 'cmyk':
        cy, m, y, k = value
        return f"cmyk({_whole(cy)}%, {_whole(m)}%, {_whole(y)}%, {_whole(k)}%)"
    elif fmt == 'lab':
        L, a, b = (format_number(round_half_up(v, c.LAB_DECIMALS)) for v in value)
        return f"lab({L}%, {a}, {b})"
    # xyz
    x, y, z = (format_number(v) for v in value)
    return f"xyz({x}, {y}, {z})"


def convert_color(color: Color, fmt: str) -> ColorValue:
    """Express an RGB/RGBA color in ``fmt``; alpha formats default to opaque."""
    fmt = resolve_format(fmt).value
    rgb = opaque(color)
    alpha = alpha_of(color)
    if fmt == 'hex':
        return color
    if fmt == 'rgb':
        return rgb
    if fmt == 'rgba':
        return RGBA(rgb.r, rgb.g, rgb.b, c.UNIT if alpha is None else alpha)
    if fmt == 'hsl':
        return conv.rgb_to_hsl(*rgb)
    if fmt == 'hsla':
        h, s, l = conv.rgb_to_hsl(*rgb)
        return HSLA(h, s, l, c.UNIT if alpha is None else alpha)
    if fmt in ('hsb', 'hsv'):
        return conv.rgb_to_hsb(*rgb)
    if fmt == 'cmyk':
        return conv.rgb_to_cmyk(*rgb)
    if fmt == 'lab':
        return conv.rgb_to_lab(*rgb)
    return conv.rgb_to_xyz(*rgb)


def format_color(color: Color, fmt: str = 'hex') -> str:
    """Canonical text of an RGB/RGBA color in any supported format."""
    fmt = resolve_format(fmt).value
    return format_colorspace(fmt, convert_color(color, fmt))


def resolve_format(fmt) -> ColorFormat:
    """Map a format name (any case) or enum member onto ColorFormat."""
    if isinstance(fmt, ColorFormat):
        return fmt
    try:
        return ColorFormat(str(fmt).strip().lower())
    except ValueError:
        raise UnsupportedFormatError(fmt, [f.value for f in ColorFormat]) from None
