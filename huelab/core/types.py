#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/core/types.py

"""
Immutable value types for every supported color space.

All of them are plain named tuples: they unpack like the bare tuples the
conversion functions work on, compare by value and are hashable, so they
can be memoized and cached freely. Range checks happen in the parser, not
here, because derived values (LAB round-trips, blends) may legitimately
leave the nominal ranges before the final formatting step.
"""

from enum import Enum
from typing import NamedTuple, Union


class ColorFormat(str, Enum):
    """Closed set of color notations understood by the parser and engine."""
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSB = "hsb"
    HSV = "hsv"
    CMYK = "cmyk"
    LAB = "lab"
    XYZ = "xyz"


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: float

    @property
    def rgb(self) -> RGB:
        return RGB(self.r, self.g, self.b)


class HSL(NamedTuple):
    h: float
    s: float
    l: float


class HSLA(NamedTuple):
    h: float
    s: float
    l: float
    a: float

    @property
    def hsl(self) -> HSL:
        return HSL(self.h, self.s, self.l)


class HSB(NamedTuple):
    h: float
    s: float
    b: float


class CMYK(NamedTuple):
    c: float
    m: float
    y: float
    k: float


class LAB(NamedTuple):
    l: float
    a: float
    b: float


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


# Opaque or translucent sRGB color; every algorithm works on this.
Color = Union[RGB, RGBA]

# Anything the parser can hand back.
ColorValue = Union[RGB, RGBA, HSL, HSLA, HSB, CMYK, LAB, XYZ]


def opaque(color: Color) -> RGB:
    """Drop the alpha channel, if any."""
    if isinstance(color, RGBA):
        return color.rgb
    return color


def alpha_of(color: Color):
    """Alpha of a translucent color, None for an opaque one."""
    if isinstance(color, RGBA):
        return color.a
    return None


def with_alpha(rgb: RGB, alpha) -> Color:
    """Attach alpha to an opaque color; None keeps it opaque."""
    if alpha is None:
        return RGB(*rgb)
    return RGBA(rgb[0], rgb[1], rgb[2], alpha)
