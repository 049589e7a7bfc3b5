#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/logic/harmony/engine.py

from typing import Dict, List, NamedTuple, Optional, Tuple

from huelab.core import config as c
from huelab.core import conversions as conv
from huelab.core.errors import UnsupportedOperationError
from huelab.core.types import HSL, opaque
from huelab.shared.formatting import format_color, resolve_format
from huelab.shared.parser import ensure_color


class HarmonyOptions(NamedTuple):
    angle_adjustment: float = 0.0
    analogous_count: int = c.ANALOGOUS_COUNT
    analogous_angle: float = c.ANALOGOUS_ANGLE


class HarmonyResult(NamedTuple):
    type: str
    base_color: str
    colors: List[str]
    raw_values: List[HSL]

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "base_color": self.base_color,
            "colors": list(self.colors),
            "raw_values": [hsl._asdict() for hsl in self.raw_values],
        }


def _rotate(base: HSL, degrees: float) -> HSL:
    return base._replace(h=conv.normalize_hue(base.h + degrees))


def _fixed_rotations(base: HSL, rotations: Tuple[float, ...], adjustment: float) -> List[HSL]:
    """Base first, then one variant per rotation (each shifted by ``adjustment``)."""
    return [base] + [_rotate(base, deg + adjustment) for deg in rotations]


def _analogous(base: HSL, options: HarmonyOptions) -> List[HSL]:
    count = options.analogous_count
    angle = options.analogous_angle
    adjustment = options.angle_adjustment
    side_count = (count - 1) // 2

    above = [_rotate(base, i * angle + adjustment) for i in range(1, side_count + 1)]
    below = [_rotate(base, -i * angle + adjustment) for i in range(1, count - side_count)]
    # Farthest-below first so the list reads around the wheel
    return list(reversed(below)) + [base] + above


def _hue_set(key: str, base: HSL, options: HarmonyOptions) -> Tuple[str, List[HSL]]:
    """Reported type name and HSL values of one harmony."""
    adj = options.angle_adjustment
    if key == "complementary":
        return "complementary", _fixed_rotations(base, (c.HARMONY_COMPLEMENT,), adj)
    elif key == "analogous":
        return "analogous", _analogous(base, options)
    elif key == "triadic":
        return "triadic", _fixed_rotations(base, c.HARMONY_TRIAD, adj)
    elif key in ("tetradic", "square"):
        return "square", _fixed_rotations(base, c.HARMONY_SQUARE, adj)
    elif key == "split-complementary":
        split = (
            c.HARMONY_COMPLEMENT - c.HARMONY_SPLIT_OFFSET,
            c.HARMONY_COMPLEMENT + c.HARMONY_SPLIT_OFFSET,
        )
        return "split-complementary", _fixed_rotations(base, split, adj)
    # double-complementary
    return "double-complementary", _fixed_rotations(base, c.HARMONY_DOUBLE[1:], adj)


def _normalize_type(harmony_type: str) -> str:
    return str(harmony_type).strip().lower().replace("_", "-")


def generate_harmony(
    base_color,
    harmony_type: str,
    output_format: str = "hex",
    options: Optional[HarmonyOptions] = None,
) -> HarmonyResult:
    """
    Rotate the hue of ``base_color`` in HSL space into a harmony set.

    The base color is always part of the result: first for every type
    except analogous, where it sits in the middle. Raw values are HSL with
    hues in [0, 360).

    Raises:
        UnrecognizedColorError: ``base_color`` is not a color.
        UnsupportedOperationError: unknown ``harmony_type``.
        UnsupportedFormatError: unknown ``output_format``.
    """
    options = options or HarmonyOptions()
    fmt = resolve_format(output_format)
    key = _normalize_type(harmony_type)
    if key not in c.HARMONY_TYPES:
        raise UnsupportedOperationError("harmony type", harmony_type, c.HARMONY_TYPES)

    rgb = opaque(ensure_color(base_color))
    base = conv.rgb_to_hsl(*rgb)
    reported_type, hsl_values = _hue_set(key, base, options)

    def render(hsl: HSL) -> str:
        return format_color(conv.hsl_to_rgb(*hsl), fmt)

    return HarmonyResult(
        type=reported_type,
        base_color=format_color(rgb, fmt),
        colors=[render(hsl) for hsl in hsl_values],
        raw_values=hsl_values,
    )


def generate_all_harmonies(
    base_color,
    output_format: str = "hex",
    options: Optional[HarmonyOptions] = None,
) -> Dict[str, HarmonyResult]:
    """Every harmony type for one base color, keyed by type name."""
    return {
        name: generate_harmony(base_color, name, output_format, options)
        for name in c.HARMONY_TYPES
        if name != "square"
    }
