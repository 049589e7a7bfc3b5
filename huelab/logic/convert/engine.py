#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/logic/convert/engine.py

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, NamedTuple, Optional

from huelab.core import config as c
from huelab.core.types import Color, ColorFormat, ColorValue, alpha_of
from huelab.shared.formatting import convert_color, format_colorspace, resolve_format
from huelab.shared.parser import parse_to_rgb
from .cache import ResultCache, make_key

_ALPHA_ONLY = (ColorFormat.RGBA, ColorFormat.HSLA)


class ConversionResult(NamedTuple):
    """Formatted strings and raw values, keyed by format name."""
    formatted: Mapping[str, str]
    raw: Mapping[str, ColorValue]

    def __getattr__(self, name: str) -> str:
        try:
            return self.formatted[name]
        except KeyError:
            raise AttributeError(name) from None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.formatted)
        out["raw_values"] = {fmt: value._asdict() for fmt, value in self.raw.items()}
        return out


def build_result(color: Color, targets: Iterable[ColorFormat]) -> ConversionResult:
    """Express one RGB/RGBA color in each target format."""
    has_alpha = alpha_of(color) is not None
    formatted: Dict[str, str] = {}
    raw: Dict[str, ColorValue] = {}
    for fmt in targets:
        if fmt in _ALPHA_ONLY and not has_alpha:
            continue
        value = convert_color(color, fmt)
        formatted[fmt.value] = format_colorspace(fmt, value)
        raw[fmt.value] = value
    return ConversionResult(MappingProxyType(formatted), MappingProxyType(raw))


def convert(
    value: str,
    source_format=None,
    target_formats=None,
    cache: Optional[ResultCache] = None,
) -> Optional[ConversionResult]:
    """
    Parse ``value`` and express it in the requested formats.

    Args:
        value: color text in any supported notation.
        source_format: optional ColorFormat (or name) the text is known to be in.
        target_formats: ordered formats to produce; None means the default set
            (hex, rgb, rgba, hsl, hsla, hsb, cmyk, lab, xyz). ``rgba`` and
            ``hsla`` are only produced for colors that carry alpha.
        cache: optional ResultCache consulted before, and filled after, parsing.

    Returns:
        ConversionResult, or None when the text matches no notation.
    """
    hint = resolve_format(source_format) if source_format is not None else None
    if target_formats is None:
        targets = None
    else:
        targets = [resolve_format(fmt) for fmt in target_formats]

    if value is None:
        return None

    key = None
    if cache is not None:
        key = make_key(value, hint, targets)
        cached = cache.lookup(key)
        if cached is not None:
            return cached

    color = parse_to_rgb(value, hint)
    if color is None:
        return None

    if targets is None:
        targets = [ColorFormat(fmt) for fmt in c.DEFAULT_TARGET_FORMATS]
    result = build_result(color, targets)

    if cache is not None:
        cache.store(key, result)
    return result
