#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/shared/sanitizer.py

import argparse
import re

from huelab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_positive_only_int(value: str) -> int:
    """
    Extracts a non-negative integer from a string by stripping out
    all non-numeric characters (including minus signs).
    """
    if value is None:
        return None
    digits_only = re.sub(r"[^0-9]", "", str(value))
    if not digits_only:
        return None
    return int(digits_only)


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its sign.
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None
    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None
    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point encountered.
    """
    if value is None:
        return None
    s = str(value)
    is_negative = s.strip().startswith("-")

    clean_str = ""
    dot_seen = False
    for char in re.findall(r"[0-9\.]", s):
        if char == ".":
            if dot_seen:
                continue
            dot_seen = True
        clean_str += char

    if not clean_str or clean_str == ".":
        return None
    val = float(clean_str)
    return -val if is_negative else val


def _extract_name(value: str) -> str:
    """
    Lowercases a string and keeps letters and hyphens; runs of spaces
    or underscores become a single hyphen ('Split Complementary' and
    'split_complementary' both give 'split-complementary').
    """
    if value is None:
        return ""
    s = re.sub(r"[\s_]+", "-", str(value).strip().lower())
    return "".join(re.findall(r"[a-z\-]", s)).strip("-")


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_string_clean(v: str) -> str:
    """Validator for name-like options (formats, harmony types, modes)."""
    cleaned = _extract_name(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_choice(choices):
    """
    Factory function returning a validator that cleans a name and checks
    it against a fixed list of choices.
    """
    def validator(v: str) -> str:
        cleaned = _extract_name(v)
        if cleaned not in choices:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(
                f"invalid choice: '{raw}' (choose from {', '.join(choices)})"
            )
        return cleaned
    return validator


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)
        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")
        return max(min_v, min(max_v, val))
    return validator


def handle_positive_int(min_v: int, max_v: int):
    """
    Factory function returning a validator that specifically handles
    positive integers clamped within a given range.
    """
    def validator(v: str) -> int:
        val = _extract_positive_only_int(v)
        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")
        return max(min_v, min(max_v, val))
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)
        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")
        return max(min_v, min(max_v, val))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "format": handle_string_clean,
    "harmony_type": handle_choice(c.HARMONY_TYPES),
    "cb_type": handle_choice(list(c.CB_MATRICES)),
    "blend_mode": handle_choice(c.BLEND_MODES),
    "listing": handle_choice(["text", "json"]),

    "float_0_1": handle_float_range(0.0, 1.0),
    "float_signed_360": handle_float_range(-360.0, 360.0),
    "contrast": handle_float_range(1.0, 21.0),
    "analogous_angle": handle_float_range(1.0, 180.0),

    "intensity": handle_positive_int(0, 100),
    "analogous_count": handle_positive_int(2, 12),
    "count": handle_positive_int(1, 20),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
}
