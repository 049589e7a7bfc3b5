#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/core/errors.py

"""
Typed failures raised by the color engine.

An input that matches no grammar is not an error: the parser and
``convert`` return ``None`` for it. Everything below is raised for inputs
that were recognized but cannot be honored.
"""

from typing import Any, Dict, Optional


INVALID_COLOR_FORMAT = "INVALID_COLOR_FORMAT"
OUT_OF_RANGE_VALUE = "OUT_OF_RANGE_VALUE"
UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
CONTEXT_DEPENDENT_COLOR = "CONTEXT_DEPENDENT_COLOR"


class ColorError(Exception):
    """Base class of every failure the engine reports."""

    code = INVALID_COLOR_FORMAT

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "context": self.context}


class UnrecognizedColorError(ColorError, ValueError):
    """A derived-color operation was handed input that parses as no color."""

    def __init__(self, value: Any):
        super().__init__(
            f"unrecognized color: '{value}'",
            {"input": value},
        )
        self.value = value


class ColorValueError(ColorError, ValueError):
    """A recognized notation carried a number outside its valid range."""

    code = OUT_OF_RANGE_VALUE

    def __init__(self, field: str, value: Any, minimum: float, maximum: float):
        super().__init__(
            f"{field} value {value} is out of range [{_num(minimum)}, {_num(maximum)}]",
            {"field": field, "value": value, "range": (minimum, maximum)},
        )
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class UnsupportedFormatError(ColorError, ValueError):
    """A format hint or conversion target outside the known notations."""

    code = UNSUPPORTED_FORMAT

    def __init__(self, fmt: Any, supported=None):
        names = ", ".join(supported) if supported else ""
        message = f"unsupported color format: '{fmt}'"
        if names:
            message += f" (expected one of: {names})"
        super().__init__(message, {"format": fmt})
        self.format = fmt


class UnsupportedOperationError(ColorError, ValueError):
    """Unknown harmony type, blend mode or deficiency type."""

    code = UNSUPPORTED_OPERATION

    def __init__(self, kind: str, name: Any, supported=None):
        message = f"unsupported {kind}: '{name}'"
        if supported:
            message += f" (expected one of: {', '.join(supported)})"
        super().__init__(message, {"kind": kind, "name": name})
        self.kind = kind
        self.name = name


class ContextDependentColorError(ColorError):
    """A keyword such as ``currentcolor`` whose value depends on a rendering context."""

    code = CONTEXT_DEPENDENT_COLOR

    def __init__(self, value: str):
        super().__init__(
            f"'{value}' cannot be resolved outside a rendering context",
            {"input": value},
        )
        self.value = value


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
