#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/subcommands/command_registry.py

from . import (
    convert,
    scheme,
    contrast,
    vision,
    mix,
)

SUBCOMMANDS = {
    'convert': convert,
    'scheme': scheme,
    'contrast': contrast,
    'vision': vision,
    'mix': mix,
}
