#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/subcommands/scheme.py

import argparse
import json
import sys

from huelab.core import config as c
from huelab.logic.harmony.engine import HarmonyOptions, generate_all_harmonies, generate_harmony
from huelab.shared.logger import HuelabArgumentParser
from huelab.shared.sanitizer import INPUT_HANDLERS


def handle_scheme_command(args: argparse.Namespace) -> None:
    options = HarmonyOptions(
        angle_adjustment=args.angle,
        analogous_count=args.count,
        analogous_angle=args.analogous_angle,
    )
    if args.all:
        results = generate_all_harmonies(args.value, args.output_format, options)
    else:
        result = generate_harmony(args.value, args.type, args.output_format, options)
        results = {result.type: result}

    if args.json:
        print(json.dumps({name: res.to_dict() for name, res in results.items()}, indent=2))
        return

    width = max(len(name) for name in results)
    for name, res in results.items():
        print(f"{name:<{width}}  {'  '.join(res.colors)}")


def get_scheme_parser() -> argparse.ArgumentParser:
    parser = HuelabArgumentParser(
        prog="huelab scheme",
        description="huelab scheme: generate color harmonies from a base color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("value", help="base color in any supported notation")
    parser.add_argument(
        "-t",
        "--type",
        type=INPUT_HANDLERS["harmony_type"],
        default="complementary",
        help="harmony type (default: complementary)\n" f"all types: {' '.join(c.HARMONY_TYPES)}",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        type=INPUT_HANDLERS["format"],
        default="hex",
        help="notation of the generated colors (default: hex)",
    )
    parser.add_argument(
        "-a",
        "--angle",
        type=INPUT_HANDLERS["float_signed_360"],
        default=0.0,
        help="extra rotation in degrees applied to every generated hue",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=INPUT_HANDLERS["analogous_count"],
        default=c.ANALOGOUS_COUNT,
        help=f"number of analogous colors (default: {c.ANALOGOUS_COUNT})",
    )
    parser.add_argument(
        "--analogous-angle",
        type=INPUT_HANDLERS["analogous_angle"],
        default=c.ANALOGOUS_ANGLE,
        help=f"spacing of analogous hues in degrees (default: {c.ANALOGOUS_ANGLE:g})",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="generate every harmony type",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON including raw HSL values",
    )
    return parser


def main() -> None:
    """Main entry point for scheme command."""
    parser = get_scheme_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_scheme_command(args)


if __name__ == "__main__":
    main()
