#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/subcommands/mix.py

import argparse
import json
import sys

from huelab.core import config as c
from huelab.logic.mix.engine import mix_colors
from huelab.shared.logger import HuelabArgumentParser
from huelab.shared.sanitizer import INPUT_HANDLERS


def handle_mix_command(args: argparse.Namespace) -> None:
    result = mix_colors(args.color1, args.color2, args.ratio, args.mode)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    formatted = result.conversion.formatted
    width = max(len(name) for name in formatted)
    for name, text in formatted.items():
        print(f"{name:<{width}}  {text}")


def get_mix_parser() -> argparse.ArgumentParser:
    parser = HuelabArgumentParser(
        prog="huelab mix",
        description="huelab mix: mix or blend two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("color1", help="first (base) color")
    parser.add_argument("color2", help="second (blend) color")
    parser.add_argument(
        "-r",
        "--ratio",
        type=INPUT_HANDLERS["float_0_1"],
        default=0.5,
        help="share of the second color from 0 to 1 (default: 0.5)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=INPUT_HANDLERS["blend_mode"],
        default="normal",
        help="blend mode (default: normal)\n" f"all modes: {' '.join(c.BLEND_MODES)}",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON including raw values",
    )
    return parser


def main() -> None:
    """Main entry point for mix command."""
    parser = get_mix_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_mix_command(args)


if __name__ == "__main__":
    main()
