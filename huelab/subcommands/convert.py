#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/subcommands/convert.py

import argparse
import json
import sys

from huelab.core import config as c
from huelab.core.types import ColorFormat
from huelab.logic.convert.cache import conversion_cache
from huelab.logic.convert.engine import convert
from huelab.shared.logger import log, HuelabArgumentParser
from huelab.shared.sanitizer import INPUT_HANDLERS


def handle_convert_command(args: argparse.Namespace) -> None:
    """Parse one color value and print it in every requested format."""
    result = convert(args.value, args.from_format, args.to_format, cache=conversion_cache)
    if result is None:
        log("error", f"unrecognized color: '{args.value}'")
        sys.exit(2)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    width = max((len(name) for name in result.formatted), default=0)
    for name, text in result.formatted.items():
        print(f"{name:<{width}}  {text}")


def get_convert_parser() -> argparse.ArgumentParser:
    parser = HuelabArgumentParser(
        prog="huelab convert",
        description="huelab convert: express a color value in other notations",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    formats_list = " ".join(fmt.value for fmt in ColorFormat)
    parser.add_argument(
        "value",
        help=(
            "color value, quoted when it contains spaces\n"
            "examples:\n"
            '  "#336699"\n'
            '  "rebeccapurple"\n'
            '  "rgb(51, 102, 153)"\n'
            '  "hsla(210, 50%%, 40%%, 0.8)"\n'
            '  "lab(42.37, -1.05, -34.26)"'
        ),
    )
    parser.add_argument(
        "-f",
        "--from-format",
        type=INPUT_HANDLERS["format"],
        default=None,
        help="format the value is written in (detected when omitted)\n" f"all formats: {formats_list}",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        nargs="+",
        type=INPUT_HANDLERS["format"],
        default=None,
        help="formats to produce, in order\n" f"default: {' '.join(c.DEFAULT_TARGET_FORMATS)}",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON including raw values",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_convert_command(args)


if __name__ == "__main__":
    main()
