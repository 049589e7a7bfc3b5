#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/main.py

import argparse
import json
import sys

from huelab import __version__
from huelab.constants.color_names import COLOR_NAMES
from huelab.core.errors import ColorError
from huelab.subcommands.command_registry import SUBCOMMANDS
from huelab.shared.logger import log, HuelabArgumentParser
from huelab.shared.sanitizer import INPUT_HANDLERS


def get_root_parser() -> argparse.ArgumentParser:
    """Create argument parser for the bare huelab command."""
    parser = HuelabArgumentParser(
        prog="huelab",
        description="huelab: color conversion, harmony, contrast and vision toolkit",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="commands: " + " ".join(SUBCOMMANDS),
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"huelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "--list-color-names",
        nargs="?",
        const="text",
        default=None,
        type=INPUT_HANDLERS["listing"],
        help="list available color names (text or json) and exit",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_list_color_names(fmt: str) -> None:
    names = sorted(COLOR_NAMES)
    if fmt == "json":
        print(json.dumps(names, indent=2))
    else:
        for name in names:
            print(name)


def handle_root_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.list_color_names:
        handle_list_color_names(args.list_color_names)
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        log("info", f"available commands: {', '.join(SUBCOMMANDS)}")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for huelab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            try:
                SUBCOMMANDS[cmd].main()
            except ColorError as e:
                if "--json" in sys.argv:
                    print(json.dumps({"error": e.to_dict()}, indent=2))
                else:
                    log("error", e.message)
                sys.exit(2)
            sys.exit(0)

    parser = get_root_parser()
    args = parser.parse_args()
    handle_root_command(args, parser)


if __name__ == "__main__":
    main()
