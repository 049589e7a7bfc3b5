#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/subcommands/contrast.py

import argparse
import json
import sys

from huelab.core import config as c
from huelab.core import conversions as conv
from huelab.logic.accessibility.engine import (
    check_contrast,
    find_accessible_color,
    get_contrast_report,
    suggest_accessible_pairs,
)
from huelab.shared.logger import HuelabArgumentParser
from huelab.shared.sanitizer import INPUT_HANDLERS
from huelab.shared.parser import ensure_color


def _passes_text(result) -> str:
    flags = result.passes._asdict()
    return " ".join(f"{name}={'yes' if ok else 'no'}" for name, ok in flags.items())


def handle_contrast_command(args: argparse.Namespace) -> None:
    out = {}
    lines = []

    result = check_contrast(args.foreground, args.background)
    out["contrast"] = result.to_dict()
    lines.append(f"ratio           {result.ratio:.2f}:1")
    lines.append(f"passes          {_passes_text(result)}")
    lines.append(f"recommendation  {result.recommendation}")

    if args.fix:
        fixed = find_accessible_color(
            args.foreground,
            args.background,
            target_contrast=args.target,
            maintain_hue=not args.no_hue,
            prefer_darker=args.prefer_darker,
        )
        out["accessible"] = {"hex": fixed.hex, "contrast": round(fixed.contrast, 2)}
        lines.append(f"accessible      {fixed.hex} ({fixed.contrast:.2f}:1)")

    if args.report:
        report = get_contrast_report(args.foreground)
        out["report"] = {name: res.to_dict() for name, res in report.items()}
        for name, res in report.items():
            lines.append(f"vs {name:<13}{res.ratio:.2f}:1  {res.recommendation}")

    if args.pairs:
        pairs = suggest_accessible_pairs(args.foreground, args.pairs)
        out["pairs"] = [
            {
                "foreground": pair.foreground_hex,
                "background": pair.background_hex,
                "contrast": pair.contrast,
            }
            for pair in pairs
        ]
        for pair in pairs:
            lines.append(f"pair            {pair.foreground_hex} on {pair.background_hex} ({pair.contrast:.2f}:1)")

    if args.json:
        out["foreground"] = conv.rgb_to_hex(*ensure_color(args.foreground))
        out["background"] = conv.rgb_to_hex(*ensure_color(args.background))
        print(json.dumps(out, indent=2))
        return
    for line in lines:
        print(line)


def get_contrast_parser() -> argparse.ArgumentParser:
    parser = HuelabArgumentParser(
        prog="huelab contrast",
        description="huelab contrast: check and fix WCAG 2.1 contrast",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("foreground", help="text color in any supported notation")
    parser.add_argument(
        "background",
        nargs="?",
        default="#ffffff",
        help="background color (default: #ffffff)",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="find the nearest foreground that reaches --target",
    )
    parser.add_argument(
        "--target",
        type=INPUT_HANDLERS["contrast"],
        default=c.DEFAULT_TARGET_CONTRAST,
        help=f"contrast ratio to reach with --fix (default: {c.DEFAULT_TARGET_CONTRAST})",
    )
    parser.add_argument(
        "--no-hue",
        action="store_true",
        help="let --fix answer with black or white instead of keeping the hue",
    )
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "--darker",
        dest="prefer_darker",
        action="store_const",
        const=True,
        default=None,
        help="make --fix darken the foreground",
    )
    direction.add_argument(
        "--lighter",
        dest="prefer_darker",
        action="store_const",
        const=False,
        help="make --fix lighten the foreground",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="show the foreground against white, black and gray",
    )
    parser.add_argument(
        "--pairs",
        type=INPUT_HANDLERS["count"],
        default=None,
        help="suggest this many accessible pairs built from the foreground",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_contrast_command(args)


if __name__ == "__main__":
    main()
