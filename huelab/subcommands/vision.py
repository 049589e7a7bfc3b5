#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/subcommands/vision.py

import argparse
import json
import random
import sys

from huelab.core import conversions as conv
from huelab.logic.vision.engine import (
    COLOR_BLINDNESS_INFO,
    COLOR_BLINDNESS_TYPES,
    generate_color_blind_safe_palette,
    simulate_all,
    simulate_color_blindness,
)
from huelab.shared.logger import log, HuelabArgumentParser
from huelab.shared.sanitizer import INPUT_HANDLERS


def handle_vision_command(args: argparse.Namespace) -> None:
    if args.all:
        simulated = {name: sim.hex for name, sim in simulate_all(args.value, args.intensity).items()}
    else:
        rgb = simulate_color_blindness(args.value, args.type, args.intensity)
        simulated = {args.type: conv.rgb_to_hex(*rgb)}

    palette = None
    if args.safe_palette:
        rng = random.Random(args.seed) if args.seed is not None else None
        palette = [
            conv.rgb_to_hex(*rgb)
            for rgb in generate_color_blind_safe_palette([args.value], args.safe_palette, rng=rng)
        ]

    if args.json:
        out = {
            "intensity": args.intensity,
            "simulated": {
                name: {
                    "hex": hex_code,
                    "name": COLOR_BLINDNESS_INFO[name].name,
                    "severity": COLOR_BLINDNESS_INFO[name].severity,
                }
                for name, hex_code in simulated.items()
            },
        }
        if palette is not None:
            out["safe_palette"] = palette
        print(json.dumps(out, indent=2))
        return

    width = max(len(name) for name in simulated)
    for name, hex_code in simulated.items():
        print(f"{name:<{width}}  {hex_code}  {args.intensity}%")

    if palette is not None:
        if len(palette) < args.safe_palette:
            log("warning", f"only {len(palette)} of {args.safe_palette} distinguishable colors found")
        print(f"{'palette':<{width}}  {'  '.join(palette)}")


def get_vision_parser() -> argparse.ArgumentParser:
    parser = HuelabArgumentParser(
        prog="huelab vision",
        description="huelab vision: simulate color vision deficiencies",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("value", help="color in any supported notation")
    parser.add_argument(
        "-t",
        "--type",
        type=INPUT_HANDLERS["cb_type"],
        default="protanopia",
        help="deficiency to simulate (default: protanopia)\n" f"all types: {' '.join(COLOR_BLINDNESS_TYPES)}",
    )
    parser.add_argument(
        "-i",
        "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=100,
        help="simulation intensity from 0 to 100 (default: 100)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="simulate every deficiency type",
    )
    parser.add_argument(
        "--safe-palette",
        type=INPUT_HANDLERS["count"],
        default=None,
        help="build a palette of this many colors seeded by the value",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of --safe-palette",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    return parser


def main() -> None:
    """Main entry point for vision command."""
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_vision_command(args)


if __name__ == "__main__":
    main()
