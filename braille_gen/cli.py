#!/usr/bin/env python3
"""
Image-to-Braille command line.

Usage:
    braille-gen photo.png                       # Print Braille art
    braille-gen photo.png -w 40 --steam         # Keep output under 1000 bytes
    braille-gen photo.jpg -c standard -o art.txt
    braille-gen photo.png -c custom --custom-chars "@#. "
"""

import argparse
import logging
import sys

from .charsets import DEFAULT_CUSTOM_CHARS
from .config import DEFAULT_CHARSET, DEFAULT_LOCALE, DEFAULT_WIDTH, GeneratorConfig
from .generator import BrailleArtGenerator, GenerateOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="braille-gen",
        description="Convert a JPG/PNG image to Braille or character-ramp text.",
    )
    parser.add_argument("image", help="Path to a JPG or PNG image")
    parser.add_argument("-w", "--width", type=int, default=DEFAULT_WIDTH,
                        help=f"Output width in characters (default: {DEFAULT_WIDTH})")
    parser.add_argument("-c", "--charset", default=DEFAULT_CHARSET,
                        help="braille, block, standard, custom, or a literal ramp")
    parser.add_argument("--custom-chars", default=None,
                        help="Ramp used when --charset custom")
    parser.add_argument("--invert", action="store_true", help="Swap dark and light")
    parser.add_argument("--steam", action="store_true",
                        help="Shrink Braille output to fit under 1000 bytes")
    parser.add_argument("-o", "--output", default=None,
                        help="Save to .txt, .html or .png instead of printing")
    parser.add_argument("--locale", default=DEFAULT_LOCALE, choices=["en", "zh"],
                        help="Language of validation messages")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    generator = BrailleArtGenerator(config=GeneratorConfig(locale=args.locale))

    charset = args.charset
    if charset == "custom":
        generator.register_charset("custom", args.custom_chars or DEFAULT_CUSTOM_CHARS)

    options = GenerateOptions(
        width=args.width,
        charset=charset,
        invert=args.invert,
        steam=args.steam,
    )

    try:
        outcome = generator.generate_from_path(args.image, options)
    except OSError as e:
        print(f"❌ Could not load image: {e}", file=sys.stderr)
        return 1

    if not outcome.ok:
        print(f"❌ {outcome.message}", file=sys.stderr)
        return 1

    if outcome.adjusted_width is not None and outcome.adjusted_width != args.width:
        print(f"⚠️  Width adjusted {args.width} -> {outcome.adjusted_width} to fit the byte budget",
              file=sys.stderr)
    if outcome.metadata.get('budget_exhausted'):
        print("⚠️  Output could not fit the byte budget", file=sys.stderr)

    if args.output:
        path = outcome.save(args.output)
        print(f"✅ Saved to {path}")
    else:
        outcome.display()

    return 0


if __name__ == "__main__":
    sys.exit(main())
