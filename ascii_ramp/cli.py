#!/usr/bin/env python3
"""
Image-to-ASCII Command Line Interface

Usage:
    ascii-ramp photo.png                     # 80 columns, 40 rows requested
    ascii-ramp photo.png -w 120 --height 60  # Larger output
    cat photo.png | ascii-ramp -             # Read image bytes from stdin
    ascii-ramp --help                        # Help

The art goes to stdout; status messages go to stderr.
Exit status is 1 when the fallback block had to be used.
"""

import argparse
import sys

from .charsets import get_ramp, list_ramps
from .logging_conf import setup_logging
from .pipeline import DEFAULT_HEIGHT, DEFAULT_WIDTH, ImageToASCII, RenderConfig
from .preprocessing import list_backends


def status(message: str):
    print(message, file=sys.stderr)


def read_source(path: str) -> bytes:
    """Read image bytes from a path, or stdin for "-"."""
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-ramp",
        description="Convert an image to ASCII art",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ascii-ramp cat.png
    Render with the classic 71-character ramp

  ascii-ramp cat.png --ramp blocks -w 60
    Use block characters at 60 columns
"""
    )

    parser.add_argument(
        "image",
        help="Image file path, or - for stdin"
    )

    parser.add_argument(
        "--width", "-w",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Output width in characters (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Requested height in character rows, halved for aspect (default: {DEFAULT_HEIGHT})"
    )

    parser.add_argument(
        "--ramp", "-r",
        choices=list_ramps(),
        default="classic",
        help="Character ramp preset (default: classic)"
    )

    parser.add_argument(
        "--backend", "-b",
        choices=list_backends(),
        default="pillow",
        help="Image decoding backend (default: pillow)"
    )

    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Seconds allowed for decoding before falling back"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    try:
        data = read_source(args.image)
    except OSError as e:
        status(f"❌ Could not read {args.image}: {e}")
        return 1

    config = RenderConfig(
        width=args.width,
        height=args.height,
        ramp=get_ramp(args.ramp),
        backend=args.backend,
        timeout=args.timeout,
    )
    result = ImageToASCII(config).convert(data)

    sys.stdout.write(result.text)

    if result.is_fallback:
        status("⚠️  Image conversion failed, showing placeholder")
        return 1

    status(f"✅ {result.width}x{result.height} chars ({result.metadata.get('conversion_time')})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
