"""umdis command line interface.

Disassemble a Universal Machine program file, or stdin.

Usage:
    umdis programs/hello.um
    umdis --bits programs/hello.um
    cat programs/hello.um | umdis
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from .disassembler import Disassembler
from .loader import load


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="umdis",
        description="umdis: Universal Machine disassembler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Disassemble a program file
    umdis programs/hello.um

    # Show the field-highlighted binary view of every word
    umdis --bits programs/hello.um

    # Read the program from stdin, plain text only
    cat programs/hello.um | umdis --bits --no-color
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Program file (big-endian 32-bit words). Default: stdin"
    )
    parser.add_argument(
        "--bits", "-b",
        action="store_true",
        help="Show each word in binary, highlighted by field"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in the binary view"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Omit the instruction count header"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def use_color(no_color: bool) -> bool:
    """Decide whether to emit ANSI colors on stdout."""
    if no_color or "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_format = "%(levelname)s %(name)s: %(message)s"
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(format=log_format, level=log_level)
    logging.getLogger("umdis").setLevel(log_level)

    try:
        words = load(args.input)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    color = args.bits and use_color(args.no_color)
    if color:
        just_fix_windows_console()

    disassembler = Disassembler(show_bits=args.bits, color=color)
    disassembler.disassemble(words)
    disassembler.print_listing(header=not args.quiet)

    summary = disassembler.get_summary()
    logger.debug("Summary: %s", summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
