"""
cli.py - Termios Dump Utility

Prints a human readable breakdown of a raw struct termios saved to a file:
input, output, control and local flags, the control characters and the
input/output baud rates.

Usage:
    dumptermios FILE [options]

Options:
    --layout LAYOUT       Structure layout: glibc, kernel, termios2 (default: glibc)
    --byte-order ORDER    native, little or big (default: native)
    --width N             Width of the separator rules (default: terminal width or 80)
    --pyserial            Also print the matching pyserial framing arguments
    --verbose             Show decoding details on stderr

Exit codes:
    0   success
    10  usage error
    11  file could not be opened
    15  file could not be decoded

Example:
    dumptermios ttyUSB0.termios --layout glibc

Author: LinuxCNC Community
License: GPL v2 or later
"""

import argparse
import logging
import sys

from .layout import BYTE_ORDERS, DEFAULT_LAYOUT, LAYOUTS
from .dump import TermiosDumper

logger = logging.getLogger('dumptermios')

EXIT_OK = 0
EXIT_USAGE = 10
EXIT_OPEN_ERROR = 11
EXIT_DECODE_ERROR = 15


class UsageError(Exception):
    """Raised instead of argparse exiting with status 2"""


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def setup_logging(verbose=False, stream=None):
    """Log as ``[LEVEL] message`` lines on stderr"""
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def build_parser():
    parser = ArgumentParser(
        prog='dumptermios',
        description='Dump a raw struct termios file in human readable form',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('file',
                        help='File containing one raw struct termios')
    parser.add_argument('--layout', choices=sorted(LAYOUTS), default=DEFAULT_LAYOUT,
                        help=f'Structure layout (default: {DEFAULT_LAYOUT})')
    parser.add_argument('--byte-order', choices=list(BYTE_ORDERS), default='native',
                        help='Byte order of the file (default: native)')
    parser.add_argument('--width', type=int, default=None,
                        help='Width of the separator rules (default: terminal width or 80)')
    parser.add_argument('--pyserial', action='store_true',
                        help='Also print the matching pyserial framing arguments')
    parser.add_argument('--verbose', action='store_true',
                        help='Show decoding details')
    return parser


def main(argv=None):
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print("Must specify termios file to analyze.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(args.verbose)
    logger.debug(f"Layout: {args.layout} ({LAYOUTS[args.layout].size} bytes), "
                 f"byte order: {args.byte_order}")

    dumper = TermiosDumper(
        layout=args.layout,
        byte_order=args.byte_order,
        width=args.width,
        show_pyserial=args.pyserial
    )

    try:
        success = dumper.dump_file(args.file)
    except OSError as e:
        print(f"Cannot open {args.file}: {e.strerror or e}", file=sys.stderr)
        return EXIT_OPEN_ERROR

    if not success:
        print(f"An error occurred while decoding {args.file}", file=sys.stderr)
        return EXIT_DECODE_ERROR

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
