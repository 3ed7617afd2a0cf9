#!/usr/bin/python3

"""
Entry point script for HexDiff.
"""

import argparse
import os
import sys
from contextlib import ExitStack
from typing import List, Optional

from .core.buffer import InputBuffer, display_name
from .core.driver import NoInputsError, run
from .core.options import DEFAULT_BLOCK, HexdiffOptions, InvalidBlockSizeError

COLOR_CHOICES = {'auto': None, 'always': True, 'never': False}


def block_size(value: str) -> int:
    """argparse type for a non-negative block size."""

    block = int(value)
    if block < 0:
        raise argparse.ArgumentTypeError(f"block size must not be negative: {value}")

    return block


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexdiff",
        description="HexDiff - hexdump a file, or diff several files side by side"
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Path(s) to the file(s) to analyze"
    )
    parser.add_argument(
        "-s", "--stdin",
        action="store_true",
        help="Read data from standard input"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress normal stdout output"
    )
    parser.add_argument(
        "-i", "--show-red",
        action="store_true",
        help="Only show lines containing bytes that are different among all files"
    )
    parser.add_argument(
        "-G", "--show-green",
        action="store_true",
        help="Only show lines containing bytes that are the same among all files"
    )
    parser.add_argument(
        "-U", "--show-blue",
        action="store_true",
        help="Only show lines containing bytes that are different among some files"
    )
    parser.add_argument(
        "-u", "--show-same",
        action="store_true",
        help="Collapse repeated output lines"
    )
    parser.add_argument(
        "-w", "--terse",
        action="store_true",
        help="Diff all files, but only display a hex dump of the first file"
    )
    parser.add_argument(
        "-K", "--block",
        type=block_size,
        default=DEFAULT_BLOCK,
        help="Set file block size (hexdump line size)"
    )
    parser.add_argument(
        "--color",
        choices=sorted(COLOR_CHOICES),
        default="auto",
        help="Color output: auto only colors an interactive terminal"
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, printing help when there are none."""

    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        parser.print_help()
        sys.exit(0)

    return parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> HexdiffOptions:
    return HexdiffOptions(
        block=args.block,
        show_full_mismatch=args.show_red,
        show_full_match=args.show_green,
        show_partial_match=args.show_blue,
        terse=args.terse,
        collapse_repeats=args.show_same,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)

    with ExitStack() as stack:
        inputs: List[InputBuffer] = []

        if args.stdin:
            inputs.append(InputBuffer.from_stream(sys.stdin.buffer))

        for filename in args.files:
            try:
                inputs.append(stack.enter_context(InputBuffer.from_file(filename)))
            except OSError as e:
                print(f"Error loading {display_name(filename)}: {e}", file=sys.stderr)
                return 1

        try:
            run(inputs, options_from_args(args), quiet=args.quiet,
                color=COLOR_CHOICES[args.color])
        except (NoInputsError, InvalidBlockSizeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except BrokenPipeError:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
