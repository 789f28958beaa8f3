"""
Command-line entry point for the type erasure lab.

Usage:
    erasure-lab [--verbose] [--index N] [--no-unsafe]
    python -m erasure.cli

Returns:
    0: demonstration ran; every failure was a demonstrated one
    1: unexpected error
    2: setup error, the demonstration could not run
"""

import argparse
import logging
import sys

from erasure.errors import SetupError, TypeSafetyError
from erasure.lab import HeterogeneousSequenceLab, LabConfig


def build_parser():
    parser = argparse.ArgumentParser(
        prog="erasure-lab",
        description="Show what happens when a str-only sequence is made to hold an int.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument(
        "--index",
        type=int,
        default=None,
        help="Position to invoke the 'length' operation on (default: the foreign element)",
    )
    parser.add_argument(
        "--no-unsafe",
        action="store_true",
        help="Refuse unsafe access to the sequence; the lab cannot be set up",
    )
    return parser


def _demonstrate(name, step):
    """Run one read operation, printing its result or the error it surfaced."""
    try:
        print(step())
    except TypeSafetyError as e:
        print(f"✗ {name} failed with {e.kind}")
        print(e.pretty())


def run(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        lab = HeterogeneousSequenceLab(LabConfig(allow_unsafe=not args.no_unsafe))
        lab.initialize()

        _demonstrate("format_opaque", lab.format_opaque)
        _demonstrate(
            "attempt_invalid_operation",
            lambda: lab.attempt_invalid_operation(args.index),
        )
        _demonstrate("format_assuming_declared", lab.format_assuming_declared)

    except SetupError as e:
        print(e.pretty())
        return 2

    except Exception as e:
        print(f"❌ Error: {e}")
        return 1

    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
