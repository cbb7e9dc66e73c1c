#!/usr/bin/env python3
"""
floatbits command line interface.

Computes the single-precision binary representation of one or more numbers
and prints it next to the representation packed by the platform.

Note: Arguments are parsed from sys.argv directly; the interface is small
enough that a parser library would add nothing.

Usage:
    python cli.py [-l] [--debug] [value ...]

Examples:
    python cli.py                    # encode 15932.5497
    python cli.py 1.0 -1.0 0.1       # encode several values, MSB-first
    python cli.py -l 15932.5497      # LSB-first (little-endian) layout
"""

import logging
import sys

from floatbits import (
    LSB_FIRST,
    MSB_FIRST,
    BitOrder,
    __version__,
    float_to_binary,
    native_binary,
)
from floatbits.floating_point import to_single

DEFAULT_VALUE = 15932.5497


def print_version() -> None:
    """Print version information."""
    print(f"floatbits {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"floatbits - IEEE 754 single-precision encoding (v{__version__})")
    print("=" * 49)
    print()
    print("Usage:")
    print(f"  {prog_name} [-l] [--debug] [value ...]")
    print()
    print("Options:")
    print("  -l, --lsb      LSB-first bit order (little-endian layout)")
    print("  -m, --msb      MSB-first bit order (default, big-endian layout)")
    print("  --debug        Log intermediate encoding steps")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Arguments:")
    print(f"  value          Number to encode (default: {DEFAULT_VALUE})")
    print()
    print("Examples:")
    print(f"  {prog_name} 15932.5497")
    print(f"  {prog_name} -l 1.0 -1.0 0.1")
    print()


def show_value(value: float, order: BitOrder) -> bool:
    """Print computed and platform representations of a value.

    Returns:
        True if both representations match.
    """
    computed = float_to_binary(value, order=order)
    system = native_binary(value, order=order)
    match = computed.equals(system)

    print(f"Float value = {to_single(value):f}")
    print(f"Computed binary representation: {computed.to_str(' ')}")
    print(f"System binary representation:   {system.to_str(' ')}")
    print(f"Match: {'yes' if match else 'no'}")
    return match


def main(argv: "list | None" = None) -> int:
    """CLI entry point."""
    args = sys.argv if argv is None else argv
    prog_name = args[0] if args else "cli.py"

    order = MSB_FIRST
    debug = False
    values = []

    for arg in args[1:]:
        if arg in ("-h", "--help"):
            print_help(prog_name)
            return 0
        if arg in ("-v", "--version"):
            print_version()
            return 0
        if arg in ("-l", "--lsb"):
            order = LSB_FIRST
        elif arg in ("-m", "--msb"):
            order = MSB_FIRST
        elif arg == "--debug":
            debug = True
        else:
            try:
                values.append(float(arg))
            except ValueError:
                if arg.startswith("-"):
                    print(f"Error: Unknown option: {arg}", file=sys.stderr)
                    print(f"Usage: {prog_name} [-l] [--debug] [value ...]", file=sys.stderr)
                else:
                    print(f"Error: Not a number: {arg}", file=sys.stderr)
                return 1

    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if not values:
        values = [DEFAULT_VALUE]

    for i, value in enumerate(values):
        if i > 0:
            print()
        try:
            show_value(value, order)
        except ValueError as e:
            print(f"Error: Cannot encode {value}: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
