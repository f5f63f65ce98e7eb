#!/usr/bin/env python3
"""Mirror CLI - inspect how type names are classified.

Usage:
    python -m mirror i32 "string[]" decimal.Decimal
    python -m mirror "u8[]" --verbose
"""

import argparse
import logging
import sys

import mirror


def describe(descriptor):
    """Format the classification of a type descriptor as a single line."""
    flags = []
    if descriptor.is_primitive:
        flags.append("primitive")
    if mirror.is_primitive_array(descriptor):
        flags.append("primitive-array")
    if mirror.is_simple_property(descriptor):
        flags.append("simple")
    return f"{descriptor.name:<24} {descriptor.kind!s:<10} {' '.join(flags)}".rstrip()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mirror",
        description="Classify type names the way the assignability checks see them")
    parser.add_argument("types", nargs="+", metavar="TYPE",
        help="Type name, e.g. i32, string[] or collections.OrderedDict")
    parser.add_argument("--verbose", action="store_true",
        help="Show debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s")

    status = 0
    for name in args.types:
        try:
            descriptor = mirror.parse_type(name)
        except mirror.TypeNameError as e:
            print(f"{name}: {e.message}", file=sys.stderr)
            status = 1
            continue
        print(describe(descriptor))
    return status


if __name__ == "__main__":
    sys.exit(main())
