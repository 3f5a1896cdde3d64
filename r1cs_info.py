#!/usr/bin/env python3
"""Print a summary of an R1CS file.

Usage:
    r1cs-info circuit.r1cs
    r1cs-info circuit.r1cs --verbose --strict --all
"""

import argparse
import sys
from typing import Optional

from r1cs import ParserConfig, PrintObserver, R1CSParseError, format_info, read_r1cs


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse an R1CS constraint system file and print its contents."
    )
    parser.add_argument("path", help="Path to the .r1cs file")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print parse progress (sections, header fields, constraints read)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on missing constraints section, out-of-range wires and section size mismatches",
    )
    parser.add_argument(
        "--check-wires",
        action="store_true",
        help="Reject wire ids >= n_wires",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--max-constraints",
        type=non_negative_int,
        default=3,
        help="Number of sample constraints to print (default: 3)",
    )
    group.add_argument(
        "--all",
        action="store_true",
        help="Print every constraint",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = ParserConfig.strict() if args.strict else ParserConfig()
    if args.check_wires:
        config.check_wire_ids = True
    observer = PrintObserver() if args.verbose else None

    try:
        r1cs = read_r1cs(args.path, config=config, observer=observer)
    except R1CSParseError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print()
    print(format_info(r1cs, None if args.all else args.max_constraints))
    return 0


if __name__ == "__main__":
    sys.exit(main())
