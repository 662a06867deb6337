"""Main CLI entry point for nmeaparse."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..exceptions import NmeaError
from .show import show_armor, show_fields


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the nmeaparse CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="nmeaparse: NMEA sentence field parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nmeaparse --armor 15M67FC000G?ufbE`Jc       Decode a 6-bit armored payload
  nmeaparse --armor 55P5TL01 --fill-bits 2    Decode with trailing fill bits
  nmeaparse --fields "RMC,220516,A,5133.82,N" List sentence fields by index
  nmeaparse --version                         Show version
        """,
    )

    parser.add_argument(
        "--armor",
        metavar="PAYLOAD",
        type=str,
        help="Decode a 6-bit ASCII armored payload and print its bits",
    )

    parser.add_argument(
        "--fill-bits",
        metavar="N",
        type=int,
        default=0,
        help="Number of fill bits at the end of the payload (default: 0)",
    )

    parser.add_argument(
        "--fields",
        metavar="LINE",
        type=str,
        help="List the fields of a comma-separated sentence body",
    )

    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Prefix used in error messages for --fields (default: sentence type)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"nmeaparse {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.armor is None and args.fields is None:
        parser.print_help()
        return 0

    try:
        if args.armor is not None:
            show_armor(args.armor, args.fill_bits)
        if args.fields is not None:
            show_fields(args.fields, args.prefix)
    except NmeaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
