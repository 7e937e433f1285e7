"""Command-line entry point: ``flatrecord --analyze FILE``.

The analyzer imports FILE, collects the Record subclasses it defines and
prints one layout table per record type.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .. import __version__
from ..cli.analyze import analyze_file

DESCRIPTION = """\
flatrecord: C-struct-like flat binary records

Records are packed field by field in declaration order, little-endian,
with no padding. Strings are null-terminated and make every later offset
depend on the data.
"""

EPILOG = """\
Layout report, one line per field:
  N. name (Kind) ..... @offset width bytes
    @offset   byte offset of the field; "@?" once a string precedes it
    width     fixed width in bytes, or "variable" for strings

Examples:
  flatrecord --analyze records.py     Print the layout of each record type
  flatrecord --version                Print the installed version
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the flatrecord CLI."""
    parser = argparse.ArgumentParser(
        prog="flatrecord",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--analyze",
        metavar="FILE",
        help="import FILE and print the byte layout of every Record subclass it defines",
    )
    parser.add_argument("--version", action="version", version=f"flatrecord {__version__}")
    return parser


def _analyze(path: Path) -> int:
    if not path.is_file():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1
    try:
        analyze_file(path)
    except Exception as e:
        # FILE is arbitrary user code; report whatever its import raised
        print(f"Error analyzing file: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the flatrecord CLI.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, 1 if FILE is missing or fails to load)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.analyze is None:
        parser.print_help()
        return 0
    return _analyze(Path(args.analyze))


if __name__ == "__main__":
    sys.exit(main())
