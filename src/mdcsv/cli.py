"""Command-line entry point: convert one markdown table file to CSV or back.

Usage:
    mdcsv --to-csv --in table.md [--out table.csv]
    mdcsv --to-md --in table.csv [--out table.md]

Flag validation, file I/O, and exit codes live here; the tables package only
ever sees and returns in-memory text.
"""

import argparse
import logging
import sys
from pathlib import Path

from mdcsv.config import ENCODING, LOG_FORMAT, LOG_LEVEL
from mdcsv.errors import ConversionError
from mdcsv.tables.pipeline import Direction, parse_input, render_output

logger = logging.getLogger(__name__)


# ─── Argument Handling ───────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mdcsv", description="Convert between markdown tables and CSV files")
    parser.add_argument("--to-csv", action="store_true", help="Convert from markdown to CSV")
    parser.add_argument("--to-md", action="store_true", help="Convert from CSV to markdown")
    parser.add_argument("--in", dest="in_path", default="", help="Input file path")
    parser.add_argument("--out", dest="out_path", default="", help="Output file path (optional)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def default_output_path(input_path: Path, direction: Direction) -> Path:
    """Swap the input file's extension for the target format's extension.

    The extension is everything from the last dot of the file name, so
    "table." becomes "table.md" and ".bashrc" becomes ".md".  Raises
    ValueError when the path has no file name (e.g. "." or "/").
    """
    name = input_path.name
    dot = name.rfind(".")
    stem = name[:dot] if dot != -1 else name
    return input_path.with_name(stem + direction.extension)


def _fail(message: str, parser: argparse.ArgumentParser | None = None) -> int:
    """Print *message* (and usage, when given a parser) to stderr; return exit code 1."""
    print(message, file=sys.stderr)
    if parser is not None:
        parser.print_usage(sys.stderr)
    return 1


# ─── Main ─────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Read the input file, convert it, and write the output; return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL, format=LOG_FORMAT)

    if not args.in_path:
        return _fail("Error: Input file path is required", parser)
    if args.to_csv == args.to_md:
        return _fail("Error: Must specify exactly one of --to-csv or --to-md", parser)

    direction = Direction.TO_CSV if args.to_csv else Direction.TO_MARKDOWN
    input_path = Path(args.in_path)

    # ── 1. Read ──────────────────────────────────────────────────────────
    try:
        with open(input_path, "r", encoding=ENCODING, newline="") as fopen:
            content = fopen.read()
    except (OSError, UnicodeDecodeError) as exc:
        return _fail(f"Error reading input file: {exc}")
    logger.debug("Read %d chars from %s", len(content), input_path)

    if args.out_path:
        output_path = Path(args.out_path)
    else:
        try:
            output_path = default_output_path(input_path, direction)
        except ValueError as exc:
            return _fail(f"Error deriving output path: {exc}")

    # ── 2. Parse, then render ────────────────────────────────────────────
    try:
        table = parse_input(content, direction)
    except ConversionError as exc:
        return _fail(f"Error converting input: {exc}")
    try:
        output = render_output(table, direction)
    except ConversionError as exc:
        return _fail(f"Error formatting output: {exc}")

    # ── 3. Write (only once formatting fully succeeded) ──────────────────
    try:
        with open(output_path, "w", encoding=ENCODING, newline="") as fopen:
            fopen.write(output)
    except OSError as exc:
        return _fail(f"Error writing output file: {exc}")

    print(f"Successfully converted to {direction.target_name}: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
