"""Markdown pipe-table parsing and aligned rendering.

Parsing accepts a single GitHub-flavored pipe table: a header line, a
separator line made only of '-' and ':' cells, and one or more data lines.
Blank lines between data rows are tolerated and dropped.  Rendering pads
every cell to its column width so the pipes line up in plain text.
"""

import logging

from mdcsv.errors import FormatError
from mdcsv.tables.patterns import (
    CELL_PADDING,
    HEADER_LINE_IDX,
    MIN_TABLE_LINES,
    PIPE,
    SEPARATOR_CELL_RE,
    SEPARATOR_CHAR,
    SEPARATOR_LINE_IDX,
)
from mdcsv.tables.schema import Table, build_table

logger = logging.getLogger(__name__)


# ─── Row Helpers ─────────────────────────────────────────────────────────────


def parse_row(line: str) -> list[str]:
    """Split one pipe-delimited line into trimmed cells.

    Returns an empty list when the line does not both start and end with a
    pipe; callers treat that as a malformed row.
    """
    line = line.strip()
    if not (line.startswith(PIPE) and line.endswith(PIPE)):
        return []
    inner = line[1:-1]
    return [cell.strip() for cell in inner.split(PIPE)]


def is_valid_separator(cell: str) -> bool:
    """True if *cell* is a non-empty run of '-' and ':' characters."""
    return SEPARATOR_CELL_RE.fullmatch(cell.strip()) is not None


# ─── Parsing ─────────────────────────────────────────────────────────────────


def parse_markdown(content: str) -> Table:
    """Parse markdown pipe-table text into a Table.

    Raises FormatError for any structural violation; never returns a partial
    table.
    """
    lines = content.strip().split("\n")
    if len(lines) < MIN_TABLE_LINES:
        raise FormatError(f"minimum {MIN_TABLE_LINES} lines required")

    # ── 1. Header ────────────────────────────────────────────────────────
    headers = parse_row(lines[HEADER_LINE_IDX])
    if not headers:
        raise FormatError("no headers found")

    # ── 2. Separator ─────────────────────────────────────────────────────
    separator = parse_row(lines[SEPARATOR_LINE_IDX])
    if len(separator) != len(headers):
        raise FormatError("separator line doesn't match headers")
    if not all(is_valid_separator(cell) for cell in separator):
        raise FormatError("invalid separator line")

    # ── 3. Data rows ─────────────────────────────────────────────────────
    rows: list[list[str]] = []
    for line_no, line in enumerate(lines[SEPARATOR_LINE_IDX + 1 :], start=SEPARATOR_LINE_IDX + 2):
        if not line.strip():
            logger.debug("Skipping blank line %d", line_no)
            continue
        row = parse_row(line)
        if len(row) != len(headers):
            raise FormatError(f"inconsistent column count in row (line {line_no}: {len(row)} cells, expected {len(headers)})")
        rows.append(row)

    logger.info("Parsed markdown table: %d columns, %d rows", len(headers), len(rows))
    return build_table(headers, rows, error_cls=FormatError)


# ─── Rendering ───────────────────────────────────────────────────────────────


def _render_row(cells: tuple[str, ...], widths: list[int]) -> str:
    """Render one row as '| c0 | c1 |' with every cell left-justified."""
    return PIPE + "".join(f" {cell.ljust(width)} {PIPE}" for cell, width in zip(cells, widths))


def format_markdown(table: Table) -> str:
    """Render a Table as an aligned markdown pipe table, one newline per line."""
    widths = table.column_widths()

    lines: list[str] = [_render_row(table.headers, widths)]
    lines.append(PIPE + "".join(SEPARATOR_CHAR * (width + CELL_PADDING) + PIPE for width in widths))
    for row in table.rows:
        lines.append(_render_row(row, widths))

    logger.debug("Rendered markdown table with column widths %s", widths)
    return "\n".join(lines) + "\n"
