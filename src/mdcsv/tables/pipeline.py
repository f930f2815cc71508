"""Conversion driver: pick a parser/formatter pair by direction and run it.

The set of formats is closed, so dispatch is a plain mapping from Direction
to a (parse, format) pair rather than a class hierarchy.
"""

import logging
from enum import Enum
from typing import Callable

from mdcsv.config import EXTENSIONS
from mdcsv.tables.delimited import format_csv, parse_csv
from mdcsv.tables.markdown import format_markdown, parse_markdown
from mdcsv.tables.schema import Table

logger = logging.getLogger(__name__)

Parser = Callable[[str], Table]
Formatter = Callable[[Table], str]


class Direction(str, Enum):
    """Conversion mode for one run; values match the CLI flag names."""

    TO_CSV = "to-csv"
    TO_MARKDOWN = "to-md"

    @property
    def source_name(self) -> str:
        return "markdown" if self is Direction.TO_CSV else "CSV"

    @property
    def target_name(self) -> str:
        return "CSV" if self is Direction.TO_CSV else "markdown"

    @property
    def extension(self) -> str:
        """File extension of the output format, including the leading dot."""
        return EXTENSIONS[self.value]


HANDLERS: dict[Direction, tuple[Parser, Formatter]] = {
    Direction.TO_CSV: (parse_markdown, format_csv),
    Direction.TO_MARKDOWN: (parse_csv, format_markdown),
}


def parse_input(content: str, direction: Direction) -> Table:
    """Parse *content* with the source-format parser for *direction*."""
    parse, _ = HANDLERS[direction]
    logger.info("Parsing %s input (%d chars)", direction.source_name, len(content))
    return parse(content)


def render_output(table: Table, direction: Direction) -> str:
    """Render *table* with the target-format formatter for *direction*."""
    _, render = HANDLERS[direction]
    logger.info("Rendering %d columns x %d rows as %s", table.column_count, len(table.rows), direction.target_name)
    return render(table)


def convert(content: str, direction: Direction) -> str:
    """Parse *content* in the source format and render it in the target format.

    Any ConversionError from the parser or formatter propagates unchanged;
    no output is produced unless both steps succeed.
    """
    table = parse_input(content, direction)
    return render_output(table, direction)
