"""CSV parsing and rendering via the stdlib csv codec.

Reading runs the codec in strict mode so unbalanced quotes are rejected
rather than silently absorbed.  Blank records are skipped and every record
must have as many fields as the header.  Writing uses minimal quoting and CRLF
record terminators.
"""

import csv
import io
import logging

from mdcsv.errors import ParseError, ValidationError
from mdcsv.tables.schema import Table, build_table

logger = logging.getLogger(__name__)

# CRLF is the csv module default and makes the writer quote any cell holding \r or \n
LINE_TERMINATOR = "\r\n"


def parse_csv(content: str) -> Table:
    """Parse CSV text into a Table; the first record is the header row.

    Raises ParseError when the codec fails or a record has the wrong number
    of fields, and ValidationError when no records are found.
    """
    reader = csv.reader(io.StringIO(content, newline=""), strict=True)
    records: list[list[str]] = []
    try:
        for record in reader:
            if not record:
                continue
            if records and len(record) != len(records[0]):
                raise ParseError(f"record on line {reader.line_num}: wrong number of fields")
            records.append(record)
    except csv.Error as exc:
        raise ParseError(f"line {reader.line_num}: {exc}") from exc

    if not records:
        raise ValidationError("empty CSV file")

    headers, rows = records[0], records[1:]
    logger.info("Parsed CSV: %d columns, %d rows", len(headers), len(rows))
    return build_table(headers, rows, error_cls=ParseError)


def format_csv(table: Table) -> str:
    """Render a Table as CSV text: header record first, then every data row."""
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator=LINE_TERMINATOR)
    writer.writerow(table.headers)
    writer.writerows(table.rows)

    logger.debug("Rendered %d CSV records", len(table.rows) + 1)
    return buffer.getvalue()
