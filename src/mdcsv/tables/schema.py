"""Pydantic model for the tabular data shared by every format handler.

A Table is built exactly once by a parser and consumed exactly once by a
formatter.  The model is frozen and stores tuples, so nothing downstream of
the parser can reorder, pad, or truncate it.
"""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import ValidationError as PydanticValidationError

from mdcsv.errors import ConversionError, ValidationError


class Table(BaseModel):
    """Ordered header row plus ordered data rows, every cell an opaque string.

    The model_validator guarantees that every row has exactly len(headers)
    cells.  Construction is the only place this invariant is checked; the
    frozen config means it cannot be broken afterwards.
    """

    model_config = ConfigDict(frozen=True)

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @model_validator(mode="after")
    def validate_row_widths(self) -> "Table":
        """Ensure every row has exactly len(headers) cells."""
        n_cols = len(self.headers)
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching headers)")
        return self

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def column_widths(self) -> list[int]:
        """Return the widest cell length per column, headers included."""
        widths = [len(header) for header in self.headers]
        for row in self.rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))
        return widths


def build_table(
    headers: list[str],
    rows: list[list[str]],
    error_cls: type[ConversionError] = ValidationError,
) -> Table:
    """Construct a Table, re-raising model validation failures as *error_cls*."""
    try:
        return Table(headers=headers, rows=rows)
    except PydanticValidationError as exc:
        message = "; ".join(err["msg"] for err in exc.errors())
        raise error_cls(message) from exc
