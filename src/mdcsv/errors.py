"""Error types raised by the table parsers and formatters."""


class ConversionError(Exception):
    """Base class for every failure of a single conversion run."""

    prefix = "conversion error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class ValidationError(ConversionError):
    """Input decoded fine but is semantically empty or invalid (e.g. a CSV with no records)."""

    prefix = "validation error"


class FormatError(ConversionError):
    """Markdown text violates the pipe-table grammar."""

    prefix = "invalid markdown table"


class ParseError(ConversionError):
    """The CSV codec rejected the input; the codec error is chained as __cause__."""

    prefix = "failed to read CSV"
