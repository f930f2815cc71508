"""Unit tests for the Table model and build_table helper."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError as PydanticValidationError

from mdcsv.errors import FormatError, ValidationError
from mdcsv.tables.schema import Table, build_table


class TestTableValidation:

    def test_valid_table(self):
        table = Table(headers=["a", "b"], rows=[["1", "2"], ["3", "4"]])
        assert table.headers == ("a", "b")
        assert table.rows == (("1", "2"), ("3", "4"))

    def test_no_rows_defaults_empty(self):
        table = Table(headers=["h1", "h2"])
        assert table.rows == ()

    def test_short_row_rejected(self):
        with pytest.raises(PydanticValidationError, match="Row 1 has 1 cells, expected 2"):
            Table(headers=["a", "b"], rows=[["1", "2"], ["3"]])

    def test_long_row_rejected(self):
        with pytest.raises(PydanticValidationError, match="Row 0 has 3 cells"):
            Table(headers=["a", "b"], rows=[["1", "2", "3"]])

    def test_empty_cells_are_kept(self):
        table = Table(headers=["a", ""], rows=[["", ""]])
        assert table.headers == ("a", "")
        assert table.rows == (("", ""),)

    def test_frozen(self):
        table = Table(headers=["a"], rows=[["1"]])
        with pytest.raises(PydanticValidationError):
            table.headers = ("b",)

    def test_equality_preserves_order(self):
        first = Table(headers=["a", "b"], rows=[["1", "2"], ["3", "4"]])
        second = Table(headers=["a", "b"], rows=[["3", "4"], ["1", "2"]])
        assert first != second
        assert first == Table(headers=("a", "b"), rows=(("1", "2"), ("3", "4")))


class TestColumnWidths:

    def test_header_wider_than_cells(self):
        table = Table(headers=["long header", "b"], rows=[["x", "y"]])
        assert table.column_widths() == [11, 1]

    def test_cell_wider_than_header(self, sample_table):
        assert sample_table.column_widths() == [6, 3, 5]

    def test_column_count(self, sample_table):
        assert sample_table.column_count == 3


class TestBuildTable:

    def test_builds_table(self):
        table = build_table(["a"], [["1"], ["2"]])
        assert table.rows == (("1",), ("2",))

    def test_default_error_is_validation_error(self):
        with pytest.raises(ValidationError, match="expected 2"):
            build_table(["a", "b"], [["1"]])

    def test_custom_error_class(self):
        with pytest.raises(FormatError) as exc_info:
            build_table(["a", "b"], [["1"]], error_cls=FormatError)
        assert isinstance(exc_info.value.__cause__, PydanticValidationError)


class TestErrors:

    def test_str_includes_prefix(self):
        assert str(ValidationError("empty CSV file")) == "validation error: empty CSV file"
        assert str(FormatError("no headers found")) == "invalid markdown table: no headers found"

    def test_message_attribute(self):
        assert FormatError("invalid separator line").message == "invalid separator line"
