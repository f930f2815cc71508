"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from mdcsv.tables.schema import Table

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def sample_table() -> Table:
    """Three-column table with mixed cell widths and one empty cell."""
    return Table(
        headers=["Name", "Qty", "Notes"],
        rows=[
            ["Widget", "12", "blue"],
            ["Gear", "3", ""],
        ],
    )
