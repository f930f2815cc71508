"""Compiled regex patterns and constants for the markdown pipe-table grammar.

Used by markdown.py for row splitting and separator validation.
"""

import re

# ─── Row Structure ────────────────────────────────────────────────────────────

# Cell delimiter; a row must also begin and end with it
PIPE = "|"

# A markdown table needs a header line, a separator line, and a data line
MIN_TABLE_LINES = 3

# Header and separator sit at fixed line indices; data rows follow
HEADER_LINE_IDX = 0
SEPARATOR_LINE_IDX = 1


# ─── Separator Patterns ──────────────────────────────────────────────────────

# Separator cell such as "---", ":--", "--:", ":-:".  Alignment colons are
# accepted syntactically but their meaning is not kept.
SEPARATOR_CELL_RE = re.compile(r"[-:]+")

# Character used when rendering a separator line
SEPARATOR_CHAR = "-"

# Padding added around each cell when rendering (one space on each side)
CELL_PADDING = 2
