"""Shared configuration for the mdcsv converter."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

LOG_LEVEL = os.getenv("MDCSV_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Text encoding used for both the input and the output file
ENCODING = os.getenv("MDCSV_ENCODING", "utf-8")

# Output extension per conversion direction (keyed by Direction value)
EXTENSIONS = {
    "to-csv": ".csv",
    "to-md": ".md",
}
