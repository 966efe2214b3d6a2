"""Shared configuration for the wikitsv converters."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Attributes on the "{|" line of rendered tables
TABLE_CLASS = os.getenv("WIKITSV_TABLE_CLASS", "wikitable sortable")

# Text of the "|+" caption line of rendered tables
CAPTION = os.getenv("WIKITSV_CAPTION", "Games for IBM PC compatibles with MT-32 support")

LOG_LEVEL = os.getenv("WIKITSV_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

ENCODING = os.getenv("WIKITSV_ENCODING", "utf-8")


def log_level(name: str) -> int | None:
    """Return the numeric logging level for a level name, or None if logging does not know it."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None
