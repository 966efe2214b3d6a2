"""Line classification helpers for the wikitext table parser.

Each function takes one raw line (not stripped) and returns True/False by
literal prefix match.  "|" prefixes the caption, row separator and table end
markers as well as data lines, so is_data() is only meaningful after the more
specific predicates have been ruled out.
"""

from wikitsv.wiki.patterns import CAPTION, DATA, HEADER, ROW_SEP, TABLE_END, TABLE_START


def is_table_start(line: str) -> bool:
    """Return True for the "{|" line opening a table (attributes may follow)."""
    return line.startswith(TABLE_START)


def is_caption(line: str) -> bool:
    """Return True for a "|+" caption line."""
    return line.startswith(CAPTION)


def is_row_sep(line: str) -> bool:
    """Return True for a "|-" row separator."""
    return line.startswith(ROW_SEP)


def is_header(line: str) -> bool:
    """Return True for a "!" header cell line."""
    return line.startswith(HEADER)


def is_data(line: str) -> bool:
    """Return True for a "|" line; only meaningful once is_row_sep() and is_table_end() are ruled out."""
    return line.startswith(DATA)


def is_table_end(line: str) -> bool:
    """Return True for the "|}" line closing a table."""
    return line.startswith(TABLE_END)
