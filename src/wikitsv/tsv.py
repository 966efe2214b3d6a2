"""Tab-separated values reader and writer.

The first line holds the header fields, every following line one data row.
Fields are whitespace-stripped on read; there is no quoting or escaping.
"""

from collections.abc import Iterable

from wikitsv.schema import Table
from wikitsv.text import split

TSV_DELIM = "\t"


def parse_tsv(lines: Iterable[str]) -> Table:
    """Build a (not yet normalized) Table from TSV lines."""
    table = Table()
    reading_header = True
    for line in lines:
        fields = split(line.rstrip("\r\n"), TSV_DELIM)
        if reading_header:
            table.header = fields
            reading_header = False
            continue
        table.rows.append(fields)
    return table


def _join(cells: list[str]) -> str:
    return TSV_DELIM.join(cells) + "\n"


def render_tsv(table: Table) -> str:
    """Render the header (if any) and every data row as TSV text."""
    parts: list[str] = []
    if table.header:
        parts.append(_join(table.header))
    parts.extend(_join(row) for row in table.rows)
    return "".join(parts)
