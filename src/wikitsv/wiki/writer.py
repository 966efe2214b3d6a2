"""Render a Table as wikitext table markup.

Layout of each data row:

    |-
    |<title>
    |<col 1>||<col 2>||...

The title column always sits on its own line; the remaining columns share
the next line.  Empty non-title cells are written as a single space, and a
cell opening a line with "-" or "}" gets a leading space so the line is not
read back as a row separator or table end.
"""

from wikitsv import config
from wikitsv.schema import Table
from wikitsv.wiki.patterns import CAPTION, DATA, DATA_DELIM, EMPTY_CELL, HEADER, MARKER_LOOKALIKES, ROW_SEP, TABLE_END, TABLE_START


def _render_preamble(caption: str, table_class: str) -> list[str]:
    """Table start (with class attribute), caption, and the separator before the header."""
    start = f'{TABLE_START} class="{table_class}"' if table_class else TABLE_START
    lines = [start]
    if caption:
        lines.append(f"{CAPTION} {caption}")
    lines.append(ROW_SEP)
    return lines


def _line_start_cell(cell: str) -> str:
    """Pad a cell that would turn its "|" line prefix into "|-" or "|}"."""
    return EMPTY_CELL + cell if cell.startswith(MARKER_LOOKALIKES) else cell


def _render_row(row: list[str]) -> list[str]:
    """Row separator, title line, then the remaining cells on one line."""
    title = row[0] if row else ""
    rest = "".join(
        DATA + (_line_start_cell(cell) or EMPTY_CELL) if col == 1 else DATA_DELIM + (cell or EMPTY_CELL)
        for col, cell in enumerate(row[1:], start=1)
    )
    return [ROW_SEP, f"{DATA}{_line_start_cell(title)}", rest]


def render_wiki(table: Table, caption: str | None = None, table_class: str | None = None) -> str:
    """Render a normalized table as wikitext.

    caption and table_class default to config.CAPTION and config.TABLE_CLASS.
    Raises ValueError if the table is not rectangular.
    """
    table.check_rectangular()
    caption = config.CAPTION if caption is None else caption
    table_class = config.TABLE_CLASS if table_class is None else table_class

    lines = _render_preamble(caption, table_class)
    lines.extend(f"{HEADER} {cell}" for cell in table.header)
    for row in table.rows:
        lines.extend(_render_row(row))
    lines.append(TABLE_END)
    return "\n".join(lines) + "\n"
