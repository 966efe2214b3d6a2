"""Parse the first wikitext table found in a sequence of lines into a Table.

The parser is a four-state machine driven purely by line prefixes:

    SEEKING_TABLE  --"{|"-->  READING_HEADER  --"|-" (header seen)-->  READING_DATA  --"|}"-->  DONE

Header cells ("! A !! B") accumulate until the first row separator that
follows at least one header cell.  Data cells ("| a || b") accumulate in a
row buffer that is flushed into the table on every row separator, on the
table end marker, and at end of input.  Lines that fit nowhere are dropped
silently; a missing "|}" is not an error.

A "|-" seen before any header cell does not end the header section.  This
lets a caption/header separator pass through, but it also means a table
without a header row never reaches READING_DATA.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from wikitsv.schema import Table
from wikitsv.text import split
from wikitsv.wiki.classifiers import is_caption, is_data, is_header, is_row_sep, is_table_end, is_table_start
from wikitsv.wiki.patterns import DATA, DATA_DELIM, HEADER, HEADER_DELIM

logger = logging.getLogger(__name__)


class ParseState(Enum):
    """Where the parser is within the table."""

    SEEKING_TABLE = "seeking_table"
    READING_HEADER = "reading_header"
    READING_DATA = "reading_data"
    DONE = "done"


# ── Parser state container ───────────────────────────────────────────────────


class _ParserState:
    """Mutable state bag for one parse_wiki() call."""

    def __init__(self):
        self.state = ParseState.SEEKING_TABLE
        self.table = Table()
        self.row: list[str] = []

    def advance(self, new_state: ParseState):
        """Move to new_state, logging the transition."""
        logger.debug("Parser state %s -> %s", self.state.name, new_state.name)
        self.state = new_state

    def flush_row(self):
        """Append the in-progress row to the table if it holds any cells."""
        if self.row:
            self.table.rows.append(self.row)
            self.row = []


# ── Line handlers ────────────────────────────────────────────────────────────


def _cells(line: str, marker: str, delim: str) -> list[str]:
    """Split everything after the leading marker into stripped cells."""
    return split(line[len(marker) :], delim)


def _handle_seeking_table(state: _ParserState, line: str):
    """Skip everything up to the table start marker."""
    if is_table_start(line):
        state.advance(ParseState.READING_HEADER)


def _handle_reading_header(state: _ParserState, line: str):
    """Collect header cells until a row separator follows at least one of them."""
    if is_row_sep(line):
        if state.table.header:
            state.advance(ParseState.READING_DATA)
        # else caption/header separator; stay
    elif is_header(line):
        state.table.header.extend(_cells(line, HEADER, HEADER_DELIM))
    elif is_caption(line):
        logger.debug("Skipping caption line: %s", line)


def _handle_reading_data(state: _ParserState, line: str):
    """Collect data cells into the row buffer; separators and the end marker flush it."""
    # Row separator and table end are both "|"-prefixed, so test them before data
    if is_row_sep(line):
        state.flush_row()
    elif is_table_end(line):
        state.flush_row()
        state.advance(ParseState.DONE)
    elif is_data(line):
        state.row.extend(_cells(line, DATA, DATA_DELIM))


_HANDLERS = {
    ParseState.SEEKING_TABLE: _handle_seeking_table,
    ParseState.READING_HEADER: _handle_reading_header,
    ParseState.READING_DATA: _handle_reading_data,
}


# ── Main parsing logic ───────────────────────────────────────────────────────


def parse_wiki(lines: Iterable[str]) -> Table:
    """Parse the first wikitext table in lines and return it normalized.

    Lines may carry trailing newlines.  Leading whitespace is significant:
    an indented marker is not recognised.
    """
    state = _ParserState()

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        _HANDLERS[state.state](state, line)
        if state.state is ParseState.DONE:
            break

    # End of input counts as an implicit table end
    if state.state is not ParseState.DONE:
        if state.state is ParseState.SEEKING_TABLE:
            logger.warning("No table start marker found in input")
        else:
            logger.debug("Input ended in state %s without a table end marker", state.state.name)
        state.advance(ParseState.DONE)
    state.flush_row()

    table = state.table.normalize()
    logger.debug("Parsed wikitext table: %d columns, %d rows", len(table.header), len(table.rows))
    return table
