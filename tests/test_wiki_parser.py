"""Unit tests for the wikitext table parser and its line classifiers."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import logging

import pytest

from wikitsv.wiki.classifiers import is_caption, is_data, is_header, is_row_sep, is_table_end, is_table_start
from wikitsv.wiki.parser import ParseState, _handle_reading_data, _handle_reading_header, _handle_seeking_table, _ParserState, parse_wiki


def lines_of(text: str) -> list[str]:
    return text.splitlines(keepends=True)


# ===========================================================================
# Classifier tests
# ===========================================================================


class TestClassifiers:

    @pytest.mark.parametrize(
        "line, expected",
        [
            ('{| class="wikitable"', "table_start"),
            ("|+ Caption", "caption"),
            ("|-", "row_sep"),
            ("! Header", "header"),
            ("|}", "table_end"),
        ],
    )
    def test_each_marker(self, line, expected):
        results = {
            "table_start": is_table_start(line),
            "caption": is_caption(line),
            "row_sep": is_row_sep(line),
            "header": is_header(line),
            "table_end": is_table_end(line),
        }
        assert [name for name, hit in results.items() if hit] == [expected]

    def test_data_is_prefix_superset(self):
        for line in ("| cell", "|-", "|}", "|+ Caption"):
            assert is_data(line) is True

    def test_leading_whitespace_not_stripped(self):
        assert is_table_start(" {|") is False
        assert is_row_sep("  |-") is False
        assert is_data(" | cell") is False

    def test_plain_text(self):
        line = "Some prose."
        assert not any(f(line) for f in (is_table_start, is_caption, is_row_sep, is_header, is_data, is_table_end))


# ===========================================================================
# Transition tests
# ===========================================================================


class TestTransitions:

    def test_seeking_discards_until_table_start(self):
        state = _ParserState()
        _handle_seeking_table(state, "! Not yet")
        assert state.state is ParseState.SEEKING_TABLE
        assert state.table.header == []
        _handle_seeking_table(state, "{|")
        assert state.state is ParseState.READING_HEADER

    def test_row_sep_before_header_stays_in_header(self):
        state = _ParserState()
        state.state = ParseState.READING_HEADER
        _handle_reading_header(state, "|-")
        assert state.state is ParseState.READING_HEADER

    def test_row_sep_after_header_advances(self):
        state = _ParserState()
        state.state = ParseState.READING_HEADER
        _handle_reading_header(state, "! A !! B")
        _handle_reading_header(state, "|-")
        assert state.state is ParseState.READING_DATA
        assert state.table.header == ["A", "B"]

    def test_header_state_discards_data_lines(self):
        state = _ParserState()
        state.state = ParseState.READING_HEADER
        _handle_reading_header(state, "| stray")
        _handle_reading_header(state, "|+ Caption")
        assert state.table.header == []
        assert state.row == []

    def test_data_accumulates_and_flushes(self):
        state = _ParserState()
        state.state = ParseState.READING_DATA
        _handle_reading_data(state, "| a")
        _handle_reading_data(state, "| b || c")
        assert state.row == ["a", "b", "c"]
        _handle_reading_data(state, "|-")
        assert state.table.rows == [["a", "b", "c"]]
        assert state.row == []

    def test_empty_buffer_not_flushed(self):
        state = _ParserState()
        state.state = ParseState.READING_DATA
        _handle_reading_data(state, "|-")
        _handle_reading_data(state, "|-")
        assert state.table.rows == []

    def test_table_end_flushes_and_finishes(self):
        state = _ParserState()
        state.state = ParseState.READING_DATA
        _handle_reading_data(state, "| a")
        _handle_reading_data(state, "|}")
        assert state.state is ParseState.DONE
        assert state.table.rows == [["a"]]

    def test_data_state_discards_unknown_lines(self):
        state = _ParserState()
        state.state = ParseState.READING_DATA
        _handle_reading_data(state, "! late header")
        _handle_reading_data(state, "")
        assert state.row == []
        assert state.table.header == []


# ===========================================================================
# parse_wiki tests
# ===========================================================================


class TestParseWiki:

    def test_sample_table(self, sample_wiki):
        table = parse_wiki(lines_of(sample_wiki))
        assert table.header == ["Title", "Year", "Publisher"]
        assert table.rows == [
            ["''[[The Secret of Monkey Island]]''", "1990", "Lucasfilm"],
            ["''Loom''", "1990", "Lucasfilm"],
        ]

    def test_missing_table_end_flushes_last_row(self):
        text = "{|\n! A !! B\n|-\n| 1 || 2\n|-\n| 3 || 4\n"
        table = parse_wiki(lines_of(text))
        assert table.rows == [["1", "2"], ["3", "4"]]

    def test_lines_after_table_end_ignored(self):
        text = "{|\n! A\n|-\n| 1\n|}\n{|\n! B\n|-\n| 2\n|}\n"
        table = parse_wiki(lines_of(text))
        assert table.header == ["A"]
        assert table.rows == [["1"]]

    def test_result_is_rectangular(self):
        text = "{|\n! A\n|-\n| 1 || 2 || 3\n|-\n| 4\n|}\n"
        table = parse_wiki(lines_of(text))
        assert table.header == ["A", "", ""]
        assert table.rows == [["1", "2", "3"], ["4", "", ""]]

    def test_empty_data_cells_kept(self):
        text = "{|\n! A !! B !! C\n|-\n| x || || z\n|}\n"
        table = parse_wiki(lines_of(text))
        assert table.rows == [["x", "", "z"]]

    def test_crlf_line_endings(self):
        text = "{|\r\n! A !! B\r\n|-\r\n| 1 || 2\r\n|}\r\n"
        table = parse_wiki(lines_of(text))
        assert table.header == ["A", "B"]
        assert table.rows == [["1", "2"]]

    def test_lines_without_newlines(self):
        table = parse_wiki(["{|", "! A", "|-", "| 1", "|}"])
        assert table.rows == [["1"]]

    def test_headerless_table_yields_no_rows(self):
        """Known limitation: without a header, no separator ends the header section."""
        text = "{|\n|-\n| 1 || 2\n|-\n| 3 || 4\n|}\n"
        table = parse_wiki(lines_of(text))
        assert table.header == []
        assert table.rows == []

    def test_no_table_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wikitsv.wiki.parser"):
            table = parse_wiki(lines_of("just prose\nmore prose\n"))
        assert table.header == []
        assert table.rows == []
        assert "No table start marker" in caplog.text

    def test_empty_input(self):
        table = parse_wiki([])
        assert table.header == []
        assert table.rows == []
