"""Markup prefixes and delimiters of the supported wikitext table subset.

Lines are classified by literal prefix only; there is no tokenizer.  Used by
classifiers.py, parser.py and writer.py.
"""

# ─── Line Prefixes ────────────────────────────────────────────────────────────

TABLE_START = "{|"
TABLE_END = "|}"
CAPTION = "|+"
ROW_SEP = "|-"
HEADER = "!"
DATA = "|"


# ─── Cell Delimiters ──────────────────────────────────────────────────────────

# Several header cells on one line: "! A !! B"
HEADER_DELIM = "!!"

# Several data cells on one line: "| a || b"
DATA_DELIM = "||"

# Written in place of an empty non-title cell so "||" never collapses
EMPTY_CELL = " "

# Cell starts that would make a "|" data line read as "|-" or "|}"
MARKER_LOOKALIKES = ("-", "}")
