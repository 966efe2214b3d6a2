"""Title sort-key extraction and title-based row sorting.

The title cell of a cleaned row is italic-wrapped and may hold one of five
shapes; the sort key is taken from the human-visible text:

    ''[[Target|KEY]]''
    ''[[KEY]]''
    ''{{ill|Target|lt=KEY|lang|Foreign}}''
    ''{{ill|KEY|lang|Foreign}}''
    ''KEY''                                  (anything else)

A leading "A ", "An " or "The " moves to the end (", A" etc.) and the key is
uppercased.  Keys are only used for ordering and are never written back.
"""

import logging
from collections import Counter

from wikitsv.errors import MalformedLinkError
from wikitsv.schema import Table
from wikitsv.titles.clean import MARKUP_ITALIC, clean_titles

logger = logging.getLogger(__name__)

LINK_OPEN = "[["
LINK_CLOSE = "]]"
LINK_PIPE = "|"

ILL_OPEN = "{{ill|"
ILL_CLOSE = "}}"
ILL_LINK_TEXT = "lt="

# Checked in this order, case-sensitive
LEADING_ARTICLES = ("A ", "An ", "The ")


def _strip_italic(s: str) -> str:
    """Remove one italic marker from each end of s where present."""
    if s.startswith(MARKUP_ITALIC):
        s = s[len(MARKUP_ITALIC) :]
    if s.endswith(MARKUP_ITALIC):
        s = s[: -len(MARKUP_ITALIC)]
    return s


def _link_text(content: str, title: str) -> str:
    """Display text of "[[Target|Text]]" or "[[Text]]"."""
    close = content.find(LINK_CLOSE, len(LINK_OPEN))
    if close < 0:
        raise MalformedLinkError(title, LINK_CLOSE)
    # Last pipe inside the link wins
    return content[len(LINK_OPEN) : close].rpartition(LINK_PIPE)[2]


def _ill_text(content: str, title: str) -> str:
    """Link text of "{{ill|...|lt=Text|...}}", else its first positional argument."""
    close = content.find(ILL_CLOSE, len(ILL_OPEN))
    if close < 0:
        raise MalformedLinkError(title, ILL_CLOSE)
    args = content[len(ILL_OPEN) : close].split(LINK_PIPE)
    for arg in args:
        if arg.startswith(ILL_LINK_TEXT):
            return arg[len(ILL_LINK_TEXT) :]
    return args[0]


def relocate_article(key: str) -> str:
    """Move a leading "A ", "An " or "The " to the end: "The Hobbit" -> "Hobbit, The"."""
    for article in LEADING_ARTICLES:
        if key.startswith(article):
            return f"{key[len(article):]}, {article.rstrip()}"
    return key


def title_sort_key(title: str, strict: bool = False) -> str:
    """Derive the uppercase sort key for one title cell.

    A title that opens a link or {{ill}} template without closing it raises
    MalformedLinkError when strict is set; otherwise the whole title (minus
    its italic markers) is used as the key.
    """
    content = _strip_italic(title)
    try:
        if content.startswith(LINK_OPEN):
            key = _strip_italic(_link_text(content, title))
        elif content.startswith(ILL_OPEN):
            key = _strip_italic(_ill_text(content, title))
        else:
            key = content
    except MalformedLinkError as exc:
        if strict:
            raise
        logger.warning("%s; sorting on the whole title", exc)
        key = content
    return relocate_article(key).upper()


def sort_titles(table: Table, strict: bool = False) -> Table:
    """Clean the table, then stably reorder its rows by title sort key.

    Rows whose keys collide keep their original relative order; no row is
    dropped.  The header is untouched.
    """
    table.check_rectangular()
    clean_titles(table)

    keys = [title_sort_key(row[0] if row else "", strict=strict) for row in table.rows]
    order = sorted(range(len(table.rows)), key=keys.__getitem__)
    table.rows = [table.rows[i] for i in order]

    collided = sum(count for count in Counter(keys).values() if count > 1)
    if collided:
        logger.info("%d of %d rows share a sort key with another row; kept in input order", collided, len(keys))
    logger.debug("Sorted %d rows by title", len(keys))
    return table
