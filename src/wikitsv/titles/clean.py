"""Cell cleanup applied before a table is written back as wikitext.

- every cell is stripped of leading/trailing whitespace
- non-empty title cells (column 0) are wrapped in italic markup
- mis-capitalized checkbox templates are lowercased
"""

import logging

from wikitsv.schema import Table

logger = logging.getLogger(__name__)

MARKUP_ITALIC = "''"

CHECKBOX_CANONICAL = "{{ya}}"
CHECKBOX_VARIANTS = ("{{Ya}}", "{{yA}}", "{{YA}}")


def italicize(cell: str) -> str:
    """Add whichever italic markers are missing from a non-empty cell."""
    if not cell:
        return cell
    if not cell.startswith(MARKUP_ITALIC):
        cell = MARKUP_ITALIC + cell
    if not cell.endswith(MARKUP_ITALIC):
        cell = cell + MARKUP_ITALIC
    return cell


def canonical_checkbox(cell: str) -> str:
    """Map any mis-capitalized checkbox template to its lowercase form."""
    return CHECKBOX_CANONICAL if cell in CHECKBOX_VARIANTS else cell


def clean_titles(table: Table) -> Table:
    """Clean every data row in place and return the table.

    Idempotent: a second call leaves the table unchanged.
    """
    changed = 0
    for row in table.rows:
        for col, cell in enumerate(row):
            cleaned = cell.strip()
            cleaned = italicize(cleaned) if col == 0 else canonical_checkbox(cleaned)
            if cleaned != cell:
                row[col] = cleaned
                changed += 1
    logger.debug("Cleaned %d cells across %d rows", changed, len(table.rows))
    return table
