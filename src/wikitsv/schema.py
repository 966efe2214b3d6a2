"""Pydantic model for a rectangular text table.

A Table is filled by one of the readers (TSV or wikitext), normalized once so
that the header and every row share the same column count, optionally
cleaned and sorted in place, and finally handed to a writer.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FileType(str, Enum):
    """Input formats understood by the loaders."""

    TSV = "tsv"
    WIKI = "wiki"


class Table(BaseModel):
    """Ordered header row plus ordered data rows, all cells as strings.

    Row order is significant: it is the display order and the order produced
    by title sorting.  Call normalize() after populating the table; writers
    and the sorter expect every row to be as wide as the header.
    """

    header: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    @property
    def column_count(self) -> int:
        """Widest of the header and all data rows."""
        return max([len(self.header)] + [len(row) for row in self.rows])

    def clear(self) -> None:
        """Drop header and data contents."""
        self.header.clear()
        self.rows.clear()

    def normalize(self) -> "Table":
        """Right-pad the header and every row with empty cells up to column_count."""
        n_cols = self.column_count
        self.header.extend([""] * (n_cols - len(self.header)))
        for row in self.rows:
            row.extend([""] * (n_cols - len(row)))
        return self

    def is_rectangular(self) -> bool:
        """Return True if the header and every row have the same length."""
        n_cols = len(self.header)
        return all(len(row) == n_cols for row in self.rows)

    def check_rectangular(self) -> None:
        """Raise ValueError naming the first row whose width differs from the header."""
        n_cols = len(self.header)
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching header); call normalize() first")
