"""Load a table from a TSV or wikitext file."""

import logging
from pathlib import Path

from wikitsv import config
from wikitsv.errors import InputNotFoundError
from wikitsv.schema import FileType, Table
from wikitsv.tsv import parse_tsv
from wikitsv.wiki.parser import parse_wiki

logger = logging.getLogger(__name__)

_PARSERS = {
    FileType.TSV: parse_tsv,
    FileType.WIKI: parse_wiki,
}


def read_lines(path: str | Path, encoding: str | None = None) -> list[str]:
    """Read every line of a text file, raising InputNotFoundError if it cannot be opened or decoded."""
    encoding = encoding or config.ENCODING
    try:
        with open(path, "r", encoding=encoding) as fopen:
            return fopen.readlines()
    except OSError as exc:
        raise InputNotFoundError(path, exc.strerror or "") from exc
    except UnicodeDecodeError as exc:
        raise InputNotFoundError(path, f"not valid {encoding}: {exc}") from exc


def load_table(path: str | Path, file_type: FileType = FileType.TSV, encoding: str | None = None) -> Table:
    """Read a whole file, parse it as file_type, and return the normalized table."""
    file_type = FileType(file_type)
    lines = read_lines(path, encoding)
    table = _PARSERS[file_type](lines).normalize()
    logger.info("Loaded %s from %s: %d rows, %d cols", file_type.value, path, len(table.rows), len(table.header))
    return table
