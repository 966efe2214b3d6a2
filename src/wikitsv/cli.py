"""Command-line entry points: tsv2wiki, tsvsort and wiki2tsv.

Each command takes exactly one input file and writes the converted table to
stdout.  Logging and error messages go to stderr.

Usage:
    tsv2wiki FILE [--caption TEXT] [--table-class TEXT]
    tsvsort FILE [--strict]
    wiki2tsv FILE

    python -m wikitsv.cli {tsv2wiki,tsvsort,wiki2tsv} FILE ...
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from wikitsv import config
from wikitsv.errors import InputNotFoundError, MalformedLinkError, UsageError
from wikitsv.loaders import load_table
from wikitsv.schema import FileType
from wikitsv.titles.sort import sort_titles
from wikitsv.tsv import render_tsv
from wikitsv.wiki.writer import render_wiki

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INPUT_NOT_FOUND = 3
EXIT_MALFORMED_LINK = 4


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def _build_parser(prog: str, description: str) -> _ArgumentParser:
    parser = _ArgumentParser(prog=prog, description=description)
    parser.add_argument("file", metavar="FILE", help="Input file")
    return parser


def _configure_logging():
    level = config.log_level(config.LOG_LEVEL)
    logging.basicConfig(level=logging.INFO if level is None else level, format=config.LOG_FORMAT)
    if level is None:
        logger.warning("Unknown WIKITSV_LOG_LEVEL %r; using INFO", config.LOG_LEVEL)


def _run(parser: _ArgumentParser, command: Callable[[argparse.Namespace], str], argv: Sequence[str] | None) -> int:
    """Parse argv, run command, write its output to stdout, and map errors to exit codes."""
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"{parser.prog}: {exc}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    _configure_logging()
    try:
        output = command(args)
    except InputNotFoundError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return EXIT_INPUT_NOT_FOUND
    except MalformedLinkError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return EXIT_MALFORMED_LINK

    sys.stdout.write(output)
    return EXIT_OK


# ─── Commands ────────────────────────────────────────────────────────────────


def tsv2wiki_main(argv: Sequence[str] | None = None) -> int:
    """Convert a TSV file to wikitext table markup."""
    parser = _build_parser("tsv2wiki", "Convert FILE from TSV to a wikitext table and write to stdout")
    parser.add_argument("--caption", default=None, help=f"Table caption (default: {config.CAPTION!r})")
    parser.add_argument("--table-class", default=None, help=f"Table class attribute (default: {config.TABLE_CLASS!r})")

    def command(args: argparse.Namespace) -> str:
        table = load_table(args.file, FileType.TSV)
        return render_wiki(table, caption=args.caption, table_class=args.table_class)

    return _run(parser, command, argv)


def tsvsort_main(argv: Sequence[str] | None = None) -> int:
    """Clean and title-sort a TSV file, re-emitting TSV."""
    parser = _build_parser("tsvsort", "Write a cleaned, title-sorted copy of TSV-formatted FILE to stdout")
    parser.add_argument("--strict", action="store_true", help="Fail on titles with unclosed links instead of sorting on the whole title")

    def command(args: argparse.Namespace) -> str:
        table = load_table(args.file, FileType.TSV)
        sort_titles(table, strict=args.strict)
        return render_tsv(table)

    return _run(parser, command, argv)


def wiki2tsv_main(argv: Sequence[str] | None = None) -> int:
    """Convert a wikitext table to TSV."""
    parser = _build_parser("wiki2tsv", "Convert FILE from a wikitext table to TSV and write to stdout")

    def command(args: argparse.Namespace) -> str:
        return render_tsv(load_table(args.file, FileType.WIKI))

    return _run(parser, command, argv)


COMMANDS = {
    "tsv2wiki": tsv2wiki_main,
    "tsvsort": tsvsort_main,
    "wiki2tsv": wiki2tsv_main,
}


if __name__ == "__main__":
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(f"usage: python -m wikitsv.cli {{{','.join(COMMANDS)}}} FILE ...", file=sys.stderr)
        sys.exit(EXIT_USAGE)
    sys.exit(COMMANDS[sys.argv[1]](sys.argv[2:]))
