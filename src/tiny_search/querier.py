"""
Answers boolean queries read from stdin against an index file.

Run with:
    tse-querier data/toscrape-2 data/toscrape-2.index
    echo "stop and running or suddenly" | tse-querier data/toscrape-2 data/toscrape-2.index

Invalid queries are reported on stderr and skipped. Exit codes: 0 at end of
input, 1 on invalid arguments or a missing page file, 2 if the index file
cannot be loaded.
"""

from __future__ import annotations

import os
import sys
from typing import IO, TextIO

from tiny_search import pagedir
from tiny_search.cli import ArgumentParser, fail, report, usage_error
from tiny_search.config import QUERY_PROMPT, QUERY_SEPARATOR
from tiny_search.errors import (
    ArgumentError,
    InvalidCharacterError,
    MalformedIndexError,
    PageFileMissingError,
    QuerySyntaxError,
)
from tiny_search.evaluator import evaluate
from tiny_search.index import InvertedIndex
from tiny_search.query import tokenize, validate_characters, validate_syntax
from tiny_search.ranking import rank_and_format


def process_query(
    raw_line: str,
    index: InvertedIndex,
    page_directory: str | os.PathLike,
    out: IO[str] | None = None,
) -> bool:
    """
    Validates, evaluates and prints the results of one query line.

    Returns False if the line was rejected (blank lines are rejected silently).

    Raises:
        PageFileMissingError: If a matching document has no page file.
    """
    try:
        validate_characters(raw_line)
    except InvalidCharacterError as e:
        report(f"Error: {e}")
        return False

    tokens = tokenize(raw_line)
    if not tokens:
        return False
    try:
        validate_syntax(tokens)
    except QuerySyntaxError as e:
        report(f"Error: {e}")
        return False

    print("Query: " + " ".join(tokens), file=out)
    result = evaluate(tokens, index)
    for line in rank_and_format(result, page_directory):
        print(line, file=out)
    return True


def run(
    index: InvertedIndex,
    page_directory: str | os.PathLike,
    source: TextIO | None = None,
    out: IO[str] | None = None,
) -> None:
    """Processes query lines until end of input (stdin by default)."""
    source = source if source is not None else sys.stdin
    interactive = source.isatty()
    while True:
        if interactive:
            print(QUERY_PROMPT, end="", file=out, flush=True)
        line = source.readline()
        if not line:
            break
        process_query(line, index, page_directory, out)
        print(QUERY_SEPARATOR, file=out, flush=True)


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="tse-querier", description="Query an index built by tse-indexer")
    parser.add_argument("page_directory", help="Directory produced by the crawler")
    parser.add_argument("index_filename", help="Index file produced by tse-indexer")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        return usage_error(parser, e)

    if not pagedir.validate(args.page_directory):
        return fail(f"invalid page directory: {args.page_directory}")
    if not os.path.isfile(args.index_filename) or not os.access(args.index_filename, os.R_OK):
        return fail(f"could not open index file: {args.index_filename}")

    try:
        index = InvertedIndex.load(args.index_filename)
    except (OSError, MalformedIndexError) as e:
        return fail(f"could not load index file {args.index_filename}: {e}", status=2)
    except MemoryError:
        return fail("out of memory while loading the index.", status=2)

    # Undecodable bytes become U+FFFD and are then rejected as bad characters.
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")

    try:
        run(index, args.page_directory)
    except PageFileMissingError as e:
        return fail(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
