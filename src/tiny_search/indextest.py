"""
Loads an index file and writes it back out.

Comparing the two files checks that loading and saving agree:
    tse-indextest data/letters-2.index data/letters-2.copy.index
"""

from __future__ import annotations

import sys

from tiny_search.cli import ArgumentParser, fail, usage_error
from tiny_search.errors import ArgumentError, MalformedIndexError
from tiny_search.index import InvertedIndex


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(prog="tse-indextest", description="Copy an index file through load and save")
    parser.add_argument("old_index_filename")
    parser.add_argument("new_index_filename")
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        return usage_error(parser, e)

    try:
        index = InvertedIndex.load(args.old_index_filename)
    except OSError:
        return fail(f"unable to open index file '{args.old_index_filename}' for reading.")
    except MalformedIndexError as e:
        return fail(f"unable to read index file '{args.old_index_filename}': {e}")

    try:
        index.save(args.new_index_filename)
    except OSError:
        return fail(f"unable to write to index file '{args.new_index_filename}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
