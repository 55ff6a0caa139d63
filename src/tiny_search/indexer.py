"""
Builds an index file from a crawler page directory.

Run with:
    tse-indexer data/letters-1 data/letters-1.index
    tse-indexer data/toscrape-2 data/toscrape-2.index --min-length 3 --quiet

Exit codes: 0 on success, 1 on invalid arguments or I/O failure.
"""

from __future__ import annotations

import os
import sys

from tqdm import tqdm

from tiny_search import pagedir
from tiny_search.cli import ArgumentParser, fail, report, usage_error
from tiny_search.config import DEFAULT_INDEX_CAPACITY, DEFAULT_MIN_WORD_LENGTH, SHOW_PROGRESS
from tiny_search.errors import ArgumentError
from tiny_search.index import InvertedIndex
from tiny_search.words import indexable_words


def index_page(
    index: InvertedIndex,
    page: pagedir.Webpage,
    doc_id: int,
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> int:
    """Adds every indexable word of a page; returns how many were inserted."""
    inserted = 0
    for word in indexable_words(page.html, min_length):
        index.insert(word, doc_id)
        inserted += 1
    return inserted


def build_index(
    page_directory: str | os.PathLike,
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
    capacity_hint: int = DEFAULT_INDEX_CAPACITY,
    show_progress: bool = SHOW_PROGRESS,
) -> InvertedIndex:
    """
    Indexes pages 1, 2, ... of a page directory, stopping at the first gap.

    Page files that cannot be parsed are reported on stderr and skipped.
    """
    index = InvertedIndex(capacity_hint)
    pages = pagedir.iter_pages(page_directory)
    total = pagedir.count_pages(page_directory) if show_progress else None
    for doc_id, path in tqdm(pages, total=total, desc="Indexing", unit="page", disable=not show_progress):
        try:
            page = pagedir.load(path)
        except (OSError, ValueError) as e:
            report(f"Warning: skipping document {doc_id}: {e}")
            continue
        index_page(index, page, doc_id, min_length)
    return index


def _is_writable(path: str) -> bool:
    """True if `path` can be (re)written without creating it first."""
    if os.path.exists(path):
        return os.path.isfile(path) and os.access(path, os.W_OK)
    parent = os.path.dirname(os.path.abspath(path))
    return os.path.isdir(parent) and os.access(parent, os.W_OK)


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="tse-indexer", description="Build an index file from a crawler page directory")
    parser.add_argument("page_directory", help="Directory produced by the crawler")
    parser.add_argument("index_filename", help="Index file to (over)write")
    parser.add_argument(
        "--min-length",
        type=int,
        default=DEFAULT_MIN_WORD_LENGTH,
        help=f"Shortest word to index (default: {DEFAULT_MIN_WORD_LENGTH})",
    )
    parser.add_argument("--quiet", action="store_true", help="Disable the progress bar")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        return usage_error(parser, e)

    if not pagedir.validate(args.page_directory):
        return fail(f"invalid page directory '{args.page_directory}'.")
    if not _is_writable(args.index_filename):
        return fail(f"index file '{args.index_filename}' could not be written to.")

    try:
        index = build_index(
            args.page_directory,
            min_length=args.min_length,
            show_progress=SHOW_PROGRESS and not args.quiet,
        )
        index.save(args.index_filename)
    except OSError as e:
        return fail(f"could not write index file '{args.index_filename}': {e}")
    except MemoryError:
        return fail("out of memory while building the index.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
