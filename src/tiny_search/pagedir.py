"""
Page directory produced by the crawler.

A valid page directory contains a `.crawler` marker file and page files named
`1`, `2`, `3`, ... without gaps. Each page file holds the URL on the first
line, the crawl depth on the second line and the raw HTML after that.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from tiny_search.config import CRAWLER_MARKER
from tiny_search.errors import PageFileMissingError


@dataclass
class Webpage:
    url: str
    depth: int
    html: str


def page_path(page_directory: str | os.PathLike, doc_id: int) -> Path:
    return Path(page_directory) / str(doc_id)


def init(page_directory: str | os.PathLike) -> None:
    """Marks an existing directory as crawler output."""
    (Path(page_directory) / CRAWLER_MARKER).touch()


def validate(page_directory: str | os.PathLike) -> bool:
    """True if the directory carries the crawler marker."""
    return (Path(page_directory) / CRAWLER_MARKER).is_file()


def save(page: Webpage, page_directory: str | os.PathLike, doc_id: int) -> Path:
    path = page_path(page_directory, doc_id)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{page.url}\n{page.depth}\n{page.html}\n")
    return path


def load(path: str | os.PathLike) -> Webpage:
    """
    Reads a page file.

    Raises:
        ValueError: If the URL line is missing or the depth is not an integer.
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        url = f.readline().rstrip("\n")
        depth_line = f.readline()
        html = f.read()
    if not url:
        raise ValueError(f"{path}: missing URL line")
    try:
        depth = int(depth_line)
    except ValueError:
        raise ValueError(f"{path}: invalid depth {depth_line.strip()!r}") from None
    return Webpage(url, depth, html)


def read_url(page_directory: str | os.PathLike, doc_id: int) -> str:
    """
    First line of a document's page file.

    Raises:
        PageFileMissingError: If the page file cannot be read.
    """
    path = page_path(page_directory, doc_id)
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            return f.readline().rstrip("\n")
    except OSError:
        raise PageFileMissingError(path) from None


def iter_pages(page_directory: str | os.PathLike) -> Iterator[tuple[int, Path]]:
    """Yields (doc_id, path) for pages 1, 2, ... up to the first missing file."""
    doc_id = 1
    while True:
        path = page_path(page_directory, doc_id)
        if not path.is_file():
            return
        yield doc_id, path
        doc_id += 1


def count_pages(page_directory: str | os.PathLike) -> int:
    return sum(1 for _ in iter_pages(page_directory))
