from __future__ import annotations

import re
from typing import Iterator

_MARKUP = re.compile(r"<[^>]*>")
_WORD = re.compile(r"[A-Za-z]+")


def normalize_word(word: str) -> str:
    """Canonical indexed form of a word (lowercase)."""
    return word.lower()


def scan_words(html: str) -> Iterator[str]:
    """
    Yields the words of a page in document order.

    Markup between `<` and `>` is skipped; a word is a maximal run of ASCII
    letters, so digits and punctuation act as separators.
    """
    text = _MARKUP.sub(" ", html)
    for match in _WORD.finditer(text):
        yield match.group()


def indexable_words(html: str, min_length: int) -> Iterator[str]:
    """Normalized words of a page that are long enough to be indexed."""
    for word in scan_words(html):
        if len(word) >= min_length:
            yield normalize_word(word)
