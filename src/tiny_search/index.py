"""
Inverted index: normalized word -> DocCounts.

The index file is the contract between the indexer and the querier. Each line
holds one word followed by its (docID, count) pairs:

    word docID_1 count_1 docID_2 count_2 ...

Saving writes words and pairs in iteration order. Loading preserves the file
order, so a save -> load -> save round trip reproduces the file byte for byte.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import IO, Iterable, Iterator

from tiny_search.config import DEFAULT_INDEX_CAPACITY
from tiny_search.counters import DocCounts
from tiny_search.errors import MalformedIndexError

_WORD_PATTERN = re.compile(r"[a-z]+")
_INTEGER_PATTERN = re.compile(r"[0-9]+")


def _current_umask() -> int:
    # os.umask can only be read by setting it.
    umask = os.umask(0)
    os.umask(umask)
    return umask


class InvertedIndex:
    """
    Mapping from normalized word to the DocCounts of the documents containing it.

    Args:
        capacity_hint (int): Expected number of distinct words. Advisory only.
    """

    def __init__(self, capacity_hint: int = DEFAULT_INDEX_CAPACITY):
        self.capacity_hint = capacity_hint
        self._words: dict[str, DocCounts] = {}

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[tuple[str, DocCounts]]:
        return iter(self._words.items())

    def _counts_for(self, word: str) -> DocCounts:
        counts = self._words.get(word)
        if counts is None:
            counts = DocCounts()
            self._words[word] = counts
        return counts

    def insert(self, word: str, doc_id: int) -> None:
        """Counts one occurrence of an already normalized `word` in `doc_id`."""
        self._counts_for(word).increment(doc_id)

    def set(self, word: str, doc_id: int, count: int) -> None:
        """Stores an explicit count; the value replaces any previous one."""
        self._counts_for(word).set(doc_id, count)

    def find(self, word: str) -> DocCounts | None:
        """
        The stored counts for `word`, or None if it was never indexed.

        The returned object belongs to the index; copy it before mutating.
        """
        return self._words.get(word)

    def clear(self) -> None:
        self._words.clear()

    def persist(self, sink: IO[str]) -> None:
        """Writes one `word docID count ...` line per word to a text stream."""
        for word, counts in self._words.items():
            pairs = "".join(f" {doc_id} {count}" for doc_id, count in counts)
            sink.write(f"{word}{pairs}\n")

    @classmethod
    def restore(cls, source: Iterable[str]) -> InvertedIndex:
        """
        Builds an index from lines in the persisted format.

        Counts are installed with `set`, so the file is authoritative: a word
        listing the same document twice keeps the last count.

        Raises:
            MalformedIndexError: If a line does not start with a lowercase word,
                has no pairs, or a pair is not two non-negative integers.
        """
        lines = source if isinstance(source, list) else list(source)
        index = cls(capacity_hint=max(len(lines), 1))
        for line_number, line in enumerate(lines, start=1):
            fields = line.split()
            if not fields:
                continue
            word, numbers = fields[0], fields[1:]
            if not _WORD_PATTERN.fullmatch(word):
                raise MalformedIndexError(f"expected a word, found '{word}'", line_number)
            if not numbers:
                raise MalformedIndexError(f"word '{word}' has no (docID, count) pairs", line_number)
            if len(numbers) % 2:
                raise MalformedIndexError(f"word '{word}' has an incomplete (docID, count) pair", line_number)
            for doc_field, count_field in zip(numbers[::2], numbers[1::2]):
                if not (_INTEGER_PATTERN.fullmatch(doc_field) and _INTEGER_PATTERN.fullmatch(count_field)):
                    raise MalformedIndexError(
                        f"invalid pair '{doc_field} {count_field}' for word '{word}'", line_number
                    )
                doc_id, count = int(doc_field), int(count_field)
                if doc_id == 0:
                    raise MalformedIndexError(f"document ID 0 for word '{word}'", line_number)
                index.set(word, doc_id, count)
        return index

    def save(self, path: str | os.PathLike) -> None:
        """Writes the index file as a whole, replacing any existing file atomically."""
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="ascii", newline="\n") as f:
                self.persist(f)
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    @classmethod
    def load(cls, path: str | os.PathLike) -> InvertedIndex:
        with open(path, encoding="ascii", errors="replace") as f:
            return cls.restore(f)


__all__ = ["InvertedIndex"]
