"""
Sparse document counters.

A DocCounts maps document IDs to occurrence counts. It is both the posting list
stored for every word of the index and the accumulator type used while
evaluating queries. An entry with count 0 is still a member (it was observed),
which differs from an absent document; `get` reports both as 0.

Combinators:
    min_merge_into(dst, src)  - intersection (AND): narrows dst, never grows it
    sum_merge_into(dst, src)  - union (OR): adds src counts into dst
Both mutate and return `dst`; callers rebind the returned accumulator.
"""

from __future__ import annotations

from typing import Iterator


def _check_doc_id(doc_id: int) -> None:
    if doc_id < 1:
        raise ValueError(f"Document IDs must be positive, got {doc_id}.")


class DocCounts:
    """
    Mapping from document ID to occurrence count.

    Args:
        counts (dict[int, int] | None): Optional initial entries.
    """

    def __init__(self, counts: dict[int, int] | None = None):
        self._counts: dict[int, int] = {}
        if counts:
            for doc_id, count in counts.items():
                self.set(doc_id, count)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._counts

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yields (doc_id, count) pairs in insertion order."""
        return iter(self._counts.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocCounts):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"DocCounts({self._counts!r})"

    def increment(self, doc_id: int) -> int:
        """Counts one more occurrence in `doc_id` and returns the new count."""
        _check_doc_id(doc_id)
        count = self._counts.get(doc_id, 0) + 1
        self._counts[doc_id] = count
        return count

    def set(self, doc_id: int, count: int) -> None:
        _check_doc_id(doc_id)
        if count < 0:
            raise ValueError(f"Counts cannot be negative, got {count} for document {doc_id}.")
        self._counts[doc_id] = count

    def get(self, doc_id: int) -> int:
        return self._counts.get(doc_id, 0)

    def copy(self) -> DocCounts:
        duplicate = DocCounts()
        duplicate._counts = dict(self._counts)
        return duplicate

    def nonzero(self) -> Iterator[tuple[int, int]]:
        """Yields only the entries with a positive count."""
        return ((doc_id, count) for doc_id, count in self._counts.items() if count > 0)


def min_merge_into(dst: DocCounts, src: DocCounts) -> DocCounts:
    """
    For every entry already in `dst`, keeps the smaller of the two counts.

    Documents that only appear in `src` are not added, so a document missing
    from `src` drops to 0 in `dst`.
    """
    for doc_id, count in dst:
        dst.set(doc_id, min(count, src.get(doc_id)))
    return dst


def sum_merge_into(dst: DocCounts, src: DocCounts) -> DocCounts:
    """Adds every count of `src` into `dst`, creating missing entries."""
    for doc_id, count in src:
        dst.set(doc_id, dst.get(doc_id) + count)
    return dst
