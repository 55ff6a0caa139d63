"""
Ranking and formatting of query results.

    rank(result)                          -> (doc_ids, scores), best first
    resolve(doc_ids, scores, page_dir)    -> [RankedDocument, ...] with URLs
    format_results(ranked)                -> output lines

Documents with score 0 are dropped. Equal scores come out in no particular
order.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from tiny_search import pagedir
from tiny_search.config import NO_MATCHES_MESSAGE
from tiny_search.counters import DocCounts

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass
class RankedDocument:
    doc_id: int
    score: int
    url: str

    def __str__(self) -> str:
        return f"score {self.score} doc {self.doc_id}: {self.url}"


def rank(result: DocCounts) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """
    Orders the positive-score documents of a result by descending score.

    Returns:
        (sorted_doc_ids, sorted_scores); both empty when nothing matched.
    """
    pairs = list(result.nonzero())
    if not pairs:
        return np.array([], dtype=np.int64), np.array([], dtype=np.int64)

    doc_ids = np.array([doc_id for doc_id, _ in pairs], dtype=np.int64)
    scores = np.array([score for _, score in pairs], dtype=np.int64)
    order = np.argsort(-scores)
    return doc_ids[order], scores[order]


def resolve(
    doc_ids: NDArray[np.int64],
    scores: NDArray[np.int64],
    page_directory: str | os.PathLike,
) -> list[RankedDocument]:
    """
    Attaches the URL of each ranked document.

    Raises:
        PageFileMissingError: If a ranked document has no page file, meaning the
            index and the page directory are out of sync.
    """
    return [
        RankedDocument(int(doc_id), int(score), pagedir.read_url(page_directory, int(doc_id)))
        for doc_id, score in zip(doc_ids, scores)
    ]


def format_results(ranked: list[RankedDocument]) -> list[str]:
    if not ranked:
        return [NO_MATCHES_MESSAGE]
    lines = [f"Matches {len(ranked)} documents (ranked):"]
    lines.extend(str(document) for document in ranked)
    return lines


def rank_and_format(result: DocCounts, page_directory: str | os.PathLike) -> list[str]:
    doc_ids, scores = rank(result)
    return format_results(resolve(doc_ids, scores, page_directory))


__all__ = ["RankedDocument", "rank", "resolve", "format_results", "rank_and_format"]
