import numpy as np
import pytest

from tiny_search.counters import DocCounts
from tiny_search.errors import PageFileMissingError
from tiny_search.ranking import RankedDocument, format_results, rank, rank_and_format, resolve


def test_rank_orders_by_descending_score():
    doc_ids, scores = rank(DocCounts({3: 10, 7: 5, 2: 10}))
    assert set(doc_ids[:2].tolist()) == {2, 3}
    assert doc_ids[-1] == 7
    assert scores.tolist() == [10, 10, 5]


def test_rank_drops_zero_scores():
    doc_ids, scores = rank(DocCounts({1: 0, 2: 4, 3: 0}))
    assert doc_ids.tolist() == [2]
    assert scores.tolist() == [4]


def test_rank_empty():
    doc_ids, scores = rank(DocCounts({1: 0}))
    assert doc_ids.size == 0
    assert scores.size == 0


def test_resolve_reads_urls(page_directory):
    ranked = resolve(np.array([3, 1]), np.array([2, 1]), page_directory)
    assert ranked == [
        RankedDocument(3, 2, "http://example.com/3"),
        RankedDocument(1, 1, "http://example.com/1"),
    ]


def test_resolve_missing_page_is_fatal(page_directory):
    with pytest.raises(PageFileMissingError):
        resolve(np.array([42]), np.array([1]), page_directory)


def test_format_no_matches():
    assert format_results([]) == ["No documents match."]


def test_format_results():
    lines = format_results([RankedDocument(2, 3, "http://example.com/2"), RankedDocument(5, 1, "http://x/5")])
    assert lines == [
        "Matches 2 documents (ranked):",
        "score 3 doc 2: http://example.com/2",
        "score 1 doc 5: http://x/5",
    ]


def test_rank_and_format(page_directory):
    lines = rank_and_format(DocCounts({1: 1, 2: 3, 3: 0}), page_directory)
    assert lines == [
        "Matches 2 documents (ranked):",
        "score 3 doc 2: http://example.com/2",
        "score 1 doc 1: http://example.com/1",
    ]
