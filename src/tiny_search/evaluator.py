"""
Boolean query evaluation over an InvertedIndex.

Words joined by `and` (or plain adjacency) form an AND-chain whose score for a
document is the smallest count of any chain word in that document. Chains are
separated by `or`, and the scores of all chains are summed. AND therefore binds
tighter than OR: `a or b and c` means `a or (b and c)`.

The index is only read. Every accumulator is a copy owned by one evaluation,
so independent queries can be evaluated concurrently against a shared index.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from tiny_search.config import DEFAULT_NUM_WORKERS, MIN_QUERIES_FOR_PARALLEL
from tiny_search.counters import DocCounts, min_merge_into, sum_merge_into
from tiny_search.index import InvertedIndex
from tiny_search.query import AND, OR


def _complete_chain(and_acc: DocCounts | None, or_acc: DocCounts | None) -> DocCounts | None:
    """Folds a finished AND-chain into the OR accumulator and returns the latter."""
    if and_acc is None:
        return or_acc
    if or_acc is None:
        return and_acc
    return sum_merge_into(or_acc, and_acc)


def _extend_chain(and_acc: DocCounts | None, word_counts: DocCounts) -> DocCounts:
    # The first word seeds the chain; later words can only narrow it.
    if and_acc is None:
        return word_counts.copy()
    return min_merge_into(and_acc, word_counts)


def evaluate(tokens: list[str], index: InvertedIndex) -> DocCounts:
    """
    Scores every document matching a validated token sequence.

    Args:
        tokens: Normalized query tokens (see `tiny_search.query.parse_query`).
        index: Index to search; it is not modified.

    Returns:
        DocCounts of document scores. May contain zero-score entries for
        documents that matched some chain words but not all of them.
    """
    and_acc: DocCounts | None = None
    or_acc: DocCounts | None = None
    chain_broken = False

    for token in tokens:
        if token == OR:
            or_acc = _complete_chain(and_acc, or_acc)
            and_acc = None
            chain_broken = False
            continue
        if token == AND or chain_broken:
            continue

        word_counts = index.find(token)
        if word_counts is None:
            # A missing word fails the whole chain.
            chain_broken = True
            and_acc = None
        else:
            and_acc = _extend_chain(and_acc, word_counts)

    or_acc = _complete_chain(and_acc, or_acc)
    return or_acc if or_acc is not None else DocCounts()


def evaluate_many(
    queries: list[list[str]],
    index: InvertedIndex,
    num_workers: int = DEFAULT_NUM_WORKERS,
    min_queries_for_parallel: int = MIN_QUERIES_FOR_PARALLEL,
) -> list[DocCounts]:
    """
    Evaluates independent token sequences, in the order given.

    The tse-querier tool answers one line at a time with `evaluate`; this entry
    point is for programs that embed the library and hold many queries at once.
    Small batches run sequentially; larger ones are spread over a thread pool.
    """
    if not queries:
        return []

    def evaluate_single(tokens: list[str]) -> DocCounts:
        return evaluate(tokens, index)

    if len(queries) < min_queries_for_parallel or num_workers <= 1:
        return [evaluate_single(tokens) for tokens in queries]

    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        return list(executor.map(evaluate_single, queries))


__all__ = ["evaluate", "evaluate_many"]
