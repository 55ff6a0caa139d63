"""
Exception hierarchy shared by the indexer, the querier and their helpers.

Query validation errors are recoverable: the querier reports them and moves on
to the next input line. Everything else is fatal for the running tool.
"""

from __future__ import annotations


class TinySearchError(Exception):
    """Base class for all errors raised by tiny_search."""


class ArgumentError(TinySearchError):
    """Invalid command-line arguments."""


class MalformedIndexError(TinySearchError, ValueError):
    """An index file does not follow the `word docID count ...` format."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class PageFileMissingError(TinySearchError):
    """A document referenced by the index has no readable page file."""

    def __init__(self, path):
        super().__init__(f"could not open file {path}")
        self.path = path


class InvalidCharacterError(TinySearchError, ValueError):
    """A query contains something other than letters and whitespace."""

    def __init__(self, character: str):
        super().__init__(f"bad character '{character}' in query.")
        self.character = character


class QuerySyntaxError(TinySearchError, ValueError):
    """A tokenized query violates the operator placement rules."""


class EmptyQueryError(QuerySyntaxError):
    def __init__(self):
        super().__init__("empty query.")


class LeadingOperatorError(QuerySyntaxError):
    def __init__(self, operator: str):
        super().__init__(f"'{operator}' cannot be first")
        self.operator = operator


class TrailingOperatorError(QuerySyntaxError):
    def __init__(self, operator: str):
        super().__init__(f"'{operator}' cannot be last")
        self.operator = operator


class AdjacentOperatorsError(QuerySyntaxError):
    def __init__(self, first: str, second: str):
        super().__init__(f"'{first}' and '{second}' cannot be adjacent")
        self.operators = (first, second)


__all__ = [
    "TinySearchError",
    "ArgumentError",
    "MalformedIndexError",
    "PageFileMissingError",
    "InvalidCharacterError",
    "QuerySyntaxError",
    "EmptyQueryError",
    "LeadingOperatorError",
    "TrailingOperatorError",
    "AdjacentOperatorsError",
]
