"""
Query line validation and tokenization.

A query is a sequence of words joined by the operators `and` / `or`, e.g.

    dartmouth college or hanover
    computer and science

Adjacent words are implicitly joined by `and`. Operators may not start or end
a query and may not follow one another.
"""

from __future__ import annotations

import string

from tiny_search.errors import (
    AdjacentOperatorsError,
    EmptyQueryError,
    InvalidCharacterError,
    LeadingOperatorError,
    TrailingOperatorError,
)
from tiny_search.words import normalize_word

AND = "and"
OR = "or"
OPERATORS = frozenset({AND, OR})

_LETTERS = frozenset(string.ascii_letters)


def is_operator(token: str) -> bool:
    return token in OPERATORS


def validate_characters(raw_line: str) -> bool:
    """
    Checks that a raw query holds only letters and whitespace.

    Raises:
        InvalidCharacterError: On the first offending character.
    """
    for character in raw_line:
        if character not in _LETTERS and not character.isspace():
            raise InvalidCharacterError(character)
    return True


def tokenize(raw_line: str) -> list[str]:
    """Splits on runs of whitespace and normalizes each token."""
    return [normalize_word(token) for token in raw_line.split()]


def validate_syntax(tokens: list[str]) -> bool:
    """
    Checks operator placement in a tokenized query.

    Raises:
        EmptyQueryError: No tokens.
        LeadingOperatorError: The query starts with `and` / `or`.
        TrailingOperatorError: The query ends with `and` / `or`.
        AdjacentOperatorsError: Two operators in a row.
    """
    if not tokens:
        raise EmptyQueryError()
    if is_operator(tokens[0]):
        raise LeadingOperatorError(tokens[0])
    if is_operator(tokens[-1]):
        raise TrailingOperatorError(tokens[-1])
    for previous, token in zip(tokens, tokens[1:]):
        if is_operator(previous) and is_operator(token):
            raise AdjacentOperatorsError(previous, token)
    return True


def parse_query(raw_line: str) -> list[str]:
    """Validates a raw query line and returns its tokens."""
    validate_characters(raw_line)
    tokens = tokenize(raw_line)
    validate_syntax(tokens)
    return tokens
