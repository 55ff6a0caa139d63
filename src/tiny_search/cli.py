"""Helpers shared by the tse-* command-line tools."""

from __future__ import annotations

import argparse
import sys

from tiny_search.errors import ArgumentError


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises ArgumentError instead of exiting with status 2."""

    def error(self, message: str):
        raise ArgumentError(message)


def report(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def fail(message: str, status: int = 1) -> int:
    report(f"Error: {message}")
    return status


def usage_error(parser: argparse.ArgumentParser, error: ArgumentError) -> int:
    report(parser.format_usage().rstrip())
    return fail(str(error))
