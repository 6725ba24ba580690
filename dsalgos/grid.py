"""Reading and printing a rectangular grid of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


def _tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[object]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("input ended before all values were read") from None
    return int(token)


def parse_grid(tokens: Iterable[object], rows: int, cols: int) -> list[list[int]]:
    """Build a rows x cols grid of integers from tokens, row by row.

    Tokens past the ones needed are left unread.
    """
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must be non-negative")
    stream = iter(tokens)
    return [[_next_int(stream) for _ in range(cols)] for _ in range(rows)]


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render each row as space-terminated values followed by a newline."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in grid)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a grid's size and values from standard input and print the grid."""
    parser = argparse.ArgumentParser(
        prog="dsalgos-grid",
        description="Read a grid of integers from standard input and print it.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter number of rows: ")
        rows = _next_int(tokens)
        _prompt("Enter number of columns: ")
        cols = _next_int(tokens)
        print("Enter the values in the array:")
        grid = parse_grid(tokens, rows, cols)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print("\nUpdated 2D Array:")
    print(format_grid(grid), end="")
    return 0