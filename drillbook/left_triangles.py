"""Left-aligned triangle patterns of numbers, letters and stars.

Every pattern is a list of lines. Each item on a line is followed by a single
space, as the patterns are meant to be printed one line after another.
Row counts below 1 give an empty pattern.
"""

from __future__ import annotations

from collections.abc import Iterable


def _line(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def countdown_triangle(rows: int) -> list[str]:
    """Line ``i`` holds the numbers from ``i`` down to 1."""
    return [_line(range(row, 0, -1)) for row in range(1, rows + 1)]


def descending_from_top_triangle(rows: int) -> list[str]:
    """Line ``i`` counts down from ``rows``, holding ``i`` numbers."""
    return [
        _line(range(rows, rows - row, -1)) for row in range(1, rows + 1)
    ]


def number_triangle(rows: int) -> list[str]:
    """Line ``i`` holds the numbers from 1 up to ``i``."""
    return [_line(range(1, row + 1)) for row in range(1, rows + 1)]


def repeated_row_number_triangle(rows: int) -> list[str]:
    """Line ``i`` holds the number ``i``, ``i`` times."""
    return [_line(row for _ in range(row)) for row in range(1, rows + 1)]


def letter_row_triangle(rows: int) -> list[str]:
    """Line ``i`` holds the ``i``-th lowercase letter, ``i`` times."""
    return [
        _line(chr(ord("a") + row - 1) for _ in range(row))
        for row in range(1, rows + 1)
    ]


def star_triangle(rows: int) -> list[str]:
    """Line ``i`` holds ``i`` stars."""
    return [_line("*" for _ in range(row)) for row in range(1, rows + 1)]


def reversed_number_triangle(rows: int) -> list[str]:
    """The first line holds 1 to ``rows``; each following line holds one number fewer."""
    return [_line(range(1, width + 1)) for width in range(rows, 0, -1)]


def reversed_star_triangle(rows: int) -> list[str]:
    """The first line holds ``rows`` stars; each following line holds one fewer."""
    return [_line("*" for _ in range(width)) for width in range(rows, 0, -1)]