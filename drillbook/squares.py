"""Square patterns of letters, numbers and stars, ``dim`` rows by ``dim`` columns.

Every pattern is a list of lines. Each item on a line is followed by a single
space, as the patterns are meant to be printed one line after another.
Dimensions below 1 give an empty pattern.
"""

from __future__ import annotations

from collections.abc import Iterable


def _line(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _letter(offset: int) -> str:
    return chr(ord("a") + offset)


def letter_square(dim: int) -> list[str]:
    """Every line holds the letters from 'a' onwards, one per column."""
    row = _line(_letter(col) for col in range(dim))
    return [row for _ in range(dim)]


def column_number_square(dim: int) -> list[str]:
    """Every line holds the column numbers 1 to ``dim`` in increasing order."""
    row = _line(range(1, dim + 1))
    return [row for _ in range(dim)]


def descending_number_square(dim: int) -> list[str]:
    """Every line holds the column numbers from ``dim`` down to 1."""
    row = _line(range(dim, 0, -1))
    return [row for _ in range(dim)]


def increasing_number_square(dim: int) -> list[str]:
    """Consecutive numbers from 1, filled in row by row, left to right."""
    return [
        _line(range(start, start + dim))
        for start in range(1, dim * dim + 1, dim)
    ] if dim > 0 else []


def row_letter_square(dim: int) -> list[str]:
    """Each line repeats one letter: 'a' on the first, 'b' on the second and so on."""
    return [_line(_letter(row) for _ in range(dim)) for row in range(dim)]


def row_number_square(dim: int) -> list[str]:
    """Each line repeats its own row number, counting from 1."""
    return [_line(row for _ in range(dim)) for row in range(1, dim + 1)]


def squared_column_square(dim: int) -> list[str]:
    """Every line holds the squares of the column numbers 1 to ``dim``."""
    row = _line(col * col for col in range(1, dim + 1))
    return [row for _ in range(dim)]


def star_square(dim: int) -> list[str]:
    """A square of asterisks."""
    row = _line("*" for _ in range(dim))
    return [row for _ in range(dim)]