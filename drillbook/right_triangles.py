"""Right-aligned triangle patterns of letters, numbers and stars.

Every pattern is a list of lines. Each line is padded on the left so that
its last item sits against a common right edge. The letter and number
patterns pad with two spaces per missing item and follow each item with a
single space. The star pattern uses one space per missing star and no
separators. Row counts below 1 give an empty pattern.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

_PAD = "  "


def _line(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _triangle(n: int, items_for_row: Callable[[int], Iterable[object]]) -> list[str]:
    return [_PAD * (n - row) + _line(items_for_row(row)) for row in range(1, n + 1)]


def right_letter_triangle(n: int) -> list[str]:
    """Line ``i`` holds the uppercase letters from 'A' up to the ``i``-th letter."""
    return _triangle(n, lambda row: (chr(ord("A") + col) for col in range(row)))


def right_number_triangle(n: int) -> list[str]:
    """Line ``i`` holds the numbers from 1 up to ``i``."""
    return _triangle(n, lambda row: range(1, row + 1))


def right_descending_letter_triangle(n: int) -> list[str]:
    """Line ``i`` counts ``i`` letters down from the ``n``-th uppercase letter."""
    return _triangle(n, lambda row: (chr(ord("A") + n - col) for col in range(1, row + 1)))


def right_descending_number_triangle(n: int) -> list[str]:
    """Line ``i`` holds the numbers from ``i`` down to 1."""
    return _triangle(n, lambda row: range(row, 0, -1))


def right_row_number_triangle(n: int) -> list[str]:
    """Line ``i`` holds the number ``i``, ``i`` times."""
    return _triangle(n, lambda row: (row for _ in range(row)))


def right_star_triangle(n: int) -> list[str]:
    """Line ``i`` holds ``i`` stars, padded with single spaces to the right edge."""
    return [" " * (n - row) + "*" * row for row in range(1, n + 1)]