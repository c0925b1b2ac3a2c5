"""Star and number shapes: diamonds, hourglasses and pyramids.

Every pattern is a list of lines. Items are followed by a single space.
Sizes below 1 give an empty pattern.
"""

from __future__ import annotations

from collections.abc import Iterable


def _line(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _stars(count: int) -> str:
    return "* " * count


def _wing_row(stars: int, n: int) -> str:
    return _stars(stars) + "  " * (2 * (n - stars)) + _stars(stars)


def diamond(n: int) -> list[str]:
    """An upward triangle of ``n`` rows followed by its mirror; the widest row appears twice."""
    upper = [" " * (n - row) + _stars(row) for row in range(1, n + 1)]
    return upper + upper[::-1]


def hollow_double_diamond(n: int) -> list[str]:
    """Two star wings growing towards a full middle row and shrinking back."""
    upper = [_wing_row(row, n) for row in range(1, n + 1)]
    return upper + upper[-2::-1]


def hourglass(n: int) -> list[str]:
    """Star wings shrinking from a full top row and growing back to a full bottom row."""
    upper = [_wing_row(stars, n) for stars in range(n, 0, -1)]
    return upper + upper[::-1]


def inverted_pyramid(n: int) -> list[str]:
    """A centred pyramid upside down: the widest row first, two stars fewer on each line."""
    return [
        "  " * (row - 1) + _stars(2 * n - 2 * row + 1) for row in range(1, n + 1)
    ]


def palindrome_pyramid(n: int) -> list[str]:
    """A centred pyramid whose line ``i`` counts from 1 up to ``i`` and back to 1."""
    return [
        "  " * (n - row) + _line([*range(1, row + 1), *range(row - 1, 0, -1)])
        for row in range(1, n + 1)
    ]


def pyramid(n: int) -> list[str]:
    """A centred pyramid of stars, two stars wider on each line."""
    return ["  " * (n - row) + _stars(2 * row - 1) for row in range(1, n + 1)]