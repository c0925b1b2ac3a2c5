import string

import pytest

from drillbook.left_triangles import (
    countdown_triangle,
    descending_from_top_triangle,
    letter_row_triangle,
    number_triangle,
    repeated_row_number_triangle,
    reversed_number_triangle,
    reversed_star_triangle,
    star_triangle,
)


def _growing(rows):
    return [
        countdown_triangle(rows),
        descending_from_top_triangle(rows),
        number_triangle(rows),
        repeated_row_number_triangle(rows),
        letter_row_triangle(rows),
        star_triangle(rows),
    ]


def _shrinking(rows):
    return [reversed_number_triangle(rows), reversed_star_triangle(rows)]


def test_number_triangle_example():
    assert number_triangle(4) == ["1 ", "1 2 ", "1 2 3 ", "1 2 3 4 "]


def test_star_triangle_example():
    assert star_triangle(4) == ["* ", "* * ", "* * * ", "* * * * "]


def test_countdown_triangle_example():
    assert countdown_triangle(4) == ["1 ", "2 1 ", "3 2 1 ", "4 3 2 1 "]


@pytest.mark.parametrize("rows", [0, -1, -4])
def test_non_positive_rows_is_empty(rows):
    assert countdown_triangle(rows) == []
    assert descending_from_top_triangle(rows) == []
    assert number_triangle(rows) == []
    assert repeated_row_number_triangle(rows) == []
    assert letter_row_triangle(rows) == []
    assert star_triangle(rows) == []
    assert reversed_number_triangle(rows) == []
    assert reversed_star_triangle(rows) == []


@pytest.mark.parametrize("rows", [1, 4, 9])
def test_growing_widths(rows):
    for lines in _growing(rows):
        assert [len(line.split()) for line in lines] == list(range(1, rows + 1))
        assert all(line.endswith(" ") for line in lines)


@pytest.mark.parametrize("rows", [1, 4, 9])
def test_shrinking_widths(rows):
    for lines in _shrinking(rows):
        assert [len(line.split()) for line in lines] == list(range(rows, 0, -1))


@pytest.mark.parametrize("rows", [1, 5, 12])
def test_reversed_number_mirrors_number_triangle(rows):
    assert reversed_number_triangle(rows) == list(reversed(number_triangle(rows)))


@pytest.mark.parametrize("rows", [1, 5, 12])
def test_reversed_star_mirrors_star_triangle(rows):
    assert reversed_star_triangle(rows) == list(reversed(star_triangle(rows)))


@pytest.mark.parametrize("rows", [1, 6, 11])
def test_countdown_is_number_triangle_reversed(rows):
    for up, down in zip(number_triangle(rows), countdown_triangle(rows)):
        assert down.split() == list(reversed(up.split()))


@pytest.mark.parametrize("rows", [1, 5, 10])
def test_descending_from_top_starts_at_rows(rows):
    lines = descending_from_top_triangle(rows)
    assert all(line.split()[0] == str(rows) for line in lines)
    assert lines[-1] == countdown_triangle(rows)[-1]
    for shorter, longer in zip(lines, lines[1:]):
        assert longer.startswith(shorter)


@pytest.mark.parametrize("rows", [1, 4, 10])
def test_repeated_row_number(rows):
    for index, line in enumerate(repeated_row_number_triangle(rows), start=1):
        assert set(line.split()) == {str(index)}


@pytest.mark.parametrize("rows", [1, 4, 26])
def test_letter_rows(rows):
    for index, line in enumerate(letter_row_triangle(rows)):
        assert set(line.split()) == {string.ascii_lowercase[index]}


def test_star_triangle_only_stars():
    assert all(set(line.split()) == {"*"} for line in star_triangle(7))