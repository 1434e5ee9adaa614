"""Number patterns: triangles, pyramids, tables and grids made of digits.

Every function takes a size ``n`` and returns the rows of the pattern as a
list of strings. Each cell is written as its value followed by a single
space, and each blank cell is two spaces. A size of zero or less gives no
rows.
"""

from collections.abc import Iterable
from itertools import count

__all__ = [
    "alternating_binary_triangle",
    "parity_binary_triangle",
    "consecutive_triangle",
    "consecutive_odd_triangle",
    "counting_triangle",
    "inverted_counting_triangle",
    "odd_triangle",
    "number_pyramid",
    "palindrome_number_pyramid",
    "number_table",
    "reflected_number_table",
    "min_grid",
]

_BLANK = "  "


def _row(cells: Iterable[object], indent: int = 0) -> str:
    """Render cells as a row, preceded by ``indent`` blank cells."""
    return _BLANK * indent + "".join(f"{cell} " for cell in cells)


def alternating_binary_triangle(n: int) -> list[str]:
    """Triangle of 0s and 1s where odd rows start with 1 and even rows with 0."""
    return [
        _row(1 if (i + j) % 2 == 0 else 0 for j in range(1, i + 1))
        for i in range(1, n + 1)
    ]


def parity_binary_triangle(n: int) -> list[str]:
    """Triangle of 0s and 1s: 1 on the diagonal and where row plus column is even."""
    return [
        _row(1 if i == j or (i + j) % 2 == 0 else 0 for j in range(1, i + 1))
        for i in range(1, n + 1)
    ]


def consecutive_triangle(n: int) -> list[str]:
    """Triangle filled with 1, 2, 3, ... running on from row to row."""
    numbers = count(1)
    return [_row(next(numbers) for _ in range(i)) for i in range(1, n + 1)]


def consecutive_odd_triangle(n: int) -> list[str]:
    """Triangle filled with 1, 3, 5, ... running on from row to row."""
    numbers = count(1, 2)
    return [_row(next(numbers) for _ in range(i)) for i in range(1, n + 1)]


def counting_triangle(n: int) -> list[str]:
    """Left triangle whose row ``i`` counts from 1 to ``i``."""
    return [_row(range(1, i + 1)) for i in range(1, n + 1)]


def inverted_counting_triangle(n: int) -> list[str]:
    """Left triangle whose row ``i`` counts from 1 to ``n + 1 - i``."""
    return [_row(range(1, n + 2 - i)) for i in range(1, n + 1)]


def odd_triangle(n: int) -> list[str]:
    """Left triangle whose row ``i`` holds the first ``i`` odd numbers."""
    return [_row(range(1, 2 * i, 2)) for i in range(1, n + 1)]


def number_pyramid(n: int) -> list[str]:
    """Centred pyramid whose row ``i`` counts from 1 to ``2i - 1``."""
    return [_row(range(1, 2 * i), indent=n - i) for i in range(1, n + 1)]


def palindrome_number_pyramid(n: int) -> list[str]:
    """Centred pyramid whose row ``i`` counts up to ``i`` and back down to 1."""
    return [
        _row([*range(1, i + 1), *range(i - 1, 0, -1)], indent=n - i)
        for i in range(1, n + 1)
    ]


def number_table(n: int) -> list[str]:
    """A full top row 1..2n-1 over a table whose gap widens downwards.

    Numbers keep their column position, so the cells that remain on each
    lower row show the same numbers as the top row above them.
    """
    if n < 1:
        return []
    rows = [_row(range(1, 2 * n))]
    for i in range(1, n + 1):
        side = n - i
        gap = 2 * i - 1
        right_start = side + gap + 1
        rows.append(
            _row(range(1, side + 1))
            + _BLANK * gap
            + _row(range(right_start, right_start + side))
        )
    return rows


def reflected_number_table(n: int) -> list[str]:
    """A top row 1..n..1 over a table whose sides count up and mirror back down."""
    if n < 1:
        return []
    rows = [_row([*range(1, n + 1), *range(n - 1, 0, -1)])]
    for i in range(1, n + 1):
        side = n - i
        gap = 2 * i - 1
        rows.append(
            _row(range(1, side + 1)) + _BLANK * gap + _row(range(side, 0, -1))
        )
    return rows


def min_grid(n: int) -> list[str]:
    """Square grid where each cell holds the smaller of its row and column."""
    return [_row(min(i, j) for j in range(1, n + 1)) for i in range(1, n + 1)]