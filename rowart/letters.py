"""Letter patterns: triangles, squares, pyramids and tables made of letters.

Every function takes a size ``n`` and returns the rows of the pattern as a
list of strings. Position ``k`` (counting from 1) is shown as the character
``k`` places past ``@``, so 1 is ``A``, 2 is ``B`` and so on. Each cell is
written as its character followed by a single space, and each blank cell is
two spaces. A size of zero or less gives no rows.
"""

from collections.abc import Iterable

__all__ = [
    "letter_triangle",
    "letter_square",
    "letter_pyramid",
    "mixed_triangle",
    "right_letter_triangle",
    "letter_table",
    "inverted_letter_triangle",
    "inverted_mixed_triangle",
    "palindrome_letter_pyramid",
]

_BLANK = "  "


def _letter(position: int) -> str:
    """The letter at 1-based ``position``: 1 is A, 2 is B, ..."""
    return chr(position + 64)


def _row(cells: Iterable[object], indent: int = 0) -> str:
    """Render cells as a row, preceded by ``indent`` blank cells."""
    return _BLANK * indent + "".join(f"{cell} " for cell in cells)


def _letters(positions: Iterable[int]) -> list[str]:
    return [_letter(p) for p in positions]


def letter_triangle(n: int) -> list[str]:
    """Left triangle whose row ``i`` runs from A to the ``i``-th letter."""
    return [_row(_letters(range(1, i + 1))) for i in range(1, n + 1)]


def letter_square(n: int) -> list[str]:
    """Square of ``n`` identical rows, each running from A to the ``n``-th letter."""
    return [_row(_letters(range(1, n + 1))) for _ in range(n)]


def letter_pyramid(n: int) -> list[str]:
    """Centred pyramid whose row ``i`` runs from A to the ``(2i - 1)``-th letter."""
    return [_row(_letters(range(1, 2 * i)), indent=n - i) for i in range(1, n + 1)]


def mixed_triangle(n: int) -> list[str]:
    """Left triangle with numbers on odd rows and letters on even rows."""
    return [
        _row(_letters(range(1, i + 1)) if i % 2 == 0 else range(1, i + 1))
        for i in range(1, n + 1)
    ]


def right_letter_triangle(n: int) -> list[str]:
    """Right-aligned triangle whose row ``i`` runs from A to the ``i``-th letter."""
    return [_row(_letters(range(1, i + 1)), indent=n - i) for i in range(1, n + 1)]


def letter_table(n: int) -> list[str]:
    """A full top row of ``2n - 1`` letters over a table whose gap widens downwards.

    Letters keep their column position, so the cells that remain on each
    lower row show the same letters as the top row above them.
    """
    if n < 1:
        return []
    rows = [_row(_letters(range(1, 2 * n)))]
    for i in range(1, n + 1):
        side = n - i
        gap = 2 * i - 1
        right_start = side + gap + 1
        rows.append(
            _row(_letters(range(1, side + 1)))
            + _BLANK * gap
            + _row(_letters(range(right_start, right_start + side)))
        )
    return rows


def inverted_letter_triangle(n: int) -> list[str]:
    """Left triangle whose row ``i`` runs from A to the ``(n + 1 - i)``-th letter."""
    return [_row(_letters(range(1, n + 2 - i))) for i in range(1, n + 1)]


def inverted_mixed_triangle(n: int) -> list[str]:
    """Shrinking left triangle with numbers on odd rows and letters on even rows."""
    return [
        _row(_letters(range(1, n + 2 - i)) if i % 2 == 0 else range(1, n + 2 - i))
        for i in range(1, n + 1)
    ]


def palindrome_letter_pyramid(n: int) -> list[str]:
    """Centred pyramid whose row ``i`` runs up to the ``i``-th letter and back to A."""
    return [
        _row(_letters([*range(1, i + 1), *range(i - 1, 0, -1)]), indent=n - i)
        for i in range(1, n + 1)
    ]