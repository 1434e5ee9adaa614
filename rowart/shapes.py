"""Star shapes: triangles, pyramids, diamonds, rectangles and crosses.

Every function returns the rows of the shape as a list of strings. A filled
cell is ``"* "`` and a blank cell is two spaces. A size of zero or less gives
no rows.
"""

__all__ = [
    "diamond",
    "hollow_rectangle",
    "inverted_right_triangle",
    "pyramid",
    "right_triangle",
    "rhombus",
    "cross",
    "plus_sign",
    "table",
]

_STAR = "* "
_BLANK = "  "


def _cell(filled: bool) -> str:
    return _STAR if filled else _BLANK


def _line(blanks: int, stars: int) -> str:
    return _BLANK * max(blanks, 0) + _STAR * max(stars, 0)


def diamond(n: int) -> list[str]:
    """Diamond of ``n`` rows whose width grows by two per row up to the middle."""
    rows = []
    blanks, stars = n // 2, 1
    middle = n // 2 + 1
    for i in range(1, n + 1):
        rows.append(_line(blanks, stars))
        if i < middle:
            blanks, stars = blanks - 1, stars + 2
        else:
            blanks, stars = blanks + 1, stars - 2
    return rows


def hollow_rectangle(length: int, breadth: int) -> list[str]:
    """Outline of a rectangle ``length`` rows tall and ``breadth`` cells wide."""
    return [
        "".join(
            _cell(i in (1, length) or j in (1, breadth))
            for j in range(1, breadth + 1)
        )
        for i in range(1, length + 1)
    ]


def inverted_right_triangle(n: int) -> list[str]:
    """Right-aligned triangle that starts with ``n`` stars and loses one per row."""
    return [_line(i, n - i) for i in range(n)]


def pyramid(n: int) -> list[str]:
    """Centred pyramid whose row ``i`` holds ``2i - 1`` stars."""
    return [_line(n - i, 2 * i - 1) for i in range(1, n + 1)]


def right_triangle(n: int) -> list[str]:
    """Right-aligned triangle whose row ``i`` holds ``i`` stars."""
    return [_line(n - i, i) for i in range(1, n + 1)]


def rhombus(length: int, breadth: int) -> list[str]:
    """Slanted block of ``length`` rows, each ``breadth`` stars wide."""
    return [_line(length - i, breadth) for i in range(1, length + 1)]


def cross(n: int) -> list[str]:
    """Both diagonals of an ``n`` by ``n`` square."""
    return [
        "".join(_cell(i == j or i + j == n + 1) for j in range(1, n + 1))
        for i in range(1, n + 1)
    ]


def plus_sign(n: int) -> list[str]:
    """A plus sign through the middle row and column of an ``n`` by ``n`` square."""
    if n < 1:
        return []
    middle = (n - 1) // 2 + 1
    return [
        "".join(_cell(i == middle or j == middle) for j in range(1, n + 1))
        for i in range(1, n + 1)
    ]


def table(n: int) -> list[str]:
    """A full top row of ``2n - 1`` stars over legs that narrow as the gap widens."""
    if n < 1:
        return []
    rows = [_STAR * (2 * n - 1)]
    for i in range(1, n + 1):
        side = n - i
        rows.append(_STAR * side + _BLANK * (2 * i - 1) + _STAR * side)
    return rows