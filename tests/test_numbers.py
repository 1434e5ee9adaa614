import pytest

from rowart import numbers


def _ints(row):
    return [int(token) for token in row.split()]


def _flatten(rows):
    return [value for row in rows for value in _ints(row)]


@pytest.mark.parametrize("size", [0, -1, -5])
def test_non_positive_size_gives_no_rows(size):
    results = [
        numbers.alternating_binary_triangle(size),
        numbers.parity_binary_triangle(size),
        numbers.consecutive_triangle(size),
        numbers.consecutive_odd_triangle(size),
        numbers.counting_triangle(size),
        numbers.inverted_counting_triangle(size),
        numbers.odd_triangle(size),
        numbers.number_pyramid(size),
        numbers.palindrome_number_pyramid(size),
        numbers.number_table(size),
        numbers.reflected_number_table(size),
        numbers.min_grid(size),
    ]
    assert all(rows == [] for rows in results)


def test_non_integer_size_is_rejected():
    with pytest.raises(TypeError):
        numbers.alternating_binary_triangle("3")
    with pytest.raises(TypeError):
        numbers.parity_binary_triangle("3")
    with pytest.raises(TypeError):
        numbers.consecutive_triangle("3")
    with pytest.raises(TypeError):
        numbers.consecutive_odd_triangle("3")
    with pytest.raises(TypeError):
        numbers.counting_triangle("3")
    with pytest.raises(TypeError):
        numbers.inverted_counting_triangle("3")
    with pytest.raises(TypeError):
        numbers.odd_triangle("3")
    with pytest.raises(TypeError):
        numbers.number_pyramid("3")
    with pytest.raises(TypeError):
        numbers.palindrome_number_pyramid("3")
    with pytest.raises(TypeError):
        numbers.number_table("3")
    with pytest.raises(TypeError):
        numbers.reflected_number_table("3")
    with pytest.raises(TypeError):
        numbers.min_grid("3")


@pytest.mark.parametrize("size", [1, 4, 7])
def test_every_row_ends_with_cell_separator(size):
    results = [
        numbers.alternating_binary_triangle(size),
        numbers.parity_binary_triangle(size),
        numbers.consecutive_triangle(size),
        numbers.consecutive_odd_triangle(size),
        numbers.counting_triangle(size),
        numbers.inverted_counting_triangle(size),
        numbers.odd_triangle(size),
        numbers.number_pyramid(size),
        numbers.palindrome_number_pyramid(size),
        numbers.number_table(size),
        numbers.reflected_number_table(size),
        numbers.min_grid(size),
    ]
    for rows in results:
        assert rows
        assert all(row.endswith(" ") for row in rows)


def test_counting_triangle_small():
    assert numbers.counting_triangle(3) == ["1 ", "1 2 ", "1 2 3 "]


@pytest.mark.parametrize("size", [1, 5, 12])
def test_counting_triangle_rows_count_up_from_one(size):
    rows = numbers.counting_triangle(size)
    assert len(rows) == size
    for length, row in enumerate(rows, start=1):
        values = _ints(row)
        assert len(values) == length
        assert values[0] == 1
        assert all(b - a == 1 for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("size", [1, 6, 11])
def test_inverted_counting_triangle_mirrors_counting_triangle(size):
    assert numbers.inverted_counting_triangle(size) == list(
        reversed(numbers.counting_triangle(size))
    )


@pytest.mark.parametrize("size", [1, 5, 9])
def test_odd_triangle_holds_odd_runs(size):
    rows = numbers.odd_triangle(size)
    assert len(rows) == size
    for length, row in enumerate(rows, start=1):
        values = _ints(row)
        assert len(values) == length
        assert values[0] == 1
        assert all(value % 2 == 1 for value in values)
        assert all(b - a == 2 for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("size", [1, 4, 10])
def test_consecutive_triangle_runs_on_between_rows(size):
    rows = numbers.consecutive_triangle(size)
    assert [len(_ints(row)) for row in rows] == list(range(1, size + 1))
    flat = _flatten(rows)
    assert flat[0] == 1
    assert all(b - a == 1 for a, b in zip(flat, flat[1:]))


@pytest.mark.parametrize("size", [1, 4, 10])
def test_consecutive_odd_triangle_runs_on_between_rows(size):
    rows = numbers.consecutive_odd_triangle(size)
    assert [len(_ints(row)) for row in rows] == list(range(1, size + 1))
    flat = _flatten(rows)
    assert flat[0] == 1
    assert all(value % 2 == 1 for value in flat)
    assert all(b - a == 2 for a, b in zip(flat, flat[1:]))


@pytest.mark.parametrize("size", [1, 2, 5, 8])
def test_binary_triangles_agree(size):
    assert numbers.alternating_binary_triangle(
        size
    ) == numbers.parity_binary_triangle(size)


@pytest.mark.parametrize("size", [2, 6, 9])
def test_alternating_binary_triangle_alternates(size):
    rows = numbers.alternating_binary_triangle(size)
    assert len(rows) == size
    firsts = [_ints(row)[0] for row in rows]
    assert all(a != b for a, b in zip(firsts, firsts[1:]))
    assert firsts[0] == 1
    for length, row in enumerate(rows, start=1):
        values = _ints(row)
        assert len(values) == length
        assert set(values) <= {0, 1}
        assert all(a != b for a, b in zip(values, values[1:]))
        assert values[-1] == 1


@pytest.mark.parametrize("size", [1, 4, 5])
def test_number_pyramid_shape(size):
    rows = numbers.number_pyramid(size)
    assert len(rows) == size
    for level, row in enumerate(rows, start=1):
        indent = len(row) - len(row.lstrip(" "))
        assert indent == 2 * (size - level)
        values = _ints(row)
        assert len(values) == 2 * level - 1
        assert values[0] == 1
        assert all(b - a == 1 for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("size", [1, 4, 9])
def test_palindrome_number_pyramid_rows_are_palindromes(size):
    rows = numbers.palindrome_number_pyramid(size)
    assert len(rows) == size
    for level, row in enumerate(rows, start=1):
        indent = len(row) - len(row.lstrip(" "))
        assert indent == 2 * (size - level)
        values = _ints(row)
        assert values == values[::-1]
        assert max(values) == level
        assert len(values) == 2 * level - 1


def test_min_grid_small():
    assert numbers.min_grid(2) == ["1 1 ", "1 2 "]


@pytest.mark.parametrize("size", [1, 5, 9])
def test_min_grid_is_symmetric(size):
    grid = [_ints(row) for row in numbers.min_grid(size)]
    assert len(grid) == size
    assert all(len(row) == size for row in grid)
    for i, row in enumerate(grid):
        assert row[i] == i + 1
        for j, value in enumerate(row):
            assert value == grid[j][i]
    assert set(grid[0]) == {1}


@pytest.mark.parametrize("size", [1, 3, 5])
def test_number_table_keeps_columns_of_top_row(size):
    rows = numbers.number_table(size)
    assert len(rows) == size + 1
    top = rows[0]
    values = _ints(top)
    assert values[0] == 1
    assert len(values) == 2 * size - 1
    assert all(b - a == 1 for a, b in zip(values, values[1:]))
    for row in rows[1:]:
        assert len(row) == len(top)
        for column, char in enumerate(row):
            if char != " ":
                assert char == top[column]
    assert rows[-1].strip() == ""


@pytest.mark.parametrize("size", [2, 4, 6])
def test_number_table_gap_widens(size):
    rows = numbers.number_table(size)[1:]
    counts = [len(_ints(row)) for row in rows]
    assert counts == sorted(counts, reverse=True)
    assert all(a - b == 2 for a, b in zip(counts, counts[1:]))


def test_reflected_number_table_top_row():
    assert numbers.reflected_number_table(3)[0] == "1 2 3 2 1 "


@pytest.mark.parametrize("size", [1, 4, 7])
def test_reflected_number_table_rows_mirror(size):
    rows = numbers.reflected_number_table(size)
    assert len(rows) == size + 1
    assert max(_ints(rows[0])) == size
    width = len(rows[0])
    for row in rows:
        assert len(row) == width
        values = _ints(row)
        assert values == values[::-1]
    for level, row in enumerate(rows[1:], start=1):
        side = size - level
        values = _ints(row)
        assert len(values) == 2 * side
        if side:
            assert values[0] == 1
            assert max(values) == side