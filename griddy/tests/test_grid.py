import pytest

from griddy.src.core.grid import Grid, GridIndexError, UnequalColumnsError


def test_init_shape():
    grid = Grid.init(10, 8, 0)
    assert grid.rows_len() == 10
    assert grid.cols_len() == 8
    assert grid.shape() == (10, 8)


def test_init_degenerate():
    assert Grid.init(0, 5, 0).shape() == (0, 0)
    assert Grid.init(3, 0, 0).shape() == (3, 0)


def test_init_copies_value():
    grid = Grid.init(2, 2, [])
    grid[0][0].append(1)
    assert grid[0][1] == []
    assert grid[1][0] == []


def test_from_2d_equal_rows():
    grid = Grid.from_2d([[1, 2, 3], [4, 5, 6]])
    assert grid.shape() == (2, 3)
    assert grid[1][2] == 6


def test_from_2d_unequal_rows():
    with pytest.raises(UnequalColumnsError) as exc:
        Grid.from_2d([[1, 2], [1, 2, 3], [1]])
    assert exc.value.lengths == [1, 2, 3]


def test_from_2d_keeps_row_lists():
    rows = [[1, 2], [3, 4]]
    grid = Grid.from_2d(rows)
    assert grid[0] is rows[0]


def test_from_2d_unchecked_allows_ragged():
    grid = Grid.from_2d_unchecked([(1, 2), (3,)])
    assert grid.rows_len() == 2
    assert grid.cols_len() == 2
    assert grid[1] == [3]


def test_from_2d_empty():
    grid = Grid.from_2d([])
    assert grid.shape() == (0, 0)


def test_index():
    grid = Grid.init(10, 8, 0)
    assert grid[0] == [0] * 8
    assert grid[1][0] == 0


def test_index_mut():
    grid = Grid.init(10, 8, 0)
    grid[0][0] = 1
    assert grid[0][0] == 1
    grid[9] = [2] * 8
    assert grid[9] == [2] * 8


def test_index_out_of_bounds():
    grid = Grid.init(3, 3, 0)
    with pytest.raises(GridIndexError) as exc:
        grid[3]
    assert exc.value.index == 3
    assert exc.value.rows == 3
    assert "index 3 out of bounds. Grid has 3 rows." in str(exc.value)
    with pytest.raises(GridIndexError):
        grid[-1]
    with pytest.raises(GridIndexError):
        grid[5] = [1, 1, 1]


def test_column_out_of_bounds():
    grid = Grid.init(3, 3, 0)
    with pytest.raises(IndexError):
        grid[0][3]


def test_get_and_set():
    grid = Grid.from_2d([[1, 2], [3, 4]])
    assert grid.get(1, 0) == 3
    assert grid.get(2, 0) is None
    assert grid.get(0, -1, default=9) == 9
    grid.set(0, 1, 7)
    assert grid[0][1] == 7
    with pytest.raises(IndexError, match="column 2 out of bounds. Row 0 has 2 columns."):
        grid.set(0, 2, 1)
    with pytest.raises(GridIndexError):
        grid.set(2, 0, 1)


def test_rows_iteration():
    grid = Grid.from_2d([[1, 2], [3, 4]])
    assert list(grid.rows()) == [[1, 2], [3, 4]]
    for row in grid:
        row[0] = 0
    assert grid.to_list() == [[0, 2], [0, 4]]


def test_equality_and_repr():
    assert Grid.from_2d([[1]]) == Grid.from_2d([[1]])
    assert Grid.from_2d([[1]]) != Grid.from_2d([[2]])
    assert repr(Grid.init(2, 3, 0)) == "Grid(shape=(2, 3))"


def test_print(capsys):
    Grid.from_2d([[1, 2], [3, 4]]).print()
    assert capsys.readouterr().out == "[1, 2]\n[3, 4]\n"


def test_to_list_is_copy():
    grid = Grid.from_2d([[1, 2]])
    rows = grid.to_list()
    rows[0][0] = 5
    assert grid[0][0] == 1


def test_set_column_error_is_not_row_error():
    grid = Grid.from_2d([[1, 2], [3, 4], [5, 6]])
    with pytest.raises(IndexError) as exc:
        grid.set(1, 5, 0)
    assert not isinstance(exc.value, GridIndexError)
    assert "rows" not in str(exc.value)
