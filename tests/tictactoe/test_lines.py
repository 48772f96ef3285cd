"""Unit tests for /src/tictactoe/lines.py"""

import pytest

from src.tictactoe.lines import (
    Direction,
    all_lines,
    anti_diagonal,
    column_line,
    lines_through,
    main_diagonal,
    row_line,
)
from src.tictactoe.square import Cell


def test_row_line() -> None:
    line = row_line(1, 3)
    assert line.direction == Direction.ROW
    assert line.cells == (Cell(0, 1), Cell(1, 1), Cell(2, 1))


def test_column_line() -> None:
    line = column_line(2, 4)
    assert line.direction == Direction.COLUMN
    assert line.cells == (Cell(2, 0), Cell(2, 1), Cell(2, 2), Cell(2, 3))


def test_main_diagonal_runs_downward() -> None:
    assert main_diagonal(3).cells == (Cell(0, 0), Cell(1, 1), Cell(2, 2))


def test_anti_diagonal_runs_upward() -> None:
    assert anti_diagonal(3).cells == (Cell(0, 2), Cell(1, 1), Cell(2, 0))


@pytest.mark.parametrize("size", [3, 4, 5, 8])
def test_lines_have_full_board_length(size: int) -> None:
    lines = all_lines(size)
    assert len(lines) == 2 * size + 2
    assert all(len(line.cells) == size for line in lines)


def test_corner_cell_lies_on_three_lines() -> None:
    lines = lines_through(Cell(0, 0), 3)
    assert [line.direction for line in lines] == [
        Direction.ROW,
        Direction.COLUMN,
        Direction.MAIN_DIAGONAL,
    ]


def test_other_corner_lies_on_anti_diagonal() -> None:
    lines = lines_through(Cell(0, 3), 4)
    assert [line.direction for line in lines] == [
        Direction.ROW,
        Direction.COLUMN,
        Direction.ANTI_DIAGONAL,
    ]


def test_center_of_odd_board_lies_on_both_diagonals() -> None:
    lines = lines_through(Cell(2, 2), 5)
    assert {line.direction for line in lines} == set(Direction)


def test_edge_cell_lies_on_row_and_column_only() -> None:
    lines = lines_through(Cell(1, 0), 3)
    assert [line.direction for line in lines] == [Direction.ROW, Direction.COLUMN]


@pytest.mark.parametrize("size", [3, 4, 5])
def test_every_line_through_a_cell_contains_it(size: int) -> None:
    for column in range(size):
        for row in range(size):
            cell = Cell(column, row)
            for line in lines_through(cell, size):
                assert cell in line.cells


@pytest.mark.parametrize("size", [3, 4, 5])
def test_lines_through_are_exactly_the_lines_containing_the_cell(size: int) -> None:
    """The scoped scan may only skip lines that cannot contain the placed cell."""
    for column in range(size):
        for row in range(size):
            cell = Cell(column, row)
            expected = [line for line in all_lines(size) if cell in line.cells]
            assert sorted(lines_through(cell, size), key=repr) == sorted(expected, key=repr)
