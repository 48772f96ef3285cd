"""
Geometry of the lines that can win a game.

A line is always the full length of the board: a row, a column, or one of the two long diagonals.
There is no "k in a row" here, so a 5x5 board needs 5 of the same pieces in a line.
"""

from dataclasses import dataclass
from enum import Enum, auto

from src.tictactoe.square import Cell


class Direction(Enum):
    ROW = auto()
    COLUMN = auto()
    MAIN_DIAGONAL = auto()  # (0, 0) -> (n-1, n-1), downward
    ANTI_DIAGONAL = auto()  # (0, n-1) -> (n-1, 0), upward


@dataclass(frozen=True)
class Line:
    direction: Direction
    cells: tuple[Cell, ...]


def row_line(row: int, size: int) -> Line:
    return Line(Direction.ROW, tuple(Cell(column, row) for column in range(size)))


def column_line(column: int, size: int) -> Line:
    return Line(Direction.COLUMN, tuple(Cell(column, row) for row in range(size)))


def main_diagonal(size: int) -> Line:
    return Line(Direction.MAIN_DIAGONAL, tuple(Cell(i, i) for i in range(size)))


def anti_diagonal(size: int) -> Line:
    return Line(
        Direction.ANTI_DIAGONAL, tuple(Cell(i, size - 1 - i) for i in range(size))
    )


def on_main_diagonal(cell: Cell) -> bool:
    return cell.column == cell.row


def on_anti_diagonal(cell: Cell, size: int) -> bool:
    return cell.column + cell.row == size - 1


def lines_through(cell: Cell, size: int) -> list[Line]:
    """
    Only these lines can become a winning line when a piece is placed on `cell`.
    ----

    Always the row and the column of the cell, plus the diagonal(s) the cell happens to lie on.
    (The center cell of an odd-sized board lies on both diagonals.)
    """
    lines = [row_line(cell.row, size), column_line(cell.column, size)]
    if on_main_diagonal(cell):
        lines.append(main_diagonal(size))
    if on_anti_diagonal(cell, size):
        lines.append(anti_diagonal(size))
    return lines


def all_lines(size: int) -> list[Line]:
    """Every line on the board: all rows, then all columns, then both diagonals."""
    return (
        [row_line(row, size) for row in range(size)]
        + [column_line(column, size) for column in range(size)]
        + [main_diagonal(size), anti_diagonal(size)]
    )
