"""The Game board keeps track of which piece sits where. It knows nothing about turns; that is the Game's job."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidNotationError
from src.tictactoe.lines import Line, all_lines
from src.tictactoe.pieces import Piece, Player
from src.tictactoe.square import Cell

EMPTY_SYMBOL = "."
ROW_SEPARATOR = "/"


@dataclass
class Board:
    size: int
    cells: list[Optional[Piece]]

    @classmethod
    def empty(cls, size: int) -> Self:
        return cls(size, [None] * (size * size))

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """Construct a board from its written form.

        Rows are written top (row 0) to bottom and separated by slashes, every cell is one character:
        X..
        .O.   -->   "X../.O./..X"
        ..X

        NOTE: the notation only records who owns a cell, so every piece gets the default weight.
        """
        rows = notation.split(ROW_SEPARATOR)
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidNotationError(
                f"Board notation {notation!r} does not describe a square board."
            )

        board = cls.empty(size)
        for row_idx, row in enumerate(rows):
            for column_idx, character in enumerate(row):
                if character == EMPTY_SYMBOL:
                    continue
                piece = Piece(Player.from_symbol(character))
                board.place_piece(piece, Cell(column_idx, row_idx))
        return board

    def to_notation(self) -> str:
        return ROW_SEPARATOR.join(self._row_to_notation(row) for row in range(self.size))

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        for column in range(self.size):
            piece = self.piece(Cell(column, row))
            characters.append(piece.to_symbol() if piece else EMPTY_SYMBOL)
        return "".join(characters)

    def piece(self, cell: Cell) -> Optional[Piece]:
        return self.cells[cell.index(self.size)]

    def is_within_bounds(self, cell: Cell) -> bool:
        return cell.is_within_bounds(self.size)

    def is_occupied(self, cell: Cell) -> bool:
        return self.piece(cell) is not None

    def place_piece(self, piece: Piece, cell: Cell) -> None:
        """Put a piece on an empty cell. The Game checks the move before calling this, an occupied cell raises GameStateError."""
        # a cell, once taken, is never overwritten
        if self.is_occupied(cell):
            raise GameStateError(f"{cell} is already occupied by {self.piece(cell)}.")
        self.cells[cell.index(self.size)] = piece

    def occupied_count(self) -> int:
        return sum(1 for piece in self.cells if piece is not None)

    def is_full(self) -> bool:
        return all(piece is not None for piece in self.cells)

    def empty_cells(self) -> list[Cell]:
        return [
            Cell.from_index(index, self.size)
            for index, piece in enumerate(self.cells)
            if piece is None
        ]

    def line_owner(self, line: Line) -> Optional[Player]:
        """The player owning every single cell of the line, or None when a cell is empty or the line is mixed."""
        owner: Optional[Player] = None
        for cell in line.cells:
            piece = self.piece(cell)
            if piece is None:
                return None
            if owner is None:
                owner = piece.owner
            elif piece.owner != owner:
                return None
        return owner

    def find_winner(self) -> Optional[tuple[Player, Line]]:
        """Scan the complete board. The Game only scans the lines through the last move; this is the slow reference."""
        for line in all_lines(self.size):
            owner = self.line_owner(line)
            if owner is not None:
                return owner, line
        return None
