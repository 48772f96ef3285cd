"""A single placement, and how it is written down for the move history."""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.tictactoe.pieces import Piece, Player
from src.tictactoe.square import Cell

MOVE_SEPARATOR = ":"


@dataclass(frozen=True)
class Move:
    piece: Piece
    cell: Cell

    @property
    def player(self) -> Player:
        return self.piece.owner

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        <player>:<column>:<row>:<weight>
        ex. "X:0:2:10" --> X places a piece with weight 10 on column 0, row 2.
        """
        parts = notation.strip().split(MOVE_SEPARATOR)
        if len(parts) != 4:
            raise InvalidNotationError(
                f"Move notation {notation!r} must have 4 parts separated by {MOVE_SEPARATOR!r}."
            )
        symbol, column, row, weight = parts
        try:
            cell = Cell(int(column), int(row))
            piece = Piece(Player.from_symbol(symbol), int(weight))
        except ValueError:
            raise InvalidNotationError(
                f"Cannot read column, row and weight from {notation!r}."
            ) from None
        return cls(piece, cell)

    def to_notation(self) -> str:
        return MOVE_SEPARATOR.join(
            [
                self.piece.to_symbol(),
                str(self.cell.column),
                str(self.cell.row),
                str(self.piece.weight),
            ]
        )
