"""Defines the players and the pieces they place on the board"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidNotationError


class Player(Enum):
    X = auto()
    O = auto()  # noqa: E741

    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        if symbol.upper() not in cls.__members__:
            raise InvalidNotationError(
                f"Unknown player symbol {symbol!r}. Pick one from {','.join(cls.__members__)}."
            )
        return cls[symbol.upper()]

    def to_symbol(self) -> str:
        return self.name


@dataclass(frozen=True)
class Piece:
    """
    A placed token.

    NOTE: `weight` is whatever the caller wants it to be. The rules never look at it, the board just keeps it around.
    """

    owner: Player
    weight: int = 0

    def to_symbol(self) -> str:
        return self.owner.to_symbol()
