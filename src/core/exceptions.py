"""
Exceptions shared by all layers.

Everything derives from GameError, so the (future) API layer can catch a single type and translate it into a response.
"""

from enum import StrEnum


class MoveRejection(StrEnum):
    """Why a move was not accepted. Used both as the return value of Game.check_move and as payload of IllegalMoveError."""

    OUT_OF_BOUNDS = "out of bounds"
    CELL_OCCUPIED = "cell occupied"
    GAME_OVER = "game already over"
    NOT_YOUR_TURN = "not your turn"


class GameError(Exception):
    """Base class for anything that goes wrong while handling a game."""


class IllegalMoveError(GameError):
    """A move was submitted that the rules do not allow. The board is left untouched."""

    reason: MoveRejection

    def __init__(self, message: str, reason: MoveRejection) -> None:
        super().__init__(message)
        self.reason = reason


class OutOfBoundsError(IllegalMoveError):
    def __init__(self, message: str) -> None:
        super().__init__(message, MoveRejection.OUT_OF_BOUNDS)


class CellOccupiedError(IllegalMoveError):
    def __init__(self, message: str) -> None:
        super().__init__(message, MoveRejection.CELL_OCCUPIED)


class GameOverError(IllegalMoveError):
    def __init__(self, message: str) -> None:
        super().__init__(message, MoveRejection.GAME_OVER)


class NotYourTurnError(IllegalMoveError):
    def __init__(self, message: str) -> None:
        super().__init__(message, MoveRejection.NOT_YOUR_TURN)


# NOTE: lookup used by Game.move_to to turn the reason of check_move into the matching exception
REJECTION_ERRORS: dict[MoveRejection, type[IllegalMoveError]] = {
    MoveRejection.OUT_OF_BOUNDS: OutOfBoundsError,
    MoveRejection.CELL_OCCUPIED: CellOccupiedError,
    MoveRejection.GAME_OVER: GameOverError,
    MoveRejection.NOT_YOUR_TURN: NotYourTurnError,
}


class GameStateError(GameError):
    """The game or board cannot be created/restored in the requested state."""


class InvalidNotationError(GameError):
    """Board or move notation could not be parsed."""


class InvalidRequestError(GameError):
    """Request data rejected at the boundary (before reaching the domain layer)."""


class RepositoryError(GameError):
    """Persistence layer could not find / store the requested game."""
