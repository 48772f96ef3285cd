"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Mark, Status

Coordinates = tuple[int, int]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    board_size: Optional[int] = None
    strict_turns: Optional[bool] = None

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: Optional[int]) -> Optional[int]:
        # None: service picks the configured default size
        if value is None:
            return value

        if value < 1:
            raise InvalidRequestError(
                f"Board size must be a positive integer, got {value}."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player: Optional[Mark] = None


class MoveRequest(BaseModel):
    game_id: UUID
    player: Mark
    column: int
    row: int
    weight: int = 0

    @field_validator(*["column", "row"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        # NOTE: the upper bound depends on the game's board size, which only the Game knows. That one raises OutOfBoundsError.
        if value < 0:
            raise InvalidRequestError(
                f"Coordinates are zero-based, cannot interpret {value!r}."
            )
        return value


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board_size: int
    position: str
    next_player: Mark
    status: Status
    winner: Optional[Mark]
    move_history: list[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player: Mark
    legal_moves: list[Coordinates]
