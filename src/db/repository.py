"""What the service expects from whatever stores the games. SQLGameRepository is the SQLAlchemy implementation."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """
    Stores GameModel snapshots by game ID.
    ----

    The repository never looks at the game itself: the Game validates the moves, the repository only keeps the latest snapshot.
    """

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Latest snapshot of the game, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a freshly created game. Returns the snapshot as stored and the ID it was stored under."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """
        Replace the snapshot after a move: position, moves, next player, status and winner.

        NOTE: board_size and strict_turns are fixed when the game is created and are never changed here.
        Returns None for an unknown ID.
        """
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove the game. Returns the snapshot that was removed, or None if there was nothing to remove."""
        ...
