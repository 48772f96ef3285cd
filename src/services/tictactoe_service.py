"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import threading
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.core.config import Settings
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.db.repository import GameRepository
from src.tictactoe.game import Game
from src.tictactoe.pieces import Piece, Player

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe games."""

    def __init__(
        self, repository: GameRepository, settings: Optional[Settings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings or Settings()
        # load -> check -> move -> store is one critical section, otherwise two callers can both pass the legality check
        self._lock = threading.Lock()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Create an empty game. Size and turn enforcement that are not requested fall back to the configured defaults."""
        board_size = request.board_size or self.settings.board_size
        strict_turns = (
            request.strict_turns
            if request.strict_turns is not None
            else self.settings.strict_turns
        )
        new_game = Game(board_size, strict_turns=strict_turns)

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s (board size %d)", game_id, board_size)

        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Cells the requested player (default: the player to move) may place a piece on."""
        game = Game.from_model(self._fetch_game(request.game_id))
        player = (
            Player.from_symbol(request.player)
            if request.player is not None
            else game.get_next_player()
        )
        return LegalMovesResponse(
            game_id=request.game_id,
            player=Mark(player.to_symbol()),
            legal_moves=[cell.as_tuple() for cell in game.legal_moves(player)],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. An IllegalMoveError from the Game is passed on unchanged, nothing gets stored then."""
        piece = Piece(Player.from_symbol(request.player), request.weight)

        with self._lock:
            game = Game.from_model(self._fetch_game(request.game_id))
            game.move_to(piece, request.column, request.row)
            after_move = game.to_model()
            self.repo.update_game(request.game_id, after_move)

        if game.is_game_over():
            logger.info(
                "Game %s finished: %s", request.game_id, self._describe_outcome(game)
            )
        return self._create_game_response(request.game_id, after_move)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self._lock:
            deleted = self.repo.delete_game(request.game_id)
        if deleted is not None:
            logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            board_size=model.board_size,
            position=model.position,
            next_player=Mark(model.next_player),
            status=Status(model.status),
            winner=Mark(model.winner) if model.winner else None,
            move_history=model.moves,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model

    @staticmethod
    def _describe_outcome(game: Game) -> str:
        winner = game.winner
        return f"{winner.name} won" if winner else "draw"
