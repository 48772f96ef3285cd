"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns the board, whose turn it is and the outcome, and it is the only thing that mutates the board.
"""

import logging
from typing import Optional, Self

from src.core.exceptions import (
    REJECTION_ERRORS,
    GameStateError,
    MoveRejection,
)
from src.core.models import GameModel
from src.core.shared_types import Status
from src.tictactoe.board import Board
from src.tictactoe.lines import Line, lines_through
from src.tictactoe.moves import Move
from src.tictactoe.pieces import Piece, Player
from src.tictactoe.square import Cell

logger = logging.getLogger(__name__)


class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    moves: list[Move]
    turn: Player
    strict_turns: bool
    winning_line: Optional[Line]

    def __init__(self, size: int, strict_turns: bool = True) -> None:
        """
        Start an empty game on a `size` x `size` board. X always moves first.

        With `strict_turns` switched off, the turn order is not a legality condition: any player may place the next piece,
        and the player to move next is simply the opponent of whoever moved last.
        """
        if size < 1:
            raise GameStateError(f"Board size must be a positive integer, got {size}.")
        self.board = Board.empty(size)
        self.moves = []
        self.turn = Player.X
        self.strict_turns = strict_turns
        self.winning_line = None
        self._over = False

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """
        Define how to construct a Game from the information the Service layer actually has
        ----

        The move list is the source of truth: the game gets rebuilt by playing the moves again.
        The stored position / status / next player must agree with the rebuilt game, otherwise the record is corrupt.
        """
        game = cls(model.board_size, strict_turns=model.strict_turns)
        for move in (Move.from_notation(notation) for notation in model.moves):
            if (rejection := game.check_move(move.player, *move.cell.as_tuple())) is not None:
                raise GameStateError(
                    f"Stored move {move.to_notation()!r} cannot be replayed: {rejection}."
                )
            game.move_to(move.piece, *move.cell.as_tuple())

        rebuilt = game.to_model()
        for attribute in ("position", "next_player", "status", "winner"):
            if getattr(rebuilt, attribute) != getattr(model, attribute):
                raise GameStateError(
                    f"Stored {attribute} {getattr(model, attribute)!r} does not match the moves played "
                    f"(expected {getattr(rebuilt, attribute)!r})."
                )
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        winner = self.winner
        return GameModel(
            board_size=self.size,
            position=self.board.to_notation(),
            moves=[move.to_notation() for move in self.moves],
            next_player=self.turn.to_symbol(),
            status=self.status.value,
            winner=winner.to_symbol() if winner else None,
            strict_turns=self.strict_turns,
        )

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def move_count(self) -> int:
        return len(self.moves)

    @property
    def winner(self) -> Optional[Player]:
        """The owner of the winning line. Cells are never cleared, so once set this cannot change."""
        if self.winning_line is None:
            return None
        return self.board.line_owner(self.winning_line)

    @property
    def status(self) -> Status:
        if self.winning_line is not None:
            return Status.WON
        if self._over:
            return Status.DRAW
        return Status.IN_PROGRESS

    def is_game_over(self) -> bool:
        return self._over

    def is_draw(self) -> bool:
        return self.status == Status.DRAW

    def get_next_player(self) -> Player:
        """Whose move it is. After the game ended this keeps returning whatever it was after the final move."""
        return self.turn

    def check_move(self, player: Player, column: int, row: int) -> Optional[MoveRejection]:
        """
        Reason why `player` cannot move to (column, row), or None if the move is legal.
        ----

        Checked in this order, the first failing check is reported:
        1. the game must not be over (a finished game accepts no moves, not from the winner either)
        2. the cell must be on the board
        3. the cell must be empty
        4. it must be `player`'s turn (only with strict turns)
        """
        if self._over:
            return MoveRejection.GAME_OVER

        cell = Cell(column, row)
        if not self.board.is_within_bounds(cell):
            return MoveRejection.OUT_OF_BOUNDS

        if self.board.is_occupied(cell):
            return MoveRejection.CELL_OCCUPIED

        if self.strict_turns and player != self.turn:
            return MoveRejection.NOT_YOUR_TURN

        return None

    def can_move_to(self, player: Player, column: int, row: int) -> bool:
        return self.check_move(player, column, row) is None

    def legal_moves(self, player: Optional[Player] = None) -> list[Cell]:
        """All cells `player` (default: the player to move) could place a piece on right now."""
        player = player or self.turn
        return [
            cell
            for cell in self.board.empty_cells()
            if self.can_move_to(player, cell.column, cell.row)
        ]

    def move_to(self, piece: Piece, column: int, row: int) -> None:
        """
        Attempt to place `piece` on (column, row)
        -----

        Raises the IllegalMoveError matching the reason of check_move, without touching the game.
        Otherwise:
        1. place the piece on the board
        2. record the move
        3. check the lines through the new piece for a winner / check for a full board
        4. hand the turn to the opponent (also after the final move)
        """
        rejection = self.check_move(piece.owner, column, row)
        if rejection is not None:
            logger.debug(
                "Rejected %s on (%d, %d): %s", piece.owner.name, column, row, rejection
            )
            raise REJECTION_ERRORS[rejection](
                f"{piece.owner.name} cannot move to ({column}, {row}): {rejection}."
            )

        cell = Cell(column, row)
        self.board.place_piece(piece, cell)
        self._update_moves(Move(piece, cell))
        logger.debug("%s placed a piece on (%d, %d)", piece.owner.name, column, row)

        self._update_game_status(cell, piece.owner)
        self.turn = piece.owner.other()

    # -- PRIVATE HELPERS ---
    def _update_moves(self, move: Move) -> None:
        self.moves.append(move)
        # contract: never more moves than cells
        assert self.move_count <= self.size * self.size

    def _update_game_status(self, cell: Cell, mover: Player) -> None:
        """Performs checks to see if game has ended and changes status accordingly.

        NOTE only lines through the cell that was just taken can have become complete with this move.
        """
        winning_line = self._find_winning_line(cell, mover)
        if winning_line is not None:
            self.winning_line = winning_line
            self._over = True
            logger.info(
                "%s wins on %s after %d moves",
                mover.name,
                winning_line.direction.name.lower(),
                self.move_count,
            )
            return

        if self.board.is_full():
            self._over = True
            logger.info("Board full after %d moves, game is a draw", self.move_count)

    def _find_winning_line(self, cell: Cell, mover: Player) -> Optional[Line]:
        for line in lines_through(cell, self.size):
            if self.board.line_owner(line) == mover:
                return line
        return None
