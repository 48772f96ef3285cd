"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"


# --- NOTE: the domain layer has its own Player enum (src/tictactoe/pieces.py). Mark is how a player is spelled once it leaves the domain.


class Mark(StrEnum):
    X = "X"
    O = "O"  # noqa: E741
