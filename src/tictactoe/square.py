"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """Zero-based (column, row). Row 0 is the top row when the board gets written down."""

    column: int
    row: int

    def is_within_bounds(self, size: int) -> bool:
        return (0 <= self.column < size) and (0 <= self.row < size)

    def index(self, size: int) -> int:
        """Position of this cell in the flat list the board stores its cells in."""
        return self.row * size + self.column

    @classmethod
    def from_index(cls, index: int, size: int) -> Cell:
        row, column = divmod(index, size)
        return cls(column, row)

    def as_tuple(self) -> tuple[int, int]:
        return (self.column, self.row)
