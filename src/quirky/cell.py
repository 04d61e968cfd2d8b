"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.core.config import settings


@dataclass(frozen=True)
class Cell:
    row: int
    column: int

    def shifted(self, direction: Direction, offset: int) -> Cell:
        d_row, d_column = direction.value
        return Cell(self.row + d_row * offset, self.column + d_column * offset)

    def is_within_bounds(self, board_size: int = settings.board_size) -> bool:
        return (0 <= self.row < board_size) and (0 <= self.column < board_size)


class Direction(Enum):
    """The four ways a line can run away from a cell. Order is the order in which neighbors are scanned."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
