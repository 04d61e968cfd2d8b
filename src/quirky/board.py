"""The Game board: which piece sits on which cell, in what order they were placed, and how far the placed tiles reach"""

from dataclasses import dataclass, replace
from typing import Optional, Self

from src.core.config import settings
from src.core.exceptions import AlreadyOccupiedError
from src.quirky.cell import Cell
from src.quirky.pieces import Piece, PlacedTile


@dataclass
class Bounds:
    """Smallest rectangle (in board coordinates) around all placed tiles."""

    top: int
    right: int
    bottom: int
    left: int

    @classmethod
    def around(cls, center: int) -> Self:
        return cls(top=center, right=center, bottom=center, left=center)


class Board:
    """
    Sparse board: only occupied cells are stored.

    `position` and `history` always describe the same set of tiles. The board is append-only, once a cell
    is occupied it keeps its piece.
    """

    def __init__(self, board_size: int = settings.board_size) -> None:
        self.board_size = board_size
        self.position: dict[Cell, Piece] = {}
        self.history: list[PlacedTile] = []
        self._bounds = Bounds.around(board_size // 2)

    @property
    def bounds(self) -> Bounds:
        return replace(self._bounds)

    def piece(self, cell: Cell) -> Optional[Piece]:
        return self.position.get(cell)

    def get(self, row: int, column: int) -> Optional[Piece]:
        """Occupying piece, or None for an empty cell"""
        return self.piece(Cell(row, column))

    def is_within_bounds(self, row: int, column: int) -> bool:
        return Cell(row, column).is_within_bounds(self.board_size)

    def place(self, tile: PlacedTile) -> None:
        """Record a tile. Rules are checked elsewhere (see placement.py), here we only refuse to overwrite."""
        cell = Cell(tile.row, tile.column)
        if cell in self.position:
            raise AlreadyOccupiedError(
                f"Cell ({tile.row}, {tile.column}) already holds {self.position[cell].describe()}."
            )
        self.position[cell] = tile.piece
        self.history.append(tile)
        self.update_bounds(tile.row, tile.column)

    def update_bounds(self, row: int, column: int) -> None:
        """
        Grow the bounding box to include the cell.
        ---
        NOTE: per axis only one side can move. A single cell can't be a new extreme on both sides of an axis
        unless the box is still a single point, and bounds never shrink as tiles are never removed.
        """
        if column < self._bounds.left:
            self._bounds.left = column
        elif column > self._bounds.right:
            self._bounds.right = column

        if row < self._bounds.top:
            self._bounds.top = row
        elif row > self._bounds.bottom:
            self._bounds.bottom = row

    def __len__(self) -> int:
        return len(self.history)
