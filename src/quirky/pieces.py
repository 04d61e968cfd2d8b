"""Defines the game pieces (tiles): one of six shapes in one of six colors"""

from dataclasses import dataclass

from src.core.shared_types import Color, Shape

# Every shape/color combination appears this many times in a fresh bag
COPIES_PER_PIECE = 3


@dataclass(frozen=True)
class Piece:
    shape: Shape
    color: Color

    def matches(self, other: "Piece") -> bool:
        """Two pieces may sit next to each other when they share the color or the shape, but not both."""
        same_color = self.color == other.color
        same_shape = self.shape == other.shape
        return same_color != same_shape

    def describe(self) -> str:
        return f"{self.color} {self.shape}"


# Color-major, same order as the enums
ALL_PIECES: tuple[Piece, ...] = tuple(
    Piece(shape, color) for color in Color for shape in Shape
)

TOTAL_PIECES = len(ALL_PIECES) * COPIES_PER_PIECE


@dataclass(frozen=True)
class PlacedTile:
    """A piece that sits (or is about to sit) on a given row and column of the board"""

    piece: Piece
    row: int
    column: int
