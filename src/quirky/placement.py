"""
Placement rules: decide whether a tile may go on a cell and what it scores.

Key idea: every rule violation is returned as a `Rejected` value rather than raised, so callers can report the
reason back to the player without the board, bag or hands being touched.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.shared_types import Rejection
from src.quirky.board import Board
from src.quirky.cell import Cell, Direction
from src.quirky.pieces import PlacedTile

logger = logging.getLogger(__name__)

# A line holds each shape (or each color) at most once
MAX_LINE_LENGTH = 6

MSG_OUT_OF_BOUNDS = "GamePiece must be placed within the board."
MSG_ALREADY_OCCUPIED = "GamePiece already exists."
MSG_ADJACENCY_CONFLICT = "GamePiece adjacent to incompatible piece: {piece}"
MSG_TURN_ALIGNMENT = (
    "GamePiece must be in same row or column as others placed this turn."
)


@dataclass(frozen=True)
class Accepted:
    score: int


@dataclass(frozen=True)
class Rejected:
    reason: Rejection
    message: str
    conflicting: Optional[PlacedTile] = None


PlacementResult = Accepted | Rejected


@dataclass(frozen=True)
class LineScan:
    """Outcome of walking away from the candidate cell in one direction"""

    points: int
    conflicting: Optional[PlacedTile] = None


def scan_line(
    board: Board,
    tile: PlacedTile,
    direction: Direction,
    turn_tiles: Sequence[PlacedTile],
) -> LineScan:
    """
    Walk the contiguous tiles next to `tile` in one direction.
    ----
    * every neighbor must match the candidate on color XOR shape
    * a neighbor placed in an earlier turn is worth a point, one placed this turn is not
      (it was already counted when it was placed itself)
    * a sixth neighbor means the line would grow to seven: not allowed
    """
    start = Cell(tile.row, tile.column)
    points = 0
    for offset in range(1, MAX_LINE_LENGTH):
        cell = start.shifted(direction, offset)
        neighbor = board.piece(cell)
        if neighbor is None:
            return LineScan(points)

        adjacent = PlacedTile(neighbor, cell.row, cell.column)
        if not tile.piece.matches(neighbor):
            return LineScan(points, conflicting=adjacent)
        if adjacent not in turn_tiles:
            points += 1

    # five matching tiles in a row already: anything on the sixth cell makes the line too long
    cell = start.shifted(direction, MAX_LINE_LENGTH)
    sixth = board.piece(cell)
    if sixth is not None:
        return LineScan(points, conflicting=PlacedTile(sixth, cell.row, cell.column))
    return LineScan(points)


def is_aligned_with_turn(tile: PlacedTile, turn_tiles: Sequence[PlacedTile]) -> bool:
    """
    Tiles placed in one turn must line up.
    ---
    NOTE: checked pair by pair (each earlier tile shares the row OR the column with the new one),
    not as one common row/column for the whole turn.
    """
    return all(
        other.row == tile.row or other.column == tile.column for other in turn_tiles
    )


def validate_placement(
    board: Board, turn_tiles: Sequence[PlacedTile], tile: PlacedTile
) -> PlacementResult:
    """Check all rules for placing `tile`, without changing anything. Returns the score when allowed."""
    if not board.is_within_bounds(tile.row, tile.column):
        return Rejected(Rejection.OUT_OF_BOUNDS, MSG_OUT_OF_BOUNDS)

    if board.get(tile.row, tile.column) is not None:
        return Rejected(Rejection.ALREADY_OCCUPIED, MSG_ALREADY_OCCUPIED)

    scans = [
        scan_line(board, tile, direction, turn_tiles) for direction in Direction
    ]
    conflicting = next(
        (scan.conflicting for scan in scans if scan.conflicting is not None), None
    )
    if conflicting is not None:
        return Rejected(
            Rejection.ADJACENCY_CONFLICT,
            MSG_ADJACENCY_CONFLICT.format(piece=conflicting.piece.describe()),
            conflicting=conflicting,
        )

    if turn_tiles and not is_aligned_with_turn(tile, turn_tiles):
        return Rejected(Rejection.TURN_ALIGNMENT, MSG_TURN_ALIGNMENT)

    # one point for the tile itself
    return Accepted(score=1 + sum(scan.points for scan in scans))


def place_tile(
    board: Board, turn_tiles: list[PlacedTile], tile: PlacedTile
) -> PlacementResult:
    """Validate, and when accepted record the tile on the board and in this turn's tiles."""
    result = validate_placement(board, turn_tiles, tile)
    if isinstance(result, Rejected):
        logger.debug(
            "Rejected %s at (%d, %d): %s",
            tile.piece.describe(),
            tile.row,
            tile.column,
            result.message,
        )
        return result

    turn_tiles.append(tile)
    board.place(tile)
    return result
