"""Unit tests for /src/quirky/pieces.py"""

import pytest

from src.quirky.pieces import (
    ALL_PIECES,
    TOTAL_PIECES,
    Color,
    Piece,
    PlacedTile,
    Shape,
)


def test_all_combinations_exist_once() -> None:
    assert len(ALL_PIECES) == 36
    assert len(set(ALL_PIECES)) == 36
    assert TOTAL_PIECES == 108


def test_structural_equality() -> None:
    """Two separately created pieces with the same shape and color are the same piece"""
    assert Piece(Shape.CIRCLE, Color.RED) == Piece(Shape.CIRCLE, Color.RED)
    assert Piece(Shape.CIRCLE, Color.RED) != Piece(Shape.CIRCLE, Color.BLUE)
    assert PlacedTile(Piece(Shape.STAR, Color.GREEN), 3, 4) == PlacedTile(
        Piece(Shape.STAR, Color.GREEN), 3, 4
    )
    assert PlacedTile(Piece(Shape.STAR, Color.GREEN), 3, 4) != PlacedTile(
        Piece(Shape.STAR, Color.GREEN), 4, 3
    )


def test_piece_is_immutable() -> None:
    piece = Piece(Shape.CIRCLE, Color.RED)
    with pytest.raises(AttributeError):
        piece.color = Color.BLUE  # type: ignore[misc]


@pytest.mark.parametrize(
    "other, expected",
    [
        (Piece(Shape.CIRCLE, Color.BLUE), True),  # same shape
        (Piece(Shape.SQUARE, Color.RED), True),  # same color
        (Piece(Shape.SQUARE, Color.BLUE), False),  # nothing in common
        (Piece(Shape.CIRCLE, Color.RED), False),  # identical
    ],
)
def test_matches_is_exclusive_or(other: Piece, expected: bool) -> None:
    assert Piece(Shape.CIRCLE, Color.RED).matches(other) is expected


def test_describe() -> None:
    assert Piece(Shape.CLOVER, Color.PURPLE).describe() == "purple clover"
