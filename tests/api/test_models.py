"""Unit tests for src/api/models.py"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    ChatRequest,
    CreateGameRequest,
    JoinGameRequest,
    PlacedTileResponse,
    PlaceTileRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Shape
from src.quirky.pieces import Piece, PlacedTile


# -- Validation - names --
def test_names_are_stripped() -> None:
    request = JoinGameRequest(game_id="g", player_name="  ann ")
    assert request.player_name == "ann"


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_names_are_refused(name: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(name=name)
    with pytest.raises(InvalidRequestError):
        _ = JoinGameRequest(game_id="g", player_name=name)
    with pytest.raises(InvalidRequestError):
        _ = ChatRequest(name=name, input="hi")


# -- Validation - PlaceTileRequest --
def test_shape_and_color_parsed_case_insensitive() -> None:
    request = PlaceTileRequest(
        game_id="g", player_name="ann", shape="Circle", color=" RED", row=90, column=91
    )
    assert request.shape == Shape.CIRCLE
    assert request.color == Color.RED


def test_unknown_shape() -> None:
    with pytest.raises(ValidationError):
        _ = PlaceTileRequest(
            game_id="g", player_name="ann", shape="hexagon", color="red", row=0, column=0
        )


# -- Responses --
def test_placed_tile_response_serialization() -> None:
    tile = PlacedTile(Piece(Shape.STAR, Color.GREEN), 89, 92)
    assert PlacedTileResponse.from_tile(tile).model_dump(mode="json") == {
        "piece": {"shape": "star", "color": "green"},
        "row": 89,
        "column": 92,
    }
