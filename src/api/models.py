"""Requests and Response models"""

from typing import Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import GameId, GameSummary, PlayerModel, PlayerName
from src.core.shared_types import Color, Shape
from src.quirky.board import Bounds
from src.quirky.chat import ChatLine
from src.quirky.pieces import Piece, PlacedTile


def _require_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise InvalidRequestError("Name must contain at least one non-space character.")
    return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _require_name(value)


class GetGameRequest(BaseModel):
    game_id: GameId


class JoinGameRequest(BaseModel):
    game_id: GameId
    player_name: PlayerName

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        return _require_name(value)


class PlayerRequest(BaseModel):
    """Anything that only needs to know the game and who is asking (hand, end of turn)"""

    game_id: GameId
    player_name: PlayerName


class PlaceTileRequest(BaseModel):
    game_id: GameId
    player_name: PlayerName
    shape: Shape
    color: Color
    row: int
    column: int

    @field_validator("shape", "color", mode="before")
    @classmethod
    def lower_case(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


class ChatRequest(BaseModel):
    name: str
    input: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _require_name(value)


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    shape: Shape
    color: Color

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        return cls(shape=piece.shape, color=piece.color)


class PlacedTileResponse(BaseModel):
    piece: PieceResponse
    row: int
    column: int

    @classmethod
    def from_tile(cls, tile: PlacedTile) -> Self:
        return cls(
            piece=PieceResponse.from_piece(tile.piece), row=tile.row, column=tile.column
        )


class RemainingPieceResponse(BaseModel):
    piece: PieceResponse
    count: int


class BoundsResponse(BaseModel):
    top: int
    right: int
    bottom: int
    left: int

    @classmethod
    def from_bounds(cls, bounds: Bounds) -> Self:
        return cls(
            top=bounds.top, right=bounds.right, bottom=bounds.bottom, left=bounds.left
        )


class CreateGameResponse(BaseModel):
    game_id: GameId


class PlayerResponse(BaseModel):
    name: PlayerName
    points: int
    has_turn: bool
    pieces_in_hand: int

    @classmethod
    def from_model(cls, model: PlayerModel) -> Self:
        return cls(
            name=model.name,
            points=model.points,
            has_turn=model.has_turn,
            pieces_in_hand=model.pieces_in_hand,
        )


class GameResponse(BaseModel):
    game_id: GameId
    players: list[PlayerResponse]

    @classmethod
    def from_summary(cls, summary: GameSummary) -> Self:
        return cls(
            game_id=summary.game_id,
            players=[PlayerResponse.from_model(p) for p in summary.players],
        )


class HandResponse(BaseModel):
    game_id: GameId
    player_name: PlayerName
    pieces: list[PieceResponse]


class PlacementResponse(BaseModel):
    game_id: GameId
    player_name: PlayerName
    score: int


class TurnResponse(BaseModel):
    game_id: GameId
    player_to_move: PlayerName


class ChatLineResponse(BaseModel):
    id: int
    name: str
    input: str

    @classmethod
    def from_line(cls, line: ChatLine) -> Self:
        return cls(id=line.id, name=line.name, input=line.input)
