"""Orchestration of communication from API router to the game sessions and the session repository (and the reverse direction)."""

import logging
import random
from typing import Optional

from src.api.models import (
    BoundsResponse,
    ChatLineResponse,
    ChatRequest,
    CreateGameRequest,
    CreateGameResponse,
    GameResponse,
    GetGameRequest,
    HandResponse,
    JoinGameRequest,
    PieceResponse,
    PlacedTileResponse,
    PlaceTileRequest,
    PlacementResponse,
    PlayerRequest,
    PlayerResponse,
    RemainingPieceResponse,
    TurnResponse,
)
from src.core.config import settings
from src.core.exceptions import PlacementRejectedError, UnknownSessionError
from src.core.models import GameId
from src.db.repository import SessionRepository
from src.quirky.chat import ChatLog
from src.quirky.game import GameSession
from src.quirky.pieces import Piece
from src.quirky.placement import Rejected

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for the tile game."""

    def __init__(
        self,
        repository: SessionRepository,
        rng: Optional[random.Random] = None,
        board_size: int = settings.board_size,
    ) -> None:
        self.repo = repository
        self.chat = ChatLog()
        self._rng = rng or random.Random()
        self._board_size = board_size

    # -- API routes logic ---
    def create_game(self, request: CreateGameRequest) -> CreateGameResponse:
        """
        Open a new game under the requested name.
        ----
        If the name is taken, random digits get appended until it is free.
        """
        game_id = request.name
        while not self.repo.add(self._new_session(game_id)):
            game_id += str(self._rng.randrange(10))

        logger.info("Created game %s", game_id)
        return CreateGameResponse(game_id=game_id)

    def list_games(self) -> list[GameResponse]:
        """Show all running games and who plays in them."""
        return [
            GameResponse.from_summary(session.summary())
            for session in self.repo.list_sessions()
        ]

    def get_game(self, request: GetGameRequest) -> GameResponse:
        session = self._fetch_game(request.game_id)
        return GameResponse.from_summary(session.summary())

    def list_players(self, request: GetGameRequest) -> list[PlayerResponse]:
        session = self._fetch_game(request.game_id)
        return [PlayerResponse.from_model(p) for p in session.player_models()]

    def join_game(self, request: JoinGameRequest) -> HandResponse:
        """A player requested to join a game. They receive their starting hand."""
        session = self._fetch_game(request.game_id)
        hand = session.join(request.player_name)
        return self._create_hand_response(request.game_id, request.player_name, hand)

    def get_hand(self, request: PlayerRequest) -> HandResponse:
        session = self._fetch_game(request.game_id)
        hand = session.hand(request.player_name)
        return self._create_hand_response(request.game_id, request.player_name, hand)

    def place_tile(self, request: PlaceTileRequest) -> PlacementResponse:
        """Place a tile attempt. A refusal by the rules is raised as PlacementRejectedError carrying the reason."""
        session = self._fetch_game(request.game_id)
        result = session.place_tile(
            request.player_name,
            Piece(request.shape, request.color),
            request.row,
            request.column,
        )
        if isinstance(result, Rejected):
            raise PlacementRejectedError(result.reason, result.message)

        return PlacementResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            score=result.score,
        )

    def end_turn(self, request: PlayerRequest) -> TurnResponse:
        session = self._fetch_game(request.game_id)
        next_player = session.end_turn(request.player_name)
        return TurnResponse(game_id=request.game_id, player_to_move=next_player)

    def get_board(self, request: GetGameRequest) -> list[PlacedTileResponse]:
        """Placed tiles, in the order they were placed."""
        session = self._fetch_game(request.game_id)
        return [PlacedTileResponse.from_tile(tile) for tile in session.history()]

    def get_remaining_pieces(
        self, request: GetGameRequest
    ) -> list[RemainingPieceResponse]:
        session = self._fetch_game(request.game_id)
        return [
            RemainingPieceResponse(piece=PieceResponse.from_piece(piece), count=count)
            for piece, count in session.remaining_pieces()
        ]

    def get_bounds(self, request: GetGameRequest) -> BoundsResponse:
        session = self._fetch_game(request.game_id)
        return BoundsResponse.from_bounds(session.bounds())

    def post_chat(
        self, request: ChatRequest, game_id: Optional[GameId] = None
    ) -> ChatLineResponse:
        """Add a line to the lobby chat, or to a game's chat when a game id is given."""
        line = self._chat_log(game_id).post(request.name, request.input)
        return ChatLineResponse.from_line(line)

    def get_chat(
        self, game_id: Optional[GameId] = None, last_id: Optional[int] = None
    ) -> list[ChatLineResponse]:
        return [
            ChatLineResponse.from_line(line)
            for line in self._chat_log(game_id).since(last_id)
        ]

    # -- Internal helpers --
    def _new_session(self, game_id: GameId) -> GameSession:
        return GameSession(
            game_id,
            board_size=self._board_size,
            rng=random.Random(self._rng.getrandbits(64)),
        )

    def _chat_log(self, game_id: Optional[GameId]) -> ChatLog:
        if game_id is None:
            return self.chat
        return self._fetch_game(game_id).chat

    def _create_hand_response(
        self, game_id: GameId, player_name: str, hand: list[Piece]
    ) -> HandResponse:
        return HandResponse(
            game_id=game_id,
            player_name=player_name,
            pieces=[PieceResponse.from_piece(piece) for piece in hand],
        )

    def _fetch_game(self, game_id: GameId) -> GameSession:
        """Attempt to find the game in the repository and raise error if it fails."""
        session = self.repo.get(game_id)
        if session is None:
            raise UnknownSessionError(game_id)
        return session
