"""
The GameSession is the entrypoint into the domain layer for the service layer.
It aggregates one board, one bag and the players, and enforces whose turn it is and what they hold
before asking the placement rules about a tile.

All public methods take the session lock: placements, draws and turn switches on one session never interleave.
"""

import logging
import random
import threading
from dataclasses import replace
from typing import Optional

from src.core.config import settings
from src.core.exceptions import DuplicateNameError, UnknownPlayerError
from src.core.models import GameId, GameSummary, PlayerModel
from src.core.shared_types import Rejection
from src.quirky.bag import PieceBag
from src.quirky.board import Board, Bounds
from src.quirky.chat import ChatLog
from src.quirky.pieces import Piece, PlacedTile
from src.quirky.placement import Accepted, PlacementResult, Rejected, place_tile
from src.quirky.turns import HAND_SIZE, Player, TurnController

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        session_id: GameId,
        board_size: int = settings.board_size,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.id = session_id
        self.board = Board(board_size)
        self.bag = PieceBag(rng)
        self.turns = TurnController(self.bag)
        self.chat = ChatLog()
        self.lock = threading.Lock()

    @property
    def players(self) -> dict[str, Player]:
        return self.turns.players

    @property
    def turn_tiles(self) -> list[PlacedTile]:
        return self.turns.turn_tiles

    # --- OPERATIONS CALLED BY THE SERVICE ---
    def join(self, name: str) -> list[Piece]:
        """Register a new player and deal their starting hand."""
        with self.lock:
            if name in self.players:
                raise DuplicateNameError(
                    f"Cannot join game {self.id}. Player {name!r} already joined."
                )
            player = Player(name, hand=self.bag.draw(HAND_SIZE))
            self.turns.seat(player)
            logger.info("Player %s joined game %s", name, self.id)
            return list(player.hand)

    def place_tile(
        self, name: str, piece: Piece, row: int, column: int
    ) -> PlacementResult:
        """
        Attempt to place one piece from the player's hand
        -----
        1. it must be your turn
        2. you must hold the piece
        3. the placement rules must accept it (see placement.py)
        4. the piece leaves your hand and you collect the score
        """
        with self.lock:
            player = self._get_player(name)
            if not player.has_turn:
                return Rejected(
                    Rejection.NOT_PLAYERS_TURN,
                    f"It is not your turn, {name}.",
                )
            if piece not in player.hand:
                return Rejected(
                    Rejection.PIECE_NOT_IN_HAND,
                    f"You do not hold a {piece.describe()}.",
                )

            result = place_tile(
                self.board, self.turn_tiles, PlacedTile(piece, row, column)
            )
            if isinstance(result, Accepted):
                player.hand.remove(piece)
                player.score += result.score
                logger.info(
                    "%s placed %s at (%d, %d) for %d points in game %s",
                    name,
                    piece.describe(),
                    row,
                    column,
                    result.score,
                    self.id,
                )
            return result

    def end_turn(self, name: str) -> str:
        """Pass the turn on. Returns the name of the player who now holds it."""
        with self.lock:
            player = self._get_player(name)
            return self.turns.switch(player).name

    # --- READ ACCESS (snapshots) ---
    def history(self) -> list[PlacedTile]:
        with self.lock:
            return list(self.board.history)

    def remaining_pieces(self) -> list[tuple[Piece, int]]:
        with self.lock:
            return self.bag.remaining()

    def hand(self, name: str) -> list[Piece]:
        with self.lock:
            return list(self._get_player(name).hand)

    def bounds(self) -> Bounds:
        with self.lock:
            return self.board.bounds

    def player(self, name: str) -> Player:
        with self.lock:
            player = self._get_player(name)
            return replace(player, hand=list(player.hand))

    def player_models(self) -> list[PlayerModel]:
        with self.lock:
            return [
                PlayerModel(
                    name=p.name,
                    points=p.score,
                    has_turn=p.has_turn,
                    pieces_in_hand=len(p.hand),
                )
                for p in self.players.values()
            ]

    def summary(self) -> GameSummary:
        return GameSummary(game_id=self.id, players=self.player_models())

    # -- PRIVATE HELPERS ---
    def _get_player(self, name: str) -> Player:
        try:
            return self.players[name]
        except KeyError:
            raise UnknownPlayerError(
                f"No player {name!r} in game {self.id}."
            ) from None
