"""Who holds the turn, and what happens when it passes on"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.core.exceptions import NotYourTurnError
from src.quirky.bag import PieceBag
from src.quirky.pieces import Piece, PlacedTile

logger = logging.getLogger(__name__)

HAND_SIZE = 6


@dataclass
class Player:
    name: str
    hand: list[Piece] = field(default_factory=list)
    score: int = 0
    has_turn: bool = False


class TurnController:
    """
    Owns turn order and the tiles placed during the current turn.

    Turn order is the order in which players joined (insertion order of `players`).
    """

    def __init__(self, bag: PieceBag) -> None:
        self.bag = bag
        self.players: dict[str, Player] = {}
        self.turn_tiles: list[PlacedTile] = []

    @property
    def current(self) -> Optional[Player]:
        return next((p for p in self.players.values() if p.has_turn), None)

    def seat(self, player: Player) -> None:
        """Add a player at the end of the turn order. The very first player starts."""
        self.players[player.name] = player
        if len(self.players) == 1:
            player.has_turn = True

    def switch(self, player: Player) -> Player:
        """End `player`'s turn and hand it to the next player, who gets their hand refilled."""
        if not player.has_turn:
            current = self.current
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {current.name if current else None} to finish first."
            )

        player.has_turn = False
        self.turn_tiles.clear()

        names = list(self.players)
        next_name = names[(names.index(player.name) + 1) % len(names)]
        next_player = self.players[next_name]
        next_player.has_turn = True
        next_player.hand.extend(self.bag.draw(HAND_SIZE - len(next_player.hand)))

        logger.info("Turn passed from %s to %s", player.name, next_player.name)
        return next_player
