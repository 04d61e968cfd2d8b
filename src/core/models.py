"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and the domain/repository layers (lower) use the model(s) defined here to send to/receive from the Service
(Decouples the live game objects, which are guarded by a lock, from the snapshots handed across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make the models easier to read
GameId = str
PlayerName = str


@dataclass
class PlayerModel:
    """What everyone at the table may know about a player (the hand itself stays private)"""

    name: PlayerName
    points: int
    has_turn: bool
    pieces_in_hand: int


@dataclass
class GameSummary:
    game_id: GameId
    players: list[PlayerModel]
