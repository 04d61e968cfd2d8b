"""
Type definitions used across layers
"""

from enum import StrEnum


# --- Order of the members matters: the bag is seeded color-by-color, shape-by-shape in this order
class Color(StrEnum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"


class Shape(StrEnum):
    CIRCLE = "circle"
    STAR = "star"
    DIAMOND = "diamond"
    SQUARE = "square"
    TRIANGLE = "triangle"
    CLOVER = "clover"


class Rejection(StrEnum):
    """Reasons a tile placement can be refused. Values are used as machine-readable codes at the API."""

    OUT_OF_BOUNDS = "out of bounds"
    ALREADY_OCCUPIED = "already occupied"
    ADJACENCY_CONFLICT = "adjacency conflict"
    TURN_ALIGNMENT = "turn alignment"
    NOT_PLAYERS_TURN = "not players turn"
    PIECE_NOT_IN_HAND = "piece not in hand"
