"""The bag: supply of pieces that have not been drawn yet"""

import logging
import random
from typing import Optional

from src.quirky.pieces import ALL_PIECES, COPIES_PER_PIECE, Piece

logger = logging.getLogger(__name__)


class PieceBag:
    """
    Remaining count per piece identity.

    NOTE: A draw picks uniformly among the *distinct* identities left in the bag, not among the physical pieces.
    Identities that are nearly used up are therefore drawn more often than with a real bag.
    That is how the game has always behaved, so it is kept as is.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        copies: int = COPIES_PER_PIECE,
    ) -> None:
        self._rng = rng or random.Random()
        self._counts: dict[Piece, int] = {piece: copies for piece in ALL_PIECES}

    def draw(self, num: int) -> list[Piece]:
        """
        Draw up to `num` pieces.
        ----
        When the bag runs out, whatever was collected so far is returned. A short draw is not an error.
        """
        drawn: list[Piece] = []
        while len(drawn) < num and self._counts:
            piece = self._rng.choice(list(self._counts))
            # fresh copy of the identity, the bag keeps only counts
            drawn.append(Piece(piece.shape, piece.color))
            self._counts[piece] -= 1
            if self._counts[piece] < 1:
                del self._counts[piece]

        if len(drawn) < num:
            logger.debug("Bag exhausted: requested %d pieces, drew %d", num, len(drawn))
        return drawn

    def remaining(self) -> list[tuple[Piece, int]]:
        """Identities still in the bag with their counts (in seeding order)"""
        return list(self._counts.items())

    def count(self) -> int:
        return sum(self._counts.values())

    @property
    def is_empty(self) -> bool:
        return not self._counts
