"""
Exceptions raised by the game rules and the input layer.
"""
from typing import Optional

# Reasons a placement can be rejected
OCCUPIED = 'occupied'
NO_FLIPS = 'no_flips'
OUT_OF_BOUNDS = 'out_of_bounds'


class IllegalMoveError(ValueError):
    """A move was applied that the rules do not allow. The board is unchanged."""

    MESSAGES = {
        OCCUPIED: "Invalid move.  Please choose a blank tile.",
        NO_FLIPS: "Invalid move.  Your move must result in at least one tile being flipped.",
        OUT_OF_BOUNDS: "Invalid move.  The tile is outside the board.",
    }

    def __init__(self, reason: str, row: Optional[int] = None, col: Optional[int] = None):
        self.reason = reason
        self.row = row
        self.col = col
        super().__init__(self.MESSAGES.get(reason, f"Invalid move ({reason})."))


class CoordinateError(ValueError):
    """A coordinate string could not be decoded into a board position."""
