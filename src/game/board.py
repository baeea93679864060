"""
Board module for Othello.
Handles the board state, move validation, tile flipping and material scoring.
Cells hold -1 (black), 0 (empty) or +1 (white) so that flipping is a negation
and the material balance is a plain sum.
"""
from typing import List, Tuple, Optional, Sequence
import logging
import numpy as np

from .errors import IllegalMoveError, OCCUPIED, NO_FLIPS, OUT_OF_BOUNDS
from .render import render_board

logger = logging.getLogger(__name__)


class Board:
    """
    Represents the Othello board as an 8x8 numpy array of tri-state cells.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    # Cell / side constants
    EMPTY = 0
    BLACK = -1  # Moves first
    WHITE = 1

    # Row/column steps for the eight scan directions
    DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1),
                  (0, -1),           (0, 1),
                  (1, -1),  (1, 0),  (1, 1)]

    def __init__(self, size: int = 8):
        """Initialize a new board with the four centre tiles in place."""
        if size != 8:
            raise ValueError("Only 8x8 board is supported")

        self.size = size
        self._board = np.zeros((size, size), dtype=np.int8)
        self._board[3, 3] = self.WHITE
        self._board[3, 4] = self.BLACK
        self._board[4, 3] = self.BLACK
        self._board[4, 4] = self.WHITE

    @classmethod
    def from_array(cls, cells) -> 'Board':
        """
        Build a board from any 8x8 array-like of -1/0/+1 values.

        Raises:
            ValueError: if the shape is wrong or a cell holds another value
        """
        array = np.asarray(cells)
        if array.shape != (cls.SIZE, cls.SIZE):
            raise ValueError(f"Board must be {cls.SIZE}x{cls.SIZE}, got shape {array.shape}")
        if not np.isin(array, (cls.BLACK, cls.EMPTY, cls.WHITE)).all():
            raise ValueError("Board cells must be -1, 0 or 1")

        board = cls()
        board._board = array.astype(np.int8)
        return board

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight strings using 'X' for black, 'O' for white
        and '.' for empty cells. Spaces are ignored.
        """
        symbols = {'X': cls.BLACK, 'O': cls.WHITE, '.': cls.EMPTY}
        cells = []
        for line in rows:
            line = line.replace(' ', '').upper()
            try:
                cells.append([symbols[ch] for ch in line])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r}") from None
        return cls.from_array(cells)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board._board = self._board.copy()
        return new_board

    @staticmethod
    def opponent(side: int) -> int:
        """Return the opposing side."""
        return -side

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        row, col = pos
        return int(self._board[row, col])

    def flips(self, row: int, col: int, side: int) -> List[Tuple[int, int]]:
        """
        Get the tiles that placing a `side` tile at (row, col) would flip.

        Returns:
            List of (row, col) tuples; empty if the move is illegal
        """
        if not self.in_bounds(row, col) or self._board[row, col] != self.EMPTY:
            return []

        cells = self._board
        opponent = -side
        flipped = []
        for dr, dc in self.DIRECTIONS:
            r, c = row + dr, col + dc
            run = []
            while 0 <= r < self.SIZE and 0 <= c < self.SIZE and cells[r, c] == opponent:
                run.append((r, c))
                r += dr
                c += dc
            # The run only counts when it is closed off by one of our own tiles
            if run and 0 <= r < self.SIZE and 0 <= c < self.SIZE and cells[r, c] == side:
                flipped.extend(run)
        return flipped

    def move_error(self, row: int, col: int, side: int) -> Optional[str]:
        """Return why a move is illegal, or None if it is legal."""
        if not self.in_bounds(row, col):
            return OUT_OF_BOUNDS
        if self._board[row, col] != self.EMPTY:
            return OCCUPIED
        if not self._has_flip(row, col, side):
            return NO_FLIPS
        return None

    def _has_flip(self, row: int, col: int, side: int) -> bool:
        """Check if at least one direction is anchored (stops at the first one)."""
        cells = self._board
        opponent = -side
        for dr, dc in self.DIRECTIONS:
            r, c = row + dr, col + dc
            if not (0 <= r < self.SIZE and 0 <= c < self.SIZE) or cells[r, c] != opponent:
                continue

            r += dr
            c += dc
            while 0 <= r < self.SIZE and 0 <= c < self.SIZE:
                if cells[r, c] == side:
                    return True
                if cells[r, c] == self.EMPTY:
                    break
                r += dr
                c += dc
        return False

    def is_legal_move(self, row: int, col: int, side: int, apply: bool = False) -> bool:
        """
        Check if placing a `side` tile at (row, col) is legal, and optionally play it.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            side: Board.BLACK or Board.WHITE
            apply: If True, flip the captured tiles and place the new tile

        Returns:
            bool: True if the move is legal

        Raises:
            IllegalMoveError: if `apply` is True and the move is illegal.
                The board is left unchanged.
        """
        if not apply:
            return bool(self.in_bounds(row, col)
                        and self._board[row, col] == self.EMPTY
                        and self._has_flip(row, col, side))

        reason = self.move_error(row, col, side)
        if reason is not None:
            logger.debug("Rejected move (%d, %d) for side %d: %s", row, col, side, reason)
            raise IllegalMoveError(reason, row, col)

        self.play(row, col, side)
        return True

    def play(self, row: int, col: int, side: int) -> List[Tuple[int, int]]:
        """
        Play a move if it is legal.

        Returns:
            The flipped tiles. An empty list means the move was illegal and
            the board was not touched.
        """
        flipped = self.flips(row, col, side)
        if flipped:
            for r, c in flipped:
                self._board[r, c] = side
            self._board[row, col] = side
        return flipped

    def has_any_legal_move(self, side: int) -> bool:
        """Check if `side` has a legal move anywhere on the board."""
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                if self.is_legal_move(row, col, side):
                    return True
        return False

    def get_valid_moves(self, side: int) -> List[Tuple[int, int]]:
        """
        Get all legal moves for `side` in row-major order.

        Returns:
            List of (row, col) tuples representing legal moves
        """
        return [(row, col)
                for row in range(self.SIZE)
                for col in range(self.SIZE)
                if self.is_legal_move(row, col, side)]

    def is_game_over(self) -> bool:
        """The game is over once neither side can move."""
        return not self.has_any_legal_move(self.BLACK) and not self.has_any_legal_move(self.WHITE)

    def material_score(self) -> int:
        """
        Sum of all cells: positive favours white, negative favours black.
        Always in [-64, 64].
        """
        return int(self._board.sum(dtype=np.int32))

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current tile counts.

        Returns:
            Tuple of (black_count, white_count)
        """
        black_count = int(np.count_nonzero(self._board == self.BLACK))
        white_count = int(np.count_nonzero(self._board == self.WHITE))
        return (black_count, white_count)

    def empty_count(self) -> int:
        return int(np.count_nonzero(self._board == self.EMPTY))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of -1/0/+1 values (a copy)
        """
        return self._board.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._board, other._board)

    def __str__(self) -> str:
        """Return the grid rendering of the board."""
        return render_board(self)
