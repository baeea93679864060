"""
Othello game module.
Handles turn order, passing and the end of the game.
"""
from typing import List, Tuple, Optional, Dict, Any
import logging

from .board import Board

logger = logging.getLogger(__name__)

SIDE_NAMES = {Board.BLACK: 'black', Board.WHITE: 'white'}


def side_name(side: int) -> str:
    """Return 'black' or 'white' for a side."""
    return SIDE_NAMES[side]


class ReversiGame:
    """
    Owns the authoritative board and tracks whose turn it is.
    """

    def __init__(self, board: Optional[Board] = None, current_player: int = Board.BLACK):
        """
        Initialize a new game.

        Args:
            board: Starting position (default: the standard opening)
            current_player: Side to move first (default: black)
        """
        if current_player not in SIDE_NAMES:
            raise ValueError(f"Unknown side: {current_player}")
        self.board = board.copy() if board is not None else Board()
        self.current_player = current_player
        self.game_over = False
        self.winner = None
        self.move_history: List[Dict[str, Any]] = []
        self._check_game_over()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self.current_player = Board.BLACK
        self.game_over = False
        self.winner = None
        self.move_history = []

    def make_move(self, row: int, col: int) -> bool:
        """
        Play a move for the current player and hand the turn over.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True once the move has been made

        Raises:
            IllegalMoveError: if the move is not legal; nothing changes
        """
        if self.game_over:
            return False

        flipped = self.board.flips(row, col, self.current_player)
        self.board.is_legal_move(row, col, self.current_player, apply=True)

        self.move_history.append({
            'player': self.current_player,
            'move': (row, col),
            'flipped': flipped,
        })

        self.current_player = Board.opponent(self.current_player)
        self.advance_turn()
        return True

    def advance_turn(self) -> bool:
        """
        Pass the turn if the side to move is stuck, and end the game if
        neither side can move.

        Returns:
            bool: True if the side to move had to pass
        """
        if self.game_over or self.board.has_any_legal_move(self.current_player):
            return False

        stuck = self.current_player
        self.current_player = Board.opponent(stuck)
        if not self.board.has_any_legal_move(self.current_player):
            self._finish()
            return False

        logger.info("No legal moves for player %s, turn passes", side_name(stuck))
        self.move_history.append({'player': stuck, 'move': None, 'flipped': []})
        return True

    def _check_game_over(self) -> bool:
        """Check if the game is over, passing the turn if needed."""
        if not self.game_over:
            self.advance_turn()
        return self.game_over

    def _finish(self) -> None:
        self.game_over = True
        score = self.board.material_score()
        if score > 0:
            self.winner = Board.WHITE
        elif score < 0:
            self.winner = Board.BLACK
        else:
            self.winner = 0  # Tie
        logger.info("Game over, material %+d", score)

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """
        Get all legal moves for the current player.

        Returns:
            List of (row, col) tuples representing legal moves
        """
        return self.board.get_valid_moves(self.current_player)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.game_over

    def get_winner(self) -> Optional[int]:
        """
        Get the winner of the game.

        Returns:
            int: Board.BLACK, Board.WHITE, or 0 for a tie; None if the game is not over
        """
        return self.winner if self.game_over else None

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.board.get_score()

    def material_score(self) -> int:
        return self.board.material_score()

    def get_current_player(self) -> int:
        return self.current_player

    def result_message(self) -> str:
        """Describe the outcome of a finished game."""
        winner = self.get_winner()
        if winner is None:
            return "The game is still in progress."
        if winner == 0:
            return "It's a tie!"
        return f"Player {side_name(winner)} is the winner!"

    def copy(self) -> 'ReversiGame':
        """Create a deep copy of the game."""
        new_game = ReversiGame.__new__(ReversiGame)
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.game_over = self.game_over
        new_game.winner = self.winner
        new_game.move_history = [dict(entry) for entry in self.move_history]
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self.board), f"Score - Black: {black}, White: {white}"]
        if self.game_over:
            lines.append(self.result_message())
        else:
            lines.append(f"Current player: {side_name(self.current_player).capitalize()}")
        return "\n".join(lines)
