"""
Interactive game loop: asks each player for a move, applies it to the
authoritative board and prints the result.
"""
import logging
from typing import Callable, Dict, Optional

from .coordinates import format_coordinate
from .errors import IllegalMoveError
from .game import ReversiGame, side_name
from .render import render_board

logger = logging.getLogger(__name__)


class GameSession:
    """Runs one game between two players to the end."""

    def __init__(self, players: Dict[int, object], game: Optional[ReversiGame] = None,
                 output_fn: Callable[[str], None] = print,
                 renderer: Callable = render_board, show_valid_moves: bool = False):
        """
        Args:
            players: Maps Board.BLACK and Board.WHITE to players with get_move(game)
            game: Game to continue (default: a new game)
            output_fn: Receives every line of text meant for the user
            renderer: Draws a board, called as renderer(board, hints)
            show_valid_moves: Mark the legal moves of the side to move on the board
        """
        self.players = players
        self.game = game or ReversiGame()
        self.output_fn = output_fn
        self.renderer = renderer
        self.show_valid_moves = show_valid_moves
        self._announced = 0

    def show_board(self):
        hints = self.game.get_valid_moves() if self.show_valid_moves and not self.game.is_game_over() else None
        self.output_fn(self.renderer(self.game.board, hints))

    def play_turn(self) -> bool:
        """
        Ask the side to move for a move and play it.

        Returns:
            bool: True if a move was made, False if it was rejected
        """
        side = self.game.current_player
        player = self.players[side]
        move = player.get_move(self.game)

        if move is None:
            # Only reachable when the caller hands in a position the game has not advanced
            self.game.advance_turn()
            self._announce_passes()
            return False

        if not player.interactive:
            self.output_fn(f"Player {side_name(side)}, enter coordinates: {format_coordinate(*move)}\n")

        try:
            self.game.make_move(*move)
        except IllegalMoveError as e:
            if not player.interactive:
                raise
            self.output_fn(str(e))
            return False

        self.show_board()
        self._announce_passes()
        return True

    def play(self) -> Optional[int]:
        """
        Play until neither side can move.

        Returns:
            The winner: Board.BLACK, Board.WHITE or 0 for a tie
        """
        self.show_board()
        self._announce_passes()

        while not self.game.is_game_over():
            self.play_turn()

        self.output_fn(f"There are no more legal moves available.  {self.game.result_message()}")
        return self.game.get_winner()

    def _announce_passes(self):
        """Report passes recorded since the last announcement."""
        history = self.game.move_history
        for entry in history[self._announced:]:
            if entry['move'] is None:
                stuck = entry['player']
                self.output_fn(f"There are no legal moves available for player {side_name(stuck)}.  "
                               f"Player {side_name(-stuck)}, it is now your turn.")
        self._announced = len(history)
