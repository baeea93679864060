"""
Players that can take a turn in a game: a human at the terminal, the minimax
search, and a random baseline.
"""
import random
from typing import Callable, Dict, Optional, Tuple

from ..config import SearchConfig
from ..game import ReversiGame, parse_coordinate, side_name, CoordinateError
from ..search import MinimaxSearch, SearchResult


class Player:
    """Base class: picks a move for the side to move in a game."""

    # Interactive players get their illegal moves reported back instead of failing
    interactive = False

    def __init__(self, player_id: str):
        self.player_id = player_id

    def get_move(self, game: ReversiGame) -> Optional[Tuple[int, int]]:
        """Return (row, col) for game.current_player, or None if it cannot move."""
        raise NotImplementedError

    def reset(self):
        """Reset the player's internal state between games."""


class HumanPlayer(Player):
    """Reads coordinates such as 'D3' from an input source."""

    interactive = True

    def __init__(self, player_id: str = 'human',
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        """
        Args:
            player_id: Name of the player
            input_fn: Called with a prompt, returns the typed coordinate
            output_fn: Receives error messages for malformed input
        """
        super().__init__(player_id)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def get_move(self, game: ReversiGame) -> Optional[Tuple[int, int]]:
        prompt = f"Player {side_name(game.current_player)}, enter coordinates: "
        while True:
            text = self.input_fn(prompt)
            try:
                return parse_coordinate(text)
            except CoordinateError as e:
                self.output_fn(str(e))


class ComputerPlayer(Player):
    """Plays the move chosen by the minimax search."""

    def __init__(self, player_id: str = 'computer', config: Optional[SearchConfig] = None):
        super().__init__(player_id)
        self.config = config or SearchConfig()
        self.config.validate()
        self._searches: Dict[int, MinimaxSearch] = {}
        self.last_result: Optional[SearchResult] = None

    def search_for(self, side: int) -> MinimaxSearch:
        """The search playing for `side` (created on first use)."""
        if side not in self._searches:
            self._searches[side] = MinimaxSearch.from_config(self.config, computer_side=side)
        return self._searches[side]

    def get_move(self, game: ReversiGame) -> Optional[Tuple[int, int]]:
        self.last_result = self.search_for(game.current_player).search(game.board)
        return self.last_result.move

    def reset(self):
        self.last_result = None


class RandomPlayer(Player):
    """Picks uniformly among the legal moves."""

    def __init__(self, player_id: str = 'random', seed: Optional[int] = None):
        super().__init__(player_id)
        self.seed = seed
        self.rng = random.Random(seed)

    def get_move(self, game: ReversiGame) -> Optional[Tuple[int, int]]:
        valid_moves = game.get_valid_moves()
        return self.rng.choice(valid_moves) if valid_moves else None
