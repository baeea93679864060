"""
Arena for playing matches between engine players.
"""
import os
import json
import time
import logging
from datetime import datetime
from typing import Dict, Optional
from tqdm import tqdm

from ..game import Board, ReversiGame, format_coordinate, side_name
from .players import Player

logger = logging.getLogger(__name__)


class Arena:
    """Plays games between registered players and keeps the tally."""

    def __init__(self):
        self.players: Dict[str, Player] = {}
        self.history = []

    def add_player(self, player: Player):
        """Add a player to the arena."""
        self.players[player.player_id] = player

    def play_game(self, black_id: str, white_id: str, verbose: bool = False) -> float:
        """
        Play a single game between two players.

        Args:
            black_id: ID of the player with the black tiles (moves first)
            white_id: ID of the player with the white tiles
            verbose: Whether to print game progress

        Returns:
            1.0 if black wins, 0.5 for a tie, 0.0 if white wins
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        seats = {Board.BLACK: self.players[black_id], Board.WHITE: self.players[white_id]}
        for player in seats.values():
            player.reset()

        game = ReversiGame()
        if verbose:
            print(f"Starting game: {black_id} (Black) vs {white_id} (White)")
            print(game)

        while not game.is_game_over():
            player = seats[game.current_player]
            move = player.get_move(game)
            if move is None:
                raise RuntimeError(f"{player.player_id} returned no move for {side_name(game.current_player)}")

            game.make_move(*move)
            if verbose:
                print(f"{player.player_id} plays {format_coordinate(*move)}")
                print(game)

        material = game.material_score()
        self.history.append({
            'black': black_id,
            'white': white_id,
            'material': material,
            'moves': sum(1 for entry in game.move_history if entry['move'] is not None),
        })

        # Negative material favours black
        if material < 0:
            return 1.0
        if material > 0:
            return 0.0
        return 0.5

    def run_match(self, player_a: str, player_b: str, games: int = 10, verbose: bool = False) -> Dict:
        """
        Play a match, alternating who takes black.

        Args:
            player_a: ID of the first player (black in even-numbered games)
            player_b: ID of the second player
            games: Number of games to play
            verbose: Whether to print every game

        Returns:
            Dictionary with wins, losses, draws and the mean tile margin of player_a
        """
        if games < 1:
            raise ValueError("Need at least 1 game for a match")

        results = {
            'player_a': player_a,
            'player_b': player_b,
            'games_played': 0,
            'wins_a': 0,
            'wins_b': 0,
            'draws': 0,
            'margin_a': 0.0,
            'start_time': time.time(),
        }
        margin_total = 0

        for game_idx in tqdm(range(games), desc=f"{player_a} vs {player_b}", unit="game"):
            a_is_black = game_idx % 2 == 0
            black, white = (player_a, player_b) if a_is_black else (player_b, player_a)
            result = self.play_game(black, white, verbose=verbose)
            score_a = result if a_is_black else 1.0 - result

            # Material is white minus black; flip it when player_a had black
            material = self.history[-1]['material']
            margin_total += -material if a_is_black else material

            results['games_played'] += 1
            if score_a == 1.0:
                results['wins_a'] += 1
            elif score_a == 0.0:
                results['wins_b'] += 1
            else:
                results['draws'] += 1

        results['margin_a'] = margin_total / results['games_played']
        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        logger.info("Match %s vs %s: %d-%d-%d", player_a, player_b,
                    results['wins_a'], results['wins_b'], results['draws'])
        return results

    @staticmethod
    def print_results(results: Dict):
        """Print a match summary."""
        print("\nMatch Results:")
        print(f"{results['player_a']:>20s}  wins: {results['wins_a']}")
        print(f"{results['player_b']:>20s}  wins: {results['wins_b']}")
        print(f"{'draws':>20s}        {results['draws']}")
        print(f"Mean tile margin for {results['player_a']}: {results['margin_a']:+.2f}")
        print(f"Duration: {results['duration']:.1f}s")

    def save_results(self, results: Dict, filepath: Optional[str] = None,
                     output_dir: str = "match_results") -> str:
        """Save match results and per-game history to a JSON file."""
        if filepath is None:
            os.makedirs(output_dir, exist_ok=True)
            filepath = os.path.join(output_dir, f"match_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json")

        with open(filepath, 'w') as f:
            json.dump({'results': results, 'games': self.history}, f, indent=2)
        return filepath
