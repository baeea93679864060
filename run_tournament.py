"""
Script for playing a match between two engine players, e.g. the minimax
search at different depths or against random moves.
"""
import os
import argparse

from src.arena import Arena, ComputerPlayer, RandomPlayer
from src.config import Config, SearchConfig, get_default_config
from src.logger import setup_logger


def make_player(depth: int, config: Config, seed: int, label: str):
    """Depth 0 means a random player, anything else a minimax search of that depth."""
    if depth <= 0:
        return RandomPlayer(f"random-{label}", seed=seed)
    search = SearchConfig(depth=depth, pruning=config.search.pruning,
                          pass_aware=config.search.pass_aware, workers=config.search.workers)
    return ComputerPlayer(f"minimax-d{depth}-{label}", search)


def main():
    parser = argparse.ArgumentParser(description='Run a match between Othello engine players')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games to play')
    parser.add_argument('--depth-a', type=int, default=None,
                        help='Search depth of player A (0 for random moves)')
    parser.add_argument('--depth-b', type=int, default=None,
                        help='Search depth of player B (0 for random moves)')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save match results')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every move')
    args = parser.parse_args()

    config = Config.load(args.config) if os.path.exists(args.config) else get_default_config()
    if args.games is not None:
        config.arena.games = args.games
    if args.depth_a is not None:
        config.arena.depth_a = args.depth_a
    if args.depth_b is not None:
        config.arena.depth_b = args.depth_b
    if args.output_dir is not None:
        config.arena.output_dir = args.output_dir

    logger = setup_logger(config)

    arena = Arena()
    player_a = make_player(config.arena.depth_a, config, config.seed, 'a')
    player_b = make_player(config.arena.depth_b, config, config.seed + 1, 'b')
    arena.add_player(player_a)
    arena.add_player(player_b)

    results = arena.run_match(player_a.player_id, player_b.player_id,
                              games=config.arena.games, verbose=args.verbose)
    arena.print_results(results)
    logger.log_metrics({k: results[k] for k in ('wins_a', 'wins_b', 'draws', 'margin_a')},
                       step=results['games_played'], prefix='match/')

    path = arena.save_results(results, output_dir=config.arena.output_dir)
    print(f"\nResults saved to: {path}")
    logger.close()


if __name__ == "__main__":
    main()
