"""
Play Othello against the computer in the terminal.
"""
import os
import sys
import argparse
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import Config, get_default_config
from src.logger import setup_logger
from src.game import GameSession, ReversiGame
from src.arena import HumanPlayer, ComputerPlayer


def build_session(config: Config) -> GameSession:
    """Seat the human and the computer according to the configuration."""
    human = HumanPlayer('human')
    computer = ComputerPlayer('computer', config.search)
    players = {
        config.game.human: human,
        config.game.computer: computer,
    }
    return GameSession(players, ReversiGame(), show_valid_moves=config.game.show_valid_moves)


def main():
    """Run a game with the specified configuration."""
    parser = argparse.ArgumentParser(description='Play Othello against a minimax opponent')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--color', type=str, choices=['black', 'white'], default=None,
                        help='Colour the human plays (black moves first)')
    parser.add_argument('--hints', action='store_true',
                        help='Mark legal moves on the board')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.color:
        config.game.human_side = args.color
    if args.hints:
        config.game.show_valid_moves = True
    if args.log_level:
        config.logging.log_level = args.log_level
    config.validate()

    logger = setup_logger(config)
    session = build_session(config)
    try:
        session.play()
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted.")
    finally:
        logger.close()


if __name__ == "__main__":
    main()
