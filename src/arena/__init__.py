"""
Arena module for playing matches between engine players.
"""
from .arena import Arena
from .players import Player, HumanPlayer, ComputerPlayer, RandomPlayer

__all__ = ['Arena', 'Player', 'HumanPlayer', 'ComputerPlayer', 'RandomPlayer']
