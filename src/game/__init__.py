"""
Othello game module.
This package contains the board rules, turn handling and the text game loop.
"""

from .board import Board
from .coordinates import parse_coordinate, format_coordinate
from .errors import IllegalMoveError, CoordinateError
from .game import ReversiGame, side_name
from .render import render_board
from .session import GameSession

__all__ = ['Board', 'ReversiGame', 'GameSession', 'IllegalMoveError', 'CoordinateError',
           'parse_coordinate', 'format_coordinate', 'render_board', 'side_name']
