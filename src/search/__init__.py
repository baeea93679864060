"""
Minimax search with alpha-beta pruning for choosing the computer's move.
"""
from .minimax import MinimaxSearch, SearchResult

__all__ = ['MinimaxSearch', 'SearchResult']
