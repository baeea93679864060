"""
Othello with a minimax opponent.
"""
