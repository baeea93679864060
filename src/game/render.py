"""
Text rendering of the board.
"""
from typing import Iterable, Optional, Tuple

# Black is drawn as X, white as O
SYMBOLS = {-1: 'X', 0: ' ', 1: 'O'}
HINT = '*'

ROW_BORDER = "  +---+---+---+---+---+---+---+---+ "


def render_board(board, hints: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Render a board as a grid with column letters on top and row digits on the left.

    Args:
        board: The board to draw (read only)
        hints: Optional cells to mark with '*', e.g. the legal moves

    Returns:
        The grid as a multi-line string
    """
    cells = board.get_board_state()
    size = cells.shape[0]
    marked = set(hints or ())

    lines = ["    " + "".join(f"{chr(ord('A') + col)}   " for col in range(size))]
    lines.append(ROW_BORDER)
    for row in range(size):
        tiles = []
        for col in range(size):
            symbol = SYMBOLS[int(cells[row, col])]
            if symbol == ' ' and (row, col) in marked:
                symbol = HINT
            tiles.append(f"{symbol} | ")
        lines.append(f"{row + 1} | " + "".join(tiles))
        lines.append(ROW_BORDER)
    return "\n".join(lines)
