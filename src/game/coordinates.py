"""
Conversion between "D3"-style coordinate strings and board indices.
Columns are letters A-H (case-insensitive), rows are digits 1-8.
"""
from typing import Tuple

from .errors import CoordinateError

BOARD_MAX = 8
COLUMNS = "ABCDEFGH"
ROWS = "12345678"


def parse_coordinate(text: str) -> Tuple[int, int]:
    """
    Decode a two-character coordinate into zero-based (row, col).

    Raises:
        CoordinateError: if the text is not a letter A-H followed by a digit 1-8
    """
    text = text.strip()
    if len(text) != 2:
        raise CoordinateError("Input should consist of only two characters.  Try again.")

    letter, digit = text[0].upper(), text[1]
    if letter not in COLUMNS:
        raise CoordinateError("Column must be a letter between A and H.")
    if digit not in ROWS:
        raise CoordinateError("Row must be a number between 1 and 8.")
    return ROWS.index(digit), COLUMNS.index(letter)


def format_coordinate(row: int, col: int) -> str:
    """Encode zero-based (row, col) as e.g. 'D3'."""
    if not (0 <= row < BOARD_MAX and 0 <= col < BOARD_MAX):
        raise CoordinateError(f"({row}, {col}) is outside the board")
    return f"{COLUMNS[col]}{ROWS[row]}"
