"""
Tests for reading and writing coordinates such as 'D3'.
"""
import pytest

from src.game.coordinates import parse_coordinate, format_coordinate
from src.game.errors import CoordinateError


def test_parse_coordinate():
    assert parse_coordinate("D3") == (2, 3)
    assert parse_coordinate("d3") == (2, 3), "Columns are case-insensitive"
    assert parse_coordinate("A1") == (0, 0)
    assert parse_coordinate(" h8\n") == (7, 7)


def test_format_coordinate():
    assert format_coordinate(2, 3) == "D3"
    assert format_coordinate(7, 0) == "A8"
    with pytest.raises(CoordinateError):
        format_coordinate(8, 0)


def test_wrong_length():
    for text in ["", "D", "D10", "abc"]:
        with pytest.raises(CoordinateError, match="two characters"):
            parse_coordinate(text)


def test_bad_column():
    for text in ["I3", "33", "@1"]:
        with pytest.raises(CoordinateError, match="Column"):
            parse_coordinate(text)


def test_bad_row():
    for text in ["D0", "D9", "DD"]:
        with pytest.raises(CoordinateError, match="Row"):
            parse_coordinate(text)


def test_coordinate_error_is_value_error():
    with pytest.raises(ValueError):
        parse_coordinate("Z9")


if __name__ == "__main__":
    test_parse_coordinate()
    test_format_coordinate()
    print("Coordinate tests passed!")
