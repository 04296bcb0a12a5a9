"""Tests for grid_parser module."""

from enum import Enum

import pytest

from grid import GridPosition
from grid_parser import parse_char_grid, parse_digit_grid


class Cell(Enum):
    WALL = "#"
    OPEN = "."


class TestParseDigitGrid:
    """Tests for the digit grid parser."""

    def test_simple_digits(self) -> None:
        """Parse a simple grid of digits."""
        grid = parse_digit_grid("123\n456")
        assert grid.width == 3
        assert grid.height == 2
        assert grid.rows() == [[1, 2, 3], [4, 5, 6]]

    def test_indented_block(self) -> None:
        """Surrounding blank lines and indentation are ignored."""
        grid = parse_digit_grid(
            """
            12
            34
            """
        )
        assert grid.rows() == [[1, 2], [3, 4]]

    def test_invalid_digit_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid cell character: 'x'"):
            parse_digit_grid("12\n3x")

    def test_invalid_digit_error_details(self) -> None:
        """The error names the row and column of the bad character."""
        with pytest.raises(ValueError) as exc_info:
            parse_digit_grid("123\n4a6")
        message = str(exc_info.value)
        assert "Row 1" in message
        assert "column 1" in message

    def test_ragged_rows_raise_error(self) -> None:
        with pytest.raises(ValueError, match="same number of cells"):
            parse_digit_grid("123\n45")

    def test_ragged_rows_error_includes_input(self) -> None:
        with pytest.raises(ValueError, match="Input lines"):
            parse_digit_grid("123\n45")


class TestParseCharGrid:
    """Tests for the general character grid parser."""

    def test_enum_decoder(self) -> None:
        """An Enum class decodes by value."""
        grid = parse_char_grid("#.\n.#", Cell)
        assert grid.get(GridPosition(0, 0)) == Cell.WALL
        assert grid.get(GridPosition(1, 0)) == Cell.OPEN
        assert grid.get(GridPosition(1, 1)) == Cell.WALL

    def test_mapping_decoder(self) -> None:
        grid = parse_char_grid("ab\nba", {"a": 1, "b": 2})
        assert grid.rows() == [[1, 2], [2, 1]]

    def test_mapping_decoder_lists_valid_characters(self) -> None:
        with pytest.raises(ValueError, match="Valid characters: ab"):
            parse_char_grid("abc", {"a": 1, "b": 2})

    def test_enum_decoder_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Invalid cell character: '@'"):
            parse_char_grid("#@", Cell)

    def test_single_row(self) -> None:
        grid = parse_char_grid("#..#", Cell)
        assert grid.width == 4
        assert grid.height == 1

    def test_single_column(self) -> None:
        grid = parse_char_grid("#\n.\n#", Cell)
        assert grid.width == 1
        assert grid.height == 3
