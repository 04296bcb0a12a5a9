"""
Text to Grid decoding.

Puzzle layouts are rectangular blocks of single-character cells, one row per
line. Each character is decoded independently, either through a mapping or a
decoding function.
"""

from __future__ import annotations

from typing import Callable, Mapping, TypeVar

from grid import Grid

__all__ = ["parse_char_grid", "parse_digit_grid"]

T = TypeVar("T")

Decoder = Mapping[str, T] | Callable[[str], T]


def parse_char_grid(text: str, decoder: Decoder[T]) -> Grid[T]:
    """
    Parse a block of text into a Grid, one cell per character.

    Format:
    - Rows separated by newlines
    - Leading and trailing blank lines are ignored, as is surrounding whitespace
      on each line (so indented triple-quoted strings parse as expected)
    - Every remaining row must have the same length

    Args:
        text: The layout text
        decoder: Mapping from character to cell value, or a function doing the same.
                 A function signals an invalid character by raising ValueError or KeyError.

    Returns:
        Grid of decoded cells

    Raises:
        ValueError: on an undecodable character or ragged rows
    """
    decode = decoder.__getitem__ if isinstance(decoder, Mapping) else decoder
    lines = [line.strip() for line in text.strip().splitlines()]
    rows: list[list[T]] = []

    for row_idx, line in enumerate(lines):
        cells: list[T] = []
        for col_idx, char in enumerate(line):
            try:
                cells.append(decode(char))
            except (KeyError, ValueError) as exc:
                error_msg = (
                    f"Invalid cell character: '{char}'\n"
                    f"  Row {row_idx}: \"{line}\"\n"
                    f"  Position: column {col_idx}"
                )
                if isinstance(decoder, Mapping):
                    valid = "".join(sorted(str(key) for key in decoder))
                    error_msg += f"\n  Valid characters: {valid}"
                raise ValueError(error_msg) from exc
        rows.append(cells)

    # Grid reports the mismatch itself; add the offending lines for context
    try:
        return Grid(rows)
    except ValueError as exc:
        raise ValueError(f"{exc}\n  Input lines:\n" + "\n".join(f"    {line}" for line in lines)) from exc


def parse_digit_grid(text: str) -> Grid[int]:
    """Parse a block of single decimal digits into a Grid of ints."""

    def decode_digit(char: str) -> int:
        if not char.isdigit():
            raise ValueError(char)
        return int(char)

    return parse_char_grid(text, decode_digit)
