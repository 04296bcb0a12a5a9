"""
ASCII rendering for grids, with colors.

Used for debug output: a search path or a set of energised cells is drawn over
the grid's own characters.
"""

from __future__ import annotations

from typing import Callable, Collection, Hashable, TypeVar

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid import Grid, GridPosition

T = TypeVar("T")

# Palette for grouping cells by value
PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def palette_color(key: Hashable) -> Callable[[str], str]:
    """Stable color for a cell value (same value, same color within a run)."""
    return PALETTE[hash(key) % len(PALETTE)]


def render_grid(
    grid: Grid[T],
    char_fn: Callable[[GridPosition, T], str],
    highlight: Collection[GridPosition] | None = None,
    color_fn: Callable[[T], Callable[[str], str]] | None = None,
) -> str:
    """
    Render a grid to an ASCII string with colors.

    Args:
        grid: The grid to render
        char_fn: Character to draw for each (position, value)
        highlight: Optional positions drawn black on white
        color_fn: Optional color for each value; defaults to no color

    Returns:
        Rendered ASCII string with ANSI color codes
    """
    highlight = highlight or ()

    def draw(pos: GridPosition, value: T) -> str:
        char = char_fn(pos, value)
        if pos in highlight:
            return chalk.bgWhite.black(char)
        if color_fn is not None:
            return color_fn(value)(char)
        return char

    return grid.format_cells(draw)


def render_path(grid: Grid[T], path: Collection[GridPosition]) -> str:
    """Render a grid with the cells of a path highlighted."""
    on_path = set(path)
    return render_grid(grid, lambda _pos, value: str(value)[:1], highlight=on_path, color_fn=palette_color)


def render_marks(grid: Grid[T], marked: Callable[[T], bool], mark: str = "#") -> str:
    """Plain two-tone rendering: mark where marked(value) holds, '.' elsewhere."""
    return grid.format_cells(lambda _pos, value: chalk.yellow(mark) if marked(value) else ".")
