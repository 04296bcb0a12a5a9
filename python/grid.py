"""
Dense 2D grids addressed by signed positions.

A Grid owns a row-major buffer of width * height cells. Positions are signed so
that stepping off an edge produces a position the grid can reject, rather than
wrapping around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Sequence, TypeVar

from direction import Direction

T = TypeVar("T")


@dataclass(frozen=True)
class GridPosition:
    """A signed position or offset within a grid."""

    x: int
    y: int

    def __add__(self, other: GridPosition | Direction) -> GridPosition:
        if isinstance(other, Direction):
            other = GridPosition.from_direction(other)
        if not isinstance(other, GridPosition):
            return NotImplemented
        return GridPosition(self.x + other.x, self.y + other.y)

    def __sub__(self, other: GridPosition) -> GridPosition:
        if not isinstance(other, GridPosition):
            return NotImplemented
        return GridPosition(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: int) -> GridPosition:
        if not isinstance(scale, int):
            return NotImplemented
        return GridPosition(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Pos({self.x}, {self.y})"

    @classmethod
    def from_direction(cls, direction: Direction) -> GridPosition:
        """Unit step for a direction (y increases southwards)."""
        dx, dy = direction.delta
        return cls(dx, dy)

    def to_direction(self) -> Direction:
        """
        Direction of this unit offset.

        Raises:
            ValueError: if this is not one of the four unit steps
        """
        return Direction.from_delta(self.x, self.y)

    def step(self, direction: Direction, count: int = 1) -> GridPosition:
        return self + GridPosition.from_direction(direction) * count

    def neighbours(self) -> Iterator[GridPosition]:
        """The four orthogonal neighbours; some may lie outside any given grid."""
        for direction in (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST):
            yield self + direction

    def manhattan_distance(self, other: GridPosition) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


class Grid(Generic[T]):
    """
    A rectangular, mutable 2D grid of cells.

    Checked access (get, set) validates bounds; get returns None outside the grid.
    Indexing with grid[pos] skips the check and must only be used on positions
    already known to be inside.
    """

    def __init__(self, rows: Sequence[Sequence[T]]) -> None:
        rows = [list(row) for row in rows]
        width = len(rows[0]) if rows else 0

        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths\n"
                f"  Expected: {width} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
            error_msg += "  All rows must have the same number of cells"
            raise ValueError(error_msg)

        self.width = width
        self.height = len(rows)
        self._cells: list[T] = [cell for row in rows for cell in row]

    @classmethod
    def from_default(cls, width: int, height: int, factory: Callable[[], T]) -> Grid[T]:
        """
        Build a width x height grid with every cell set to factory().

        The factory is called once per cell, so mutable defaults such as set
        are never shared between cells.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        return cls([[factory() for _ in range(width)] for _ in range(height)])

    def in_grid(self, pos: GridPosition) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: GridPosition) -> T | None:
        """
        Cell value at pos, or None if pos is outside the grid.

        The stored object itself is returned, so mutable cells can be updated
        in place through it.
        """
        if not self.in_grid(pos):
            return None
        return self._cells[pos.y * self.width + pos.x]

    def set(self, pos: GridPosition, value: T) -> None:
        if not self.in_grid(pos):
            raise IndexError(f"{pos!r} is outside the {self.width}x{self.height} grid")
        self._cells[pos.y * self.width + pos.x] = value

    def __getitem__(self, pos: GridPosition) -> T:
        return self._cells[pos.y * self.width + pos.x]

    def __setitem__(self, pos: GridPosition, value: T) -> None:
        self._cells[pos.y * self.width + pos.x] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

    def positions(self) -> Iterator[GridPosition]:
        """All positions in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield GridPosition(x, y)

    def items(self) -> Iterator[tuple[GridPosition, T]]:
        """(position, value) pairs in row-major order."""
        for index, pos in enumerate(self.positions()):
            yield pos, self._cells[index]

    def rows(self) -> list[list[T]]:
        return [self._cells[y * self.width : (y + 1) * self.width] for y in range(self.height)]

    def copy(self) -> Grid[T]:
        """Shallow copy: a new buffer holding the same cell objects."""
        return Grid(self.rows())

    def format_cells(self, char_fn: Callable[[GridPosition, T], str]) -> str:
        """Render one character per cell, rows separated by newlines."""
        return "\n".join(
            "".join(char_fn(GridPosition(x, y), self[GridPosition(x, y)]) for x in range(self.width))
            for y in range(self.height)
        )

