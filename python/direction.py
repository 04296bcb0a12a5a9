"""
Cardinal directions and axes for stepping around 2D grids.

Screen coordinates are used throughout: x grows to the east, y grows to the south.
"""

from __future__ import annotations

from enum import Enum


class Axis(Enum):
    """Axis of travel."""

    HORIZONTAL = "H"
    VERTICAL = "V"


class Direction(Enum):
    """Cardinal direction for traversal."""

    NORTH = "N"  # Up (decreasing y)
    SOUTH = "S"  # Down (increasing y)
    EAST = "E"  # Right (increasing x)
    WEST = "W"  # Left (decreasing x)

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def turn_left(self) -> Direction:
        """Rotate 90° anticlockwise (N -> W -> S -> E -> N)."""
        return _LEFT_TURNS[self]

    def turn_right(self) -> Direction:
        """Rotate 90° clockwise (N -> E -> S -> W -> N)."""
        return _RIGHT_TURNS[self]

    def axis(self) -> Axis:
        """The axis this direction travels along."""
        if self in (Direction.EAST, Direction.WEST):
            return Axis.HORIZONTAL
        return Axis.VERTICAL

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step as (dx, dy)."""
        return _DELTAS[self]

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Direction:
        """
        Direction whose unit step is (dx, dy).

        Raises:
            ValueError: if the offset is not one of the four unit steps
        """
        for direction, delta in _DELTAS.items():
            if delta == (dx, dy):
                return direction
        raise ValueError(
            f"Offset ({dx}, {dy}) is not a unit step\n"
            f"  Valid offsets: (0, -1) N, (0, 1) S, (1, 0) E, (-1, 0) W"
        )


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_LEFT_TURNS = {
    Direction.NORTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
}

_RIGHT_TURNS = {turned: original for original, turned in _LEFT_TURNS.items()}
