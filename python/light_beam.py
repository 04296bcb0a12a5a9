"""
Light-beam floor puzzle.

A beam enters a floor of mirrors and splitters and is reflected or split as it
goes. A cell is energised if any beam passes through it.

The beam is traced with an explicit work-list of (position, direction) pairs.
A pair already recorded in the per-cell direction history ends that branch,
which is what stops beams from looping forever.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ascii_render import render_marks
from direction import Axis, Direction
from grid import Grid, GridPosition
from grid_parser import parse_char_grid

logger = logging.getLogger(__name__)


class Tile(Enum):
    """Contents of one floor cell."""

    EMPTY = "."
    SPLITTER_HORIZONTAL = "-"
    SPLITTER_VERTICAL = "|"
    MIRROR_LEFT = "/"  # Turns horizontal beams to their left
    MIRROR_RIGHT = "\\"  # Turns horizontal beams to their right

    def deflect(self, direction: Direction) -> tuple[Direction, ...]:
        """Directions a beam travelling in direction leaves this tile in."""
        horizontal = direction.axis() == Axis.HORIZONTAL
        match self:
            case Tile.EMPTY:
                return (direction,)
            case Tile.SPLITTER_HORIZONTAL | Tile.SPLITTER_VERTICAL:
                if _SPLITTER_AXES[self] == direction.axis():
                    return (direction,)
                return (direction.turn_left(), direction.turn_right())
            case Tile.MIRROR_LEFT:
                return (direction.turn_left(),) if horizontal else (direction.turn_right(),)
            case Tile.MIRROR_RIGHT:
                return (direction.turn_right(),) if horizontal else (direction.turn_left(),)
        raise ValueError(f"Unknown tile: {self}")


_SPLITTER_AXES = {
    Tile.SPLITTER_HORIZONTAL: Axis.HORIZONTAL,
    Tile.SPLITTER_VERTICAL: Axis.VERTICAL,
}


@dataclass
class Floor:
    """The contraption layout. Never mutated by tracing."""

    layout: Grid[Tile]

    @classmethod
    def parse(cls, text: str) -> Floor:
        return cls(parse_char_grid(text, Tile))

    def trace(self, start: GridPosition, direction: Direction) -> Grid[set[Direction]]:
        """
        Follow a beam entering start heading in direction.

        Returns:
            Per-cell history of the directions beams passed through in
        """
        history: Grid[set[Direction]] = Grid.from_default(self.layout.width, self.layout.height, set)
        pending: list[tuple[GridPosition, Direction]] = [(start, direction)]

        while pending:
            pos, heading = pending.pop()
            seen = history.get(pos)
            if seen is None or heading in seen:
                # Off the floor, or this beam has been here before
                continue
            seen.add(heading)

            for new_heading in self.layout[pos].deflect(heading):
                pending.append((pos + new_heading, new_heading))

        return history

    def energize(self, start: GridPosition, direction: Direction) -> int:
        """Number of cells energised by a beam entering start heading in direction."""
        history = self.trace(start, direction)
        energised = sum(1 for seen in history if seen)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Beam from %r heading %s energised %d cells:\n%s",
                start,
                direction.name,
                energised,
                render_marks(history, bool),
            )
        return energised

    def edge_entries(self) -> Iterator[tuple[GridPosition, Direction]]:
        """Every way into the floor from its edges."""
        width, height = self.layout.width, self.layout.height
        for y in range(height):
            yield GridPosition(0, y), Direction.EAST
            yield GridPosition(width - 1, y), Direction.WEST
        for x in range(width):
            yield GridPosition(x, 0), Direction.SOUTH
            yield GridPosition(x, height - 1), Direction.NORTH

    def max_energized(self) -> int:
        """Most cells energised from any single edge entry."""
        best, best_entry = 0, None
        for start, direction in self.edge_entries():
            energised = self.energize(start, direction)
            if energised > best:
                best, best_entry = energised, (start, direction)
        logger.info("max_energized: %d cells from %r", best, best_entry)
        return best
