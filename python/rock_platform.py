"""
Tilting rock platform puzzle.

Round rocks roll when the platform is tilted; cube rocks stay put. The load on
the north support beams depends on where the round rocks end up. Running a
billion spin cycles is only feasible because the layouts eventually repeat.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from direction import Direction
from grid import Grid, GridPosition
from grid_parser import parse_char_grid

logger = logging.getLogger(__name__)

SPIN_ORDER = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)


class Rock(Enum):
    ROUND = "O"
    CUBE = "#"
    EMPTY = "."


@dataclass
class Platform:
    """Platform layout; tilting mutates it in place."""

    cells: Grid[Rock]

    @classmethod
    def parse(cls, text: str) -> Platform:
        return cls(parse_char_grid(text, Rock))

    def _leading_edge_first(self, direction: Direction) -> Iterator[GridPosition]:
        # Rocks nearest the edge being tilted towards must settle first
        xs = range(self.cells.width)
        ys = range(self.cells.height)
        if direction == Direction.SOUTH:
            ys = ys[::-1]
        elif direction == Direction.EAST:
            xs = xs[::-1]
        for y in ys:
            for x in xs:
                yield GridPosition(x, y)

    def tilt(self, direction: Direction) -> None:
        """Roll every round rock as far as it goes in direction."""
        for pos in self._leading_edge_first(direction):
            if self.cells[pos] != Rock.ROUND:
                continue
            target = pos
            while self.cells.get(target + direction) == Rock.EMPTY:
                target = target + direction
            if target != pos:
                self.cells[pos] = Rock.EMPTY
                self.cells[target] = Rock.ROUND

    def spin_cycle(self) -> None:
        for direction in SPIN_ORDER:
            self.tilt(direction)

    def north_load(self) -> int:
        return sum(self.cells.height - pos.y for pos, rock in self.cells.items() if rock == Rock.ROUND)

    def layout_key(self) -> tuple[Rock, ...]:
        return tuple(self.cells)

    def load_after_cycles(self, cycles: int) -> int:
        """
        North load after running cycles spin cycles.

        Layouts are recorded as they occur; the first repeat gives the period,
        and only the remainder after whole periods is actually run.
        """
        history: dict[tuple[Rock, ...], int] = {}
        done = 0
        while done < cycles:
            self.spin_cycle()
            done += 1
            key = self.layout_key()
            if key in history:
                period = done - history[key]
                remaining = (cycles - done) % period
                logger.info(
                    "load_after_cycles: layout after cycle %d repeats cycle %d (period %d), %d left",
                    done,
                    history[key],
                    period,
                    remaining,
                )
                for _ in range(remaining):
                    self.spin_cycle()
                break
            history[key] = done
        return self.north_load()
