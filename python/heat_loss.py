"""
City heat-loss puzzle.

A crucible is pushed from the top-left city block to the bottom-right one. Each
block loses a digit's worth of heat when entered, and the crucible can only
travel in limited straight runs. The answer is the least heat lost.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ascii_render import render_path
from grid import Grid, GridPosition
from grid_parser import parse_digit_grid
from path_search import PathSearch, RunLimits, path_cost

logger = logging.getLogger(__name__)

STANDARD_CRUCIBLE = RunLimits(min_run=0, max_run=3)
ULTRA_CRUCIBLE = RunLimits(min_run=3, max_run=10)


@dataclass
class City:
    """Heat loss per block."""

    blocks: Grid[int]

    @classmethod
    def parse(cls, text: str) -> City:
        return cls(parse_digit_grid(text))

    @property
    def entrance(self) -> GridPosition:
        return GridPosition(0, 0)

    @property
    def factory(self) -> GridPosition:
        return GridPosition(self.blocks.width - 1, self.blocks.height - 1)

    def best_route(self, limits: RunLimits) -> list[GridPosition] | None:
        search = PathSearch(self.blocks, self.entrance, self.factory, limits)
        return search.find_path()

    def min_heat_loss(self, limits: RunLimits = STANDARD_CRUCIBLE) -> int:
        """
        Least heat lost getting from entrance to factory.

        Raises:
            ValueError: if no route satisfies the crucible's limits
        """
        route = self.best_route(limits)
        if route is None:
            raise ValueError(
                f"No route from {self.entrance!r} to {self.factory!r}\n"
                f"  Limits: min_run={limits.min_run}, max_run={limits.max_run}"
            )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Route for %r:\n%s", limits, render_path(self.blocks, route))

        return path_cost(self.blocks, route)
