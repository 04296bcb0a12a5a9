"""
Shortest paths over a cost grid with limits on straight-line runs.

The search runs Dijkstra over an augmented state space: a state is a position
together with the direction of the current straight run and its length. The
same cell reached with different runs is a different state, because the run
decides which moves are available next.

Movement rules for a state with last direction d and run length r:
- never reverse (the opposite of d)
- a turn is only allowed once r > min_run
- continuing straight is only allowed while r < max_run
- the goal only counts as reached once r > min_run

The cost of a path is the sum of the costs of every cell entered; the start
cell is free.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass
from itertools import count
from typing import Iterator

from direction import Direction
from grid import Grid, GridPosition

logger = logging.getLogger(__name__)

__all__ = [
    "RunLimits",
    "SearchAborted",
    "SearchState",
    "PathSearch",
    "find_constrained_path",
    "path_cost",
]


class SearchAborted(RuntimeError):
    """The search exceeded its expansion budget before finding the goal."""

    def __init__(self, expanded: int, max_expansions: int) -> None:
        super().__init__(f"Search aborted after {expanded} expansions (budget {max_expansions})")
        self.expanded = expanded
        self.max_expansions = max_expansions


@dataclass(frozen=True)
class RunLimits:
    """
    Bounds on consecutive steps in one direction.

    min_run: a turn (or stopping at the goal) needs a run longer than this
    max_run: longest allowed run; None means unbounded
    """

    min_run: int = 0
    max_run: int | None = None

    def __post_init__(self) -> None:
        if self.min_run < 0:
            raise ValueError(f"min_run must be non-negative, got {self.min_run}")
        if self.max_run is not None:
            if self.max_run < 1:
                raise ValueError(f"max_run must be at least 1, got {self.max_run}")
            if self.max_run <= self.min_run:
                raise ValueError(
                    f"max_run must exceed min_run, got min_run={self.min_run}, max_run={self.max_run}\n"
                    f"  No run could ever be long enough to turn or finish"
                )

    @property
    def run_cap(self) -> int:
        """Longest run worth tracking; past min_run + 1 an unbounded run behaves the same."""
        return self.max_run if self.max_run is not None else self.min_run + 1

    def can_turn(self, run: int) -> bool:
        return run > self.min_run

    def can_continue(self, run: int) -> bool:
        return self.max_run is None or run < self.max_run

    def can_finish(self, run: int) -> bool:
        return run > self.min_run


@dataclass(frozen=True)
class SearchState:
    """A position plus the straight run that reached it."""

    position: GridPosition
    direction: Direction | None  # None only for the start state
    run: int


class PathSearch:
    """
    A single search session over one cost grid.

    States are interned into a growable table and referred to by index; the
    g-scores and predecessors are kept per index.
    """

    def __init__(
        self,
        grid: Grid[int],
        start: GridPosition,
        goal: GridPosition,
        limits: RunLimits | None = None,
    ) -> None:
        for name, pos in (("start", start), ("goal", goal)):
            if not grid.in_grid(pos):
                raise ValueError(f"{name} {pos!r} is outside the {grid.width}x{grid.height} grid")

        self.grid = grid
        self.start = start
        self.goal = goal
        self.limits = limits if limits is not None else RunLimits()

        self.states: list[SearchState] = []
        self._index: dict[SearchState, int] = {}
        self.g_scores: list[int] = []
        self.parents: dict[int, int] = {}
        self.expanded = 0

    @property
    def state_count(self) -> int:
        return len(self.states)

    def _intern(self, state: SearchState) -> int:
        index = self._index.get(state)
        if index is None:
            index = len(self.states)
            self._index[state] = index
            self.states.append(state)
            self.g_scores.append(math.inf)  # type: ignore[arg-type]
        return index

    def successors(self, state: SearchState) -> Iterator[SearchState]:
        """States reachable in one step under the run limits."""
        limits = self.limits
        for direction in Direction:
            if state.direction is None:
                run = 1
            elif direction == state.direction.opposite():
                continue
            elif direction == state.direction:
                if not limits.can_continue(state.run):
                    continue
                run = min(state.run + 1, limits.run_cap)
            else:
                if not limits.can_turn(state.run):
                    continue
                run = 1

            position = state.position + direction
            if self.grid.in_grid(position):
                yield SearchState(position, direction, run)

    def is_goal(self, state: SearchState) -> bool:
        return state.position == self.goal and self.limits.can_finish(state.run)

    def backtrack(self, index: int) -> list[GridPosition]:
        """Positions from the state at index back to the start, goal first."""
        positions = [self.states[index].position]
        parent = self.parents.get(index)
        while parent is not None:
            positions.append(self.states[parent].position)
            parent = self.parents.get(parent)
        return positions

    def find_path(self, max_expansions: int | None = None) -> list[GridPosition] | None:
        """
        Run the search.

        Args:
            max_expansions: Optional budget of frontier pops; exceeding it raises SearchAborted

        Returns:
            Positions from start to goal inclusive, or None if no path satisfies the limits
        """
        if self.start == self.goal:
            return [self.start]

        start_index = self._intern(SearchState(self.start, None, 0))
        self.g_scores[start_index] = 0

        # (cost, insertion order, state index); insertion order breaks ties
        tiebreak = count()
        frontier: list[tuple[int, int, int]] = [(0, next(tiebreak), start_index)]

        while frontier:
            cost, _, index = heapq.heappop(frontier)
            if cost > self.g_scores[index]:
                # Superseded by a cheaper entry for the same state
                continue

            self.expanded += 1
            if max_expansions is not None and self.expanded > max_expansions:
                raise SearchAborted(self.expanded, max_expansions)

            state = self.states[index]
            if self.is_goal(state):
                logger.info(
                    "find_path: reached %r with cost %d (expanded=%d, states=%d)",
                    self.goal,
                    cost,
                    self.expanded,
                    self.state_count,
                )
                path = self.backtrack(index)
                path.reverse()
                return path

            for child in self.successors(state):
                child_index = self._intern(child)
                tentative = cost + self.grid[child.position]
                if tentative < self.g_scores[child_index]:
                    self.g_scores[child_index] = tentative
                    self.parents[child_index] = index
                    heapq.heappush(frontier, (tentative, next(tiebreak), child_index))

        logger.info(
            "find_path: no path from %r to %r (expanded=%d, states=%d)",
            self.start,
            self.goal,
            self.expanded,
            self.state_count,
        )
        return None


def find_constrained_path(
    grid: Grid[int],
    start: GridPosition,
    goal: GridPosition,
    min_run: int = 0,
    max_run: int | float | None = None,
    *,
    max_expansions: int | None = None,
) -> list[GridPosition] | None:
    """
    Cheapest path from start to goal whose straight runs respect the limits.

    Args:
        grid: Non-negative cost of entering each cell
        start: Starting position (its own cost is not counted)
        goal: Target position
        min_run: A turn, or arriving at the goal, requires a run longer than this
        max_run: Longest allowed straight run; None or math.inf for unbounded
        max_expansions: Optional cooperative budget, see PathSearch.find_path

    Returns:
        Positions from start to goal inclusive, or None when no path satisfies the limits

    Raises:
        ValueError: for positions outside the grid or inconsistent limits
        SearchAborted: if max_expansions is exceeded
    """
    if max_run is not None and math.isinf(max_run):
        max_run = None
    limits = RunLimits(min_run, None if max_run is None else int(max_run))
    return PathSearch(grid, start, goal, limits).find_path(max_expansions)


def path_cost(grid: Grid[int], path: list[GridPosition]) -> int:
    """Total cost of a start-to-goal path, excluding the start cell."""
    return sum(grid[pos] for pos in path[1:])
