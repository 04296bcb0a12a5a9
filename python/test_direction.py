"""Tests for the direction module."""

import pytest

from direction import Axis, Direction
from grid import GridPosition


ALL_DIRECTIONS = list(Direction)


class TestRotation:
    """Tests for turning and reversing."""

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_four_left_turns_is_identity(self, direction: Direction) -> None:
        """Four left turns bring a direction back to itself."""
        turned = direction
        for _ in range(4):
            turned = turned.turn_left()
        assert turned == direction

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_four_right_turns_is_identity(self, direction: Direction) -> None:
        """Four right turns bring a direction back to itself."""
        turned = direction
        for _ in range(4):
            turned = turned.turn_right()
        assert turned == direction

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_opposite_twice_is_identity(self, direction: Direction) -> None:
        """Reversing twice is a no-op."""
        assert direction.opposite().opposite() == direction

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_left_then_right_cancels(self, direction: Direction) -> None:
        """A left turn undoes a right turn."""
        assert direction.turn_right().turn_left() == direction

    def test_left_turn_sequence(self) -> None:
        """Left turns go N -> W -> S -> E."""
        assert Direction.NORTH.turn_left() == Direction.WEST
        assert Direction.WEST.turn_left() == Direction.SOUTH
        assert Direction.SOUTH.turn_left() == Direction.EAST
        assert Direction.EAST.turn_left() == Direction.NORTH

    def test_right_turn_sequence(self) -> None:
        """Right turns go N -> E -> S -> W."""
        assert Direction.NORTH.turn_right() == Direction.EAST
        assert Direction.EAST.turn_right() == Direction.SOUTH
        assert Direction.SOUTH.turn_right() == Direction.WEST
        assert Direction.WEST.turn_right() == Direction.NORTH

    def test_opposites(self) -> None:
        assert Direction.NORTH.opposite() == Direction.SOUTH
        assert Direction.EAST.opposite() == Direction.WEST


class TestAxis:
    """Tests for axis of travel."""

    def test_horizontal_directions(self) -> None:
        assert Direction.EAST.axis() == Axis.HORIZONTAL
        assert Direction.WEST.axis() == Axis.HORIZONTAL

    def test_vertical_directions(self) -> None:
        assert Direction.NORTH.axis() == Axis.VERTICAL
        assert Direction.SOUTH.axis() == Axis.VERTICAL

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_turn_changes_axis(self, direction: Direction) -> None:
        """Turning always switches axis; reversing never does."""
        assert direction.turn_left().axis() != direction.axis()
        assert direction.opposite().axis() == direction.axis()


class TestOffsets:
    """Tests for converting between directions and unit offsets."""

    def test_screen_coordinates(self) -> None:
        """North is up, i.e. negative y."""
        assert GridPosition.from_direction(Direction.NORTH) == GridPosition(0, -1)
        assert GridPosition.from_direction(Direction.SOUTH) == GridPosition(0, 1)
        assert GridPosition.from_direction(Direction.WEST) == GridPosition(-1, 0)
        assert GridPosition.from_direction(Direction.EAST) == GridPosition(1, 0)

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_round_trip(self, direction: Direction) -> None:
        """Direction -> offset -> direction is the identity."""
        assert GridPosition.from_direction(direction).to_direction() == direction

    def test_offsets_are_distinct(self) -> None:
        """The four offsets are four different unit vectors."""
        offsets = {GridPosition.from_direction(d) for d in Direction}
        assert len(offsets) == 4
        assert all(abs(o.x) + abs(o.y) == 1 for o in offsets)

    @pytest.mark.parametrize("dx, dy", [(0, 0), (1, 1), (2, 0), (0, -3), (-1, 1)])
    def test_non_unit_offset_raises(self, dx: int, dy: int) -> None:
        """Only the four unit steps convert to a direction."""
        with pytest.raises(ValueError, match="not a unit step"):
            GridPosition(dx, dy).to_direction()

    def test_from_delta(self) -> None:
        assert Direction.from_delta(-1, 0) == Direction.WEST
