"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from typing import NamedTuple


class BodyInvariantError(RuntimeError):
    """Raised when the snake body is not a chain of adjacent cells.

    This signals a construction bug, never a player condition, and is not
    caught anywhere in the package.
    """


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates are used, so ``y`` grows downward.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction that would reverse into the neck."""
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Point(NamedTuple):
    """An arena cell in (x, y) coordinates."""

    x: int
    y: int

    def shifted(self, direction: Direction) -> Point:
        dx, dy = direction.value
        return Point(self.x + dx, self.y + dy)


def resolve_direction(
    current: Direction, requested: Direction | None,
) -> Direction:
    """Pick the heading for the next move, ignoring 180° reversals.

    Absent input keeps the current heading.
    """
    if requested is None or requested is current.opposite:
        return current
    return requested


class Snake:
    """A snake represented as an ordered deque of :class:`Point` segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The heading is not
    stored: it is inferred from the first two segments.
    """

    def __init__(self, head: Point, length: int = 3) -> None:
        self.body: deque[Point] = deque(
            Point(head.x - i, head.y) for i in range(length)
        )

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.body)

    @property
    def head(self) -> Point:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Point:
        """Return the tail coordinate."""
        return self.body[-1]

    def current_direction(self) -> Direction:
        """Infer the heading from the displacement between head and neck."""
        if len(self.body) < 2:
            raise BodyInvariantError(
                f"Snake needs at least 2 segments, has {len(self.body)}."
            )
        head, neck = self.body[0], self.body[1]
        delta = (head.x - neck.x, head.y - neck.y)
        for direction in Direction:
            if direction.value == delta:
                return direction
        raise BodyInvariantError(
            f"Unknown direction: head {head} is not adjacent to {neck}."
        )

    def move_in_direction(
        self, direction: Direction, grow: bool = False,
    ) -> Point | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.head.shifted(direction))
        if grow:
            return None
        return self.body.pop()

    def collides_with_self(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in list(self.body)[1:])
