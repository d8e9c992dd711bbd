"""Direction and position enums shared by the geometry shapes.

2D directions use the mathematical convention: y grows upwards, so UP is
(0, 1).
"""

from __future__ import annotations

from enum import Enum

from aoc.geometry.primitives import Vector


class PositionStatus(Enum):
    """Location of a point relative to a closed shape."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    ON_BORDER = "on_border"


class AxisDirection(Enum):
    """One of the two directions along an axis."""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    def multiplier(self) -> int:
        """Return 1 for POSITIVE and -1 for NEGATIVE."""
        return 1 if self is AxisDirection.POSITIVE else -1


class CardinalDirection2D(Enum):
    """The four axis-aligned directions in 2D."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def to_vector(self) -> Vector:
        """Unit vector pointing in this direction."""
        return Vector(self.value)

    def turn_right(self) -> CardinalDirection2D:
        """Direction after a 90 degree clockwise turn."""
        return _TURN_RIGHT[self]

    def turn_left(self) -> CardinalDirection2D:
        """Direction after a 90 degree counter-clockwise turn."""
        return _TURN_RIGHT[_TURN_RIGHT[_TURN_RIGHT[self]]]

    def opposite(self) -> CardinalDirection2D:
        return _TURN_RIGHT[_TURN_RIGHT[self]]


_TURN_RIGHT = {
    CardinalDirection2D.UP: CardinalDirection2D.RIGHT,
    CardinalDirection2D.RIGHT: CardinalDirection2D.DOWN,
    CardinalDirection2D.DOWN: CardinalDirection2D.LEFT,
    CardinalDirection2D.LEFT: CardinalDirection2D.UP,
}


class Direction2D(Enum):
    """The eight king-move directions in 2D."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP_LEFT = (-1, 1)
    UP_RIGHT = (1, 1)
    DOWN_LEFT = (-1, -1)
    DOWN_RIGHT = (1, -1)

    def to_vector(self) -> Vector:
        """Unit vector pointing in this direction."""
        return Vector(self.value)

    def is_diagonal(self) -> bool:
        return self.value[0] != 0 and self.value[1] != 0
