"""Axis-aligned bounding box accumulated over a stream of points."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from aoc.geometry.coordinates import DEFAULT_COORDINATE_TYPE, CoordinateType
from aoc.geometry.directions import AxisDirection, PositionStatus
from aoc.geometry.primitives import Point


class BoundingBox:
    """Per-axis minimum and maximum of every point seen so far.

    A fresh box has every minimum at the coordinate type's MAX and every
    maximum at its MIN, so the first `update` sets both to that point.

    Example:
        box = BoundingBox(dimensions=2)
        for point in points:
            box.update(point)
        box.check_position(Point.new(3, 4))
    """

    def __init__(
        self, dimensions: int, kind: CoordinateType = DEFAULT_COORDINATE_TYPE
    ) -> None:
        if dimensions <= 0:
            raise ValueError(f"dimensions must be positive, got {dimensions}")
        self.dimensions = dimensions
        self.kind = kind
        self._minimums: list[int] = []
        self._maximums: list[int] = []
        self.reset()

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Self:
        """Build the box enclosing a non-empty collection of points.

        Raises:
            ValueError: If points is empty.
        """
        iterator = iter(points)
        first = next(iterator, None)
        if first is None:
            raise ValueError("At least one point is required")
        box = cls(first.dimensions, first.kind)
        box.update(first)
        for point in iterator:
            box.update(point)
        return box

    def _check_axis(self, axis: int) -> None:
        if not 0 <= axis < self.dimensions:
            raise IndexError("Axis index out of bounds")

    def reset(self) -> None:
        """Forget every point seen so far."""
        self._minimums = [self.kind.max_value] * self.dimensions
        self._maximums = [self.kind.min_value] * self.dimensions

    def update(self, point: Point) -> None:
        """Grow the box so it encloses point."""
        if point.dimensions != self.dimensions:
            raise ValueError(
                f"Dimension mismatch: {point.dimensions} != {self.dimensions}"
            )
        for axis, value in enumerate(point.coordinates):
            self._minimums[axis] = min(self._minimums[axis], value)
            self._maximums[axis] = max(self._maximums[axis], value)

    def get_minimum(self, axis: int) -> int:
        self._check_axis(axis)
        return self._minimums[axis]

    def get_maximum(self, axis: int) -> int:
        self._check_axis(axis)
        return self._maximums[axis]

    def is_outside_for_axis(self, axis: int, point: Point) -> bool:
        self._check_axis(axis)
        value = point.get(axis)
        return value < self._minimums[axis] or value > self._maximums[axis]

    def is_outside_for_axis_and_direction(
        self, axis: int, direction: AxisDirection, point: Point
    ) -> bool:
        """Check whether point lies beyond one side of the box on an axis.

        Args:
            axis: Axis to test.
            direction: POSITIVE tests beyond the maximum, NEGATIVE beyond the
                minimum.
            point: Point to test.
        """
        self._check_axis(axis)
        value = point.get(axis)
        if direction is AxisDirection.POSITIVE:
            return value > self._maximums[axis]
        return value < self._minimums[axis]

    def is_outside(self, point: Point) -> bool:
        return any(
            self.is_outside_for_axis(axis, point) for axis in range(self.dimensions)
        )

    def is_on_border(self, point: Point) -> bool:
        """Check whether point is in the box and touches one of its faces."""
        if self.is_outside(point):
            return False
        return any(
            value in (self._minimums[axis], self._maximums[axis])
            for axis, value in enumerate(point.coordinates)
        )

    def check_position(self, point: Point) -> PositionStatus:
        if self.is_outside(point):
            return PositionStatus.OUTSIDE
        if self.is_on_border(point):
            return PositionStatus.ON_BORDER
        return PositionStatus.INSIDE
