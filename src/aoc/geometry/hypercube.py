"""Axis-aligned N-D boxes defined by two opposite corners."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass

from aoc.geometry.bounding_box import BoundingBox
from aoc.geometry.coordinates import CoordinateType
from aoc.geometry.directions import PositionStatus
from aoc.geometry.primitives import Point, Vector


@dataclass(frozen=True)
class HyperCube:
    """An axis-aligned box with non-degenerate extent on every axis.

    The stored corners are normalized so that ``min_vertex[i] <= max_vertex[i]``
    on every axis. Sizes are the absolute components of the diagonal.

    Attributes:
        min_vertex: Corner with the smallest coordinate on every axis.
        max_vertex: Corner with the largest coordinate on every axis.
        sizes: Per-axis distance between the two corners.
    """

    min_vertex: Point
    max_vertex: Point
    sizes: tuple[int, ...]

    @classmethod
    def from_vertex_and_diagonal(
        cls, vertex: Point, diagonal: Vector
    ) -> HyperCube | None:
        """Create a hypercube from one corner and the vector to the opposite one.

        Args:
            vertex: Any corner.
            diagonal: Vector from vertex to the opposite corner.

        Returns:
            The hypercube, or None if the diagonal has a zero component or
            the opposite corner is not representable.
        """
        if any(value == 0 for value in diagonal.coordinates):
            return None
        opposite = vertex.move_by(diagonal)
        if opposite is None:
            return None
        pairs = list(zip(vertex.coordinates, opposite.coordinates, strict=True))
        return cls(
            min_vertex=Point(tuple(min(pair) for pair in pairs), vertex.kind),
            max_vertex=Point(tuple(max(pair) for pair in pairs), vertex.kind),
            sizes=diagonal.absolute_coordinates(),
        )

    @classmethod
    def from_opposite_vertices(cls, vertex1: Point, vertex2: Point) -> HyperCube | None:
        """Create a hypercube from two opposite corners.

        Returns:
            The hypercube, or None if the corners share a coordinate on some
            axis.
        """
        diagonal = Vector.from_points(vertex1, vertex2, kind=CoordinateType.I128)
        if diagonal is None:
            return None
        return cls.from_vertex_and_diagonal(vertex1, diagonal)

    @property
    def dimensions(self) -> int:
        return self.min_vertex.dimensions

    def get_min_vertex(self) -> Point:
        return self.min_vertex

    def get_max_vertex(self) -> Point:
        return self.max_vertex

    def get_sizes(self) -> tuple[int, ...]:
        return self.sizes

    def area(self) -> int:
        """Product of the per-axis sizes."""
        return math.prod(self.sizes)

    def _bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points([self.min_vertex, self.max_vertex])

    def is_outside(self, point: Point) -> bool:
        return self._bounding_box().is_outside(point)

    def is_on_border(self, point: Point) -> bool:
        return self._bounding_box().is_on_border(point)

    def is_inside(self, point: Point) -> bool:
        """Check whether point is strictly inside (not on a face)."""
        return self.check_position(point) is PositionStatus.INSIDE

    def check_position(self, point: Point) -> PositionStatus:
        return self._bounding_box().check_position(point)

    def get_all_vertices(self) -> set[Point]:
        """All 2^N corners."""
        choices = zip(
            self.min_vertex.coordinates, self.max_vertex.coordinates, strict=True
        )
        return {
            Point(coordinates, self.min_vertex.kind)
            for coordinates in itertools.product(*choices)
        }
