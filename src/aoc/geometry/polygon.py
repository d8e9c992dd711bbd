"""Orthogonal polygons in 2D.

A polygon is given by its vertices in traversal order, clockwise or
counter-clockwise, and is closed implicitly (the last vertex connects back
to the first). Every side must be parallel to an axis.

Area uses the shoelace formula on exact integers. The number of interior
lattice points follows from Pick's theorem, ``A = I + B/2 - 1``, with ``B``
the number of boundary lattice points.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from aoc.geometry.lines import OrthogonalLine
from aoc.geometry.primitives import Point, Vector

logger = logging.getLogger(__name__)

# Winding sums at or above pi minus this tolerance count as inside
WINDING_TOLERANCE = 1e-9


def angle_between_vectors(
    first: Vector | tuple[int, int], second: Vector | tuple[int, int]
) -> float:
    """Signed angle swept from first to second, in [-pi, pi).

    Args:
        first: Starting 2D vector.
        second: Ending 2D vector.

    Returns:
        Difference of the vectors' polar angles, wrapped into [-pi, pi).
    """
    theta1 = math.atan2(first[1], first[0])
    theta2 = math.atan2(second[1], second[0])
    return (theta2 - theta1 + math.pi) % math.tau - math.pi


def _twice_signed_area(points: Sequence[Point]) -> int:
    left = 0
    right = 0
    for a, b in _cyclic_pairs(points):
        left += a[0] * b[1]
        right += b[0] * a[1]
    return left - right


def _cyclic_pairs(points: Sequence[Point]) -> Iterator[tuple[Point, Point]]:
    return zip(points, [*points[1:], points[0]], strict=True)


@dataclass(frozen=True)
class OrthogonalPolygon2D:
    """A simple polygon whose sides are all axis-aligned.

    Attributes:
        vertices: Corners in traversal order.

    Example:
        square = OrthogonalPolygon2D.from_vertices([
            Point.new(1, 0), Point.new(3, 0), Point.new(3, 2), Point.new(1, 2),
        ])
        square.area()  # 4.0
        square.number_of_intrinsic_points()  # 1
    """

    vertices: tuple[Point, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.vertices, tuple):
            object.__setattr__(self, "vertices", tuple(self.vertices))
        if len(self.vertices) < 3:
            raise ValueError("A polygon must have at least 3 vertices.")
        if any(vertex.dimensions != 2 for vertex in self.vertices):
            raise ValueError("OrthogonalPolygon2D requires 2D vertices")
        for a, b in _cyclic_pairs(self.vertices):
            side = Vector.from_points(a, b)
            if side is None or not side.is_axis():
                raise ValueError(
                    "The provided vertices do not form an orthogonal polygon."
                )
        logger.debug("Built orthogonal polygon with %d vertices", len(self.vertices))

    @classmethod
    def from_vertices(cls, vertices: Sequence[Point]) -> OrthogonalPolygon2D:
        """Create a polygon from its corners.

        Raises:
            ValueError: If there are fewer than 3 vertices or two consecutive
                vertices (including last and first) differ on other than
                exactly one axis.
        """
        return cls(tuple(vertices))

    def get_vertexes(self) -> tuple[Point, ...]:
        return self.vertices

    def get_sides(self) -> list[OrthogonalLine]:
        """Sides in traversal order, the closing side last."""
        return [
            OrthogonalLine.from_points(a, b) for a, b in _cyclic_pairs(self.vertices)
        ]

    def area(self) -> float:
        """Enclosed area from the shoelace formula."""
        return abs(_twice_signed_area(self.vertices)) * 0.5

    def perimeter(self) -> int:
        """Sum of the side lengths."""
        return sum(
            sum(abs(p - q) for p, q in zip(a, b, strict=True))
            for a, b in _cyclic_pairs(self.vertices)
        )

    def is_on_edge(self, point: Point) -> bool:
        return any(side.contains_point(point) for side in self.get_sides())

    def is_inside(self, point: Point) -> bool:
        """Check whether point is strictly inside, using the winding number.

        The angles swept from each vertex to the next, as seen from point,
        add up to a full turn for interior points and to zero outside.
        Points on an edge are not inside.
        """
        if self.is_on_edge(point):
            return False
        total = 0.0
        for a, b in _cyclic_pairs(self.vertices):
            total += angle_between_vectors(
                (point[0] - a[0], point[1] - a[1]),
                (point[0] - b[0], point[1] - b[1]),
            )
        return abs(total) >= math.pi - WINDING_TOLERANCE

    def is_outside(self, point: Point) -> bool:
        return not self.is_on_edge(point) and not self.is_inside(point)

    def get_boundary_points(self) -> list[Point]:
        """Every lattice point on the perimeter, once, in traversal order.

        Each side contributes its points after its starting vertex up to and
        including its ending vertex, so the first vertex appears last.
        """
        points: list[Point] = []
        for side in self.get_sides():
            walk = side.iter()
            next(walk)
            points.extend(walk)
        return points

    def number_of_intrinsic_points(self) -> int:
        """Number of lattice points strictly inside the polygon (Pick's theorem)."""
        boundary = self.get_boundary_points()
        twice_area = abs(_twice_signed_area(boundary))
        return (twice_area - len(boundary) + 2) // 2
