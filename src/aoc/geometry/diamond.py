"""Square diamonds: lattice balls under the Manhattan (L1) distance in 2D."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from aoc.geometry.primitives import Point


def _manhattan(a: Point, b: Point) -> int:
    return sum(abs(x - y) for x, y in zip(a, b, strict=True))


@dataclass(frozen=True)
class SquareDiamond2D:
    """Every lattice point within a Manhattan distance of a center.

    Attributes:
        center: Center of the diamond.
        distance: Manhattan radius, non-negative.
        vertices: West, south, east and north corners, in that order.
    """

    center: Point
    distance: int
    vertices: tuple[Point, Point, Point, Point] = field(init=False)

    def __post_init__(self) -> None:
        if self.center.dimensions != 2:
            raise ValueError("SquareDiamond2D requires a 2D center")
        if self.distance < 0:
            raise ValueError(f"distance must be non-negative, got {self.distance}")
        x, y = self.center.coordinates
        d = self.distance
        kind = self.center.kind
        corners = ((x - d, y), (x, y - d), (x + d, y), (x, y + d))
        if not all(kind.contains(value) for corner in corners for value in corner):
            raise ValueError("Diamond vertices are out of bounds")
        object.__setattr__(
            self, "vertices", tuple(Point(corner, kind) for corner in corners)
        )

    @classmethod
    def from_center_and_distance(cls, center: Point, distance: int) -> SquareDiamond2D:
        return cls(center, distance)

    @classmethod
    def from_center_and_perimeter_point(
        cls, center: Point, perimeter_point: Point
    ) -> SquareDiamond2D:
        """Create the diamond whose border passes through perimeter_point."""
        return cls(center, _manhattan(center, perimeter_point))

    def get_center(self) -> Point:
        return self.center

    def get_distance(self) -> int:
        return self.distance

    def get_vertexes(self) -> tuple[Point, Point, Point, Point]:
        return self.vertices

    def is_inside(self, point: Point) -> bool:
        """Check whether point is in the diamond, border included."""
        return _manhattan(self.center, point) <= self.distance

    def is_on_border(self, point: Point) -> bool:
        return _manhattan(self.center, point) == self.distance

    def is_outside(self, point: Point) -> bool:
        return _manhattan(self.center, point) > self.distance

    def area(self) -> int:
        """Number of lattice points in the diamond."""
        diagonal_length = 2 * self.distance + 1
        return diagonal_length**2 // 2 + 1

    def step_around_outside_border(self) -> Iterator[Point]:
        """Walk the points at distance + 1 from the center.

        The walk starts north of the center at ``(cx, cy + d + 1)`` and goes
        clockwise (y grows upwards) in four legs of ``d + 1`` points, so the
        full ring has ``4 * (d + 1)`` points and none repeats. Points that
        are not representable in the center's coordinate type are skipped.
        """
        x, y = self.center.coordinates
        reach = self.distance + 1
        kind = self.center.kind
        legs = (
            lambda i: (x + i, y + reach - i),
            lambda i: (x + reach - i, y - i),
            lambda i: (x - i, y - reach + i),
            lambda i: (x - reach + i, y + i),
        )
        for leg in legs:
            for i in range(reach):
                coordinates = leg(i)
                if kind.contains(coordinates[0]) and kind.contains(coordinates[1]):
                    yield Point(coordinates, kind)
