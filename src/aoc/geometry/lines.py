"""Line segments between two lattice points.

Three segment types share the same two-endpoint representation:

- Line: any direction, N-D. Only metric queries.
- OrthogonalLine: axis-aligned, N-D.
- OrthogonalLine2D: axis-aligned or 45 degree diagonal, 2D.

Orthogonal segments contain every lattice point between their endpoints and
can be iterated, intersected and compared for collinearity. Intersections
are returned sorted by (x, then y).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, Self

from aoc.geometry.coordinates import CoordinateType
from aoc.geometry.primitives import Point, Vector


@dataclass(frozen=True)
class AxisAligned:
    """Line type of a segment parallel to one axis."""

    axis: int


@dataclass(frozen=True)
class Diagonal:
    """Line type of a 45 degree 2D segment."""


OrthogonalLine2DType = AxisAligned | Diagonal


@dataclass(frozen=True)
class Line:
    """A segment between two distinct points, in any direction.

    Attributes:
        start: First endpoint.
        end: Second endpoint.
    """

    start: Point
    end: Point

    _DIMENSIONS: ClassVar[int | None] = None
    _DIRECTION_ERROR: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if self.start.dimensions != self.end.dimensions:
            raise ValueError(
                f"Dimension mismatch: {self.start.dimensions} != {self.end.dimensions}"
            )
        if self._DIMENSIONS is not None and self.start.dimensions != self._DIMENSIONS:
            raise ValueError(
                f"{type(self).__name__} requires {self._DIMENSIONS}D points"
            )
        if self.start == self.end:
            raise ValueError("Points must be distinct to form a line.")
        vector = Vector.from_points(self.start, self.end, kind=CoordinateType.I128)
        if vector is None:
            raise ValueError("Vector cannot be created from points.")
        if not self._accepts(vector):
            raise ValueError(self._DIRECTION_ERROR)

    @classmethod
    def _accepts(cls, vector: Vector) -> bool:
        return True

    @classmethod
    def from_points(cls, start: Point, end: Point) -> Self:
        """Create a segment from its endpoints.

        Raises:
            ValueError: If the points coincide or the direction is not
                allowed for this segment type.
        """
        return cls(start, end)

    @classmethod
    def try_from_points(cls, start: Point, end: Point) -> Self | None:
        """Create a segment, or return None when the endpoints cannot form one."""
        if start.dimensions != end.dimensions or start == end:
            return None
        if cls._DIMENSIONS is not None and start.dimensions != cls._DIMENSIONS:
            return None
        vector = Vector.from_points(start, end, kind=CoordinateType.I128)
        if vector is None or not cls._accepts(vector):
            return None
        return cls(start, end)

    @classmethod
    def from_point_and_vector(cls, start: Point, vector: Vector) -> Self:
        """Create the segment from start to start + vector.

        Raises:
            ValueError: If the vector is zero, points in a direction this
                segment type does not allow, or leads out of the coordinate
                range.
        """
        if vector.is_zero():
            raise ValueError("Vector must be non-zero to form a line.")
        if not cls._accepts(vector):
            raise ValueError(cls._DIRECTION_ERROR)
        end = start.move_by(vector)
        if end is None:
            raise ValueError("Other vertex is out of bounds.")
        return cls(start, end)

    def _inherent_vector(self) -> Vector:
        vector = Vector.from_points(self.start, self.end, kind=CoordinateType.I128)
        if vector is None:
            raise ValueError("Vector cannot be created from points.")
        return vector

    def get_vertexes(self) -> tuple[Point, Point]:
        return (self.start, self.end)

    def get_vector(self) -> Vector:
        """Vector from start to end."""
        return self._inherent_vector()

    def absolute_coordinates(self) -> tuple[int, ...]:
        return self._inherent_vector().absolute_coordinates()

    def manhattan_distance(self) -> int:
        return self._inherent_vector().manhattan_distance()

    def is_axis(self) -> bool:
        return self._inherent_vector().is_axis()

    def __str__(self) -> str:
        return f"[{self.start},{self.end}]"


@dataclass(frozen=True)
class _OrthogonalSegment(Line):
    """Segment whose lattice points are evenly spaced unit steps apart."""

    def length(self) -> int:
        """Number of lattice points on the segment, both endpoints included."""
        return self._inherent_vector().max_coordinate() + 1

    def iter(self) -> Iterator[Point]:
        """Yield every lattice point from start to end, in order."""
        step = self._inherent_vector().normalize().coordinates
        origin = self.start.coordinates
        kind = self.start.kind
        for index in range(self.length()):
            yield Point(
                tuple(value + index * delta for value, delta in zip(origin, step)),
                kind,
            )

    def __iter__(self) -> Iterator[Point]:
        return self.iter()


def _fixed_coordinates_match(first: Line, second: Line, axis: int) -> bool:
    return all(
        a == b
        for index, (a, b) in enumerate(zip(first.start, second.start, strict=True))
        if index != axis
    )


def _range_on_axis(line: Line, axis: int) -> tuple[int, int]:
    a, b = line.start[axis], line.end[axis]
    return (min(a, b), max(a, b))


def _axis_overlap(first: Line, second: Line, axis: int) -> tuple[int, int] | None:
    """Common range on axis of two segments parallel to it, if any."""
    if not _fixed_coordinates_match(first, second, axis):
        return None
    low1, high1 = _range_on_axis(first, axis)
    low2, high2 = _range_on_axis(second, axis)
    low, high = max(low1, low2), min(high1, high2)
    if low > high:
        return None
    return (low, high)


def _points_on_axis(base: Point, axis: int, low: int, high: int) -> list[Point]:
    points = []
    for value in range(low, high + 1):
        coordinates = list(base.coordinates)
        coordinates[axis] = value
        points.append(Point(tuple(coordinates), base.kind))
    return points


def _axis_crossing(
    first: OrthogonalLine | OrthogonalLine2D,
    first_axis: int,
    second: OrthogonalLine | OrthogonalLine2D,
) -> Point | None:
    """Single common point of two segments parallel to different axes."""
    coordinates = list(first.start.coordinates)
    coordinates[first_axis] = second.start[first_axis]
    candidate = Point(tuple(coordinates), first.start.kind)
    if first.contains_point(candidate) and second.contains_point(candidate):
        return candidate
    return None


@dataclass(frozen=True)
class OrthogonalLine(_OrthogonalSegment):
    """An N-D segment parallel to exactly one axis.

    Example:
        line = OrthogonalLine.from_points(Point.new(1, 2, 3), Point.new(1, 2, 7))
        line.length()  # 5
        line.get_axis()  # 2
    """

    _DIRECTION_ERROR: ClassVar[str] = "Orthogonal line must be axis-aligned."

    @classmethod
    def _accepts(cls, vector: Vector) -> bool:
        return vector.is_axis()

    def get_axis(self) -> int:
        """Index of the axis the segment runs along."""
        return next(
            axis
            for axis, value in enumerate(self._inherent_vector().coordinates)
            if value != 0
        )

    def contains_point(self, point: Point) -> bool:
        if point.dimensions != self.start.dimensions:
            raise ValueError(
                f"Dimension mismatch: {point.dimensions} != {self.start.dimensions}"
            )
        axis = self.get_axis()
        for index, (value, fixed) in enumerate(zip(point, self.start, strict=True)):
            if index != axis and value != fixed:
                return False
        low, high = _range_on_axis(self, axis)
        return low <= point[axis] <= high

    def overlaps(self, other: OrthogonalLine) -> bool:
        """Check whether both segments share at least one lattice point."""
        axis, other_axis = self.get_axis(), other.get_axis()
        if axis == other_axis:
            return _axis_overlap(self, other, axis) is not None
        return _axis_crossing(self, axis, other) is not None

    def intersect(self, other: OrthogonalLine) -> list[Point]:
        """Every lattice point shared by both segments, in ascending order."""
        axis, other_axis = self.get_axis(), other.get_axis()
        if axis == other_axis:
            overlap = _axis_overlap(self, other, axis)
            if overlap is None:
                return []
            return _points_on_axis(self.start, axis, *overlap)
        crossing = _axis_crossing(self, axis, other)
        return [] if crossing is None else [crossing]

    def is_collinear(self, other: OrthogonalLine) -> bool:
        """Check whether both segments lie on the same infinite line."""
        axis = self.get_axis()
        return axis == other.get_axis() and _fixed_coordinates_match(self, other, axis)


@dataclass(frozen=True)
class OrthogonalLine2D(_OrthogonalSegment):
    """A 2D segment that is axis-aligned or runs at exactly 45 degrees.

    Example:
        line = OrthogonalLine2D.from_points(Point.new(8, 0), Point.new(0, 8))
        line.is_type()  # Diagonal()
        line.intersect(
            OrthogonalLine2D.from_points(Point.new(6, 4), Point.new(2, 0))
        )  # [Point((5, 3))]
    """

    _DIMENSIONS: ClassVar[int | None] = 2
    _DIRECTION_ERROR: ClassVar[str] = (
        "Orthogonal line must be axis-aligned or diagonal."
    )

    @classmethod
    def _accepts(cls, vector: Vector) -> bool:
        return vector.is_axis() or vector.is_diagonal()

    def get_axis(self) -> int | None:
        """Axis the segment runs along, or None for a diagonal."""
        vector = self._inherent_vector()
        if not vector.is_axis():
            return None
        return next(axis for axis, value in enumerate(vector) if value != 0)

    def is_type(self) -> OrthogonalLine2DType:
        axis = self.get_axis()
        return Diagonal() if axis is None else AxisAligned(axis)

    def contains_point(self, point: Point) -> bool:
        if point in (self.start, self.end):
            return True
        offset = Vector.from_points(self.start, point, kind=CoordinateType.I128)
        if offset is None or not (offset.is_axis() or offset.is_diagonal()):
            return False
        if not self._inherent_vector().is_collinear(offset):
            return False
        return all(
            min(a, b) <= value <= max(a, b)
            for a, b, value in zip(self.start, self.end, point, strict=True)
        )

    def _shorter_and_longer(
        self, other: OrthogonalLine2D
    ) -> tuple[OrthogonalLine2D, OrthogonalLine2D]:
        if other.length() < self.length():
            return (other, self)
        return (self, other)

    def overlaps(self, other: OrthogonalLine2D) -> bool:
        """Check whether both segments share at least one lattice point."""
        match (self.is_type(), other.is_type()):
            case (AxisAligned(axis), AxisAligned(other_axis)) if axis == other_axis:
                return _axis_overlap(self, other, axis) is not None
            case (AxisAligned(axis), AxisAligned()):
                return _axis_crossing(self, axis, other) is not None
            case (Diagonal(), Diagonal()) if self.is_collinear(other):
                return any(
                    self.contains_point(p) for p in other.get_vertexes()
                ) or any(other.contains_point(p) for p in self.get_vertexes())
            case _:
                shorter, longer = self._shorter_and_longer(other)
                return any(longer.contains_point(p) for p in shorter.iter())

    def intersect(self, other: OrthogonalLine2D) -> list[Point]:
        """Every lattice point shared by both segments, sorted by (x, y)."""
        match (self.is_type(), other.is_type()):
            case (AxisAligned(axis), AxisAligned(other_axis)) if axis == other_axis:
                overlap = _axis_overlap(self, other, axis)
                if overlap is None:
                    return []
                points = _points_on_axis(self.start, axis, *overlap)
            case (AxisAligned(axis), AxisAligned()):
                crossing = _axis_crossing(self, axis, other)
                points = [] if crossing is None else [crossing]
            case (Diagonal(), Diagonal()) if self.is_collinear(other):
                shorter, longer = self._shorter_and_longer(other)
                points = [p for p in shorter.iter() if longer.contains_point(p)]
            case _:
                shorter, longer = self._shorter_and_longer(other)
                points = next(
                    ([p] for p in shorter.iter() if longer.contains_point(p)), []
                )
        return sorted(points)

    def is_collinear(self, other: OrthogonalLine2D) -> bool:
        """Check whether both segments lie on a common orthogonal line.

        The directions must be parallel and the smallest segment spanning
        all four endpoints must be an orthogonal line of the same type that
        contains each of them.
        """
        if not self._inherent_vector().is_collinear(other._inherent_vector()):
            return False
        vertices = [*self.get_vertexes(), *other.get_vertexes()]
        container = OrthogonalLine2D.try_from_points(min(vertices), max(vertices))
        if container is None or container.is_type() != self.is_type():
            return False
        return all(container.contains_point(vertex) for vertex in vertices)
