"""Geometry primitives: N-D integer points and vectors.

Both types are immutable, hashable records of N integer coordinates tagged
with a `CoordinateType`. Every operation that builds a new value checks the
result against that type's range and returns None instead of overflowing.
Equality, hashing and ordering consider coordinates only.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Self

from aoc.geometry.coordinates import (
    DEFAULT_COORDINATE_TYPE,
    SCALAR_TYPE,
    CoordinateType,
)

if TYPE_CHECKING:
    from aoc.geometry.directions import AxisDirection


def _format_coordinates(coordinates: Iterable[int]) -> str:
    return "(" + ",".join(str(value) for value in coordinates) + ")"


def _check_axis(axis: int, dimensions: int) -> None:
    if not 0 <= axis < dimensions:
        raise IndexError("Axis index out of bounds")


def _check_same_dimensions(first: int, second: int) -> None:
    if first != second:
        raise ValueError(f"Dimension mismatch: {first} != {second}")


def _validate_coordinates(
    coordinates: tuple[int, ...], kind: CoordinateType
) -> None:
    if not coordinates:
        raise ValueError("At least one coordinate is required")
    for value in coordinates:
        if not kind.contains(value):
            raise ValueError(f"Coordinate {value} is out of range for {kind}")


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """An N-D lattice point.

    Attributes:
        coordinates: One integer per axis.
        kind: Integer type every coordinate must fit in.
    """

    coordinates: tuple[int, ...]
    kind: CoordinateType = field(default=DEFAULT_COORDINATE_TYPE, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.coordinates, tuple):
            object.__setattr__(self, "coordinates", tuple(self.coordinates))
        _validate_coordinates(self.coordinates, self.kind)

    @classmethod
    def new(
        cls, *coordinates: int, kind: CoordinateType = DEFAULT_COORDINATE_TYPE
    ) -> Self:
        """Create a point from its coordinates, e.g. ``Point.new(1, 2)``."""
        return cls(coordinates, kind)

    @classmethod
    def origin(
        cls, dimensions: int = 2, kind: CoordinateType = DEFAULT_COORDINATE_TYPE
    ) -> Self:
        """Create the all-zero point."""
        return cls((0,) * dimensions, kind)

    @classmethod
    def extremes(
        cls,
        sides: Sequence[AxisDirection],
        kind: CoordinateType = DEFAULT_COORDINATE_TYPE,
    ) -> Self:
        """Create a point at the edge of the coordinate range on every axis.

        Args:
            sides: Per-axis direction; POSITIVE selects the type's maximum,
                NEGATIVE its minimum.
            kind: Coordinate type.

        Returns:
            Point with one extreme coordinate per side.
        """
        return cls(
            tuple(
                kind.max_value if side.multiplier() > 0 else kind.min_value
                for side in sides
            ),
            kind,
        )

    @property
    def dimensions(self) -> int:
        return len(self.coordinates)

    def get(self, axis: int) -> int:
        """Return the coordinate on an axis.

        Raises:
            IndexError: If axis is not in [0, N).
        """
        _check_axis(axis, len(self.coordinates))
        return self.coordinates[axis]

    def __getitem__(self, axis: int) -> int:
        return self.get(axis)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coordinates)

    def is_origin(self) -> bool:
        return all(value == 0 for value in self.coordinates)

    def is_in(self, axis: int, value: int) -> bool:
        """Check whether the coordinate on an axis equals value."""
        return self.get(axis) == value

    def neighbors(self) -> set[Self]:
        """Points one step away along exactly one axis.

        Steps that leave the coordinate range are left out, so a point at the
        edge of the range has fewer than 2N neighbors.
        """
        result: set[Self] = set()
        for axis, value in enumerate(self.coordinates):
            for delta in (1, -1):
                moved = value + delta
                if self.kind.contains(moved):
                    coordinates = list(self.coordinates)
                    coordinates[axis] = moved
                    result.add(type(self)(tuple(coordinates), self.kind))
        return result

    def move_by(self, vector: Vector) -> Self | None:
        """Translate the point by a vector.

        Returns:
            The translated point, or None if any coordinate overflows.
        """
        _check_same_dimensions(len(self.coordinates), len(vector.coordinates))
        coordinates = []
        for value, delta in zip(self.coordinates, vector.coordinates, strict=True):
            moved = self.kind.checked(value + delta)
            if moved is None:
                return None
            coordinates.append(moved)
        return type(self)(tuple(coordinates), self.kind)

    def mirror(self, origin: Point) -> Self | None:
        """Reflect this point through another point.

        Args:
            origin: Center of the reflection.

        Returns:
            The reflected point, or None if it is not representable.
        """
        vector = Vector.from_points(self, origin, kind=CoordinateType.I128)
        if vector is None:
            return None
        reflected = origin.move_by(vector)
        if reflected is None:
            return None
        return type(self)(reflected.coordinates, self.kind)

    def __add__(self, vector: Vector) -> Self | None:
        if not isinstance(vector, Vector):
            return NotImplemented
        return self.move_by(vector)

    def __sub__(self, other: Point) -> Vector | None:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector.from_points(other, self)

    def __str__(self) -> str:
        return _format_coordinates(self.coordinates)


class VectorType(Enum):
    """Shape classification of a vector."""

    ZERO = "zero"
    AXIS = "axis"
    DIAGONAL = "diagonal"
    ARBITRARY = "arbitrary"


@dataclass(frozen=True, slots=True)
class Vector:
    """An N-D integer displacement.

    Coordinates must use a signed type. Arithmetic operators return None
    when a component overflows instead of wrapping or saturating.

    Attributes:
        coordinates: One integer per axis.
        kind: Signed integer type every component must fit in.
    """

    coordinates: tuple[int, ...]
    kind: CoordinateType = field(default=DEFAULT_COORDINATE_TYPE, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.coordinates, tuple):
            object.__setattr__(self, "coordinates", tuple(self.coordinates))
        if not self.kind.signed:
            raise ValueError(f"Vector coordinates must be signed, got {self.kind}")
        _validate_coordinates(self.coordinates, self.kind)

    @classmethod
    def new(
        cls, *coordinates: int, kind: CoordinateType = DEFAULT_COORDINATE_TYPE
    ) -> Self:
        """Create a vector from its components, e.g. ``Vector.new(1, -1)``."""
        return cls(coordinates, kind)

    @classmethod
    def zero(
        cls, dimensions: int = 2, kind: CoordinateType = DEFAULT_COORDINATE_TYPE
    ) -> Self:
        return cls((0,) * dimensions, kind)

    @classmethod
    def from_points(
        cls, start: Point, end: Point, kind: CoordinateType | None = None
    ) -> Self | None:
        """Create the vector going from start to end.

        Args:
            start: Tail of the vector.
            end: Head of the vector.
            kind: Component type. Defaults to the points' type when it is
                signed and to the default signed type otherwise.

        Returns:
            The displacement ``end - start``, or None if a component overflows.
        """
        _check_same_dimensions(len(start.coordinates), len(end.coordinates))
        if kind is None:
            kind = start.kind if start.kind.signed else DEFAULT_COORDINATE_TYPE
        coordinates = []
        for first, second in zip(start.coordinates, end.coordinates, strict=True):
            delta = kind.checked(second - first)
            if delta is None:
                return None
            coordinates.append(delta)
        return cls(tuple(coordinates), kind)

    @classmethod
    def from_point(
        cls, point: Point, kind: CoordinateType | None = None
    ) -> Self | None:
        """Create the vector going from the origin to a point."""
        return cls.from_points(Point.origin(point.dimensions, point.kind), point, kind)

    @property
    def dimensions(self) -> int:
        return len(self.coordinates)

    def get(self, axis: int) -> int:
        """Return the component on an axis.

        Raises:
            IndexError: If axis is not in [0, N).
        """
        _check_axis(axis, len(self.coordinates))
        return self.coordinates[axis]

    def __getitem__(self, axis: int) -> int:
        return self.get(axis)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coordinates)

    def absolute_coordinates(self) -> tuple[int, ...]:
        return tuple(abs(value) for value in self.coordinates)

    def max_coordinate(self) -> int:
        """Largest absolute component."""
        return max(abs(value) for value in self.coordinates)

    def chebyshev_distance(self) -> int:
        """Chebyshev norm, the same as `max_coordinate`."""
        return self.max_coordinate()

    def manhattan_distance(self) -> int:
        """Sum of absolute components."""
        return sum(abs(value) for value in self.coordinates)

    def normalize(self) -> Self:
        """Clamp every component into [-1, 1], keeping its sign."""
        return type(self)(
            tuple(max(-1, min(1, value)) for value in self.coordinates), self.kind
        )

    def is_normalized(self) -> bool:
        return all(-1 <= value <= 1 for value in self.coordinates)

    def is_zero(self) -> bool:
        return all(value == 0 for value in self.coordinates)

    def is_axis(self) -> bool:
        """Check whether exactly one component is nonzero."""
        return sum(1 for value in self.coordinates if value != 0) == 1

    def is_diagonal(self) -> bool:
        """Check whether two components share the same nonzero magnitude."""
        magnitudes = [abs(value) for value in self.coordinates if value != 0]
        return len(set(magnitudes)) < len(magnitudes)

    def is_type(self) -> VectorType:
        """Classify the vector as zero, axis, diagonal or arbitrary."""
        if self.is_zero():
            return VectorType.ZERO
        if self.is_axis():
            return VectorType.AXIS
        if self.is_diagonal():
            return VectorType.DIAGONAL
        return VectorType.ARBITRARY

    def is_collinear(self, other: Vector) -> bool:
        """Check whether other is a nonzero rational multiple of this vector.

        Zero vectors are never collinear with anything.
        """
        _check_same_dimensions(len(self.coordinates), len(other.coordinates))
        if self.is_zero() or other.is_zero():
            return False
        first, second = self.coordinates, other.coordinates
        n = len(first)
        return all(
            first[i] * second[j] == first[j] * second[i]
            for i in range(n)
            for j in range(i + 1, n)
        )

    def to_axis(self, axis: int) -> Self:
        """Keep the component on one axis and zero the others."""
        _check_axis(axis, len(self.coordinates))
        return type(self)(
            tuple(
                value if index == axis else 0
                for index, value in enumerate(self.coordinates)
            ),
            self.kind,
        )

    def convert(self, kind: CoordinateType) -> Vector | None:
        """Cast every component into another signed type.

        Returns:
            The converted vector, or None if a component does not fit.
        """
        if not kind.signed:
            raise ValueError(f"Vector coordinates must be signed, got {kind}")
        if not all(kind.contains(value) for value in self.coordinates):
            return None
        return Vector(self.coordinates, kind)

    def _checked(self, coordinates: Iterable[int]) -> Self | None:
        result = []
        for value in coordinates:
            checked = self.kind.checked(value)
            if checked is None:
                return None
            result.append(checked)
        return type(self)(tuple(result), self.kind)

    def __add__(self, other: Vector) -> Self | None:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dimensions(len(self.coordinates), len(other.coordinates))
        return self._checked(
            a + b for a, b in zip(self.coordinates, other.coordinates, strict=True)
        )

    def __sub__(self, other: Vector) -> Self | None:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dimensions(len(self.coordinates), len(other.coordinates))
        return self._checked(
            a - b for a, b in zip(self.coordinates, other.coordinates, strict=True)
        )

    def __neg__(self) -> Self | None:
        return self._checked(-value for value in self.coordinates)

    def __mul__(self, scalar: int) -> Self | None:
        if not isinstance(scalar, int):
            return NotImplemented
        if not SCALAR_TYPE.contains(scalar):
            raise ValueError(f"Scalar {scalar} is out of range for {SCALAR_TYPE}")
        if not self.kind.contains(scalar):
            return None
        return self._checked(value * scalar for value in self.coordinates)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return _format_coordinates(self.coordinates)
