"""Closed integer intervals.

An `Interval` is an immutable pydantic model covering every integer in
``[lower, upper]``. Boundaries must lie in the usable range of the interval's
coordinate type, ``[MIN + 1, MAX]``: the lowest value of the type is
reserved so that ``upper - lower + 1`` never needs a wider type than the
one used for counts.
"""

from __future__ import annotations

from enum import Enum
from typing import Self

from pydantic import BaseModel, model_validator

from aoc.geometry.coordinates import DEFAULT_COORDINATE_TYPE, CoordinateType

# Counts saturate at the largest unsigned 64-bit value
MAX_COUNT = CoordinateType.U64.max_value


def minimum_interval_value(kind: CoordinateType = DEFAULT_COORDINATE_TYPE) -> int:
    """Smallest value usable as an interval boundary."""
    return kind.min_value + 1


def maximum_interval_value(kind: CoordinateType = DEFAULT_COORDINATE_TYPE) -> int:
    """Largest value usable as an interval boundary."""
    return kind.max_value


class Location(Enum):
    """Position of a value relative to an interval."""

    LEFT_OUTSIDE = "left_outside"
    LEFT_BOUNDARY = "left_boundary"
    WITHIN = "within"
    RIGHT_BOUNDARY = "right_boundary"
    RIGHT_OUTSIDE = "right_outside"


class Boundary(Enum):
    """The two ends of an interval."""

    START = "start"
    END = "end"


class Relationship(Enum):
    """How two intervals relate to each other.

    SUBSUMED: one interval contains the other (or they are equal).
    OVERLAPPED: they share values but neither contains the other.
    ISOLATED: they share no value.
    """

    SUBSUMED = "subsumed"
    OVERLAPPED = "overlapped"
    ISOLATED = "isolated"


class Interval(BaseModel, frozen=True):
    """A closed range of integers, both boundaries included.

    Attributes:
        lower: Smallest value in the interval.
        upper: Largest value in the interval.
        kind: Signed integer type of the values.
    """

    lower: int
    upper: int
    kind: CoordinateType = DEFAULT_COORDINATE_TYPE

    @model_validator(mode="after")
    def validate_boundaries(self) -> Self:
        """Ensure the boundaries are ordered and inside the usable range."""
        if not self.kind.signed:
            raise ValueError(f"Interval values must be signed, got {self.kind}")
        if self.lower < minimum_interval_value(self.kind):
            raise ValueError(
                "lower cannot be less than the minimum interval value "
                "to prevent overflow"
            )
        if self.upper > maximum_interval_value(self.kind):
            raise ValueError(
                "upper cannot be greater than the maximum interval value"
            )
        if self.lower > self.upper:
            raise ValueError(
                f"lower ({self.lower}) cannot be greater than upper ({self.upper})"
            )
        return self

    @classmethod
    def from_boundaries(
        cls,
        boundary1: int,
        boundary2: int,
        kind: CoordinateType = DEFAULT_COORDINATE_TYPE,
    ) -> Self:
        """Create an interval spanning two boundaries given in any order.

        Raises:
            pydantic.ValidationError: If a boundary is outside the usable range.
        """
        return cls(
            lower=min(boundary1, boundary2),
            upper=max(boundary1, boundary2),
            kind=kind,
        )

    @classmethod
    def from_size(
        cls,
        start: int,
        size: int,
        kind: CoordinateType = DEFAULT_COORDINATE_TYPE,
    ) -> Self:
        """Create the interval of `size` values starting at `start`.

        Raises:
            ValueError: If size is not positive or the interval would not fit
                in the usable range.
        """
        if size <= 0:
            raise ValueError("size must be positive")
        if start + size - 1 > maximum_interval_value(kind):
            raise ValueError("start + size would exceed the maximum interval value")
        return cls(lower=start, upper=start + size - 1, kind=kind)

    @classmethod
    def whole(cls, kind: CoordinateType = DEFAULT_COORDINATE_TYPE) -> Self:
        """Create the interval covering the whole usable range."""
        return cls(
            lower=minimum_interval_value(kind),
            upper=maximum_interval_value(kind),
            kind=kind,
        )

    def _with_boundaries(self, lower: int, upper: int) -> Interval:
        return Interval(lower=lower, upper=upper, kind=self.kind)

    def count(self) -> int:
        """Number of values in the interval, saturating at 2**64 - 1."""
        return min(self.upper - self.lower + 1, MAX_COUNT)

    def get_min(self) -> int:
        return self.lower

    def get_max(self) -> int:
        return self.upper

    def get_boundaries(self) -> tuple[int, int]:
        return (self.lower, self.upper)

    def contains(self, value: int) -> bool:
        return self.lower <= value <= self.upper

    def has_one_value(self) -> bool:
        return self.lower == self.upper

    def subsumes(self, other: Interval) -> bool:
        """Check whether other lies completely inside this interval."""
        return self.lower <= other.lower and other.upper <= self.upper

    def overlaps(self, other: Interval) -> bool:
        """Check whether both intervals share at least one value."""
        return self.lower <= other.upper and other.lower <= self.upper

    def is_contiguous_to(self, other: Interval) -> bool:
        """Check whether one interval starts right after the other ends."""
        return self.upper + 1 == other.lower or other.upper + 1 == self.lower

    def get_relationship_with(self, other: Interval) -> Relationship:
        if self.subsumes(other) or other.subsumes(self):
            return Relationship.SUBSUMED
        if not self.overlaps(other):
            return Relationship.ISOLATED
        return Relationship.OVERLAPPED

    def join(self, other: Interval) -> Interval | None:
        """Union of both intervals.

        Returns:
            The joined interval, or None when the intervals neither overlap
            nor touch.
        """
        if not (self.overlaps(other) or self.is_contiguous_to(other)):
            return None
        return self._with_boundaries(
            min(self.lower, other.lower), max(self.upper, other.upper)
        )

    def intersect(self, other: Interval) -> Interval | None:
        """Values shared by both intervals, or None when they are disjoint."""
        if not self.overlaps(other):
            return None
        return self._with_boundaries(
            max(self.lower, other.lower), min(self.upper, other.upper)
        )

    def difference(self, other: Interval) -> list[Interval]:
        """Values that belong to exactly one of the two intervals.

        Returns:
            Zero, one or two intervals sorted by their lower boundary.
            Disjoint inputs are returned unchanged; equal inputs give an
            empty list.

        Example:
            >>> a = Interval.from_boundaries(5, 15)
            >>> [str(i) for i in a.difference(Interval.from_boundaries(10, 20))]
            ['[5, 9]', '[16, 20]']
        """
        if not self.overlaps(other):
            return sorted([self, other], key=lambda interval: interval.lower)

        pieces: list[Interval] = []
        low_first, low_second = sorted((self.lower, other.lower))
        if low_first != low_second:
            pieces.append(self._with_boundaries(low_first, low_second - 1))
        high_first, high_second = sorted((self.upper, other.upper))
        if high_first != high_second:
            pieces.append(self._with_boundaries(high_first + 1, high_second))
        return pieces

    def get_location(self, value: int) -> Location:
        if value < self.lower:
            return Location.LEFT_OUTSIDE
        if value > self.upper:
            return Location.RIGHT_OUTSIDE
        if value == self.lower:
            return Location.LEFT_BOUNDARY
        if value == self.upper:
            return Location.RIGHT_BOUNDARY
        return Location.WITHIN

    def _resized(self, lower: int, upper: int) -> Interval:
        if lower > upper:
            raise ValueError(
                f"Resulting minimum {lower} is greater than maximum {upper}"
            )
        minimum = minimum_interval_value(self.kind)
        maximum = maximum_interval_value(self.kind)
        if not minimum <= lower <= maximum:
            raise OverflowError("Shifted minimum value is out of bounds")
        if not minimum <= upper <= maximum:
            raise OverflowError("Shifted maximum value is out of bounds")
        return self._with_boundaries(lower, upper)

    def shift(self, offset: int) -> Interval:
        """Move both boundaries by offset.

        Raises:
            OverflowError: If a boundary leaves the usable range.
        """
        return self._resized(self.lower + offset, self.upper + offset)

    def expand_equally(self, offset: int) -> Interval:
        """Grow (or shrink, for negative offsets) both sides by offset.

        Raises:
            ValueError: If shrinking would make lower exceed upper.
            OverflowError: If a boundary leaves the usable range.
        """
        return self._resized(self.lower - offset, self.upper + offset)

    def expand(self, left_offset: int, right_offset: int) -> Interval:
        """Grow the left side by left_offset and the right side by right_offset.

        Raises:
            ValueError: If the result would have lower greater than upper.
            OverflowError: If a boundary leaves the usable range.
        """
        return self._resized(self.lower - left_offset, self.upper + right_offset)

    def get_relative_position_from(self, boundary: Boundary, value: int) -> int:
        """Signed distance from one of the boundaries to value."""
        if boundary is Boundary.START:
            return value - self.lower
        return value - self.upper

    def __lshift__(self, offset: int) -> Interval:
        return self.shift(-offset)

    def __rshift__(self, offset: int) -> Interval:
        return self.shift(offset)

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper}]"
