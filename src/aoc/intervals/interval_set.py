"""Canonical unions of closed integer intervals."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from typing import Self

from aoc.geometry.coordinates import DEFAULT_COORDINATE_TYPE, CoordinateType
from aoc.intervals.interval import (
    MAX_COUNT,
    Interval,
    maximum_interval_value,
    minimum_interval_value,
)


class IntervalSet:
    """A set of integers stored as disjoint intervals.

    The members are always sorted by their lower boundary, never overlap and
    never touch: every mutator finishes by merging overlapping or contiguous
    intervals. All members share the set's coordinate type.

    Example:
        >>> s = IntervalSet.from_intervals([
        ...     Interval.from_boundaries(1, 10),
        ...     Interval.from_boundaries(5, 15),
        ...     Interval.from_boundaries(12, 20),
        ... ])
        >>> str(s), s.count()
        ('[1, 20]', 20)
    """

    def __init__(
        self,
        intervals: Iterable[Interval] = (),
        kind: CoordinateType = DEFAULT_COORDINATE_TYPE,
    ) -> None:
        self.kind = kind
        self._intervals: list[Interval] = []
        for interval in intervals:
            self._check_kind(interval)
            self._intervals.append(interval)
        self._reduce()

    @classmethod
    def from_intervals(cls, intervals: Iterable[Interval]) -> Self:
        """Create a set from intervals that may overlap or touch.

        The coordinate type is taken from the first interval.
        """
        intervals = list(intervals)
        kind = intervals[0].kind if intervals else DEFAULT_COORDINATE_TYPE
        return cls(intervals, kind)

    def _check_kind(self, interval: Interval) -> None:
        if interval.kind is not self.kind:
            raise ValueError(
                f"Interval type {interval.kind} does not match set type {self.kind}"
            )

    def _copy(self, intervals: Iterable[Interval]) -> IntervalSet:
        return IntervalSet(intervals, self.kind)

    def _find(self, value: int) -> Interval | None:
        index = bisect.bisect_right(
            self._intervals, value, key=lambda interval: interval.lower
        )
        if index == 0:
            return None
        candidate = self._intervals[index - 1]
        return candidate if candidate.contains(value) else None

    def _reduce(self) -> None:
        if not self._intervals:
            return
        self._intervals.sort(key=lambda interval: interval.lower)
        merged = [self._intervals[0]]
        for interval in self._intervals[1:]:
            current = merged[-1]
            if current.upper + 1 >= interval.lower:
                if interval.upper > current.upper:
                    merged[-1] = Interval(
                        lower=current.lower, upper=interval.upper, kind=self.kind
                    )
            else:
                merged.append(interval)
        self._intervals = merged

    def get(self) -> list[Interval]:
        """Members in ascending order."""
        return list(self._intervals)

    def is_empty(self) -> bool:
        return not self._intervals

    def add(self, interval: Interval) -> None:
        self._check_kind(interval)
        self._intervals.append(interval)
        self._reduce()

    def add_value(self, value: int) -> None:
        self.add(Interval.from_boundaries(value, value, self.kind))

    def remove(self, interval: Interval) -> None:
        """Remove every value of interval from the set."""
        self._check_kind(interval)
        remaining: list[Interval] = []
        for member in self._intervals:
            if not member.overlaps(interval):
                remaining.append(member)
                continue
            if member.lower < interval.lower:
                remaining.append(
                    Interval(
                        lower=member.lower, upper=interval.lower - 1, kind=self.kind
                    )
                )
            if member.upper > interval.upper:
                remaining.append(
                    Interval(
                        lower=interval.upper + 1, upper=member.upper, kind=self.kind
                    )
                )
        self._intervals = remaining
        self._reduce()

    def remove_value(self, value: int) -> None:
        self.remove(Interval.from_boundaries(value, value, self.kind))

    def join(self, other: IntervalSet) -> IntervalSet:
        """Union of both sets as a new set."""
        return self._copy([*self._intervals, *other._intervals])

    def subsumes_set(self, other: IntervalSet) -> bool:
        return all(self.subsumes_interval(interval) for interval in other)

    def subsumes_interval(self, other: Interval) -> bool:
        return any(member.subsumes(other) for member in self._intervals)

    def overlaps_set(self, other: IntervalSet) -> bool:
        return any(self.overlaps_interval(interval) for interval in other)

    def overlaps_interval(self, other: Interval) -> bool:
        return any(member.overlaps(other) for member in self._intervals)

    def contains(self, value: int) -> bool:
        return self._find(value) is not None

    def count(self) -> int:
        """Number of values in the set, saturating at 2**64 - 1."""
        return min(sum(member.count() for member in self._intervals), MAX_COUNT)

    def extract(self, minimum: int, maximum: int) -> IntervalSet:
        """Restrict the set to values in [minimum, maximum]."""
        result = self._copy(self._intervals)
        lowest = minimum_interval_value(self.kind)
        highest = maximum_interval_value(self.kind)
        if minimum > lowest:
            result.remove(
                Interval(lower=lowest, upper=min(minimum - 1, highest), kind=self.kind)
            )
        if maximum < highest:
            result.remove(
                Interval(lower=max(maximum + 1, lowest), upper=highest, kind=self.kind)
            )
        return result

    def get_interval_for(self, value: int) -> Interval | None:
        """Member containing value, or None."""
        return self._find(value)

    def intersect(self, other: Interval) -> IntervalSet:
        """Values of the set that also belong to other."""
        self._check_kind(other)
        pieces = [member.intersect(other) for member in self._intervals]
        return self._copy(piece for piece in pieces if piece is not None)

    def __iter__(self) -> Iterator[Interval]:
        return iter(list(self._intervals))

    def __len__(self) -> int:
        return len(self._intervals)

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._intervals == other._intervals

    def __repr__(self) -> str:
        return f"IntervalSet([{self}])"

    def __str__(self) -> str:
        return ", ".join(str(interval) for interval in self._intervals)
