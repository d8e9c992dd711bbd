"""Integer interval algebra.

Key Components:
    - Interval: closed [min, max] range with set operations, shifting and
      expansion
    - IntervalSet: canonical union of disjoint, non-touching intervals

Example:
    from aoc.intervals import Interval, IntervalSet

    ranges = IntervalSet.from_intervals([
        Interval.from_boundaries(1, 10),
        Interval.from_boundaries(5, 15),
    ])
    ranges.remove_value(7)
    print(ranges)  # [1, 6], [8, 15]
"""

from aoc.intervals.interval import (
    Boundary,
    Interval,
    Location,
    Relationship,
    maximum_interval_value,
    minimum_interval_value,
)
from aoc.intervals.interval_set import IntervalSet

__all__ = [
    "Boundary",
    "Interval",
    "IntervalSet",
    "Location",
    "Relationship",
    "maximum_interval_value",
    "minimum_interval_value",
]
