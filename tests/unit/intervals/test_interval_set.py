"""Unit tests for IntervalSet."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from aoc.geometry import CoordinateType
from aoc.intervals import Interval, IntervalSet


def iv(a: int, b: int) -> Interval:
    return Interval.from_boundaries(a, b)


def boundaries(intervals: IntervalSet) -> list[tuple[int, int]]:
    return [interval.get_boundaries() for interval in intervals]


@st.composite
def interval_lists(draw: st.DrawFn) -> list[Interval]:
    """Up to eight small, possibly overlapping intervals."""
    pairs = draw(
        st.lists(
            st.tuples(
                st.integers(min_value=-30, max_value=30),
                st.integers(min_value=-30, max_value=30),
            ),
            max_size=8,
        )
    )
    return [iv(a, b) for a, b in pairs]


def assert_canonical(intervals: IntervalSet) -> None:
    members = intervals.get()
    for current, following in zip(members, members[1:]):
        assert current.get_max() + 1 < following.get_min()


def covered(intervals: list[Interval]) -> set[int]:
    return {
        value
        for interval in intervals
        for value in range(interval.lower, interval.upper + 1)
    }


class TestConstruction:
    """Tests for building interval sets."""

    def test_new_set_is_empty(self) -> None:
        """Test the default set holds nothing."""
        intervals = IntervalSet()
        assert intervals.is_empty()
        assert intervals.count() == 0
        assert len(intervals) == 0
        assert intervals.get() == []

    def test_from_intervals_merges_overlaps(self) -> None:
        """Test overlapping intervals collapse into one."""
        intervals = IntervalSet.from_intervals([iv(1, 10), iv(5, 15), iv(12, 20)])
        assert boundaries(intervals) == [(1, 20)]
        assert intervals.count() == 20

    def test_from_intervals_merges_contiguous(self) -> None:
        """Test touching intervals collapse into one."""
        intervals = IntervalSet.from_intervals([iv(11, 15), iv(1, 10)])
        assert boundaries(intervals) == [(1, 15)]

    def test_from_intervals_keeps_gaps(self) -> None:
        """Test separate intervals stay separate and sorted."""
        intervals = IntervalSet.from_intervals([iv(20, 25), iv(-5, -1), iv(1, 10)])
        assert boundaries(intervals) == [(-5, -1), (1, 10), (20, 25)]

    def test_from_intervals_takes_first_kind(self) -> None:
        """Test the set adopts the coordinate type of its members."""
        small = Interval.from_boundaries(1, 2, CoordinateType.I8)
        assert IntervalSet.from_intervals([small]).kind is CoordinateType.I8

    def test_mixed_kinds_rejected(self) -> None:
        """Test every member must share the set's coordinate type."""
        small = Interval.from_boundaries(1, 2, CoordinateType.I8)
        with pytest.raises(ValueError, match="does not match set type"):
            IntervalSet.from_intervals([small, iv(5, 6)])
        with pytest.raises(ValueError, match="does not match set type"):
            IntervalSet().add(small)

    def test_str(self) -> None:
        """Test members are joined with commas."""
        assert str(IntervalSet()) == ""
        assert str(IntervalSet([iv(5, 10)])) == "[5, 10]"
        assert str(IntervalSet([iv(7, 9), iv(1, 3)])) == "[1, 3], [7, 9]"
        assert repr(IntervalSet([iv(1, 3)])) == "IntervalSet([[1, 3]])"

    def test_equality(self) -> None:
        """Test sets with the same values are equal."""
        assert IntervalSet([iv(1, 5), iv(6, 9)]) == IntervalSet([iv(1, 9)])
        assert IntervalSet([iv(1, 5)]) != IntervalSet([iv(1, 6)])

    def test_i8_full_range(self) -> None:
        """Test the widest i8 member counts 255 values."""
        intervals = IntervalSet([Interval.whole(CoordinateType.I8)], CoordinateType.I8)
        assert intervals.count() == 255
        assert intervals.contains(-127)
        assert intervals.contains(127)


class TestMutation:
    """Tests for add and remove."""

    def test_add_subsumed(self) -> None:
        """Test adding a contained interval changes nothing."""
        intervals = IntervalSet([iv(1, 20)])
        intervals.add(iv(5, 10))
        assert boundaries(intervals) == [(1, 20)]

    def test_add_subsuming(self) -> None:
        """Test adding a wider interval swallows the members."""
        intervals = IntervalSet([iv(5, 8), iv(12, 15)])
        intervals.add(iv(1, 20))
        assert boundaries(intervals) == [(1, 20)]

    def test_add_value_extends(self) -> None:
        """Test a value next to a member extends it."""
        intervals = IntervalSet([iv(1, 5)])
        intervals.add_value(6)
        assert boundaries(intervals) == [(1, 6)]

    def test_add_value_bridges(self) -> None:
        """Test a value filling a one-wide gap joins two members."""
        intervals = IntervalSet([iv(1, 5), iv(7, 10)])
        intervals.add_value(6)
        assert boundaries(intervals) == [(1, 10)]

    def test_add_value_isolated(self) -> None:
        """Test a far value becomes its own member."""
        intervals = IntervalSet([iv(1, 5)])
        intervals.add_value(10)
        assert boundaries(intervals) == [(1, 5), (10, 10)]

    def test_remove_value_in_middle(self) -> None:
        """Test removing an inner value splits the member."""
        intervals = IntervalSet([iv(-5, 5)])
        intervals.remove_value(0)
        assert boundaries(intervals) == [(-5, -1), (1, 5)]
        assert intervals.count() == 10
        assert 0 not in intervals

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, [(2, 10)]),
            (10, [(1, 9)]),
            (20, [(1, 10)]),
        ],
    )
    def test_remove_value_at_edges(
        self, value: int, expected: list[tuple[int, int]]
    ) -> None:
        """Test removing a boundary value shrinks the member."""
        intervals = IntervalSet([iv(1, 10)])
        intervals.remove_value(value)
        assert boundaries(intervals) == expected

    def test_remove_single_value_member(self) -> None:
        """Test removing the only value empties the set."""
        intervals = IntervalSet([iv(5, 5)])
        intervals.remove_value(5)
        assert intervals.is_empty()

    def test_remove_interval_across_members(self) -> None:
        """Test a removal can trim several members at once."""
        intervals = IntervalSet([iv(1, 10), iv(15, 25), iv(30, 40)])
        intervals.remove(iv(5, 32))
        assert boundaries(intervals) == [(1, 4), (33, 40)]

    def test_remove_subsumed_interval(self) -> None:
        """Test removing an inner interval splits the member."""
        intervals = IntervalSet([iv(1, 20)])
        intervals.remove(iv(5, 10))
        assert boundaries(intervals) == [(1, 4), (11, 20)]

    def test_remove_everything(self) -> None:
        """Test a covering removal empties the set."""
        intervals = IntervalSet([iv(5, 10), iv(12, 14)])
        intervals.remove(iv(1, 20))
        assert intervals.is_empty()
        assert str(intervals) == ""


class TestQueries:
    """Tests for the read-only queries."""

    def test_join(self) -> None:
        """Test join builds a new set and leaves both inputs alone."""
        first = IntervalSet([iv(1, 5)])
        second = IntervalSet([iv(6, 10), iv(20, 25)])
        joined = first.join(second)
        assert boundaries(joined) == [(1, 10), (20, 25)]
        assert boundaries(first) == [(1, 5)]
        assert boundaries(second) == [(6, 10), (20, 25)]
        assert boundaries(IntervalSet().join(IntervalSet())) == []

    def test_subsumes_set(self) -> None:
        """Test every member of the other set must lie inside one member."""
        big = IntervalSet([iv(1, 10), iv(20, 30)])
        assert big.subsumes_set(IntervalSet([iv(2, 5), iv(25, 30)]))
        assert not big.subsumes_set(IntervalSet([iv(8, 12)]))
        assert big.subsumes_set(IntervalSet())
        assert not IntervalSet().subsumes_set(big)
        assert IntervalSet().subsumes_set(IntervalSet())

    def test_subsumes_interval(self) -> None:
        """Test a single member must hold the whole interval."""
        intervals = IntervalSet([iv(1, 10), iv(20, 30)])
        assert intervals.subsumes_interval(iv(22, 28))
        assert not intervals.subsumes_interval(iv(5, 25))
        assert not IntervalSet().subsumes_interval(iv(1, 1))

    def test_overlaps(self) -> None:
        """Test sharing a single value counts as overlapping."""
        first = IntervalSet([iv(1, 5)])
        assert first.overlaps_set(IntervalSet([iv(5, 10)]))
        assert IntervalSet([iv(5, 10)]).overlaps_set(first)
        assert not first.overlaps_set(IntervalSet([iv(10, 15)]))
        assert not first.overlaps_set(IntervalSet())
        assert first.overlaps_interval(iv(0, 1))
        assert not first.overlaps_interval(iv(6, 9))

    def test_contains(self) -> None:
        """Test membership across members and gaps."""
        intervals = IntervalSet([iv(1, 5), iv(10, 15)])
        assert intervals.contains(1)
        assert intervals.contains(15)
        assert 12 in intervals
        assert not intervals.contains(7)
        assert not intervals.contains(0)
        assert not IntervalSet().contains(0)

    def test_count(self) -> None:
        """Test count adds up the members."""
        assert IntervalSet([iv(1, 5), iv(10, 15)]).count() == 11

    def test_count_saturates(self) -> None:
        """Test a set wider than u64 saturates its count."""
        intervals = IntervalSet(
            [Interval.whole(CoordinateType.I128)], CoordinateType.I128
        )
        assert intervals.count() == 2**64 - 1

    def test_extract(self) -> None:
        """Test extract keeps only values in the window."""
        intervals = IntervalSet([iv(1, 10), iv(15, 25), iv(30, 40)])
        extracted = intervals.extract(5, 35)
        assert boundaries(extracted) == [(5, 10), (15, 25), (30, 35)]
        assert extracted.count() == 6 + 11 + 6
        assert boundaries(intervals) == [(1, 10), (15, 25), (30, 40)]

    def test_extract_edge_cases(self) -> None:
        """Test empty, disjoint and exact windows."""
        assert IntervalSet().extract(5, 15).is_empty()
        assert IntervalSet([iv(1, 5), iv(20, 25)]).extract(10, 15).is_empty()
        assert boundaries(IntervalSet([iv(5, 15)]).extract(5, 15)) == [(5, 15)]

    def test_get_interval_for(self) -> None:
        """Test the member holding a value is returned."""
        intervals = IntervalSet([iv(1, 10), iv(20, 30)])
        assert intervals.get_interval_for(25) == iv(20, 30)
        assert intervals.get_interval_for(1) == iv(1, 10)
        assert intervals.get_interval_for(15) is None
        assert IntervalSet().get_interval_for(5) is None

    def test_intersect(self) -> None:
        """Test intersect clips every member to the interval."""
        intervals = IntervalSet([iv(1, 10), iv(15, 25), iv(30, 40)])
        assert boundaries(intervals.intersect(iv(5, 20))) == [(5, 10), (15, 20)]
        assert intervals.intersect(iv(11, 14)).is_empty()
        assert boundaries(intervals.intersect(iv(0, 50))) == boundaries(intervals)

    def test_iteration_is_a_snapshot(self) -> None:
        """Test mutating while iterating does not disturb the loop."""
        intervals = IntervalSet([iv(1, 3), iv(7, 9)])
        seen = []
        for interval in intervals:
            seen.append(interval.get_boundaries())
            intervals.add_value(5)
        assert seen == [(1, 3), (7, 9)]


class TestIntervalSetProperties:
    """Property-based tests for IntervalSet."""

    @given(members=interval_lists())
    def test_construction_is_canonical(self, members: list[Interval]) -> None:
        """Test members are sorted, disjoint and never touch."""
        intervals = IntervalSet(members)
        assert_canonical(intervals)
        assert covered(intervals.get()) == covered(members)

    @given(members=interval_lists())
    def test_count_bounded_by_inputs(self, members: list[Interval]) -> None:
        """Test merging never counts a value twice."""
        intervals = IntervalSet(members)
        assert intervals.count() <= sum(member.count() for member in members)
        assert intervals.count() == len(covered(members))

    @given(members=interval_lists(), removed=interval_lists())
    def test_remove_matches_set_difference(
        self, members: list[Interval], removed: list[Interval]
    ) -> None:
        """Test removal behaves like set difference on the values."""
        intervals = IntervalSet(members)
        for interval in removed:
            intervals.remove(interval)
        assert_canonical(intervals)
        assert covered(intervals.get()) == covered(members) - covered(removed)

    @given(members=interval_lists(), value=st.integers(min_value=-30, max_value=30))
    def test_remove_then_add_value(self, members: list[Interval], value: int) -> None:
        """Test removing and re-adding a present value restores the set."""
        intervals = IntervalSet(members)
        if not intervals.contains(value):
            return
        original = intervals.get()
        intervals.remove_value(value)
        assert not intervals.contains(value)
        intervals.add_value(value)
        assert intervals.get() == original

    @given(
        members=interval_lists(),
        minimum=st.integers(min_value=-35, max_value=35),
        maximum=st.integers(min_value=-35, max_value=35),
    )
    def test_extract_matches_window(
        self, members: list[Interval], minimum: int, maximum: int
    ) -> None:
        """Test extract keeps exactly the values inside the window."""
        extracted = IntervalSet(members).extract(minimum, maximum)
        assert_canonical(extracted)
        expected = {v for v in covered(members) if minimum <= v <= maximum}
        assert covered(extracted.get()) == expected
