"""Ordered set of disjoint half-open integer intervals.

IntervalSet keeps its intervals in a Python list sorted by start. Stored
intervals never overlap or touch, so their ends are sorted as well and both
edges can be binary-searched. `add` and `remove` locate the run of affected
intervals with two bisections and rewrite it with a single slice assignment;
no operation walks individual integers except `enumerate()`.
"""

import bisect
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from functools import reduce
from typing import Any, Generic, Literal, TypeVar

from typing_extensions import override

from rangelist.interval import Interval
from rangelist.util import coerce_range, is_integer

LOG = logging.getLogger(__name__)

T = TypeVar("T")

RangeLike = Interval | tuple[int, int] | list[int] | range


def _start(interval: Interval) -> int:
    return interval.start


def _end(interval: Interval) -> int:
    return interval.end


class _Restartable(Generic[T]):
    """Lazy iterable that starts over on every call to ``iter()``."""

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory: Callable[[], Iterator[T]] = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()


class IntervalSet:
    """Mutable set of integers stored as sorted, disjoint ``[start, end)`` intervals.

    Example:
        >>> s = IntervalSet()
        >>> s.add(1, 5)
        >>> s.add(10, 20)
        >>> s.add(20, 21)
        >>> s.add(3, 8)
        >>> list(s.ranges())
        [(1, 8), (10, 21)]
        >>> s.remove(15, 17)
        >>> str(s)
        '[1, 8) [10, 15) [17, 21)'
    """

    def __init__(self, ranges: Iterable[RangeLike] = ()) -> None:
        """Initialize an empty or pre-populated set.

        Args:
            ranges: Optional range-likes to add, in any order; they may overlap
        """
        self._intervals: list[Interval] = []
        for item in ranges:
            self.add(item)

    def add(self, start: int | RangeLike, end: int | None = None) -> None:
        """Add ``[start, end)``, merging it with every interval it overlaps or touches.

        Accepts either two integers or a single range-like (Interval, pair, or
        ``range``). An empty range (``start == end``) is a no-op.

        Raises:
            InvalidRangeError: If the bounds are not two integers or start > end
        """
        start, end = coerce_range(start, end)
        if start == end:
            return

        intervals = self._intervals
        # First interval that reaches start (touching counts)
        lo = bisect.bisect_left(intervals, start, key=_end)
        # First interval that begins strictly after end
        hi = bisect.bisect_right(intervals, end, lo=lo, key=_start)

        if lo < hi:
            start = min(start, intervals[lo].start)
            end = max(end, intervals[hi - 1].end)
        intervals[lo:hi] = [Interval(start=start, end=end)]

        LOG.debug("add: stored [%d, %d) in place of %d interval(s)", start, end, hi - lo)

    def remove(self, start: int | RangeLike, end: int | None = None) -> None:
        """Remove ``[start, end)``, truncating, deleting or splitting stored intervals.

        Accepts the same arguments as `add`. Removing an empty range, or a range
        that covers nothing, is a no-op.

        Raises:
            InvalidRangeError: If the bounds are not two integers or start > end
        """
        start, end = coerce_range(start, end)
        if start == end:
            return

        intervals = self._intervals
        # First interval extending past start
        lo = bisect.bisect_right(intervals, start, key=_end)
        # First interval beginning at or after end
        hi = bisect.bisect_left(intervals, end, lo=lo, key=_start)
        if lo == hi:
            return

        # Everything strictly between the first and last affected interval is
        # fully covered; only the outer two can leave a remainder.
        first, last = intervals[lo], intervals[hi - 1]
        remainder: list[Interval] = []
        if first.start < start:
            remainder.append(Interval(start=first.start, end=start))
        if last.end > end:
            remainder.append(Interval(start=end, end=last.end))
        intervals[lo:hi] = remainder

        LOG.debug(
            "remove [%d, %d): %d stored interval(s) became %d",
            start,
            end,
            hi - lo,
            len(remainder),
        )

    def contains(self, point: Any) -> bool:
        """Return True if ``point`` is covered. Non-integers are never members."""
        if not is_integer(point):
            return False
        idx = bisect.bisect_right(self._intervals, point, key=_start) - 1
        return idx >= 0 and point < self._intervals[idx].end

    def ranges(self) -> Iterable[tuple[int, int]]:
        """Lazily yield stored ``(start, end)`` pairs in ascending order.

        The result can be iterated any number of times; each pass reads the
        intervals stored when that pass begins.
        """

        def generate() -> Iterator[tuple[int, int]]:
            for interval in tuple(self._intervals):
                yield interval.start, interval.end

        return _Restartable(generate)

    def enumerate(self) -> Iterable[int]:
        """Lazily yield every covered integer in ascending order.

        Meant for display and testing: its cost is proportional to the number
        of covered integers, not the number of intervals.
        """

        def generate() -> Iterator[int]:
            for interval in tuple(self._intervals):
                yield from range(interval.start, interval.end)

        return _Restartable(generate)

    def fetch(self, start: int | None, end: int | None) -> Iterable[Interval]:
        """Yield stored intervals overlapping ``[start, end)``, clipped to those bounds.

        None means unbounded on that side.
        """
        if start is not None and end is not None and start >= end:
            return

        intervals = self._intervals
        lo = 0 if start is None else bisect.bisect_right(intervals, start, key=_end)
        hi = (
            len(intervals)
            if end is None
            else bisect.bisect_left(intervals, end, lo=lo, key=_start)
        )

        for interval in intervals[lo:hi]:
            clipped_start = interval.start if start is None else max(interval.start, start)
            clipped_end = interval.end if end is None else min(interval.end, end)
            if clipped_start == interval.start and clipped_end == interval.end:
                yield interval
            else:
                yield replace(interval, start=clipped_start, end=clipped_end)

    def __getitem__(self, item: slice) -> Iterable[Interval]:
        if not isinstance(item, slice):
            raise TypeError(
                f"IntervalSet only supports slicing, got {type(item).__name__!r}.\n"
                f"Hint: Use `point in interval_set` for membership tests"
            )
        if item.step is not None:
            raise TypeError(
                f"IntervalSet slices do not take a step, got {item.step!r}.\n"
                f"Example: interval_set[10:20]"
            )
        start = self._coerce_bound(item.start, "start")
        end = self._coerce_bound(item.stop, "end")
        return self.fetch(start, end)

    def _coerce_bound(self, bound: Any, edge: Literal["start", "end"]) -> int | None:
        if bound is None or is_integer(bound):
            return bound
        raise TypeError(
            f"IntervalSet slice {edge} bound must be int or None.\n"
            f"Got {type(bound).__name__!r}: {bound!r}\n"
            f"Examples:\n"
            f"  interval_set[10:20]  # intervals clipped to [10, 20)\n"
            f"  interval_set[:20]    # unbounded start"
        )

    def size(self) -> int:
        """Number of integers covered."""
        return sum(len(interval) for interval in self._intervals)

    def bounds(self) -> tuple[int, int] | None:
        """Smallest covered integer and the exclusive end of the largest, or None."""
        if not self._intervals:
            return None
        return self._intervals[0].start, self._intervals[-1].end

    def clear(self) -> None:
        self._intervals.clear()

    def copy(self) -> "IntervalSet":
        result = self.__class__()
        # Interval values are immutable, so a shallow copy is independent
        result._intervals = list(self._intervals)
        return result

    def __contains__(self, point: object) -> bool:
        return self.contains(point)

    def __iter__(self) -> Iterator[Interval]:
        return iter(tuple(self._intervals))

    def __len__(self) -> int:
        """Number of stored intervals (see `size` for covered integers)."""
        return len(self._intervals)

    def __or__(self, other: "IntervalSet") -> "IntervalSet":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        result = self.copy()
        result |= other
        return result

    def __ior__(self, other: "IntervalSet") -> "IntervalSet":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        for interval in other:
            self.add(interval)
        return self

    def __sub__(self, other: "IntervalSet") -> "IntervalSet":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: "IntervalSet") -> "IntervalSet":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        for interval in other:
            self.remove(interval)
        return self

    def __and__(self, other: "IntervalSet") -> "IntervalSet":
        """Intersect by sweeping both sorted interval lists in lockstep."""
        if not isinstance(other, IntervalSet):
            return NotImplemented

        left, right = self._intervals, other._intervals
        overlaps: list[Interval] = []
        i = j = 0
        while i < len(left) and j < len(right):
            overlap_start = max(left[i].start, right[j].start)
            overlap_end = min(left[i].end, right[j].end)
            if overlap_start < overlap_end:
                overlaps.append(Interval(start=overlap_start, end=overlap_end))
            # Advance whichever interval finishes first
            if left[i].end < right[j].end:
                i += 1
            else:
                j += 1

        # Overlaps of two disjoint, non-touching lists are themselves disjoint
        # and non-touching, so they can be stored directly.
        result = self.__class__()
        result._intervals = overlaps
        return result

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._intervals == other._intervals

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.ranges())!r})"

    @override
    def __str__(self) -> str:
        """Display form, e.g. ``[1, 5) [10, 21)``."""
        return " ".join(str(interval) for interval in self._intervals)


def union(*sets: IntervalSet) -> IntervalSet:
    """Combine sets with union semantics (equivalent to chaining `|`)."""

    if not sets:
        raise ValueError(
            f"union() requires at least one IntervalSet argument.\n"
            f"Example: union(set_a, set_b, set_c)"
        )

    def reducer(acc: IntervalSet, nxt: IntervalSet) -> IntervalSet:
        acc |= nxt
        return acc

    return reduce(reducer, sets[1:], sets[0].copy())


def intersection(*sets: IntervalSet) -> IntervalSet:
    """Combine sets with intersection semantics (equivalent to chaining `&`)."""

    if not sets:
        raise ValueError(
            f"intersection() requires at least one IntervalSet argument.\n"
            f"Example: intersection(set_a, set_b, set_c)"
        )

    def reducer(acc: IntervalSet, nxt: IntervalSet) -> IntervalSet:
        return acc & nxt

    return reduce(reducer, sets[1:], sets[0].copy())
