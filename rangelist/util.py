"""Validation helpers shared by Interval and IntervalSet.

Every range entering the package passes through `coerce_range` before any
stored state is touched.
"""

from collections.abc import Sequence
from typing import Any

from rangelist.errors import InvalidRangeError


def is_integer(value: Any) -> bool:
    """True for ``int`` values; ``bool`` is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_range(start: Any, end: Any = None) -> tuple[int, int]:
    """Normalize ``(start, end)`` or a single range-like into an integer pair.

    Accepts:
    - two integers: ``coerce_range(1, 5)``
    - an Interval, or any two-item sequence: ``coerce_range((1, 5))``
    - a ``range`` with step 1: ``coerce_range(range(1, 5))``

    ``start == end`` is allowed and denotes an empty range.

    Raises:
        InvalidRangeError: On wrong arity, non-integer bounds, or start > end
    """
    # Import here: interval.py depends on this module
    from rangelist.interval import Interval

    if end is None:
        item = start
        if isinstance(item, Interval):
            return item.start, item.end
        if isinstance(item, range):
            if item.step != 1:
                raise InvalidRangeError(
                    item.start, item.stop, f"range step must be 1, got {item.step}"
                )
            start, end = item.start, item.stop
        elif isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            if len(item) != 2:
                raise InvalidRangeError(
                    item, None, f"expected exactly two integers, got {len(item)}"
                )
            start, end = item
        else:
            raise InvalidRangeError(item, None, "expected exactly two integers")

    if not (is_integer(start) and is_integer(end)):
        raise InvalidRangeError(start, end, "bounds must be integers")
    if start > end:
        raise InvalidRangeError(
            start, end, f"start ({start}) is greater than end ({end})"
        )
    return start, end
