"""Errors raised by rangelist."""

from typing import Any


class InvalidRangeError(ValueError):
    """Raised when a range is rejected before any mutation takes place.

    Attributes:
        start: The offending start value, as given
        end: The offending end value, as given
        reason: Short description of what is wrong with the range
    """

    def __init__(self, start: Any, end: Any, reason: str):
        self.start: Any = start
        self.end: Any = end
        self.reason: str = reason
        super().__init__(
            f"Invalid range ({start!r}, {end!r}): {reason}.\n"
            f"Hint: Ranges are half-open [start, end) pairs of integers "
            f"with start <= end, e.g. add(1, 5)"
        )
