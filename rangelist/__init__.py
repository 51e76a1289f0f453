from .core import IntervalSet, intersection, union
from .errors import InvalidRangeError
from .interval import Interval
from .util import coerce_range

__all__ = [
    "Interval",
    "IntervalSet",
    "InvalidRangeError",
    "coerce_range",
    "union",
    "intersection",
]
