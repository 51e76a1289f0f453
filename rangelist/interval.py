from collections.abc import Iterator
from dataclasses import dataclass

from typing_extensions import override

from rangelist.errors import InvalidRangeError
from rangelist.util import is_integer


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if not (is_integer(self.start) and is_integer(self.end)):
            raise InvalidRangeError(self.start, self.end, "bounds must be integers")
        if self.start >= self.end:
            raise InvalidRangeError(
                self.start,
                self.end,
                f"interval start ({self.start}) must be < end ({self.end})",
            )

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, point: object) -> bool:
        return is_integer(point) and self.start <= point < self.end  # type: ignore[operator]

    def __iter__(self) -> Iterator[int]:
        """Unpack as a ``(start, end)`` pair."""
        yield self.start
        yield self.end

    @override
    def __str__(self) -> str:
        """Half-open display form, e.g. ``[1, 5)``."""
        return f"[{self.start}, {self.end})"
