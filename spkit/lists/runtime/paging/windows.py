"""Key window planning for the throttling fallback."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Window:
    """A slice of the key space matching ``low < key <= high``.

    Attributes:
        index: Zero-based position of the window
        low: Exclusive lower bound
        high: Inclusive upper bound
    """

    index: int
    low: int
    high: int

    @property
    def span(self) -> int:
        return self.high - self.low

    def contains(self, key: int) -> bool:
        return self.low < key <= self.high


class WindowPlanner:
    """Splits ``[1, max_key]`` into fixed-span windows aligned at zero."""

    def __init__(self, span: int) -> None:
        if span <= 0:
            raise ValueError("span must be > 0")
        self._span = span

    @property
    def span(self) -> int:
        return self._span

    def count(self, max_key: int) -> int:
        """Number of windows iter_windows will produce for max_key."""
        if max_key <= 0:
            return 1
        return -(-max_key // self._span)

    def iter_windows(self, max_key: int) -> Iterator[Window]:
        """Yield windows lazily in ascending order.

        At least one window is produced; iteration stops once the next
        window would start at or beyond max_key.
        """
        index = 0
        while True:
            low = index * self._span
            yield Window(index=index, low=low, high=low + self._span)
            index += 1
            if index * self._span >= max_key:
                break
