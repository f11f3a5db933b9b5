"""Order number generation.

Order numbers are human-readable: ``ORD-`` followed by epoch milliseconds.
The plain timestamp scheme collides when two orders are numbered inside the
same millisecond; the monotonic scheme never repeats a number within a
process. The store's unique constraint on ``orderNumber`` backs both.
"""

import threading
import time
from collections.abc import Callable
from typing import Protocol

ORDER_NUMBER_PREFIX = "ORD-"


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class OrderNumberGenerator(Protocol):
    def next(self) -> str: ...


class TimestampOrderNumberGenerator:
    """``ORD-<epoch-ms>``. Two calls within one millisecond return the same number."""

    def __init__(self, clock: Callable[[], int] = epoch_millis):
        self._clock = clock

    def next(self) -> str:
        return f"{ORDER_NUMBER_PREFIX}{self._clock()}"


class MonotonicOrderNumberGenerator:
    """``ORD-<epoch-ms>``, bumped past the last issued value when the clock stalls."""

    def __init__(self, clock: Callable[[], int] = epoch_millis):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            value = max(self._clock(), self._last + 1)
            self._last = value
        return f"{ORDER_NUMBER_PREFIX}{value}"


_STRATEGIES = {
    "monotonic": MonotonicOrderNumberGenerator,
    "timestamp": TimestampOrderNumberGenerator,
}


def generator_for(strategy: str) -> OrderNumberGenerator:
    try:
        return _STRATEGIES[strategy.lower()]()
    except KeyError:
        raise ValueError(f"Unknown order number strategy: {strategy}") from None
