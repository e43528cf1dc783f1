"""Virtual-clock scheduler for headless sessions and tests."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable


class ManualScheduler:
    """Queue callbacks against a virtual clock advanced explicitly.

    Callbacks run on the caller's thread in due-time order; ties run in the
    order they were scheduled.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._counter = itertools.count()
        self._pending: list[tuple[float, int, Callable[[], None]]] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._pending)

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._pending, (self._now + max(0.0, delay), next(self._counter), callback))

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Returns:
            int: Number of callbacks executed.
        """
        deadline = self._now + seconds
        executed = 0
        while self._pending and self._pending[0][0] <= deadline:
            due, _, callback = heapq.heappop(self._pending)
            self._now = due
            callback()
            executed += 1
        self._now = deadline
        return executed


__all__ = ["ManualScheduler"]
