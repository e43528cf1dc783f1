"""
Summary: Compute play order and next/previous queue positions.
Why: Keep shuffle and end-of-queue policy out of the session state machine.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class EndOfQueuePolicy(str, Enum):
    """What advancing past the last queue entry does."""

    # Continue at position 0 with the same order.
    WRAP = "wrap"
    # Regenerate the queue (a fresh permutation when shuffling), then restart at 0.
    RESHUFFLE = "reshuffle"


@dataclass(frozen=True, slots=True)
class Advance:
    """Result of a next-track computation."""

    position: int
    wrapped: bool


def fisher_yates(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``."""

    generator = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = generator.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class PlaybackSequencer:
    """Own the PlayQueue: an ordered list of catalog indices.

    Queue positions index into :attr:`queue`; the catalog index at a position
    is ``queue[position]``.
    """

    def __init__(
        self,
        *,
        shuffle: bool = False,
        end_of_queue: EndOfQueuePolicy = EndOfQueuePolicy.WRAP,
        rng: random.Random | None = None,
    ) -> None:
        self._shuffle = shuffle
        self._end_of_queue = end_of_queue
        self._rng = rng or random.Random()
        self._eligible: list[int] = []
        self._queue: list[int] = []

    @property
    def queue(self) -> tuple[int, ...]:
        return tuple(self._queue)

    @property
    def shuffle(self) -> bool:
        return self._shuffle

    @property
    def end_of_queue(self) -> EndOfQueuePolicy:
        return self._end_of_queue

    def __len__(self) -> int:
        return len(self._queue)

    def rebuild(self, eligible_indices: Sequence[int]) -> tuple[int, ...]:
        """Regenerate the queue over ``eligible_indices``."""

        self._eligible = sorted(eligible_indices)
        self._regenerate()
        return self.queue

    def set_shuffle(self, enabled: bool) -> tuple[int, ...]:
        """Switch ordering mode and regenerate the queue."""

        self._shuffle = enabled
        self._regenerate()
        return self.queue

    def catalog_index(self, position: int) -> int:
        return self._queue[position]

    def position_of(self, catalog_index: int) -> int | None:
        try:
            return self._queue.index(catalog_index)
        except ValueError:
            return None

    def next(self, position: int) -> Advance:
        """Compute the position after ``position``.

        Raises:
            IndexError: The queue is empty.
        """
        length = self._require_items()
        following = (position + 1) % length
        wrapped = following == 0
        if wrapped and self._end_of_queue is EndOfQueuePolicy.RESHUFFLE:
            self._regenerate()
        return Advance(position=following, wrapped=wrapped)

    def previous(self, position: int) -> int:
        """Compute the position before ``position``; never regenerates."""

        length = self._require_items()
        return (position - 1 + length) % length

    def _regenerate(self) -> None:
        if self._shuffle:
            self._queue = fisher_yates(self._eligible, self._rng)
        else:
            self._queue = list(self._eligible)

    def _require_items(self) -> int:
        if not self._queue:
            raise IndexError("play queue is empty")
        return len(self._queue)


__all__ = ["Advance", "EndOfQueuePolicy", "PlaybackSequencer", "fisher_yates"]
