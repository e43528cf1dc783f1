"""
Summary: Per-variant playback policy for the radio and player pages.
Why: Pick end-of-queue, default ordering, and filter support in one place.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from .sequencer import EndOfQueuePolicy


class SiteVariant(str, Enum):
    """The two generated pages."""

    RADIO = "radio"
    PLAYER = "player"

    @staticmethod
    def from_user_input(value: str) -> "SiteVariant":
        normalized = value.strip().lower()
        for variant in SiteVariant:
            if variant.value == normalized:
                return variant
        valid: Final[str] = ", ".join(v.value for v in SiteVariant)
        msg = f"Unsupported site variant '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    @property
    def end_of_queue(self) -> EndOfQueuePolicy:
        # The radio never replays the same order twice in a row.
        if self is SiteVariant.RADIO:
            return EndOfQueuePolicy.RESHUFFLE
        return EndOfQueuePolicy.WRAP

    @property
    def default_shuffle(self) -> bool:
        return self is SiteVariant.RADIO

    @property
    def uses_artist_filter(self) -> bool:
        return self is SiteVariant.RADIO

    @property
    def namespace_suffix(self) -> str:
        return self.value.capitalize()


__all__ = ["SiteVariant"]
