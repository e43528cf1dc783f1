"""
Summary: Track and Catalog value objects.
Why: Give every layer one immutable representation of the published library.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Track:
    """A single published track.

    Identity is the track's position in its catalog; there is no explicit ID.
    """

    filename: str
    title: str
    artist: str
    cover_image: str | None = None


@dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered, immutable sequence of tracks built once per load."""

    tracks: tuple[Track, ...]

    @classmethod
    def of(cls, tracks: Sequence[Track]) -> "Catalog":
        return cls(tracks=tuple(tracks))

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __getitem__(self, index: int) -> Track:
        return self.tracks[index]

    def artists(self) -> list[str]:
        """Return distinct artist names in first-seen order."""

        seen: dict[str, None] = {}
        for track in self.tracks:
            seen.setdefault(track.artist, None)
        return list(seen)

    def indices_for_artists(self, artists: set[str] | frozenset[str]) -> list[int]:
        """Return catalog indices of tracks whose artist is in ``artists``."""

        return [index for index, track in enumerate(self.tracks) if track.artist in artists]


__all__ = ["Catalog", "Track"]
