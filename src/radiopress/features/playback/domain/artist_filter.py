"""
Summary: Maintain the set of enabled artists for the radio variant.
Why: Guarantee the filtered play queue can never become empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ...catalog.domain.models import Catalog


class ArtistFilter:
    """Enabled-artist set over a fixed list of known artists.

    Invariant: at least one artist is always enabled.
    """

    def __init__(self, artists: Sequence[str], enabled: Iterable[str] | None = None) -> None:
        if not artists:
            raise ValueError("ArtistFilter requires at least one artist")
        self._artists: tuple[str, ...] = tuple(dict.fromkeys(artists))
        restored = {name for name in (enabled or ()) if name in self._artists}
        self._enabled: set[str] = restored or set(self._artists)

    @classmethod
    def for_catalog(cls, catalog: Catalog, enabled: Iterable[str] | None = None) -> "ArtistFilter":
        return cls(catalog.artists(), enabled)

    @property
    def artists(self) -> tuple[str, ...]:
        return self._artists

    @property
    def enabled(self) -> frozenset[str]:
        return frozenset(self._enabled)

    def enabled_in_order(self) -> list[str]:
        """Enabled artists in catalog order, the form persisted to storage."""

        return [name for name in self._artists if name in self._enabled]

    def is_enabled(self, artist: str) -> bool:
        return artist in self._enabled

    def toggle(self, artist: str) -> bool:
        """Flip ``artist``; disabling the last enabled artist is rejected.

        Returns:
            bool: ``True`` when the set changed.

        Raises:
            KeyError: ``artist`` is not in the catalog.
        """
        if artist not in self._artists:
            raise KeyError(artist)
        if artist in self._enabled:
            if len(self._enabled) == 1:
                return False
            self._enabled.remove(artist)
        else:
            self._enabled.add(artist)
        return True

    def select_all(self) -> None:
        self._enabled = set(self._artists)

    def select_none(self) -> None:
        # Keeps the first artist so the queue stays playable.
        self._enabled = {self._artists[0]}

    def eligible_indices(self, catalog: Catalog) -> list[int]:
        return catalog.indices_for_artists(self._enabled)


__all__ = ["ArtistFilter"]
