"""
Summary: Load a Catalog from the count and data resources of a published site.
Why: Centralize the fetch order, validation, and failure taxonomy the player relies on.
"""

from __future__ import annotations

from typing import final

from radiopress.config.settings import FILECOUNT_NAME, FILEDATA_NAME
from radiopress.platform.logging import logger

from ..domain.errors import CatalogUnavailable, EmptyCatalog, NoValidTracks
from ..domain.models import Catalog
from ..domain.record_format import parse_records
from .ports import ResourceFetcherPort, ResourceUnavailableError


@final
class CatalogLoader:
    """Fetch the count, then the data, and parse records into a Catalog.

    Each resource is fetched once; a failure is terminal for the attempt.
    """

    def __init__(self, fetcher: ResourceFetcherPort) -> None:
        self._fetcher = fetcher

    def load(
        self,
        count_resource: str = FILECOUNT_NAME,
        data_resource: str = FILEDATA_NAME,
    ) -> Catalog:
        """Load and parse the catalog.

        Args:
            count_resource: Name of the plain-text track count resource.
            data_resource: Name of the record data resource.

        Returns:
            Catalog: Parsed catalog with at least one track.

        Raises:
            CatalogUnavailable: A resource is missing or the count is not a number.
            EmptyCatalog: The count is zero.
            NoValidTracks: No record in the data resource could be parsed.
        """
        reported = self._read_count(count_resource)
        if reported == 0:
            raise EmptyCatalog(f"{self._fetcher.describe()} reports 0 tracks")

        try:
            data = self._fetcher.fetch_text(data_resource)
        except ResourceUnavailableError as exc:
            logger.error("Could not load track data from %s: %s", self._fetcher.describe(), exc)
            raise CatalogUnavailable(str(exc)) from exc

        tracks = parse_records(data)
        if not tracks:
            raise NoValidTracks(f"{data_resource} contains no valid records")

        if len(tracks) != reported:
            logger.warning(
                "Track count mismatch: %s reports %d, parsed %d",
                count_resource,
                reported,
                len(tracks),
            )

        logger.debug("Loaded %d tracks from %s", len(tracks), self._fetcher.describe())
        return Catalog.of(tracks)

    def _read_count(self, count_resource: str) -> int:
        try:
            raw = self._fetcher.fetch_text(count_resource)
        except ResourceUnavailableError as exc:
            logger.error("Could not load file count from %s: %s", self._fetcher.describe(), exc)
            raise CatalogUnavailable(str(exc)) from exc

        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise CatalogUnavailable(f"{count_resource} is not a track count: {text[:32]!r}")
        return int(text)


__all__ = ["CatalogLoader"]
