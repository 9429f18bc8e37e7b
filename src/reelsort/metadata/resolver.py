"""Best-effort metadata enrichment.

MetadataResolver asks a MetadataClient for the descriptor's title and, when the
provider returns anything, overwrites the locally parsed title and year with
the first result. Any MetadataError leaves the descriptor untouched; it is
logged at debug level only and never reaches the caller.

The first result is used as-is: provider ordering is trusted and no scoring or
disambiguation is attempted.
"""

import logging

from reelsort.errors import MetadataError
from reelsort.metadata.base import MetadataClient
from reelsort.metadata.utils import extract_year
from reelsort.models.core import YEAR_PATTERN, MediaDescriptor, MediaKind

logger = logging.getLogger(__name__)


class MetadataResolver:
    """Enrich descriptors in place using a single MetadataClient."""

    def __init__(self, client: MetadataClient) -> None:
        """Initialize the resolver with the client used for all lookups."""
        self.client = client

    async def enrich(self, descriptor: MediaDescriptor) -> bool:
        """Replace title/year with provider values when a match is found.

        Args:
            descriptor: The descriptor to enrich. Mutated in place.

        Returns:
            True if provider data was applied, False if the descriptor was left
            unchanged.
        """
        try:
            if descriptor.kind == MediaKind.SERIES:
                series = await self.client.lookup_series(descriptor.title)
                if not series:
                    return False
                title, date = series[0].name, series[0].first_aired
            else:
                movies = await self.client.lookup_movie(descriptor.title)
                if not movies:
                    return False
                title, date = movies[0].title, movies[0].release_date
        except MetadataError as e:
            logger.debug("Metadata lookup skipped for %s: %s", descriptor.title, e)
            return False

        if title and title.strip():
            descriptor.title = title.strip()
        year = extract_year(date)
        if year and YEAR_PATTERN.match(year):
            descriptor.year = year
        logger.debug(
            "Updated info from provider: %s (%s)", descriptor.title, descriptor.year
        )
        return True
