"""Base abstraction for metadata provider clients.

Defines the lookup capabilities every provider exposes to the resolver. Concrete
clients back onto different external services; NullMetadataClient satisfies the
interface without any network access.
"""

from abc import ABC, abstractmethod

from reelsort.metadata.models import MovieMatch, SeriesMatch


class MetadataClient(ABC):
    """Abstract base class for all metadata provider clients.

    Implementations return results in the provider's own order and raise
    MetadataError for any transport or payload failure.
    """

    @abstractmethod
    async def lookup_movie(self, title: str) -> list[MovieMatch]:
        """Search for movies by title.

        Args:
            title: The normalized title to search for.

        Returns:
            Matches in provider order; empty when nothing was found.

        Raises:
            MetadataError: On network, HTTP or payload failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def lookup_series(self, title: str) -> list[SeriesMatch]:
        """Search for series by title.

        Args:
            title: The normalized title to search for.

        Returns:
            Matches in provider order; empty when nothing was found.

        Raises:
            MetadataError: On network, HTTP or payload failure.
        """
        raise NotImplementedError


class NullMetadataClient(MetadataClient):
    """Client that never finds anything. Used for offline runs and tests."""

    async def lookup_movie(self, title: str) -> list[MovieMatch]:
        return []

    async def lookup_series(self, title: str) -> list[SeriesMatch]:
        return []


class CombinedMetadataClient(MetadataClient):
    """Route movie and series lookups to two separate providers."""

    def __init__(self, movies: MetadataClient, series: MetadataClient) -> None:
        """Initialize with the client used for each capability."""
        self.movies = movies
        self.series = series

    async def lookup_movie(self, title: str) -> list[MovieMatch]:
        return await self.movies.lookup_movie(title)

    async def lookup_series(self, title: str) -> list[SeriesMatch]:
        return await self.series.lookup_series(title)
