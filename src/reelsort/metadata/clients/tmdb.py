"""TMDB metadata provider client.

Implements the MetadataClient interface for The Movie Database (TMDB) API.
Movies are searched via /search/movie, series via /search/tv.
"""

import logging
from typing import Any

import httpx

from reelsort.errors import MetadataError
from reelsort.metadata.base import MetadataClient
from reelsort.metadata.models import MovieMatch, ProviderContext, SeriesMatch
from reelsort.metadata.utils import fetch_json, parse_results

logger = logging.getLogger(__name__)

TMDB_API_URL = "https://api.themoviedb.org/3"


def _movie_from_item(item: dict[str, Any]) -> MovieMatch:
    return MovieMatch(
        id=item["id"], title=item["title"], release_date=item.get("release_date")
    )


def _series_from_item(item: dict[str, Any]) -> SeriesMatch:
    return SeriesMatch(
        id=item["id"], name=item["name"], first_aired=item.get("first_air_date")
    )


class TMDBClient(MetadataClient):
    """Client for The Movie Database (TMDB) API.

    Authenticates every request with the API key carried by the context.
    """

    def __init__(self, context: ProviderContext) -> None:
        """Initialize TMDBClient from the shared provider context."""
        self.context = context

    async def _search(self, kind: str, title: str) -> list[dict]:
        params = {"api_key": self.context.tmdb_api_key, "query": title}
        logger.debug("Searching TMDB (%s) for: %s", kind, title)
        async with httpx.AsyncClient(timeout=self.context.timeout) as client:
            data = await fetch_json(
                client, f"{TMDB_API_URL}/search/{kind}", params=params, provider="TMDB"
            )
        results = (data or {}).get("results") or []
        if not isinstance(results, list):
            raise MetadataError("TMDB results field is not a list")
        logger.debug("Found %d results on TMDB", len(results))
        return results

    async def lookup_movie(self, title: str) -> list[MovieMatch]:
        """Search TMDB movies by title.

        Args:
            title: The title to search for.

        Returns:
            MovieMatch objects in TMDB's order; malformed entries are skipped.
        """
        results = await self._search("movie", title)
        return parse_results(results, _movie_from_item, provider="TMDB")

    async def lookup_series(self, title: str) -> list[SeriesMatch]:
        """Search TMDB TV shows by title.

        Args:
            title: The title to search for.

        Returns:
            SeriesMatch objects in TMDB's order; malformed entries are skipped.
        """
        results = await self._search("tv", title)
        return parse_results(results, _series_from_item, provider="TMDB")
