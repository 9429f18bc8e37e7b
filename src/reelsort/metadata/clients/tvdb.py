"""TVDB metadata provider client.

Implements the MetadataClient interface for TheTVDB API (v2). Series searches
need a bearer token, which TVDBTokenProvider obtains once via /login before the
first lookup. TVDB has no movie search, so lookup_movie always fails.
"""

import logging

import httpx

from reelsort.errors import AuthError, MetadataError
from reelsort.metadata.base import MetadataClient
from reelsort.metadata.models import (
    DEFAULT_TIMEOUT,
    MovieMatch,
    ProviderContext,
    SeriesMatch,
)
from reelsort.metadata.utils import fetch_json, parse_results

logger = logging.getLogger(__name__)

TVDB_API_URL = "https://api.thetvdb.com"


class TVDBTokenProvider:
    """Exchange a TVDB API key for a bearer token, once per process."""

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize with the TVDB API key and request timeout."""
        self.api_key = api_key
        self.timeout = timeout
        self._token: str | None = None

    async def get_token(self) -> str:
        """Return the cached token, logging in on first use.

        Raises:
            AuthError: If the login request fails or returns no token.
        """
        if self._token is not None:
            return self._token
        logger.debug("Getting TVDB token")
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                resp = await client.post(
                    f"{TVDB_API_URL}/login", json={"apikey": self.api_key}
                )
                resp.raise_for_status()
                data = resp.json()
            except httpx.HTTPStatusError as e:
                raise AuthError(
                    f"TVDB login rejected with HTTP {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise AuthError(f"TVDB login failed: {e}") from e
            except ValueError as e:
                raise AuthError("TVDB login returned invalid JSON") from e
        token = data.get("token") if isinstance(data, dict) else None
        if not token or not isinstance(token, str):
            raise AuthError("TVDB login response did not contain a token")
        self._token = token
        logger.debug("TVDB token obtained successfully")
        return token


class TVDBClient(MetadataClient):
    """Async client for TheTVDB series search."""

    def __init__(self, context: ProviderContext) -> None:
        """Initialize TVDBClient from a context that already carries a token."""
        self.context = context

    async def lookup_movie(self, title: str) -> list[MovieMatch]:
        """TVDB does not provide movie search.

        Raises:
            MetadataError: Always.
        """
        raise MetadataError("TVDB does not support movie lookups")

    async def lookup_series(self, title: str) -> list[SeriesMatch]:
        """Search TVDB series by name.

        Args:
            title: The series title to search for.

        Returns:
            SeriesMatch objects in TVDB's order; malformed entries are skipped.

        Raises:
            MetadataError: If no token is available or the request fails.
        """
        if not self.context.tvdb_token:
            raise MetadataError("TVDB lookup attempted without a bearer token")
        headers = {"Authorization": f"Bearer {self.context.tvdb_token}"}
        logger.debug("Searching TVDB for: %s", title)
        async with httpx.AsyncClient(timeout=self.context.timeout) as client:
            # TVDB answers 404 when a search has no results.
            data = await fetch_json(
                client,
                f"{TVDB_API_URL}/search/series",
                params={"name": title},
                headers=headers,
                provider="TVDB",
                allow_not_found=True,
            )
        series = (data or {}).get("data") or []
        if not isinstance(series, list):
            raise MetadataError("TVDB data field is not a list")
        logger.debug("Found %d results on TVDB", len(series))
        return parse_results(series, SeriesMatch.model_validate, provider="TVDB")
