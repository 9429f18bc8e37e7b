"""Data models for provider search results and provider configuration.

This module defines the read-only match records returned by metadata providers
and the context object that carries credentials into the clients.
- MovieMatch and SeriesMatch are parsed straight from provider JSON (field
  aliases mirror the provider payloads) and are discarded after enrichment.
- ProviderContext is built once at startup and passed by reference into every
  client, replacing any process-wide credential state.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIMEOUT = 10.0
"""Default request timeout in seconds for all provider calls."""


class MovieMatch(BaseModel):
    """One movie search result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    release_date: str | None = None
    """Release date as returned by the provider (usually YYYY-MM-DD)."""


class SeriesMatch(BaseModel):
    """One series search result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = Field(alias="seriesName")
    first_aired: str | None = Field(default=None, alias="firstAired")
    """First-aired date as returned by the provider (usually YYYY-MM-DD)."""
    status: str | None = None
    network: str | None = None


class ProviderContext(BaseModel):
    """Credentials and transport settings shared by all metadata clients.

    Immutable once constructed. The TVDB bearer token is filled in after the
    startup credential exchange via ``with_tvdb_token``.
    """

    model_config = ConfigDict(frozen=True)

    tmdb_api_key: str = ""
    tvdb_api_key: str = ""
    tvdb_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def with_tvdb_token(self, token: str) -> "ProviderContext":
        """Return a copy of this context carrying the given bearer token."""
        return self.model_copy(update={"tvdb_token": token})
