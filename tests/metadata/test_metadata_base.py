"""Tests for the MetadataClient abstractions."""

import pytest

from reelsort.metadata.base import (
    CombinedMetadataClient,
    MetadataClient,
    NullMetadataClient,
)
from reelsort.metadata.models import MovieMatch, ProviderContext, SeriesMatch


class MovieOnly(NullMetadataClient):
    async def lookup_movie(self, title: str) -> list[MovieMatch]:
        return [MovieMatch(id=1, title=f"movie:{title}")]


class SeriesOnly(NullMetadataClient):
    async def lookup_series(self, title: str) -> list[SeriesMatch]:
        return [SeriesMatch(id=2, name=f"series:{title}")]


def test_cannot_instantiate_abstract_client() -> None:
    """MetadataClient is abstract."""
    with pytest.raises(TypeError):
        MetadataClient()  # type: ignore[abstract]


@pytest.mark.asyncio
async def test_combined_client_routes_by_capability() -> None:
    """Movie lookups go to one client, series lookups to the other."""
    client = CombinedMetadataClient(movies=MovieOnly(), series=SeriesOnly())

    movies = await client.lookup_movie("X")
    series = await client.lookup_series("Y")

    assert [m.title for m in movies] == ["movie:X"]
    assert [s.name for s in series] == ["series:Y"]


def test_series_match_accepts_provider_aliases() -> None:
    """TVDB payload keys map onto SeriesMatch fields."""
    match = SeriesMatch.model_validate(
        {"id": 81189, "seriesName": "Breaking Bad", "firstAired": "2008-01-20"}
    )
    assert match.name == "Breaking Bad"
    assert match.first_aired == "2008-01-20"


def test_provider_context_token_copy() -> None:
    """with_tvdb_token returns a new context and leaves the original alone."""
    context = ProviderContext(tmdb_api_key="a", tvdb_api_key="b")
    with_token = context.with_tvdb_token("tok")
    assert with_token.tvdb_token == "tok"
    assert with_token.tmdb_api_key == "a"
    assert context.tvdb_token is None
