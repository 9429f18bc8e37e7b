"""Tests for the TVDB client and token provider."""

import json

import httpx
import pytest
import respx

from reelsort.errors import AuthError, MetadataError
from reelsort.metadata.clients.tvdb import TVDB_API_URL, TVDBClient, TVDBTokenProvider
from reelsort.metadata.models import ProviderContext

LOGIN_URL = f"{TVDB_API_URL}/login"
SEARCH_URL = f"{TVDB_API_URL}/search/series"


@pytest.fixture
def client() -> TVDBClient:
    context = ProviderContext(tvdb_api_key="dummykey").with_tvdb_token("tok123")
    return TVDBClient(context)


@pytest.mark.asyncio
@respx.mock
async def test_get_token_is_cached() -> None:
    """The login endpoint is called once and the token reused."""
    route = respx.post(LOGIN_URL).mock(
        return_value=httpx.Response(200, json={"token": "tok123"})
    )
    provider = TVDBTokenProvider("dummykey")

    assert await provider.get_token() == "tok123"
    assert await provider.get_token() == "tok123"

    assert route.call_count == 1
    assert json.loads(route.calls.last.request.content) == {"apikey": "dummykey"}


@pytest.mark.asyncio
@respx.mock
async def test_get_token_rejected() -> None:
    """A 401 from /login raises AuthError."""
    respx.post(LOGIN_URL).mock(return_value=httpx.Response(401, json={"Error": "nope"}))
    with pytest.raises(AuthError):
        await TVDBTokenProvider("bad").get_token()


@pytest.mark.asyncio
@respx.mock
async def test_get_token_missing_token() -> None:
    """A response without a token raises AuthError."""
    respx.post(LOGIN_URL).mock(return_value=httpx.Response(200, json={}))
    with pytest.raises(AuthError):
        await TVDBTokenProvider("dummykey").get_token()


@pytest.mark.asyncio
@respx.mock
async def test_get_token_network_error() -> None:
    """Transport failures during login raise AuthError."""
    respx.post(LOGIN_URL).mock(side_effect=httpx.ConnectError("down"))
    with pytest.raises(AuthError):
        await TVDBTokenProvider("dummykey").get_token()


@pytest.mark.asyncio
@respx.mock
async def test_lookup_series_expected_flow(client: TVDBClient) -> None:
    """Search results are parsed and the bearer token is sent."""
    route = respx.get(url__startswith=SEARCH_URL).mock(
        return_value=httpx.Response(
            200,
            json={
                "data": [
                    {
                        "id": 81189,
                        "seriesName": "Breaking Bad",
                        "firstAired": "2008-01-20",
                        "network": "AMC",
                        "status": "Ended",
                    }
                ]
            },
        )
    )

    matches = await client.lookup_series("Breaking Bad")

    assert len(matches) == 1
    assert matches[0].name == "Breaking Bad"
    assert matches[0].first_aired == "2008-01-20"
    assert matches[0].network == "AMC"
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer tok123"
    assert request.url.params["name"] == "Breaking Bad"


@pytest.mark.asyncio
@respx.mock
async def test_lookup_series_not_found_is_empty(client: TVDBClient) -> None:
    """TVDB answers 404 for an empty search; that is not an error."""
    respx.get(url__startswith=SEARCH_URL).mock(
        return_value=httpx.Response(404, json={"Error": "Resource not found"})
    )
    assert await client.lookup_series("Nothing") == []


@pytest.mark.asyncio
@respx.mock
async def test_lookup_series_server_error(client: TVDBClient) -> None:
    """A 5xx response raises MetadataError."""
    respx.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(500))
    with pytest.raises(MetadataError):
        await client.lookup_series("Breaking Bad")


@pytest.mark.asyncio
@respx.mock
async def test_lookup_series_invalid_json(client: TVDBClient) -> None:
    """An undecodable body raises MetadataError."""
    respx.get(url__startswith=SEARCH_URL).mock(
        return_value=httpx.Response(200, content=b"not json")
    )
    with pytest.raises(MetadataError):
        await client.lookup_series("Breaking Bad")


@pytest.mark.asyncio
async def test_lookup_series_without_token() -> None:
    """Without a token no request is made and MetadataError is raised."""
    client = TVDBClient(ProviderContext(tvdb_api_key="dummykey"))
    with pytest.raises(MetadataError):
        await client.lookup_series("Breaking Bad")


@pytest.mark.asyncio
async def test_lookup_movie_unsupported(client: TVDBClient) -> None:
    """TVDB has no movie search."""
    with pytest.raises(MetadataError):
        await client.lookup_movie("Inception")


@pytest.mark.asyncio
@respx.mock
async def test_lookup_series_skips_malformed_entries(client: TVDBClient) -> None:
    """A later entry without seriesName doesn't discard the first match."""
    respx.get(url__startswith=SEARCH_URL).mock(
        return_value=httpx.Response(
            200,
            json={
                "data": [
                    {"id": 81189, "seriesName": "Breaking Bad", "firstAired": "2008-01-20"},
                    {"id": 5, "seriesName": None},
                    {"firstAired": "2010-01-01"},
                ]
            },
        )
    )

    matches = await client.lookup_series("Breaking Bad")

    assert [m.name for m in matches] == ["Breaking Bad"]
