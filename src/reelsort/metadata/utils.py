"""Utility functions for metadata processing.

This module provides the shared HTTP helper used by every provider client and
the year extraction used during enrichment.

- fetch_json turns any httpx transport error, non-2xx status or undecodable
  body into MetadataError so that callers only have one failure type to handle.
- parse_results maps raw result entries to match models and drops malformed
  ones without disturbing the provider order.
- extract_year implements the bounded "first four characters" rule for provider
  date strings.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from reelsort.errors import MetadataError

logger = logging.getLogger(__name__)

YEAR_LENGTH = 4  # Minimum length for a valid year string

T = TypeVar("T")


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
    provider: str = "provider",
    allow_not_found: bool = False,
) -> dict[str, Any] | None:
    """GET *url* and decode the JSON object it returns.

    Args:
        client: The httpx client to send the request with.
        url: Endpoint URL.
        params: Query parameters.
        headers: Extra request headers.
        provider: Provider name used in log and error messages.
        allow_not_found: Return None instead of raising on HTTP 404.

    Returns:
        The decoded JSON object, or None for an allowed 404.

    Raises:
        MetadataError: On transport errors, unexpected status codes or a body
            that is not a JSON object.
    """
    try:
        resp = await client.get(url, params=params, headers=headers)
    except httpx.HTTPError as e:
        raise MetadataError(f"{provider} request failed: {e}") from e
    logger.debug("%s response status: %d", provider, resp.status_code)
    if allow_not_found and resp.status_code == httpx.codes.NOT_FOUND:
        return None
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise MetadataError(f"{provider} returned HTTP {resp.status_code}") from e
    try:
        data = resp.json()
    except ValueError as e:
        raise MetadataError(f"{provider} returned invalid JSON") from e
    if not isinstance(data, dict):
        raise MetadataError(f"{provider} returned an unexpected payload")
    return data


def parse_results(
    items: list[Any], parse: Callable[[Any], T], *, provider: str = "provider"
) -> list[T]:
    """Parse provider result entries, dropping the ones that don't fit.

    Order is preserved, so the first usable entry stays first.
    """
    parsed: list[T] = []
    for index, item in enumerate(items):
        try:
            parsed.append(parse(item))
        except (KeyError, TypeError, ValidationError) as e:
            logger.debug("Skipping malformed %s result #%d: %s", provider, index, e)
    return parsed


def extract_year(date_str: str | None) -> str | None:
    """Return the leading four characters of a provider date string.

    Returns None when the string is missing or shorter than four characters so
    the caller can keep its own value.

    Example:
        >>> extract_year("2010-07-15")
        '2010'
        >>> extract_year("201") is None
        True
    """
    if date_str and len(date_str) >= YEAR_LENGTH:
        return date_str[:YEAR_LENGTH]
    return None
