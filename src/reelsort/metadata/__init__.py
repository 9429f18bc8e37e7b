"""Metadata lookup and enrichment for reelsort.

- MetadataClient: capability interface (lookup_movie, lookup_series).
- TMDBClient / TVDBClient: concrete providers; NullMetadataClient for offline use.
- MetadataResolver: best-effort, first-result-wins enrichment of descriptors.
"""

from reelsort.metadata.base import (
    CombinedMetadataClient,
    MetadataClient,
    NullMetadataClient,
)
from reelsort.metadata.clients import TMDBClient, TVDBClient, TVDBTokenProvider
from reelsort.metadata.models import MovieMatch, ProviderContext, SeriesMatch
from reelsort.metadata.resolver import MetadataResolver

__all__ = [
    "CombinedMetadataClient",
    "MetadataClient",
    "MetadataResolver",
    "MovieMatch",
    "NullMetadataClient",
    "ProviderContext",
    "SeriesMatch",
    "TMDBClient",
    "TVDBClient",
    "TVDBTokenProvider",
]
