"""Client implementations for the supported metadata providers."""

from reelsort.metadata.clients.tmdb import TMDBClient
from reelsort.metadata.clients.tvdb import TVDBClient, TVDBTokenProvider

__all__ = ["TMDBClient", "TVDBClient", "TVDBTokenProvider"]
