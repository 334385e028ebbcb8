"""
Game catalog search.

This module provides the catalog API client, the data contracts
for its responses and the errors raised for each failure path.
"""

from switchcord.catalog.client import CatalogClient
from switchcord.catalog.contracts import GameId, GameRecord, RemoteError
from switchcord.catalog.errors import (
    CatalogError,
    MalformedResponseError,
    QueryError,
    ResponseReadError,
    TransportError,
)
from switchcord.catalog.query import build_search_query

__all__ = [
    # Client
    "CatalogClient",
    "build_search_query",
    # Contracts
    "GameId",
    "GameRecord",
    "RemoteError",
    # Errors
    "CatalogError",
    "MalformedResponseError",
    "QueryError",
    "ResponseReadError",
    "TransportError",
]
