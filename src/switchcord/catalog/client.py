"""
Game catalog API client.

Searches the IGDB games endpoint for titles on a single platform
and classifies every failure path into a distinct exception.
"""

import asyncio
import time
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from switchcord.catalog.contracts import GameRecord, RemoteError, game_records_adapter
from switchcord.catalog.errors import (
    CatalogError,
    MalformedResponseError,
    QueryError,
    ResponseReadError,
    TransportError,
)
from switchcord.catalog.query import build_search_query
from switchcord.config import CatalogAPIConfig, get_settings
from switchcord.logger import get_logger


class CatalogClient:
    """
    Client for the game catalog query endpoint.

    Each call performs exactly one POST round trip with no retries.
    Redirects are not followed: a 3xx answer is treated as the final
    response and reported as a ``QueryError``.

    Example:
        >>> async with CatalogClient() as catalog:
        ...     games = await catalog.search_by_term("zelda")
        ...     print([game.name for game in games])
    """

    def __init__(
        self,
        config: CatalogAPIConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Catalog API configuration (loaded from the environment if None)
            transport: Custom httpx transport, mainly for tests
        """
        self._config = config or get_settings().catalog
        self._transport = transport
        self._logger = get_logger(
            self.__class__.__name__,
            component="catalog_client",
        )
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> CatalogAPIConfig:
        """Return the configuration this client was built with."""
        return self._config

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout_seconds),
                follow_redirects=False,
                headers={
                    "user-agent": self._config.user_agent,
                    "accept": "application/json",
                    "user-key": self._config.api_key.get_secret_value(),
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def search_by_term(self, search_term: str) -> list[GameRecord]:
        """
        Search the catalog for games matching a term.

        Args:
            search_term: Free text, embedded verbatim into the query

        Returns:
            list[GameRecord]: Matching games in the order returned by the service

        Raises:
            TransportError: If no HTTP response was obtained
            QueryError: If the service answered with a non-success status
            ResponseReadError: If the response body could not be read
            MalformedResponseError: If the response body is not a list of games
        """
        query = build_search_query(
            search_term,
            platform_id=self._config.platform_id,
            category=self._config.category,
            limit=self._config.result_limit,
        )
        start_time = time.perf_counter()

        self._logger.info("Starting search", search_term=search_term)
        if '"' in search_term:
            self._logger.warning(
                "Search term contains a double quote and is sent unescaped",
                search_term=search_term,
            )

        try:
            raw = await self.execute(query)
        except CatalogError as e:
            self._logger.error(
                "Search failed",
                search_term=search_term,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        try:
            games = game_records_adapter.validate_json(raw) or []
        except PydanticValidationError as e:
            self._logger.error(
                "Malformed search response",
                search_term=search_term,
                error_count=e.error_count(),
            )
            raise MalformedResponseError(
                f"json error: {e}",
                endpoint=self._config.url,
                original_error=e,
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._logger.info(
            "Search successful",
            search_term=search_term,
            result_count=len(games),
            duration_ms=round(duration_ms, 2),
        )
        return games

    async def execute(self, query: str) -> bytes:
        """
        Send a raw query expression and return the response body.

        The configured timeout bounds the whole exchange, from
        connecting to reading the last byte of the body. Running out
        of time before the response arrives is a transport failure;
        running out while reading the body is a read failure.

        Args:
            query: Query expression sent as the request body

        Returns:
            bytes: Unaltered body of a 200 response

        Raises:
            TransportError: If no HTTP response was obtained in time
            QueryError: If the status code is not 200
            ResponseReadError: If reading the 200 body failed
        """
        url = self._config.url
        timeout = self._config.timeout_seconds
        deadline = time.perf_counter() + timeout
        request = self.client.build_request("POST", url, content=query.encode("utf-8"))

        self._logger.debug("Making request", method="POST", url=url)
        try:
            response = await asyncio.wait_for(
                self.client.send(request, stream=True),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            self._logger.warning("Query timed out", timeout_seconds=timeout)
            raise TransportError(
                f"request error: no response within {timeout}s",
                endpoint=url,
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"request error: {e}",
                endpoint=url,
                original_error=e,
            ) from e

        try:
            if response.status_code != 200:
                raise await self._query_error(response, deadline)

            try:
                return await self._read_body(response, deadline)
            except (httpx.HTTPError, httpx.StreamError, asyncio.TimeoutError) as e:
                raise ResponseReadError(
                    f"io error: {str(e) or 'body not received within the timeout'}",
                    endpoint=url,
                    original_error=e,
                ) from e
        finally:
            await response.aclose()

    @staticmethod
    async def _read_body(response: httpx.Response, deadline: float) -> bytes:
        """Read the full body, giving up once the deadline has passed."""
        remaining = max(deadline - time.perf_counter(), 0.0)
        return await asyncio.wait_for(response.aread(), timeout=remaining)

    async def _query_error(self, response: httpx.Response, deadline: float) -> QueryError:
        """
        Build the error for a non-success response.

        A body that cannot be read in time or parsed is ignored so
        the HTTP status is always what gets reported.
        """
        status = f"{response.status_code} {response.reason_phrase}".rstrip()

        try:
            body = await self._read_body(response, deadline)
        except (httpx.HTTPError, httpx.StreamError, asyncio.TimeoutError) as e:
            self._logger.debug("Could not read error body", status=status, error=repr(e))
            body = b""

        cause: RemoteError | None = None
        if body:
            try:
                cause = RemoteError.model_validate_json(body)
            except PydanticValidationError as e:
                self._logger.debug("Could not parse error body", status=status, error=str(e))

        return QueryError(
            response.status_code,
            status,
            cause,
            endpoint=self._config.url,
        )
