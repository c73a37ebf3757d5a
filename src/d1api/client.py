"""
D1 Client.

Async HTTP client for the Cloudflare D1 query API.
"""

from __future__ import annotations

import json
import time
from typing import Any, Sequence

import httpx

from d1api.config import D1APIOptions
from d1api.exceptions import (
    EmptyResultSetError,
    RemoteQueryError,
    TransportError,
    TransportTimeoutError,
)
from d1api.logging import get_logger
from d1api.models import QueryResponse, QueryResult, Row
from d1api.sql import build_query

logger = get_logger(__name__)


class D1Client:
    """
    Async client for a single D1 database.

    Usage:
        async with D1Client(account_id="...", api_key="...", database_id="...") as db:
            user = await db.first(["SELECT * FROM users WHERE id = ", ""], 1)
            result = await db.all_raw("SELECT * FROM users WHERE age > ?1", [30])
    """

    def __init__(
        self,
        account_id: str | None = None,
        api_key: str | None = None,
        database_id: str | None = None,
        *,
        options: D1APIOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if options is None:
            options = D1APIOptions(
                account_id=account_id,
                api_key=api_key,
                database_id=database_id,
            )
        self._options = options
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def options(self) -> D1APIOptions:
        return self._options

    async def __aenter__(self) -> D1Client:
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def connect(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._options.api_key.get_secret_value()}",
            },
            timeout=httpx.Timeout(self._options.timeout),
            transport=self._transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ========================================================================
    # Execution
    # ========================================================================

    async def exec_raw(
        self, sql: str, params: list[Any] | None = None
    ) -> QueryResponse:
        """
        Execute SQL and return the full response envelope.

        Prefer ``exec`` with template fragments.

        Raises:
            RemoteQueryError: The envelope reports errors or no success
            TransportError: The request failed or the body was not JSON
        """
        body: dict[str, Any] = {"sql": sql}
        if params is not None:
            body["params"] = params
        content = json.dumps(body, separators=(",", ":"), ensure_ascii=False)

        logger.debug(
            "d1_query_sent",
            account_id=self._options.account_id,
            database_id=self._options.database_id,
            sql=sql,
            param_count=len(params) if params is not None else 0,
        )
        started = time.perf_counter()

        response = await self._post(self._options.query_url, content.encode("utf-8"))
        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                f"Response body is not valid JSON (status {response.status_code})",
                cause=e,
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise TransportError(
                f"Unexpected response body type: {type(payload).__name__}",
                status_code=response.status_code,
            )

        result = QueryResponse.from_dict(payload)
        if result.errors or not result.success:
            raise RemoteQueryError(result, status_code=response.status_code)

        logger.debug(
            "d1_query_completed",
            database_id=self._options.database_id,
            result_count=len(result.result),
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return result

    async def exec(self, fragments: Sequence[str], *params: Any) -> QueryResponse:
        """Execute template fragments, binding ``params`` as ``?1``, ``?2``, ..."""
        sql, values = build_query(fragments, params)
        return await self.exec_raw(sql, values)

    async def all_raw(
        self, sql: str, params: list[Any] | None = None
    ) -> QueryResult:
        """
        Return the first statement's result (all of its rows plus metadata).

        Prefer ``all`` with template fragments.
        """
        response = await self.exec_raw(sql, params)
        if not response.result:
            raise EmptyResultSetError("all")
        return response.result[0]

    async def all(self, fragments: Sequence[str], *params: Any) -> QueryResult:
        """Template form of ``all_raw``."""
        sql, values = build_query(fragments, params)
        return await self.all_raw(sql, values)

    async def first_raw(
        self, sql: str, params: list[Any] | None = None
    ) -> Row | None:
        """
        Return the first row of the first statement, or None if it has no rows.

        Prefer ``first`` with template fragments.
        """
        response = await self.exec_raw(sql, params)
        if not response.result:
            raise EmptyResultSetError("first")
        rows = response.result[0].results
        return rows[0] if rows else None

    async def first(self, fragments: Sequence[str], *params: Any) -> Row | None:
        """Template form of ``first_raw``."""
        sql, values = build_query(fragments, params)
        return await self.first_raw(sql, values)

    # ========================================================================
    # HTTP helpers
    # ========================================================================

    async def _post(self, url: str, content: bytes) -> httpx.Response:
        if not self._client:
            await self.connect()

        try:
            return await self._client.post(url, content=content)
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(str(e) or "Request timed out", cause=e) from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or e.__class__.__name__, cause=e) from e
