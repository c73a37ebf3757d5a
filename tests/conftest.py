from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from d1api import D1Client

QUERY_URL = (
    "https://api.cloudflare.com/client/v4/accounts/account-id"
    "/d1/database/database-id/query"
)


def make_meta(rows_read: int = 1) -> dict[str, Any]:
    return {
        "changes": 0,
        "duration": 1,
        "rows_read": rows_read,
        "changed_db": False,
        "size_after": rows_read,
        "last_row_id": rows_read,
        "rows_written": 0,
    }


def make_envelope(
    rows: list[dict[str, Any]] | None = None,
    *,
    result: list[dict[str, Any]] | None = None,
    errors: list[dict[str, Any]] | None = None,
    success: bool = True,
) -> dict[str, Any]:
    if result is None:
        result = [{"results": rows or [], "meta": make_meta(len(rows or [])), "success": True}]
    return {
        "result": result,
        "success": success,
        "errors": errors or [],
        "messages": [],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_client():
    def _make(
        payload: Any = None,
        *,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        status_code: int = 200,
    ) -> tuple[D1Client, RecordingTransport]:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(status_code, json=payload)

        transport = RecordingTransport(handler)
        client = D1Client(
            account_id="account-id",
            api_key="api-key",
            database_id="database-id",
            transport=transport,
        )
        return client, transport

    return _make
