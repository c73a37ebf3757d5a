"""
d1api: async Python client for the Cloudflare D1 query API.

Usage:
    from d1api import D1Client

    async with D1Client(account_id="...", api_key="...", database_id="...") as db:
        row = await db.first(["SELECT * FROM users WHERE id = ", ""], 1)
        print(row)
"""

from d1api.client import D1Client
from d1api.config import D1APIOptions
from d1api.exceptions import (
    D1Error,
    EmptyResultSetError,
    InvalidTemplateShapeError,
    RemoteQueryError,
    TransportError,
    TransportTimeoutError,
)
from d1api.models import (
    QueryError,
    QueryMessage,
    QueryMetadata,
    QueryResponse,
    QueryResult,
    Row,
)
from d1api.sql import build_query, build_tagged_sql

__version__ = "0.1.0"

__all__ = [
    "D1Client",
    "D1APIOptions",
    "D1Error",
    "RemoteQueryError",
    "TransportError",
    "TransportTimeoutError",
    "EmptyResultSetError",
    "InvalidTemplateShapeError",
    "QueryError",
    "QueryMessage",
    "QueryMetadata",
    "QueryResponse",
    "QueryResult",
    "Row",
    "build_query",
    "build_tagged_sql",
]
