"""Data models for the D1 query API envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Row = dict[str, Any]


@dataclass(frozen=True)
class QueryMetadata:
    """Execution statistics for one statement."""

    changed_db: bool = False
    changes: int = 0
    # Milliseconds
    duration: float = 0.0
    last_row_id: int = 0
    rows_read: int = 0
    rows_written: int = 0
    size_after: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> QueryMetadata:
        data = data or {}
        return cls(
            changed_db=data.get("changed_db", False),
            changes=data.get("changes", 0),
            duration=data.get("duration", 0.0),
            last_row_id=data.get("last_row_id", 0),
            rows_read=data.get("rows_read", 0),
            rows_written=data.get("rows_written", 0),
            size_after=data.get("size_after", 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "changed_db": self.changed_db,
            "changes": self.changes,
            "duration": self.duration,
            "last_row_id": self.last_row_id,
            "rows_read": self.rows_read,
            "rows_written": self.rows_written,
            "size_after": self.size_after,
        }


@dataclass(frozen=True)
class QueryError:
    """An error entry reported by the remote API."""

    code: int
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryError:
        return cls(code=data.get("code", 0), message=data.get("message", ""))

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class QueryMessage:
    """An informational message reported by the remote API."""

    code: int
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryMessage:
        return cls(code=data.get("code", 0), message=data.get("message", ""))

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass
class QueryResult:
    """Outcome of a single statement: its rows plus metadata."""

    results: list[Row] = field(default_factory=list)
    meta: QueryMetadata = field(default_factory=QueryMetadata)
    success: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryResult:
        return cls(
            results=list(data.get("results") or []),
            meta=QueryMetadata.from_dict(data.get("meta")),
            success=data.get("success", True),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": list(self.results),
            "meta": self.meta.to_dict(),
            "success": self.success,
        }


@dataclass
class QueryResponse:
    """
    Full response envelope.

    ``result`` holds one entry per submitted statement, in submission order.
    """

    success: bool = True
    result: list[QueryResult] = field(default_factory=list)
    errors: list[QueryError] = field(default_factory=list)
    messages: list[QueryMessage] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.success and not self.errors

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryResponse:
        return cls(
            success=data.get("success", True),
            result=[QueryResult.from_dict(r) for r in data.get("result") or []],
            errors=[QueryError.from_dict(e) for e in data.get("errors") or []],
            messages=[QueryMessage.from_dict(m) for m in data.get("messages") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "errors": [e.to_dict() for e in self.errors],
            "messages": [m.to_dict() for m in self.messages],
            "result": [r.to_dict() for r in self.result],
            "success": self.success,
        }
