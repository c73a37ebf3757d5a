"""Positional SQL builder for template-style queries."""

from __future__ import annotations

from typing import Any, Sequence

from d1api.exceptions import InvalidTemplateShapeError


def build_tagged_sql(
    fragments: Sequence[str],
    values: Sequence[Any] | None = None,
) -> str:
    """
    Join template fragments with ``?1``, ``?2``, ... placeholders.

    ``["SELECT * FROM users WHERE id = ", ""]`` becomes
    ``"SELECT * FROM users WHERE id = ?1"``. Nothing is escaped; values are
    bound positionally by the remote engine.

    Raises:
        InvalidTemplateShapeError: no fragments, or ``values`` given and
            ``len(fragments) != len(values) + 1``.
    """
    if isinstance(fragments, str):
        fragments = [fragments]
    if not fragments:
        raise InvalidTemplateShapeError(0, len(values) if values is not None else 0)
    if values is not None and len(fragments) != len(values) + 1:
        raise InvalidTemplateShapeError(len(fragments), len(values))

    last = len(fragments) - 1
    parts: list[str] = []
    for index, fragment in enumerate(fragments):
        parts.append(fragment)
        if index != last:
            parts.append(f"?{index + 1}")
    return "".join(parts)


def build_query(
    fragments: Sequence[str],
    values: Sequence[Any],
) -> tuple[str, list[Any]]:
    """Return the positional SQL and its parameter list."""
    return build_tagged_sql(fragments, values), list(values)
