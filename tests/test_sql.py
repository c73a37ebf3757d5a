from __future__ import annotations

import pytest

from d1api import InvalidTemplateShapeError, build_query, build_tagged_sql


class TestBuildTaggedSql:
    def test_single_value(self) -> None:
        assert build_tagged_sql(["SELECT * FROM users WHERE id = ", ""]) == (
            "SELECT * FROM users WHERE id = ?1"
        )

    def test_placeholders_are_numbered_left_to_right(self) -> None:
        fragments = ["INSERT INTO t (a, b, c) VALUES (", ", ", ", ", ")"]
        assert build_tagged_sql(fragments, [1, 2, 3]) == (
            "INSERT INTO t (a, b, c) VALUES (?1, ?2, ?3)"
        )

    def test_no_values(self) -> None:
        assert build_tagged_sql(["SELECT 1"]) == "SELECT 1"
        assert build_tagged_sql("SELECT 1") == "SELECT 1"

    def test_adjacent_values(self) -> None:
        assert build_tagged_sql(["", "", ""], ["a", "b"]) == "?1?2"

    def test_values_are_not_inlined(self) -> None:
        sql = build_tagged_sql(["SELECT * FROM users WHERE name = ", ""], ["x'; DROP TABLE users; --"])
        assert sql == "SELECT * FROM users WHERE name = ?1"

    @pytest.mark.parametrize(
        "fragments, values",
        [
            (["SELECT ", ""], []),
            (["SELECT ", ""], [1, 2]),
            (["SELECT 1"], [1]),
            ([], []),
        ],
    )
    def test_mismatched_shape_raises(self, fragments, values) -> None:
        with pytest.raises(InvalidTemplateShapeError) as exc_info:
            build_tagged_sql(fragments, values)

        assert exc_info.value.details == {"fragments": len(fragments), "values": len(values)}
        assert isinstance(exc_info.value, ValueError)


class TestBuildQuery:
    def test_returns_sql_and_params(self) -> None:
        sql, params = build_query(["SELECT * FROM users WHERE id = ", ""], (1,))
        assert sql == "SELECT * FROM users WHERE id = ?1"
        assert params == [1]

    def test_params_keep_identity_of_values(self) -> None:
        payload = {"nested": True}
        _, params = build_query(["SELECT ", ""], [payload])
        assert params[0] is payload
