"""Tests for field mapping and the partial-update SET clause builder."""

import re

import pytest

from jobly.core.exceptions import EmptyInputError, UnknownFieldError
from jobly.sql import build_set_clause, map_field, require_known_fields

USER_MAP = {"firstName": "first_name", "lastName": "last_name", "isAdmin": "is_admin"}


class TestMapField:
    def test_mapped(self) -> None:
        assert map_field("numEmployees", {"numEmployees": "num_employees"}) == "num_employees"

    def test_unmapped_is_identity(self) -> None:
        assert map_field("email", USER_MAP) == "email"

    def test_empty_table(self) -> None:
        assert map_field("anything", {}) == "anything"


class TestRequireKnownFields:
    def test_all_known(self) -> None:
        require_known_fields(["title", "salary"], {"title", "salary", "equity"})

    def test_empty_input_passes(self) -> None:
        require_known_fields([], {"title"})

    def test_unknown_listed_in_order(self) -> None:
        with pytest.raises(UnknownFieldError) as exc_info:
            require_known_fields(["zeta", "title", "alpha"], {"title"})
        assert exc_info.value.fields == ["zeta", "alpha"]
        assert "zeta, alpha" in exc_info.value.message


class TestBuildSetClause:
    def test_three_items(self) -> None:
        data = {"firstName": "test111", "lastName": "test111", "email": "test@test111.com"}
        set_cols, values = build_set_clause(data, USER_MAP)
        assert set_cols == '"first_name" = $1, "last_name" = $2, "email" = $3'
        assert values == ["test111", "test111", "test@test111.com"]

    def test_single_field(self) -> None:
        set_cols, values = build_set_clause({"title": "Updated"}, {})
        assert set_cols == '"title" = $1'
        assert values == ["Updated"]

    def test_follows_input_order(self) -> None:
        set_cols, values = build_set_clause({"logoUrl": "u", "name": "n", "numEmployees": 7},
                                            {"numEmployees": "num_employees", "logoUrl": "logo_url"})
        assert set_cols == '"logo_url" = $1, "name" = $2, "num_employees" = $3'
        assert values == ["u", "n", 7]

    @pytest.mark.parametrize("size", [1, 2, 5, 11])
    def test_placeholder_count_matches_values(self, size: int) -> None:
        data = {f"field{i}": i for i in range(size)}
        set_cols, values = build_set_clause(data, {})
        placeholders = re.findall(r"\$(\d+)", set_cols)
        assert [int(p) for p in placeholders] == list(range(1, size + 1))
        assert len(values) == size

    def test_unknown_fields_pass_through(self) -> None:
        set_cols, _ = build_set_clause({"notAColumn": 1}, USER_MAP)
        assert set_cols == '"notAColumn" = $1'

    def test_key_appended_after_values(self) -> None:
        set_cols, params = build_set_clause({"title": "New", "salary": 10}, {})
        assert params.add(42) == "$3"
        assert params == ["New", 10, 42]

    @pytest.mark.parametrize("mapping", [{}, USER_MAP])
    def test_empty_updates_rejected(self, mapping) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(EmptyInputError):
            build_set_clause({}, mapping)

    def test_values_never_in_sql(self) -> None:
        set_cols, values = build_set_clause({"name": "x'; DROP TABLE companies; --"}, {})
        assert "DROP" not in set_cols
        assert values == ["x'; DROP TABLE companies; --"]
