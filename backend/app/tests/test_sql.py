"""Tests for the SET / WHERE clause builders."""

import itertools
import re
from types import MappingProxyType

import pytest

from app.core.exceptions import BadRequestError, NoDataProvided
from app.utils.sql import (
    Predicate,
    SqlFragment,
    build_company_filter,
    build_job_filter,
    build_set_clause,
    build_where_clause,
)


def placeholder_numbers(sql: str):
    return [int(n) for n in re.findall(r"\$(\d+)", sql)]


class TestBuildSetClause:
    """Partial update SET clause."""

    def test_maps_fields_and_keeps_order(self):
        set_cols, values = build_set_clause(
            {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
        )

        assert set_cols == '"first_name"=$1, "age"=$2'
        assert values == ["Aliya", 32]

    def test_multiple_mapped_and_unmapped_fields(self):
        data = {
            "firstName": "BB",
            "lastName": "CC",
            "isAdmin": True,
            "email": "hello@what.com",
        }
        mapping = {
            "firstName": "first_name",
            "lastName": "last_name",
            "isAdmin": "is_admin",
        }

        set_cols, values = build_set_clause(data, mapping)

        assert set_cols == '"first_name"=$1, "last_name"=$2, "is_admin"=$3, "email"=$4'
        assert values == ["BB", "CC", True, "hello@what.com"]

    def test_values_are_not_coerced(self):
        data = {"firstName": 23, "isAdmin": "true", "email": None}

        _, values = build_set_clause(data, {"firstName": "first_name"})

        assert values == [23, "true", None]

    @pytest.mark.parametrize("mapping", [{}, {"firstName": "first_name"}, MappingProxyType({})])
    def test_empty_data_raises(self, mapping):
        with pytest.raises(NoDataProvided) as exc_info:
            build_set_clause({}, mapping)

        assert exc_info.value.message == "No data"
        assert exc_info.value.status_code == 400
        assert isinstance(exc_info.value, BadRequestError)

    def test_none_mapping_value_falls_back_to_field_name(self):
        set_cols, _ = build_set_clause({"title": "x"}, {"title": None})

        assert set_cols == '"title"=$1'

    def test_expression_count_matches_values(self):
        data = {f"field{i}": i for i in range(12)}

        set_cols, values = build_set_clause(data, {})

        expressions = set_cols.split(", ")
        assert len(expressions) == len(values) == 12
        for i, expression in enumerate(expressions):
            assert expression == f'"field{i}"=${i + 1}'
            assert values[i] == i

    def test_result_is_a_fragment(self):
        fragment = build_set_clause({"title": "x"}, {})

        assert isinstance(fragment, SqlFragment)
        assert fragment.sql == '"title"=$1'
        assert fragment.values == ["x"]


class TestBuildJobFilter:
    """Job search WHERE clause."""

    def test_title_and_min_salary(self):
        where, values = build_job_filter("eng", 50000, False)

        assert where == "WHERE title ILIKE $1 AND salary >= $2"
        assert values == ["%eng%", 50000]

    def test_has_equity_only(self):
        where, values = build_job_filter(None, None, True)

        assert where == "WHERE equity > 0"
        assert values == []

    def test_no_filters(self):
        where, values = build_job_filter(None, None, False)

        assert where == ""
        assert values == []

    def test_defaults_are_no_filters(self):
        assert build_job_filter() == SqlFragment("", [])

    def test_empty_title_is_ignored(self):
        where, values = build_job_filter("", 100, False)

        assert where == "WHERE salary >= $1"
        assert values == [100]

    def test_zero_salary_is_a_filter(self):
        where, values = build_job_filter(None, 0, False)

        assert where == "WHERE salary >= $1"
        assert values == [0]

    def test_equity_after_min_salary_takes_no_placeholder(self):
        where, values = build_job_filter(None, 1000, True)

        assert where == "WHERE salary >= $1 AND equity > 0"
        assert values == [1000]

    @pytest.mark.parametrize("flag", ["0", "true", 1, "false"])
    def test_non_boolean_flag_is_ignored(self, flag):
        where, values = build_job_filter(None, None, flag)

        assert where == ""
        assert values == []

    @pytest.mark.parametrize(
        "title,min_salary,has_equity",
        list(itertools.product(["eng", None], [50000, None], [True, False])),
    )
    def test_every_combination_is_well_formed(self, title, min_salary, has_equity):
        where, values = build_job_filter(title, min_salary, has_equity)

        expected_values = []
        if title is not None:
            expected_values.append("%eng%")
        if min_salary is not None:
            expected_values.append(50000)
        assert values == expected_values

        if not (title or min_salary is not None or has_equity):
            assert where == ""
            return

        assert where.startswith("WHERE ")
        body = where[len("WHERE "):]
        assert not body.startswith("AND")
        assert not body.endswith("AND")
        assert "AND AND" not in body

        conditions = body.split(" AND ")
        active = sum([title is not None, min_salary is not None, has_equity])
        assert len(conditions) == active
        assert placeholder_numbers(where) == list(range(1, len(values) + 1))
        assert ("equity > 0" in conditions) == has_equity


class TestBuildCompanyFilter:
    """Company search WHERE clause."""

    def test_all_filters(self):
        where, values = build_company_filter("net", 10, 500)

        assert where == (
            "WHERE name ILIKE $1 AND num_employees >= $2 AND num_employees <= $3"
        )
        assert values == ["%net%", 10, 500]

    def test_max_only(self):
        where, values = build_company_filter(max_employees=50)

        assert where == "WHERE num_employees <= $1"
        assert values == [50]

    def test_name_and_max(self):
        where, values = build_company_filter("c", None, 3)

        assert where == "WHERE name ILIKE $1 AND num_employees <= $2"
        assert values == ["%c%", 3]

    def test_no_filters(self):
        assert build_company_filter() == SqlFragment("", [])


class TestBuildWhereClause:
    """Generic predicate fold."""

    def test_literal_predicates_between_value_predicates(self):
        where, values = build_where_clause([
            Predicate("a = {}", True, 1),
            Predicate("b IS NULL", True, binds_value=False),
            Predicate("c = {}", False, 99),
            Predicate("d < {}", True, 4),
        ])

        assert where == "WHERE a = $1 AND b IS NULL AND d < $2"
        assert values == [1, 4]

    def test_nothing_active(self):
        assert build_where_clause([Predicate("a = {}", False, 1)]) == SqlFragment("", [])


class TestStatementAssembly:
    """Builder output placed into full statements."""

    def test_update_template_has_matching_placeholders(self):
        set_cols, values = build_set_clause({"title": "New", "salary": 10}, {})
        id_idx = f"${len(values) + 1}"
        sql = f"UPDATE jobs SET {set_cols} WHERE id = {id_idx}"
        params = [*values, 7]

        assert max(placeholder_numbers(sql)) == len(params)
        assert sql == 'UPDATE jobs SET "title"=$1, "salary"=$2 WHERE id = $3'

    @pytest.mark.parametrize(
        "title,min_salary,has_equity",
        list(itertools.product(["eng", None], [50000, None], [True, False])),
    )
    def test_select_template_has_matching_placeholders(self, title, min_salary, has_equity):
        where, values = build_job_filter(title, min_salary, has_equity)
        sql = f"SELECT id FROM jobs {where} ORDER BY title"

        assert max(placeholder_numbers(sql), default=0) == len(values)
