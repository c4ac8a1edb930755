"""
SQL fragment builders

Both builders return a SqlFragment whose text uses positional ``$n``
placeholders and whose values are listed in placeholder order. Column names
come from application code only; user input only ever reaches the values.
"""
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional

from app.core.exceptions import NoDataProvided


class SqlFragment(NamedTuple):
    """A piece of SQL plus the values its placeholders bind to."""
    sql: str
    values: List[Any]


class Predicate(NamedTuple):
    """
    One optional filter condition.

    ``template`` holds ``{}`` where the placeholder goes when ``binds_value``
    is set; otherwise it is a literal condition such as ``equity > 0``.
    """
    template: str
    active: bool
    value: Any = None
    binds_value: bool = True


def build_set_clause(data: Mapping[str, Any], field_mapping: Mapping[str, str]) -> SqlFragment:
    """
    Build the SET clause of a partial UPDATE.

    Args:
        data: public field name -> new value, e.g. {"firstName": "Aliya", "age": 32}
        field_mapping: public field name -> column name, e.g. {"firstName": "first_name"}.
            Fields missing from the mapping are used as column names verbatim.

    Returns:
        SqlFragment('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Callers number their own WHERE placeholders from ``len(values) + 1``.

    Raises:
        NoDataProvided: if ``data`` is empty
    """
    if not data:
        raise NoDataProvided()

    columns = []
    values = []
    for position, (field, value) in enumerate(data.items(), start=1):
        column = field_mapping.get(field)
        if column is None:
            column = field
        columns.append(f'"{column}"=${position}')
        values.append(value)

    return SqlFragment(", ".join(columns), values)


def build_where_clause(predicates: Iterable[Predicate]) -> SqlFragment:
    """
    Combine the active predicates with AND into a WHERE clause.

    Placeholders are numbered in predicate order and only value-bearing
    predicates consume a number. Returns an empty clause when nothing is active.
    """
    conditions = []
    values = []
    for predicate in predicates:
        if not predicate.active:
            continue
        if predicate.binds_value:
            values.append(predicate.value)
            conditions.append(predicate.template.format(f"${len(values)}"))
        else:
            conditions.append(predicate.template)

    if not conditions:
        return SqlFragment("", [])
    return SqlFragment("WHERE " + " AND ".join(conditions), values)


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value != ""


def build_job_filter(
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: bool = False,
) -> SqlFragment:
    """
    WHERE clause for job search.

    - title: case-insensitive substring of the job title
    - min_salary: salary >= min_salary
    - has_equity: only jobs with equity > 0 (active only when exactly True)

    Values are not type-checked here; request validation owns that, and a
    mistyped value fails at the database.
    """
    return build_where_clause([
        Predicate("title ILIKE {}", _has_text(title), f"%{title}%"),
        Predicate("salary >= {}", min_salary is not None, min_salary),
        Predicate("equity > 0", has_equity is True, binds_value=False),
    ])


def build_company_filter(
    name_like: Optional[str] = None,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None,
) -> SqlFragment:
    """WHERE clause for company search (name substring, employee count range)."""
    return build_where_clause([
        Predicate("name ILIKE {}", _has_text(name_like), f"%{name_like}%"),
        Predicate("num_employees >= {}", min_employees is not None, min_employees),
        Predicate("num_employees <= {}", max_employees is not None, max_employees),
    ])
