"""
WHERE clause builders for company and job searches.

Every optional criterion becomes either a ``Predicate`` or ``None``; the
present predicates are folded, in order, into an AND-joined fragment and a
parallel list of bound values.
"""
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from jobly.core.exceptions import RangeError
from jobly.sql.identifier import quote_identifier
from jobly.sql.parameters import QueryParams

_UNBOUND = object()


@dataclass(frozen=True)
class Predicate:
    """
    One condition of a WHERE clause.

    ``template`` holds a ``{}`` slot for the placeholder when ``value`` is
    bound; boolean-only predicates carry neither.
    """

    template: str
    value: Any = _UNBOUND

    @property
    def is_bound(self) -> bool:
        return self.value is not _UNBOUND

    def render(self, params: QueryParams) -> str:
        if not self.is_bound:
            return self.template
        return self.template.format(params.add(self.value))


def at_least(column: str, value: Optional[Any]) -> Optional[Predicate]:
    """Inclusive lower bound, or ``None`` when no bound was given."""
    if value is None:
        return None
    return Predicate(f"{quote_identifier(column)} >= {{}}", value)


def at_most(column: str, value: Optional[Any]) -> Optional[Predicate]:
    """Inclusive upper bound, or ``None`` when no bound was given."""
    if value is None:
        return None
    return Predicate(f"{quote_identifier(column)} <= {{}}", value)


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains(column: str, text: Optional[str]) -> Optional[Predicate]:
    """
    Case-insensitive substring match.

    The wildcards travel in the bound value; ``%`` and ``_`` typed by the
    caller are escaped so they match literally.
    """
    if text is None:
        return None
    return Predicate(
        f"lower({quote_identifier(column)}) LIKE {{}} ESCAPE '\\'",
        f"%{_escape_like(text.lower())}%",
    )


def is_positive(column: str, flag: Optional[bool]) -> Optional[Predicate]:
    """Restrict to rows where ``column`` > 0, only when ``flag`` is true."""
    if not flag:
        return None
    return Predicate(f"{quote_identifier(column)} > 0")


def fold_predicates(predicates: Iterable[Optional[Predicate]]) -> Tuple[str, QueryParams]:
    """
    Join the present predicates with AND.

    Returns:
        Tuple of (fragment, bound values); ``("", [])`` when nothing is present

    Examples:
        >>> fold_predicates([at_least("salary", 150), None, is_positive("equity", True)])
        ('"salary" >= $1 AND "equity" > 0', [150])
    """
    params = QueryParams()
    clauses = [
        predicate.render(params)
        for predicate in predicates
        if predicate is not None
    ]
    return " AND ".join(clauses), params


def where_clause(fragment: str) -> str:
    """Prefix ``WHERE`` to a non-empty fragment."""
    return f" WHERE {fragment}" if fragment else ""


@dataclass(frozen=True)
class CompanyFilter:
    """Optional company search criteria."""

    min_employees: Optional[int] = None
    max_employees: Optional[int] = None
    name_contains: Optional[str] = None


@dataclass(frozen=True)
class JobFilter:
    """Optional job search criteria. ``has_equity=False`` adds no condition."""

    title_contains: Optional[str] = None
    min_salary: Optional[int] = None
    has_equity: Optional[bool] = None


def build_company_filter(criteria: CompanyFilter) -> Tuple[str, QueryParams]:
    """
    Build the WHERE fragment for a company search.

    Raises:
        RangeError: if both employee bounds are given and min exceeds max
    """
    if (
        criteria.min_employees is not None
        and criteria.max_employees is not None
        and criteria.min_employees > criteria.max_employees
    ):
        raise RangeError("Min employees must be less than max employees!")

    return fold_predicates([
        at_least("num_employees", criteria.min_employees),
        at_most("num_employees", criteria.max_employees),
        contains("name", criteria.name_contains),
    ])


def build_job_filter(criteria: JobFilter) -> Tuple[str, QueryParams]:
    """Build the WHERE fragment for a job search."""
    return fold_predicates([
        contains("title", criteria.title_contains),
        at_least("salary", criteria.min_salary),
        is_positive("equity", criteria.has_equity),
    ])
