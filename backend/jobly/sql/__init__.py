"""
SQL construction helpers for the Jobly repositories.

Builds the two dynamic statement shapes the service needs (partial-update
SET clauses and conjunctive WHERE filters) with quoted identifiers and
positional placeholders.
"""

from .identifier import quote_identifier
from .parameters import QueryParams, compile_positional
from .fields import map_field, require_known_fields
from .partial_update import build_set_clause
from .filters import (
    CompanyFilter,
    JobFilter,
    Predicate,
    at_least,
    at_most,
    build_company_filter,
    build_job_filter,
    contains,
    fold_predicates,
    is_positive,
    where_clause,
)

__all__ = [
    "quote_identifier",
    "QueryParams",
    "compile_positional",
    "map_field",
    "require_known_fields",
    "build_set_clause",
    "CompanyFilter",
    "JobFilter",
    "Predicate",
    "at_least",
    "at_most",
    "contains",
    "is_positive",
    "fold_predicates",
    "build_company_filter",
    "build_job_filter",
    "where_clause",
]
