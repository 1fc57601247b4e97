"""
Partial-update SET clause builder.
"""
from typing import Any, Mapping, Tuple

from jobly.core.exceptions import EmptyInputError
from jobly.sql.fields import map_field
from jobly.sql.identifier import quote_identifier
from jobly.sql.parameters import QueryParams


def build_set_clause(
    updates: Mapping[str, Any],
    mapping: Mapping[str, str],
) -> Tuple[str, QueryParams]:
    """
    Build the SET clause for a partial update.

    Assignments and values follow the iteration order of ``updates``. The
    returned ``QueryParams`` can keep growing, so the caller binds its key
    predicate with ``params.add(key)``.

    Args:
        updates: External field name -> new value
        mapping: External field name -> column name for this entity

    Returns:
        Tuple of (clause fragment, bound values)

    Raises:
        EmptyInputError: if ``updates`` is empty

    Examples:
        >>> build_set_clause({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        ('"first_name" = $1, "age" = $2', ['Aliya', 32])
    """
    if not updates:
        raise EmptyInputError("No data")

    params = QueryParams()
    assignments = [
        f"{quote_identifier(map_field(name, mapping))} = {params.add(value)}"
        for name, value in updates.items()
    ]
    return ", ".join(assignments), params
