"""
Positional parameter binding.

Statements are written with PostgreSQL-style ``$1, $2, ...`` placeholders.
``QueryParams`` hands those placeholders out in order, and
``compile_positional`` turns the finished statement into SQLAlchemy named
binds so it can run through ``text()`` on any driver.
"""
import re
from typing import Any, Dict, Sequence, Tuple

_PLACEHOLDER = re.compile(r"\$(\d+)")


class QueryParams(list):
    """
    Ordered values bound to a statement.

    ``add`` appends a value and returns the placeholder that refers to it, so
    fragments built in different places can share one numbering.

    Examples:
        >>> params = QueryParams()
        >>> params.add("Aliya")
        '$1'
        >>> params.add(32)
        '$2'
        >>> params
        ['Aliya', 32]
    """

    def add(self, value: Any) -> str:
        self.append(value)
        return f"${len(self)}"


def compile_positional(sql: str, values: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite ``$n`` placeholders as ``:pn`` named binds.

    Args:
        sql: Statement text using ``$1..$n``
        values: Values in placeholder order

    Returns:
        Tuple of (statement for ``sqlalchemy.text``, bind dictionary)

    Raises:
        ValueError: if a placeholder has no matching value

    Examples:
        >>> compile_positional('UPDATE jobs SET "title" = $1 WHERE id = $2', ["New", 7])
        ('UPDATE jobs SET "title" = :p1 WHERE id = :p2', {'p1': 'New', 'p2': 7})
    """
    def _named(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise ValueError(
                f"Placeholder ${index} has no value ({len(values)} bound)"
            )
        return f":p{index}"

    statement = _PLACEHOLDER.sub(_named, sql)
    binds = {f"p{i}": value for i, value in enumerate(values, start=1)}
    return statement, binds
