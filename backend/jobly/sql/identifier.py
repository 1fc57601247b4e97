"""
SQL identifier quoting.
"""


def quote_identifier(name: str) -> str:
    """
    Quote a column or table name for PostgreSQL/SQLite.

    Embedded double quotes are escaped by doubling them.

    Examples:
        >>> quote_identifier("num_employees")
        '"num_employees"'
        >>> quote_identifier('odd"name')
        '"odd""name"'
    """
    escaped = name.replace('"', '""')
    return f'"{escaped}"'
