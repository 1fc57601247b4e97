"""
Field name translation between the API (camelCase) and storage (snake_case).
"""
from typing import AbstractSet, Iterable, Mapping

from jobly.core.exceptions import UnknownFieldError


def map_field(name: str, mapping: Mapping[str, str]) -> str:
    """Return the storage column for ``name``; unmapped names map to themselves."""
    return mapping.get(name, name)


def require_known_fields(names: Iterable[str], allowed: AbstractSet[str]) -> None:
    """
    Reject field names outside a repository's declared field set.

    Raises:
        UnknownFieldError: listing the unknown names in input order
    """
    unknown = [name for name in names if name not in allowed]
    if unknown:
        raise UnknownFieldError(unknown)
