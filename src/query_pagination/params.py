"""
Parameter model types.

``PaginateParams`` types the recognised keys of the parameter mapping.
At runtime it is an ordinary ``dict``: insertion order is the wire order
and keys outside the recognised set are carried through untouched by both
the encoder and the decoder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, TypedDict

from .operators import FilterOperator, SortDirection

# ``in`` is a keyword, hence the functional form.
PaginateParams = TypedDict(
    "PaginateParams",
    {
        # Scalars
        "page": int,
        "limit": int,
        "search": str,
        "vacuum": bool,
        # Flat arrays
        "searchFields": list[str],
        "sort": list[str],
        "isnull": list[str],
        "isnotnull": list[str],
        # Single-value operator maps
        "like": dict[str, str],
        "eq": dict[str, Any],
        "gte": dict[str, Any],
        "gt": dict[str, Any],
        "lte": dict[str, Any],
        "lt": dict[str, Any],
        # Multi-value operator maps
        "likeor": dict[str, list[str]],
        "likeand": dict[str, list[str]],
        "eqor": dict[str, list[Any]],
        "eqand": dict[str, list[Any]],
        "in": dict[str, list[Any]],
        "notin": dict[str, list[Any]],
        # Range operator map: field -> [min, max]
        "between": dict[str, list[Any]],
    },
    total=False,
)


class SortConfig(NamedTuple):
    field: str
    direction: SortDirection


class FilterConfig(NamedTuple):
    field: str
    operator: FilterOperator
    value: Any


@dataclass(frozen=True)
class QueryStringResult:
    """Everything a builder produces in one go."""

    query_string: str
    params: dict[str, Any] = field(default_factory=dict)
    url: str = ""
