"""
Helpers around the parameter mapping.

These are pure-Python helpers with no encoding concerns.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .operators import SortDirection
from .params import SortConfig

# ---------------------------------------------------------------------------
# Sort tokens
# ---------------------------------------------------------------------------


def parse_sort_string(sort: str) -> SortConfig:
    """
    Parse one sort token into a ``SortConfig``.

    Supports:
    - ``"-created_at"`` (leading dash is descending)
    - ``"name:asc"`` / ``"created_at:DESC"``
    - ``"name"`` (ascending)

    Anything after ``:`` other than ``desc`` (case-insensitive) is ascending.
    """
    if sort.startswith("-"):
        return SortConfig(sort[1:], SortDirection.DESC)
    if ":" in sort:
        field, _, direction = sort.partition(":")
        if direction.lower() == SortDirection.DESC.value:
            return SortConfig(field, SortDirection.DESC)
        return SortConfig(field, SortDirection.ASC)
    return SortConfig(sort, SortDirection.ASC)


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------


def merge_params(*param_sets: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge parameter mappings left to right into a new dict.

    - ``None`` values are ignored.
    - Two lists under the same key are concatenated.
    - Two mappings under the same key are merged shallowly (right wins).
    - Anything else is overwritten by the right-hand value.

    The inputs are never mutated.
    """
    result: dict[str, Any] = {}
    for params in param_sets:
        for key, value in params.items():
            if value is None:
                continue
            current = result.get(key)
            if isinstance(value, list) and isinstance(current, list):
                result[key] = [*current, *value]
            elif isinstance(value, Mapping) and isinstance(current, Mapping):
                result[key] = {**current, **value}
            elif isinstance(value, list):
                result[key] = list(value)
            elif isinstance(value, Mapping):
                result[key] = dict(value)
            else:
                result[key] = value
    return result
