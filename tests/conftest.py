"""Shared fixtures for query_pagination tests."""

from __future__ import annotations

import pytest

from query_pagination import PaginateBuilder


@pytest.fixture
def builder() -> PaginateBuilder:
    """Fresh builder with default encode options."""
    return PaginateBuilder()


@pytest.fixture
def full_params() -> dict:
    """A parameter mapping touching every key shape, string-valued throughout."""
    return {
        "page": 2,
        "limit": 25,
        "search": "john",
        "searchFields": ["name", "email"],
        "sort": ["name", "-created_at"],
        "likeor": {"status": ["active", "pending"]},
        "in": {"dept_id": ["1"]},
        "between": {"age": ["18", "65"]},
        "eq": {"is_active": "true"},
        "isnull": ["deleted_at"],
        "vacuum": True,
    }
