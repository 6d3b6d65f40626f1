"""Tests for sort parsing and parameter merging."""

from __future__ import annotations

import pytest

from query_pagination import SortConfig, SortDirection, merge_params, parse_sort_string

# -- parse_sort_string ------------------------------------------------------


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("name", SortConfig("name", SortDirection.ASC)),
        ("-created_at", SortConfig("created_at", SortDirection.DESC)),
        ("name:asc", SortConfig("name", SortDirection.ASC)),
        ("created_at:desc", SortConfig("created_at", SortDirection.DESC)),
        ("created_at:DESC", SortConfig("created_at", SortDirection.DESC)),
        ("name:sideways", SortConfig("name", SortDirection.ASC)),
    ],
)
def test_parse_sort_string(raw: str, expected: SortConfig):
    assert parse_sort_string(raw) == expected


def test_sort_config_fields():
    config = parse_sort_string("-age")
    assert config.field == "age"
    assert config.direction == "desc"


# -- merge_params -----------------------------------------------------------


def test_merge_concatenates_lists():
    assert merge_params({"sort": ["a"]}, {"sort": ["b", "c"]}) == {
        "sort": ["a", "b", "c"]
    }


def test_merge_mappings_shallow():
    assert merge_params(
        {"eq": {"a": 1, "b": 2}}, {"eq": {"b": 3}}, {"eq": {"c": 4}}
    ) == {"eq": {"a": 1, "b": 3, "c": 4}}


def test_merge_ignores_none_and_overwrites_scalars():
    assert merge_params({"page": 1, "search": "x"}, {"page": 2, "search": None}) == {
        "page": 2,
        "search": "x",
    }


def test_merge_mismatched_shapes_overwrite():
    assert merge_params({"sort": "name"}, {"sort": ["age"]}) == {"sort": ["age"]}


def test_merge_does_not_mutate_inputs():
    left = {"sort": ["a"], "eq": {"x": 1}}
    right = {"sort": ["b"], "eq": {"y": 2}}
    merged = merge_params(left, right)
    merged["sort"].append("z")
    merged["eq"]["w"] = 0
    assert left == {"sort": ["a"], "eq": {"x": 1}}
    assert right == {"sort": ["b"], "eq": {"y": 2}}


def test_merge_nothing():
    assert merge_params() == {}
