"""Tests for the query-string encoder."""

from __future__ import annotations

import pytest

from query_pagination.encoder import (
    build_query_string,
    encode_value,
    format_array_value,
    normalize_key,
    object_to_query_params,
    should_skip_value,
)
from query_pagination.options import DEFAULT_OPTIONS, ArrayFormat, EncodeOptions

# -- encode_value -----------------------------------------------------------


def test_encode_value_percent_encodes_reserved_characters():
    assert encode_value("a b&c=d/e") == "a%20b%26c%3Dd%2Fe"


def test_encode_value_keeps_component_safe_characters():
    assert encode_value("-_.!~*'()") == "-_.!~*'()"


def test_encode_value_encodes_brackets_and_commas():
    assert encode_value("likeor[status]") == "likeor%5Bstatus%5D"
    assert encode_value("a,b") == "a%2Cb"


def test_encode_value_unicode():
    assert encode_value("café") == "caf%C3%A9"


def test_encode_value_stringifies_scalars():
    assert encode_value(True) == "true"
    assert encode_value(False) == "false"
    assert encode_value(None) == "null"
    assert encode_value(42) == "42"


def test_encode_value_raw_when_disabled():
    assert encode_value("a b", encode=False) == "a b"


# -- skip predicate & key normalisation -------------------------------------


def test_should_skip_value_defaults():
    assert should_skip_value(None, DEFAULT_OPTIONS) is True
    assert should_skip_value("", DEFAULT_OPTIONS) is True
    assert should_skip_value(0, DEFAULT_OPTIONS) is False
    assert should_skip_value(False, DEFAULT_OPTIONS) is False


def test_should_skip_value_disabled():
    options = EncodeOptions(skip_nulls=False, skip_empty_string=False)
    assert should_skip_value(None, options) is False
    assert should_skip_value("", options) is False


def test_normalize_key_only_renames_search_fields():
    assert normalize_key("searchFields") == "search_fields"
    assert normalize_key("isNull") == "isNull"
    assert normalize_key("sort") == "sort"


# -- Array formats ----------------------------------------------------------


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        (ArrayFormat.REPEAT, ["sort=name", "sort=-age"]),
        (ArrayFormat.BRACKETS, ["sort[]=name", "sort[]=-age"]),
        (ArrayFormat.INDICES, ["sort[0]=name", "sort[1]=-age"]),
        (ArrayFormat.COMMA, ["sort=name,-age"]),
        (ArrayFormat.SEPARATOR, ["sort=name|-age"]),
    ],
)
def test_format_array_value(fmt: ArrayFormat, expected: list[str]):
    options = EncodeOptions(array_format=fmt, array_separator="|")
    assert format_array_value("sort", ["name", "-age"], options) == expected


def test_comma_ignores_array_separator():
    options = EncodeOptions(array_format=ArrayFormat.COMMA, array_separator=";")
    assert format_array_value("sort", ["a", "b"], options) == ["sort=a,b"]


def test_joined_formats_encode_elements_not_joiner():
    options = EncodeOptions(array_format=ArrayFormat.SEPARATOR, array_separator="|")
    assert format_array_value("tags", ["a|b", "c d"], options) == ["tags=a%7Cb|c%20d"]


def test_bracket_suffix_follows_encoded_key():
    options = EncodeOptions(array_format=ArrayFormat.BRACKETS)
    tokens = format_array_value("likeor[status]", ["a"], options)
    assert tokens == ["likeor%5Bstatus%5D[]=a"]


# -- object_to_query_params -------------------------------------------------


def test_preserves_insertion_order():
    tokens = object_to_query_params({"sort": ["name"], "page": 1, "limit": 10})
    assert tokens == ["sort=name", "page=1", "limit=10"]


def test_drops_skippable_and_empty_values():
    tokens = object_to_query_params(
        {"page": 1, "search": "", "sort": [], "like": None, "eq": {}}
    )
    assert tokens == ["page=1"]


def test_nested_operator_map():
    tokens = object_to_query_params(
        {"eq": {"status": "active", "deleted": None}, "likeor": {"name": ["a", "b"]}}
    )
    assert tokens == [
        "eq%5Bstatus%5D=active",
        "likeor%5Bname%5D=a",
        "likeor%5Bname%5D=b",
    ]


def test_nested_empty_sequence_is_dropped():
    options = EncodeOptions(array_format=ArrayFormat.COMMA)
    assert object_to_query_params({"in": {"id": []}}, options) == []


def test_nested_indices():
    options = EncodeOptions(array_format=ArrayFormat.INDICES)
    tokens = object_to_query_params({"between": {"age": [18, 65]}}, options)
    assert tokens == ["between%5Bage%5D[0]=18", "between%5Bage%5D[1]=65"]


def test_unencoded_output():
    options = EncodeOptions(encode_values=False)
    tokens = object_to_query_params(
        {"search": "a b", "eq": {"status": "on"}}, options
    )
    assert tokens == ["search=a b", "eq[status]=on"]


def test_search_fields_renamed_on_wire():
    tokens = object_to_query_params({"searchFields": ["name", "email"]})
    assert tokens == ["search_fields=name", "search_fields=email"]


def test_unknown_keys_pass_through():
    tokens = object_to_query_params(
        {"custom": "x", "tags": ["a", "b"], "meta": {"k": "v"}}
    )
    assert tokens == ["custom=x", "tags=a", "tags=b", "meta%5Bk%5D=v"]


def test_tuple_treated_as_sequence():
    assert object_to_query_params({"sort": ("a", "b")}) == ["sort=a", "sort=b"]


def test_null_kept_when_skip_disabled():
    options = EncodeOptions(skip_nulls=False)
    assert object_to_query_params({"search": None}, options) == ["search=null"]


def test_encoder_does_not_mutate_input():
    params = {"sort": ["a"], "eq": {"x": "1"}}
    object_to_query_params(params)
    assert params == {"sort": ["a"], "eq": {"x": "1"}}


# -- build_query_string -----------------------------------------------------


def test_build_query_string_empty():
    assert build_query_string({}) == ""
    assert build_query_string({"search": "", "sort": [], "page": None}) == ""


def test_build_query_string_joins_with_ampersand():
    assert build_query_string({"page": 1, "limit": 10}) == "page=1&limit=10"
