"""
Parameter mapping -> query-string tokens.

Entries are emitted in the mapping's iteration order. Sequences follow the
configured ``ArrayFormat``; nested mappings (operator maps) flatten to
``key[field]`` composites before the array rule is applied.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from .options import DEFAULT_OPTIONS, ArrayFormat, EncodeOptions

logger = logging.getLogger(__name__)

# Characters left alone by URL component encoding.
_COMPONENT_SAFE = "-_.!~*'()"

# The one wire rename; not a general camelCase -> snake_case transform.
_WIRE_KEYS = {"searchFields": "search_fields"}


def encode_value(value: Any, encode: bool = True) -> str:
    """Stringify *value* and percent-encode it when *encode* is set."""
    if value is True:
        text = "true"
    elif value is False:
        text = "false"
    elif value is None:
        text = "null"
    else:
        text = str(value)
    return quote(text, safe=_COMPONENT_SAFE) if encode else text


def should_skip_value(value: Any, options: EncodeOptions) -> bool:
    if options.skip_nulls and value is None:
        return True
    return options.skip_empty_string and isinstance(value, str) and value == ""


def normalize_key(key: str) -> str:
    return _WIRE_KEYS.get(key, key)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def format_array_value(
    key: str,
    values: Sequence[Any],
    options: EncodeOptions = DEFAULT_OPTIONS,
) -> list[str]:
    """Turn one key and its sequence into tokens per ``options.array_format``."""
    encode = options.encode_values
    encoded_key = encode_value(key, encode)
    fmt = options.array_format

    if fmt is ArrayFormat.BRACKETS:
        return [f"{encoded_key}[]={encode_value(v, encode)}" for v in values]
    if fmt is ArrayFormat.INDICES:
        return [
            f"{encoded_key}[{i}]={encode_value(v, encode)}"
            for i, v in enumerate(values)
        ]
    if fmt in (ArrayFormat.COMMA, ArrayFormat.SEPARATOR):
        joiner = "," if fmt is ArrayFormat.COMMA else options.array_separator
        joined = joiner.join(encode_value(v, encode) for v in values)
        return [f"{encoded_key}={joined}"]
    return [f"{encoded_key}={encode_value(v, encode)}" for v in values]


def _nested_tokens(
    key: str,
    mapping: Mapping[str, Any],
    options: EncodeOptions,
) -> list[str]:
    tokens: list[str] = []
    for field, inner in mapping.items():
        if should_skip_value(inner, options):
            continue
        composite = f"{key}[{field}]"
        if _is_sequence(inner):
            if inner:
                tokens.extend(format_array_value(composite, inner, options))
        else:
            tokens.append(
                f"{encode_value(composite, options.encode_values)}="
                f"{encode_value(inner, options.encode_values)}"
            )
    return tokens


def object_to_query_params(
    params: Mapping[str, Any],
    options: EncodeOptions = DEFAULT_OPTIONS,
) -> list[str]:
    """Return the ordered ``key=value`` tokens for *params*."""
    tokens: list[str] = []
    for key, value in params.items():
        query_key = normalize_key(key)
        if should_skip_value(value, options):
            continue
        if _is_sequence(value):
            if value:
                tokens.extend(format_array_value(query_key, value, options))
        elif isinstance(value, Mapping):
            tokens.extend(_nested_tokens(query_key, value, options))
        else:
            tokens.append(
                f"{encode_value(query_key, options.encode_values)}="
                f"{encode_value(value, options.encode_values)}"
            )
    return tokens


def build_query_string(
    params: Mapping[str, Any],
    options: EncodeOptions = DEFAULT_OPTIONS,
) -> str:
    """Join the tokens of *params* with ``&``; no tokens gives ``""``."""
    tokens = object_to_query_params(params, options)
    logger.debug(
        "Encoded %d parameter(s) into %d token(s) (array_format=%s)",
        len(params),
        len(tokens),
        options.array_format.value,
    )
    return "&".join(tokens)
