"""Public entry points between parameters and query strings, URLs, JSON, objects."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .decoder import decode_query_string
from .encoder import build_query_string
from .exceptions import ParseError, ShapeViolationError
from .options import resolve_options
from .validation import coerce_integral_floats, validate_pagination_params

if TYPE_CHECKING:
    from .options import EncodeOptions
    from .params import PaginateParams


def to_query_string(
    params: PaginateParams | Mapping[str, Any],
    options: EncodeOptions | Mapping[str, Any] | None = None,
) -> str:
    """Validate *params* and encode them; ``""`` when nothing survives skipping."""
    resolved = resolve_options(options)
    validate_pagination_params(params)
    return build_query_string(params, resolved)


def append_query_string(base_url: str, query_string: str) -> str:
    """Attach *query_string* to *base_url* with ``?`` or ``&`` as appropriate."""
    if not query_string:
        return base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query_string}"


def to_url(
    base_url: str,
    params: PaginateParams | Mapping[str, Any],
    options: EncodeOptions | Mapping[str, Any] | None = None,
) -> str:
    """Return *base_url* with the encoded parameters appended."""
    return append_query_string(base_url, to_query_string(params, options))


def from_query_string(query_string: str) -> PaginateParams:
    """Decode a raw query string into validated parameters."""
    return decode_query_string(query_string)  # type: ignore[return-value]


def from_object(obj: Any) -> PaginateParams:
    """
    Accept an already-structured value as parameters.

    Integral float ``page`` / ``limit`` values (``2.0``) are returned as ``int``.

    Raises:
        ShapeViolationError: *obj* is ``None`` or not a mapping.
        RangeViolationError: ``page`` / ``limit`` is not a positive integer.
    """
    if not isinstance(obj, Mapping):
        raise ShapeViolationError(
            f"Invalid object for pagination parameters: expected a mapping, "
            f"got {type(obj).__name__}"
        )
    params = coerce_integral_floats(obj)
    validate_pagination_params(params)
    return params  # type: ignore[return-value]


def from_json(text: str | bytes) -> PaginateParams:
    """
    Parse a JSON document into validated parameters.

    Raises:
        ParseError: *text* is not valid JSON.
        ShapeViolationError: The document is not a JSON object.
        RangeViolationError: ``page`` / ``limit`` is not a positive integer.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ParseError(str(e)) from e
    return from_object(data)
