"""Pagination, sort, search and filter parameters <-> URL query strings."""

from __future__ import annotations

from .builder import PaginateBuilder, create_paginate, create_paginate_with_url
from .decoder import decode_query_string
from .encoder import build_query_string, object_to_query_params
from .exceptions import (
    PaginationError,
    ParseError,
    RangeViolationError,
    ShapeViolationError,
    UnsupportedOperatorError,
    ValidationError,
)
from .operators import FilterOperator, SortDirection
from .options import DEFAULT_OPTIONS, ArrayFormat, EncodeOptions
from .params import FilterConfig, PaginateParams, QueryStringResult, SortConfig
from .query_string import (
    from_json,
    from_object,
    from_query_string,
    to_query_string,
    to_url,
)
from .utils import merge_params, parse_sort_string
from .validation import validate_pagination_params

__all__ = [
    # Entry points
    "to_query_string",
    "to_url",
    "from_query_string",
    "from_json",
    "from_object",
    # Builder
    "PaginateBuilder",
    "create_paginate",
    "create_paginate_with_url",
    # Model & options
    "PaginateParams",
    "SortConfig",
    "FilterConfig",
    "QueryStringResult",
    "FilterOperator",
    "SortDirection",
    "ArrayFormat",
    "EncodeOptions",
    "DEFAULT_OPTIONS",
    # Codec
    "build_query_string",
    "object_to_query_params",
    "decode_query_string",
    "validate_pagination_params",
    # Exceptions
    "PaginationError",
    "ValidationError",
    "RangeViolationError",
    "ShapeViolationError",
    "ParseError",
    "UnsupportedOperatorError",
    # Utilities
    "merge_params",
    "parse_sort_string",
]
