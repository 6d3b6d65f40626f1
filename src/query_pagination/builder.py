"""
Fluent builder for pagination, sort, search and filter parameters.

Example::

    url = (
        PaginateBuilder()
        .page(2)
        .limit(25)
        .search("john", "name", "email")
        .sort_desc("created_at")
        .where_in("dept_id", 1, 2, 3)
        .between("age", 18, 65)
        .build_url("https://api.example.com/users")
    )
    # -> https://api.example.com/users?page=2&limit=25&search=john
    #    &search_fields=name&search_fields=email&sort=-created_at
    #    &in%5Bdept_id%5D=1&in%5Bdept_id%5D=2&in%5Bdept_id%5D=3
    #    &between%5Bage%5D=18&between%5Bage%5D=65
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .encoder import build_query_string
from .exceptions import ShapeViolationError, UnsupportedOperatorError
from .operators import FIELD_LIST_OPERATORS, MULTI_VALUE_OPERATORS, FilterOperator
from .options import resolve_options
from .params import QueryStringResult
from .query_string import append_query_string
from .utils import merge_params
from .validation import validate_pagination_params

if TYPE_CHECKING:
    from .options import EncodeOptions
    from .params import FilterConfig, PaginateParams


class PaginateBuilder:
    """
    Fluent builder that stages values into one owned parameter mapping.

    Every mutator returns ``self``. Single-value operators overwrite the
    field's value; multi-value operators and the flat lists append.
    """

    def __init__(
        self,
        options: EncodeOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._options = resolve_options(options)
        self._params: dict[str, Any] = {}
        self._base_url = ""

    def set_base_url(self, url: str) -> PaginateBuilder:
        self._base_url = url
        return self

    # -- pagination & search -------------------------------------------------

    def page(self, page: int) -> PaginateBuilder:
        self._params["page"] = page
        return self

    def limit(self, limit: int) -> PaginateBuilder:
        self._params["limit"] = limit
        return self

    def search(self, term: str, *fields: str) -> PaginateBuilder:
        """Set the search term; *fields*, if given, replace the search fields."""
        self._params["search"] = term
        if fields:
            self._params["searchFields"] = list(fields)
        return self

    def search_fields(self, *fields: str) -> PaginateBuilder:
        return self._extend("searchFields", fields)

    def sort(self, *sorts: str) -> PaginateBuilder:
        """Append sort tokens; order is sort priority."""
        return self._extend("sort", sorts)

    def sort_asc(self, field: str) -> PaginateBuilder:
        return self.sort(field)

    def sort_desc(self, field: str) -> PaginateBuilder:
        return self.sort(f"-{field}")

    def vacuum(self, enabled: bool = True) -> PaginateBuilder:
        self._params["vacuum"] = enabled
        return self

    # -- single-value operators ----------------------------------------------

    def like(self, field: str, value: str) -> PaginateBuilder:
        return self._assign(FilterOperator.LIKE, field, value)

    def equals(self, field: str, value: Any) -> PaginateBuilder:
        return self._assign(FilterOperator.EQ, field, value)

    def greater_than_or_equal(self, field: str, value: Any) -> PaginateBuilder:
        return self._assign(FilterOperator.GTE, field, value)

    def greater_than(self, field: str, value: Any) -> PaginateBuilder:
        return self._assign(FilterOperator.GT, field, value)

    def less_than_or_equal(self, field: str, value: Any) -> PaginateBuilder:
        return self._assign(FilterOperator.LTE, field, value)

    def less_than(self, field: str, value: Any) -> PaginateBuilder:
        return self._assign(FilterOperator.LT, field, value)

    # -- multi-value operators -----------------------------------------------

    def like_or(self, field: str, *values: str) -> PaginateBuilder:
        return self._append(FilterOperator.LIKE_OR, field, values)

    def like_and(self, field: str, *values: str) -> PaginateBuilder:
        return self._append(FilterOperator.LIKE_AND, field, values)

    def equals_or(self, field: str, *values: Any) -> PaginateBuilder:
        return self._append(FilterOperator.EQ_OR, field, values)

    def equals_and(self, field: str, *values: Any) -> PaginateBuilder:
        return self._append(FilterOperator.EQ_AND, field, values)

    def where_in(self, field: str, *values: Any) -> PaginateBuilder:
        return self._append(FilterOperator.IN, field, values)

    def where_not_in(self, field: str, *values: Any) -> PaginateBuilder:
        return self._append(FilterOperator.NOT_IN, field, values)

    def between(self, field: str, minimum: Any, maximum: Any) -> PaginateBuilder:
        """Set an inclusive ``[minimum, maximum]`` range, replacing any previous one."""
        return self._assign(FilterOperator.BETWEEN, field, [minimum, maximum])

    # -- null checks ---------------------------------------------------------

    def is_null(self, *fields: str) -> PaginateBuilder:
        return self._extend(FilterOperator.IS_NULL.value, fields)

    def is_not_null(self, *fields: str) -> PaginateBuilder:
        return self._extend(FilterOperator.IS_NOT_NULL.value, fields)

    # -- generic -------------------------------------------------------------

    def filter(
        self,
        field: str,
        operator: FilterOperator | str,
        value: Any = None,
    ) -> PaginateBuilder:
        """
        Add one filter by operator name.

        Multi-value operators accept a single value or a list of values;
        ``between`` requires a ``[minimum, maximum]`` pair; the null checks
        ignore *value*.

        Raises:
            UnsupportedOperatorError: *operator* is not a known filter operator.
            ShapeViolationError: ``between`` was given something other than a pair.
        """
        try:
            op = FilterOperator(operator)
        except ValueError:
            raise UnsupportedOperatorError(
                str(operator), [o.value for o in FilterOperator]
            ) from None

        if op is FilterOperator.BETWEEN:
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise ShapeViolationError(
                    f"between expects a [min, max] pair, got {value!r}",
                    path=f"between[{field}]",
                )
            return self.between(field, value[0], value[1])
        if op.value in FIELD_LIST_OPERATORS:
            return self._extend(op.value, (field,))
        if op.value in MULTI_VALUE_OPERATORS:
            values = value if isinstance(value, (list, tuple)) else [value]
            return self._append(op, field, values)
        return self._assign(op, field, value)

    def apply_filters(self, *filters: FilterConfig) -> PaginateBuilder:
        """Add several ``FilterConfig`` entries in order."""
        for config in filters:
            self.filter(config.field, config.operator, config.value)
        return self

    def merge(self, params: PaginateParams | Mapping[str, Any]) -> PaginateBuilder:
        """Merge *params* into the staged parameters (see ``merge_params``)."""
        self._params = merge_params(self._params, params)
        return self

    def reset(self) -> PaginateBuilder:
        """Clear all staged parameters and return ``self`` for reuse."""
        self._params = {}
        return self

    # -- build ---------------------------------------------------------------

    def get_params(self) -> PaginateParams:
        """Return a deep copy of the staged parameters."""
        return copy.deepcopy(self._params)  # type: ignore[return-value]

    def build_query_string(self) -> str:
        validate_pagination_params(self._params)
        return build_query_string(self._params, self._options)

    def build_url(self, base_url: str | None = None) -> str:
        """Return *base_url* (or the configured base URL) with the query string."""
        url = base_url or self._base_url
        return append_query_string(url, self.build_query_string())

    def build(self, base_url: str | None = None) -> QueryStringResult:
        query_string = self.build_query_string()
        return QueryStringResult(
            query_string=query_string,
            params=copy.deepcopy(self._params),
            url=append_query_string(base_url or self._base_url, query_string),
        )

    def clone(self) -> PaginateBuilder:
        """Return an independent builder with a deep copy of the parameters."""
        other = PaginateBuilder(self._options)
        other._params = copy.deepcopy(self._params)
        other._base_url = self._base_url
        return other

    # -- internals -----------------------------------------------------------

    def _bucket(self, operator: FilterOperator) -> dict[str, Any]:
        bucket = self._params.get(operator.value)
        if not isinstance(bucket, dict):
            bucket = {}
            self._params[operator.value] = bucket
        return bucket

    def _assign(
        self, operator: FilterOperator, field: str, value: Any
    ) -> PaginateBuilder:
        self._bucket(operator)[field] = value
        return self

    def _append(
        self,
        operator: FilterOperator,
        field: str,
        values: tuple[Any, ...] | list[Any],
    ) -> PaginateBuilder:
        bucket = self._bucket(operator)
        bucket[field] = [*_as_list(bucket.get(field)), *values]
        return self

    def _extend(self, key: str, values: tuple[str, ...]) -> PaginateBuilder:
        self._params[key] = [*_as_list(self._params.get(key)), *values]
        return self


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    return list(value) if isinstance(value, (list, tuple)) else [value]


def create_paginate(
    options: EncodeOptions | Mapping[str, Any] | None = None,
) -> PaginateBuilder:
    """Create a new builder."""
    return PaginateBuilder(options)


def create_paginate_with_url(
    base_url: str,
    options: EncodeOptions | Mapping[str, Any] | None = None,
) -> PaginateBuilder:
    """Create a new builder with *base_url* preset."""
    return PaginateBuilder(options).set_base_url(base_url)
