"""Pagination scalar validation: ``page`` and ``limit`` are positive integers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import RangeViolationError

# Checked in this order; the first failure wins.
PAGINATION_FIELDS = ("page", "limit")


class _PageWindow(BaseModel):
    """Strict view over the pagination scalars; everything else is ignored."""

    model_config = ConfigDict(strict=True, extra="ignore")

    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)


def coerce_integral_floats(params: Mapping[str, Any]) -> dict[str, Any]:
    """
    Copy *params* with integral float ``page`` / ``limit`` values as ``int``.

    JSON has a single number type, so ``{"page": 2.0}`` is a valid page
    there. ``2.5`` and non-float values pass through unchanged.
    """
    coerced = dict(params)
    for name in PAGINATION_FIELDS:
        value = coerced.get(name)
        if isinstance(value, float) and value.is_integer():
            coerced[name] = int(value)
    return coerced


def validate_pagination_params(params: Mapping[str, Any]) -> None:
    """
    Fail fast when ``page`` or ``limit`` is present and not an integer >= 1.

    Strict: ``"2"``, ``2.0`` and ``True`` are rejected rather than coerced.
    ``None`` counts as absent. All other keys are left unchecked.

    Raises:
        RangeViolationError: Naming the first offending field.
    """
    window = {name: params[name] for name in PAGINATION_FIELDS if name in params}
    if not window:
        return
    try:
        _PageWindow.model_validate(window)
    except PydanticValidationError as exc:
        failed = {str(error["loc"][0]) for error in exc.errors() if error.get("loc")}
        for name in PAGINATION_FIELDS:
            if name in failed:
                raise RangeViolationError(name, window[name]) from exc
        raise
