"""
Pagination exception hierarchy.

All exceptions inherit from ``PaginationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class PaginationError(Exception):
    """Base exception for all pagination parameter errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(PaginationError):
    """Parameter structure validation failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class RangeViolationError(ValidationError):
    """``page`` or ``limit`` is present but not a positive integer."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"{field.capitalize()} must be a positive integer, got {value!r}",
            path=field,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RANGE_VIOLATION",
            "field": self.field,
            "message": self.message,
        }


class ShapeViolationError(ValidationError):
    """A mapping (or a fixed-size pair) was required and something else was given."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SHAPE_VIOLATION",
            "message": self.message,
            "path": self.path,
        }


class ParseError(PaginationError):
    """Structured-data text could not be parsed into parameters."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid JSON for pagination parameters: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PARSE_ERROR",
            "message": str(self),
            "reason": self.reason,
        }


class UnsupportedOperatorError(PaginationError):
    """
    Unknown filter operator requested.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unsupported filter operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_OPERATOR",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }
