"""Encoder configuration: array formats and skip rules."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError


class ArrayFormat(str, Enum):
    """How a sequence under one key becomes query-string tokens."""

    REPEAT = "repeat"  # k=a&k=b
    BRACKETS = "brackets"  # k[]=a&k[]=b
    INDICES = "indices"  # k[0]=a&k[1]=b
    COMMA = "comma"  # k=a,b
    SEPARATOR = "separator"  # k=a<sep>b


class EncodeOptions(BaseModel):
    """
    Immutable encoder settings.

    Attributes:
        encode_values: Percent-encode every key and value.
        array_format: Sequence encoding strategy.
        array_separator: Joiner used only by ``ArrayFormat.SEPARATOR``.
        skip_nulls: Omit entries whose value is ``None``.
        skip_empty_string: Omit entries whose value is ``""``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encode_values: bool = True
    array_format: ArrayFormat = ArrayFormat.REPEAT
    array_separator: str = ","
    skip_nulls: bool = True
    skip_empty_string: bool = True

    def merged(self, overrides: Mapping[str, Any] | None) -> EncodeOptions:
        """Return a copy with *overrides* applied on top of ``self``."""
        if not overrides:
            return self
        try:
            return EncodeOptions.model_validate({**self.model_dump(), **overrides})
        except PydanticValidationError as exc:
            raise _option_error(exc) from exc


DEFAULT_OPTIONS = EncodeOptions()


def resolve_options(
    options: EncodeOptions | Mapping[str, Any] | None = None,
) -> EncodeOptions:
    """Accept ``None``, an overrides mapping or ``EncodeOptions``."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, EncodeOptions):
        return options
    return DEFAULT_OPTIONS.merged(options)


def _option_error(exc: PydanticValidationError) -> ValidationError:
    error = exc.errors()[0]
    loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
    return ValidationError(
        f"Invalid encode option {loc!r}: {error.get('msg', 'validation error')}",
        path=loc,
    )
