"""
Query string -> parameter mapping.

Best-effort structural inverse of the encoder for the ``repeat``,
``brackets`` and ``indices`` array formats. ``comma`` and ``separator``
output is indistinguishable from a scalar that contains the joiner, so it
comes back as an opaque string.

Keys are classified by shape, most specific first:

==============================  ==========================================
``base[3]``                     indexed array, set by index
``base[field][3]``              nested indexed array, set by index
``base[field][]``               nested array, appended
``base[field]``                 nested scalar; repeats collapse into a list
``base[]``                      flat array, appended
``page`` / ``limit``            ASCII decimal integer
``vacuum``                      ``True`` iff the raw value is ``"true"``
``sort`` / ``searchFields``     repeated-key array, appended
``isnull`` / ``isnotnull``      repeated-key array, appended
anything else                   string scalar, last occurrence wins
==============================  ==========================================

Indexed values are compacted in index order and then written over the
front of whatever was appended under the same key, so ``sort=a&sort[0]=b``
gives ``["b"]`` and ``sort=a&sort=c&sort[0]=b`` gives ``["b", "c"]``.
A list shape arriving for a key that already holds a mapping (or the
reverse) replaces the earlier value.
"""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import parse_qsl

from .exceptions import RangeViolationError
from .operators import FIELD_LIST_OPERATORS, MULTI_VALUE_OPERATORS, RANGE_OPERATORS
from .validation import PAGINATION_FIELDS, validate_pagination_params

logger = logging.getLogger(__name__)

_INDEXED_RE = re.compile(r"^([^\[\]]+)\[(\d+)\]$")
_NESTED_INDEXED_RE = re.compile(r"^([^\[\]]+)\[([^\[\]]+)\]\[(\d+)\]$")
_NESTED_ARRAY_RE = re.compile(r"^([^\[\]]+)\[([^\[\]]+)\]\[\]$")
_NESTED_RE = re.compile(r"^([^\[\]]+)\[([^\[\]]+)\]$")
_ARRAY_RE = re.compile(r"^([^\[\]]+)\[\]$")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Wire spelling -> model key; mirrors the encoder's rename.
_MODEL_KEYS = {"search_fields": "searchFields"}

_REPEATED_KEYS = frozenset({"sort", "searchFields"}) | FIELD_LIST_OPERATORS

# Operator maps whose values are always lists, even with a single element.
_LIST_VALUED = MULTI_VALUE_OPERATORS | RANGE_OPERATORS


def _model_key(key: str) -> str:
    return _MODEL_KEYS.get(key, key)


class _Assembler:
    """Accumulates decoded pairs into one parameter mapping."""

    def __init__(self) -> None:
        self.params: dict[str, Any] = {}
        # id(list) -> (list, {index: value}); indexed values land in finish()
        self._slots: dict[int, tuple[list[Any], dict[int, str]]] = {}

    # -- containers ----------------------------------------------------------

    def _list_at(self, container: dict[str, Any], key: str) -> list[Any]:
        current = container.get(key)
        if not isinstance(current, list):
            if current is not None and not isinstance(current, str):
                logger.debug("Replacing %r under %r with a list", current, key)
            current = [current] if isinstance(current, str) else []
            container[key] = current
        return current

    def _mapping_at(self, key: str) -> dict[str, Any]:
        current = self.params.get(key)
        if not isinstance(current, dict):
            if current is not None:
                logger.debug("Replacing %r under %r with a mapping", current, key)
            current = {}
            self.params[key] = current
        return current

    def _set_index(self, target: list[Any], index: int, value: str) -> None:
        self._slots.setdefault(id(target), (target, {}))[1][index] = value

    # -- key shapes ----------------------------------------------------------

    def indexed(self, base: str, index: int, value: str) -> None:
        self._set_index(self._list_at(self.params, base), index, value)

    def nested_indexed(self, base: str, field: str, index: int, value: str) -> None:
        self._set_index(self._list_at(self._mapping_at(base), field), index, value)

    def nested_array(self, base: str, field: str, value: str) -> None:
        self._list_at(self._mapping_at(base), field).append(value)

    def nested(self, base: str, field: str, value: str) -> None:
        bucket = self._mapping_at(base)
        if base in _LIST_VALUED or field in bucket:
            self._list_at(bucket, field).append(value)
        else:
            bucket[field] = value

    def array(self, base: str, value: str) -> None:
        self._list_at(self.params, base).append(value)

    def scalar(self, key: str, value: str) -> None:
        if key in PAGINATION_FIELDS:
            if not _INTEGER_RE.fullmatch(value):
                raise RangeViolationError(key, value)
            self.params[key] = int(value)
        elif key == "vacuum":
            self.params[key] = value == "true"
        elif key in _REPEATED_KEYS:
            self._list_at(self.params, key).append(value)
        else:
            self.params[key] = value

    # -- result --------------------------------------------------------------

    def finish(self) -> dict[str, Any]:
        for target, slots in self._slots.values():
            indexed = [slots[i] for i in sorted(slots)]
            target[: len(indexed)] = indexed
        return self.params


def _feed(assembler: _Assembler, key: str, value: str) -> None:
    if "[" not in key and "]" not in key:
        assembler.scalar(_model_key(key), value)
        return

    if match := _INDEXED_RE.match(key):
        base, index = match.groups()
        assembler.indexed(_model_key(base), int(index), value)
    elif match := _NESTED_INDEXED_RE.match(key):
        base, field, index = match.groups()
        assembler.nested_indexed(_model_key(base), field, int(index), value)
    elif match := _NESTED_ARRAY_RE.match(key):
        base, field = match.groups()
        assembler.nested_array(_model_key(base), field, value)
    elif match := _NESTED_RE.match(key):
        base, field = match.groups()
        assembler.nested(_model_key(base), field, value)
    elif match := _ARRAY_RE.match(key):
        assembler.array(_model_key(match.group(1)), value)
    else:
        logger.debug("Forwarding unrecognised bracketed key %r as a scalar", key)
        assembler.params[key] = value


def decode_query_string(raw: str) -> dict[str, Any]:
    """
    Parse *raw* (with or without a leading ``?``) into a parameter mapping.

    Raises:
        RangeViolationError: ``page`` / ``limit`` is non-numeric or < 1.
    """
    if raw.startswith("?"):
        raw = raw[1:]
    assembler = _Assembler()
    pairs = parse_qsl(raw, keep_blank_values=True)
    for key, value in pairs:
        _feed(assembler, key, value)
    params = assembler.finish()
    logger.debug("Decoded %d pair(s) into %d parameter(s)", len(pairs), len(params))
    validate_pagination_params(params)
    return params
