"""Formatting and type helpers shared by rules, schemas and error messages."""
from __future__ import annotations

import json
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Final, Iterable


class _Undefined:
    """Marker for a value that was never provided.

    Distinct from ``None``: optional schemas let ``UNDEFINED`` through,
    nullable schemas let ``None`` through.
    """

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

Message = str | Callable[[Mapping[str, Any]], str]


def is_absent(value: Any) -> bool:
    return value is UNDEFINED or value is None


def determine_type(value: Any) -> str:
    """Name the runtime type of ``value`` the way error details report it."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, (float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def format_value(value: Any) -> str:
    """Render a single value for a human-readable message."""
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, str):
        return f"'{value}'"
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, Mapping)):
        try:
            return json.dumps(value, default=str)
        except (TypeError, ValueError):
            return repr(value)
    return str(value)


def format_values(values: Iterable[Any]) -> str:
    return f"[{', '.join(format_value(v) for v in values)}]"


def format_message(message: Message, details: Mapping[str, Any]) -> str:
    """Resolve a literal message or a message factory against rule details."""
    if callable(message):
        return message(details)
    return message
