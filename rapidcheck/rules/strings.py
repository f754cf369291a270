"""String rules: emptiness, length bounds and pattern matching."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from rapidcheck.errors import ErrorCode
from rapidcheck.patterns import Patterns, resolve_pattern
from rapidcheck.utils import Message

from .base import Rule


class _StringRule(Rule):
    expected_type = "string"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)


@dataclass(frozen=True, slots=True)
class NonEmpty(_StringRule):
    """String must not be empty (optionally: not whitespace-only)."""
    ignore_whitespace: bool = False
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.STRING_EMPTY

    def is_satisfied(self, value: Any) -> bool:
        return bool(value.strip() if self.ignore_whitespace else value)

    def details(self, value: Any) -> dict[str, Any]:
        return {"value": value, "ignore_whitespace": self.ignore_whitespace}

    def default_message(self, details: dict[str, Any]) -> str:
        if details["ignore_whitespace"]:
            return (
                "The value must be a non-empty string and "
                "contain not only whitespace characters."
            )
        return "The value must be a non-empty string."


@dataclass(frozen=True, slots=True)
class MinLength(_StringRule):
    """String must contain at least ``min_length`` characters."""
    min_length: int
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.STRING_TOO_SHORT

    def is_satisfied(self, value: Any) -> bool:
        return len(value) >= self.min_length

    def details(self, value: Any) -> dict[str, Any]:
        return {"min_length": self.min_length, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return f"The string must contain at least {details['min_length']} characters."


@dataclass(frozen=True, slots=True)
class MaxLength(_StringRule):
    """String must contain at most ``max_length`` characters."""
    max_length: int
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.STRING_TOO_LONG

    def is_satisfied(self, value: Any) -> bool:
        return len(value) <= self.max_length

    def details(self, value: Any) -> dict[str, Any]:
        return {"max_length": self.max_length, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return f"The string must contain at most {details['max_length']} characters."


@dataclass(frozen=True, slots=True)
class Pattern(_StringRule):
    """String must match a regular expression.

    ``pattern`` may be a compiled regex, a ``Patterns`` catalog name or a
    regex source. Matching uses ``search``; catalog patterns are anchored.
    """
    pattern: re.Pattern[str] | str
    message: Message | None = field(default=None, kw_only=True)
    code: ErrorCode = field(default=ErrorCode.STRING_PATTERN, kw_only=True)

    def __post_init__(self):
        object.__setattr__(self, "pattern", resolve_pattern(self.pattern))

    def is_satisfied(self, value: Any) -> bool:
        return self.pattern.search(value) is not None

    def details(self, value: Any) -> dict[str, Any]:
        return {"pattern": self.pattern.pattern, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return "The string doesn't match the pattern."


@dataclass(frozen=True, slots=True)
class NumericString(Pattern):
    """String must spell a decimal number, e.g. ``"-12.5"``."""
    pattern: re.Pattern[str] | str = field(default=Patterns.float, init=False)
    code: ErrorCode = field(default=ErrorCode.INVALID_NUMERIC_STRING, init=False)

    def default_message(self, details: dict[str, Any]) -> str:
        return "The value must be a numeric string."


@dataclass(frozen=True, slots=True)
class IsoDate(Pattern):
    """String must be an ISO 8601 date (``YYYY-MM-DD``)."""
    pattern: re.Pattern[str] | str = field(default=Patterns.date_iso, init=False)
    code: ErrorCode = field(default=ErrorCode.INVALID_DATE, init=False)

    def default_message(self, details: dict[str, Any]) -> str:
        return "The value must be a date in ISO 8601 format."


@dataclass(frozen=True, slots=True)
class IsoTime(Pattern):
    """String must be an ISO 8601 time with an optional zone."""
    pattern: re.Pattern[str] | str = field(default=Patterns.time_iso, init=False)
    code: ErrorCode = field(default=ErrorCode.INVALID_TIME, init=False)

    def default_message(self, details: dict[str, Any]) -> str:
        return "The value must be a time in ISO 8601 format."


@dataclass(frozen=True, slots=True)
class IsoDatetime(Pattern):
    """String must be an ISO 8601 date-time with an optional zone."""
    pattern: re.Pattern[str] | str = field(default=Patterns.datetime_iso, init=False)
    code: ErrorCode = field(default=ErrorCode.INVALID_DATETIME, init=False)

    def default_message(self, details: dict[str, Any]) -> str:
        return "The value must be a date-time in ISO 8601 format."
