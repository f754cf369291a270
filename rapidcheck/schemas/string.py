"""String schema."""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from rapidcheck.errors import ErrorCode
from rapidcheck.patterns import Patterns
from rapidcheck.rules import MaxLength, MinLength, NonEmpty, Pattern
from rapidcheck.utils import Message, is_absent

from .base import Schema, SchemaOptions


@dataclass(frozen=True, slots=True)
class StringOptions(SchemaOptions):
    should_trim: bool = False


def cast_string(value: Any) -> Any:
    """Render primitives as strings, leaving containers and objects unchanged."""
    if is_absent(value):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return value


class StringSchema(Schema[str]):
    """Schema for ``str`` values.

    Example:
        >>> StringSchema.create(trim=True).not_empty().parse("  hi ")
        'hi'
    """

    __slots__ = ()

    required_code = ErrorCode.STRING_REQUIRED
    type_code = ErrorCode.STRING_TYPE
    custom_code = ErrorCode.STRING_CUSTOM
    expected_type = "string"
    type_error_message = "Must be a string."

    Patterns = Patterns

    @classmethod
    def create(
        cls,
        *,
        cast: bool = False,
        trim: bool = False,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> StringSchema:
        """New required string schema.

        Args:
            cast: Render numbers and booleans as strings; a missing value becomes ``""``
            trim: Strip surrounding whitespace before any rule runs
        """
        return cls(StringOptions(
            should_cast=cast,
            should_trim=trim,
            type_error=type_error,
            required_error=required_error,
        ))

    def _cast(self, value: Any) -> Any:
        return cast_string(value)

    def _is_type(self, value: Any) -> bool:
        return isinstance(value, str)

    def _parse_value(self, value: str) -> str:
        return value.strip() if self._options.should_trim else value

    def not_empty(self, ignore_whitespace: bool = False, message: Message | None = None) -> StringSchema:
        return self._with_rule(
            ErrorCode.STRING_NOT_EMPTY,
            NonEmpty(ignore_whitespace, message=message),
        )

    def min_length(self, min_length: int, message: Message | None = None) -> StringSchema:
        return self._with_rule(ErrorCode.STRING_MIN_LENGTH, MinLength(min_length, message=message))

    def max_length(self, max_length: int, message: Message | None = None) -> StringSchema:
        return self._with_rule(ErrorCode.STRING_MAX_LENGTH, MaxLength(max_length, message=message))

    def pattern(self, pattern: re.Pattern[str] | str, message: Message | None = None) -> StringSchema:
        """Value must match ``pattern``.

        ``pattern`` is a compiled regex, a ``Patterns`` catalog name such as
        ``"email"``, or a regex source. Only one pattern is active at a time.
        """
        return self._with_rule(ErrorCode.STRING_PATTERN_MISMATCH, Pattern(pattern, message=message))
