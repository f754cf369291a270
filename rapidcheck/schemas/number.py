"""Number and BigInt schemas.

Both share the ordering rules (``positive``, ``min``, ``max``,
``greater_than``, ``less_than``); they differ in casting and type guard.
A number is a finite ``int`` or ``float``; a bigint is an ``int``. Neither
accepts ``bool``.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, TypeVar

from rapidcheck.errors import ErrorCode
from rapidcheck.utils import Message, is_absent

from .base import Schema, SchemaOptions

N = TypeVar("N", int, float)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def epoch_millis(value: date) -> int:
    """Milliseconds since the Unix epoch. Naive datetimes and dates are UTC."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // _MILLISECOND


def _number_from_string(value: str) -> Any:
    text = value.strip()
    if not text:
        return 0
    # int() and float() accept "_" separators and non-ASCII digits
    if "_" in text or not text.isascii():
        return value
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


def cast_number(value: Any) -> Any:
    """Coerce loose input to an int or float, leaving unrecognized input unchanged."""
    if is_absent(value):
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, str):
        return _number_from_string(value)
    if isinstance(value, date):
        return epoch_millis(value)
    return value


def cast_bigint(value: Any) -> Any:
    """Coerce loose input to an int, leaving non-integral input unchanged."""
    if is_absent(value):
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if "_" in text or not text.isascii():
            return value
        try:
            return int(text)
        except ValueError:
            return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    if isinstance(value, Decimal):
        try:
            return int(value) if value == value.to_integral_value() else value
        except (InvalidOperation, OverflowError, ValueError):
            return value
    return value


class _OrderedSchema(Schema[N]):
    """Ordering rules shared by number-like schemas."""

    __slots__ = ()

    positive_code: ClassVar[ErrorCode]
    min_code: ClassVar[ErrorCode]
    max_code: ClassVar[ErrorCode]
    greater_than_code: ClassVar[ErrorCode]
    less_than_code: ClassVar[ErrorCode]

    def positive(self, message: Message | None = None):
        """Reject negative values. Zero passes."""
        return self._with_check(
            self.positive_code,
            lambda value: value >= 0,
            details={},
            message=message,
            default_message="Must be a positive number.",
        )

    def min(self, min: N, message: Message | None = None):
        """Value must be greater than or equal to ``min``."""
        return self._with_check(
            self.min_code,
            lambda value: value >= min,
            details={"min": min},
            message=message,
            default_message=lambda d: f"The number must be greater than or equal to {d['min']}.",
        )

    def max(self, max: N, message: Message | None = None):
        """Value must be less than or equal to ``max``."""
        return self._with_check(
            self.max_code,
            lambda value: value <= max,
            details={"max": max},
            message=message,
            default_message=lambda d: f"The number must be less than or equal to {d['max']}.",
        )

    def greater_than(self, min: N, message: Message | None = None):
        """Value must be strictly greater than ``min``."""
        return self._with_check(
            self.greater_than_code,
            lambda value: value > min,
            details={"min": min},
            message=message,
            default_message=lambda d: f"The value must be greater than {d['min']}.",
        )

    def less_than(self, max: N, message: Message | None = None):
        """Value must be strictly less than ``max``."""
        return self._with_check(
            self.less_than_code,
            lambda value: value < max,
            details={"max": max},
            message=message,
            default_message=lambda d: f"The value must be less than {d['max']}.",
        )


class NumberSchema(_OrderedSchema[float]):
    __slots__ = ()

    required_code = ErrorCode.NUMBER_REQUIRED
    type_code = ErrorCode.NUMBER_TYPE
    custom_code = ErrorCode.NUMBER_CUSTOM
    positive_code = ErrorCode.NUMBER_POSITIVE
    min_code = ErrorCode.NUMBER_MIN
    max_code = ErrorCode.NUMBER_MAX
    greater_than_code = ErrorCode.NUMBER_GREATER_THAN
    less_than_code = ErrorCode.NUMBER_LESS_THAN
    expected_type = "number"
    type_error_message = "Must be a number."

    @classmethod
    def create(
        cls,
        *,
        cast: bool = False,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> NumberSchema:
        """New required number schema.

        With ``cast`` the schema coerces numeric strings, booleans, decimals
        and dates (to epoch milliseconds); a missing value becomes ``0``.
        """
        return cls(SchemaOptions(should_cast=cast, type_error=type_error, required_error=required_error))

    def _cast(self, value: Any) -> Any:
        return cast_number(value)

    def _is_type(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return isinstance(value, int) or math.isfinite(value)

    def int(self, message: Message | None = None) -> NumberSchema:
        """Value must have no fractional part."""
        return self._with_check(
            ErrorCode.NUMBER_INT,
            lambda value: isinstance(value, int) or value.is_integer(),
            details={},
            message=message,
            default_message="Must be an integer.",
        )


class BigIntSchema(_OrderedSchema[int]):
    __slots__ = ()

    required_code = ErrorCode.BIGINT_REQUIRED
    type_code = ErrorCode.BIGINT_TYPE
    custom_code = ErrorCode.BIGINT_CUSTOM
    positive_code = ErrorCode.BIGINT_POSITIVE
    min_code = ErrorCode.BIGINT_MIN
    max_code = ErrorCode.BIGINT_MAX
    greater_than_code = ErrorCode.BIGINT_GREATER_THAN
    less_than_code = ErrorCode.BIGINT_LESS_THAN
    expected_type = "integer"
    type_error_message = "Must be an integer."

    @classmethod
    def create(
        cls,
        *,
        cast: bool = False,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> BigIntSchema:
        return cls(SchemaOptions(should_cast=cast, type_error=type_error, required_error=required_error))

    def _cast(self, value: Any) -> Any:
        return cast_bigint(value)

    def _is_type(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)
