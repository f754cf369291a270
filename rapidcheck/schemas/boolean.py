"""Boolean schema."""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from rapidcheck.errors import ErrorCode
from rapidcheck.utils import is_absent

from .base import Schema, SchemaOptions

TRUTHY_TOKENS = frozenset({"true", "yes", "1"})
FALSY_TOKENS = frozenset({"false", "no", "0"})


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def cast_boolean(value: Any) -> Any:
    """Coerce loose input to a bool, leaving unrecognized input unchanged."""
    if is_absent(value):
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.lower()
        if token in TRUTHY_TOKENS:
            return True
        if token in FALSY_TOKENS:
            return False
        return value
    if isinstance(value, (int, float, Decimal)) and not _is_nan(value):
        return value != 0
    return value


class BooleanSchema(Schema[bool]):
    __slots__ = ()

    required_code = ErrorCode.BOOLEAN_REQUIRED
    type_code = ErrorCode.BOOLEAN_TYPE
    custom_code = ErrorCode.BOOLEAN_CUSTOM
    expected_type = "boolean"
    type_error_message = "Must be a boolean."

    @classmethod
    def create(
        cls,
        *,
        cast: bool = False,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> BooleanSchema:
        """New required boolean schema.

        With ``cast`` the schema accepts "true"/"yes"/"1" and "false"/"no"/"0"
        in any case, numbers, and treats a missing value as ``False``.
        """
        return cls(SchemaOptions(should_cast=cast, type_error=type_error, required_error=required_error))

    def _cast(self, value: Any) -> Any:
        return cast_boolean(value)

    def _is_type(self, value: Any) -> bool:
        return isinstance(value, bool)

    def truthy(self, message: str | None = None) -> BooleanSchema:
        return self._with_check(
            ErrorCode.BOOLEAN_TRUTHY,
            lambda value: value is True,
            details={},
            message=message,
            default_message="Must be `true`.",
        )

    def falsy(self, message: str | None = None) -> BooleanSchema:
        return self._with_check(
            ErrorCode.BOOLEAN_FALSY,
            lambda value: value is False,
            details={},
            message=message,
            default_message="Must be `false`.",
        )
