"""Error Code Catalog

Every failure raised by rapidcheck carries one of these codes. The catalog is
closed and stable: callers branch on ``error.code``, never on message text.

Two families live here:
- Rule codes (lowercase): raised by the standalone rules in ``rapidcheck.rules``
- Schema codes (UPPERCASE, prefixed by schema kind): raised by ``Schema.parse``

``ErrorCode`` is a ``str`` enum, so ``error.code == "NUMBER_MIN"`` and
``error.code == ErrorCode.NUMBER_MIN`` are both true.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Closed catalog of validation failure codes."""

    # Reserved: never raised here, kept so codes shared with other
    # clients of the same catalog stay recognizable
    REQUIRED = "required"
    INVALID_ENUM = "invalid_enum"
    INVALID_ARRAY_ITEMS = "invalid_array_items"
    INVALID_OBJECT = "invalid_object"
    INVALID_OBJECT_SHAPE = "invalid_object_shape"
    INVALID_UNION = "invalid_union"

    # Generic / rule codes
    INVALID_TYPE = "invalid_type"
    INVALID_NUMERIC_STRING = "invalid_numeric_string"
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    INVALID_DATETIME = "invalid_datetime"
    NUMBER_TOO_SMALL = "number_too_small"
    NUMBER_TOO_BIG = "number_too_big"
    NUMBER_OUT_OF_RANGE = "number_out_of_range"
    NUMBER_NOT_INTEGER = "number_not_integer"
    STRING_EMPTY = "string_empty"
    STRING_TOO_SHORT = "string_too_short"
    STRING_TOO_LONG = "string_too_long"
    STRING_PATTERN = "string_pattern"
    TOO_FEW_ITEMS = "too_few_items"
    TOO_MANY_ITEMS = "too_many_items"
    CUSTOM_ERROR = "custom_error"

    # Boolean schema
    BOOLEAN_TYPE = "BOOLEAN_TYPE"
    BOOLEAN_REQUIRED = "BOOLEAN_REQUIRED"
    BOOLEAN_TRUTHY = "BOOLEAN_TRUTHY"
    BOOLEAN_FALSY = "BOOLEAN_FALSY"
    BOOLEAN_CUSTOM = "BOOLEAN_CUSTOM"

    # Number schema
    NUMBER_TYPE = "NUMBER_TYPE"
    NUMBER_REQUIRED = "NUMBER_REQUIRED"
    NUMBER_INT = "NUMBER_INT"
    NUMBER_POSITIVE = "NUMBER_POSITIVE"
    NUMBER_MIN = "NUMBER_MIN"
    NUMBER_MAX = "NUMBER_MAX"
    NUMBER_GREATER_THAN = "NUMBER_GREATER_THAN"
    NUMBER_LESS_THAN = "NUMBER_LESS_THAN"
    NUMBER_CUSTOM = "NUMBER_CUSTOM"

    # BigInt schema
    BIGINT_TYPE = "BIGINT_TYPE"
    BIGINT_REQUIRED = "BIGINT_REQUIRED"
    BIGINT_POSITIVE = "BIGINT_POSITIVE"
    BIGINT_MIN = "BIGINT_MIN"
    BIGINT_MAX = "BIGINT_MAX"
    BIGINT_GREATER_THAN = "BIGINT_GREATER_THAN"
    BIGINT_LESS_THAN = "BIGINT_LESS_THAN"
    BIGINT_CUSTOM = "BIGINT_CUSTOM"

    # String schema
    STRING_TYPE = "STRING_TYPE"
    STRING_REQUIRED = "STRING_REQUIRED"
    STRING_NOT_EMPTY = "STRING_NOT_EMPTY"
    STRING_MIN_LENGTH = "STRING_MIN_LENGTH"
    STRING_MAX_LENGTH = "STRING_MAX_LENGTH"
    STRING_PATTERN_MISMATCH = "STRING_PATTERN_MISMATCH"
    STRING_CUSTOM = "STRING_CUSTOM"

    # Enum schema
    ENUM_TYPE = "ENUM_TYPE"
    ENUM_REQUIRED = "ENUM_REQUIRED"
    ENUM_CUSTOM = "ENUM_CUSTOM"

    # Object schema
    OBJECT_TYPE = "OBJECT_TYPE"
    OBJECT_REQUIRED = "OBJECT_REQUIRED"
    OBJECT_KEY_INVALID = "OBJECT_KEY_INVALID"
    OBJECT_VALUE_INVALID = "OBJECT_VALUE_INVALID"
    OBJECT_INVALID = "OBJECT_INVALID"
    OBJECT_CUSTOM = "OBJECT_CUSTOM"

    # Shape schema
    SHAPE_TYPE = "SHAPE_TYPE"
    SHAPE_REQUIRED = "SHAPE_REQUIRED"
    SHAPE_VALUE_INVALID = "SHAPE_VALUE_INVALID"
    SHAPE_UNKNOWN_KEY = "SHAPE_UNKNOWN_KEY"
    SHAPE_INVALID = "SHAPE_INVALID"
    SHAPE_CUSTOM = "SHAPE_CUSTOM"

    # Array schema
    ARRAY_TYPE = "ARRAY_TYPE"
    ARRAY_REQUIRED = "ARRAY_REQUIRED"
    ARRAY_ITEM_INVALID = "ARRAY_ITEM_INVALID"
    ARRAY_MIN_ITEMS = "ARRAY_MIN_ITEMS"
    ARRAY_MAX_ITEMS = "ARRAY_MAX_ITEMS"
    ARRAY_INVALID = "ARRAY_INVALID"
    ARRAY_CUSTOM = "ARRAY_CUSTOM"

    # Union schema
    UNION_TYPE = "UNION_TYPE"
    UNION_REQUIRED = "UNION_REQUIRED"
    UNION_CUSTOM = "UNION_CUSTOM"

    # Instance schema
    INSTANCE_TYPE = "INSTANCE_TYPE"
    INSTANCE_REQUIRED = "INSTANCE_REQUIRED"
    INSTANCE_CUSTOM = "INSTANCE_CUSTOM"

    def __str__(self) -> str:
        return self.value

    @property
    def family(self) -> str:
        """Schema kind for schema codes (``"number"``), ``"rule"`` otherwise."""
        if self.value.isupper():
            return self.value.split("_", 1)[0].lower()
        return "rule"
