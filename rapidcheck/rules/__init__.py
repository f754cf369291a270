"""Schema-agnostic rule primitives.

Usage:
    from rapidcheck.rules import MinLength, Range

    MinLength(3)("ab")            # raises ValidationError(code="string_too_short")
    NumberSchema.create().custom(Range(1, 10))
"""
from .base import Rule

from .numeric import (
    Min,
    Max,
    Range,
    Integer,
)

from .strings import (
    NonEmpty,
    MinLength,
    MaxLength,
    Pattern,
    NumericString,
    IsoDate,
    IsoTime,
    IsoDatetime,
)

from .collections import (
    MinItems,
    MaxItems,
)

__all__ = [
    "Rule",
    # Numeric
    "Min",
    "Max",
    "Range",
    "Integer",
    # String
    "NonEmpty",
    "MinLength",
    "MaxLength",
    "Pattern",
    "NumericString",
    "IsoDate",
    "IsoTime",
    "IsoDatetime",
    # Collection
    "MinItems",
    "MaxItems",
]
