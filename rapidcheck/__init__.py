"""rapidcheck: runtime validation and normalization of untyped values.

Schemas are immutable descriptors built with ``create()`` and chained
configuration calls. ``parse`` returns the normalized value or raises
``ParseError``; ``safe_parse`` returns ``Ok``/``Err`` instead.

Usage:
    from rapidcheck import NumberSchema, ObjectSchema, ParseError, StringSchema

    prices = ObjectSchema.create(NumberSchema.create(cast=True).positive(), StringSchema.create())
    prices.parse({"apple": "1.5"})            # {"apple": 1.5}

    try:
        prices.parse({"apple": "free"})
    except ParseError as error:
        error.code                             # "OBJECT_VALUE_INVALID"
        error.root_cause.code                  # "NUMBER_TYPE"
"""
from .utils import UNDEFINED, is_absent

from .errors import (
    ErrorCode,
    ValidationError,
    ParseError,
    Result,
    Ok,
    Err,
    ValidationMode,
)

from .patterns import Patterns

from .schemas import (
    Schema,
    BooleanSchema,
    NumberSchema,
    BigIntSchema,
    StringSchema,
    EnumSchema,
    ObjectSchema,
    ArraySchema,
    ShapeSchema,
    UnionSchema,
    InstanceSchema,
)

from .boundaries import BoundaryValidator, parse_batch, validate_returns

__version__ = "0.4.0"

__all__ = [
    "UNDEFINED",
    "is_absent",
    # Errors
    "ErrorCode",
    "ValidationError",
    "ParseError",
    "Result",
    "Ok",
    "Err",
    "ValidationMode",
    # Schemas
    "Schema",
    "BooleanSchema",
    "NumberSchema",
    "BigIntSchema",
    "StringSchema",
    "EnumSchema",
    "ObjectSchema",
    "ArraySchema",
    "ShapeSchema",
    "UnionSchema",
    "InstanceSchema",
    "Patterns",
    # Boundaries
    "BoundaryValidator",
    "parse_batch",
    "validate_returns",
]
