"""Type-specific schemas.

All schemas share the ``Schema`` contract: immutable, built with
``create()`` and chained configuration calls, consumed with ``parse()``.

Usage:
    from rapidcheck.schemas import NumberSchema, ShapeSchema, StringSchema

    user = ShapeSchema.create({
        "name": StringSchema.create(trim=True).not_empty(),
        "age": NumberSchema.create(cast=True).int().min(0).optional(),
    })
    user.parse({"name": " Ada ", "age": "36"})   # {"name": "Ada", "age": 36}
"""
from .base import Schema, SchemaOptions

from .boolean import BooleanSchema
from .number import NumberSchema, BigIntSchema
from .string import StringSchema
from .enum import EnumSchema

from .object import ObjectSchema
from .array import ArraySchema
from .shape import ShapeSchema
from .union import UnionSchema
from .instance import InstanceSchema

__all__ = [
    "Schema",
    "SchemaOptions",
    # Scalars
    "BooleanSchema",
    "NumberSchema",
    "BigIntSchema",
    "StringSchema",
    "EnumSchema",
    # Composites
    "ObjectSchema",
    "ArraySchema",
    "ShapeSchema",
    "UnionSchema",
    "InstanceSchema",
]
