"""Pydantic Integration

Any schema can constrain a pydantic v2 field, either directly as
``Annotated`` metadata or wrapped with ``as_validator``. The schema replaces
pydantic's own validation for that field; failures surface as
``PydanticCustomError`` whose error type is the rapidcheck code.

Usage:
    from typing import Annotated
    from pydantic import BaseModel

    class Order(BaseModel):
        quantity: Annotated[int, NumberSchema.create(cast=True).int().min(1)]
        status: Annotated[str, as_validator(EnumSchema.create(["open", "closed"]))]
"""
from __future__ import annotations

from typing import Any, Callable

from pydantic import PlainValidator
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from rapidcheck.errors import ParseError
from rapidcheck.schemas import Schema


def to_pydantic_error(error: ParseError) -> PydanticCustomError:
    """Render a ParseError as a pydantic line error."""
    context: dict[str, Any] = {"message": error.message, "code": str(error.code)}
    if path := error.path:
        context["path"] = list(path)
    return PydanticCustomError(str(error.code), "{message}", context)


def _pydantic_validator(schema: Schema[Any]) -> Callable[[Any], Any]:
    def validate(value: Any) -> Any:
        try:
            return schema.parse(value)
        except ParseError as error:
            raise to_pydantic_error(error) from error
    return validate


def build_core_schema(schema: Schema[Any]) -> CoreSchema:
    """Core schema running ``schema.parse`` in place of pydantic validation."""
    return core_schema.no_info_plain_validator_function(_pydantic_validator(schema))


def as_validator(schema: Schema[Any]) -> PlainValidator:
    """Wrap a schema as a pydantic ``PlainValidator``."""
    if not isinstance(schema, Schema):
        raise TypeError(f"as_validator needs a Schema, got {type(schema).__name__}")
    return PlainValidator(_pydantic_validator(schema))
