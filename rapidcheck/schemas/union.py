"""Union schema: the first member schema that accepts the value wins."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from rapidcheck.errors import ErrorCode, ParseError
from rapidcheck.utils import determine_type

from .base import Schema, SchemaOptions


@dataclass(frozen=True, slots=True)
class UnionOptions(SchemaOptions):
    schemas: tuple[Schema[Any], ...] = ()


class UnionSchema(Schema[Any]):
    """Tries member schemas in order and returns the first successful parse.

    Presence is decided by the union itself: ``UNDEFINED`` and ``None`` only
    pass when the union is optional/nullable, whatever its members allow.
    When no member accepts the value the failure is ``UNION_TYPE`` with every
    member failure under ``details["errors"]``.
    """

    __slots__ = ()

    required_code = ErrorCode.UNION_REQUIRED
    type_code = ErrorCode.UNION_TYPE
    custom_code = ErrorCode.UNION_CUSTOM
    expected_type = "union"
    type_error_message = "The value doesn't match any of the allowed schemas."

    @classmethod
    def create(
        cls,
        schemas: Iterable[Schema[Any]],
        *,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> UnionSchema:
        schemas = tuple(schemas)
        if not schemas:
            raise ValueError("UnionSchema needs at least one member schema")
        for schema in schemas:
            if not isinstance(schema, Schema):
                raise TypeError(f"Union member must be a Schema, got {type(schema).__name__}")
        return cls(UnionOptions(schemas=schemas, type_error=type_error, required_error=required_error))

    @property
    def schemas(self) -> tuple[Schema[Any], ...]:
        return self._options.schemas

    def _is_type(self, value: Any) -> bool:
        # membership is decided while parsing the members
        return True

    def _parse_value(self, value: Any) -> Any:
        errors: list[ParseError] = []
        for schema in self._options.schemas:
            try:
                return schema.parse(value)
            except ParseError as error:
                errors.append(error)

        raise ParseError(
            self.type_code,
            self._options.type_error or self.type_error_message,
            details={"received": determine_type(value), "errors": errors},
            cause=errors[0],
        )
