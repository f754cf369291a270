"""Shape schema: a record with a fixed set of keys, each with its own schema."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from rapidcheck.errors import ErrorCode, ParseError, ValidationMode, create_accumulator
from rapidcheck.utils import UNDEFINED, Message

from .base import Schema, SchemaOptions, wrap_member_error


@dataclass(frozen=True, slots=True)
class ShapeOptions(SchemaOptions):
    shape: Mapping[str, Schema[Any]] = field(default_factory=lambda: MappingProxyType({}))
    strict: bool = False
    value_error: Message | None = None
    mode: ValidationMode = ValidationMode.FAIL_FAST


class ShapeSchema(Schema[dict[str, Any]]):
    """Schema for records with declared keys.

    Declared keys are parsed in declaration order; a missing key is parsed
    as ``UNDEFINED`` so optional members may be left out, and a member that
    resolves to ``UNDEFINED`` is omitted from the output. Undeclared keys
    are dropped, or rejected with ``SHAPE_UNKNOWN_KEY`` when ``strict``.
    """

    __slots__ = ()

    required_code = ErrorCode.SHAPE_REQUIRED
    type_code = ErrorCode.SHAPE_TYPE
    custom_code = ErrorCode.SHAPE_CUSTOM
    expected_type = "object"
    type_error_message = "The value must be an object."

    @classmethod
    def create(
        cls,
        shape: Mapping[str, Schema[Any]],
        *,
        strict: bool = False,
        value_error: Message | None = None,
        mode: ValidationMode = ValidationMode.FAIL_FAST,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> ShapeSchema:
        for key, schema in shape.items():
            if not isinstance(schema, Schema):
                raise TypeError(f"Shape member '{key}' must be a Schema, got {type(schema).__name__}")
        return cls(ShapeOptions(
            shape=MappingProxyType(dict(shape)),
            strict=strict,
            value_error=value_error,
            mode=mode,
            type_error=type_error,
            required_error=required_error,
        ))

    @property
    def shape(self) -> Mapping[str, Schema[Any]]:
        return self._options.shape

    def strict(self) -> ShapeSchema:
        """Reject undeclared keys."""
        return self._evolve(strict=True)

    def collect_all(self) -> ShapeSchema:
        return self._evolve(mode=ValidationMode.COLLECT_ALL)

    def extend(self, shape: Mapping[str, Schema[Any]]) -> ShapeSchema:
        """Add or replace members. Existing keys keep their position."""
        return self._evolve(shape=MappingProxyType({**self._options.shape, **shape}))

    def _is_type(self, value: Any) -> bool:
        return isinstance(value, Mapping)

    def _parse_value(self, value: Mapping[str, Any]) -> dict[str, Any]:
        options = self._options
        accumulator = create_accumulator(options.mode)
        result: dict[str, Any] = {}
        proceed = True

        for key, schema in options.shape.items():
            member = value.get(key, UNDEFINED)
            try:
                parsed = schema.parse(member)
            except ParseError as cause:
                error = wrap_member_error(
                    ErrorCode.SHAPE_VALUE_INVALID,
                    cause,
                    params={"key": key, "value": member},
                    message=options.value_error,
                    default_message=f"Invalid value of '{key}' key",
                )
                proceed = accumulator.add_error(error)
                if not proceed:
                    break
                continue
            if parsed is not UNDEFINED:
                result[key] = parsed

        if options.strict and proceed:
            for key in value:
                if key in options.shape:
                    continue
                error = ParseError(
                    ErrorCode.SHAPE_UNKNOWN_KEY,
                    f"Unknown key '{key}'.",
                    details={"key": key},
                )
                if not accumulator.add_error(error):
                    break

        accumulator.raise_if_errors(ErrorCode.SHAPE_INVALID, "members")
        return result
