"""Object schema: a mapping whose values (and optionally keys) share one schema."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rapidcheck.errors import ErrorCode, ParseError, ValidationMode, create_accumulator
from rapidcheck.utils import Message

from .base import Schema, SchemaOptions, wrap_member_error


@dataclass(frozen=True, slots=True)
class ObjectOptions(SchemaOptions):
    value_schema: Schema[Any] | None = None
    key_schema: Schema[Any] | None = None
    key_error: Message | None = None
    value_error: Message | None = None
    mode: ValidationMode = ValidationMode.FAIL_FAST


class ObjectSchema(Schema[dict[Any, Any]]):
    """Schema for mappings of arbitrary keys.

    Every value is parsed by ``value_schema``; when a ``key_schema`` is given
    every key must parse too (the original key is kept in the output). The
    result is a new ``dict``; the input mapping is never modified.

    Fail-fast by default: the first invalid key or value raises
    ``OBJECT_KEY_INVALID`` / ``OBJECT_VALUE_INVALID`` with the member failure
    as cause. With ``mode=ValidationMode.COLLECT_ALL`` every member failure is
    gathered into one ``OBJECT_INVALID``.

    ``key_error`` and ``value_error`` replace the default wrapped message;
    callables receive ``{"key": ...}`` and ``{"key": ..., "value": ...}``.
    """

    __slots__ = ()

    required_code = ErrorCode.OBJECT_REQUIRED
    type_code = ErrorCode.OBJECT_TYPE
    custom_code = ErrorCode.OBJECT_CUSTOM
    expected_type = "object"
    type_error_message = "The value must be an object."

    @classmethod
    def create(
        cls,
        value_schema: Schema[Any],
        key_schema: Schema[Any] | None = None,
        *,
        key_error: Message | None = None,
        value_error: Message | None = None,
        mode: ValidationMode = ValidationMode.FAIL_FAST,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> ObjectSchema:
        if not isinstance(value_schema, Schema):
            raise TypeError(f"value_schema must be a Schema, got {type(value_schema).__name__}")
        if key_schema is not None and not isinstance(key_schema, Schema):
            raise TypeError(f"key_schema must be a Schema, got {type(key_schema).__name__}")
        return cls(ObjectOptions(
            value_schema=value_schema,
            key_schema=key_schema,
            key_error=key_error,
            value_error=value_error,
            mode=mode,
            type_error=type_error,
            required_error=required_error,
        ))

    def collect_all(self) -> ObjectSchema:
        return self._evolve(mode=ValidationMode.COLLECT_ALL)

    def _is_type(self, value: Any) -> bool:
        return isinstance(value, Mapping)

    def _parse_value(self, value: Mapping[Any, Any]) -> dict[Any, Any]:
        options = self._options
        accumulator = create_accumulator(options.mode)
        result: dict[Any, Any] = {}

        for key, member in value.items():
            if options.key_schema is not None:
                try:
                    options.key_schema.parse(key)
                except ParseError as cause:
                    error = wrap_member_error(
                        ErrorCode.OBJECT_KEY_INVALID,
                        cause,
                        params={"key": key},
                        message=options.key_error,
                        default_message=f"Invalid object key '{key}'",
                    )
                    if not accumulator.add_error(error):
                        break
                    continue

            try:
                result[key] = options.value_schema.parse(member)
            except ParseError as cause:
                error = wrap_member_error(
                    ErrorCode.OBJECT_VALUE_INVALID,
                    cause,
                    params={"key": key, "value": member},
                    message=options.value_error,
                    default_message=f"Invalid value of '{key}' key",
                )
                if not accumulator.add_error(error):
                    break

        accumulator.raise_if_errors(ErrorCode.OBJECT_INVALID, "members")
        return result
