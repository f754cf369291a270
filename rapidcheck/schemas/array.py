"""Array schema: a list or tuple whose items share one schema."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rapidcheck.errors import ErrorCode, ParseError, ValidationMode, create_accumulator
from rapidcheck.rules import MaxItems, MinItems
from rapidcheck.utils import Message

from .base import Schema, SchemaOptions, wrap_member_error


@dataclass(frozen=True, slots=True)
class ArrayOptions(SchemaOptions):
    item_schema: Schema[Any] | None = None
    item_error: Message | None = None
    mode: ValidationMode = ValidationMode.FAIL_FAST


class ArraySchema(Schema[list[Any]]):
    """Schema for sequences.

    Items are parsed in order into a new ``list``. A failing item raises
    ``ARRAY_ITEM_INVALID`` with ``{"index", "value"}`` details and the item
    failure as cause. Item-count rules run after every item has parsed.
    """

    __slots__ = ()

    required_code = ErrorCode.ARRAY_REQUIRED
    type_code = ErrorCode.ARRAY_TYPE
    custom_code = ErrorCode.ARRAY_CUSTOM
    expected_type = "array"
    type_error_message = "The value must be an array."

    @classmethod
    def create(
        cls,
        item_schema: Schema[Any],
        *,
        item_error: Message | None = None,
        mode: ValidationMode = ValidationMode.FAIL_FAST,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> ArraySchema:
        if not isinstance(item_schema, Schema):
            raise TypeError(f"item_schema must be a Schema, got {type(item_schema).__name__}")
        return cls(ArrayOptions(
            item_schema=item_schema,
            item_error=item_error,
            mode=mode,
            type_error=type_error,
            required_error=required_error,
        ))

    def collect_all(self) -> ArraySchema:
        return self._evolve(mode=ValidationMode.COLLECT_ALL)

    def min_items(self, min_items: int, message: Message | None = None) -> ArraySchema:
        return self._with_rule(ErrorCode.ARRAY_MIN_ITEMS, MinItems(min_items, message=message))

    def max_items(self, max_items: int, message: Message | None = None) -> ArraySchema:
        return self._with_rule(ErrorCode.ARRAY_MAX_ITEMS, MaxItems(max_items, message=message))

    def _is_type(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))

    def _parse_value(self, value: list[Any] | tuple[Any, ...]) -> list[Any]:
        options = self._options
        accumulator = create_accumulator(options.mode)
        result: list[Any] = []

        for index, item in enumerate(value):
            try:
                result.append(options.item_schema.parse(item))
            except ParseError as cause:
                error = wrap_member_error(
                    ErrorCode.ARRAY_ITEM_INVALID,
                    cause,
                    params={"index": index, "value": item},
                    message=options.item_error,
                    default_message=f"Invalid item at index {index}",
                )
                if not accumulator.add_error(error):
                    break

        accumulator.raise_if_errors(ErrorCode.ARRAY_INVALID, "items")
        return result
