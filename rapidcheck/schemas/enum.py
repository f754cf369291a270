"""Enum schema: membership in a fixed set of values."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from rapidcheck.errors import ErrorCode, ParseError
from rapidcheck.utils import UNDEFINED, determine_type, format_values

from .base import Schema, SchemaOptions


@dataclass(frozen=True, slots=True)
class EnumOptions(SchemaOptions):
    values: tuple[Any, ...] = ()


def _same(value: Any, candidate: Any) -> bool:
    # type identity keeps 1, 1.0 and True apart
    return value is candidate or (type(value) is type(candidate) and value == candidate)


class EnumSchema(Schema[Any]):
    """Accepts only the configured values.

    Built from a sequence of values or from an ``enum.Enum`` class. For an
    Enum class both the members and their raw values are accepted, and the
    member is returned.
    """

    __slots__ = ()

    required_code = ErrorCode.ENUM_REQUIRED
    type_code = ErrorCode.ENUM_TYPE
    custom_code = ErrorCode.ENUM_CUSTOM
    expected_type = "enum"

    @classmethod
    def create(
        cls,
        values: Iterable[Any] | type[Enum],
        *,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> EnumSchema:
        values = tuple(values)
        if not values:
            raise ValueError("EnumSchema needs at least one value")
        return cls(EnumOptions(values=values, type_error=type_error, required_error=required_error))

    @property
    def values(self) -> tuple[Any, ...]:
        return self._options.values

    def _lookup(self, value: Any) -> Any:
        for candidate in self._options.values:
            if _same(value, candidate):
                return candidate
        if not isinstance(value, Enum):
            for candidate in self._options.values:
                if isinstance(candidate, Enum) and _same(value, candidate.value):
                    return candidate
        return UNDEFINED

    def _is_type(self, value: Any) -> bool:
        return self._lookup(value) is not UNDEFINED

    def _type_error(self, value: Any) -> ParseError:
        values = self._options.values
        return ParseError(
            self.type_code,
            self._options.type_error or f"Must be one of {format_values(values)}",
            details={"values": list(values), "received": determine_type(value)},
        )

    def _parse_value(self, value: Any) -> Any:
        return self._lookup(value)
