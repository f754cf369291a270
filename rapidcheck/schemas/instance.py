"""Instance schema: an ``isinstance`` check against one or more classes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rapidcheck.errors import ErrorCode, ParseError
from rapidcheck.utils import determine_type

from .base import Schema, SchemaOptions


@dataclass(frozen=True, slots=True)
class InstanceOptions(SchemaOptions):
    classes: tuple[type, ...] = ()


class InstanceSchema(Schema[Any]):
    __slots__ = ()

    required_code = ErrorCode.INSTANCE_REQUIRED
    type_code = ErrorCode.INSTANCE_TYPE
    custom_code = ErrorCode.INSTANCE_CUSTOM
    expected_type = "instance"

    @classmethod
    def create(
        cls,
        classes: type | tuple[type, ...],
        *,
        type_error: str | None = None,
        required_error: str | None = None,
    ) -> InstanceSchema:
        classes = classes if isinstance(classes, tuple) else (classes,)
        if not classes or not all(isinstance(c, type) for c in classes):
            raise TypeError("InstanceSchema needs one or more classes")
        return cls(InstanceOptions(classes=classes, type_error=type_error, required_error=required_error))

    def _is_type(self, value: Any) -> bool:
        return isinstance(value, self._options.classes)

    def _type_error(self, value: Any) -> ParseError:
        names = " | ".join(c.__name__ for c in self._options.classes)
        return ParseError(
            self.type_code,
            self._options.type_error or f"Must be an instance of {names}.",
            details={"expected": names, "received": determine_type(value)},
        )
