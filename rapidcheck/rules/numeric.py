"""Numeric rules: bounds, ranges and integrality."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from rapidcheck.errors import ErrorCode
from rapidcheck.utils import Message

from .base import Rule


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


class _NumericRule(Rule):
    expected_type = "number"

    def accepts(self, value: Any) -> bool:
        return _is_number(value)


@dataclass(frozen=True, slots=True)
class Min(_NumericRule):
    """Value must be greater than or equal to ``min``."""
    min: int | float | Decimal
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.NUMBER_TOO_SMALL

    def is_satisfied(self, value: Any) -> bool:
        return value >= self.min

    def details(self, value: Any) -> dict[str, Any]:
        return {"min": self.min, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return f"The number must be greater than or equal to {details['min']}."


@dataclass(frozen=True, slots=True)
class Max(_NumericRule):
    """Value must be less than or equal to ``max``."""
    max: int | float | Decimal
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.NUMBER_TOO_BIG

    def is_satisfied(self, value: Any) -> bool:
        return value <= self.max

    def details(self, value: Any) -> dict[str, Any]:
        return {"max": self.max, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return f"The number must be less than or equal to {details['max']}."


@dataclass(frozen=True, slots=True)
class Range(_NumericRule):
    """Value must lie within ``[min, max]``."""
    min: int | float | Decimal
    max: int | float | Decimal
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.NUMBER_OUT_OF_RANGE

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Range lower bound {self.min} exceeds upper bound {self.max}")

    def is_satisfied(self, value: Any) -> bool:
        return self.min <= value <= self.max

    def details(self, value: Any) -> dict[str, Any]:
        return {"min": self.min, "max": self.max, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return f"The number must be between {details['min']} and {details['max']}."


@dataclass(frozen=True, slots=True)
class Integer(_NumericRule):
    """Value must have no fractional part."""
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.NUMBER_NOT_INTEGER

    def is_satisfied(self, value: Any) -> bool:
        if isinstance(value, int):
            return True
        if isinstance(value, Decimal):
            return value.is_finite() and value == value.to_integral_value()
        return value.is_integer()

    def details(self, value: Any) -> dict[str, Any]:
        return {"value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return "The number must be an integer."
