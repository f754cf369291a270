"""Rule Primitives

Rules are frozen, schema-agnostic callables: ``rule(value)`` returns ``None``
when the value satisfies the rule and raises ``ValidationError`` otherwise.
Each rule class owns one catalog code and reports its parameters in
``details`` so callers can build their own messages.

Rules plug into any schema through ``custom()``:

    NumberSchema.create().custom(Range(1, 10))
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from rapidcheck.errors import ErrorCode, ValidationError
from rapidcheck.utils import Message, determine_type, format_message


class Rule(ABC):
    """Base class for rule primitives."""

    code: ClassVar[ErrorCode]
    expected_type: ClassVar[str]
    message: Message | None

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """True if the rule can be evaluated against ``value``'s type."""

    @abstractmethod
    def is_satisfied(self, value: Any) -> bool:
        """True if ``value`` passes the rule."""

    @abstractmethod
    def details(self, value: Any) -> dict[str, Any]:
        """Structured parameters reported on failure."""

    @abstractmethod
    def default_message(self, details: dict[str, Any]) -> str:
        """Message used when none was configured."""

    def __call__(self, value: Any) -> None:
        if not self.accepts(value):
            raise ValidationError(
                ErrorCode.INVALID_TYPE,
                f"Expected {self.expected_type}, got {determine_type(value)}.",
                details={"expected": self.expected_type, "received": determine_type(value)},
            )
        if not self.is_satisfied(value):
            details = self.details(value)
            raise ValidationError(
                self.code,
                format_message(self.message or self.default_message, details),
                details=details,
            )
