"""Collection rules: item count bounds."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rapidcheck.errors import ErrorCode
from rapidcheck.utils import Message

from .base import Rule


class _CollectionRule(Rule):
    expected_type = "array"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))


@dataclass(frozen=True, slots=True)
class MinItems(_CollectionRule):
    """Collection must hold at least ``min_items`` items."""
    min_items: int
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.TOO_FEW_ITEMS

    def is_satisfied(self, value: Any) -> bool:
        return len(value) >= self.min_items

    def details(self, value: Any) -> dict[str, Any]:
        return {"min_items": self.min_items, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return f"The array must contain at least {details['min_items']} items."


@dataclass(frozen=True, slots=True)
class MaxItems(_CollectionRule):
    """Collection must hold at most ``max_items`` items."""
    max_items: int
    message: Message | None = field(default=None, kw_only=True)

    code = ErrorCode.TOO_MANY_ITEMS

    def is_satisfied(self, value: Any) -> bool:
        return len(value) <= self.max_items

    def details(self, value: Any) -> dict[str, Any]:
        return {"max_items": self.max_items, "value": value}

    def default_message(self, details: dict[str, Any]) -> str:
        return f"The array must contain at most {details['max_items']} items."
