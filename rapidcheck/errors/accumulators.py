"""Member Failure Accumulation

Composite schemas (object, shape, array) run their members through an
accumulator. Fail-fast is the default and raises the first member failure;
collect-all is an explicit opt-in that gathers member failures (up to
``max_errors``) and raises a single aggregate failure.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from rapidcheck.config import get_settings

from .types import ParseError


class ValidationMode(str, Enum):
    """Member failure accumulation strategy."""
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class ValidationErrorAccumulator(ABC):
    """Abstract base for member failure accumulation strategies."""

    @abstractmethod
    def add_error(self, error: ParseError) -> bool:
        """Add a member failure. Returns True if validation should continue."""

    @abstractmethod
    def get_errors(self) -> list[ParseError]:
        """Get accumulated failures."""

    @abstractmethod
    def raise_if_errors(self, code: str, subject: str = "members") -> None:
        """Raise if any failure was accumulated.

        Args:
            code: Code of the aggregate failure (collect-all only)
            subject: Noun used in the aggregate message, e.g. "items"
        """

    @property
    @abstractmethod
    def mode(self) -> ValidationMode:
        """Get the accumulation mode."""

    def has_errors(self) -> bool:
        return bool(self.get_errors())


@dataclass
class FailFastAccumulator(ValidationErrorAccumulator):
    """Fail-fast accumulator: stops on the first failure and re-raises it."""
    _error: ParseError | None = None

    @property
    def mode(self) -> ValidationMode:
        return ValidationMode.FAIL_FAST

    def add_error(self, error: ParseError) -> bool:
        if self._error is None:
            self._error = error
        return False

    def get_errors(self) -> list[ParseError]:
        return [self._error] if self._error else []

    def raise_if_errors(self, code: str, subject: str = "members") -> None:
        if self._error is not None:
            raise self._error


@dataclass
class CollectAllAccumulator(ValidationErrorAccumulator):
    """Collect-all accumulator: gathers failures up to max_errors.

    The first failure is always kept, so a non-positive cap still fails.
    """
    max_errors: int = 50
    _errors: list[ParseError] = field(default_factory=list)

    @property
    def mode(self) -> ValidationMode:
        return ValidationMode.COLLECT_ALL

    def add_error(self, error: ParseError) -> bool:
        if not self._errors or len(self._errors) < self.max_errors:
            self._errors.append(error)
        return len(self._errors) < self.max_errors

    def get_errors(self) -> list[ParseError]:
        return self._errors.copy()

    def raise_if_errors(self, code: str, subject: str = "members") -> None:
        if not self._errors:
            return
        errors = self._errors.copy()
        summary = "; ".join(e.message for e in errors)
        raise ParseError(
            code,
            f"{len(errors)} invalid {subject}: {summary}",
            details={"errors": errors},
        )


def create_accumulator(mode: ValidationMode, max_errors: int | None = None) -> ValidationErrorAccumulator:
    """Factory for accumulators; ``max_errors`` defaults to ``settings.MAX_ERRORS``."""
    if mode == ValidationMode.FAIL_FAST:
        return FailFastAccumulator()
    if max_errors is None:
        max_errors = get_settings().MAX_ERRORS
    return CollectAllAccumulator(max_errors=max_errors)
