"""Validation at System Boundaries

Parse-don't-validate at the edges of an application:
- Ingress: request bodies, form input, decoded JSON
- External: responses of third-party services, webhook payloads
- Batch: imported rows or messages validated as a group

Boundary helpers never raise on invalid data; they return ``Ok``/``Err`` and
log the failure (code and path only, never the rejected value) at debug level.
"""
from __future__ import annotations

import inspect
from collections.abc import Iterable
from functools import wraps
from typing import Any, Callable, Generic, TypeVar

from rapidcheck.errors import Err, Ok, ParseError, Result, ValidationMode
from rapidcheck.config import get_settings
from rapidcheck.logging import boundary_logger
from rapidcheck.schemas import Schema

T = TypeVar("T")


# ============================================================================
# Boundary Validators
# ============================================================================

class BoundaryValidator(Generic[T]):
    """Stateless validator binding a schema to the boundary it guards.

    Usage:
        users = BoundaryValidator(user_schema, origin="signup_form")
        match users.parse(form_data):
            case Ok(user):
                ...
            case Err(error):
                return error.to_dict()
    """

    __slots__ = ("schema", "origin")

    def __init__(self, schema: Schema[T], origin: str = "ingress"):
        if not isinstance(schema, Schema):
            raise TypeError(f"BoundaryValidator needs a Schema, got {type(schema).__name__}")
        self.schema, self.origin = schema, origin

    def __repr__(self) -> str:
        return f"BoundaryValidator({self.schema!r}, origin={self.origin!r})"

    def parse(self, data: Any) -> Result[T, ParseError]:
        """Parse one value."""
        result = self.schema.safe_parse(data)
        if result.is_err():
            self._log_failure(result.unwrap_err())
        return result

    def parse_many(
        self,
        items: Iterable[Any],
        *,
        mode: ValidationMode = ValidationMode.COLLECT_ALL,
        max_errors: int | None = None,
    ) -> Result[list[T], list[tuple[int, ParseError]]]:
        """Parse every item.

        Returns Ok with all parsed items, or Err with ``(index, error)``
        pairs: the first failure in fail-fast mode, up to ``max_errors``
        failures in collect-all mode.
        """
        if max_errors is None:
            max_errors = get_settings().MAX_ERRORS
        valid: list[T] = []
        errors: list[tuple[int, ParseError]] = []

        for idx, item in enumerate(items):
            match self.schema.safe_parse(item):
                case Ok(value):
                    valid.append(value)
                case Err(error):
                    self._log_failure(error, index=idx)
                    errors.append((idx, error))
                    if mode == ValidationMode.FAIL_FAST or len(errors) >= max_errors:
                        break

        if errors:
            return Err(errors)
        return Ok(valid)

    def _log_failure(self, error: ParseError, **context: Any) -> None:
        boundary_logger().debug(
            "boundary_parse_failed",
            origin=self.origin,
            code=str(error.code),
            path=list(error.path),
            reason=error.root_cause.message,
            **context,
        )


# ============================================================================
# Functional Boundary Parsers
# ============================================================================

def parse_batch(
    schema: Schema[T],
    items: Iterable[Any],
    *,
    origin: str = "batch",
    mode: ValidationMode = ValidationMode.COLLECT_ALL,
    max_errors: int | None = None,
) -> Result[list[T], list[tuple[int, ParseError]]]:
    """Parse a batch of items.

    Usage:
        match parse_batch(row_schema, rows):
            case Ok(parsed):
                store(parsed)
            case Err(errors):
                for idx, err in errors:
                    log.warning("bad_row", index=idx, error=err.to_dict())
    """
    return BoundaryValidator(schema, origin).parse_many(items, mode=mode, max_errors=max_errors)


def validate_returns(schema: Schema[Any], *, origin: str = "external") -> Callable[[Callable], Callable]:
    """Decorator parsing a function's return value, sync or async.

    Raises ``ParseError`` when the returned value is invalid.

    Usage:
        @validate_returns(weather_schema, origin="weather_api")
        async def fetch_weather(city: str) -> dict:
            return (await client.get(f"/weather/{city}")).json()
    """
    validator = BoundaryValidator(schema, origin)

    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                return validator.parse(await func(*args, **kwargs)).unwrap()
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            return validator.parse(func(*args, **kwargs)).unwrap()
        return wrapper

    return decorator
