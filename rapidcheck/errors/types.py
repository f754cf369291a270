"""Validation Error Types

Two exception kinds share one catch surface:
- ValidationError: raw failure raised by standalone rules
- ParseError: the exception every ``Schema.parse`` raises

Failures chain through ``cause`` so composite schemas can wrap a member
failure while keeping the innermost one reachable. ``Ok``/``Err`` give
``safe_parse`` and the boundary helpers a non-raising result container.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar, Union, final

from .codes import ErrorCode

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(eq=False)
class ValidationError(Exception):
    """Structured validation failure.

    Attributes:
        code: Stable machine identifier (an ``ErrorCode`` or a caller-defined string)
        message: Human-readable message
        details: Structured parameters of the failing rule (e.g. ``{"min": 10}``)
        cause: Inner failure wrapped by this one
    """
    code: str
    message: str
    details: Mapping[str, Any] | None = None
    cause: BaseException | None = None

    def __post_init__(self):
        super().__init__(self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.details, self.cause))

    @property
    def path(self) -> tuple[str | int, ...]:
        """Keys and indexes of the nested members that failed, outermost first."""
        segments: list[str | int] = []
        error: BaseException | None = self
        while isinstance(error, ValidationError):
            details = error.details or {}
            if "key" in details:
                segments.append(details["key"])
            elif "index" in details:
                segments.append(details["index"])
            error = error.cause
        return tuple(segments)

    @property
    def root_cause(self) -> ValidationError:
        """Innermost validation failure in the cause chain."""
        error = self
        while isinstance(error.cause, ValidationError):
            error = error.cause
        return error

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and API responses."""
        result: dict[str, Any] = {"code": str(self.code), "message": self.message}
        if self.details:
            result["details"] = {k: _serialize_detail(v) for k, v in self.details.items()}
        if path := self.path:
            result["path"] = list(path)
        if isinstance(self.cause, ValidationError):
            result["cause"] = self.cause.to_dict()
        elif self.cause is not None:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        return result


def _serialize_detail(value: Any) -> Any:
    if isinstance(value, ValidationError):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_serialize_detail(v) for v in value]
    return value


@dataclass(eq=False)
class ParseError(ValidationError):
    """Failure raised by ``Schema.parse``."""

    @classmethod
    def of(cls, exc: BaseException, code: str = ErrorCode.CUSTOM_ERROR) -> ParseError:
        """Convert any exception into a ParseError.

        A ParseError is returned as is; another ValidationError keeps its
        code, message, details and cause; anything else is wrapped under
        ``code`` with the original as cause.
        """
        if isinstance(exc, ParseError):
            return exc
        if isinstance(exc, ValidationError):
            return cls(exc.code, exc.message, details=exc.details, cause=exc.cause)
        return cls(code, str(exc) or type(exc).__name__, cause=exc)


# ============================================================================
# Result container
# ============================================================================

@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], F]) -> Ok[T]:
        return self

    def match(self, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Re-raise the wrapped failure."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on Err: {self.error!r}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[Any], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def match(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def __iter__(self) -> Iterator:
        return iter([])


Result = Union[Ok[T], Err[E]]


def collect_results(results: list[Result[T, E]]) -> Result[list[T], list[E]]:
    """Ok with every value if all succeeded, otherwise Err with every error."""
    values: list[T] = []
    errors: list[E] = []

    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                errors.append(e)

    if errors:
        return Err(errors)
    return Ok(values)


def sequence_results(results: list[Result[T, E]]) -> Result[list[T], E]:
    """Ok with every value, or the first Err encountered."""
    values: list[T] = []

    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                return Err(e)

    return Ok(values)
