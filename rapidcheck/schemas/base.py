"""Schema Base

Every schema is an immutable descriptor made of three parts:
- an options record (presence flags, casting, custom messages, per-type fields)
- an ordered mapping of validators keyed by rule code
- an optional terminal mapper

Configuration calls never mutate the receiver; they return a new schema
sharing nothing mutable with the old one. ``parse`` runs the same pipeline
for every schema kind:

    cast -> presence -> type check -> members -> validators -> mapper

Re-registering a rule code replaces the earlier validator in place, so
``.min(1).min(10)`` behaves exactly like ``.min(10)``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Generic, Self, TypeVar

from rapidcheck.errors import ErrorCode, Err, Ok, ParseError, Result, ValidationError
from rapidcheck.rules import Rule
from rapidcheck.utils import UNDEFINED, Message, determine_type, format_message, is_absent

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

T = TypeVar("T")

Validator = Callable[[Any], Any]
Mapper = Callable[[Any], Any]

REQUIRED_ERROR = "Value is required."


@dataclass(frozen=True, slots=True)
class SchemaOptions:
    """Configuration shared by every schema kind."""
    is_optional: bool = False
    is_nullable: bool = False
    should_cast: bool = False
    type_error: str | None = None
    required_error: str | None = None


class Schema(ABC, Generic[T]):
    """Common contract of all schemas.

    Subclasses provide the type guard and, where relevant, casting and
    member processing. They must keep the ``(options, validators, mapper)``
    constructor so configuration calls can rebuild them.
    """

    __slots__ = ("_options", "_validators", "_mapper")

    required_code: ClassVar[ErrorCode]
    type_code: ClassVar[ErrorCode]
    custom_code: ClassVar[ErrorCode]
    expected_type: ClassVar[str]
    type_error_message: ClassVar[str]

    def __init__(
        self,
        options: SchemaOptions,
        validators: Mapping[str, Validator] | None = None,
        mapper: Mapper | None = None,
    ):
        self._options = options
        self._validators: Mapping[str, Validator] = MappingProxyType(dict(validators or {}))
        self._mapper = mapper

    @property
    def options(self) -> SchemaOptions:
        return self._options

    @property
    def rules(self) -> tuple[str, ...]:
        """Codes of the registered validators, in evaluation order."""
        return tuple(self._validators)

    @property
    def is_optional(self) -> bool:
        return self._options.is_optional

    @property
    def is_nullable(self) -> bool:
        return self._options.is_nullable

    def __repr__(self) -> str:
        flags = [name for name, on in (("optional", self.is_optional), ("nullable", self.is_nullable)) if on]
        parts = [*flags, *(str(code) for code in self._validators)]
        if self._mapper is not None:
            parts.append("mapped")
        return f"{type(self).__name__}({', '.join(parts)})"

    # ------------------------------------------------------------------
    # Copy-on-write helpers
    # ------------------------------------------------------------------

    def _copy(
        self,
        *,
        options: SchemaOptions | None = None,
        validators: Mapping[str, Validator] | None = None,
        mapper: Any = UNDEFINED,
    ) -> Self:
        return type(self)(
            self._options if options is None else options,
            self._validators if validators is None else validators,
            self._mapper if mapper is UNDEFINED else mapper,
        )

    def _evolve(self, **changes: Any) -> Self:
        return self._copy(options=replace(self._options, **changes))

    def _with_validator(self, code: str, validator: Validator) -> Self:
        return self._copy(validators={**self._validators, code: validator})

    def _with_check(
        self,
        code: ErrorCode,
        check: Callable[[Any], bool],
        *,
        details: Mapping[str, Any],
        message: Message | None,
        default_message: Message,
    ) -> Self:
        """Register a rule that fails with ``code`` when ``check`` is false."""
        params = dict(details)

        def validate(value: Any) -> Any:
            if not check(value):
                raise ParseError(
                    code,
                    format_message(message or default_message, params),
                    details=dict(params),
                )
            return value

        return self._with_validator(code, validate)

    def _with_rule(self, code: ErrorCode, rule: Rule) -> Self:
        """Register a rule primitive, reporting its failures under ``code``."""

        def validate(value: Any) -> Any:
            try:
                rule(value)
            except ValidationError as error:
                raise ParseError(code, error.message, details=error.details) from None
            return value

        return self._with_validator(code, validate)

    # ------------------------------------------------------------------
    # Presence
    # ------------------------------------------------------------------

    def optional(self) -> Self:
        """Let ``UNDEFINED`` through."""
        return self._evolve(is_optional=True)

    def nullable(self) -> Self:
        """Let ``None`` through."""
        return self._evolve(is_nullable=True)

    def nullish(self) -> Self:
        """Let both ``UNDEFINED`` and ``None`` through."""
        return self._evolve(is_optional=True, is_nullable=True)

    def required(self, *, message: str | None = None) -> Self:
        """Reject ``UNDEFINED`` and ``None`` whatever the previous state."""
        return self._evolve(
            is_optional=False,
            is_nullable=False,
            required_error=message or self._options.required_error,
        )

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def map(self, mapper: Mapper) -> Self:
        """Set the terminal transform, replacing any previous one."""
        return self._copy(mapper=mapper)

    def custom(self, validator: Validator) -> Self:
        """Append a user validator.

        The validator receives the current value and returns the value to
        pass on; returning ``None`` keeps the value unchanged, so rule
        primitives from ``rapidcheck.rules`` can be used directly.
        """
        code = self.custom_code

        def validate(value: Any) -> Any:
            try:
                result = validator(value)
            except ParseError:
                raise
            except Exception as exc:
                raise ParseError.of(exc, code)
            return value if result is None else result

        return self._with_validator(code, validate)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _cast(self, value: Any) -> Any:
        return value

    @abstractmethod
    def _is_type(self, value: Any) -> bool:
        """Runtime type guard applied after presence resolution."""

    def _type_error(self, value: Any) -> ParseError:
        return ParseError(
            self.type_code,
            self._options.type_error or self.type_error_message,
            details={"expected": self.expected_type, "received": determine_type(value)},
        )

    def _parse_value(self, value: Any) -> Any:
        """Per-kind processing between the type check and the validators."""
        return value

    def parse(self, value: Any = UNDEFINED) -> T:
        """Validate ``value`` and return the normalized result.

        Raises:
            ParseError: on any rejection
        """
        options = self._options

        if options.should_cast:
            value = self._cast(value)

        if is_absent(value):
            if value is UNDEFINED and options.is_optional:
                return value
            if value is None and options.is_nullable:
                return value
            raise ParseError(self.required_code, options.required_error or REQUIRED_ERROR)

        if not self._is_type(value):
            raise self._type_error(value)

        result = self._parse_value(value)
        for validate in self._validators.values():
            result = validate(result)

        if self._mapper is not None:
            try:
                return self._mapper(result)
            except ParseError:
                raise
            except Exception as exc:
                raise ParseError.of(exc)

        return result

    def safe_parse(self, value: Any = UNDEFINED) -> Result[T, ParseError]:
        """Like ``parse`` but returns ``Ok``/``Err`` instead of raising."""
        try:
            return Ok(self.parse(value))
        except ParseError as error:
            return Err(error)

    def is_valid(self, value: Any = UNDEFINED) -> bool:
        return self.safe_parse(value).is_ok()

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        # Avoid circular import
        from rapidcheck.annotated import build_core_schema
        return build_core_schema(self)


def wrap_member_error(
    code: ErrorCode,
    cause: ParseError,
    *,
    params: dict[str, Any],
    message: Message | None,
    default_message: str,
) -> ParseError:
    """Wrap a member failure of a composite schema.

    Without a configured message the inner message is appended to
    ``default_message``.
    """
    if message:
        text = format_message(message, params)
    else:
        text = f"{default_message}: {cause.message}" if cause.message else default_message
    return ParseError(code, text, details=params, cause=cause)
