"""Tests for NumberSchema.

Tests cover:
- Finite int/float type check
- Casting strings, booleans, decimals and dates
- Ordering rules, int(), positive()
- Rule replacement and pipeline short-circuit
- custom() and map() failure conversion
"""

import math
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from rapidcheck import UNDEFINED, ErrorCode, NumberSchema, ParseError, ValidationError
from rapidcheck.rules import Range


class TestParse:
    @pytest.mark.parametrize("value", [0, 1, -1, 12.5, -0.5, 10**30])
    def test_returns_numbers(self, value):
        assert NumberSchema.create().parse(value) == value

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, True, False, "1", [], {}, Decimal("1")])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create().parse(value)
        assert exc_info.value.code == ErrorCode.NUMBER_TYPE
        assert exc_info.value.message == "Must be a number."

    def test_type_error_details(self):
        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create().parse("abc")
        assert exc_info.value.details == {"expected": "number", "received": "string"}

    def test_required(self):
        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create().parse(None)
        assert exc_info.value.code == ErrorCode.NUMBER_REQUIRED
        assert exc_info.value.message == "Value is required."


class TestCast:
    def test_numeric_string(self):
        assert NumberSchema.create(cast=True).parse("12.5") == 12.5

    @pytest.mark.parametrize("value,expected", [
        (" 12 ", 12),
        ("-3", -3),
        ("1e3", 1000.0),
        ("", 0),
        ("   ", 0),
        (None, 0),
        (UNDEFINED, 0),
        (True, 1),
        (False, 0),
        (Decimal("1.5"), 1.5),
    ])
    def test_coercions(self, value, expected):
        assert NumberSchema.create(cast=True).parse(value) == expected

    def test_integer_strings_stay_integers(self):
        assert isinstance(NumberSchema.create(cast=True).parse("42"), int)

    def test_dates_cast_to_epoch_milliseconds(self):
        schema = NumberSchema.create(cast=True)
        assert schema.parse(date(1970, 1, 2)) == 86_400_000
        assert schema.parse(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)) == 1000
        assert schema.parse(datetime(1970, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))) == 0

    @pytest.mark.parametrize("value", ["abc", "1_000", "0x10", "nan", "inf", "\u0661\u0662", "\uff11", [1]])
    def test_uncastable_values_fail_type_check(self, value):
        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create(cast=True).parse(value)
        assert exc_info.value.code == ErrorCode.NUMBER_TYPE

    def test_cast_is_idempotent(self):
        schema = NumberSchema.create(cast=True)
        assert schema.parse(5) == 5
        assert schema.parse(schema.parse("7.25")) == 7.25


class TestRules:
    def test_positive(self):
        schema = NumberSchema.create().positive()
        assert schema.parse(0) == 0
        assert schema.parse(3) == 3
        with pytest.raises(ParseError) as exc_info:
            schema.parse(-1)
        assert exc_info.value.code == ErrorCode.NUMBER_POSITIVE
        assert exc_info.value.message == "Must be a positive number."

    def test_min(self):
        schema = NumberSchema.create().min(10)
        assert schema.parse(10) == 10
        with pytest.raises(ParseError) as exc_info:
            schema.parse(9.5)
        error = exc_info.value
        assert error.code == ErrorCode.NUMBER_MIN
        assert error.details == {"min": 10}
        assert error.message == "The number must be greater than or equal to 10."

    def test_max_with_message_factory(self):
        schema = NumberSchema.create().max(5, lambda d: f"at most {d['max']}")
        assert schema.parse(5) == 5
        with pytest.raises(ParseError, match="at most 5") as exc_info:
            schema.parse(6)
        assert exc_info.value.code == ErrorCode.NUMBER_MAX

    def test_greater_than(self):
        schema = NumberSchema.create().greater_than(5)
        assert schema.parse(5.1) == 5.1
        with pytest.raises(ParseError) as exc_info:
            schema.parse(5)
        assert exc_info.value.code == ErrorCode.NUMBER_GREATER_THAN
        assert exc_info.value.message == "The value must be greater than 5."

    def test_less_than(self):
        schema = NumberSchema.create().less_than(0)
        assert schema.parse(-1) == -1
        with pytest.raises(ParseError) as exc_info:
            schema.parse(0)
        assert exc_info.value.code == ErrorCode.NUMBER_LESS_THAN
        assert exc_info.value.details == {"max": 0}

    def test_int(self):
        schema = NumberSchema.create().int()
        assert schema.parse(2) == 2
        assert schema.parse(2.0) == 2.0
        with pytest.raises(ParseError) as exc_info:
            schema.parse(2.5)
        assert exc_info.value.code == ErrorCode.NUMBER_INT
        assert exc_info.value.message == "Must be an integer."


class TestPipeline:
    def test_rule_replacement_keeps_last_configuration(self):
        schema = NumberSchema.create().max(5).max(10)
        assert schema.parse(7) == 7
        assert schema.rules == (ErrorCode.NUMBER_MAX,)

    def test_replaced_rule_keeps_its_position(self):
        schema = NumberSchema.create().min(1).max(10).min(5)
        assert schema.rules == (ErrorCode.NUMBER_MIN, ErrorCode.NUMBER_MAX)

    def test_pipeline_aborts_on_first_failure(self, recorder):
        schema = NumberSchema.create().min(10).custom(recorder)
        with pytest.raises(ParseError):
            schema.parse(1)
        assert recorder.calls == []

    def test_validators_run_in_insertion_order(self):
        schema = NumberSchema.create().custom(lambda v: v * 2).max(10)
        assert schema.parse(5) == 10
        with pytest.raises(ParseError) as exc_info:
            schema.parse(6)
        assert exc_info.value.code == ErrorCode.NUMBER_MAX

    def test_failed_parse_leaves_schema_reusable(self):
        schema = NumberSchema.create().positive()
        with pytest.raises(ParseError):
            schema.parse(-1)
        assert schema.parse(1) == 1


class TestCustomAndMap:
    def test_custom_returning_none_keeps_value(self):
        assert NumberSchema.create().custom(lambda v: None).parse(3) == 3

    def test_custom_plain_exception_is_wrapped(self):
        def reject(value):
            raise ValueError("odd numbers only")

        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create().custom(reject).parse(2)
        error = exc_info.value
        assert error.code == ErrorCode.NUMBER_CUSTOM
        assert error.message == "odd numbers only"
        assert isinstance(error.cause, ValueError)

    def test_custom_parse_error_propagates_unchanged(self):
        original = ParseError("EVEN", "must be even")

        def reject(value):
            raise original

        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create().custom(reject).parse(3)
        assert exc_info.value is original

    def test_rule_primitive_as_custom(self):
        schema = NumberSchema.create().custom(Range(1, 10))
        assert schema.parse(10) == 10
        with pytest.raises(ParseError) as exc_info:
            schema.parse(11)
        assert exc_info.value.code == ErrorCode.NUMBER_OUT_OF_RANGE
        assert exc_info.value.details == {"min": 1, "max": 10, "value": 11}

    def test_second_custom_replaces_first(self):
        schema = NumberSchema.create().custom(lambda v: v + 1).custom(lambda v: v + 100)
        assert schema.parse(1) == 101

    def test_map_replaces_previous_mapper(self):
        schema = NumberSchema.create().map(str).map(lambda v: v * 2)
        assert schema.parse(4) == 8

    def test_map_exception_is_wrapped(self):
        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create().map(lambda v: 1 / v).parse(0)
        assert exc_info.value.code == ErrorCode.CUSTOM_ERROR
        assert isinstance(exc_info.value.cause, ZeroDivisionError)

    def test_map_validation_error_keeps_code(self):
        def mapper(value):
            raise ValidationError("integer", "Must be an integer.", details={"value": value})

        with pytest.raises(ParseError) as exc_info:
            NumberSchema.create().map(mapper).parse(1.5)
        assert exc_info.value.code == "integer"
        assert exc_info.value.details == {"value": 1.5}

    def test_map_runs_only_after_validators(self, recorder):
        schema = NumberSchema.create().min(0).map(recorder)
        with pytest.raises(ParseError):
            schema.parse(-1)
        assert recorder.calls == []
