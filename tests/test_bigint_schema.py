"""Tests for BigIntSchema."""

from decimal import Decimal

import pytest

from rapidcheck import BigIntSchema, ErrorCode, ParseError


class TestParse:
    @pytest.mark.parametrize("value", [0, -7, 2**100])
    def test_returns_integers(self, value):
        assert BigIntSchema.create().parse(value) == value

    @pytest.mark.parametrize("value", [1.0, True, "1", Decimal("1")])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ParseError) as exc_info:
            BigIntSchema.create().parse(value)
        assert exc_info.value.code == ErrorCode.BIGINT_TYPE


class TestCast:
    @pytest.mark.parametrize("value,expected", [
        ("42", 42),
        (" -3 ", -3),
        ("", 0),
        (None, 0),
        (True, 1),
        (3.0, 3),
        (Decimal("7"), 7),
        ("123456789012345678901234567890", 123456789012345678901234567890),
    ])
    def test_coercions(self, value, expected):
        result = BigIntSchema.create(cast=True).parse(value)
        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize("value", ["1.5", 3.5, Decimal("2.5"), float("inf"), "x", "\u0661\u0662"])
    def test_non_integral_values_fail_type_check(self, value):
        with pytest.raises(ParseError) as exc_info:
            BigIntSchema.create(cast=True).parse(value)
        assert exc_info.value.code == ErrorCode.BIGINT_TYPE


class TestRules:
    def test_ordering_rules_use_bigint_codes(self):
        schema = BigIntSchema.create().min(0).max(10)
        assert schema.parse(10) == 10
        with pytest.raises(ParseError) as exc_info:
            schema.parse(11)
        assert exc_info.value.code == ErrorCode.BIGINT_MAX

    def test_positive(self):
        with pytest.raises(ParseError) as exc_info:
            BigIntSchema.create().positive().parse(-1)
        assert exc_info.value.code == ErrorCode.BIGINT_POSITIVE

    def test_strict_bounds(self):
        schema = BigIntSchema.create().greater_than(0).less_than(2**64)
        assert schema.parse(1) == 1
        with pytest.raises(ParseError) as exc_info:
            schema.parse(2**64)
        assert exc_info.value.code == ErrorCode.BIGINT_LESS_THAN
        with pytest.raises(ParseError) as exc_info:
            schema.parse(0)
        assert exc_info.value.code == ErrorCode.BIGINT_GREATER_THAN
