"""Tests for ArraySchema."""

import pytest

from rapidcheck import ArraySchema, ErrorCode, NumberSchema, ParseError, StringSchema, ValidationMode


class TestParse:
    def test_parses_items_into_new_list(self):
        source = ("1", "2")
        assert ArraySchema.create(NumberSchema.create(cast=True)).parse(source) == [1, 2]

    def test_empty(self):
        assert ArraySchema.create(NumberSchema.create()).parse([]) == []

    @pytest.mark.parametrize("value", ["abc", {"a": 1}, 1, {1, 2}])
    def test_rejects_non_sequences(self, value):
        with pytest.raises(ParseError) as exc_info:
            ArraySchema.create(NumberSchema.create()).parse(value)
        assert exc_info.value.code == ErrorCode.ARRAY_TYPE

    def test_item_failure_reports_index(self):
        with pytest.raises(ParseError) as exc_info:
            ArraySchema.create(NumberSchema.create()).parse([1, "x", "y"])
        error = exc_info.value
        assert error.code == ErrorCode.ARRAY_ITEM_INVALID
        assert error.details == {"index": 1, "value": "x"}
        assert error.message == "Invalid item at index 1: Must be a number."
        assert error.path == (1,)

    def test_item_error_factory(self):
        schema = ArraySchema.create(
            StringSchema.create(),
            item_error=lambda p: f"item {p['index']} must be text",
        )
        with pytest.raises(ParseError, match="item 0 must be text"):
            schema.parse([1])


class TestRules:
    def test_min_items(self):
        schema = ArraySchema.create(NumberSchema.create()).min_items(2)
        assert schema.parse([1, 2]) == [1, 2]
        with pytest.raises(ParseError) as exc_info:
            schema.parse([1])
        assert exc_info.value.code == ErrorCode.ARRAY_MIN_ITEMS
        assert exc_info.value.details["min_items"] == 2

    def test_max_items(self):
        with pytest.raises(ParseError) as exc_info:
            ArraySchema.create(NumberSchema.create()).max_items(1).parse([1, 2])
        assert exc_info.value.code == ErrorCode.ARRAY_MAX_ITEMS
        assert exc_info.value.message == "The array must contain at most 1 items."

    def test_item_failures_come_before_count_rules(self):
        with pytest.raises(ParseError) as exc_info:
            ArraySchema.create(NumberSchema.create()).min_items(5).parse(["x"])
        assert exc_info.value.code == ErrorCode.ARRAY_ITEM_INVALID


class TestCollectAll:
    def test_gathers_item_failures(self):
        schema = ArraySchema.create(NumberSchema.create().min(0), mode=ValidationMode.COLLECT_ALL)
        with pytest.raises(ParseError) as exc_info:
            schema.parse([-1, 2, -3])
        error = exc_info.value
        assert error.code == ErrorCode.ARRAY_INVALID
        assert [e.details["index"] for e in error.details["errors"]] == [0, 2]
        assert error.message.startswith("2 invalid items: ")
