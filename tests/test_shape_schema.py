"""Tests for ShapeSchema."""

import pytest

from rapidcheck import (
    ErrorCode,
    NumberSchema,
    ParseError,
    ShapeSchema,
    StringSchema,
    ValidationMode,
)


@pytest.fixture
def user():
    return ShapeSchema.create({
        "name": StringSchema.create(trim=True).not_empty(),
        "age": NumberSchema.create().int().min(0).optional(),
    })


class TestParse:
    def test_parses_declared_keys(self, user):
        assert user.parse({"name": " Ada ", "age": 36}) == {"name": "Ada", "age": 36}

    def test_missing_optional_member_is_omitted(self, user):
        assert user.parse({"name": "Ada"}) == {"name": "Ada"}

    def test_undeclared_keys_are_dropped(self, user):
        assert user.parse({"name": "Ada", "admin": True}) == {"name": "Ada"}

    def test_cast_runs_before_presence_check(self):
        schema = ShapeSchema.create({"count": NumberSchema.create(cast=True).optional()})
        assert schema.parse({}) == {"count": 0}
        assert schema.parse({"count": "7"}) == {"count": 7}

    def test_output_follows_declaration_order(self, user):
        assert list(user.parse({"age": 1, "name": "Ada"})) == ["name", "age"]

    def test_missing_required_member(self, user):
        with pytest.raises(ParseError) as exc_info:
            user.parse({})
        error = exc_info.value
        assert error.code == ErrorCode.SHAPE_VALUE_INVALID
        assert error.path == ("name",)
        assert error.cause.code == ErrorCode.STRING_REQUIRED

    def test_rejects_non_mapping(self, user):
        with pytest.raises(ParseError) as exc_info:
            user.parse(["Ada"])
        assert exc_info.value.code == ErrorCode.SHAPE_TYPE

    def test_rejects_non_schema_members(self):
        with pytest.raises(TypeError):
            ShapeSchema.create({"name": str})


class TestStrict:
    def test_unknown_key_rejected(self, user):
        with pytest.raises(ParseError) as exc_info:
            user.strict().parse({"name": "Ada", "admin": True})
        error = exc_info.value
        assert error.code == ErrorCode.SHAPE_UNKNOWN_KEY
        assert error.message == "Unknown key 'admin'."
        assert error.path == ("admin",)

    def test_strict_option(self):
        schema = ShapeSchema.create({"a": NumberSchema.create()}, strict=True)
        assert schema.parse({"a": 1}) == {"a": 1}
        assert not schema.is_valid({"a": 1, "b": 2})

    def test_collect_all_includes_unknown_keys(self, user):
        schema = user.strict().collect_all()
        with pytest.raises(ParseError) as exc_info:
            schema.parse({"name": "", "age": -1, "admin": True})
        error = exc_info.value
        assert error.code == ErrorCode.SHAPE_INVALID
        assert [e.code for e in error.details["errors"]] == [
            ErrorCode.SHAPE_VALUE_INVALID,
            ErrorCode.SHAPE_VALUE_INVALID,
            ErrorCode.SHAPE_UNKNOWN_KEY,
        ]


class TestExtend:
    def test_extend_adds_and_replaces_members(self, user):
        schema = user.extend({"age": NumberSchema.create(), "email": StringSchema.create().pattern("email")})
        assert list(schema.shape) == ["name", "age", "email"]
        assert schema.parse({"name": "Ada", "age": 1, "email": "ada@example.org"})["email"] == "ada@example.org"
        assert not schema.is_valid({"name": "Ada", "age": 1})

    def test_extend_leaves_original_untouched(self, user):
        user.extend({"email": StringSchema.create()})
        assert list(user.shape) == ["name", "age"]

    def test_value_error_message(self):
        schema = ShapeSchema.create(
            {"a": NumberSchema.create()},
            value_error=lambda p: f"{p['key']} is invalid",
            mode=ValidationMode.FAIL_FAST,
        )
        with pytest.raises(ParseError, match="a is invalid"):
            schema.parse({"a": "x"})
