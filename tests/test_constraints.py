"""Tests for the constraint applier."""

from typing import Annotated

import pytest
from pydantic import StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError

from as_pydantic.errors import ErrorCode, InvalidRefinementError
from as_pydantic.metadata import (
    ValidationKeys,
    email,
    max_length,
    maximum,
    min_length,
    minimum,
    password,
    pattern,
    step,
    url,
)
from as_pydantic.validation import MultipleOf, apply_constraint, register_constraint


def _fold(schema, *rules):
    for rule in rules:
        schema = apply_constraint(schema, rule.key, rule.params)
    return TypeAdapter(schema)


class TestNumeric:

    def test_min_max_step_fold(self):
        adapter = _fold(StrictFloat, minimum(0), maximum(100), step(5))
        for ok in (0, 5, 100):
            assert adapter.validate_python(ok) == ok
        for bad in (-1, 101, 7):
            with pytest.raises(ValidationError):
                adapter.validate_python(bad)

    def test_rule_message_reaches_error(self):
        adapter = _fold(StrictInt, minimum(10, message="need ten"))
        with pytest.raises(ValidationError) as exc:
            adapter.validate_python(1)
        assert "need ten" in str(exc.value)

    def test_default_message(self):
        adapter = _fold(StrictInt, maximum(3))
        with pytest.raises(ValidationError) as exc:
            adapter.validate_python(4)
        assert "Value must be at most 3" in str(exc.value)


class TestStrings:

    def test_lengths(self):
        adapter = _fold(StrictStr, min_length(2), max_length(3))
        assert adapter.validate_python("ab") == "ab"
        with pytest.raises(ValidationError):
            adapter.validate_python("a")
        with pytest.raises(ValidationError):
            adapter.validate_python("abcd")

    def test_pattern(self):
        adapter = _fold(StrictStr, pattern(r"^[a-z]+$"))
        assert adapter.validate_python("abc") == "abc"
        with pytest.raises(ValidationError):
            adapter.validate_python("ABC")

    def test_email(self):
        adapter = _fold(StrictStr, email())
        assert adapter.validate_python("ada@example.org") == "ada@example.org"
        with pytest.raises(ValidationError):
            adapter.validate_python("not-an-email")

    def test_url(self):
        adapter = _fold(StrictStr, url())
        assert adapter.validate_python("https://example.org/x") == "https://example.org/x"
        with pytest.raises(ValidationError):
            adapter.validate_python("example")

    def test_password_uses_builtin_pattern(self):
        adapter = TypeAdapter(apply_constraint(StrictStr, ValidationKeys.PASSWORD, {}))
        assert adapter.validate_python("Passw0rd!") == "Passw0rd!"
        with pytest.raises(ValidationError):
            adapter.validate_python("password")

    def test_password_rule(self):
        adapter = _fold(StrictStr, password())
        with pytest.raises(ValidationError):
            adapter.validate_python("Sh0rt!")


class TestDispatch:

    def test_unknown_kind_returns_same_schema(self):
        assert apply_constraint(StrictStr, "no-such-kind", {"x": 1}) is StrictStr

    def test_date_is_not_a_refinement(self):
        with pytest.raises(InvalidRefinementError) as exc:
            apply_constraint(StrictStr, ValidationKeys.DATE, {"date": "%Y-%m-%d"})
        assert exc.value.error.code == ErrorCode.E7004_INVALID_REFINEMENT
        assert isinstance(exc.value, TypeError)

    def test_input_schema_is_not_mutated(self):
        refined = apply_constraint(StrictInt, ValidationKeys.MIN, {"min": 1})
        assert refined is not StrictInt
        assert TypeAdapter(StrictInt).validate_python(0) == 0

    def test_register_constraint(self, monkeypatch):
        from as_pydantic.validation import constraints

        monkeypatch.setattr(constraints, "_HANDLERS", dict(constraints._HANDLERS))
        register_constraint("even", lambda schema, params: Annotated[schema, MultipleOf(2)])
        adapter = TypeAdapter(apply_constraint(StrictInt, "even", {}))
        assert adapter.validate_python(4) == 4
        with pytest.raises(ValidationError):
            adapter.validate_python(3)
