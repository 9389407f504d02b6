"""Tests for the type resolver."""

from datetime import date
from typing import get_args

import pytest
from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError

from as_pydantic.errors import ConversionError, ErrorCode, UnknownTypeError
from as_pydantic.metadata import Model, model, prop, required, type_
from as_pydantic.validation import normalize_types, resolve_type, safe_invoke, type_name


@model()
class ResolverPoint(Model):
    x: int = prop(required())


@model()
class ResolverBroken(Model):
    ref = prop(type_("ResolverMissing"))


class TestPrimitives:

    def test_primitive_names(self):
        assert resolve_type("string") is StrictStr
        assert resolve_type("number") is StrictFloat
        assert resolve_type("integer") is StrictInt
        assert resolve_type("bigint") is StrictInt

    def test_names_are_case_insensitive(self):
        assert resolve_type("STRING") is StrictStr
        assert resolve_type("Boolean") is resolve_type("bool")

    def test_classes_resolve_by_name(self):
        assert resolve_type(str) is StrictStr
        assert resolve_type(int) is StrictInt

    def test_strict_number_rejects_bool(self):
        adapter = TypeAdapter(resolve_type("number"))
        assert adapter.validate_python(5) == 5
        with pytest.raises(ValidationError):
            adapter.validate_python(True)

    def test_date(self):
        adapter = TypeAdapter(resolve_type(date))
        assert adapter.validate_python(date(2024, 2, 29)) == date(2024, 2, 29)

    def test_lax_primitives(self, monkeypatch):
        from as_pydantic.config import settings

        monkeypatch.setattr(settings, "STRICT_PRIMITIVES", False)
        assert resolve_type("int") is int
        assert TypeAdapter(resolve_type("int")).validate_python("42") == 42


class TestUnions:

    def test_order_is_preserved(self):
        schema = resolve_type(["string", "number"])
        assert get_args(schema)[0] is StrictStr
        assert get_args(schema)[1] is StrictFloat

    def test_union_accepts_each_member(self):
        adapter = TypeAdapter(resolve_type(["string", "number"]))
        assert adapter.validate_python("x") == "x"
        assert adapter.validate_python(5) == 5
        with pytest.raises(ValidationError):
            adapter.validate_python(True)


class TestCollections:

    def test_list_wraps_element(self):
        adapter = TypeAdapter(resolve_type("list", StrictInt))
        assert adapter.validate_python([1, 2]) == [1, 2]
        with pytest.raises(ValidationError):
            adapter.validate_python(["a"])

    def test_array_without_element_accepts_anything(self):
        adapter = TypeAdapter(resolve_type("array"))
        assert adapter.validate_python([1, "a", None]) == [1, "a", None]

    def test_set_rejects_duplicates(self):
        adapter = TypeAdapter(resolve_type("set", StrictStr))
        assert adapter.validate_python(["a", "b"]) == ["a", "b"]
        with pytest.raises(ValidationError):
            adapter.validate_python(["a", "a"])


class TestThunks:

    def test_thunk_is_invoked(self):
        assert resolve_type(lambda: "int") is StrictInt

    def test_thunk_returning_union(self):
        schema = resolve_type(lambda: ["int", "string"])
        assert get_args(schema)[0] is StrictInt

    def test_failing_thunk_is_used_as_value(self):
        def explode():
            raise RuntimeError("not a thunk")

        assert safe_invoke(explode) is explode
        with pytest.raises(UnknownTypeError) as exc:
            resolve_type(explode)
        assert "explode" in str(exc.value)

    def test_classes_are_never_invoked(self):
        assert safe_invoke(str) is str

    def test_normalize_mixed_descriptor(self):
        assert normalize_types(["a", lambda: "b", str]) == ["a", "b", "str"]

    def test_type_name(self):
        assert type_name("Custom") == "Custom"
        assert type_name(ResolverPoint) == "ResolverPoint"
        assert type_name(42) == "42"


class TestRegisteredModels:

    def test_registered_name_synthesizes_model(self):
        schema = resolve_type("ResolverPoint")
        assert issubclass(schema, BaseModel)
        assert schema.model_validate({"x": 1}).x == 1

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownTypeError) as exc:
            resolve_type("Nope")
        assert "Nope" in str(exc.value)
        assert exc.value.error.code == ErrorCode.E7002_UNKNOWN_TYPE
        assert isinstance(exc.value, LookupError)

    def test_nested_failure_becomes_conversion_error(self):
        with pytest.raises(ConversionError) as exc:
            resolve_type("ResolverBroken")
        assert str(exc.value) == "Failed to convert model ResolverBroken: Unknown type: ResolverMissing"
        assert isinstance(exc.value.__cause__, UnknownTypeError)
        assert exc.value.error.code == ErrorCode.E7003_CONVERSION_FAILED
