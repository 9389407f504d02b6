"""Tests for the attribute synthesizer."""

import pytest
from pydantic import TypeAdapter, ValidationError
from pydantic.fields import FieldInfo

from as_pydantic.errors import ErrorCode, MissingTypeError
from as_pydantic.metadata import ValidationKeys, date_format, description, prop, required, type_, list_of
from as_pydantic.validation import carries_description, is_optional, synthesize_attribute


def _description(schema):
    return next(m.description for m in schema.__metadata__ if isinstance(m, FieldInfo))


class TestOptionality:

    def test_empty_record_contributes_nothing(self):
        assert synthesize_attribute({}) is None

    def test_without_required_accepts_none(self):
        schema = synthesize_attribute(prop(type_("string")).record())
        assert is_optional(schema)
        assert TypeAdapter(schema).validate_python(None) is None

    def test_required_rejects_none(self):
        schema = synthesize_attribute(prop(required(), type_("string")).record())
        assert not is_optional(schema)
        with pytest.raises(ValidationError):
            TypeAdapter(schema).validate_python(None)


class TestRecord:

    def test_missing_type(self):
        with pytest.raises(MissingTypeError) as exc:
            synthesize_attribute(prop(required()).record(), name="street")
        assert exc.value.error.code == ErrorCode.E7001_MISSING_TYPE
        assert exc.value.error.metadata["field"] == "street"

    def test_reserved_kinds_are_not_refinements(self):
        # a date entry reaching the constraint applier would raise
        record = prop(required(), type_("date"), date_format(), description("When")).record()
        schema = synthesize_attribute(record)
        assert schema is not None

    def test_collection_element_is_resolved(self):
        record = prop(required(), type_("list"), list_of("int")).record()
        adapter = TypeAdapter(synthesize_attribute(record))
        assert adapter.validate_python([1, 2]) == [1, 2]
        with pytest.raises(ValidationError):
            adapter.validate_python(["a"])

    def test_constraint_order_follows_record(self):
        record = {
            ValidationKeys.TYPE: {"custom_types": "string"},
            ValidationKeys.REQUIRED: {},
            ValidationKeys.MIN_LENGTH: {ValidationKeys.MIN_LENGTH: 3, "message": "first"},
            ValidationKeys.MAX_LENGTH: {ValidationKeys.MAX_LENGTH: 1, "message": "second"},
        }
        with pytest.raises(ValidationError) as exc:
            TypeAdapter(synthesize_attribute(record)).validate_python("ab")
        assert "first" in str(exc.value)


class TestDescription:

    def test_record_entry_wins(self):
        record = prop(required(), type_("string"), description("From record")).record()
        schema = synthesize_attribute(record, description="Positional")
        assert carries_description(schema)
        assert _description(schema) == "From record"

    def test_positional_fallback(self):
        schema = synthesize_attribute(prop(type_("int")).record(), description="Positional")
        assert _description(schema) == "Positional"

    def test_no_description(self):
        schema = synthesize_attribute(prop(required(), type_("int")).record())
        assert not carries_description(schema)
