"""Tests for models whose annotations are strings (postponed evaluation)."""

from __future__ import annotations

from as_pydantic.errors import ErrorCode
from as_pydantic.metadata import Metadata, Model, model, prop, required
from as_pydantic.validation import attribute_results, synthesize_model


class TestLocalForwardReferences:

    def test_each_annotation_resolves_on_its_own(self):
        @model()
        class ForwardInner(Model):
            label: str = prop(required())

        class ForwardOuter(Model):
            tags: list[str] = prop()
            inner: ForwardInner | None = prop()
            count: int = prop(required())

        properties = Metadata.get(ForwardOuter).properties
        assert properties["tags"] == list[str]
        assert properties["count"] is int

        Schema = synthesize_model(ForwardOuter)
        result = Schema.model_validate({"tags": ["a"], "inner": {"label": "x"}, "count": 1})
        assert result.tags == ["a"]
        assert result.inner.label == "x"

    def test_model_registered_after_declaration(self):
        class ForwardHolder(Model):
            item: ForwardLate | None = prop()

        @model()
        class ForwardLate(Model):
            size: int = prop(required())

        Schema = synthesize_model(ForwardHolder)
        assert Schema.model_validate({"item": {"size": 2}}).item.size == 2

    def test_unknown_name_only_fails_its_own_field(self):
        class ForwardPartial(Model):
            tags: list[str] = prop()
            ghost: ForwardNowhere = prop()

        results = attribute_results(ForwardPartial)
        assert results["tags"].is_ok()
        error = results["ghost"].unwrap_err()
        assert error.code == ErrorCode.E7002_UNKNOWN_TYPE
        assert error.metadata["type_name"] == "ForwardNowhere"
