"""Model Synthesizer

Builds a pydantic model for a model class by synthesizing one field per
declared property. The result is rebuilt on every call from the class's
current metadata; nothing is cached.

Properties without an explicit type rule take their type from the
annotation:

    tags: list[str] = prop(max_length(5))      -> list of StrictStr
    owner: User | None = prop()                -> registered model "User"
    id: int | str = prop(required())           -> Union[StrictInt, StrictStr]

Models referring to themselves (directly or through other models) get an
empty placeholder model at the point of re-entry.
"""
from __future__ import annotations

import inspect
import types
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Annotated, Any, ForwardRef, Iterator, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, create_model

from as_pydantic.config import settings
from as_pydantic.errors import Result, capture
from as_pydantic.logging import get_logger
from as_pydantic.metadata import CollectionShapes, Metadata, Model, ModelMetadata, ValidationKeys

from .attribute import is_optional, synthesize_attribute

log = get_logger("validation.builder")

# Classes being synthesized on the current call stack
_ACTIVE: ContextVar[tuple[type, ...]] = ContextVar("as_pydantic_active_models", default=())

_SET_ORIGINS = (set, frozenset)
_LIST_ORIGINS = (list, tuple)


def _resolve_class(model: Any) -> type:
    return model if isinstance(model, type) else type(model)


@contextmanager
def _entered(cls: type) -> Iterator[None]:
    token = _ACTIVE.set((*_ACTIVE.get(), cls))
    try:
        yield
    finally:
        _ACTIVE.reset(token)


# ============================================================================
# Type inference from annotations
# ============================================================================

def _strip(annotation: Any) -> Any:
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def _union_members(annotation: Any) -> list[Any]:
    annotation = _strip(annotation)
    if get_origin(annotation) in (Union, types.UnionType):
        return [_strip(a) for a in get_args(annotation) if a is not type(None)]
    return [annotation]


def _descriptor(annotation: Any) -> Any:
    """Class or name usable as a type descriptor, None for anything else."""
    if isinstance(annotation, ForwardRef):
        return annotation.__forward_arg__
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and annotation not in (type(None), Any):
        return annotation
    return None


def infer_type(annotation: Any) -> tuple[Any, dict[str, Any] | None]:
    """Type descriptor and collection entry implied by an annotation.

    Returns (None, None) when the annotation cannot be expressed, e.g.
    Any or a nested generic.
    """
    members = _union_members(annotation)
    if len(members) > 1:
        descriptors = [_descriptor(m) for m in members]
        return (None, None) if None in descriptors else (descriptors, None)

    annotation = members[0] if members else None
    origin = get_origin(annotation)
    if origin in _SET_ORIGINS or origin in _LIST_ORIGINS:
        shape = CollectionShapes.SET if origin in _SET_ORIGINS else CollectionShapes.LIST
        items = [m for a in get_args(annotation) if a is not Ellipsis for m in _union_members(a)]
        element = [_descriptor(m) for m in items]
        clazz = element if element and None not in element else None
        return shape, {"clazz": clazz, "type": shape}
    if annotation in _SET_ORIGINS:
        return CollectionShapes.SET, None
    if annotation in _LIST_ORIGINS:
        return CollectionShapes.LIST, None
    if annotation is Any:
        return None, None
    return _descriptor(annotation), None


# ============================================================================
# Builder
# ============================================================================

class SchemaBuilder:
    """Synthesizes the pydantic model for one model class."""

    def __init__(self, model: Any):
        self.cls = _resolve_class(model)
        self.metadata = Metadata.get(self.cls) or ModelMetadata()

    def attribute_names(self) -> list[str]:
        """Candidate property names, in declaration order."""
        if issubclass(self.cls, Model):
            names = self.cls.get_attributes()
        else:
            names = list(inspect.get_annotations(self.cls))
        return [
            name for name in names
            if isinstance(name, str)
            and name != "constructor"
            and not name.startswith("_")
            and not inspect.isroutine(getattr(self.cls, name, None))
        ]

    def record_for(self, name: str) -> dict[str, dict[str, Any]]:
        """Metadata record for a property, with the annotation filling in a missing type."""
        if name not in self.metadata.validation:
            return {}
        record = {kind: dict(params) for kind, params in self.metadata.validation[name].items()}
        collection = record.get(ValidationKeys.LIST)
        if ValidationKeys.TYPE not in record and collection is not None:
            record[ValidationKeys.TYPE] = {"custom_types": collection.get("type", CollectionShapes.LIST)}
        if ValidationKeys.TYPE in record and collection is not None:
            return record

        descriptor, inferred = infer_type(self.metadata.properties.get(name, Any))
        if ValidationKeys.TYPE not in record and descriptor is not None:
            record[ValidationKeys.TYPE] = {"custom_types": descriptor}
        if collection is None and inferred is not None:
            record[ValidationKeys.LIST] = inferred
        return record

    def field_schema(self, name: str) -> Any:
        """Schema for one property, None when it contributes nothing."""
        return synthesize_attribute(
            self.record_for(name),
            self.metadata.properties.get(name),
            self.metadata.description.get(name),
            name=name,
        )

    def fields(self) -> dict[str, tuple[Any, Any]]:
        result: dict[str, tuple[Any, Any]] = {}
        for name in self.attribute_names():
            schema = self.field_schema(name)
            if schema is not None:
                result[name] = (schema, None if is_optional(schema) else ...)
        return result

    def build(self) -> type[BaseModel]:
        return create_model(
            self.cls.__name__,
            __config__=ConfigDict(extra=settings.EXTRA_KEYS),
            __doc__=self.metadata.class_description,
            **self.fields(),
        )


def synthesize_model(model: Any) -> type[BaseModel]:
    """Build the pydantic model for a model class or instance.

    Raises:
        SchemaSynthesisError subclasses from property synthesis
    """
    cls = _resolve_class(model)
    active = _ACTIVE.get()
    if cls in active:
        log.warning("model_cycle_detected", model=cls.__name__, path=[c.__name__ for c in (*active, cls)])
        return create_model(cls.__name__, __config__=ConfigDict(extra="allow"))

    with _entered(cls):
        schema = SchemaBuilder(cls).build()
    log.debug("model_synthesized", model=cls.__name__, fields=list(schema.model_fields))
    return schema


def attribute_results(model: Any) -> dict[str, Result]:
    """Per-property synthesis outcome without raising.

    Properties that declare nothing are left out.
    """
    builder = SchemaBuilder(model)
    results: dict[str, Result] = {}
    with _entered(builder.cls):
        for name in builder.attribute_names():
            result = capture(builder.field_schema, name, origin=f"builder.{builder.cls.__name__}.{name}")
            if result.is_err() or result.unwrap() is not None:
                results[name] = result
    return results
