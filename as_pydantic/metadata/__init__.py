"""Declarative model metadata.

Attaches structured, queryable facts to class attributes and exposes them
through a small reflection surface: attribute enumeration, per-property
metadata records, descriptions, and a by-name model registry.

Usage:
    from as_pydantic.metadata import Model, model, prop, required, min_length

    @model(description="A postal address")
    class Address(Model):
        street: str = prop(required(), min_length(2))
"""
from .keys import (
    ValidationKeys,
    CollectionShapes,
    PASSWORD_PATTERN,
    EMAIL_PATTERN,
    URL_PATTERN,
    DEFAULT_ERROR_MESSAGES,
)
from .store import Metadata, ModelMetadata
from .decorators import (
    Rule,
    DescriptionRule,
    PropertyDeclaration,
    prop,
    required,
    type_,
    list_of,
    set_of,
    description,
    minimum,
    maximum,
    min_length,
    max_length,
    step,
    pattern,
    email,
    url,
    password,
    date_format,
    model,
)
from .base import Model
from . import registry

__all__ = [
    "ValidationKeys",
    "CollectionShapes",
    "PASSWORD_PATTERN",
    "EMAIL_PATTERN",
    "URL_PATTERN",
    "DEFAULT_ERROR_MESSAGES",
    "Metadata",
    "ModelMetadata",
    "Rule",
    "DescriptionRule",
    "PropertyDeclaration",
    "prop",
    "required",
    "type_",
    "list_of",
    "set_of",
    "description",
    "minimum",
    "maximum",
    "min_length",
    "max_length",
    "step",
    "pattern",
    "email",
    "url",
    "password",
    "date_format",
    "model",
    "Model",
    "registry",
]
