"""Attribute Synthesizer - one property's schema from its metadata record."""
from __future__ import annotations

import types
from typing import Annotated, Any, Optional, Union, get_args, get_origin

from pydantic import Field
from pydantic.fields import FieldInfo

from as_pydantic.errors import MissingTypeError, missing_type, raise_error
from as_pydantic.metadata import ValidationKeys

from .constraints import apply_constraint
from .resolver import resolve_type

# Kinds that shape the schema instead of refining it
RESERVED_KEYS = frozenset({
    ValidationKeys.TYPE,
    ValidationKeys.REQUIRED,
    ValidationKeys.DATE,
    ValidationKeys.LIST,
    ValidationKeys.DESCRIPTION,
})


def synthesize_attribute(
    record: dict[str, dict[str, Any]],
    declared_type: Any = None,
    description: str | None = None,
    *,
    name: str | None = None,
) -> Any:
    """Build the schema for one property, None when it declares nothing.

    Args:
        record: Constraint kind -> payload, in declaration order
        declared_type: The property's annotation, reported when no type is found
        description: Fallback description when the record carries none
        name: Property name for error reporting

    Raises:
        MissingTypeError: The record has constraints but no type entry
        UnknownTypeError: A type name is neither primitive nor registered
        ConversionError: A nested model failed to synthesize
        InvalidRefinementError: The record asks for a date refinement
    """
    if not record:
        return None

    type_entry = record.get(ValidationKeys.TYPE) or {}
    descriptor = type_entry.get("custom_types")
    if descriptor is None:
        raise_error(
            missing_type(name, declared=declared_type, origin="attribute.synthesize").error,
            MissingTypeError,
        )

    element: Any = Any
    collection = record.get(ValidationKeys.LIST)
    if collection and collection.get("clazz"):
        element = resolve_type(collection["clazz"])

    schema = resolve_type(descriptor, element)
    for kind, params in record.items():
        if kind not in RESERVED_KEYS:
            schema = apply_constraint(schema, kind, params)

    if ValidationKeys.REQUIRED not in record:
        schema = Optional[schema]

    text = (record.get(ValidationKeys.DESCRIPTION) or {}).get(ValidationKeys.DESCRIPTION) or description
    if text and not carries_description(schema):
        schema = Annotated[schema, Field(description=text)]
    return schema


def carries_description(schema: Any) -> bool:
    if get_origin(schema) is not Annotated:
        return False
    return any(isinstance(m, FieldInfo) and m.description for m in schema.__metadata__)


def is_optional(schema: Any) -> bool:
    """True when the schema accepts None at the top level."""
    while get_origin(schema) is Annotated:
        schema = get_args(schema)[0]
    return get_origin(schema) in (Union, types.UnionType) and type(None) in get_args(schema)
