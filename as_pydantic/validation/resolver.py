"""Type Resolver

Turns a type descriptor into a pydantic type form. A descriptor is a type
name, a class, an ordered list of those (a union), or a zero-argument
thunk returning any of them. Primitive names map to primitive schemas,
the collection names wrap an element schema, and every other name is
looked up in the model registry and synthesized recursively.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Callable, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, Strict

from as_pydantic.config import settings
from as_pydantic.errors import (
    ConversionError,
    UnknownTypeError,
    conversion_failed,
    raise_error,
    unknown_type,
)
from as_pydantic.logging import get_logger
from as_pydantic.metadata import registry

from .annotated import UniqueItems

log = get_logger("validation.resolver")

# name -> (strict form, lax form)
PRIMITIVES: dict[str, tuple[Any, Any]] = {
    "string": (StrictStr, str),
    "str": (StrictStr, str),
    "number": (StrictFloat, float),
    "float": (StrictFloat, float),
    "integer": (StrictInt, int),
    "int": (StrictInt, int),
    "bigint": (StrictInt, int),
    "boolean": (StrictBool, bool),
    "bool": (StrictBool, bool),
    "date": (Annotated[date, Strict()], date),
    "datetime": (Annotated[datetime, Strict()], datetime),
}

COLLECTIONS: dict[str, Callable[[Any], Any]] = {
    "array": lambda element: list[element],
    "list": lambda element: list[element],
    "set": lambda element: Annotated[list[element], UniqueItems()],
}


def safe_invoke(value: Any) -> Any:
    """Call zero-argument thunks; classes and plain values are returned as is.

    A thunk that raises is treated as the value itself.
    """
    if not callable(value) or isinstance(value, type):
        return value
    try:
        return value()
    except Exception as exc:
        log.debug("thunk_invocation_failed", thunk=repr(value), error=str(exc))
        return value


def type_name(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, type):
        return value.__name__
    return getattr(value, "__name__", None) or str(value)


def normalize_types(descriptor: Any) -> list[str]:
    """Flatten a descriptor into an ordered list of type names."""
    value = safe_invoke(descriptor)
    items = value if isinstance(value, (list, tuple)) else [value]
    return [type_name(safe_invoke(item)) for item in items]


def resolve_name(name: str, element: Any = Any) -> Any:
    """Schema for a single type name."""
    key = name.lower()
    if key in PRIMITIVES:
        strict, lax = PRIMITIVES[key]
        return strict if settings.STRICT_PRIMITIVES else lax
    if key in COLLECTIONS:
        return COLLECTIONS[key](element)
    return resolve_model(name)


def resolve_model(name: str) -> Any:
    """Synthesize the registered model called name."""
    cls = registry.lookup(name)
    if cls is None:
        raise_error(unknown_type(name, origin="resolver.resolve_model").error, UnknownTypeError)

    from .builder import synthesize_model

    try:
        return synthesize_model(cls)
    except Exception as exc:
        raise ConversionError(conversion_failed(name, exc, origin="resolver.resolve_model").error) from exc


def resolve_type(descriptor: Any, element: Any = Any) -> Any:
    """Schema for a type descriptor; several names build a union in declared order."""
    schemas = [resolve_name(name, element) for name in normalize_types(descriptor)]
    if len(schemas) == 1:
        return schemas[0]
    return Union[tuple(schemas)]
