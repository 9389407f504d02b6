"""Constraint Applier

Folds one named constraint onto a schema. Dispatch goes through a table
of handlers keyed by constraint kind; kinds without a handler leave the
schema untouched, so new decorator kinds never break synthesis.

Usage:
    schema = apply_constraint(StrictInt, "min", {"min": 0})
    register_constraint("even", lambda schema, params: Annotated[schema, MultipleOf(2)])
"""
from __future__ import annotations

from typing import Annotated, Any, Callable

from as_pydantic.errors import InvalidRefinementError, invalid_refinement, raise_error
from as_pydantic.metadata import PASSWORD_PATTERN, ValidationKeys

from .annotated import Ge, Le, MaxLen, MinLen, MultipleOf, Pattern

ConstraintHandler = Callable[[Any, dict[str, Any]], Any]

_HANDLERS: dict[str, ConstraintHandler] = {}


def register_constraint(kind: str, handler: ConstraintHandler) -> None:
    """Register (or replace) the handler for a constraint kind."""
    _HANDLERS[kind] = handler


def apply_constraint(schema: Any, kind: str, params: dict[str, Any] | None = None) -> Any:
    """Return schema refined by the constraint, or schema itself for unknown kinds."""
    handler = _HANDLERS.get(kind)
    if handler is None:
        return schema
    return handler(schema, params or {})


def _refinement(annotation: type, key: str) -> ConstraintHandler:
    def handler(schema: Any, params: dict[str, Any]) -> Any:
        return Annotated[schema, annotation(params[key], message=params.get("message"))]
    return handler


def _password(schema: Any, params: dict[str, Any]) -> Any:
    return Annotated[schema, Pattern(PASSWORD_PATTERN, message=params.get("message"))]


def _date(schema: Any, params: dict[str, Any]) -> Any:
    raise_error(
        invalid_refinement(ValidationKeys.DATE, "declare the date type instead", origin="constraints.apply").error,
        InvalidRefinementError,
    )


register_constraint(ValidationKeys.MIN, _refinement(Ge, ValidationKeys.MIN))
register_constraint(ValidationKeys.MAX, _refinement(Le, ValidationKeys.MAX))
register_constraint(ValidationKeys.MIN_LENGTH, _refinement(MinLen, ValidationKeys.MIN_LENGTH))
register_constraint(ValidationKeys.MAX_LENGTH, _refinement(MaxLen, ValidationKeys.MAX_LENGTH))
register_constraint(ValidationKeys.STEP, _refinement(MultipleOf, ValidationKeys.STEP))
register_constraint(ValidationKeys.PATTERN, _refinement(Pattern, ValidationKeys.PATTERN))
register_constraint(ValidationKeys.URL, _refinement(Pattern, ValidationKeys.PATTERN))
register_constraint(ValidationKeys.EMAIL, _refinement(Pattern, ValidationKeys.PATTERN))
register_constraint(ValidationKeys.PASSWORD, _password)
register_constraint(ValidationKeys.DATE, _date)
