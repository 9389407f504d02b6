"""Declarative property rules.

Rules describe one constraint each and are attached to a model attribute
through prop(). Their order is kept: the metadata record built from a
declaration lists constraints in the order they were written.

Usage:
    @model()
    @description("A postal address")
    class Address(Model):
        street: str = prop(required(), min_length(2), description="Street line")
        zip_code: str = prop(pattern(r"^\\d{5}$"))
        tags: list[str] = prop(max_length(5))
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from . import registry
from .keys import (
    DEFAULT_ERROR_MESSAGES,
    EMAIL_PATTERN,
    PASSWORD_PATTERN,
    URL_PATTERN,
    CollectionShapes,
    ValidationKeys,
)
from .store import Metadata

C = TypeVar("C", bound=type)


@dataclass(frozen=True, slots=True)
class Rule:
    """One constraint kind with its parameter payload."""
    key: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DescriptionRule(Rule):
    """Description rule; also works as a class decorator."""

    def __call__(self, target: C) -> C:
        Metadata.set_description(target, self.params[ValidationKeys.DESCRIPTION])
        return target


@dataclass(frozen=True, slots=True)
class PropertyDeclaration:
    """Rules and documentation declared for a single model attribute."""
    rules: tuple[Rule, ...] = ()
    description: str | None = None

    def record(self) -> dict[str, dict[str, Any]]:
        """Build a fresh metadata record (constraint kind -> payload)."""
        result: dict[str, dict[str, Any]] = {}
        for rule in self.rules:
            result[rule.key] = dict(rule.params)
        return result


def prop(*rules: Rule, description: str | None = None) -> Any:
    """Declare a model attribute and its constraints."""
    for rule in rules:
        if not isinstance(rule, Rule):
            raise TypeError(f"prop() expects rules, got {rule!r}")
    return PropertyDeclaration(rules=tuple(rules), description=description)


def _message(key: str, message: str | None, **values: Any) -> str:
    if message:
        return message
    return DEFAULT_ERROR_MESSAGES[key].format(**values)


def _rule(key: str, value: Any, message: str | None) -> Rule:
    return Rule(key, {key: value, "message": _message(key, message, **{key: value})})


# ============================================================================
# Structural rules
# ============================================================================

def required(message: str | None = None) -> Rule:
    return Rule(ValidationKeys.REQUIRED, {"message": _message(ValidationKeys.REQUIRED, message)})


def type_(*types: Any, message: str | None = None) -> Rule:
    """Declare accepted types: names, classes, thunks, or several for a union."""
    if not types:
        raise TypeError("type_() needs at least one type")
    custom_types = types[0] if len(types) == 1 else list(types)
    return Rule(ValidationKeys.TYPE, {
        "custom_types": custom_types,
        "message": _message(ValidationKeys.TYPE, message),
    })


def list_of(*classes: Any, message: str | None = None) -> Rule:
    """Ordered collection whose items are any of the given types."""
    return _collection(CollectionShapes.LIST, classes, message)


def set_of(*classes: Any, message: str | None = None) -> Rule:
    """Unordered collection of unique items of the given types."""
    return _collection(CollectionShapes.SET, classes, message)


def _collection(shape: str, classes: tuple[Any, ...], message: str | None) -> Rule:
    if not classes:
        raise TypeError(f"{shape}_of() needs at least one item type")
    return Rule(ValidationKeys.LIST, {
        "clazz": list(classes),
        "type": shape,
        "message": _message(ValidationKeys.TYPE, message),
    })


def description(text: str) -> DescriptionRule:
    """Describe a property (inside prop()) or a model class (as decorator)."""
    return DescriptionRule(ValidationKeys.DESCRIPTION, {ValidationKeys.DESCRIPTION: text})


# ============================================================================
# Constraint rules
# ============================================================================

def minimum(value: Any, message: str | None = None) -> Rule:
    return _rule(ValidationKeys.MIN, value, message)


def maximum(value: Any, message: str | None = None) -> Rule:
    return _rule(ValidationKeys.MAX, value, message)


def min_length(value: int, message: str | None = None) -> Rule:
    return _rule(ValidationKeys.MIN_LENGTH, value, message)


def max_length(value: int, message: str | None = None) -> Rule:
    return _rule(ValidationKeys.MAX_LENGTH, value, message)


def step(value: int | float, message: str | None = None) -> Rule:
    return _rule(ValidationKeys.STEP, value, message)


def pattern(regex: Any, message: str | None = None) -> Rule:
    return _rule(ValidationKeys.PATTERN, regex, message)


def email(message: str | None = None) -> Rule:
    return Rule(ValidationKeys.EMAIL, {
        ValidationKeys.PATTERN: EMAIL_PATTERN,
        "message": _message(ValidationKeys.EMAIL, message),
    })


def url(message: str | None = None) -> Rule:
    return Rule(ValidationKeys.URL, {
        ValidationKeys.PATTERN: URL_PATTERN,
        "message": _message(ValidationKeys.URL, message),
    })


def password(message: str | None = None) -> Rule:
    return Rule(ValidationKeys.PASSWORD, {
        ValidationKeys.PATTERN: PASSWORD_PATTERN,
        "message": _message(ValidationKeys.PASSWORD, message),
    })


def date_format(fmt: str = "%Y-%m-%d", message: str | None = None) -> Rule:
    """Mark a property as a date; the type itself comes from the annotation or type_()."""
    return Rule(ValidationKeys.DATE, {
        ValidationKeys.DATE: fmt,
        "message": _message(ValidationKeys.DATE, message),
    })


# ============================================================================
# Class decorator
# ============================================================================

def model(description: str | None = None, *, name: str | None = None) -> Callable[[C], C]:
    """Register a model class so type names can refer to it."""

    def decorate(cls: C) -> C:
        registry.register(cls, name)
        if description:
            Metadata.set_description(cls, description)
        return cls

    return decorate
