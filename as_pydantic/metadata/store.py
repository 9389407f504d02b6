"""Metadata store - the reflection surface the schema compiler reads.

Declarations are collected on the class at definition time; everything
returned here is assembled fresh on each call, so a caller always sees
the class as it is now.
"""
from __future__ import annotations

import builtins
import inspect
import sys
import typing
from dataclasses import dataclass, field
from typing import Any
from weakref import WeakKeyDictionary

from . import registry


@dataclass(frozen=True, slots=True)
class ModelMetadata:
    """Everything known about one model class."""
    validation: dict[str, dict[str, dict[str, Any]]] = field(default_factory=dict)
    properties: dict[str, Any] = field(default_factory=dict)
    description: dict[str, str] = field(default_factory=dict)
    class_description: str | None = None


class Metadata:
    """Class-level registry of descriptions plus metadata queries."""

    _class_descriptions: WeakKeyDictionary[type, str] = WeakKeyDictionary()
    _libraries: dict[str, str] = {}

    @classmethod
    def get(cls, target: Any) -> ModelMetadata | None:
        """Full metadata for a model class (or instance), None for other types."""
        target = target if isinstance(target, type) else type(target)
        if not hasattr(target, "_declared_props"):
            return None

        declarations = _declarations(target)
        hints = _declared_types(target)
        return ModelMetadata(
            validation={name: decl.record() for name, decl in declarations.items()},
            properties={name: hints[name] for name in declarations if name in hints},
            description={name: decl.description for name, decl in declarations.items() if decl.description},
            class_description=cls.description(target),
        )

    @classmethod
    def description(cls, target: Any, prop: str | None = None) -> str | None:
        """Description of a class, or of one of its properties."""
        target = target if isinstance(target, type) else type(target)
        if prop is not None:
            declaration = _declarations(target).get(prop)
            return declaration.description if declaration is not None else None
        explicit = cls._class_descriptions.get(target)
        if explicit:
            return explicit
        doc = vars(target).get("__doc__")
        return inspect.cleandoc(doc) if doc else None

    @classmethod
    def set_description(cls, target: type, text: str) -> None:
        cls._class_descriptions[target] = text

    @classmethod
    def register_library(cls, name: str, version: str) -> None:
        """Record a library using this metadata store; names are unique."""
        if name in cls._libraries:
            raise ValueError(f"Library already {name} registered with version {cls._libraries[name]}")
        cls._libraries[name] = version

    @classmethod
    def libraries(cls) -> dict[str, str]:
        return dict(cls._libraries)


def _declarations(target: type) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for klass in reversed(target.__mro__):
        merged.update(vars(klass).get("_declared_props", {}))
    return merged


class _AnnotationNamespace(dict):
    """Name lookup for string annotations.

    Names are found in the class, its module, builtins and the model
    registry. Anything else becomes a named stand-in class, resolved by
    name when the schema is synthesized.
    """

    def __init__(self, klass: type):
        super().__init__({klass.__name__: klass})
        module = sys.modules.get(klass.__module__)
        self._globals = vars(module) if module is not None else {}

    def __missing__(self, key: str) -> Any:
        if key in self._globals:
            return self._globals[key]
        if hasattr(builtins, key):
            return getattr(builtins, key)
        return registry.lookup(key) or type(key, (), {"__module__": __name__})


def _evaluate(annotation: Any, namespace: _AnnotationNamespace) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, {}, namespace)
    except Exception:
        # not an expression we can evaluate; keep the text
        return annotation


def _declared_types(target: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError):
        pass
    # Some forward reference is unresolvable: evaluate each annotation on its own
    hints: dict[str, Any] = {}
    for klass in reversed(target.__mro__):
        namespace = _AnnotationNamespace(klass)
        for name, annotation in inspect.get_annotations(klass).items():
            hints[name] = _evaluate(annotation, namespace)
    return hints
