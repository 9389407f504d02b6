"""Model base class.

Subclasses declare attributes with prop(); declarations are collected when
the class is created and replaced by a None default, so instances behave
like plain attribute bags.
"""
from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from . import registry
from .decorators import PropertyDeclaration

if TYPE_CHECKING:
    from pydantic import BaseModel


class Model:
    """Base type for declaratively validated models."""

    _declared_props: ClassVar[dict[str, PropertyDeclaration]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declared = {name: value for name, value in vars(cls).items() if isinstance(value, PropertyDeclaration)}
        for name in declared:
            setattr(cls, name, None)
        cls._declared_props = declared

    def __init__(self, arg: Mapping[str, Any] | Model | None = None, **kwargs: Any):
        # First construction registers classes that were not decorated with @model()
        registry.register(type(self), overwrite=False)
        values = dict(vars(arg) if isinstance(arg, Model) else (arg or {}))
        values.update(kwargs)
        for name in type(self).get_attributes():
            setattr(self, name, values.get(name, getattr(self, name, None)))

    @classmethod
    def get_attributes(cls) -> list[str]:
        """Attribute names in declaration order, base classes first."""
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for name in (*inspect.get_annotations(klass), *vars(klass).get("_declared_props", {})):
                if name not in names and not name.startswith("_"):
                    names.append(name)
        return names

    def to_schema(self) -> type[BaseModel]:
        """Synthesize the pydantic model describing this model's class."""
        from as_pydantic.integration import model_to_schema

        return model_to_schema(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name, None)!r}" for name in self.get_attributes())
        return f"{type(self).__name__}({fields})"
