"""Model registry - by-name lookup of model classes."""
from __future__ import annotations

from typing import TYPE_CHECKING

from as_pydantic.logging import get_logger

if TYPE_CHECKING:
    from .base import Model

log = get_logger("metadata.registry")

_MODELS: dict[str, type[Model]] = {}


def register(cls: type[Model], name: str | None = None, *, overwrite: bool = True) -> None:
    """Register a model class under its name."""
    key = name or cls.__name__
    current = _MODELS.get(key)
    if current is cls or (current is not None and not overwrite):
        return
    if current is not None:
        log.debug("model_replaced", model=key, previous=current.__qualname__, current=cls.__qualname__)
    _MODELS[key] = cls
    log.debug("model_registered", model=key)


def lookup(name: str) -> type[Model] | None:
    """Get a model class by name, None when unknown."""
    return _MODELS.get(name)


def get_model(name: str) -> type[Model]:
    """Get a model class by name."""
    if name not in _MODELS:
        available = ", ".join(_MODELS.keys()) or "none"
        raise KeyError(f"Model '{name}' not registered. Available: {available}")
    return _MODELS[name]


def is_registered(cls: type[Model]) -> bool:
    return cls in _MODELS.values()


def list_models() -> list[str]:
    """List all registered model names."""
    return list(_MODELS)
