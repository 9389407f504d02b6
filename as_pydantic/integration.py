"""Entry points - model_to_schema and the pydantic namespace factory.

The factory is only placed on a namespace by an explicit install() call:

    import pydantic
    from as_pydantic import install

    install()
    UserSchema = pydantic.from_model(User)
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from as_pydantic.config import settings
from as_pydantic.errors import Result, capture, factory_conflict
from as_pydantic.logging import get_logger
from as_pydantic.metadata import Model, registry
from as_pydantic.validation import synthesize_model

log = get_logger("integration")

_FACTORY_MARKER = "__as_pydantic_factory__"


def ensure_registered(cls: type[Model]) -> None:
    """Register a model class by constructing a default instance."""
    if not registry.is_registered(cls):
        cls()


def model_to_schema(model: type[Model] | Model) -> type[BaseModel]:
    """Synthesize the pydantic model for a model class or instance.

    Raises:
        TypeError: model is not a Model subclass or instance
        SchemaSynthesisError subclasses when a property cannot be synthesized
    """
    cls = model if isinstance(model, type) else type(model)
    if not issubclass(cls, Model):
        raise TypeError(f"model_to_schema() expects a Model class or instance, got {model!r}")
    ensure_registered(cls)
    return synthesize_model(cls)


def model_to_schema_result(model: type[Model] | Model) -> Result:
    """model_to_schema() returning Ok(schema) or Err(AppError)."""
    return capture(model_to_schema, model, origin="integration.model_to_schema")


def _factory(model: type[Model] | Model) -> type[BaseModel]:
    return model_to_schema(model)


setattr(_factory, _FACTORY_MARKER, True)
_factory.__doc__ = model_to_schema.__doc__


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", None) or type(target).__name__


def is_installed(target: Any = None, name: str | None = None) -> bool:
    target = _default_target(target)
    return getattr(getattr(target, name or settings.FACTORY_NAME, None), _FACTORY_MARKER, False) is True


def install(target: Any = None, name: str | None = None) -> bool:
    """Place the model_to_schema factory on a namespace (pydantic by default).

    Returns True when the factory is available under name afterwards.
    An attribute already taken by something else is never replaced, and
    targets that refuse the attribute are skipped.
    """
    target = _default_target(target)
    name = name or settings.FACTORY_NAME
    current = getattr(target, name, None)

    if getattr(current, _FACTORY_MARKER, False) is True:
        return True
    if current is not None:
        error = factory_conflict(name, _target_name(target), origin="integration.install").error
        log.warning("factory_slot_taken", factory=name, target=_target_name(target), error=error.message)
        return False

    try:
        setattr(target, name, _factory)
    except (AttributeError, TypeError) as e:
        log.warning("factory_install_skipped", factory=name, target=_target_name(target), error=str(e))
        return False

    log.info("factory_installed", factory=name, target=_target_name(target))
    return True


def uninstall(target: Any = None, name: str | None = None) -> bool:
    """Remove a previously installed factory; foreign attributes are left alone."""
    target = _default_target(target)
    name = name or settings.FACTORY_NAME
    if not is_installed(target, name):
        return False
    delattr(target, name)
    log.info("factory_uninstalled", factory=name, target=_target_name(target))
    return True


def _default_target(target: Any) -> Any:
    if target is not None:
        return target
    import pydantic

    return pydantic


__all__ = [
    "ensure_registered",
    "model_to_schema",
    "model_to_schema_result",
    "install",
    "uninstall",
    "is_installed",
]
