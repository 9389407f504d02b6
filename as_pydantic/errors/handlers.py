"""Exception Wrappers

Integrates the monadic error handling system with exception-based flow.
The schema compiler raises these synchronously; each one carries the
structured AppError that describes it.
"""
from __future__ import annotations

from as_pydantic.logging import get_logger

from .types import AppError, Err, Ok, Result
from .builders import unexpected_error

log = get_logger("errors.handlers")


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when you need to raise an AppError in code that
    doesn't use the Result monad.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)


class SchemaSynthesisError(AppErrorException):
    """Base class for every failure raised while building a schema."""


class MissingTypeError(SchemaSynthesisError):
    """An actionable property declares no resolvable type."""


class UnknownTypeError(SchemaSynthesisError, LookupError):
    """A non-primitive type name has no registered model."""


class ConversionError(SchemaSynthesisError):
    """Recursive synthesis of a registered model failed."""


class InvalidRefinementError(SchemaSynthesisError, TypeError):
    """A constraint was requested that cannot be applied as a refinement."""


def raise_error(error: AppError, exc_type: type[AppErrorException] = AppErrorException) -> None:
    """Raise AppError as exception.

    Usage:
        if model is None:
            raise_error(unknown_type(name).error, UnknownTypeError)
    """
    raise exc_type(error)


def capture(f, *args, origin: str = "", **kwargs) -> Result:
    """Run f and convert raised errors into a Result.

    AppErrorException subclasses keep their own AppError; anything else
    is reported as an unexpected error.
    """
    try:
        return Ok(f(*args, **kwargs))
    except AppErrorException as e:
        return Err(e.error)
    except Exception as e:
        log.warning("unexpected_error_captured", error_type=type(e).__name__, error_message=str(e), origin=origin)
        return unexpected_error(e, origin=origin)
