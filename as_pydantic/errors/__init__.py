"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either monad and Rust's
Result type, with exception wrappers for the schema compiler.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- SchemaSynthesisError and subclasses: what the compiler raises

Usage:
    from as_pydantic.errors import UnknownTypeError, unknown_type, raise_error

    if model is None:
        raise_error(unknown_type(name).error, UnknownTypeError)

    try:
        schema = model_to_schema(Order)
    except UnknownTypeError as exc:
        log.error(exc.error.message, code=exc.error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    synthesis_error,
    missing_type,
    unknown_type,
    conversion_failed,
    invalid_refinement,
    factory_conflict,
    unexpected_error,
)

from .handlers import (
    AppErrorException,
    SchemaSynthesisError,
    MissingTypeError,
    UnknownTypeError,
    ConversionError,
    InvalidRefinementError,
    raise_error,
    capture,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Builders
    "synthesis_error",
    "missing_type",
    "unknown_type",
    "conversion_failed",
    "invalid_refinement",
    "factory_conflict",
    "unexpected_error",
    # Exceptions
    "AppErrorException",
    "SchemaSynthesisError",
    "MissingTypeError",
    "UnknownTypeError",
    "ConversionError",
    "InvalidRefinementError",
    "raise_error",
    "capture",
]
