"""Domain-Specific Error Builders

Ergonomic constructors for typed synthesis errors.
Each builder creates an AppError with the appropriate code and context.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


def synthesis_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7000_SYNTHESIS_GENERIC,
    model: str | None = None,
    field: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create schema synthesis error."""
    meta = {"model": model, "field": field, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def missing_type(field: str | None, *, model: str | None = None, declared: Any = None, origin: str = "") -> Err[AppError]:
    where = f" for '{field}'" if field else ""
    return synthesis_error(
        f"Missing type information{where}",
        code=ErrorCode.E7001_MISSING_TYPE,
        model=model,
        field=field,
        declared=repr(declared) if declared is not None else None,
        origin=origin,
    )


def unknown_type(type_name: str, origin: str = "") -> Err[AppError]:
    return synthesis_error(
        f"Unknown type: {type_name}",
        code=ErrorCode.E7002_UNKNOWN_TYPE,
        origin=origin,
        type_name=type_name,
    )


def conversion_failed(model: str, cause: Exception, origin: str = "") -> Err[AppError]:
    return synthesis_error(
        f"Failed to convert model {model}: {cause}",
        code=ErrorCode.E7003_CONVERSION_FAILED,
        model=model,
        origin=origin,
        cause=cause,
        cause_type=type(cause).__name__,
    )


def invalid_refinement(constraint: str, reason: str, origin: str = "") -> Err[AppError]:
    return synthesis_error(
        f"{constraint.upper()} validator cannot be applied as a refinement: {reason}",
        code=ErrorCode.E7004_INVALID_REFINEMENT,
        origin=origin,
        constraint=constraint,
    )


def factory_conflict(name: str, target: str, origin: str = "") -> Err[AppError]:
    return synthesis_error(
        f"'{name}' is already defined on {target} and cannot be replaced",
        code=ErrorCode.E7010_FACTORY_CONFLICT,
        origin=origin,
        factory=name,
        target=target,
    )


def unexpected_error(cause: Exception, origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message=str(cause) or type(cause).__name__,
        context=ErrorContext(origin=origin),
        metadata={"cause_type": type(cause).__name__},
        cause=cause,
    ))
