"""Monadic Error Handling Types

Result/Either types for per-property synthesis outcomes, plus the error
code taxonomy and the immutable error record every synthesis failure
carries. Exceptions raised by the schema compiler wrap an AppError (see
handlers.py), so callers can pick either exception flow or Result flow.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E7xxx: Schema synthesis errors
    E9xxx: Internal/Unknown errors
    """
    # Schema synthesis (E7xxx)
    E7000_SYNTHESIS_GENERIC = 7000
    E7001_MISSING_TYPE = 7001
    E7002_UNKNOWN_TYPE = 7002
    E7003_CONVERSION_FAILED = 7003
    E7004_INVALID_REFINEMENT = 7004
    E7010_FACTORY_CONFLICT = 7010

    # Internal (E9xxx)
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def category(self) -> str:
        return "synthesis" if 7000 <= self.value < 8000 else "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was built."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Synthesis error record.

    Carries the typed code, a readable message, structured metadata
    (model, field, type name, ...), tracing context and the optional cause.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def to_dict(self) -> dict:
        """Flat form for structured log events."""
        return {
            "code": self.code.name,
            "category": self.code.category,
            "message": self.message,
            "origin": self.context.origin,
            "correlation_id": self.context.correlation_id,
            **self.metadata,
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]
