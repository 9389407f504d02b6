"""Annotated Type Validators for Schema Refinements

Refinements are attached with Python's Annotated type hint and run as
pydantic after-validators, in the order they were applied. Each one also
contributes its JSON Schema keyword.

Usage:
    from as_pydantic.validation.annotated import Ge, Le, MultipleOf, Pattern

    Score = Annotated[float, Ge(0), Le(100), MultipleOf(5)]
    Code = Annotated[str, Pattern(r"^[A-Z]{3}\\d{3}$")]
"""
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema


def _comparable(value: Any, bound: Any) -> bool:
    """Bounds only apply to values of a matching kind."""
    if isinstance(value, bool):
        return False
    if isinstance(value, datetime) or isinstance(bound, datetime):
        return isinstance(value, datetime) and isinstance(bound, datetime)
    if isinstance(bound, date):
        return isinstance(value, date)
    return isinstance(value, (int, float, Decimal)) and isinstance(bound, (int, float, Decimal))


def _json_value(value: Any) -> Any:
    return value.isoformat() if isinstance(value, date) else value


class _Refinement:
    """Shared plumbing: after-validator over the wrapped schema."""
    __slots__ = ("message",)

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_after_validator_function(self._validate, handler(source_type))

    def _validate(self, v: Any) -> Any:
        raise NotImplementedError

    def _fail(self, default: str) -> None:
        raise ValueError(self.message or default)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, s) == getattr(other, s) for s in self._fields())

    def __hash__(self) -> int:
        return hash((type(self), *(repr(getattr(self, s)) for s in self._fields())))

    def __repr__(self) -> str:
        args = ", ".join(f"{s}={getattr(self, s)!r}" for s in self._fields() if s != "message")
        return f"{type(self).__name__}({args})"

    @classmethod
    def _fields(cls) -> tuple[str, ...]:
        return tuple(s for klass in cls.__mro__ for s in getattr(klass, "__slots__", ()))


# ============================================================================
# Length Validators
# ============================================================================

class MinLen(_Refinement):
    """Minimum length validator (strings and collections)."""
    __slots__ = ("min_length",)

    def __init__(self, min_length: int, message: str | None = None):
        self.min_length, self.message = min_length, message

    def _validate(self, v: Any) -> Any:
        if hasattr(v, "__len__") and len(v) < self.min_length:
            self._fail(f"Length must be at least {self.min_length}, got {len(v)}")
        return v

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        schema = handler(core_schema)
        keyword = "minItems" if schema.get("type") == "array" else "minLength"
        return {**schema, keyword: self.min_length}


class MaxLen(_Refinement):
    """Maximum length validator (strings and collections)."""
    __slots__ = ("max_length",)

    def __init__(self, max_length: int, message: str | None = None):
        self.max_length, self.message = max_length, message

    def _validate(self, v: Any) -> Any:
        if hasattr(v, "__len__") and len(v) > self.max_length:
            self._fail(f"Length must be at most {self.max_length}, got {len(v)}")
        return v

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        schema = handler(core_schema)
        keyword = "maxItems" if schema.get("type") == "array" else "maxLength"
        return {**schema, keyword: self.max_length}


class Pattern(_Refinement):
    """Regex pattern validator; matches anywhere unless the pattern is anchored."""
    __slots__ = ("pattern", "_compiled")

    def __init__(self, pattern: str | re.Pattern[str], message: str | None = None):
        self._compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
        self.pattern, self.message = self._compiled.pattern, message

    def _validate(self, v: Any) -> Any:
        if isinstance(v, str) and not self._compiled.search(v):
            self._fail(f"Value must match pattern: {self.pattern}")
        return v

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {**handler(core_schema), "pattern": self.pattern}

    @classmethod
    def _fields(cls) -> tuple[str, ...]:
        return ("pattern", "message")


# ============================================================================
# Numeric / Date Validators
# ============================================================================

class Ge(_Refinement):
    """Greater than or equal validator (inclusive lower bound)."""
    __slots__ = ("value",)

    def __init__(self, value: Any, message: str | None = None):
        self.value, self.message = value, message

    def _validate(self, v: Any) -> Any:
        if _comparable(v, self.value) and v < self.value:
            self._fail(f"Value must be at least {self.value}")
        return v

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {**handler(core_schema), "minimum": _json_value(self.value)}


class Le(_Refinement):
    """Less than or equal validator (inclusive upper bound)."""
    __slots__ = ("value",)

    def __init__(self, value: Any, message: str | None = None):
        self.value, self.message = value, message

    def _validate(self, v: Any) -> Any:
        if _comparable(v, self.value) and v > self.value:
            self._fail(f"Value must be at most {self.value}")
        return v

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {**handler(core_schema), "maximum": _json_value(self.value)}


class MultipleOf(_Refinement):
    """Multiple of validator."""
    __slots__ = ("factor",)

    def __init__(self, factor: float | int, message: str | None = None):
        self.factor, self.message = factor, message

    def _validate(self, v: Any) -> Any:
        # decimal arithmetic on the shortest repr, so 0.3 is a multiple of 0.1
        if _comparable(v, self.factor) and Decimal(str(v)) % Decimal(str(self.factor)) != 0:
            self._fail(f"Value must be a multiple of {self.factor}")
        return v

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {**handler(core_schema), "multipleOf": self.factor}


# ============================================================================
# Collection Validators
# ============================================================================

class UniqueItems(_Refinement):
    """Rejects collections holding equal items twice (models compare by value)."""
    __slots__ = ()

    def __init__(self, message: str | None = None):
        self.message = message

    def _validate(self, v: list) -> list:
        seen: list[Any] = []
        for item in v:
            if item in seen:
                self._fail(f"Collection contains duplicate item: {item!r}")
            seen.append(item)
        return v

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {**handler(core_schema), "uniqueItems": True}
