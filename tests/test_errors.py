"""Tests for the error types and exception wrappers."""

import pytest

from as_pydantic.errors import (
    AppErrorException,
    Err,
    ErrorCode,
    MissingTypeError,
    Ok,
    SchemaSynthesisError,
    UnknownTypeError,
    capture,
    conversion_failed,
    missing_type,
    raise_error,
    unknown_type,
)


class TestErrorCodes:

    def test_categories(self):
        assert ErrorCode.E7002_UNKNOWN_TYPE.category == "synthesis"
        assert ErrorCode.E9001_UNEXPECTED_ERROR.category == "internal"


class TestBuilders:

    def test_unknown_type(self):
        error = unknown_type("Widget").error
        assert error.message == "Unknown type: Widget"
        assert error.metadata["type_name"] == "Widget"
        assert str(error) == "[E7002_UNKNOWN_TYPE] Unknown type: Widget"

    def test_missing_type_drops_empty_metadata(self):
        error = missing_type("street", model="Address").error
        assert error.metadata == {"model": "Address", "field": "street"}

    def test_conversion_failed_keeps_cause(self):
        cause = ValueError("boom")
        error = conversion_failed("Order", cause).error
        assert error.message == "Failed to convert model Order: boom"
        assert error.cause is cause
        flat = error.to_dict()
        assert flat["code"] == "E7003_CONVERSION_FAILED"
        assert flat["model"] == "Order"
        assert flat["category"] == "synthesis"


class TestExceptions:

    def test_raise_error(self):
        with pytest.raises(UnknownTypeError) as exc:
            raise_error(unknown_type("Widget").error, UnknownTypeError)
        assert isinstance(exc.value, SchemaSynthesisError)
        assert isinstance(exc.value, AppErrorException)
        assert str(exc.value) == "Unknown type: Widget"


class TestCapture:

    def test_success(self):
        assert capture(lambda: 3).unwrap() == 3

    def test_app_errors_keep_their_code(self):
        def fail():
            raise MissingTypeError(missing_type("x").error)

        result = capture(fail)
        assert result.is_err()
        assert result.unwrap_err().code == ErrorCode.E7001_MISSING_TYPE

    def test_other_exceptions_are_unexpected(self):
        def fail():
            raise RuntimeError("surprise")

        error = capture(fail, origin="test").unwrap_err()
        assert error.code == ErrorCode.E9001_UNEXPECTED_ERROR
        assert error.message == "surprise"

    def test_result_variants(self):
        assert Ok(3).is_ok() and Ok(3).unwrap() == 3
        failed = Err(unknown_type("A").error)
        assert failed.is_err()
        with pytest.raises(ValueError, match="Called unwrap on Err"):
            failed.unwrap()
