"""Constraint kinds, built-in patterns and default messages."""


class ValidationKeys:
    """Identifiers for every constraint kind a metadata record can hold."""
    TYPE = "type"
    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    MIN_LENGTH = "minlength"
    MAX_LENGTH = "maxlength"
    STEP = "step"
    PATTERN = "pattern"
    URL = "url"
    EMAIL = "email"
    PASSWORD = "password"
    DATE = "date"
    LIST = "list"
    DESCRIPTION = "description"


class CollectionShapes:
    LIST = "list"
    SET = "set"


# Requires lower, upper, digit and a special character, at least 8 long
PASSWORD_PATTERN = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^A-Za-z0-9\s]).{8,}$"
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
URL_PATTERN = r"^https?://[^\s/$.?#][^\s]*$"

DEFAULT_ERROR_MESSAGES: dict[str, str] = {
    ValidationKeys.REQUIRED: "This field is required",
    ValidationKeys.TYPE: "Invalid type",
    ValidationKeys.MIN: "Value must be at least {min}",
    ValidationKeys.MAX: "Value must be at most {max}",
    ValidationKeys.MIN_LENGTH: "Length must be at least {minlength}",
    ValidationKeys.MAX_LENGTH: "Length must be at most {maxlength}",
    ValidationKeys.STEP: "Value must be a multiple of {step}",
    ValidationKeys.PATTERN: "Value must match pattern: {pattern}",
    ValidationKeys.URL: "Value must be a valid URL",
    ValidationKeys.EMAIL: "Value must be a valid email address",
    ValidationKeys.PASSWORD: "Password must have lower, upper, digit and special characters (8+ long)",
    ValidationKeys.DATE: "Invalid date",
}
