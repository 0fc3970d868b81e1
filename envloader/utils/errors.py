from enum import Enum


class ErrorCode(str, Enum):
    """Configuration error codes."""
    MISSING_VARIABLE = "missing_variable"
    INVALID_FORMAT = "invalid_format"


class ConfigError(RuntimeError):
    """Base error for configuration lookups."""

    code: ErrorCode

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class MissingVariableError(ConfigError):
    """Required variable is unset or empty."""

    code = ErrorCode.MISSING_VARIABLE

    def __init__(self, name: str) -> None:
        super().__init__(name, f"'{name}' is required")


class InvalidFormatError(ConfigError):
    """Variable value does not match the requested type."""

    code = ErrorCode.INVALID_FORMAT

    def __init__(self, name: str, format_label: str) -> None:
        super().__init__(name, f"'{name}' format error; pattern - '{format_label}'")
        self.format_label = format_label
