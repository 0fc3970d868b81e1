from .errors import ConfigError, ErrorCode, InvalidFormatError, MissingVariableError
from .logger import JsonFormatter, PlainFormatter, configure_logging, get_logger

__all__ = [
    "ConfigError",
    "ErrorCode",
    "InvalidFormatError",
    "MissingVariableError",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
]
