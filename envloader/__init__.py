from .bootstrap import create_loader, exit_on_config_error, load_env_file
from .conversions import ResolvedValue, ValueKind, parse_bool, parse_int, parse_string
from .loader import EnvLoader
from .ports import Loader
from .utils import (
    ConfigError,
    ErrorCode,
    InvalidFormatError,
    MissingVariableError,
    configure_logging,
    get_logger,
)

__all__ = [
    "Loader",
    "EnvLoader",
    "ValueKind",
    "ResolvedValue",
    "parse_string",
    "parse_int",
    "parse_bool",
    "ConfigError",
    "ErrorCode",
    "MissingVariableError",
    "InvalidFormatError",
    "create_loader",
    "load_env_file",
    "exit_on_config_error",
    "configure_logging",
    "get_logger",
]
