"""Core domain types and logic."""

from .config import ConfigError, Settings, load_settings, load_settings_or_default
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "Settings",
    "load_settings",
    "load_settings_or_default",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
