"""Core functionality for cgfconverter."""

from cgfconverter.core.config import (
    Configuration,
    ExitCode,
    LoggingConfig,
    OutputFormat,
    Settings,
    get_default_settings,
    load_settings,
)
from cgfconverter.core.exceptions import (
    CgfConverterError,
    ConfigurationError,
    FileFilterError,
)
from cgfconverter.core.usage import format_usage, print_summary, print_usage

__all__ = [
    # Config classes
    "Configuration",
    "ExitCode",
    "OutputFormat",
    "Settings",
    "LoggingConfig",
    # Config functions
    "get_default_settings",
    "load_settings",
    # Usage rendering
    "format_usage",
    "print_usage",
    "print_summary",
    # Exceptions
    "CgfConverterError",
    "ConfigurationError",
    "FileFilterError",
]
