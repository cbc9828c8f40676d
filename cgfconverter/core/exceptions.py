"""Custom exceptions for cgfconverter."""

from typing import Any, Optional


class CgfConverterError(Exception):
    """Base exception for cgfconverter."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(CgfConverterError):
    """Raised when a settings file is invalid."""

    pass


class FileFilterError(CgfConverterError):
    """Raised when a file filter cannot be expanded."""

    def __init__(self, spec: str, reason: str):
        super().__init__(f"Failed to expand file filter '{spec}': {reason}")
        self.spec = spec
        self.reason = reason
