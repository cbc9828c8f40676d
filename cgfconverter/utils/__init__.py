"""Utility functions for cgfconverter."""

from cgfconverter.utils.logging import (
    setup_logging,
    get_logger,
    StructuredLogger,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "StructuredLogger",
]
