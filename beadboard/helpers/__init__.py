"""
Helpers package.
"""

from .exceptions import CommandError, InvalidBeadIdError, SourceUnavailableError
from .logging_helper import BeadboardLogFilter, clear_log_context, configure_logging, set_log_context

__all__ = [
    "BeadboardLogFilter",
    "CommandError",
    "InvalidBeadIdError",
    "SourceUnavailableError",
    "clear_log_context",
    "configure_logging",
    "set_log_context",
]
