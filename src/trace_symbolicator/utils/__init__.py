"""Utility functions and helpers.

- errors: Exception hierarchy
- logging: Structured logging configuration
"""

from trace_symbolicator.utils.errors import (
    CatalogLoadError,
    EntryModuleNotFoundError,
    FrameIndexError,
    PreconditionError,
    SymbolicatorError,
)
from trace_symbolicator.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

__all__ = [
    # Errors
    "CatalogLoadError",
    "EntryModuleNotFoundError",
    "FrameIndexError",
    "PreconditionError",
    "SymbolicatorError",
    # Logging
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
]
