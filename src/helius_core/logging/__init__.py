"""
Structured logging module.

Provides JSON logging with operation/trace context propagation.
"""

from helius_core.logging.context import (
    clear_log_context,
    get_log_context,
    set_log_context,
)
from helius_core.logging.formatters import ConsoleFormatter, JSONFormatter
from helius_core.logging.setup import (
    get_log_file_path,
    get_logger,
    setup_logging,
)
from helius_core.logging.utilities import log_exception, log_with_context

__all__ = [
    # Setup
    "setup_logging",
    "get_logger",
    "get_log_file_path",
    # Formatters
    "JSONFormatter",
    "ConsoleFormatter",
    # Context
    "set_log_context",
    "get_log_context",
    "clear_log_context",
    # Utilities
    "log_with_context",
    "log_exception",
]
