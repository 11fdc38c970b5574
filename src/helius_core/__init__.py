"""
Helius API error classification library.

Turns failures from Helius API calls into a typed, immutable HeliusError
with retry advice and end-user messaging.
"""

from helius_core.errors import (
    HeliusError,
    HeliusErrorClassifier,
    classify,
    is_helius_error,
    is_retryable_error,
)
from helius_core.types import ErrorKind

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "HeliusError",
    "HeliusErrorClassifier",
    "classify",
    "is_helius_error",
    "is_retryable_error",
]
