"""
Error classification and domain error type.

Provides:
- ErrorKind enum for classifying errors
- HeliusError, the immutable classified error
- classify() and HeliusErrorClassifier for turning caught failures into errors
- Failure adapter for aiohttp / requests / duck-typed response errors
"""

from helius_core.errors.classifier import (
    MESSAGE_KIND_MARKERS,
    RETRYABLE_STATUSES,
    STATUS_KIND_MAP,
    HeliusErrorClassifier,
    classify,
    classify_http_status,
    classify_message,
)
from helius_core.errors.exceptions import (
    USER_MESSAGES,
    HeliusError,
    is_helius_error,
    is_retryable_error,
)
from helius_core.errors.transport import (
    GenericFailure,
    TransportFailure,
    to_failure,
)
from helius_core.types import ErrorKind

__all__ = [
    # Enums
    "ErrorKind",
    # Error type
    "HeliusError",
    "USER_MESSAGES",
    # Classification
    "classify",
    "classify_http_status",
    "classify_message",
    "HeliusErrorClassifier",
    "STATUS_KIND_MAP",
    "RETRYABLE_STATUSES",
    "MESSAGE_KIND_MARKERS",
    # Predicates
    "is_helius_error",
    "is_retryable_error",
    # Failure adapter
    "TransportFailure",
    "GenericFailure",
    "to_failure",
]
