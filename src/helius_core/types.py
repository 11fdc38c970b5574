"""
Core types and protocols used across modules.

This module provides the error taxonomy enum and the classifier protocol that
are shared across the library to keep error handling consistent.
"""

from enum import Enum
from typing import Any, Protocol


class ErrorKind(str, Enum):
    """
    Closed set of situations a failed Helius API call can represent.

    Values are stable string identifiers. Calling code logs and compares
    them, so they must not change once released.

    Kinds:
        API_KEY_INVALID: Authentication rejected (HTTP 401)
        API_RATE_LIMIT: Too many requests (HTTP 429), retry after backoff
        API_REQUEST_FAILED: Server-side failure (HTTP 500/502/503)
        ASSET_NOT_FOUND: Requested asset does not exist (HTTP 404)
        WEBHOOK_NOT_FOUND: Requested webhook does not exist
        WEBHOOK_ADDRESS_LIMIT: Webhook exceeds the 100,000 address policy
        TRANSACTION_FAILED: Transaction was rejected on-chain
        TRANSACTION_SIMULATE_FAILED: Preflight simulation rejected the transaction
        INSUFFICIENT_FUNDS: Payer balance does not cover the transaction
        INVALID_INPUT: Caller supplied malformed parameters
        NETWORK_ERROR: Any other HTTP response status
        UNKNOWN: Nothing recognizable in the failure
    """

    API_KEY_INVALID = "API_KEY_INVALID"
    API_RATE_LIMIT = "API_RATE_LIMIT"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"

    ASSET_NOT_FOUND = "ASSET_NOT_FOUND"

    WEBHOOK_NOT_FOUND = "WEBHOOK_NOT_FOUND"
    WEBHOOK_ADDRESS_LIMIT = "WEBHOOK_ADDRESS_LIMIT"

    TRANSACTION_FAILED = "TRANSACTION_FAILED"
    TRANSACTION_SIMULATE_FAILED = "TRANSACTION_SIMULATE_FAILED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"

    INVALID_INPUT = "INVALID_INPUT"

    NETWORK_ERROR = "NETWORK_ERROR"

    UNKNOWN = "UNKNOWN_ERROR"


class ErrorClassifier(Protocol):
    """
    Protocol for error classification implementations.

    Implementations turn whatever an API client raised into a classified
    domain error without ever raising themselves.
    """

    def classify_error(self, error: Any, operation: str | None = None) -> Any:
        """
        Classify a caught failure into a domain error.

        Args:
            error: Anything caught from an API call
            operation: Label of the high-level action being attempted

        Returns:
            Classified domain error
        """
        ...

    def is_retryable(self, error: Any) -> bool:
        """
        Check if the failure is advisory-safe to retry.

        Args:
            error: Anything caught from an API call

        Returns:
            True if the classified error is retryable
        """
        ...


__all__ = [
    "ErrorKind",
    "ErrorClassifier",
]
