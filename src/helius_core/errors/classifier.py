"""
Centralized error classification for Helius API calls.

Maps whatever a client call raised into the HeliusError taxonomy:

1. HTTP responses are classified by status code (takes priority)
2. Otherwise the message is matched against known business-rule wording
3. Anything left over is UNKNOWN

Classification never raises; deciding whether to raise the result is
left to the caller.
"""

import logging
from typing import Any

from helius_core.errors.exceptions import HeliusError
from helius_core.errors.transport import (
    GenericFailure,
    TransportFailure,
    body_error,
    to_failure,
)
from helius_core.logging.utilities import log_with_context
from helius_core.types import ErrorKind

logger = logging.getLogger(__name__)

STATUS_KIND_MAP = {
    401: ErrorKind.API_KEY_INVALID,
    429: ErrorKind.API_RATE_LIMIT,
    404: ErrorKind.ASSET_NOT_FOUND,
    500: ErrorKind.API_REQUEST_FAILED,
    502: ErrorKind.API_REQUEST_FAILED,
    503: ErrorKind.API_REQUEST_FAILED,
}

RETRYABLE_STATUSES = frozenset({429, 500, 502, 503})

# Business-rule wording from the API, checked in order (first match wins).
# Matching is case-sensitive: upstream wording changes reclassify to UNKNOWN.
MESSAGE_KIND_MARKERS = (
    (("100,000 addresses", "address limit"), ErrorKind.WEBHOOK_ADDRESS_LIMIT),
    (("insufficient funds",), ErrorKind.INSUFFICIENT_FUNDS),
    (("simulation failed",), ErrorKind.TRANSACTION_SIMULATE_FAILED),
)


def classify_http_status(status: int) -> ErrorKind:
    """Classify an HTTP response status into an error kind."""
    return STATUS_KIND_MAP.get(status, ErrorKind.NETWORK_ERROR)


def classify_message(message: str) -> ErrorKind:
    """Classify a plain failure message by business-rule wording."""
    for markers, kind in MESSAGE_KIND_MARKERS:
        if any(marker in message for marker in markers):
            return kind
    return ErrorKind.UNKNOWN


def _from_transport(
    failure: TransportFailure, operation: str | None, cause: Any
) -> HeliusError:
    return HeliusError(
        classify_http_status(failure.status),
        body_error(failure.body) or failure.message,
        status_code=failure.status,
        retryable=failure.status in RETRYABLE_STATUSES,
        operation=operation,
        cause=cause,
    )


def _from_message(
    failure: GenericFailure, operation: str | None, cause: Any
) -> HeliusError:
    return HeliusError(
        classify_message(failure.message),
        failure.message,
        operation=operation,
        cause=cause,
    )


def classify(failure: Any, operation: str | None = None) -> HeliusError:
    """
    Classify a caught failure into a HeliusError.

    Args:
        failure: Anything caught from an API call (exception, response
            error, string, None, ...)
        operation: Label of the high-level action being attempted,
            e.g. "getAsset" or "createWebhook"

    Returns:
        Classified HeliusError. An already classified error is returned as
        is, or as a copy carrying ``operation`` when it had none

    Example:
        try:
            response = session.post(url, json=payload)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise classify(exc, operation="getAsset") from exc
    """
    if isinstance(failure, HeliusError):
        if operation and failure.operation is None:
            return failure.with_operation(operation)
        return failure

    normalized = to_failure(failure)
    if isinstance(normalized, TransportFailure):
        error = _from_transport(normalized, operation, failure)
    else:
        error = _from_message(normalized, operation, failure)

    log_with_context(
        logger,
        logging.DEBUG,
        f"Classified {operation or 'API'} failure as {error.kind.value}",
        error_kind=error.kind.value,
        status_code=error.status_code,
        retryable=error.retryable,
        operation=operation,
    )
    return error


class HeliusErrorClassifier:
    """
    Error classifier bound to an operation label.

    Useful when one client method catches failures in several places:

        classifier = HeliusErrorClassifier(operation="getAssetsByOwner")
        error = classifier.classify_error(exc)
    """

    def __init__(self, operation: str | None = None):
        self.operation = operation

    def classify_error(self, error: Any, operation: str | None = None) -> HeliusError:
        return classify(error, operation or self.operation)

    def is_retryable(self, error: Any) -> bool:
        return self.classify_error(error).is_retryable()


__all__ = [
    "HeliusErrorClassifier",
    "MESSAGE_KIND_MARKERS",
    "RETRYABLE_STATUSES",
    "STATUS_KIND_MAP",
    "classify",
    "classify_http_status",
    "classify_message",
]
