"""
Domain error type for failed Helius API calls.

Provides an immutable, typed exception carrying the error kind, retry
advice and the operation being attempted, plus predicates for callers
that hold an arbitrary caught value.
"""

from typing import Any

# Import ErrorKind from canonical source to avoid duplicate enum issues
from helius_core.types import ErrorKind

# Safe, non-leaky text for the kinds most likely to reach an end user.
# Every other kind surfaces its diagnostic message verbatim.
USER_MESSAGES = {
    ErrorKind.API_KEY_INVALID: (
        "Invalid API key. Please check your API key in the Helius dashboard."
    ),
    ErrorKind.API_RATE_LIMIT: (
        "Rate limit exceeded. Please wait before making more requests."
    ),
    ErrorKind.WEBHOOK_ADDRESS_LIMIT: (
        "Webhook address limit exceeded. Maximum 100,000 addresses per webhook."
    ),
    ErrorKind.INSUFFICIENT_FUNDS: "Insufficient funds for this transaction.",
}


class HeliusError(Exception):
    """
    Classified error from a Helius API call.

    Instances are read-only once constructed. They are normally produced by
    ``classify()`` at the point a failure is caught, but may be constructed
    directly when the caller already knows the kind.

    Attributes:
        kind: Which situation this error represents
        message: Raw diagnostic description
        status_code: HTTP status, only when the failure came from a response
        retryable: Advisory flag, True only when explicitly set
        operation: Caller-supplied label of the action being attempted
        cause: Original caught value, if any
    """

    def __init__(
        self,
        kind: ErrorKind | str,
        message: str,
        *,
        status_code: int | None = None,
        retryable: bool = False,
        operation: str | None = None,
        cause: Any = None,
    ):
        super().__init__(message)
        object.__setattr__(self, "_kind", ErrorKind(kind))
        object.__setattr__(self, "_message", message)
        object.__setattr__(self, "_status_code", status_code)
        object.__setattr__(self, "_retryable", bool(retryable))
        object.__setattr__(self, "_operation", operation)
        object.__setattr__(self, "_cause", cause)

    def __setattr__(self, name: str, value: Any) -> None:
        # Traceback bookkeeping must stay writable so the error can be raised
        if name.startswith("__") or name == "args":
            super().__setattr__(name, value)
            return
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def retryable(self) -> bool:
        return self._retryable

    @property
    def operation(self) -> str | None:
        return self._operation

    @property
    def cause(self) -> Any:
        return self._cause

    def is_retryable(self) -> bool:
        return self._retryable

    def get_user_message(self) -> str:
        """Return text safe to show an end user."""
        return USER_MESSAGES.get(self._kind, self._message)

    def with_operation(self, operation: str | None) -> "HeliusError":
        """Return a copy of this error labelled with ``operation``."""
        return type(self)(
            self._kind,
            self._message,
            status_code=self._status_code,
            retryable=self._retryable,
            operation=operation,
            cause=self._cause,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe view of the error for structured logging."""
        return {
            "kind": self._kind.value,
            "message": self._message,
            "status_code": self._status_code,
            "retryable": self._retryable,
            "operation": self._operation,
        }

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self._kind.value!r}, "
            f"message={self._message!r}, status_code={self._status_code!r})"
        )

    def __reduce__(self):
        return (
            _rebuild_helius_error,
            (
                type(self),
                self._kind,
                self._message,
                self._status_code,
                self._retryable,
                self._operation,
            ),
        )


def _rebuild_helius_error(cls, kind, message, status_code, retryable, operation):
    return cls(
        kind,
        message,
        status_code=status_code,
        retryable=retryable,
        operation=operation,
    )


# =============================================================================
# Classification Utilities
# =============================================================================


def is_helius_error(error: Any) -> bool:
    """Check if a caught value is a classified HeliusError."""
    return isinstance(error, HeliusError)


def is_retryable_error(error: Any) -> bool:
    """
    Check if a caught value should be retried.

    Only classified errors flagged retryable qualify. Strings, dicts, None
    and unclassified exceptions are never retryable here; classify them
    first.
    """
    return is_helius_error(error) and error.is_retryable()
