"""
Failure adapter for values caught around Helius API calls.

Normalizes whatever an HTTP client raised into a closed union so the
classifier only deals with two shapes:

- TransportFailure: an HTTP response was received with a numeric status
- GenericFailure: anything else, reduced to a plain message string

Recognized client shapes:
- aiohttp.ClientResponseError (status on the exception itself)
- requests.HTTPError (response.status_code, JSON body via response.json()
  when the content is already loaded)
- Any object or mapping with response.status and response.data/body
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import aiohttp
import requests

_MISSING = object()

# Keys checked, in order, on a response descriptor
STATUS_FIELDS = ("status", "status_code")
BODY_FIELDS = ("data", "body")


@dataclass(frozen=True)
class TransportFailure:
    """Failure that carries an HTTP response status."""

    status: int
    body: Any = None
    message: str = ""


@dataclass(frozen=True)
class GenericFailure:
    """Failure without a usable HTTP response."""

    message: str


Failure = TransportFailure | GenericFailure


def _field(obj: Any, name: str, default: Any = None) -> Any:
    """Read an attribute or mapping key without letting lookups raise."""
    if isinstance(obj, Mapping):
        try:
            return obj.get(name, default)
        except Exception:
            return default
    try:
        return getattr(obj, name, default)
    except Exception:
        return default


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


def _as_status(value: Any) -> int | None:
    # bool is an int subclass but never a status code
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return int(value)


def failure_message(failure: Any) -> str:
    """
    Derive a plain message string from a caught value.

    Prefers a non-empty ``message`` attribute or key, then the string
    conversion. Exceptions with an empty string fall back to their type name.
    """
    message = _field(failure, "message")
    if isinstance(message, str) and message:
        return message

    text = _safe_str(failure)
    if not text and isinstance(failure, BaseException):
        return type(failure).__name__
    return text


def body_error(body: Any) -> str | None:
    """
    Extract the ``error`` field from a response body.

    JSON-RPC error objects ({"code": ..., "message": ...}) resolve to their
    message. Returns None when the body carries no usable error text.
    """
    if body is None:
        return None

    error = _field(body, "error")
    if isinstance(error, Mapping):
        error = _field(error, "message") or error
    if not error:
        return None
    return _safe_str(error)


def _response_body(response: Any) -> Any:
    for name in BODY_FIELDS:
        value = _field(response, name, _MISSING)
        if value is not _MISSING and value is not None:
            return value

    # Only decode a body requests has already loaded; an unread stream would
    # hit the socket and a consumed one raises RuntimeError
    if isinstance(response, requests.Response):
        if not isinstance(_field(response, "_content"), bytes):
            return None
        try:
            return response.json()
        except Exception:
            return None
    return None


def _response_status(response: Any) -> int | None:
    for name in STATUS_FIELDS:
        status = _as_status(_field(response, name))
        if status is not None:
            return status
    return None


def to_failure(failure: Any) -> Failure:
    """
    Convert an arbitrary caught value into a TransportFailure or GenericFailure.

    Never raises. A response descriptor without a numeric status is treated
    as absent.

    Args:
        failure: Anything caught from an API call

    Returns:
        Normalized failure
    """
    if isinstance(failure, (TransportFailure, GenericFailure)):
        return failure

    message = failure_message(failure)

    response = _field(failure, "response")
    if response is not None:
        status = _response_status(response)
        if status is not None:
            return TransportFailure(
                status=status,
                body=_response_body(response),
                message=message,
            )

    if isinstance(failure, aiohttp.ClientResponseError):
        status = _as_status(failure.status)
        if status is not None:
            return TransportFailure(
                status=status,
                body=None,
                message=message,
            )

    return GenericFailure(message=message)


__all__ = [
    "Failure",
    "GenericFailure",
    "TransportFailure",
    "body_error",
    "failure_message",
    "to_failure",
]
