#!/usr/bin/env python3
"""
Example demonstrating HeliusError classification.

Builds the kinds of failures an aiohttp or requests based Helius client
raises, classifies each one, and logs the result the way a client method
would. No network access is needed.

Usage:
    python examples/classify_errors_example.py
"""

import logging
from unittest.mock import MagicMock

import aiohttp
import requests

from config import HeliusConfig, configure_logging
from helius_core.errors import classify, is_retryable_error
from helius_core.logging import log_exception, set_log_context

logger = logging.getLogger("examples.classify")


def _requests_failure(status: int, body: bytes) -> requests.HTTPError:
    response = requests.Response()
    response.status_code = status
    response._content = body
    return requests.HTTPError(f"{status} Client Error", response=response)


def sample_failures():
    yield "getAsset", _requests_failure(404, b'{"error": "Asset not found"}')
    yield "getAssetsByOwner", _requests_failure(429, b'{"error": "Too many requests"}')
    yield "getBalance", aiohttp.ClientResponseError(
        MagicMock(), (), status=503, message="Service Unavailable"
    )
    yield "createWebhook", RuntimeError("Webhook exceeds 100,000 addresses")
    yield "sendTransaction", RuntimeError(
        "Transaction simulation failed: insufficient funds for rent"
    )
    yield "parseTransactions", ValueError("unexpected token in JSON")


def main():
    configure_logging(HeliusConfig(log_level="INFO"))

    print("=" * 70)
    print("HeliusError classification example")
    print("=" * 70)

    for operation, failure in sample_failures():
        set_log_context(operation=operation)
        error = classify(failure, operation=operation)

        print()
        print(f"{operation}:")
        print(f"  kind          {error.kind.value}")
        print(f"  status_code   {error.status_code}")
        print(f"  retryable     {is_retryable_error(error)}")
        print(f"  user message  {error.get_user_message()}")

        log_exception(logger, error, "Helius call failed", level=logging.WARNING, include_traceback=False)


if __name__ == "__main__":
    main()
