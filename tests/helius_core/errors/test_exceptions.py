"""
Tests for the HeliusError type and predicates.
"""

import pickle

import pytest

from helius_core.errors.exceptions import (
    USER_MESSAGES,
    HeliusError,
    is_helius_error,
    is_retryable_error,
)
from helius_core.types import ErrorKind


class TestHeliusError:
    """Test HeliusError construction and fields."""

    def test_basic_error(self):
        err = HeliusError(ErrorKind.UNKNOWN, "Something went wrong")
        assert err.kind is ErrorKind.UNKNOWN
        assert err.message == "Something went wrong"
        assert err.status_code is None
        assert err.retryable is False
        assert err.operation is None
        assert err.cause is None

    def test_explicit_fields_preserved(self):
        err = HeliusError(
            ErrorKind.API_REQUEST_FAILED,
            "upstream down",
            status_code=502,
            retryable=True,
            operation="getAsset",
        )
        assert err.status_code == 502
        assert err.retryable is True
        assert err.is_retryable() is True
        assert err.operation == "getAsset"

    def test_kind_accepts_string_value(self):
        err = HeliusError("API_RATE_LIMIT", "slow down")
        assert err.kind is ErrorKind.API_RATE_LIMIT

    def test_unknown_kind_string_rejected(self):
        with pytest.raises(ValueError):
            HeliusError("NOT_A_KIND", "x")

    def test_is_exception(self):
        err = HeliusError(ErrorKind.NETWORK_ERROR, "bad gateway")
        assert isinstance(err, Exception)
        assert str(err) == "bad gateway"

    def test_can_be_raised_and_chained(self):
        cause = ValueError("original")
        with pytest.raises(HeliusError) as exc_info:
            try:
                raise cause
            except ValueError as exc:
                raise HeliusError(ErrorKind.UNKNOWN, "wrapped", cause=exc) from exc

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.cause is cause

    def test_retryable_coerced_to_bool(self):
        err = HeliusError(ErrorKind.UNKNOWN, "x", retryable=1)
        assert err.retryable is True

    def test_repr_includes_kind_and_status(self):
        err = HeliusError(ErrorKind.API_KEY_INVALID, "nope", status_code=401)
        assert "API_KEY_INVALID" in repr(err)
        assert "401" in repr(err)

    def test_to_dict(self):
        err = HeliusError(
            ErrorKind.API_RATE_LIMIT,
            "slow down",
            status_code=429,
            retryable=True,
            operation="getAssetsByOwner",
        )
        assert err.to_dict() == {
            "kind": "API_RATE_LIMIT",
            "message": "slow down",
            "status_code": 429,
            "retryable": True,
            "operation": "getAssetsByOwner",
        }

    def test_pickle_round_trip(self):
        err = HeliusError(
            ErrorKind.API_REQUEST_FAILED,
            "boom",
            status_code=500,
            retryable=True,
            operation="parseTransactions",
        )
        restored = pickle.loads(pickle.dumps(err))
        assert restored.to_dict() == err.to_dict()


class TestImmutability:
    @pytest.mark.parametrize(
        "field",
        ["kind", "message", "status_code", "retryable", "operation", "cause"],
    )
    def test_fields_are_read_only(self, field):
        err = HeliusError(ErrorKind.UNKNOWN, "x")
        with pytest.raises(AttributeError):
            setattr(err, field, "changed")

    def test_new_attributes_rejected(self):
        err = HeliusError(ErrorKind.UNKNOWN, "x")
        with pytest.raises(AttributeError):
            err.extra = 1


class TestUserMessage:
    @pytest.mark.parametrize("kind", list(USER_MESSAGES))
    def test_curated_kinds(self, kind):
        err = HeliusError(kind, "raw upstream text")
        assert err.get_user_message() == USER_MESSAGES[kind]
        assert "raw upstream text" not in err.get_user_message()

    def test_curated_text(self):
        err = HeliusError(ErrorKind.API_KEY_INVALID, "401")
        assert err.get_user_message() == (
            "Invalid API key. Please check your API key in the Helius dashboard."
        )

    @pytest.mark.parametrize(
        "kind",
        [kind for kind in ErrorKind if kind not in USER_MESSAGES],
    )
    def test_other_kinds_return_raw_message(self, kind):
        err = HeliusError(kind, "raw upstream text")
        assert err.get_user_message() == "raw upstream text"

    def test_idempotent(self):
        err = HeliusError(ErrorKind.API_RATE_LIMIT, "429")
        assert err.get_user_message() == err.get_user_message()


class TestPredicates:
    @pytest.mark.parametrize(
        "value",
        ["error", 42, 3.5, None, {"kind": "API_RATE_LIMIT"}, [], ValueError("x")],
    )
    def test_is_helius_error_false_for_other_values(self, value):
        assert is_helius_error(value) is False

    def test_is_helius_error_true(self):
        assert is_helius_error(HeliusError(ErrorKind.UNKNOWN, "x")) is True

    def test_is_helius_error_true_for_subclass(self):
        class WebhookError(HeliusError):
            pass

        assert is_helius_error(WebhookError(ErrorKind.WEBHOOK_NOT_FOUND, "x")) is True

    @pytest.mark.parametrize(
        "value",
        ["error", 42, None, {"retryable": True}, RuntimeError("503")],
    )
    def test_is_retryable_error_false_for_non_domain_values(self, value):
        assert is_retryable_error(value) is False

    def test_is_retryable_error_follows_flag(self):
        assert is_retryable_error(
            HeliusError(ErrorKind.API_RATE_LIMIT, "x", retryable=True)
        ) is True
        assert is_retryable_error(HeliusError(ErrorKind.API_RATE_LIMIT, "x")) is False

    def test_is_retryable_error_ignores_lookalike(self):
        class LookAlike:
            def is_retryable(self):
                return True

        assert is_retryable_error(LookAlike()) is False
