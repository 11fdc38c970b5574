import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from helius_core.errors.exceptions import HeliusError
from helius_core.types import ErrorKind
from helius_core.utils.json_serializers import json_serializer


class TestJsonSerializer:
    def test_datetime(self):
        dt = datetime(2026, 1, 15, 10, 30, 0)
        assert json_serializer(dt) == "2026-01-15T10:30:00"

    def test_date(self):
        assert json_serializer(date(2026, 1, 15)) == "2026-01-15"

    def test_decimal_to_float(self):
        assert json_serializer(Decimal("0.000005")) == 0.000005

    def test_path(self):
        assert json_serializer(Path("/var/log/helius.log")) == "/var/log/helius.log"

    def test_enum_value(self):
        assert json_serializer(ErrorKind.API_RATE_LIMIT) == "API_RATE_LIMIT"

    def test_object_with_to_dict(self):
        error = HeliusError(ErrorKind.INSUFFICIENT_FUNDS, "insufficient funds")
        assert json_serializer(error)["kind"] == "INSUFFICIENT_FUNDS"

    def test_fallback_to_str(self):
        class Custom:
            def __str__(self):
                return "custom"

        assert json_serializer(Custom()) == "custom"

    def test_used_with_json_dumps(self):
        payload = {"at": date(2026, 1, 1), "amount": Decimal("1.5")}
        assert json.loads(json.dumps(payload, default=json_serializer)) == {
            "at": "2026-01-01",
            "amount": 1.5,
        }
