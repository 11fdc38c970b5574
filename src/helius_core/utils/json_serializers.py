"""Shared JSON serialization utilities for type-safe JSON encoding."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any


def _serialize_known_type(obj: Any) -> tuple[bool, Any]:
    """Try to serialize by known type. Returns (handled, result)."""
    if isinstance(obj, (datetime, date)):
        return True, obj.isoformat()
    if isinstance(obj, Decimal):
        return True, float(obj)
    if isinstance(obj, Path):
        return True, str(obj)
    if isinstance(obj, Enum):
        return True, obj.value
    return False, None


def json_serializer(obj: Any) -> Any:
    """
    Fallback serializer for ``json.dumps(default=...)``.

    Keeps log fields typed instead of stringifying everything:
    - datetime/date → ISO 8601 string
    - Decimal → float (lamport/SOL amounts)
    - Path → string
    - Enums (ErrorKind) → value
    - Objects with to_dict() (HeliusError) → that dict
    - Everything else → string

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable representation
    """
    handled, result = _serialize_known_type(obj)
    if handled:
        return result
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return str(obj)


__all__ = ["json_serializer"]
