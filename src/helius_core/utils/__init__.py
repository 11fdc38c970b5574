"""Shared utilities."""

from helius_core.utils.json_serializers import json_serializer

__all__ = ["json_serializer"]
