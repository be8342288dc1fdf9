"""Shared type aliases for cachekey."""

from .common import AvailableKeys, JsonObject, JsonScalar, JsonValue
from .index import IndexEntry, IndexPayload

__all__ = [
    "AvailableKeys",
    "IndexEntry",
    "IndexPayload",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
