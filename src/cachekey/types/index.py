"""Typed key index payload structures."""

from __future__ import annotations

from typing import TypedDict


class IndexEntry(TypedDict):
    """Metadata for one key written to the cache backend."""

    written_at_ns: int
    content_hash: str


class IndexPayload(TypedDict):
    """Top-level index payload persisted to disk."""

    version: int
    keys: dict[str, IndexEntry]
