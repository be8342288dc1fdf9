"""JSON file key index with tolerant loading, pruning, and atomic saves."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from collections.abc import Mapping
from contextlib import suppress
from pathlib import Path

from cachekey.constants.index import (
    DEFAULT_MAX_INDEX_KEYS,
    INDEX_TEMP_PREFIX,
    INDEX_TEMP_SUFFIX,
    INDEX_VERSION,
)
from cachekey.exceptions import KeyIndexError
from cachekey.types import IndexEntry, IndexPayload

logger = logging.getLogger(__name__)


def new_index() -> IndexPayload:
    """Return an empty index payload."""
    return {
        "version": INDEX_VERSION,
        "keys": {},
    }


def load_index(index_path: Path) -> IndexPayload:
    """Load an index file if valid, otherwise return an empty payload.

    A damaged or foreign index only costs a cold cache, so it is never fatal.
    """
    if not index_path.is_file():
        return new_index()

    try:
        payload = json.loads(index_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable key index %s: %s", index_path, exc)
        return new_index()

    if not isinstance(payload, dict) or payload.get("version") != INDEX_VERSION:
        logger.warning("Ignoring key index with unsupported layout: %s", index_path)
        return new_index()

    return {
        "version": INDEX_VERSION,
        "keys": _normalize_keys(payload.get("keys")),
    }


def save_index(index_path: Path, payload: IndexPayload) -> None:
    """Replace the index file in one rename so concurrent readers never see a partial write.

    Raises ``KeyIndexError`` when the directory or file cannot be written;
    the temporary file is removed in that case.
    """
    temp_name: str | None = None
    try:
        index_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=index_path.parent,
            prefix=INDEX_TEMP_PREFIX,
            suffix=INDEX_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
        os.replace(temp_name, index_path)
    except OSError as exc:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise KeyIndexError(index_path, str(exc)) from exc


def prune_index(payload: IndexPayload, max_keys: int) -> list[str]:
    """Drop the oldest entries so at most ``max_keys`` remain; return the dropped keys."""
    keys = payload["keys"]
    if len(keys) <= max_keys:
        return []
    newest_first = sorted(keys, key=lambda key: (keys[key]["written_at_ns"], key), reverse=True)
    dropped = newest_first[max_keys:]
    for key in dropped:
        del keys[key]
    return dropped


def _normalize_keys(raw_keys: object) -> dict[str, IndexEntry]:
    if not isinstance(raw_keys, dict):
        return {}

    keys: dict[str, IndexEntry] = {}
    for key, value in raw_keys.items():
        if not isinstance(key, str) or not key or not isinstance(value, dict):
            continue

        written_at_ns = value.get("written_at_ns")
        content_hash = value.get("content_hash")
        if isinstance(written_at_ns, bool) or not isinstance(written_at_ns, int):
            continue
        if not isinstance(content_hash, str):
            continue

        keys[key] = {
            "written_at_ns": written_at_ns,
            "content_hash": content_hash,
        }
    return keys


class JsonKeyIndex:
    """``KeyStore`` backed by a JSON file in the workspace or cache directory."""

    def __init__(self, path: Path, *, max_keys: int = DEFAULT_MAX_INDEX_KEYS) -> None:
        if max_keys < 1:
            raise ValueError("max_keys must be at least 1")
        self.path = path
        self.max_keys = max_keys

    def available_keys(self) -> Mapping[str, int]:
        payload = load_index(self.path)
        return {key: entry["written_at_ns"] for key, entry in payload["keys"].items()}

    def record(self, key: str, *, content_hash: str, written_at_ns: int | None = None) -> None:
        payload = load_index(self.path)
        payload["keys"][key] = {
            "written_at_ns": time.time_ns() if written_at_ns is None else written_at_ns,
            "content_hash": content_hash,
        }
        dropped = prune_index(payload, self.max_keys)
        if dropped:
            logger.info("Pruned %d old key(s) from %s", len(dropped), self.path)
        save_index(self.path, payload)
        logger.info("Recorded cache key %s in %s", key, self.path)
