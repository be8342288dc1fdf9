"""Key index storage exceptions."""

from __future__ import annotations

from pathlib import Path

from cachekey.exceptions.base import CacheKeyError


class KeyIndexError(CacheKeyError, OSError):
    """Raised when the key index cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write key index {path}: {reason}")
