"""Exceptions raised while hashing manifests and building keys."""

from __future__ import annotations

from pathlib import Path

from cachekey.exceptions.base import CacheKeyError


class MissingFileError(CacheKeyError, FileNotFoundError):
    """Raised when a manifest file listed for hashing does not exist.

    Never recovered by hashing nothing: an empty digest would make distinct
    dependency sets share one cache key.
    """

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        self.path = Path(path)
        super().__init__(message or f"Manifest file not found: {self.path}")


class InvalidNamespaceError(CacheKeyError, ValueError):
    """Raised when a namespace is empty or would break key segmentation."""

    def __init__(self, namespace: str, reason: str) -> None:
        self.namespace = namespace
        super().__init__(f"Invalid cache namespace {namespace!r}: {reason}")


class EmptyManifestError(CacheKeyError, ValueError):
    """Raised when a manifest tracks no files."""
