"""Shared exception hierarchy for cachekey."""

from __future__ import annotations

from .base import CacheKeyError
from .config import ConfigError
from .keys import EmptyManifestError, InvalidNamespaceError, MissingFileError
from .store import KeyIndexError

__all__ = [
    "CacheKeyError",
    "ConfigError",
    "EmptyManifestError",
    "InvalidNamespaceError",
    "KeyIndexError",
    "MissingFileError",
]
