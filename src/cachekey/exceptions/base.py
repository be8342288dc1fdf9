"""Root exception type."""

from __future__ import annotations


class CacheKeyError(Exception):
    """Base class for all errors raised by cachekey."""
