"""Configuration-related exceptions."""

from __future__ import annotations

from cachekey.exceptions.base import CacheKeyError


class ConfigError(CacheKeyError, ValueError):
    """Raised when ``cachekey.yaml`` or CLI overrides are invalid."""
