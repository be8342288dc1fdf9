"""Configuration loading and validation for cachekey.

This package facade re-exports the public names so callers can use
``from cachekey.config import ...``.
"""

from __future__ import annotations

from cachekey.config.loader import load_config
from cachekey.config.model import CacheKeyConfig
from cachekey.config.validator import suggest_key, validate_config_file

__all__ = [
    "CacheKeyConfig",
    "load_config",
    "suggest_key",
    "validate_config_file",
]
