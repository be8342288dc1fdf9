"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "cachekey"
CLI_DESCRIPTION: str = (
    f"{BRAND_NAME}: derive CI cache keys from dependency manifests "
    "and pick the best restore target"
)
COLD_CACHE_MESSAGE: str = "No cached key matched; starting from a cold cache."
