"""Core data models for cachekey."""

from .entities import CacheManifest, ResolvedKey

__all__ = [
    "CacheManifest",
    "ResolvedKey",
]
