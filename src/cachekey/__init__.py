"""Cache-key resolution and fallback restore selection for CI dependency caches."""

from __future__ import annotations

__version__ = "0.1.0"

from cachekey.exceptions import (
    CacheKeyError,
    ConfigError,
    EmptyManifestError,
    InvalidNamespaceError,
    MissingFileError,
)
from cachekey.model import CacheManifest, ResolvedKey
from cachekey.resolver import (
    build_fallbacks,
    build_key,
    build_manifest,
    compute_hash,
    detect_branch,
    resolve_key,
    resolve_restore_target,
)

__all__ = [
    "CacheKeyError",
    "CacheManifest",
    "ConfigError",
    "EmptyManifestError",
    "InvalidNamespaceError",
    "MissingFileError",
    "ResolvedKey",
    "__version__",
    "build_fallbacks",
    "build_key",
    "build_manifest",
    "compute_hash",
    "detect_branch",
    "resolve_key",
    "resolve_restore_target",
]
