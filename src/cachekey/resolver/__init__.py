"""Cache-key resolution: manifests, hashing, keys, and restore targets."""

from __future__ import annotations

from .branch import detect_branch
from .hashing import compute_hash, hash_manifest
from .keys import build_fallbacks, build_key, validate_namespace
from .manifest import build_manifest, is_glob_pattern
from .resolve import resolve_key
from .restore import resolve_restore_target

__all__ = [
    "build_fallbacks",
    "build_key",
    "build_manifest",
    "compute_hash",
    "detect_branch",
    "hash_manifest",
    "is_glob_pattern",
    "resolve_key",
    "resolve_restore_target",
    "validate_namespace",
]
