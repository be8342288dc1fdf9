"""Single-call key resolution combining hashing, keys, and fallbacks."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cachekey.model import CacheManifest, ResolvedKey
from cachekey.resolver.hashing import hash_manifest
from cachekey.resolver.keys import build_fallbacks, build_key, validate_namespace

logger = logging.getLogger(__name__)


def resolve_key(
    manifest: CacheManifest,
    namespace: str,
    *,
    branch: str | None = None,
    default_branch: str | None = None,
    extra: Sequence[str] = (),
    branch_in_key: bool = True,
) -> ResolvedKey:
    """Hash ``manifest`` and derive the primary key and fallback prefixes.

    With ``branch_in_key`` the branch scopes the primary key
    (``namespace-branch-hash``) and the fallback levels are the branch, the
    default branch, then ``extra`` (further branches worth restoring from).
    Each of those prefixes is the leading part of a key saved on that branch.

    Without ``branch_in_key`` saved keys carry no branch segment, so the only
    fallback is the bare namespace.
    """
    validate_namespace(namespace)
    content_hash = hash_manifest(manifest)

    if branch_in_key:
        levels = [level for level in (branch, default_branch) if level]
        levels.extend(extra)
        scope = branch
    else:
        if branch or default_branch or extra:
            logger.debug("Branch levels ignored: keys are not scoped by branch")
        levels = []
        scope = None

    return ResolvedKey(
        primary_key=build_key(namespace, content_hash, scope=scope),
        fallback_prefixes=build_fallbacks(namespace, levels),
        content_hash=content_hash,
    )
