"""Restore-target selection against a snapshot of available keys."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from cachekey.constants.keys import KEY_SEPARATOR
from cachekey.types import AvailableKeys

logger = logging.getLogger(__name__)


def resolve_restore_target(
    requested_key: str,
    available_keys: AvailableKeys,
    fallback_prefixes: Sequence[str],
) -> str | None:
    """Pick the key to restore from, or ``None`` for a cold cache.

    An exact match on ``requested_key`` always wins. Otherwise prefixes are
    tried in order and the first one with any matching key (see
    ``matches_prefix``) returns its most recently written match. Without
    write times (a plain iterable of keys) the lexicographically greatest
    match is used so the choice stays deterministic.
    """
    written_at = _normalize_available(available_keys)

    if requested_key in written_at:
        logger.info("Exact cache hit: %s", requested_key)
        return requested_key

    for prefix in fallback_prefixes:
        candidates = [key for key in written_at if matches_prefix(key, prefix)]
        if not candidates:
            continue
        matched = max(candidates, key=lambda key: (written_at[key], key))
        logger.info("Partial cache hit on prefix %s: %s", prefix, matched)
        return matched

    logger.info("No cached key matched %s", requested_key)
    return None


def matches_prefix(key: str, prefix: str) -> bool:
    """Return True when ``key`` is ``prefix`` or continues it with a new segment.

    ``elm-feature_x`` matches ``elm-feature_x-<hash>`` but not
    ``elm-feature_x_y-<hash>`` or ``elm-feature_x0123``.
    """
    return key == prefix or key.startswith(prefix + KEY_SEPARATOR)


def _normalize_available(available_keys: AvailableKeys) -> Mapping[str, int]:
    """Map every available key to its write time, defaulting to zero."""
    if isinstance(available_keys, Mapping):
        return available_keys
    return dict.fromkeys(available_keys, 0)
