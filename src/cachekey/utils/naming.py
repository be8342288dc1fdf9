"""String normalization helpers for key segments."""

from __future__ import annotations

from cachekey.constants.keys import NON_LEVEL_PATTERN


def slugify_level(raw: str) -> str:
    """Normalize a branch name or other level into a single key segment.

    ``feature/Login-Form`` becomes ``feature_login_form``. The key
    separator never survives, so a level cannot split into two segments.
    Returns an empty string when nothing usable remains.
    """
    normalized = raw.strip().lower()
    normalized = NON_LEVEL_PATTERN.sub("_", normalized)
    return normalized.strip("_")
