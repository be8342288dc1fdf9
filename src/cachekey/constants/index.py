"""Constants used by the key index store."""

from __future__ import annotations

INDEX_VERSION: int = 1
INDEX_TEMP_PREFIX: str = ".cachekey-index-"
INDEX_TEMP_SUFFIX: str = ".tmp"

# Oldest entries beyond this count are pruned whenever a key is recorded.
DEFAULT_MAX_INDEX_KEYS: int = 200
