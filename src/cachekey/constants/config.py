"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "cachekey.yaml"

DEFAULT_NAMESPACE: str = "deps"
DEFAULT_MANIFEST_FILES: tuple[str, ...] = ("elm.json",)
DEFAULT_INDEX_FILENAME: str = ".cachekey-index.json"
