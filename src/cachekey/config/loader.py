"""Config loading and normalization."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from cachekey.config.model import CacheKeyConfig
from cachekey.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_INDEX_FILENAME,
    DEFAULT_MANIFEST_FILES,
    DEFAULT_NAMESPACE,
)
from cachekey.exceptions import ConfigError, InvalidNamespaceError
from cachekey.resolver.keys import validate_namespace


def load_config(root: Path, config_path: Path | None = None) -> CacheKeyConfig:
    """Load and validate settings from ``cachekey.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CacheKeyConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    namespace = raw.get("namespace", DEFAULT_NAMESPACE)
    if not isinstance(namespace, str):
        raise ConfigError("namespace must be a string")
    try:
        validate_namespace(namespace)
    except InvalidNamespaceError as exc:
        raise ConfigError(str(exc)) from exc

    files = _ensure_string_list(raw.get("files", list(DEFAULT_MANIFEST_FILES)), "files")
    files = [entry.strip() for entry in files if entry.strip()]
    if not files:
        raise ConfigError("files must list at least one manifest path or pattern")

    branch_in_key = raw.get("branch_in_key", True)
    if not isinstance(branch_in_key, bool):
        raise ConfigError("branch_in_key must be a boolean")

    return CacheKeyConfig(
        namespace=namespace,
        files=tuple(files),
        fallbacks=tuple(_ensure_string_list(raw.get("fallbacks", []), "fallbacks")),
        default_branch=_optional_string(raw.get("default_branch"), "default_branch"),
        branch_in_key=branch_in_key,
        index_path=_optional_string(raw.get("index_path"), "index_path") or DEFAULT_INDEX_FILENAME,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _optional_string(value: Any, key_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value.strip() or None
