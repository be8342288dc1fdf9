"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid namespace
CFG007: str = "CFG007"  # root directory not found
CFG008: str = "CFG008"  # manifest entry matches no file

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "namespace",
        "files",
        "fallbacks",
        "default_branch",
        "branch_in_key",
        "index_path",
    }
)

LIST_OF_STRINGS_KEYS: tuple[str, ...] = (
    "files",
    "fallbacks",
)

STRING_KEYS: tuple[str, ...] = (
    "default_branch",
    "index_path",
)
