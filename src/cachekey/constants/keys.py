"""Constants for cache-key construction and content hashing."""

from __future__ import annotations

import re

KEY_SEPARATOR: str = "-"
FILE_HASH_CHUNK_SIZE: int = 65536
IDENTIFIER_DELIMITER: bytes = b"\0"

GLOB_CHARACTERS: frozenset[str] = frozenset("*?[")

WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"\s")
NON_LEVEL_PATTERN: re.Pattern[str] = re.compile(r"[^a-z0-9._]+")
