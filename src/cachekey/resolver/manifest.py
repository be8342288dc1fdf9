"""Manifest expansion from literal paths and glob patterns."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from cachekey.constants.keys import GLOB_CHARACTERS
from cachekey.exceptions import ConfigError, MissingFileError
from cachekey.model import CacheManifest

logger = logging.getLogger(__name__)


def is_glob_pattern(entry: str) -> bool:
    """Return True when ``entry`` contains glob metacharacters."""
    return any(char in GLOB_CHARACTERS for char in entry)


def build_manifest(root: Path, patterns: Iterable[str]) -> CacheManifest:
    """Expand manifest entries relative to ``root`` into a ``CacheManifest``.

    Literal entries keep their position even when the file is missing, so
    the hashing step reports them. Glob entries expand to their matching
    regular files in sorted order and must match at least one file; absolute
    globs are expanded from their filesystem anchor. Repeated paths keep
    their first position.
    """
    root = root.resolve()
    paths: list[Path] = []
    seen: set[Path] = set()

    for entry in patterns:
        if is_glob_pattern(entry):
            matches = _expand_glob(root, entry)
            if not matches:
                raise MissingFileError(root / entry, f"No manifest files match pattern: {entry!r} under {root}")
            logger.debug("Pattern %s matched %d file(s)", entry, len(matches))
            candidates = matches
        else:
            candidates = [root / entry]

        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            paths.append(candidate)

    return CacheManifest(paths=tuple(paths), root=root)


def _expand_glob(root: Path, entry: str) -> list[Path]:
    """Return the regular files matching ``entry``, sorted."""
    pattern = Path(entry)
    if pattern.is_absolute():
        base = Path(pattern.anchor)
        relative = pattern.relative_to(base).as_posix()
    else:
        base = root
        relative = entry

    try:
        return sorted(match for match in base.glob(relative) if match.is_file())
    except (NotImplementedError, ValueError) as exc:
        raise ConfigError(f"Unsupported manifest pattern {entry!r}: {exc}") from exc
