"""Immutable value types produced by key resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cachekey.exceptions import EmptyManifestError
from cachekey.types import JsonObject


@dataclass(frozen=True)
class CacheManifest:
    """Ordered files whose contents determine the cache key."""

    paths: tuple[Path, ...]
    root: Path | None = None

    def __post_init__(self) -> None:
        if not self.paths:
            raise EmptyManifestError("Cache manifest must track at least one file")

    def identifier(self, path: Path) -> str:
        """Return the stable, root-relative POSIX name hashed for ``path``."""
        if self.root is not None and path.is_relative_to(self.root):
            return path.relative_to(self.root).as_posix()
        return path.as_posix()


@dataclass(frozen=True)
class ResolvedKey:
    """Primary key and ordered fallback prefixes for one resolution."""

    primary_key: str
    fallback_prefixes: tuple[str, ...]
    content_hash: str

    def to_dict(self) -> JsonObject:
        """Return a JSON-safe representation."""
        return {
            "primary_key": self.primary_key,
            "fallback_prefixes": list(self.fallback_prefixes),
            "content_hash": self.content_hash,
        }
