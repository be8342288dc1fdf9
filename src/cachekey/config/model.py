"""Config data model for key resolution."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from cachekey.constants.config import DEFAULT_INDEX_FILENAME, DEFAULT_MANIFEST_FILES, DEFAULT_NAMESPACE


@dataclass(frozen=True)
class CacheKeyConfig:
    """Resolved key-resolution settings."""

    namespace: str = DEFAULT_NAMESPACE
    files: tuple[str, ...] = DEFAULT_MANIFEST_FILES
    fallbacks: tuple[str, ...] = ()
    default_branch: str | None = None
    branch_in_key: bool = True
    index_path: str = DEFAULT_INDEX_FILENAME

    def with_overrides(
        self,
        *,
        namespace: str | None = None,
        files: tuple[str, ...] | None = None,
        index_path: Path | None = None,
    ) -> CacheKeyConfig:
        """Return a copy with CLI overrides applied where given."""
        config = self
        if namespace is not None:
            config = replace(config, namespace=namespace)
        if files:
            config = replace(config, files=files)
        if index_path is not None:
            config = replace(config, index_path=str(index_path))
        return config

    def resolve_index_path(self, root: Path) -> Path:
        """Return the index path, relative entries anchored at ``root``."""
        path = Path(self.index_path)
        return path if path.is_absolute() else root / path
