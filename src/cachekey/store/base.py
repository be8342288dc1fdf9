"""Storage backend protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class KeyStore(Protocol):
    """Backend that knows which cache keys were saved, and when.

    Only keys are tracked here. Archiving and restoring the cached
    directory itself belongs to the CI provider or another collaborator.
    """

    def available_keys(self) -> Mapping[str, int]:
        """Return a snapshot mapping each saved key to its write time in ns."""
        ...

    def record(self, key: str, *, content_hash: str, written_at_ns: int | None = None) -> None:
        """Record that ``key`` was saved."""
        ...
