"""Validation findings reported by ``cachekey validate-config`` and command preflight."""

from __future__ import annotations

from dataclasses import dataclass

from cachekey.types import JsonObject


@dataclass(frozen=True)
class ValidationError:
    """One problem with the workspace root, ``cachekey.yaml``, or a manifest entry.

    ``path`` is the file or directory at fault and ``field`` the config key
    (empty when the whole file or root is at fault).
    """

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Render as ``[CODE] path (field): message (hint)``."""
        location = f"{self.path} ({self.field})" if self.field else self.path
        line = f"[{self.code}] {location}: {self.message}"
        return f"{line} ({self.hint})" if self.hint else line

    def to_dict(self) -> JsonObject:
        """Return a JSON-safe representation for machine-readable output."""
        return {
            "code": self.code,
            "path": self.path,
            "field": self.field,
            "message": self.message,
            "hint": self.hint,
        }


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order findings by code, then location, so repeated runs print identically."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field, e.message))


def format_errors(errors: list[ValidationError]) -> str:
    """Render findings one per line in stable order."""
    return "\n".join(e.format() for e in sort_errors(errors))
