"""Preflight checks run before any key is resolved.

Every command checks the workspace root and ``cachekey.yaml``.
``validate-config`` also walks the manifest entries so a missing
``elm.json`` or a glob that matches nothing shows up before CI does.
"""

from __future__ import annotations

from pathlib import Path

from cachekey.config import load_config, validate_config_file
from cachekey.constants.validation import CFG007, CFG008
from cachekey.exceptions import ConfigError, MissingFileError
from cachekey.exceptions.validation import ValidationError, sort_errors
from cachekey.resolver import build_manifest


def preflight_validate(
    root: Path,
    config_path: Path | None = None,
    *,
    check_manifest: bool = False,
) -> list[ValidationError]:
    """Return all preflight findings in deterministic order; empty when valid."""
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG007,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    errors = validate_config_file(resolved_root, config_path, config_explicit=config_path is not None)
    if check_manifest and not errors:
        files = load_config(resolved_root, config_path).files
        errors.extend(_check_manifest_entries(resolved_root, files))
    return sort_errors(errors)


def _check_manifest_entries(root: Path, entries: tuple[str, ...]) -> list[ValidationError]:
    """Report each manifest entry that would make hashing fail."""
    errors: list[ValidationError] = []
    for entry in entries:
        try:
            manifest = build_manifest(root, [entry])
        except (MissingFileError, ConfigError) as exc:
            errors.append(_manifest_error(root, entry, str(exc)))
            continue
        missing = [path for path in manifest.paths if not path.is_file()]
        if missing:
            errors.append(_manifest_error(root, entry, f"manifest file not found: {missing[0]}"))
    return errors


def _manifest_error(root: Path, entry: str, message: str) -> ValidationError:
    return ValidationError(
        code=CFG008,
        path=str(root),
        field="files",
        message=message,
        hint=f"entry {entry!r}",
    )
