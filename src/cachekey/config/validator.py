"""Config file validation for cachekey."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from cachekey.constants.config import CONFIG_FILENAME
from cachekey.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    LIST_OF_STRINGS_KEYS,
    STRING_KEYS,
)
from cachekey.exceptions import InvalidNamespaceError
from cachekey.exceptions.validation import ValidationError
from cachekey.resolver.keys import validate_namespace


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a cachekey.yaml file and return all validation errors.

    This is the collect-all entry point used by ``cachekey validate-config``
    and by the preflight of every other command. It never raises; all
    problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    _validate_namespace(raw, path_str, errors)

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            val = raw[key]
            if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
                errors.append(_type_error(path_str, key, "expected a list of strings"))

    if "files" in raw and isinstance(raw["files"], list) and not any(
        isinstance(entry, str) and entry.strip() for entry in raw["files"]
    ):
        errors.append(_type_error(path_str, "files", "expected at least one manifest path or pattern"))

    for key in STRING_KEYS:
        if key in raw and raw[key] is not None and not isinstance(raw[key], str):
            errors.append(_type_error(path_str, key, "expected a string"))

    if "branch_in_key" in raw and not isinstance(raw["branch_in_key"], bool):
        errors.append(_type_error(path_str, "branch_in_key", "expected a boolean"))

    return errors


def _validate_namespace(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``namespace`` value against key segmentation rules."""
    if "namespace" not in raw:
        return
    val = raw["namespace"]
    if not isinstance(val, str):
        errors.append(_type_error(path_str, "namespace", "expected a string"))
        return
    try:
        validate_namespace(val)
    except InvalidNamespaceError as exc:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field="namespace",
                message="invalid value for `namespace`",
                hint=str(exc),
            )
        )


def _type_error(path_str: str, key: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=key,
        message=f"invalid type for `{key}`",
        hint=hint,
    )


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
