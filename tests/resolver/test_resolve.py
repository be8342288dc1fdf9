"""Tests for single-call key resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from cachekey.exceptions import InvalidNamespaceError, MissingFileError
from cachekey.model import ResolvedKey
from cachekey.resolver import build_manifest, compute_hash, resolve_key


def test_resolve_key_combines_hash_key_and_fallbacks(elm_workspace: Path) -> None:
    manifest = build_manifest(elm_workspace, ["elm.json"])

    resolved = resolve_key(manifest, "elm", branch="feature/login", default_branch="main")

    content_hash = compute_hash(manifest.paths, root=manifest.root)
    assert resolved == ResolvedKey(
        primary_key=f"elm-feature_login-{content_hash}",
        fallback_prefixes=("elm-feature_login", "elm-main", "elm"),
        content_hash=content_hash,
    )


def test_resolve_key_without_branch_scope_falls_back_to_namespace_only(elm_workspace: Path) -> None:
    manifest = build_manifest(elm_workspace, ["elm.json"])

    resolved = resolve_key(
        manifest, "elm", branch="feature/login", default_branch="main", extra=("develop",), branch_in_key=False
    )

    assert resolved.primary_key == f"elm-{resolved.content_hash}"
    assert resolved.fallback_prefixes == ("elm",)


@pytest.mark.parametrize("branch_in_key", [True, False], ids=["scoped", "unscoped"])
def test_every_fallback_prefixes_the_primary_key_on_its_own_branch(elm_workspace: Path, branch_in_key: bool) -> None:
    manifest = build_manifest(elm_workspace, ["elm.json"])

    resolved = resolve_key(
        manifest, "elm", branch="main", default_branch="main", extra=("develop",), branch_in_key=branch_in_key
    )
    saved_on_level = {
        prefix: resolve_key(manifest, "elm", branch=prefix.partition("-")[2] or None, branch_in_key=branch_in_key)
        for prefix in resolved.fallback_prefixes
    }

    for prefix, saved in saved_on_level.items():
        assert saved.primary_key.startswith(prefix + "-")
    assert resolved.primary_key.startswith(resolved.fallback_prefixes[0] + "-")


def test_resolve_key_appends_extra_levels(elm_workspace: Path) -> None:
    manifest = build_manifest(elm_workspace, ["elm.json"])

    resolved = resolve_key(manifest, "elm", branch="main", default_branch="main", extra=("develop",))

    assert resolved.fallback_prefixes == ("elm-main", "elm-develop", "elm")


def test_resolve_key_is_deterministic(elm_workspace: Path) -> None:
    manifest = build_manifest(elm_workspace, ["elm.json"])

    assert resolve_key(manifest, "elm") == resolve_key(manifest, "elm")


def test_resolved_key_is_immutable(elm_workspace: Path) -> None:
    resolved = resolve_key(build_manifest(elm_workspace, ["elm.json"]), "elm")

    with pytest.raises(FrozenInstanceError):
        resolved.primary_key = "other"  # type: ignore[misc]


def test_resolved_key_to_dict(elm_workspace: Path) -> None:
    resolved = resolve_key(build_manifest(elm_workspace, ["elm.json"]), "elm")

    assert resolved.to_dict() == {
        "primary_key": resolved.primary_key,
        "fallback_prefixes": ["elm"],
        "content_hash": resolved.content_hash,
    }


def test_resolve_key_missing_manifest_file(tmp_path: Path) -> None:
    with pytest.raises(MissingFileError):
        resolve_key(build_manifest(tmp_path, ["elm.json"]), "elm")


def test_resolve_key_invalid_namespace_before_hashing(tmp_path: Path) -> None:
    with pytest.raises(InvalidNamespaceError):
        resolve_key(build_manifest(tmp_path, ["elm.json"]), "elm-cache")


def test_resolve_key_changes_with_manifest(elm_workspace: Path, write_file: Callable[[str, str], Path]) -> None:
    manifest = build_manifest(elm_workspace, ["elm.json"])
    before = resolve_key(manifest, "elm")

    write_file("elm.json", '{"type": "package"}\n')

    after = resolve_key(manifest, "elm")
    assert after.primary_key != before.primary_key
    assert after.fallback_prefixes == before.fallback_prefixes
