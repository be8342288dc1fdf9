"""Tests for manifest content hashing."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cachekey.exceptions import EmptyManifestError, MissingFileError
from cachekey.resolver import compute_hash


def test_compute_hash_is_deterministic(write_file: Callable[[str, str], Path]) -> None:
    first = write_file("elm.json", '{"a": 1}')
    second = write_file("review/elm.json", '{"b": 2}')

    assert compute_hash([first, second]) == compute_hash([first, second])


def test_compute_hash_is_hex_sha256(write_file: Callable[[str, str], Path]) -> None:
    digest = compute_hash([write_file("elm.json", "{}")])

    assert len(digest) == 64
    assert all(char in "0123456789abcdef" for char in digest)


def test_compute_hash_is_order_sensitive(write_file: Callable[[str, str], Path]) -> None:
    first = write_file("elm.json", '{"a": 1}')
    second = write_file("review/elm.json", '{"b": 2}')

    assert compute_hash([first, second]) != compute_hash([second, first])


def test_compute_hash_changes_with_single_byte(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    path = write_file("elm.json", '{"elm-version": "0.19.1"}')
    before = compute_hash([path], root=tmp_path)

    path.write_text('{"elm-version": "0.19.2"}', encoding="utf-8")

    assert compute_hash([path], root=tmp_path) != before


def test_compute_hash_includes_path_identifier(write_file: Callable[[str, str], Path]) -> None:
    first = write_file("a/elm.json", "{}")
    second = write_file("b/elm.json", "{}")

    assert compute_hash([first]) != compute_hash([second])


def test_compute_hash_does_not_merge_file_boundaries(write_file: Callable[[str, str], Path]) -> None:
    first = write_file("x", "ab")
    second = write_file("y", "c")
    before = compute_hash([first, second])

    write_file("x", "a")
    write_file("y", "bc")

    assert compute_hash([first, second]) != before


def test_compute_hash_with_root_ignores_checkout_location(tmp_path: Path) -> None:
    for checkout in ("one", "two"):
        (tmp_path / checkout).mkdir()
        (tmp_path / checkout / "elm.json").write_text("{}", encoding="utf-8")

    first = compute_hash([tmp_path / "one" / "elm.json"], root=tmp_path / "one")
    second = compute_hash([tmp_path / "two" / "elm.json"], root=tmp_path / "two")

    assert first == second


def test_compute_hash_missing_file_raises(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    present = write_file("elm.json", "{}")
    missing = tmp_path / "elm-tooling.json"

    with pytest.raises(MissingFileError) as exc_info:
        compute_hash([present, missing])

    assert exc_info.value.path == missing
    assert isinstance(exc_info.value, FileNotFoundError)


def test_compute_hash_directory_counts_as_missing(tmp_path: Path) -> None:
    (tmp_path / "elm-stuff").mkdir()

    with pytest.raises(MissingFileError):
        compute_hash([tmp_path / "elm-stuff"])


def test_compute_hash_rejects_empty_manifest() -> None:
    with pytest.raises(EmptyManifestError):
        compute_hash([])
