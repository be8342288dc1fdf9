"""Shared pytest fixtures for workspace-based tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cachekey.constants.ci import BRANCH_ENV_VARS

ELM_JSON: str = '{\n  "type": "application",\n  "elm-version": "0.19.1"\n}\n'


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes text files relative to ``tmp_path``."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def elm_workspace(tmp_path: Path, write_file: Callable[[str, str], Path]) -> Path:
    """Return a workspace root holding a single ``elm.json``."""
    write_file("elm.json", ELM_JSON)
    return tmp_path


@pytest.fixture(autouse=True)
def clear_branch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CI environment of the test runner out of branch detection."""
    for name in BRANCH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
