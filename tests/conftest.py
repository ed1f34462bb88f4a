"""Shared fixtures for depcollect tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_manifest(directory: Path, data: dict | None = None, raw: str | None = None) -> Path:
    """Create *directory* and write a package.json into it."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / "package.json"
    manifest.write_text(raw if raw is not None else json.dumps(data or {}))
    return manifest


@pytest.fixture
def make_project():
    return write_manifest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("DEPCOLLECT_ROOT", "DEPCOLLECT_OUTPUT", "DEPCOLLECT_MANIFEST"):
        monkeypatch.delenv(var, raising=False)
