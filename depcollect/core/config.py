"""Scan configuration — explicit values, seeded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_ROOT = "DEPCOLLECT_ROOT"
ENV_OUTPUT = "DEPCOLLECT_OUTPUT"
ENV_MANIFEST = "DEPCOLLECT_MANIFEST"

DEFAULT_OUTPUT = "list.json"
DEFAULT_MANIFEST = "package.json"


@dataclass(frozen=True)
class ScanConfig:
    """Everything a single scan needs; passed into :func:`run_scan`."""

    root: Path
    output_path: Path = Path(DEFAULT_OUTPUT)
    manifest_name: str = DEFAULT_MANIFEST

    @classmethod
    def from_env(
        cls,
        root: str | Path | None = None,
        output_path: str | Path | None = None,
        manifest_name: str | None = None,
    ) -> ScanConfig:
        """Build a config; explicit arguments win over the environment.

        Reads from environment variables:
            DEPCOLLECT_ROOT     — directory to scan (default: cwd)
            DEPCOLLECT_OUTPUT   — report path (default: list.json)
            DEPCOLLECT_MANIFEST — manifest filename (default: package.json)
        """
        if root is None:
            root = os.environ.get(ENV_ROOT) or Path.cwd()
        if output_path is None:
            output_path = os.environ.get(ENV_OUTPUT, DEFAULT_OUTPUT)
        if manifest_name is None:
            manifest_name = os.environ.get(ENV_MANIFEST, DEFAULT_MANIFEST)
        return cls(
            root=Path(root),
            output_path=Path(output_path),
            manifest_name=manifest_name,
        )
