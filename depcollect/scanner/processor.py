"""Per-project processing — read a manifest and merge its dependency groups."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from depcollect.core.config import DEFAULT_MANIFEST
from depcollect.exceptions import ManifestError
from depcollect.scanner.merge import merge_dependency_group
from depcollect.scanner.models import DependencyMap, SkippedPath

log = structlog.get_logger("depcollect.scanner.processor")

_RUNTIME_SECTION = "dependencies"
_DEV_SECTION = "devDependencies"


def _dependency_group(manifest_path: Path, data: dict[str, Any], section: str) -> dict[str, str]:
    group = data.get(section)
    if not group:
        return {}
    if not isinstance(group, dict):
        raise ManifestError(manifest_path, f'"{section}" must be an object')
    for name, version in group.items():
        if not isinstance(version, str):
            raise ManifestError(
                manifest_path, f'"{section}.{name}" must be a version string, got {version!r}'
            )
    return group


def load_manifest(manifest_path: Path) -> tuple[dict[str, str], dict[str, str]]:
    """Read a manifest and return its (dependencies, devDependencies) groups.

    Raises OSError if the file cannot be read, ValueError if it is not valid
    UTF-8 JSON, and ManifestError if the JSON has the wrong shape.
    """
    data = json.loads(manifest_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ManifestError(manifest_path, "manifest must be a JSON object")
    return (
        _dependency_group(manifest_path, data, _RUNTIME_SECTION),
        _dependency_group(manifest_path, data, _DEV_SECTION),
    )


def process_project(
    project_path: Path,
    dependencies: DependencyMap,
    dev_dependencies: DependencyMap,
    manifest_name: str = DEFAULT_MANIFEST,
    skipped: list[SkippedPath] | None = None,
) -> bool:
    """Merge one project's manifest into the two accumulators.

    Both groups are validated before either accumulator is touched, so a
    rejected manifest contributes nothing. Returns False when the manifest
    was skipped.
    """
    manifest_path = project_path / manifest_name
    try:
        runtime, dev = load_manifest(manifest_path)
    except (OSError, ValueError, ManifestError) as exc:
        log.warning("processor.manifest_skipped", path=str(manifest_path), error=str(exc))
        if skipped is not None:
            skipped.append(SkippedPath(path=manifest_path, reason=str(exc)))
        return False

    merge_dependency_group(runtime, dependencies)
    merge_dependency_group(dev, dev_dependencies)
    return True
