"""Project discovery — locate directories that hold a manifest."""

from __future__ import annotations

from pathlib import Path

import structlog

from depcollect.core.config import DEFAULT_MANIFEST
from depcollect.scanner.models import SkippedPath

log = structlog.get_logger("depcollect.scanner.finder")


def has_manifest(directory: Path, manifest_name: str = DEFAULT_MANIFEST) -> bool:
    return (directory / manifest_name).is_file()


def find_projects(
    root: Path,
    manifest_name: str = DEFAULT_MANIFEST,
    skipped: list[SkippedPath] | None = None,
    _visited: set[Path] | None = None,
) -> list[Path]:
    """Walk *root* and return every project directory below it.

    A subdirectory that holds a manifest is recorded and not descended into,
    so projects nested inside another project are never reported. Any other
    subdirectory is searched recursively. *root* itself is never a project.

    Symlinked directories are followed. A directory whose resolved path was
    already searched is not searched again, so link cycles terminate.

    A directory that cannot be listed is logged, appended to *skipped* when
    given, and contributes no projects.
    """
    if _visited is None:
        _visited = {root.resolve()}

    try:
        entries = sorted(root.iterdir())
    except OSError as exc:
        log.warning("finder.directory_unreadable", path=str(root), error=str(exc))
        if skipped is not None:
            skipped.append(SkippedPath(path=root, reason=f"could not read directory: {exc}"))
        return []

    projects: list[Path] = []
    for entry in entries:
        if not entry.is_dir():
            continue
        if has_manifest(entry, manifest_name):
            projects.append(entry)
            continue
        resolved = entry.resolve()
        if resolved in _visited:
            log.debug("finder.already_visited", path=str(entry), target=str(resolved))
            continue
        _visited.add(resolved)
        projects.extend(find_projects(entry, manifest_name, skipped, _visited))
    return projects
