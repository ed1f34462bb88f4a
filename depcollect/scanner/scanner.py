"""Scan orchestration — discover, process, build, write."""

from __future__ import annotations

import structlog

from depcollect.core.config import ScanConfig
from depcollect.exceptions import RootNotFoundError
from depcollect.scanner.finder import find_projects
from depcollect.scanner.models import DependencyMap, ScanOutcome, SkippedPath
from depcollect.scanner.processor import process_project
from depcollect.scanner.report import build_report, write_report

log = structlog.get_logger("depcollect.scanner")


def run_scan(config: ScanConfig) -> ScanOutcome:
    """Run one full scan described by *config* and write its report.

    Unreadable directories and bad manifests are skipped and listed in
    ``ScanOutcome.skipped``. Raises :class:`RootNotFoundError` before any
    work if the root is missing; every other error propagates.
    """
    root = config.root
    log.info("scan.started", root=str(root))

    if not root.is_dir():
        raise RootNotFoundError(root)

    skipped: list[SkippedPath] = []
    projects = find_projects(root, config.manifest_name, skipped)
    log.info("scan.projects_found", count=len(projects))

    dependencies: DependencyMap = {}
    dev_dependencies: DependencyMap = {}
    for project_path in projects:
        log.info("scan.processing_project", path=str(project_path))
        process_project(
            project_path,
            dependencies,
            dev_dependencies,
            manifest_name=config.manifest_name,
            skipped=skipped,
        )

    report = build_report(dependencies, dev_dependencies, root, total_projects=len(projects))
    output_path = write_report(report, config.output_path)

    log.info(
        "scan.completed",
        dependencies=report.total_dependencies,
        dev_dependencies=report.total_dev_dependencies,
        skipped=len(skipped),
    )
    return ScanOutcome(report=report, output_path=output_path, projects=projects, skipped=skipped)
