"""Report building and persistence."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import structlog

from depcollect.scanner.models import DependencyMap, ScanReport

log = structlog.get_logger("depcollect.scanner.report")


def _caret(deps: DependencyMap) -> DependencyMap:
    return {name: f"^{version}" for name, version in deps.items()}


def build_report(
    dependencies: DependencyMap,
    dev_dependencies: DependencyMap,
    root: Path,
    total_projects: int,
    scan_date: datetime | None = None,
) -> ScanReport:
    """Assemble the report from the accumulated (cleaned) mappings.

    *total_projects* is the count from the discovery pass; the tree is not
    walked again.
    """
    return ScanReport(
        scan_date=scan_date or datetime.now(timezone.utc),
        root=root,
        total_projects=total_projects,
        dependencies=_caret(dependencies),
        dev_dependencies=_caret(dev_dependencies),
    )


def write_report(report: ScanReport, output_path: Path) -> Path:
    """Write *report* as indented JSON, overwriting *output_path*."""
    output_path.write_text(json.dumps(report.to_dict(), indent=2) + "\n", encoding="utf-8")
    log.info("report.written", path=str(output_path))
    return output_path
