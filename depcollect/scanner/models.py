"""Data models for the manifest scanner."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any

# package name -> version
DependencyMap = dict[str, str]


@dataclass(frozen=True)
class SkippedPath:
    """A directory or manifest that was skipped during a scan, and why."""

    path: Path
    reason: str


@dataclass(frozen=True)
class ScanReport:
    """Final report of one scan; versions are already caret-prefixed.

    Both mappings are copied into read-only views on construction.
    """

    scan_date: datetime
    root: Path
    total_projects: int
    dependencies: Mapping[str, str]
    dev_dependencies: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", MappingProxyType(dict(self.dependencies)))
        object.__setattr__(self, "dev_dependencies", MappingProxyType(dict(self.dev_dependencies)))

    @property
    def total_dependencies(self) -> int:
        return len(self.dependencies)

    @property
    def total_dev_dependencies(self) -> int:
        return len(self.dev_dependencies)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape written to the report file."""
        return {
            "scanDate": _iso_millis(self.scan_date),
            "vegaPath": str(self.root),
            "totalProjects": self.total_projects,
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
            "summary": {
                "totalDependencies": self.total_dependencies,
                "totalDevDependencies": self.total_dev_dependencies,
            },
        }


@dataclass
class ScanOutcome:
    """What a full scan run produced."""

    report: ScanReport
    output_path: Path
    projects: list[Path]
    skipped: list[SkippedPath] = field(default_factory=list)


def _iso_millis(value: datetime) -> str:
    """Format a UTC datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
