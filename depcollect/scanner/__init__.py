"""Manifest scanner — aggregate dependencies across a tree of projects."""

from depcollect.scanner.finder import find_projects
from depcollect.scanner.merge import merge_dependency_group
from depcollect.scanner.models import DependencyMap, ScanOutcome, ScanReport, SkippedPath
from depcollect.scanner.processor import process_project
from depcollect.scanner.report import build_report, write_report
from depcollect.scanner.scanner import run_scan
from depcollect.scanner.versions import clean_version, is_version_higher

__all__ = [
    "DependencyMap",
    "ScanOutcome",
    "ScanReport",
    "SkippedPath",
    "build_report",
    "clean_version",
    "find_projects",
    "is_version_higher",
    "merge_dependency_group",
    "process_project",
    "run_scan",
    "write_report",
]
