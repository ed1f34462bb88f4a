"""Fold one manifest's dependency group into an accumulating mapping."""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from depcollect.scanner.models import DependencyMap
from depcollect.scanner.versions import clean_version, is_version_higher

log = structlog.get_logger("depcollect.scanner.merge")


def merge_dependency_group(deps: Mapping[str, str], target: DependencyMap) -> None:
    """Merge *deps* into *target* in place, keeping the highest version per name.

    Versions are stored cleaned. An equal version never replaces the one
    already stored, so the first-seen spelling wins ties.
    """
    for name, version in deps.items():
        cleaned = clean_version(version)
        existing = target.get(name)
        if existing is None:
            target[name] = cleaned
        elif is_version_higher(cleaned, existing):
            log.debug("merge.version_raised", name=name, old=existing, new=cleaned)
            target[name] = cleaned
