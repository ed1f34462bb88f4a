"""Version string normalisation and ordering.

Only the numeric dot-separated components of a version matter here. This is
not a semver implementation: pre-release and build suffixes are ignored.
"""

from __future__ import annotations

import re
from itertools import zip_longest

_OPERATOR_PREFIX = re.compile(r"^[\^~>=<]")
_LEADING_DIGITS = re.compile(r"[0-9]+")


def clean_version(version: str) -> str:
    """Strip a single leading ``^ ~ > = <`` from *version*."""
    return _OPERATOR_PREFIX.sub("", version, count=1)


def _component(part: str) -> int:
    # "0-beta" -> 0, "x" -> 0, "" -> 0
    match = _LEADING_DIGITS.match(part)
    return int(match.group()) if match else 0


def version_key(version: str) -> list[int]:
    """Split a cleaned version into its numeric components."""
    return [_component(part) for part in version.split(".")]


def is_version_higher(version: str, other: str) -> bool:
    """Return True if *version* is strictly higher than *other*.

    Components are compared left to right; a missing component counts as 0,
    so ``1.2`` and ``1.2.0`` are equal.
    """
    for mine, theirs in zip_longest(version_key(version), version_key(other), fillvalue=0):
        if mine > theirs:
            return True
        if mine < theirs:
            return False
    return False
