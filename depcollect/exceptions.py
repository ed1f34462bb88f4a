"""Custom exceptions for depcollect."""

from __future__ import annotations

from pathlib import Path


class DepCollectError(Exception):
    """Base exception for all depcollect errors."""


class RootNotFoundError(DepCollectError):
    """Raised when the configured scan root does not exist or is not a directory."""

    def __init__(self, root: Path):
        self.root = root
        super().__init__(f"Scan root not found at: {root}")


class ManifestError(DepCollectError):
    """Raised when a manifest parses but does not have the expected shape."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)
