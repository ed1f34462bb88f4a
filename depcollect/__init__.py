"""depcollect — aggregate package.json dependencies across a folder of projects."""

__version__ = "0.1.0"
