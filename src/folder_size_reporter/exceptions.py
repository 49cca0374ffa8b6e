"""
Error types raised by the folder size reporter.

© 2026 MBP LLC. All rights reserved.
"""

from pathlib import Path
from typing import Optional


class ReporterError(Exception):
    """Base class for all reporter errors."""


class PathNotFoundError(ReporterError, FileNotFoundError):
    """Root path does not exist."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"directory '{path}' not found")


class RootNotADirectoryError(ReporterError, NotADirectoryError):
    """Root path exists but is not a directory."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"'{path}' is not a directory")


class MeasurementUnavailable(ReporterError):
    """No size strategy produced a usable result for a directory."""

    def __init__(self, path: Path, tried: Optional[list] = None):
        self.path = Path(path)
        self.tried = list(tried or [])
        super().__init__(
            f"no size measurement available for '{path}' "
            f"(tried: {', '.join(self.tried) or 'nothing'})"
        )


class ReportWriteError(ReporterError, OSError):
    """The CSV report could not be written."""

    def __init__(self, path: Path, reason: object):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot write '{path}': {reason}")
