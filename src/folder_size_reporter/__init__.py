"""Folder size reporter: CSV of immediate subdirectories and their sizes."""

from .config.settings import ReporterSettings, RunConfig, get_settings, resolve_run_config
from .core.enumerator import ChildDirectories, iter_child_directories
from .core.models import FolderRecord, Report
from .core.report_writer import HEADER, render_report, write_report
from .core.reporter import FolderSizeReporter, generate_report
from .core.size_estimator import STRATEGY_NAMES, Measurement, SizeEstimator
from .exceptions import (
    MeasurementUnavailable,
    PathNotFoundError,
    ReporterError,
    ReportWriteError,
    RootNotADirectoryError,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "ReporterSettings",
    "RunConfig",
    "get_settings",
    "resolve_run_config",
    "ChildDirectories",
    "iter_child_directories",
    "FolderRecord",
    "Report",
    "HEADER",
    "render_report",
    "write_report",
    "FolderSizeReporter",
    "generate_report",
    "STRATEGY_NAMES",
    "Measurement",
    "SizeEstimator",
    "MeasurementUnavailable",
    "PathNotFoundError",
    "ReporterError",
    "ReportWriteError",
    "RootNotADirectoryError",
]
