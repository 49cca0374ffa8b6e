"""
Folder size report orchestration.

© 2026 MBP LLC. All rights reserved.
"""

from collections import Counter
from pathlib import Path
from typing import Optional, Union

from .enumerator import ChildDirectories
from .models import FolderRecord, Report
from .report_writer import write_report
from .size_estimator import SizeEstimator
from ..config.settings import ReporterSettings, RunConfig, get_settings, resolve_run_config
from ..utils.logger import logger


class FolderSizeReporter:
    """Scans a root, measures each child directory and writes the CSV."""

    def __init__(
        self,
        settings: Optional[ReporterSettings] = None,
        estimator: Optional[SizeEstimator] = None
    ):
        """
        Initialize the reporter.

        Args:
            settings: Reporter settings (defaults to environment settings)
            estimator: Size estimator (defaults to one built from settings)
        """
        self.settings = settings if settings is not None else get_settings()
        self.estimator = estimator or SizeEstimator.from_settings(self.settings)
        self.strategy_usage: Counter = Counter()

    def build_report(self, config: RunConfig) -> Report:
        """
        Measure every immediate child directory of the configured root.

        Args:
            config: Resolved run configuration

        Returns:
            Report with one record per child directory

        Raises:
            PathNotFoundError: If the root does not exist
            RootNotADirectoryError: If the root is not a directory
        """
        children = ChildDirectories(config.root)
        report = Report(config=config)
        self.strategy_usage = Counter()

        for child in children:
            measurement = self.estimator.measure(child)
            self.strategy_usage[measurement.strategy or "unavailable"] += 1
            logger.info(f"{child.name}: {measurement.size_bytes} bytes ({measurement.strategy or 'unavailable'})")
            report.add(FolderRecord(
                name=child.name,
                captured_date=config.date_stamp,
                size_bytes=measurement.size_bytes,
            ))

        return report

    def run(self, config: RunConfig) -> Report:
        """
        Build the report and write it to ``config.output_path``.

        Raises:
            PathNotFoundError: If the root does not exist
            RootNotADirectoryError: If the root is not a directory
            ReportWriteError: If the report cannot be written
        """
        logger.info(f"Scanning {config.root} -> {config.output_path}")
        report = self.build_report(config)
        write_report(report, config.output_path)
        self._log_summary(report)
        return report

    def _log_summary(self, report: Report) -> None:
        logger.info(f"Folders reported: {len(report)}")
        logger.info(f"Total bytes: {report.total_bytes}")
        for strategy, count in sorted(self.strategy_usage.items()):
            logger.info(f"  {strategy}: {count} folders")


def generate_report(
    directory: Optional[Union[str, Path]] = None,
    output: Optional[Union[str, Path]] = None,
    settings: Optional[ReporterSettings] = None
) -> Report:
    """Resolve a run configuration, then scan and write the report."""
    if settings is None:
        settings = get_settings()
    config = resolve_run_config(directory, output, settings=settings)
    return FolderSizeReporter(settings=settings).run(config)
