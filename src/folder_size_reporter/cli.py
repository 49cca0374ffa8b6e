"""
Command line entry point.

    folder-size-report [DIRECTORY] [OUTPUT]

Writes one CSV row per immediate child directory of DIRECTORY (default: the
current directory) to OUTPUT (default: folders_<DD-MM-YYYY>.csv).

© 2026 MBP LLC. All rights reserved.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config.settings import get_settings, resolve_run_config
from .core.models import Report
from .core.reporter import FolderSizeReporter
from .core.size_estimator import STRATEGY_NAMES
from .exceptions import PathNotFoundError, ReportWriteError, RootNotADirectoryError
from .utils.logger import setup_logger

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _error(message: str) -> None:
    err_console.print(f"Error: {message}", markup=False, soft_wrap=True)


def _report_table(report: Report) -> Table:
    table = Table(title=escape(str(report.config.root)) if report.config else None)
    table.add_column("Folder")
    table.add_column("Date")
    table.add_column("Size (bytes)", justify="right")
    for record in report:
        table.add_row(escape(record.name), record.captured_date, str(record.size_bytes))
    table.add_row("[bold]Total[/bold]", "", f"[bold]{report.total_bytes}[/bold]")
    return table


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("directory", required=False, type=click.Path(path_type=Path))
@click.argument("output", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--strategy", "-s", "strategies", multiple=True,
              type=click.Choice(STRATEGY_NAMES),
              help="Size strategy to try, in order (repeatable). Default: du_apparent, du_blocks, walk.")
@click.option("--show", is_flag=True, help="Print the report as a table after writing it.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help="Log level for messages on stderr.")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Also log to this file.")
@click.version_option(version=__version__, prog_name="folder-size-report")
def main(
    directory: Optional[Path],
    output: Optional[Path],
    strategies: Tuple[str, ...],
    show: bool,
    log_level: Optional[str],
    log_file: Optional[Path]
):
    """Write the name, date and size of each subdirectory of DIRECTORY to a CSV file."""
    try:
        settings = get_settings()
    except ValidationError as e:
        _error(f"invalid settings: {e}")
        sys.exit(2)

    overrides = {}
    if strategies:
        overrides["strategies"] = list(strategies)
    if log_level:
        overrides["log_level"] = log_level.upper()
    if log_file:
        overrides["log_file"] = log_file
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logger(log_file=settings.log_file, level=settings.log_level)

    config = resolve_run_config(directory, output, settings=settings)
    reporter = FolderSizeReporter(settings=settings)

    try:
        report = reporter.run(config)
    except (PathNotFoundError, RootNotADirectoryError, ReportWriteError) as e:
        _error(str(e))
        sys.exit(1)

    console.print(f"Wrote {config.output_path}", markup=False, soft_wrap=True)
    if show:
        console.print(_report_table(report))


if __name__ == "__main__":
    main()
