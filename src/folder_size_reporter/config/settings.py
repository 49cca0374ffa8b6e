"""
Settings and per-run configuration for the folder size reporter.

Settings come from ``FOLDER_REPORT_*`` environment variables or a ``.env``
file. A RunConfig is resolved once per run from the command line and
those settings; everything downstream works from the RunConfig only.

© 2026 MBP LLC. All rights reserved.
"""

from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.size_estimator import STRATEGY_NAMES
from ..utils.logger import resolve_level
from ..utils.path_utils import default_output_name


class ReporterSettings(BaseSettings):
    """Environment-driven defaults for a report run."""

    date_format: str = Field(default="%d-%m-%Y", description="strftime format of the date column")
    output_prefix: str = Field(default="folders_")
    output_suffix: str = Field(default=".csv")

    # Size measurement
    du_command: str = Field(default="du", description="Disk usage utility")
    block_size: int = Field(default=1024, gt=0, description="Bytes per du block")
    strategies: List[str] = Field(default_factory=lambda: list(STRATEGY_NAMES))

    # Logging
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="FOLDER_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("strategies")
    def validate_strategies(cls, v):
        """Only registered strategy names, at least one."""
        if not v:
            raise ValueError("At least one size strategy is required")
        unknown = [name for name in v if name not in STRATEGY_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown size strategies: {', '.join(unknown)}. "
                f"Choose from: {', '.join(STRATEGY_NAMES)}"
            )
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Ensure log level is a known name."""
        resolve_level(v)
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> ReporterSettings:
    """Get reporter settings (cached singleton)."""
    load_dotenv()
    return ReporterSettings()


@dataclass(frozen=True)
class RunConfig:
    """Everything a single report run needs, resolved up front."""

    root: Path
    output_path: Path
    captured_date: date
    date_format: str = "%d-%m-%Y"

    @property
    def date_stamp(self) -> str:
        return self.captured_date.strftime(self.date_format)


def resolve_run_config(
    directory: Optional[Union[str, Path]] = None,
    output: Optional[Union[str, Path]] = None,
    settings: Optional[ReporterSettings] = None,
    today: Optional[date] = None,
) -> RunConfig:
    """
    Resolve command-line style arguments into a RunConfig.

    Args:
        directory: Root to scan (defaults to the current directory)
        output: Report path (defaults to ``folders_<date>.csv``)
        settings: Settings to take defaults from
        today: Capture date (defaults to the local date)

    Returns:
        Frozen run configuration
    """
    if settings is None:
        settings = get_settings()
    if today is None:
        today = date.today()

    root = Path(directory) if directory else Path(".")
    if output:
        output_path = Path(output)
    else:
        output_path = Path(default_output_name(
            today,
            date_format=settings.date_format,
            prefix=settings.output_prefix,
            suffix=settings.output_suffix,
        ))

    return RunConfig(
        root=root,
        output_path=output_path,
        captured_date=today,
        date_format=settings.date_format,
    )
