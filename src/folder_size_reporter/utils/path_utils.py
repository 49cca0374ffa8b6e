"""
Path helpers for resolving the scan root and output file.

© 2026 MBP LLC. All rights reserved.
"""

from datetime import date
from pathlib import Path
from typing import Union

from ..exceptions import PathNotFoundError, RootNotADirectoryError


def validate_root(path: Union[str, Path]) -> Path:
    """
    Check that the scan root is an existing directory.

    Args:
        path: Root path as given by the caller

    Returns:
        The root as a Path (not resolved, so basenames stay as given)

    Raises:
        PathNotFoundError: If nothing exists at ``path``
        RootNotADirectoryError: If ``path`` is not a directory
    """
    root = Path(path)
    if not root.exists():
        raise PathNotFoundError(root)
    if not root.is_dir():
        raise RootNotADirectoryError(root)
    return root


def default_output_name(
    captured: date,
    date_format: str = "%d-%m-%Y",
    prefix: str = "folders_",
    suffix: str = ".csv"
) -> str:
    """
    Build the default report filename, e.g. ``folders_18-10-2026.csv``.

    Args:
        captured: Date stamped into the name
        date_format: strftime format for the date
        prefix: Text before the date
        suffix: Text after the date

    Returns:
        Filename without directory
    """
    return f"{prefix}{captured.strftime(date_format)}{suffix}"
