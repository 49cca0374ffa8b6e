"""
File helpers used while measuring directories.

© 2026 MBP LLC. All rights reserved.
"""

import os
from pathlib import Path
from typing import Iterator, Optional, Union
from ..utils.logger import logger


def get_file_size(path: Union[str, Path]) -> Optional[int]:
    """
    Get file size in bytes.

    Symlinks are followed, so a link contributes the size of its target.

    Args:
        path: File path

    Returns:
        File size in bytes or None if the file cannot be stat'ed
    """
    try:
        return os.path.getsize(path)
    except OSError as e:
        logger.debug(f"Skipping unreadable file {path}: {e}")
        return None


def iter_file_paths(root: Union[str, Path]) -> Iterator[str]:
    """
    Yield every file path below ``root``.

    Directory symlinks are not descended into; unreadable directories are
    skipped.
    """
    def _on_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {error.filename}: {error}")

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_error):
        for filename in filenames:
            yield os.path.join(dirpath, filename)


def sum_file_sizes(root: Union[str, Path]) -> int:
    """
    Sum the sizes of all files below ``root``.

    Files that cannot be stat'ed contribute nothing.

    Args:
        root: Directory to walk

    Returns:
        Total size in bytes
    """
    total = 0
    for file_path in iter_file_paths(root):
        size = get_file_size(file_path)
        if size is not None:
            total += size
    return total
