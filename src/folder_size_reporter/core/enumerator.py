"""
Immediate child directory enumeration.

© 2026 MBP LLC. All rights reserved.
"""

import os
from pathlib import Path
from typing import Iterator, Union

from ..utils.logger import logger
from ..utils.path_utils import validate_root


class ChildDirectories:
    """
    Restartable view of the directories directly inside a root.

    Hidden directories and symlinks pointing at directories are included;
    files and everything nested deeper are not. Order is whatever the
    filesystem yields. Each iteration rescans the root.
    """

    def __init__(self, root: Union[str, Path]):
        """
        Initialize the enumerator.

        Args:
            root: Directory whose children are listed

        Raises:
            PathNotFoundError: If root does not exist
            RootNotADirectoryError: If root is not a directory
        """
        self.root = validate_root(root)

    def __iter__(self) -> Iterator[Path]:
        with os.scandir(self.root) as entries:
            for entry in entries:
                try:
                    is_dir = entry.is_dir()
                except OSError as e:
                    logger.debug(f"Skipping {entry.path}: {e}")
                    continue
                if is_dir:
                    yield self.root / entry.name

    def __repr__(self) -> str:
        return f"ChildDirectories({str(self.root)!r})"


def iter_child_directories(root: Union[str, Path]) -> Iterator[Path]:
    """Yield the immediate child directories of ``root``."""
    yield from ChildDirectories(root)
