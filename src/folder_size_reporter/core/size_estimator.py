"""
Directory size measurement.

A directory is measured by trying a chain of strategies in order; the first
one that returns a size wins. Each strategy takes a path and returns a byte
count, or None when it cannot produce one.

Strategies:
    du_apparent  ``du -sb``, apparent size in bytes (GNU du)
    du_blocks    ``du -sk``, kilobyte blocks converted to bytes
    walk         walk the tree and add up file sizes, skipping unreadable files

Results from different strategies can disagree on the same tree (directory
entries, sparse files, unreadable files are counted differently).

© 2026 MBP LLC. All rights reserved.
"""

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..exceptions import MeasurementUnavailable
from ..utils.file_utils import sum_file_sizes
from ..utils.logger import logger

SizeStrategy = Callable[[Path], Optional[int]]

STRATEGY_NAMES: Tuple[str, ...] = ("du_apparent", "du_blocks", "walk")

DEFAULT_BLOCK_SIZE = 1024


@dataclass(frozen=True)
class Measurement:
    """Size of one directory and the strategy that produced it."""

    size_bytes: int
    strategy: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.strategy is not None


def run_du(path: Path, flags: str, du_command: str = "du") -> Optional[int]:
    """
    Run the disk usage utility on ``path`` and parse its first number.

    The path is passed after ``--`` so names starting with a dash are never
    read as options, and with a trailing separator so a symlinked directory
    is measured through to its target.

    Args:
        path: Directory to measure
        flags: Flags passed to du, e.g. ``-sb``
        du_command: Utility name or path

    Returns:
        The first integer du printed, or None if du is missing, fails,
        or prints nothing usable
    """
    executable = shutil.which(du_command)
    if executable is None:
        logger.debug(f"{du_command} not found on PATH")
        return None

    target = str(path)
    if not target.endswith(os.sep):
        target += os.sep

    result = subprocess.run(
        [executable, flags, "--", target],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        logger.debug(f"{du_command} {flags} exited {result.returncode} for {path}: {result.stderr.strip()}")
        return None

    fields = result.stdout.split()
    if not fields:
        return None
    return int(fields[0])


def du_apparent_size(path: Path, du_command: str = "du") -> Optional[int]:
    """Apparent size in bytes as reported by ``du -sb``."""
    return run_du(path, "-sb", du_command)


def du_block_size(path: Path, du_command: str = "du",
                  block_size: int = DEFAULT_BLOCK_SIZE) -> Optional[int]:
    """Block usage from ``du -sk`` converted to bytes."""
    blocks = run_du(path, "-sk", du_command)
    if blocks is None:
        return None
    return blocks * block_size


def walk_size(path: Path) -> Optional[int]:
    """Sum of the sizes of every file under ``path``."""
    if not Path(path).is_dir():
        return None
    return sum_file_sizes(path)


def build_strategies(
    names: Sequence[str] = STRATEGY_NAMES,
    du_command: str = "du",
    block_size: int = DEFAULT_BLOCK_SIZE
) -> List[Tuple[str, SizeStrategy]]:
    """
    Build a named strategy chain.

    Args:
        names: Strategy names in the order to try them
        du_command: Disk usage utility for the du strategies
        block_size: Bytes per block for ``du_blocks``

    Returns:
        List of (name, strategy) pairs

    Raises:
        ValueError: If a name is not a registered strategy
    """
    registry: Dict[str, SizeStrategy] = {
        "du_apparent": lambda p: du_apparent_size(p, du_command),
        "du_blocks": lambda p: du_block_size(p, du_command, block_size),
        "walk": walk_size,
    }
    chain = []
    for name in names:
        if name not in registry:
            raise ValueError(f"Unknown size strategy: {name}")
        chain.append((name, registry[name]))
    return chain


class SizeEstimator:
    """Measures directories with an ordered fallback chain of strategies."""

    # Failures a strategy may raise that just mean "try the next one"
    ABSORBED_ERRORS = (OSError, ValueError, subprocess.SubprocessError)

    def __init__(
        self,
        strategies: Optional[Sequence[Union[str, Tuple[str, SizeStrategy]]]] = None,
        du_command: str = "du",
        block_size: int = DEFAULT_BLOCK_SIZE
    ):
        """
        Initialize the estimator.

        Args:
            strategies: Strategy names, or (name, callable) pairs, in the
                order to try them. Defaults to du_apparent, du_blocks, walk.
            du_command: Disk usage utility for the du strategies
            block_size: Bytes per block for ``du_blocks``
        """
        if strategies is None:
            strategies = STRATEGY_NAMES

        self.strategies: List[Tuple[str, SizeStrategy]] = []
        for item in strategies:
            if isinstance(item, str):
                self.strategies.extend(build_strategies([item], du_command, block_size))
            else:
                self.strategies.append(item)

    @classmethod
    def from_settings(cls, settings) -> "SizeEstimator":
        return cls(
            strategies=settings.strategies,
            du_command=settings.du_command,
            block_size=settings.block_size,
        )

    @property
    def strategy_names(self) -> List[str]:
        return [name for name, _ in self.strategies]

    def measure_strict(self, path: Path) -> Measurement:
        """
        Measure ``path`` with the first strategy that succeeds.

        Raises:
            MeasurementUnavailable: If every strategy failed
        """
        path = Path(path)
        for name, strategy in self.strategies:
            try:
                size = strategy(path)
            except self.ABSORBED_ERRORS as e:
                logger.debug(f"Strategy {name} failed for {path}: {e}")
                continue

            if size is None or size < 0:
                logger.debug(f"Strategy {name} gave no result for {path}")
                continue
            return Measurement(size_bytes=int(size), strategy=name)

        raise MeasurementUnavailable(path, self.strategy_names)

    def measure(self, path: Path) -> Measurement:
        """
        Measure ``path``, falling back to a zero size.

        Returns:
            Measurement whose strategy is None when nothing worked
        """
        try:
            return self.measure_strict(path)
        except MeasurementUnavailable as e:
            logger.warning(f"{e}; recording 0 bytes")
            return Measurement(size_bytes=0, strategy=None)

    def estimate(self, path: Path) -> int:
        """Total size of ``path`` in bytes, 0 if it cannot be measured."""
        return self.measure(path).size_bytes
