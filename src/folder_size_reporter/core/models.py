"""
Report data types.

© 2026 MBP LLC. All rights reserved.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..config.settings import RunConfig


def quote_name(name: str) -> str:
    """Quote a CSV field, doubling any embedded double quotes."""
    return '"' + name.replace('"', '""') + '"'


@dataclass(frozen=True)
class FolderRecord:
    """One immediate child directory and its measured size."""

    name: str
    captured_date: str
    size_bytes: int

    def __post_init__(self):
        if isinstance(self.size_bytes, bool) or not isinstance(self.size_bytes, int):
            raise TypeError(f"size_bytes must be an int, got {type(self.size_bytes).__name__}")
        if self.size_bytes < 0:
            raise ValueError(f"size_bytes must be non-negative, got {self.size_bytes}")

    def to_csv_row(self) -> str:
        return f"{quote_name(self.name)},{self.captured_date},{self.size_bytes}"


@dataclass
class Report:
    """Ordered folder records for one run, in enumeration order."""

    config: Optional[RunConfig] = None
    records: List[FolderRecord] = field(default_factory=list)

    def add(self, record: FolderRecord) -> None:
        self.records.append(record)

    @property
    def total_bytes(self) -> int:
        return sum(record.size_bytes for record in self.records)

    def __iter__(self) -> Iterator[FolderRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
