"""
CSV report writer.

© 2026 MBP LLC. All rights reserved.
"""

from pathlib import Path
from typing import Iterable, Union

from .models import FolderRecord
from ..exceptions import ReportWriteError
from ..utils.logger import logger

HEADER = "foldername,date,size_bytes"


def render_report(records: Iterable[FolderRecord]) -> str:
    """
    Render the header and one line per record.

    Only the folder name is quoted; date and size never need it.

    Args:
        records: Records in output order

    Returns:
        Report text, every line newline-terminated
    """
    lines = [HEADER]
    lines.extend(record.to_csv_row() for record in records)
    return "\n".join(lines) + "\n"


def write_report(records: Iterable[FolderRecord], path: Union[str, Path]) -> Path:
    """
    Write the report to ``path`` in a single write, replacing any existing file.

    Args:
        records: Records in output order
        path: Destination file

    Returns:
        The destination path

    Raises:
        ReportWriteError: If the file cannot be written
    """
    path = Path(path)
    text = render_report(records)
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
    except OSError as e:
        raise ReportWriteError(path, e.strerror or e) from e

    logger.debug(f"Wrote {len(text.encode('utf-8'))} bytes to {path}")
    return path
