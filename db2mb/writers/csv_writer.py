"""
CSV output for converted collections.

Files are overwritten in place and always start with a header row,
so an empty result still produces an importable file.
"""

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from db2mb.models.failure import OutputUnwritableError
from db2mb.models.output import ManaBoxRow, UnconvertibleRow

logger = logging.getLogger(__name__)


def write_rows(
    path: Path,
    fieldnames: Sequence[str],
    rows: Sequence[ManaBoxRow] | Sequence[UnconvertibleRow],
) -> Path:
    """
    Write rows to a CSV file, creating parent directories as needed.

    Args:
        path: Destination file
        fieldnames: Header row, in column order
        rows: Output rows

    Returns:
        The path written

    Raises:
        OutputUnwritableError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(fieldnames))
            writer.writeheader()
            for row in rows:
                writer.writerow(row.as_csv_dict())
    except OSError as e:
        raise OutputUnwritableError(f"Cannot write {path}", str(e)) from e

    logger.info("Wrote %d rows to %s", len(rows), path)
    return path


def write_manabox_csv(path: Path, rows: Sequence[ManaBoxRow]) -> Path:
    """Write the ManaBox import file."""
    return write_rows(path, ManaBoxRow.FIELDNAMES, rows)


def write_unconvertible_csv(path: Path, rows: Sequence[UnconvertibleRow]) -> Path:
    """Write the file of entries that need manual import."""
    return write_rows(path, UnconvertibleRow.FIELDNAMES, rows)
