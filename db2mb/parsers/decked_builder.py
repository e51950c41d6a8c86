"""
Parser for Decked Builder collection CSV exports.

Export format (first line is a header and is ignored):
    Total Qty,Reg Qty,Foil Qty,Card,Set,Mana Cost,Card Type,Color,Rarity,
    Mvid,Single Price,Single Foil Price,Total Price,Price Source,Notes

Example:
    4,3,1,Lightning Bolt,Magic 2010,{R},Instant,Red,C,191089,...
"""

import csv
import logging
from io import StringIO
from pathlib import Path

from db2mb.models.entry import DECKED_BUILDER_COLUMNS, CollectionEntry, SourceRow
from db2mb.models.failure import InputUnreadableError, MalformedRowError

logger = logging.getLogger(__name__)

# Literal (broken, fixed) replacements applied before parsing.
# Decked Builder writes the Time Spiral timeshifted set name with doubled
# quotes but without quoting the field itself, which breaks CSV parsing.
KNOWN_QUOTING_DEFECTS: tuple[tuple[str, str], ...] = (
    ('Time Spiral ""Timeshifted""', '"Time Spiral ""Timeshifted"""'),
)


def patch_known_quoting_defects(text: str) -> str:
    """Repair known malformed fields in a Decked Builder export."""
    for broken, fixed in KNOWN_QUOTING_DEFECTS:
        text = text.replace(broken, fixed)
    return text


def parse_collection_csv(text: str) -> list[SourceRow]:
    """
    Parse export text into rows keyed by DECKED_BUILDER_COLUMNS.

    The first line is skipped unconditionally. Blank lines are skipped.

    Raises:
        MalformedRowError: If a row does not have exactly one value per column
    """
    rows: list[SourceRow] = []
    reader = csv.reader(StringIO(text), delimiter=",")

    # Header line; the fixed column names replace it
    next(reader, None)

    for values in reader:
        if not values:
            continue

        if len(values) != len(DECKED_BUILDER_COLUMNS):
            raise MalformedRowError(
                f"expected {len(DECKED_BUILDER_COLUMNS)} columns, found {len(values)}",
                line_number=reader.line_num,
            )

        rows.append(dict(zip(DECKED_BUILDER_COLUMNS, values, strict=True)))

    return rows


def rows_to_entries(rows: list[SourceRow]) -> list[CollectionEntry]:
    """
    Project parsed rows to CollectionEntry values.

    Raises:
        MalformedRowError: If a quantity or mvid is not an integer
    """
    entries: list[CollectionEntry] = []

    for index, row in enumerate(rows, start=1):
        try:
            entries.append(CollectionEntry.from_row(row))
        except ValueError as e:
            raise MalformedRowError(
                f"data row {index} ({row['Card']!r}) has a non-numeric quantity or Mvid",
                detail=str(e),
            ) from e

    return entries


def load_collection(path: Path) -> list[CollectionEntry]:
    """
    Read and parse a Decked Builder collection export.

    Args:
        path: Path to the exported CSV

    Returns:
        One CollectionEntry per data row, in file order

    Raises:
        InputUnreadableError: If the file cannot be read
        MalformedRowError: If any row does not fit the export schema
    """
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadableError(f"Cannot read collection file {path}", str(e)) from e

    rows = parse_collection_csv(patch_known_quoting_defects(raw))
    entries = rows_to_entries(rows)

    logger.info("Parsed %d collection entries from %s", len(entries), path)
    return entries
