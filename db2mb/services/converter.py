"""
Decked Builder to ManaBox conversion pipeline.

Stages run once each, in order: load, partition, enrich, reshape, write.
Every row is resolved before anything is written, so a failed lookup
leaves no partial output behind.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from db2mb.config import settings
from db2mb.parsers.decked_builder import load_collection
from db2mb.services.card_lookup import enrich
from db2mb.services.classifier import partition_entries
from db2mb.services.reshaper import reshape_resolvable, reshape_unresolvable
from db2mb.writers.csv_writer import write_manabox_csv, write_unconvertible_csv

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Summary of a finished conversion."""

    entry_count: int
    resolvable_count: int
    unresolvable_count: int
    manabox_row_count: int
    unconvertible_row_count: int
    out_path: Path
    fail_path: Path


async def convert_collection(
    csv_path: Path,
    out_path: Path,
    fail_path: Path,
    *,
    client: httpx.AsyncClient | None = None,
    threshold: int | None = None,
) -> ConversionResult:
    """
    Convert a Decked Builder export into ManaBox and unconvertible CSVs.

    Args:
        csv_path: Decked Builder collection export
        out_path: Where to write the ManaBox import file
        fail_path: Where to write entries that have no Scryfall id
        client: Optional httpx client for the Scryfall lookup
        threshold: Smallest placeholder id. Defaults to settings.

    Returns:
        ConversionResult with per-stage counts

    Raises:
        ConversionError: On any read, parse, lookup or write failure
    """
    if threshold is None:
        threshold = settings.placeholder_id_threshold

    entries = load_collection(csv_path)

    partition = partition_entries(entries, threshold)
    logger.info(
        "%d entries resolvable, %d with placeholder ids",
        len(partition.resolvable),
        len(partition.unresolvable),
    )

    lookup = await enrich(partition.resolvable, client=client)

    manabox_rows = reshape_resolvable(partition.resolvable, lookup)
    unconvertible_rows = reshape_unresolvable(partition.unresolvable)

    write_manabox_csv(out_path, manabox_rows)
    write_unconvertible_csv(fail_path, unconvertible_rows)

    return ConversionResult(
        entry_count=len(entries),
        resolvable_count=len(partition.resolvable),
        unresolvable_count=len(partition.unresolvable),
        manabox_row_count=len(manabox_rows),
        unconvertible_row_count=len(unconvertible_rows),
        out_path=out_path,
        fail_path=fail_path,
    )
