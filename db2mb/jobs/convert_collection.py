"""
Convert a Decked Builder collection CSV to a ManaBox import CSV.

Entries Decked Builder could not tie to a Gatherer card are written to a
separate file by card name and set name for manual import.

Usage:
    db2mb --csv collection.csv --out manabox.csv --fail unconvertible.csv
"""

import argparse
import asyncio
import logging
from pathlib import Path

from db2mb.models.failure import ConversionError
from db2mb.services.converter import convert_collection

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="db2mb",
        description="convert Decked Builder collection CSV to ManaBox import-compatible CSV",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        required=True,
        help="the decked builder collection csv file",
    )
    parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="manabox-compatible output csv location",
    )
    parser.add_argument(
        "--fail",
        type=Path,
        required=True,
        help="location to output unconvertible decked builder entries",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = asyncio.run(
            convert_collection(
                args.csv.resolve(),
                args.out.resolve(),
                args.fail.resolve(),
            )
        )
    except ConversionError as e:
        logger.error("Conversion failed [%s]: %s", e.kind.value, e)
        raise SystemExit(1) from e

    logger.info(
        "Converted %d entries: %d ManaBox rows in %s, %d unconvertible rows in %s",
        result.entry_count,
        result.manabox_row_count,
        result.out_path,
        result.unconvertible_row_count,
        result.fail_path,
    )


if __name__ == "__main__":
    main()
