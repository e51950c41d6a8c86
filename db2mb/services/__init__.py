"""
db2mb services.

Classification, Scryfall enrichment and row reshaping for the
conversion pipeline.
"""

from db2mb.services.card_lookup import CardLookup, enrich
from db2mb.services.classifier import Partition, is_resolvable, partition_entries
from db2mb.services.converter import ConversionResult, convert_collection
from db2mb.services.reshaper import (
    expand_quantities,
    reshape_resolvable,
    reshape_unresolvable,
    to_manabox_rows,
    to_unconvertible_rows,
)
from db2mb.services.scryfall_client import resolve_batch

__all__ = [
    "CardLookup",
    "ConversionResult",
    "Partition",
    "convert_collection",
    "enrich",
    "expand_quantities",
    "is_resolvable",
    "partition_entries",
    "reshape_resolvable",
    "reshape_unresolvable",
    "resolve_batch",
    "to_manabox_rows",
    "to_unconvertible_rows",
]
