from db2mb.parsers.decked_builder import (
    KNOWN_QUOTING_DEFECTS,
    load_collection,
    parse_collection_csv,
    patch_known_quoting_defects,
    rows_to_entries,
)

__all__ = [
    "KNOWN_QUOTING_DEFECTS",
    "load_collection",
    "parse_collection_csv",
    "patch_known_quoting_defects",
    "rows_to_entries",
]
