from db2mb.models.card import ResolvedCard
from db2mb.models.entry import DECKED_BUILDER_COLUMNS, CollectionEntry, SourceRow
from db2mb.models.failure import (
    ConversionError,
    FailureKind,
    InputUnreadableError,
    MalformedRowError,
    OutputUnwritableError,
    ScryfallError,
    UnresolvedCardError,
)
from db2mb.models.output import FOIL, REGULAR, ManaBoxRow, UnconvertibleRow

__all__ = [
    "CollectionEntry",
    "ConversionError",
    "DECKED_BUILDER_COLUMNS",
    "FOIL",
    "FailureKind",
    "InputUnreadableError",
    "MalformedRowError",
    "ManaBoxRow",
    "OutputUnwritableError",
    "REGULAR",
    "ResolvedCard",
    "ScryfallError",
    "SourceRow",
    "UnconvertibleRow",
    "UnresolvedCardError",
]
