"""
Turn collection entries into output rows.

Each entry becomes at most two rows: one for its regular copies and one
for its foil copies. A finish with no copies produces no row.
"""

from db2mb.models.card import ResolvedCard
from db2mb.models.entry import CollectionEntry
from db2mb.models.output import FOIL, REGULAR, ManaBoxRow, UnconvertibleRow
from db2mb.services.card_lookup import CardLookup


def expand_quantities(entry: CollectionEntry) -> list[tuple[int, str]]:
    """
    Split an entry into (quantity, foil flag) pairs.

    Regular finish comes first. Pairs with quantity <= 0 are dropped.
    """
    pairs = [(entry.reg_qty, REGULAR), (entry.foil_qty, FOIL)]
    return [(quantity, foil) for quantity, foil in pairs if quantity > 0]


def to_manabox_rows(entry: CollectionEntry, card: ResolvedCard) -> list[ManaBoxRow]:
    """Build ManaBox rows for an entry resolved to a Scryfall card."""
    return [
        ManaBoxRow(quantity=quantity, foil=foil, scryfall_id=card.scryfall_id)
        for quantity, foil in expand_quantities(entry)
    ]


def to_unconvertible_rows(entry: CollectionEntry) -> list[UnconvertibleRow]:
    """Build name-and-set rows for an entry with a placeholder id."""
    return [
        UnconvertibleRow(
            quantity=quantity,
            card_name=entry.card,
            set_name=entry.set_name,
            foil=foil,
        )
        for quantity, foil in expand_quantities(entry)
    ]


def reshape_resolvable(entries: list[CollectionEntry], lookup: CardLookup) -> list[ManaBoxRow]:
    """
    Build ManaBox rows for every resolvable entry, in order.

    Raises:
        UnresolvedCardError: If an entry's id is missing from the lookup
    """
    rows: list[ManaBoxRow] = []
    for entry in entries:
        rows.extend(to_manabox_rows(entry, lookup.resolve(entry.mvid)))
    return rows


def reshape_unresolvable(entries: list[CollectionEntry]) -> list[UnconvertibleRow]:
    """Build name-and-set rows for every unresolvable entry, in order."""
    rows: list[UnconvertibleRow] = []
    for entry in entries:
        rows.extend(to_unconvertible_rows(entry))
    return rows
