from dataclasses import dataclass

# Column order of a Decked Builder collection export. The export's own
# header line is skipped and these names are used instead.
DECKED_BUILDER_COLUMNS = (
    "Total Qty",
    "Reg Qty",
    "Foil Qty",
    "Card",
    "Set",
    "Mana Cost",
    "Card Type",
    "Color",
    "Rarity",
    "Mvid",
    "Single Price",
    "Single Foil Price",
    "Total Price",
    "Price Source",
    "Notes",
)

# One export line keyed by DECKED_BUILDER_COLUMNS
SourceRow = dict[str, str]


@dataclass(frozen=True, slots=True)
class CollectionEntry:
    """
    The part of a Decked Builder row the conversion uses.

    Attributes:
        reg_qty: Copies owned in regular finish
        foil_qty: Copies owned in foil finish
        card: Card name as Decked Builder spells it
        set_name: Full set name (not a set code)
        rarity: Decked Builder rarity letter, read but not converted
        mvid: Gatherer multiverse id, or a Decked Builder placeholder id
    """

    reg_qty: int
    foil_qty: int
    card: str
    set_name: str
    rarity: str
    mvid: int

    @classmethod
    def from_row(cls, row: SourceRow) -> "CollectionEntry":
        """
        Project a parsed export row down to the consumed fields.

        Raises:
            ValueError: If a quantity or the mvid is not an integer
        """
        return cls(
            reg_qty=int(row["Reg Qty"].strip()),
            foil_qty=int(row["Foil Qty"].strip()),
            card=row["Card"],
            set_name=row["Set"],
            rarity=row["Rarity"],
            mvid=int(row["Mvid"].strip()),
        )
