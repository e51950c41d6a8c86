"""
Rows written to the two output files.

ManaBox identifies a finish by an empty or non-empty "foil" column, so
the flag is kept as the literal string ManaBox expects.
"""

from dataclasses import dataclass
from typing import ClassVar

REGULAR = ""
FOIL = "1"


@dataclass(frozen=True, slots=True)
class ManaBoxRow:
    """A row ManaBox can import by Scryfall id."""

    FIELDNAMES: ClassVar[tuple[str, ...]] = ("quantity", "foil", "scryfall id")

    quantity: int
    foil: str
    scryfall_id: str

    def as_csv_dict(self) -> dict[str, str | int]:
        return {
            "quantity": self.quantity,
            "foil": self.foil,
            "scryfall id": self.scryfall_id,
        }


@dataclass(frozen=True, slots=True)
class UnconvertibleRow:
    """A row that has no Scryfall id and must be imported by name."""

    FIELDNAMES: ClassVar[tuple[str, ...]] = ("quantity", "card name", "set name", "foil")

    quantity: int
    card_name: str
    set_name: str
    foil: str

    def as_csv_dict(self) -> dict[str, str | int]:
        return {
            "quantity": self.quantity,
            "card name": self.card_name,
            "set name": self.set_name,
            "foil": self.foil,
        }
