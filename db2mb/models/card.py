from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ResolvedCard:
    """
    A Scryfall card returned by the collection lookup.

    Attributes:
        scryfall_id: Scryfall's UUID for this printing
        name: Card name on Scryfall
        multiverse_ids: Every Gatherer id that points at this printing.
            Double-faced and split cards list more than one.
    """

    scryfall_id: str
    name: str
    multiverse_ids: tuple[int, ...] = ()

    @classmethod
    def from_scryfall(cls, card: dict[str, Any]) -> "ResolvedCard":
        """Build from a Scryfall card object."""
        return cls(
            scryfall_id=str(card["id"]),
            name=card.get("name", ""),
            multiverse_ids=tuple(int(mvid) for mvid in card.get("multiverse_ids", [])),
        )
