"""
Multiverse id to Scryfall card lookup table.

Built once from the batched Scryfall response and passed to the reshaper.
A Scryfall card can list several multiverse ids (split cards, double-faced
cards, reprints sharing a Gatherer entry), so several ids may map to the
same card.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import httpx

from db2mb.models.card import ResolvedCard
from db2mb.models.entry import CollectionEntry
from db2mb.models.failure import UnresolvedCardError
from db2mb.services.scryfall_client import resolve_batch

logger = logging.getLogger(__name__)


class CardLookup(Mapping[int, ResolvedCard]):
    """Read-only mapping of multiverse id to the card that carries it."""

    def __init__(self, cards_by_mvid: Mapping[int, ResolvedCard]) -> None:
        self._cards = MappingProxyType(dict(cards_by_mvid))

    @classmethod
    def from_cards(cls, cards: Iterable[ResolvedCard]) -> "CardLookup":
        """
        Register every multiverse id each card exposes.

        When two cards claim the same id, the later one wins.
        """
        cards_by_mvid: dict[int, ResolvedCard] = {}
        for card in cards:
            for mvid in card.multiverse_ids:
                cards_by_mvid[mvid] = card
        return cls(cards_by_mvid)

    def __getitem__(self, mvid: int) -> ResolvedCard:
        return self._cards[mvid]

    def __iter__(self) -> Iterator[int]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def resolve(self, mvid: int) -> ResolvedCard:
        """
        Get the card for a multiverse id.

        Raises:
            UnresolvedCardError: If no returned card carries this id
        """
        try:
            return self._cards[mvid]
        except KeyError:
            raise UnresolvedCardError(mvid) from None


async def enrich(
    resolvable: list[CollectionEntry],
    *,
    client: httpx.AsyncClient | None = None,
) -> CardLookup:
    """
    Look up every resolvable entry on Scryfall and index the result.

    Sends one id per entry; repeated ids are not collapsed.

    Args:
        resolvable: Entries with real multiverse ids
        client: Optional httpx client passed through to the Scryfall lookup

    Returns:
        CardLookup covering every id Scryfall resolved
    """
    cards = await resolve_batch([entry.mvid for entry in resolvable], client=client)
    lookup = CardLookup.from_cards(cards)

    logger.info("Indexed %d multiverse ids across %d cards", len(lookup), len(cards))
    return lookup
