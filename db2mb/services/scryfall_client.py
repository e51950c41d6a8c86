"""
Scryfall collection lookup.

Resolves Gatherer multiverse ids to Scryfall cards with the
/cards/collection endpoint, which accepts a list of identifiers and
returns every card it found plus the identifiers it did not.

API: https://scryfall.com/docs/api/cards/collection
"""

import asyncio
import logging
from typing import Any

import httpx

from db2mb.config import settings
from db2mb.models.card import ResolvedCard
from db2mb.models.failure import ScryfallError

logger = logging.getLogger(__name__)


def build_identifiers(multiverse_ids: list[int]) -> list[dict[str, int]]:
    """Build the /cards/collection identifier list. Duplicates are kept."""
    return [{"multiverse_id": mvid} for mvid in multiverse_ids]


def chunk_identifiers(
    identifiers: list[dict[str, int]], size: int
) -> list[list[dict[str, int]]]:
    """Split identifiers into request-sized chunks."""
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    return [identifiers[i : i + size] for i in range(0, len(identifiers), size)]


async def _post_collection(
    client: httpx.AsyncClient,
    url: str,
    identifiers: list[dict[str, int]],
) -> dict[str, Any]:
    try:
        response = await client.post(url, json={"identifiers": identifiers})
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ScryfallError(
            "Scryfall collection lookup failed",
            f"HTTP {e.response.status_code}",
        ) from e
    except httpx.RequestError as e:
        raise ScryfallError("Scryfall collection lookup failed", str(e)) from e

    data: dict[str, Any] = response.json()
    return data


async def resolve_batch(
    multiverse_ids: list[int],
    *,
    client: httpx.AsyncClient | None = None,
    api_url: str | None = None,
    batch_size: int | None = None,
    request_delay: float | None = None,
) -> list[ResolvedCard]:
    """
    Resolve multiverse ids to Scryfall cards in one batched lookup.

    The lookup is sent as as few requests as Scryfall's per-request
    identifier limit allows, one after another.

    Args:
        multiverse_ids: Ids to resolve, duplicates allowed
        client: Optional httpx client for connection reuse. Not closed here.
        api_url: Scryfall API base URL. Defaults to settings.
        batch_size: Identifiers per request. Defaults to settings.
        request_delay: Seconds between requests. Defaults to settings.

    Returns:
        Every card Scryfall returned, in response order

    Raises:
        ScryfallError: If any request fails
    """
    if not multiverse_ids:
        return []

    api_url = api_url if api_url is not None else settings.scryfall_api_url
    batch_size = batch_size if batch_size is not None else settings.collection_batch_size
    request_delay = request_delay if request_delay is not None else settings.request_delay

    url = f"{api_url.rstrip('/')}/cards/collection"
    chunks = chunk_identifiers(build_identifiers(multiverse_ids), batch_size)

    logger.info(
        "Looking up %d multiverse ids on Scryfall (%d requests)",
        len(multiverse_ids),
        len(chunks),
    )

    cards: list[ResolvedCard] = []
    not_found: list[dict[str, Any]] = []

    async def fetch_all(active: httpx.AsyncClient) -> None:
        for index, chunk in enumerate(chunks):
            if index > 0:
                await asyncio.sleep(request_delay)
            data = await _post_collection(active, url, chunk)
            cards.extend(ResolvedCard.from_scryfall(card) for card in data.get("data", []))
            not_found.extend(data.get("not_found", []))

    if client is not None:
        await fetch_all(client)
    else:
        async with httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
            timeout=settings.request_timeout,
        ) as owned:
            await fetch_all(owned)

    for identifier in not_found:
        logger.warning("Scryfall could not find %s", identifier)

    logger.info("Scryfall returned %d cards", len(cards))
    return cards
