from pathlib import Path
from typing import Any

import pytest

from db2mb.models.entry import CollectionEntry

EXPORT_HEADER = (
    "Total Qty,Reg Qty,Foil Qty,Card,Set,Mana Cost,Card Type,Color,Rarity,Mvid,"
    "Single Price,Single Foil Price,Total Price,Price Source,Notes"
)


def export_line(
    reg_qty: int,
    foil_qty: int,
    card: str,
    set_name: str,
    mvid: int,
    rarity: str = "C",
) -> str:
    """Build one Decked Builder export line."""
    total = reg_qty + foil_qty
    return (
        f"{total},{reg_qty},{foil_qty},{card},{set_name},{{R}},Instant,Red,{rarity},"
        f"{mvid},0.25,1.50,1.75,TCGPlayer,"
    )


def scryfall_card(scryfall_id: str, name: str, multiverse_ids: list[int]) -> dict[str, Any]:
    """Minimal Scryfall card object."""
    return {
        "object": "card",
        "id": scryfall_id,
        "name": name,
        "multiverse_ids": multiverse_ids,
    }


def make_entry(
    reg_qty: int = 1,
    foil_qty: int = 0,
    card: str = "Lightning Bolt",
    set_name: str = "Magic 2010",
    mvid: int = 191089,
    rarity: str = "C",
) -> CollectionEntry:
    return CollectionEntry(
        reg_qty=reg_qty,
        foil_qty=foil_qty,
        card=card,
        set_name=set_name,
        rarity=rarity,
        mvid=mvid,
    )


@pytest.fixture
def sample_export() -> str:
    """Sample Decked Builder collection export."""
    return "\n".join(
        [
            EXPORT_HEADER,
            export_line(3, 1, "Lightning Bolt", "Magic 2010", 191089),
            "",
            export_line(0, 2, "Counterspell", "Tempest", 4675),
            export_line(2, 1, "Lotus Petal", 'Time Spiral ""Timeshifted""', 2000001, "S"),
            export_line(0, 0, "Shock", "Magic 2010", 191090),
            "",
        ]
    )


@pytest.fixture
def sample_export_path(tmp_path: Path, sample_export: str) -> Path:
    path = tmp_path / "collection.csv"
    path.write_text(sample_export, encoding="utf-8")
    return path


@pytest.fixture
def sample_collection_response() -> dict[str, Any]:
    """Scryfall /cards/collection response for sample_export."""
    return {
        "object": "list",
        "not_found": [],
        "data": [
            scryfall_card("bolt-m10", "Lightning Bolt", [191089]),
            scryfall_card("counterspell-tmp", "Counterspell", [4675]),
            scryfall_card("shock-m10", "Shock", [191090]),
        ],
    }
