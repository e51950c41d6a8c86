"""
Split collection entries by whether Scryfall can resolve them.

Decked Builder gives cards without a Gatherer multiverse id a placeholder
id of its own. Those ids mean nothing to Scryfall, so such entries are
passed through by name and set instead of being looked up.
"""

from dataclasses import dataclass, field

from db2mb.config import PLACEHOLDER_ID_THRESHOLD
from db2mb.models.entry import CollectionEntry


@dataclass
class Partition:
    """Entries split by resolvability, each list in input order."""

    resolvable: list[CollectionEntry] = field(default_factory=list)
    """Entries with a real multiverse id."""

    unresolvable: list[CollectionEntry] = field(default_factory=list)
    """Entries with a Decked Builder placeholder id."""

    def __len__(self) -> int:
        return len(self.resolvable) + len(self.unresolvable)


def is_resolvable(entry: CollectionEntry, threshold: int = PLACEHOLDER_ID_THRESHOLD) -> bool:
    """Check whether an entry carries a real multiverse id."""
    return entry.mvid < threshold


def partition_entries(
    entries: list[CollectionEntry],
    threshold: int = PLACEHOLDER_ID_THRESHOLD,
) -> Partition:
    """
    Partition entries into resolvable and unresolvable sets.

    Every entry lands in exactly one of the two lists.

    Args:
        entries: Parsed collection entries
        threshold: Smallest placeholder id

    Returns:
        Partition preserving relative order within each list
    """
    partition = Partition()

    for entry in entries:
        if is_resolvable(entry, threshold):
            partition.resolvable.append(entry)
        else:
            partition.unresolvable.append(entry)

    return partition
