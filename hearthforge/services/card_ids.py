"""
Card id normalization.

Some ids in deck codes are reprints or variants of another card and
count as copies of it. Normalization maps them to the canonical id so
copies are counted and displayed together.

INVARIANTS:
1. normalize_id never raises
2. An id with no metadata, or no canonical id, maps to itself
"""

from collections.abc import Iterable, Mapping
from typing import Protocol

from hearthforge.models.card import CardMetadata


class IdTable(Protocol):
    """Read-only id metadata lookup."""

    def lookup(self, card_id: int) -> CardMetadata | None: ...


class StaticIdTable:
    """IdTable over a fixed mapping, built once and never refreshed."""

    def __init__(self, cards: Mapping[int, CardMetadata]) -> None:
        self._cards = dict(cards)

    @classmethod
    def from_aliases(cls, aliases: Mapping[int, int | None]) -> "StaticIdTable":
        """Build a table from bare {card_id: canonical_id} pairs."""
        return cls(
            {
                card_id: CardMetadata(id=card_id, canonical_id=canonical_id)
                for card_id, canonical_id in aliases.items()
            }
        )

    def lookup(self, card_id: int) -> CardMetadata | None:
        return self._cards.get(card_id)

    def __len__(self) -> int:
        return len(self._cards)


def normalize_id(card_id: int, table: IdTable) -> int:
    """
    Return the canonical id for card_id, or card_id itself.

    Args:
        card_id: Raw id from a deck code
        table: Id metadata lookup

    Returns:
        The canonical id if the table knows one, else card_id unchanged
    """
    metadata = table.lookup(card_id)
    if metadata is None or metadata.canonical_id is None:
        return card_id
    return metadata.canonical_id


def normalize_ids(card_ids: Iterable[int], table: IdTable) -> list[int]:
    """Normalize every id, preserving order and duplicates."""
    return [normalize_id(card_id, table) for card_id in card_ids]
