from dataclasses import dataclass
from enum import Enum


class Rarity(str, Enum):
    """Card rarity as reported by HearthSim."""

    LEGENDARY = "legendary"
    EPIC = "epic"
    RARE = "rare"
    COMMON = "common"
    FREE = "free"
    NONCOLLECTIBLE = "noncollectible"

    @classmethod
    def from_hearth_sim(cls, value: str) -> "Rarity":
        """Map a HearthSim rarity string ("LEGENDARY", ...) to a Rarity."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.NONCOLLECTIBLE


@dataclass(frozen=True, slots=True)
class CardMetadata:
    """
    Id metadata for one card, as used by the id normalizer.

    Attributes:
        id: Numeric card id (HearthSim dbfId), the id found in deck codes
        canonical_id: Id this card counts as a copy of, if it is a reprint
        card_id: HearthSim string id (e.g., "CORE_EX1_066")
        name: English card name
        cost: Mana cost
        rarity: Card rarity
        collectible: True if the card can appear in a collection
    """

    id: int
    canonical_id: int | None = None
    card_id: str = ""
    name: str = ""
    cost: int = 0
    rarity: Rarity = Rarity.NONCOLLECTIBLE
    collectible: bool = False
