from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


class GameFormat(str, Enum):
    """Game formats a deck can be built for."""

    STANDARD = "standard"
    WILD = "wild"
    CLASSIC = "classic"
    TWIST = "twist"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Format:
    """
    A deck's format.

    Known formats carry only their kind. CUSTOM wraps an arbitrary name
    supplied by the user (Tavern Brawl, Duels, ...).
    """

    kind: GameFormat
    custom_name: str | None = None

    @classmethod
    def custom(cls, name: str) -> "Format":
        return cls(kind=GameFormat.CUSTOM, custom_name=name)

    @classmethod
    def from_override(cls, text: str) -> "Format":
        """
        Build a Format from a user-supplied override string.

        Known format names match case-insensitively. Anything else is
        kept verbatim (trimmed) as a custom format.
        """
        name = text.strip()
        try:
            kind = GameFormat(name.lower())
        except ValueError:
            return cls.custom(name)
        if kind is GameFormat.CUSTOM:
            return cls.custom(name)
        return cls(kind=kind)

    @property
    def label(self) -> str:
        """Display name of the format."""
        if self.kind is GameFormat.CUSTOM:
            return self.custom_name or ""
        return self.kind.value

    def __str__(self) -> str:
        return self.label


@dataclass
class RawDeckData:
    """
    Ids exactly as read from a deck code, before normalization.

    Attributes:
        format_code: Numeric format field from the code
        hero_id: Hero card id
        card_ids: Main-deck card ids, one entry per copy
        sideboard_cards: (card_id, owner_id) pairs, owner_id being the
            main-deck card the sideboard belongs to
    """

    format_code: int
    hero_id: int
    card_ids: list[int] = field(default_factory=list)
    sideboard_cards: list[tuple[int, int]] = field(default_factory=list)


@dataclass
class Sideboard:
    """Cards held in the sideboard of one main-deck card."""

    owner_id: int
    card_ids: list[int] = field(default_factory=list)


@dataclass
class DeckSkeleton:
    """
    A decoded deck, ids only.

    Hydrating ids into full cards is left to the card lookup layer.
    """

    code: str
    format: Format
    hero_id: int
    cards: list[int] = field(default_factory=list)
    sideboards: list[Sideboard] = field(default_factory=list)
    title: str | None = None

    @property
    def card_count(self) -> int:
        """Total cards in the main deck."""
        return len(self.cards)

    def card_counts(self) -> Counter[int]:
        """Copies per card id in the main deck."""
        return Counter(self.cards)


@dataclass
class DeckDifference:
    """Card multiset comparison between two decks."""

    first_code: str
    second_code: str
    shared: dict[int, int] = field(default_factory=dict)
    first_only: dict[int, int] = field(default_factory=dict)
    second_only: dict[int, int] = field(default_factory=dict)

    @property
    def is_identical(self) -> bool:
        """True if both decks hold exactly the same cards."""
        return not self.first_only and not self.second_only
