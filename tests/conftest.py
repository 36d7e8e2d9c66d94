import base64
from collections.abc import Callable, Sequence

import pytest

from hearthforge.models.card import CardMetadata, Rarity
from hearthforge.parsers.varint import encode_varint
from hearthforge.services.card_ids import StaticIdTable
from hearthforge.services.hearth_sim import get_id_table

EncodeDeck = Callable[..., str]
EncodeDeckBytes = Callable[..., bytes]


def _encode_deck_bytes(
    format_code: int,
    hero_id: int,
    singles: Sequence[int] = (),
    doubles: Sequence[int] = (),
    multiples: Sequence[tuple[int, int]] = (),
    sideboard_groups: Sequence[Sequence[tuple[int, int]]] | None = None,
) -> bytes:
    """Encode a deck in the deckstring layout. Test oracle for the decoder."""
    out = bytearray(b"\x00\x01")
    out += encode_varint(format_code)
    out += b"\x01"
    out += encode_varint(hero_id)

    out += encode_varint(len(singles))
    for card_id in singles:
        out += encode_varint(card_id)

    out += encode_varint(len(doubles))
    for card_id in doubles:
        out += encode_varint(card_id)

    out += encode_varint(len(multiples))
    for card_id, copies in multiples:
        out += encode_varint(card_id)
        out += encode_varint(copies)

    if sideboard_groups is not None:
        out += encode_varint(len(sideboard_groups))
        for group in sideboard_groups:
            out += encode_varint(len(group))
            for card_id, owner_id in group:
                out += encode_varint(card_id)
                out += encode_varint(owner_id)

    return bytes(out)


@pytest.fixture
def encode_deck_bytes() -> EncodeDeckBytes:
    """Encode a deck to raw deckstring bytes."""
    return _encode_deck_bytes


@pytest.fixture
def encode_deck() -> EncodeDeck:
    """Encode a deck to its base64 deck code."""

    def _encode(*args, **kwargs) -> str:
        return base64.b64encode(_encode_deck_bytes(*args, **kwargs)).decode("ascii")

    return _encode


@pytest.fixture
def sample_metadata() -> dict[int, CardMetadata]:
    """Id metadata with one reprint aliased to its original."""
    return {
        100: CardMetadata(
            id=100,
            canonical_id=100,
            card_id="EX1_066",
            name="Acidic Swamp Ooze",
            cost=2,
            rarity=Rarity.COMMON,
            collectible=True,
        ),
        69550: CardMetadata(
            id=69550,
            canonical_id=100,
            card_id="CORE_EX1_066",
            name="Acidic Swamp Ooze",
            cost=2,
            rarity=Rarity.COMMON,
            collectible=True,
        ),
        200: CardMetadata(
            id=200,
            canonical_id=None,
            card_id="CS2_029",
            name="Fireball",
            cost=4,
            rarity=Rarity.FREE,
            collectible=True,
        ),
    }


@pytest.fixture
def id_table(sample_metadata: dict[int, CardMetadata]) -> StaticIdTable:
    return StaticIdTable(sample_metadata)


@pytest.fixture(autouse=True)
def clear_id_table_cache():
    """Drop the process-wide id table between tests."""
    get_id_table.cache_clear()
    yield
    get_id_table.cache_clear()


@pytest.fixture
def sample_clipboard() -> str:
    """Deck text as copied from the game client."""
    return """### Big Spell Mage #1
# Class: Mage
# Format: Standard
# Year of the Pegasus
#
# 2x (1) Arcane Missiles
# 1x (4) Fireball
#
AAECAQcAAAA=
#
# To use this deck, copy it to your clipboard and create a new deck in Hearthstone"""
