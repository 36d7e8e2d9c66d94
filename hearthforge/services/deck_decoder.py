"""
Deck decoding service.

Runs pasted deck text through the full pipeline:

    pasted text -> (title, code) -> bytes -> RawDeckData -> DeckSkeleton

Decode failures (DeckCodeError) propagate unchanged to the caller.
"""

import logging

from hearthforge.models.deck import DeckDifference, DeckSkeleton, Format, RawDeckData, Sideboard
from hearthforge.parsers.deck_text import extract_title_and_code
from hearthforge.parsers.deckstring import decode, format_from_code
from hearthforge.services.card_ids import IdTable, normalize_id, normalize_ids

logger = logging.getLogger(__name__)


def group_sideboards(pairs: list[tuple[int, int]]) -> list[Sideboard]:
    """Group (card_id, owner_id) pairs by owner, in order of first appearance."""
    by_owner: dict[int, Sideboard] = {}
    for card_id, owner_id in pairs:
        if owner_id not in by_owner:
            by_owner[owner_id] = Sideboard(owner_id=owner_id)
        by_owner[owner_id].card_ids.append(card_id)
    return list(by_owner.values())


def build_skeleton(
    raw: RawDeckData,
    code: str,
    title: str | None = None,
    table: IdTable | None = None,
    format_override: str | None = None,
) -> DeckSkeleton:
    """
    Turn raw decoded ids into a DeckSkeleton.

    Args:
        raw: Output of the deckstring decoder
        code: The deck code raw was decoded from
        title: Deck title, if one was pasted
        table: Id metadata for normalization. None leaves ids as decoded.
        format_override: Replaces the decoded format (Twist, Tavern Brawl, ...)

    Raises:
        UnsupportedFormatError: If the format code is unknown and no
            override is given
    """
    if format_override and format_override.strip():
        deck_format = Format.from_override(format_override)
    else:
        deck_format = format_from_code(raw.format_code)

    cards = raw.card_ids
    pairs = raw.sideboard_cards
    if table is not None:
        cards = normalize_ids(raw.card_ids, table)
        pairs = [
            (normalize_id(card_id, table), normalize_id(owner_id, table))
            for card_id, owner_id in raw.sideboard_cards
        ]
        aliased = sum(1 for old, new in zip(raw.card_ids, cards) if old != new)
        if aliased:
            logger.info("Normalized %d aliased card ids in %s", aliased, code)

    return DeckSkeleton(
        code=code,
        title=title,
        format=deck_format,
        hero_id=raw.hero_id,
        cards=list(cards),
        sideboards=group_sideboards(pairs),
    )


def decode_deck(
    text: str,
    table: IdTable | None = None,
    format_override: str | None = None,
) -> DeckSkeleton:
    """
    Decode pasted deck text into a DeckSkeleton.

    Args:
        text: A bare deck code or the game client's full clipboard text
        table: Id metadata for normalization. None leaves ids as decoded.
        format_override: Replaces the decoded format

    Returns:
        DeckSkeleton with normalized ids

    Raises:
        DeckCodeError: If the code cannot be decoded. An unknown format
            code is accepted when format_override is given.
    """
    title, code = extract_title_and_code(text)
    # A blank override counts as none
    format_override = format_override.strip() if format_override else None
    # An override makes the encoded format irrelevant, so unknown codes pass
    raw = decode(code, check_format=not format_override)
    deck = build_skeleton(raw, code, title=title, table=table, format_override=format_override)

    logger.debug(
        "Decoded %s deck with %d cards and %d sideboards",
        deck.format,
        deck.card_count,
        len(deck.sideboards),
    )
    return deck


def compare_decks(first: DeckSkeleton, second: DeckSkeleton) -> DeckDifference:
    """
    Compare the main-deck cards of two decks.

    Returns:
        DeckDifference with the shared copies and each deck's extra copies
    """
    counts1 = first.card_counts()
    counts2 = second.card_counts()

    return DeckDifference(
        first_code=first.code,
        second_code=second.code,
        shared=dict(counts1 & counts2),
        first_only=dict(counts1 - counts2),
        second_only=dict(counts2 - counts1),
    )
