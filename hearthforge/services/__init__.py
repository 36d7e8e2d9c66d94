"""
HearthForge services.

Deck decoding, id normalization and card metadata.
"""

from hearthforge.services.card_ids import (
    IdTable,
    StaticIdTable,
    normalize_id,
    normalize_ids,
)
from hearthforge.services.deck_decoder import (
    build_skeleton,
    compare_decks,
    decode_deck,
    group_sideboards,
)
from hearthforge.services.hearth_sim import HearthSimIdTable, get_id_table

__all__ = [
    # Id normalization
    "IdTable",
    "StaticIdTable",
    "normalize_id",
    "normalize_ids",
    # Metadata cache
    "HearthSimIdTable",
    "get_id_table",
    # Deck pipeline
    "build_skeleton",
    "compare_decks",
    "decode_deck",
    "group_sideboards",
]
