from hearthforge.parsers.deck_text import extract_code, extract_title, extract_title_and_code
from hearthforge.parsers.deckstring import decode, decode_bytes, format_from_code
from hearthforge.parsers.hearth_sim import (
    MetadataFetchError,
    fetch_hearth_sim_cards,
    load_hearth_sim_cards,
    parse_hearth_sim_cards,
)
from hearthforge.parsers.varint import ByteCursor, encode_varint, read_varint

__all__ = [
    "ByteCursor",
    "MetadataFetchError",
    "decode",
    "decode_bytes",
    "encode_varint",
    "extract_code",
    "extract_title",
    "extract_title_and_code",
    "fetch_hearth_sim_cards",
    "format_from_code",
    "load_hearth_sim_cards",
    "parse_hearth_sim_cards",
    "read_varint",
]
