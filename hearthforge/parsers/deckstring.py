"""
Decoder for Hearthstone deck codes ("deckstrings").

A deck code is standard base64 over a positional byte layout:

    offset 0-1  reserved header (0x00, version)
    offset 2    varint  format code
    offset 3    hero count (always 1 in practice)
    offset 4    varint  hero card id
    varint N1, then N1 card ids               (one copy each)
    varint N2, then N2 card ids               (two copies each)
    varint N3, then N3 (card id, count) pairs (count copies each)
    optional sideboard section:
    varint G, then per group: varint M, then M (card id, owner id) pairs

The layout is not self-describing. Fields are read in this exact order.
"""

import base64
import binascii

from hearthforge.models.deck import Format, GameFormat, RawDeckData
from hearthforge.models.failure import (
    MalformedBase64Error,
    TruncatedInputError,
    UnsupportedFormatError,
)
from hearthforge.parsers.varint import ByteCursor, read_varint

# Fixed slots of the upstream deckstring header. The fields before each
# offset are one byte wide in every published code, so these are protocol
# constants rather than positions derived while reading.
FORMAT_OFFSET = 2
HERO_OFFSET = 4

# Shortest buffer that still holds the header and a one-byte hero id
MIN_PREFIX_LENGTH = HERO_OFFSET + 1

# Group sizes and copy counts are single-byte fields
COUNT_BITS = 8

FORMAT_CODES: dict[int, GameFormat] = {
    1: GameFormat.WILD,
    2: GameFormat.STANDARD,
    3: GameFormat.CLASSIC,
    4: GameFormat.TWIST,
}


def format_from_code(format_code: int) -> Format:
    """
    Map a decoded format code to a Format.

    Raises:
        UnsupportedFormatError: If the code is not in FORMAT_CODES
    """
    kind = FORMAT_CODES.get(format_code)
    if kind is None:
        raise UnsupportedFormatError(format_code)
    return Format(kind=kind)


def b64decode_code(code: str) -> bytes:
    """
    Decode the base64 text of a deck code.

    Surrounding whitespace is ignored and missing padding is restored.

    Raises:
        MalformedBase64Error: If the text is not standard-alphabet base64
    """
    text = code.strip()
    text += "=" * (-len(text) % 4)
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedBase64Error(code, str(e)) from e


def decode(code: str, check_format: bool = True) -> RawDeckData:
    """
    Decode a base64 deck code into raw ids.

    Args:
        code: Bare deck code (see extract_title_and_code for pasted text)
        check_format: Reject unknown format codes. Callers that override
            the format pass False.

    Returns:
        RawDeckData with ids exactly as encoded

    Raises:
        MalformedBase64Error: If code is not valid base64
        TruncatedInputError: If the decoded bytes end early
        VarintOverflowError: If a count field does not fit one byte
        UnsupportedFormatError: If the format code is unknown
    """
    return decode_bytes(b64decode_code(code), check_format=check_format)


def decode_bytes(data: bytes, check_format: bool = True) -> RawDeckData:
    """
    Decode the binary deckstring layout.

    Raises:
        TruncatedInputError: If data ends early
        VarintOverflowError: If a count field does not fit one byte
        UnsupportedFormatError: If the format code is unknown
    """
    if len(data) < MIN_PREFIX_LENGTH:
        raise TruncatedInputError(len(data), len(data))

    cursor = ByteCursor(data)

    cursor.seek(FORMAT_OFFSET)
    format_code = read_varint(cursor)
    if check_format:
        format_from_code(format_code)

    cursor.seek(HERO_OFFSET)
    hero_id = read_varint(cursor)

    card_ids: list[int] = []

    for _ in range(read_varint(cursor, COUNT_BITS)):
        card_ids.append(read_varint(cursor))

    for _ in range(read_varint(cursor, COUNT_BITS)):
        card_id = read_varint(cursor)
        card_ids.extend((card_id, card_id))

    for _ in range(read_varint(cursor, COUNT_BITS)):
        card_id = read_varint(cursor)
        copies = read_varint(cursor, COUNT_BITS)
        card_ids.extend([card_id] * copies)

    return RawDeckData(
        format_code=format_code,
        hero_id=hero_id,
        card_ids=card_ids,
        sideboard_cards=_read_sideboards(cursor),
    )


def _read_sideboards(cursor: ByteCursor) -> list[tuple[int, int]]:
    """Read the optional trailing sideboard section. Absent means empty."""
    pairs: list[tuple[int, int]] = []
    if cursor.at_end:
        return pairs

    for _ in range(read_varint(cursor, COUNT_BITS)):
        for _ in range(read_varint(cursor, COUNT_BITS)):
            card_id = read_varint(cursor)
            owner_id = read_varint(cursor)
            pairs.append((card_id, owner_id))

    return pairs
