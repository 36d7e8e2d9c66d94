"""
Extract a deck code and title from pasted deck text.

The game client copies decks as:

    ### Deck Name
    # Class: Mage
    # Format: Standard
    #
    AAECAR8G...
    #
    # To use this deck, copy it to your clipboard and create a new deck in Hearthstone

Users also paste the bare code, or the code inside a chat message.
"""

TITLE_MARKER = "###"

# A hash followed by one space. "#1" inside a title does not end it.
COMMENT_MARKER = "# "

# Every deckstring starts with bytes 0x00 0x01, which base64 renders as "AA"
CODE_PREFIX = "AA"


def extract_title(text: str) -> str | None:
    """
    Return the deck title from a "### Title" line, or None.

    The title runs from the marker to the next comment marker, or to the
    end of the marker's line if that comes first.
    """
    start = text.find(TITLE_MARKER)
    if start == -1:
        return None

    rest = text[start + len(TITLE_MARKER) :]
    title = rest.split("\n", 1)[0]
    end = title.find(COMMENT_MARKER)
    if end != -1:
        title = title[:end]

    title = title.strip()
    return title or None


def extract_code(text: str) -> str:
    """
    Return the first token that looks like a deck code.

    Falls back to the whole trimmed input. Decoding reports whether it
    actually is one.
    """
    for token in text.split():
        if token.startswith(CODE_PREFIX):
            return token
    return text.strip()


def extract_title_and_code(text: str) -> tuple[str | None, str]:
    """
    Split pasted deck text into (title, code).

    Never fails. Malformed input surfaces later, when the code is decoded.

    Example:
        >>> extract_title_and_code("### My Deck\\n# comment\\nAAECAQcG")
        ('My Deck', 'AAECAQcG')
    """
    return extract_title(text), extract_code(text)
