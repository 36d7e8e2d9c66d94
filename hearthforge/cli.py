"""
Command line deck decoder.

Usage:
    hearthforge AAECAR8G...
    hearthforge "### My Deck ..." --mode twist
    hearthforge CODE1 --comp CODE2
    hearthforge CODE --no-normalize
"""

import argparse
import logging
import sys
from collections import Counter
from collections.abc import Sequence

from hearthforge.config import LOG_FORMAT, settings
from hearthforge.models.deck import DeckDifference, DeckSkeleton
from hearthforge.models.failure import DeckCodeError
from hearthforge.services.card_ids import IdTable
from hearthforge.services.deck_decoder import compare_decks, decode_deck
from hearthforge.services.hearth_sim import get_id_table


def _card_label(card_id: int, table: IdTable | None) -> str:
    metadata = table.lookup(card_id) if table is not None else None
    if metadata is None or not metadata.name:
        return str(card_id)
    return f"{metadata.name} ({card_id})"


def _count_prefix(count: int) -> str:
    return f"{count}x" if count > 1 else ""


def format_deck(deck: DeckSkeleton, table: IdTable | None = None) -> str:
    """Render a deck as one line per distinct card, then sideboards, then the code."""
    lines = []
    if deck.title:
        lines.append(deck.title)
    lines.append(f"{deck.format.label.upper():>10} deck, hero {_card_label(deck.hero_id, table)}.")

    for card_id, count in deck.card_counts().items():
        lines.append(f"{_count_prefix(count):>4} {_card_label(card_id, table)}")

    for sideboard in deck.sideboards:
        lines.append(f"Sideboard of {_card_label(sideboard.owner_id, table)}:")
        for card_id, count in Counter(sideboard.card_ids).items():
            lines.append(f"{_count_prefix(count):>4} {_card_label(card_id, table)}")

    lines.append(deck.code)
    return "\n".join(lines)


def format_difference(diff: DeckDifference, table: IdTable | None = None) -> str:
    """Render shared cards, then each deck's extra copies marked + and -."""
    lines = [
        f"{_count_prefix(count):>4} {_card_label(card_id, table)}"
        for card_id, count in diff.shared.items()
    ]

    lines.append(f"\n{diff.first_code}")
    for card_id, count in diff.first_only.items():
        lines.append(f"+{_count_prefix(count):>3} {_card_label(card_id, table)}")

    lines.append(f"\n{diff.second_code}")
    for card_id, count in diff.second_only.items():
        lines.append(f"-{_count_prefix(count):>3} {_card_label(card_id, table)}")

    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hearthforge",
        description="Decode a Hearthstone deck code",
    )
    parser.add_argument(
        "code",
        help="Deck code, or the game client's full clipboard text",
    )
    parser.add_argument(
        "-c",
        "--comp",
        metavar="DECK2",
        help="Compare with a second deck",
    )
    parser.add_argument(
        "-m",
        "--mode",
        help="Override the format given by the code (Twist, Tavern Brawl, ...)",
    )
    parser.add_argument(
        "--no-normalize",
        action="store_true",
        help="Print ids as encoded, without fetching card metadata",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    args = build_parser().parse_args(argv)

    table: IdTable | None = None if args.no_normalize else get_id_table()

    try:
        deck = decode_deck(args.code, table=table, format_override=args.mode)
        if args.comp:
            other = decode_deck(args.comp, table=table)
            print(format_difference(compare_decks(deck, other), table))
        else:
            print(format_deck(deck, table))
    except DeckCodeError as e:
        print(f"{e.message} {e.detail or ''}".rstrip(), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
