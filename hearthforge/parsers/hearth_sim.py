"""
HearthSim card data loader.

Parses the public card dump from https://hearthstonejson.com into id
metadata for the id normalizer.

Data: https://api.hearthstonejson.com/v1/latest/enUS/cards.json
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from hearthforge.models.card import CardMetadata, Rarity

HEARTH_SIM_CARDS_URL = "https://api.hearthstonejson.com/v1/latest/enUS/cards.json"


class MetadataFetchError(Exception):
    """Raised when HearthSim card data cannot be fetched."""

    pass


class HearthSimCard(BaseModel):
    """The fields we use from one HearthSim card entry."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    dbf_id: int
    count_as_copy_of_dbf_id: int | None = None
    id: str = ""
    name: str = ""
    cost: int | None = None
    rarity: str = ""
    collectible: bool = Field(default=False)


def _canonical_ids(cards: list[HearthSimCard]) -> dict[int, int]:
    """
    Resolve the canonical id of every card.

    An explicit countAsCopyOfDbfId wins. Otherwise the smallest id sharing
    the card's name and collectible flag is canonical, which collapses
    reprints that lack the explicit alias.
    """
    lowest: dict[tuple[str, bool], int] = {}
    for card in cards:
        key = (card.name, card.collectible)
        if key not in lowest or card.dbf_id < lowest[key]:
            lowest[key] = card.dbf_id

    canonical: dict[int, int] = {}
    for card in cards:
        if card.count_as_copy_of_dbf_id is not None:
            canonical[card.dbf_id] = card.count_as_copy_of_dbf_id
        else:
            canonical[card.dbf_id] = lowest[(card.name, card.collectible)]
    return canonical


def parse_hearth_sim_cards(payload: Iterable[dict[str, Any]]) -> dict[int, CardMetadata]:
    """
    Build dbfId -> CardMetadata from HearthSim card entries.

    Entries without a mana cost (enchantments, hero powers, ...) are dropped.

    Args:
        payload: Decoded cards.json list

    Returns:
        Dict mapping numeric card ids to metadata
    """
    cards = [HearthSimCard.model_validate(entry) for entry in payload]
    cards = [card for card in cards if card.cost is not None]
    canonical = _canonical_ids(cards)

    return {
        card.dbf_id: CardMetadata(
            id=card.dbf_id,
            canonical_id=canonical[card.dbf_id],
            card_id=card.id,
            name=card.name,
            cost=card.cost or 0,
            rarity=Rarity.from_hearth_sim(card.rarity),
            collectible=card.collectible,
        )
        for card in cards
    }


def load_hearth_sim_cards(path: Path) -> dict[int, CardMetadata]:
    """
    Load id metadata from a downloaded cards.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, encoding="utf-8") as f:
        return parse_hearth_sim_cards(json.load(f))


def fetch_hearth_sim_cards(
    url: str = HEARTH_SIM_CARDS_URL,
    timeout: float = 30.0,
) -> dict[int, CardMetadata]:
    """
    Download and parse HearthSim card data.

    Raises:
        MetadataFetchError: If the request fails, returns an error status,
            or returns a body that is not a valid card list
    """
    try:
        response = httpx.get(
            url,
            headers={"User-Agent": "HearthForge/1.0"},
            timeout=timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise MetadataFetchError(
            f"Failed to fetch HearthSim cards: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise MetadataFetchError(f"Failed to fetch HearthSim cards: {e}") from e

    try:
        payload = response.json()
    except ValueError as e:
        raise MetadataFetchError(f"HearthSim response is not JSON: {e}") from e

    if not isinstance(payload, list):
        raise MetadataFetchError("HearthSim response is not a card list")

    try:
        return parse_hearth_sim_cards(payload)
    except ValidationError as e:
        raise MetadataFetchError(f"Invalid HearthSim card data: {e}") from e
