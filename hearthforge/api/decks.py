"""
Deck API endpoints.

Decodes pasted deck codes and compares decks.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from hearthforge.models.deck import DeckDifference, DeckSkeleton
from hearthforge.models.failure import ApiResponse
from hearthforge.services.card_ids import IdTable
from hearthforge.services.deck_decoder import compare_decks, decode_deck
from hearthforge.services.hearth_sim import get_id_table

router = APIRouter(prefix="/decks", tags=["decks"])


class DecodeRequest(BaseModel):
    """Request model for decoding a deck."""

    text: str = Field(
        ...,
        description="Deck code, or the game client's full clipboard text",
        examples=["### My Deck\n# Class: Mage\nAAEBAQcAAAA="],
    )
    format: str | None = Field(
        default=None,
        description="Override the decoded format (e.g., 'twist', 'Tavern Brawl')",
    )


class CompareRequest(BaseModel):
    """Request model for comparing two decks."""

    first: str = Field(..., description="First deck code or clipboard text")
    second: str = Field(..., description="Second deck code or clipboard text")


class SideboardResponse(BaseModel):
    """Cards in the sideboard of one main-deck card."""

    owner_id: int
    card_ids: list[int] = Field(default_factory=list)


class DeckResponse(BaseModel):
    """Response model for a decoded deck."""

    code: str
    title: str | None = None
    format: str
    hero_id: int
    cards: list[int] = Field(default_factory=list)
    card_counts: dict[int, int] = Field(default_factory=dict)
    card_count: int = 0
    sideboards: list[SideboardResponse] = Field(default_factory=list)


class DifferenceResponse(BaseModel):
    """Response model for a deck comparison."""

    first_code: str
    second_code: str
    shared: dict[int, int] = Field(default_factory=dict)
    first_only: dict[int, int] = Field(default_factory=dict)
    second_only: dict[int, int] = Field(default_factory=dict)
    identical: bool


def _deck_response(deck: DeckSkeleton) -> DeckResponse:
    return DeckResponse(
        code=deck.code,
        title=deck.title,
        format=deck.format.label,
        hero_id=deck.hero_id,
        cards=deck.cards,
        card_counts=dict(deck.card_counts()),
        card_count=deck.card_count,
        sideboards=[
            SideboardResponse(owner_id=s.owner_id, card_ids=s.card_ids) for s in deck.sideboards
        ],
    )


def _difference_response(diff: DeckDifference) -> DifferenceResponse:
    return DifferenceResponse(
        first_code=diff.first_code,
        second_code=diff.second_code,
        shared=diff.shared,
        first_only=diff.first_only,
        second_only=diff.second_only,
        identical=diff.is_identical,
    )


@router.post("/decode", response_model=ApiResponse[DeckResponse])
def decode(
    request: DecodeRequest,
    table: Annotated[IdTable, Depends(get_id_table)],
) -> ApiResponse[DeckResponse]:
    """
    Decode a deck code into card ids.

    Aliased reprint ids are normalized to their canonical ids.
    Undecodable codes return a known_failure envelope with status 400.
    """
    deck = decode_deck(request.text, table=table, format_override=request.format)
    return ApiResponse[DeckResponse].success(_deck_response(deck))


@router.post("/compare", response_model=ApiResponse[DifferenceResponse])
def compare(
    request: CompareRequest,
    table: Annotated[IdTable, Depends(get_id_table)],
) -> ApiResponse[DifferenceResponse]:
    """Compare the main-deck cards of two decks."""
    first = decode_deck(request.first, table=table)
    second = decode_deck(request.second, table=table)
    return ApiResponse[DifferenceResponse].success(
        _difference_response(compare_decks(first, second))
    )
