"""
Health check endpoints.

Provides a liveness probe and a readiness probe that reports whether
card id metadata has been loaded.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from hearthforge.services.hearth_sim import HearthSimIdTable, get_id_table

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    card_ids: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get("/ready", response_model=HealthResponse)
def ready(
    table: Annotated[HearthSimIdTable, Depends(get_id_table)],
) -> HealthResponse:
    """
    Readiness probe.

    Loads card ids if none are cached yet, then reports how many are.
    Decoding works without them, ids are then returned as encoded.
    """
    table.ensure_fresh()
    loaded = len(table)
    return HealthResponse(status="ready" if loaded else "degraded", card_ids=loaded)
