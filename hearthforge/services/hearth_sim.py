"""
HearthSim id metadata cache.

Read-through cache over the HearthSim card dump, used as the IdTable for
card id normalization.

Data is fetched on first lookup and refetched once older than the
refresh interval. A failed or empty fetch keeps whatever was loaded before
(an empty table on first use). Lookups then wait out the retry interval
before fetching again, so one deck never triggers more than one fetch.
"""

import logging
import time
from collections.abc import Callable
from functools import lru_cache
from threading import Lock

from hearthforge.config import settings
from hearthforge.models.card import CardMetadata, Rarity
from hearthforge.parsers.hearth_sim import MetadataFetchError, fetch_hearth_sim_cards

logger = logging.getLogger(__name__)

Fetcher = Callable[[], dict[int, CardMetadata]]


class HearthSimIdTable:
    """
    Thread-safe, time-to-live IdTable backed by HearthSim data.

    Usage:
        table = HearthSimIdTable()
        canonical = normalize_id(card_id, table)
    """

    def __init__(
        self,
        fetcher: Fetcher | None = None,
        refresh_seconds: float | None = None,
        retry_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize an empty table. Nothing is fetched until the first lookup.

        Args:
            fetcher: Returns fresh {id: metadata}. Defaults to the HearthSim
                endpoint from settings.
            refresh_seconds: Age after which data is refetched
            retry_seconds: Wait after a failed fetch before lookups try again
            clock: Monotonic time source
        """
        if fetcher is None:
            fetcher = _default_fetcher
        if refresh_seconds is None:
            refresh_seconds = settings.card_id_refresh_seconds
        if retry_seconds is None:
            retry_seconds = settings.card_id_retry_seconds

        self._fetcher = fetcher
        self._refresh_seconds = refresh_seconds
        self._retry_seconds = retry_seconds
        self._clock = clock
        self._cards: dict[int, CardMetadata] = {}
        self._loaded_at: float | None = None
        self._failed_at: float | None = None
        self._lock = Lock()

    def _is_stale(self) -> bool:
        now = self._clock()
        if self._failed_at is not None and now - self._failed_at < self._retry_seconds:
            return False
        if not self._cards or self._loaded_at is None:
            return True
        return now - self._loaded_at >= self._refresh_seconds

    def refresh(self) -> bool:
        """
        Fetch fresh data now, ignoring the retry interval.

        Returns:
            True if new data was loaded, False if the fetch failed
        """
        with self._lock:
            return self._refresh_locked()

    def _refresh_locked(self) -> bool:
        try:
            cards = self._fetcher()
        except MetadataFetchError as e:
            self._failed_at = self._clock()
            logger.warning(
                "Card id refresh failed, keeping %d cached ids: %s", len(self._cards), e
            )
            return False

        if not cards:
            self._failed_at = self._clock()
            logger.warning(
                "Card id refresh returned no cards, keeping %d cached ids", len(self._cards)
            )
            return False

        self._cards = cards
        self._loaded_at = self._clock()
        self._failed_at = None
        logger.info("Loaded id metadata for %d cards", len(cards))
        return True

    def ensure_fresh(self) -> None:
        """Load or refresh data if it is missing or stale."""
        if not self._is_stale():
            return
        with self._lock:
            # Another thread may have refreshed while we waited
            if self._is_stale():
                self._refresh_locked()

    def lookup(self, card_id: int) -> CardMetadata | None:
        """Return metadata for a card id, refreshing stale data first."""
        self.ensure_fresh()
        return self._cards.get(card_id)

    def details(self, card_id: int) -> tuple[str, int, Rarity] | None:
        """Return (name, cost, rarity) for a card id, or None if unknown."""
        metadata = self.lookup(card_id)
        if metadata is None:
            return None
        return metadata.name, metadata.cost, metadata.rarity

    def __len__(self) -> int:
        return len(self._cards)


def _default_fetcher() -> dict[int, CardMetadata]:
    return fetch_hearth_sim_cards(settings.hearth_sim_url, timeout=settings.http_timeout)


@lru_cache(maxsize=1)
def get_id_table() -> HearthSimIdTable:
    """
    Get the process-wide id table.

    Created on first call; data loads on first lookup.
    """
    return HearthSimIdTable()
