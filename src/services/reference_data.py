"""Skater and event option lists for the result entry form."""

import logging
import threading
from typing import List, Optional

from cachetools import TTLCache

from src.models import Event, Skater
from src.storage import DatabaseInterface, DatabaseError
from src import config

logger = logging.getLogger(__name__)


class ReferenceDataLoader:
    """Read-through loader for skaters and events with a short-lived cache."""

    def __init__(self, db: DatabaseInterface, ttl_seconds: Optional[int] = None) -> None:
        """Initialize the loader.

        Args:
            db: Backing store
            ttl_seconds: How long loaded lists are reused
                (defaults to config.REFERENCE_TTL_SECONDS)
        """
        self.db = db
        self.ttl_seconds = config.REFERENCE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._cache: TTLCache = TTLCache(maxsize=8, ttl=max(self.ttl_seconds, 1))
        self._lock = threading.RLock()

    def _get_cached(self, key: str) -> Optional[list]:
        if self.ttl_seconds <= 0:
            return None
        with self._lock:
            return self._cache.get(key)

    def _set_cached(self, key: str, value: list) -> None:
        with self._lock:
            self._cache[key] = value

    def invalidate(self) -> None:
        """Drop cached lists so the next load re-reads the store."""
        with self._lock:
            self._cache.clear()

    async def load_skaters(self) -> List[Skater]:
        """Fetch all skaters.

        Returns:
            Skaters, or an empty list if the store could not be read
        """
        cached = self._get_cached("skaters")
        if cached is not None:
            logger.debug("Returning cached skaters")
            return list(cached)

        try:
            rows = await self.db.select('Skater', 'SkaterID, FirstName, LastName')
        except DatabaseError as e:
            logger.error(f"Error fetching skaters: {e}")
            return []

        skaters = [Skater.model_validate(row) for row in rows]
        self._set_cached("skaters", skaters)
        return list(skaters)

    async def load_events(self) -> List[Event]:
        """Fetch all events.

        Returns:
            Events, or an empty list if the store could not be read
        """
        cached = self._get_cached("events")
        if cached is not None:
            logger.debug("Returning cached events")
            return list(cached)

        try:
            rows = await self.db.select('Event', 'EventID, EventName')
        except DatabaseError as e:
            logger.error(f"Error fetching events: {e}")
            return []

        events = [Event.model_validate(row) for row in rows]
        self._set_cached("events", events)
        return list(events)

    async def skater_options(self) -> List[str]:
        """Display names for the skater picker."""
        return [s.display_name for s in await self.load_skaters()]

    async def event_options(self) -> List[str]:
        """Event names for the event picker."""
        return [e.name for e in await self.load_events()]
