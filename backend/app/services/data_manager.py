"""
Data manager — read-through access to stations and programs, and the single
write path that keeps the caches honest.

Reads check the matching named cache, then the document cache, then storage,
and store what they computed. Writes persist the whole document, drop the
document cache and evict whatever ``INVALIDATION_RULES`` lists for the
mutated entities before returning, so a caller that awaited a write always
reads its own change.
"""
import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from app.core.cache import (
    ALL_PROGRAMS_KEY,
    ALL_STATIONS_KEY,
    MISSING,
    CacheManager,
    EntityType,
    current_program_key,
    station_programs_key,
)
from app.core.exceptions import NotFoundError
from app.models.document import RadioDocument
from app.models.program import Program
from app.models.station import Station
from app.services.schedule_resolver import resolve_current_program
from app.services.storage_service import DocumentStorage

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DataManager:
    """Owns the storage collaborator and the cache manager for one app instance."""

    def __init__(
        self,
        storage: DocumentStorage,
        cache: CacheManager,
        now: Callable[[], datetime] = utcnow,
    ):
        self.storage = storage
        self.cache = cache
        self.now = now

    # ------------------------------------------------------------------
    # Document access
    # ------------------------------------------------------------------

    async def read_document(self) -> RadioDocument:
        document = self.cache.document.get()
        if document is not None:
            logger.debug("Document served from file cache")
            return document

        document = await self.storage.read_document()
        self.cache.document.set(document)
        return document

    async def load_for_update(self) -> RadioDocument:
        """A private copy of the document for a read-modify-write."""
        document = await self.read_document()
        return document.model_copy(deep=True)

    async def commit(
        self, document: RadioDocument, *changes: tuple[EntityType, Iterable[str]]
    ) -> None:
        """Persist *document*, then evict every cache entry the *changes* touch."""
        await self.storage.write_document(document)
        self.cache.document.clear()
        for entity, station_ids in changes:
            self.cache.invalidate(entity, station_ids)

    # ------------------------------------------------------------------
    # Cached reads
    # ------------------------------------------------------------------

    async def get_stations(self) -> list[Station]:
        cached = self.cache.stations.get(ALL_STATIONS_KEY)
        if cached is not MISSING:
            return cached

        document = await self.read_document()
        self.cache.stations.set(ALL_STATIONS_KEY, document.stations)
        return document.stations

    async def get_station(self, station_id: str) -> Station:
        for station in await self.get_stations():
            if station.id == station_id:
                return station
        raise NotFoundError(f"Station {station_id} not found")

    async def get_programs(self) -> list[Program]:
        cached = self.cache.programs.get(ALL_PROGRAMS_KEY)
        if cached is not MISSING:
            return cached

        document = await self.read_document()
        self.cache.programs.set(ALL_PROGRAMS_KEY, document.programs)
        return document.programs

    async def get_programs_by_station(self, station_id: str) -> list[Program]:
        key = station_programs_key(station_id)
        cached = self.cache.programs.get(key)
        if cached is not MISSING:
            return cached

        document = await self.read_document()
        programs = document.programs_for(station_id)
        self.cache.programs.set(key, programs)
        return programs

    async def get_current_program(self, station_id: str) -> Program | None:
        key = current_program_key(station_id)
        cached = self.cache.current_program.get(key)
        if cached is not MISSING:
            return cached

        document = await self.read_document()
        program = resolve_current_program(document.programs, station_id, self.now())
        # "Nothing on air" is cached too, so idle stations don't rescan every request
        self.cache.current_program.set(key, program)
        if program is None:
            logger.debug("No program on air for station %s", station_id)
        return program

    async def warm_up(self) -> None:
        """Preload the station list so the first listener hits a warm cache."""
        stations = await self.get_stations()
        logger.info("Cache warmed up with %d stations", len(stations))
