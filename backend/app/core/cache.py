"""
In-process TTL caches for the radio data.

Four named caches (stations, programs, current_program, images), each with
its own default TTL and hit/miss/set/delete counters, plus a single-slot
cache for the whole persisted document. Expiration is lazy: an expired entry
is treated as absent and dropped on access. ``sweep_expired`` only reclaims
memory.

Writers never rely on TTLs for correctness. After persisting they call
``CacheManager.invalidate`` which evicts every key listed for the mutated
entity type in ``INVALIDATION_RULES``.
"""
import enum
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

ALL_STATIONS_KEY = "all_stations"
ALL_PROGRAMS_KEY = "all_programs"

DEFAULT_TTLS: dict[str, int] = {
    "stations": 3600,        # 1 hour
    "programs": 1800,        # 30 minutes
    "current_program": 60,   # 1 minute
    "images": 86400,         # 24 hours
}
DOCUMENT_CACHE_TTL = 300

_size_adapter = TypeAdapter(Any)


def station_programs_key(station_id: str) -> str:
    return f"programs_station_{station_id}"


def current_program_key(station_id: str) -> str:
    return f"current_{station_id}"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# Returned by NamedCache.get on a miss; None is a cacheable value.
MISSING: Any = _Missing()


class EntityType(str, enum.Enum):
    STATION = "station"
    PROGRAM = "program"


# entity type -> (cache name, key template) pairs to evict after a write.
# "{station_id}" templates are expanded once per affected station.
INVALIDATION_RULES: dict[EntityType, tuple[tuple[str, str], ...]] = {
    EntityType.STATION: (
        ("stations", ALL_STATIONS_KEY),
    ),
    EntityType.PROGRAM: (
        ("programs", ALL_PROGRAMS_KEY),
        ("programs", station_programs_key("{station_id}")),
        ("current_program", current_program_key("{station_id}")),
    ),
}


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return (self.hits / total) * 100 if total > 0 else 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "sets": self.sets,
            "deletes": self.deletes,
            "hit_rate": round(self.hit_rate, 2),
        }


class NamedCache:
    """Key-value store with a default TTL and usage counters.

    Storage layout:
        _store: dict[str, tuple[Any, float]]
            key -> (value, expires_at) where expires_at is on ``clock``'s scale
    """

    def __init__(self, name: str, default_ttl: int, clock: Clock = time.monotonic):
        self.name = name
        self.default_ttl = default_ttl
        self.stats = CacheStats()
        self._clock = clock
        self._store: dict[str, tuple[Any, float]] = {}

    def _is_live(self, key: str) -> bool:
        entry = self._store.get(key)
        if entry is None:
            return False
        if self._clock() >= entry[1]:
            del self._store[key]
            return False
        return True

    def get(self, key: str) -> Any:
        """Return the cached value for *key*, or ``MISSING`` if absent or expired."""
        try:
            live = self._is_live(key)
        except Exception as e:
            # A broken entry behaves as a miss; callers recompute from the document.
            logger.warning("Cache %s lookup failed for %r: %s", self.name, key, e)
            self._store.pop(key, None)
            live = False

        if not live:
            self.stats.misses += 1
            logger.debug("Cache %s miss: key=%r", self.name, key)
            return MISSING

        self.stats.hits += 1
        logger.debug("Cache %s hit: key=%r", self.name, key)
        return self._store[key][0]

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        ttl = ttl if ttl is not None else self.default_ttl
        self._store[key] = (value, self._clock() + ttl)
        self.stats.sets += 1
        logger.debug("Cache %s set: key=%r ttl=%ds", self.name, key, ttl)

    def delete(self, key: str) -> bool:
        """Remove *key*. Returns False (and counts nothing) if it was not stored."""
        if self._store.pop(key, None) is None:
            return False
        self.stats.deletes += 1
        logger.debug("Cache %s delete: key=%r", self.name, key)
        return True

    def has(self, key: str) -> bool:
        return self._is_live(key)

    def keys(self) -> list[str]:
        return [key for key in list(self._store) if self._is_live(key)]

    def flush(self) -> None:
        count = len(self._store)
        self._store.clear()
        logger.debug("Cache %s flushed: removed %d entries", self.name, count)

    def sweep(self) -> int:
        now = self._clock()
        expired = [key for key, (_, expires_at) in self._store.items() if now >= expires_at]
        for key in expired:
            del self._store[key]
        return len(expired)

    def memory_usage(self) -> dict[str, int]:
        """Live key count and approximate JSON size of the stored values, for dashboards."""
        live = {key: self._store[key][0] for key in self.keys()}
        try:
            size = len(_size_adapter.dump_json(live))
        except Exception as e:
            logger.warning("Cache %s size estimate failed: %s", self.name, e)
            size = 0
        return {"keys": len(live), "size": size}


class DocumentCache:
    """Single slot holding the whole persisted document and when it was read."""

    def __init__(self, ttl: int = DOCUMENT_CACHE_TTL, clock: Clock = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._document: Any = None
        self._timestamp = 0.0

    def get(self) -> Any:
        if self._document is None:
            return None
        if self._clock() - self._timestamp >= self.ttl:
            self.clear()
            return None
        return self._document

    def set(self, document: Any) -> None:
        self._document = document
        self._timestamp = self._clock()

    def clear(self) -> None:
        self._document = None
        self._timestamp = 0.0


class CacheManager:
    """Owns the named caches and the document slot for one application instance."""

    def __init__(
        self,
        ttls: dict[str, int] | None = None,
        document_ttl: int = DOCUMENT_CACHE_TTL,
        clock: Clock = time.monotonic,
    ):
        ttls = {**DEFAULT_TTLS, **(ttls or {})}
        self._caches = {
            name: NamedCache(name, ttls[name], clock) for name in DEFAULT_TTLS
        }
        self.document = DocumentCache(document_ttl, clock)

    @property
    def names(self) -> list[str]:
        return list(self._caches)

    def cache(self, name: str) -> NamedCache:
        try:
            return self._caches[name]
        except KeyError:
            raise KeyError(f"Unknown cache '{name}'") from None

    @property
    def stations(self) -> NamedCache:
        return self._caches["stations"]

    @property
    def programs(self) -> NamedCache:
        return self._caches["programs"]

    @property
    def current_program(self) -> NamedCache:
        return self._caches["current_program"]

    @property
    def images(self) -> NamedCache:
        return self._caches["images"]

    def stats(self) -> dict[str, dict[str, float]]:
        return {name: cache.stats.as_dict() for name, cache in self._caches.items()}

    def global_stats(self) -> dict[str, float]:
        total = CacheStats()
        for cache in self._caches.values():
            total.hits += cache.stats.hits
            total.misses += cache.stats.misses
            total.sets += cache.stats.sets
            total.deletes += cache.stats.deletes
        return total.as_dict()

    def memory_usage(self) -> dict[str, dict[str, int]]:
        return {name: cache.memory_usage() for name, cache in self._caches.items()}

    def flush(self, name: str | None = None) -> None:
        if name is None:
            for cache in self._caches.values():
                cache.flush()
            self.document.clear()
            logger.info("All caches cleared")
            return
        self.cache(name).flush()
        logger.info("Cache %s cleared", name)

    def sweep_expired(self) -> int:
        removed = sum(cache.sweep() for cache in self._caches.values())
        if removed:
            logger.debug("Swept %d expired cache entries", removed)
        return removed

    def invalidate(self, entity: EntityType, station_ids: Iterable[str] = ()) -> list[tuple[str, str]]:
        """Evict every entry that a write to *entity* may have made stale.

        Returns the (cache, key) pairs that were targeted, whether or not they
        were present.
        """
        station_ids = list(dict.fromkeys(sid for sid in station_ids if sid))
        targeted: list[tuple[str, str]] = []
        for cache_name, template in INVALIDATION_RULES[entity]:
            if "{station_id}" in template:
                keys = [template.format(station_id=sid) for sid in station_ids]
            else:
                keys = [template]
            for key in keys:
                self._caches[cache_name].delete(key)
                targeted.append((cache_name, key))
        logger.info("Invalidated %s caches: %s", entity.value, ", ".join(f"{c}:{k}" for c, k in targeted))
        return targeted
