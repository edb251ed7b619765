"""Tests for the named TTL caches, the document slot and table-driven invalidation."""
import pytest

from app.core.cache import (
    ALL_PROGRAMS_KEY,
    ALL_STATIONS_KEY,
    DEFAULT_TTLS,
    MISSING,
    CacheManager,
    CacheStats,
    DocumentCache,
    EntityType,
    NamedCache,
    current_program_key,
    station_programs_key,
)
from app.models.station import Station


class TestNamedCache:
    def test_miss_then_hit(self, clock):
        cache = NamedCache("stations", 60, clock)
        assert cache.get("k") is MISSING
        cache.set("k", [1, 2])
        assert cache.get("k") == [1, 2]
        assert (cache.stats.hits, cache.stats.misses, cache.stats.sets) == (1, 1, 1)

    def test_none_is_a_cacheable_value(self, clock):
        cache = NamedCache("current_program", 60, clock)
        cache.set("current_lima", None)
        assert cache.get("current_lima") is None
        assert cache.stats.hits == 1

    def test_entry_expires_after_default_ttl(self, clock):
        cache = NamedCache("programs", 30, clock)
        cache.set("k", "v")
        clock.advance(29)
        assert cache.get("k") == "v"
        clock.advance(1)
        assert cache.get("k") is MISSING
        assert cache.keys() == []

    def test_ttl_override(self, clock):
        cache = NamedCache("images", 86400, clock)
        cache.set("k", "v", ttl=5)
        clock.advance(5)
        assert cache.get("k") is MISSING

    def test_delete_counts_only_existing_keys(self, clock):
        cache = NamedCache("stations", 60, clock)
        cache.set("k", "v")
        assert cache.delete("k") is True
        assert cache.delete("k") is False
        assert cache.stats.deletes == 1
        assert cache.get("k") is MISSING

    def test_broken_entry_degrades_to_a_miss(self, clock):
        cache = NamedCache("stations", 60, clock)
        cache._store["k"] = ("value-without-expiry",)

        assert cache.get("k") is MISSING
        assert cache.stats.misses == 1
        assert "k" not in cache._store

    def test_clock_failure_degrades_to_a_miss(self):
        def broken_clock():
            raise RuntimeError("clock unavailable")

        cache = NamedCache("stations", 60, clock=lambda: 0.0)
        cache.set("k", "v")
        cache._clock = broken_clock

        assert cache.get("k") is MISSING
        assert (cache.stats.hits, cache.stats.misses) == (0, 1)

    def test_has_does_not_touch_counters(self, clock):
        cache = NamedCache("stations", 60, clock)
        cache.set("k", "v")
        assert cache.has("k")
        assert not cache.has("other")
        assert (cache.stats.hits, cache.stats.misses) == (0, 0)

    def test_flush_removes_everything(self, clock):
        cache = NamedCache("programs", 60, clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.flush()
        assert cache.keys() == []

    def test_sweep_drops_only_expired(self, clock):
        cache = NamedCache("programs", 60, clock)
        cache.set("short", 1, ttl=10)
        cache.set("long", 2)
        clock.advance(10)
        assert cache.sweep() == 1
        assert cache.keys() == ["long"]

    def test_memory_usage_reports_live_keys_and_size(self, clock):
        cache = NamedCache("stations", 60, clock)
        assert cache.memory_usage() == {"keys": 0, "size": 2}  # "{}"
        cache.set(ALL_STATIONS_KEY, [Station(id="lima", name="Lima", url="https://x")])
        usage = cache.memory_usage()
        assert usage["keys"] == 1
        assert usage["size"] > len("lima")


class TestHitRate:
    def test_zero_when_unused(self):
        assert CacheStats().hit_rate == 0

    @pytest.mark.parametrize("hits,misses", [(3, 1), (1, 2), (0, 5), (7, 0)])
    def test_hit_rate_arithmetic(self, clock, hits, misses):
        cache = NamedCache("stations", 60, clock)
        cache.set("present", "v")
        for _ in range(hits):
            cache.get("present")
        for _ in range(misses):
            cache.get("absent")
        assert cache.stats.hit_rate == pytest.approx(100 * hits / (hits + misses))

    def test_global_stats_sum_all_caches(self, cache):
        cache.stations.get("a")
        cache.programs.set("b", 1)
        cache.programs.get("b")
        cache.current_program.set("c", None)
        cache.current_program.delete("c")
        cache.images.get("d")

        totals = cache.global_stats()
        assert totals["hits"] == 1
        assert totals["misses"] == 2
        assert totals["sets"] == 2
        assert totals["deletes"] == 1
        assert totals["hit_rate"] == pytest.approx(33.33)


class TestDocumentCache:
    def test_expires_after_ttl(self, clock):
        slot = DocumentCache(ttl=300, clock=clock)
        assert slot.get() is None
        slot.set({"stations": []})
        clock.advance(299)
        assert slot.get() == {"stations": []}
        clock.advance(1)
        assert slot.get() is None

    def test_clear(self, clock):
        slot = DocumentCache(clock=clock)
        slot.set({"stations": []})
        slot.clear()
        assert slot.get() is None


class TestCacheManager:
    def test_default_ttls(self, cache):
        assert cache.stations.default_ttl == DEFAULT_TTLS["stations"] == 3600
        assert cache.programs.default_ttl == 1800
        assert cache.current_program.default_ttl == 60
        assert cache.images.default_ttl == 86400
        assert cache.document.ttl == 300

    def test_ttl_overrides(self, clock):
        manager = CacheManager(ttls={"current_program": 5}, document_ttl=10, clock=clock)
        assert manager.current_program.default_ttl == 5
        assert manager.stations.default_ttl == 3600
        assert manager.document.ttl == 10

    def test_instances_are_isolated(self, clock):
        first = CacheManager(clock=clock)
        second = CacheManager(clock=clock)
        first.stations.set(ALL_STATIONS_KEY, [])
        assert second.stations.get(ALL_STATIONS_KEY) is MISSING

    def test_unknown_cache_name(self, cache):
        with pytest.raises(KeyError):
            cache.cache("thumbnails")

    def test_flush_one_cache(self, cache):
        cache.stations.set(ALL_STATIONS_KEY, [])
        cache.programs.set(ALL_PROGRAMS_KEY, [])
        cache.flush("stations")
        assert not cache.stations.has(ALL_STATIONS_KEY)
        assert cache.programs.has(ALL_PROGRAMS_KEY)

    def test_flush_all_clears_document_slot(self, cache):
        cache.images.set("/img/a.jpg", b"...")
        cache.document.set({"stations": []})
        cache.flush()
        assert cache.images.keys() == []
        assert cache.document.get() is None


class TestInvalidation:
    def _fill(self, cache):
        cache.stations.set(ALL_STATIONS_KEY, [])
        cache.programs.set(ALL_PROGRAMS_KEY, [])
        for station_id in ("lima", "arequipa", "trujillo"):
            cache.programs.set(station_programs_key(station_id), [])
            cache.current_program.set(current_program_key(station_id), None)

    def test_station_rules_touch_only_station_list(self, cache):
        self._fill(cache)
        cache.invalidate(EntityType.STATION, ["lima"])
        assert not cache.stations.has(ALL_STATIONS_KEY)
        assert cache.programs.has(ALL_PROGRAMS_KEY)
        assert cache.current_program.has(current_program_key("lima"))

    def test_program_rules_expand_per_station(self, cache):
        self._fill(cache)
        targeted = cache.invalidate(EntityType.PROGRAM, ["lima", "arequipa"])

        assert ("programs", ALL_PROGRAMS_KEY) in targeted
        assert not cache.programs.has(ALL_PROGRAMS_KEY)
        for station_id in ("lima", "arequipa"):
            assert not cache.programs.has(station_programs_key(station_id))
            assert not cache.current_program.has(current_program_key(station_id))
        assert cache.programs.has(station_programs_key("trujillo"))
        assert cache.current_program.has(current_program_key("trujillo"))
        assert cache.stations.has(ALL_STATIONS_KEY)

    def test_duplicate_station_ids_evict_once(self, cache):
        self._fill(cache)
        targeted = cache.invalidate(EntityType.PROGRAM, ["lima", "lima"])
        assert targeted.count(("programs", station_programs_key("lima"))) == 1
