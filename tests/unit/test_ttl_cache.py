"""
Unit tests for TtlCache with an injected clock.
"""

from datetime import datetime, timedelta

import pytz

from ledgerfolio.providers.cache import TtlCache


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 6, 15, 12, 0, tzinfo=pytz.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class TestTtlCache:
    """Tests for expiry and loading."""

    def test_value_available_within_ttl(self):
        clock = FakeClock()
        cache = TtlCache(clock=clock)
        cache.set("latest_date", "2024-06-14", ttl_seconds=1800)

        clock.advance(minutes=29)

        assert cache.get("latest_date") == "2024-06-14"

    def test_value_expires_after_ttl(self):
        """
        GIVEN a value cached for 30 minutes
        WHEN 30 minutes pass
        THEN the cache reports a miss
        """
        clock = FakeClock()
        cache = TtlCache(clock=clock)
        cache.set("latest_date", "2024-06-14", ttl_seconds=1800)

        clock.advance(minutes=30)

        assert cache.get("latest_date") is None

    def test_get_or_load_calls_loader_once_per_ttl(self):
        clock = FakeClock()
        cache = TtlCache(clock=clock)
        calls = []

        def loader():
            calls.append(clock.now)
            return {"usd": "US Dollar"}

        cache.get_or_load("currencies", 86400, loader)
        clock.advance(hours=23)
        cache.get_or_load("currencies", 86400, loader)
        assert len(calls) == 1

        clock.advance(hours=2)
        cache.get_or_load("currencies", 86400, loader)
        assert len(calls) == 2

    def test_entries_have_independent_ttls(self):
        clock = FakeClock()
        cache = TtlCache(clock=clock)
        cache.set("short", 1, ttl_seconds=60)
        cache.set("long", 2, ttl_seconds=3600)

        clock.advance(minutes=5)

        assert cache.get("short") is None
        assert cache.get("long") == 2

    def test_clear(self):
        cache = TtlCache()
        cache.set("key", "value", ttl_seconds=60)

        cache.clear()

        assert cache.get("key") is None
