"""
Tests for the file-backed analytics store.
"""

import json

import pytest

from visit_analytics.models import MAX_VISITS, AnalyticsLog, VisitRecord
from visit_analytics.store import AnalyticsStore


def make_visit(index: int) -> VisitRecord:
    return VisitRecord(
        id=f"192.0.2.1-{1700000000000 + index}",
        timestamp="2025-01-01T00:00:00.000+00:00",
        ip="192.0.2.1",
        location="Berlin, DE",
        device="desktop",
        browser="Chrome",
        os="Windows",
        source="google",
        user_agent="Mozilla/5.0",
        duration=index,
        nav_count=0
    )


class TestAnalyticsStore:
    """Test load, save, lookup and eviction."""

    @pytest.fixture
    def analytics_file(self, tmp_path):
        return tmp_path / "analytics.json"

    @pytest.fixture
    def store(self, analytics_file):
        return AnalyticsStore(analytics_file)

    def test_load_creates_missing_file(self, store, analytics_file):
        """Test that loading a missing file creates it with an empty log."""
        log = store.load()
        assert len(log) == 0
        assert analytics_file.exists()
        assert json.loads(analytics_file.read_text()) == {"visits": []}

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '{"visits": 5}', ""])
    def test_load_corrupt_file_returns_empty(self, store, analytics_file, content):
        """Test that unparsable or wrongly shaped data yields an empty log."""
        analytics_file.write_text(content)
        assert len(store.load()) == 0

    def test_round_trip_preserves_order(self, store):
        log = AnalyticsLog(visits=[make_visit(i) for i in range(25)])
        store.save(log)

        loaded = store.load()
        assert [v.id for v in loaded.visits] == [v.id for v in log.visits]
        assert loaded.visits[3] == log.visits[3]

    def test_save_evicts_oldest_past_cap(self, store, analytics_file):
        """Test that only the most recent MAX_VISITS records are kept."""
        visits = [make_visit(i) for i in range(MAX_VISITS + 50)]
        store.save(AnalyticsLog(visits=list(visits)))

        loaded = store.load()
        assert len(loaded) == MAX_VISITS
        assert [v.id for v in loaded.visits] == [v.id for v in visits[-MAX_VISITS:]]

    def test_custom_cap(self, analytics_file):
        store = AnalyticsStore(analytics_file, max_visits=3)
        for i in range(5):
            store.append(make_visit(i))

        loaded = store.load()
        assert [v.duration for v in loaded.visits] == [2, 3, 4]

    def test_save_overwrites_file(self, store):
        store.save(AnalyticsLog(visits=[make_visit(1), make_visit(2)]))
        store.save(AnalyticsLog(visits=[make_visit(3)]))
        assert [v.duration for v in store.load().visits] == [3]

    def test_find_by_id(self, store):
        log = AnalyticsLog(visits=[make_visit(1), make_visit(2)])
        assert store.find_by_id(log, make_visit(2).id).duration == 2
        assert store.find_by_id(log, "missing") is None

    def test_append(self, store):
        store.append(make_visit(1))
        store.append(make_visit(2))
        assert [v.duration for v in store.load().visits] == [1, 2]

    def test_serialized_keys(self, store, analytics_file):
        """Test that records are stored with the public field names."""
        store.append(make_visit(1))
        stored = json.loads(analytics_file.read_text())["visits"][0]
        assert set(stored) == {
            "id", "timestamp", "ip", "location", "device", "browser",
            "os", "source", "userAgent", "duration", "navCount"
        }

    def test_legacy_ua_key(self, store, analytics_file):
        """Test that records written with a ``ua`` key still load."""
        analytics_file.write_text(json.dumps({"visits": [
            {"id": "a", "timestamp": "t", "ip": "192.0.2.1", "ua": "curl/8"}
        ]}))
        visit = store.load().visits[0]
        assert visit.user_agent == "curl/8"
        assert visit.duration == 0
        assert visit.nav_count == 0

    @pytest.mark.parametrize("duration,nav_count,expected", [
        ("12", "3", (12, 3)),
        ("abc", None, (0, 0)),
        ([5], {"n": 1}, (0, 0)),
        (True, False, (0, 0)),
        (2.5, 4.0, (2.5, 4)),
    ])
    def test_counters_are_coerced_on_load(self, store, analytics_file, duration, nav_count, expected):
        """Test that hand-edited counters load as numbers."""
        analytics_file.write_text(json.dumps({"visits": [
            {"id": "a", "timestamp": "t", "ip": "192.0.2.1",
             "duration": duration, "navCount": nav_count}
        ]}))
        visit = store.load().visits[0]
        assert (visit.duration, visit.nav_count) == expected
