"""
Tests for offline IP geolocation.
"""

from types import SimpleNamespace
import threading
from unittest.mock import MagicMock, patch

import geoip2.errors

from visit_analytics.geolocation import GeoLocator, format_location


def city_response(city, country):
    return SimpleNamespace(
        city=SimpleNamespace(name=city),
        country=SimpleNamespace(iso_code=country),
        registered_country=SimpleNamespace(iso_code=None)
    )


class TestFormatLocation:
    """Test location string formatting."""

    def test_city_and_country(self):
        assert format_location({"city": "Berlin", "country": "DE"}) == "Berlin, DE"

    def test_country_only(self):
        assert format_location({"city": None, "country": "DE"}) == "DE"

    def test_nothing_known(self):
        assert format_location(None) == "Unknown"
        assert format_location({}) == "Unknown"
        assert format_location({"city": "", "country": None}) == "Unknown"


class TestGeoLocator:
    """Test the MaxMind-backed locator."""

    def test_missing_database_gives_unknown(self, tmp_path):
        locator = GeoLocator(tmp_path / "missing.mmdb")
        assert locator.lookup("203.0.113.7") is None
        assert locator.describe("203.0.113.7") == "Unknown"

    def test_lookup_uses_reader(self, tmp_path):
        locator = GeoLocator(tmp_path / "GeoLite2-City.mmdb")
        locator._reader = MagicMock()
        locator._reader.city.return_value = city_response("Paris", "FR")

        assert locator.lookup("203.0.113.7") == {"city": "Paris", "country": "FR"}
        assert locator.describe("203.0.113.7") == "Paris, FR"

    def test_unknown_address(self, tmp_path):
        locator = GeoLocator(tmp_path / "GeoLite2-City.mmdb")
        locator._reader = MagicMock()
        locator._reader.city.side_effect = geoip2.errors.AddressNotFoundError("not found")

        assert locator.describe("10.0.0.1") == "Unknown"

    def test_invalid_address(self, tmp_path):
        locator = GeoLocator(tmp_path / "GeoLite2-City.mmdb")
        locator._reader = MagicMock()
        locator._reader.city.side_effect = ValueError("not an IP")

        assert locator.describe("not-an-ip") == "Unknown"
        assert locator.describe("") == "Unknown"

    def test_failed_open_is_not_retried(self, tmp_path):
        db_path = tmp_path / "GeoLite2-City.mmdb"
        db_path.write_bytes(b"not a database")
        locator = GeoLocator(db_path)

        with patch("geoip2.database.Reader", side_effect=RuntimeError("corrupt")) as reader_cls:
            assert locator.describe("203.0.113.7") == "Unknown"
            assert locator.describe("203.0.113.8") == "Unknown"
        assert reader_cls.call_count == 1

    def test_reader_opened_once_across_threads(self, tmp_path):
        db_path = tmp_path / "GeoLite2-City.mmdb"
        db_path.write_bytes(b"")
        locator = GeoLocator(db_path)

        with patch("geoip2.database.Reader") as reader_cls:
            reader_cls.return_value.city.return_value = city_response("Paris", "FR")
            threads = [threading.Thread(target=locator.describe, args=("203.0.113.7",)) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
        assert reader_cls.call_count == 1

    def test_close_releases_reader(self, tmp_path):
        locator = GeoLocator(tmp_path / "GeoLite2-City.mmdb")
        reader = MagicMock()
        locator._reader = reader

        locator.close()
        reader.close.assert_called_once()
        assert locator._reader is None
