"""
Offline IP geolocation backed by a local MaxMind City database.
"""

import logging
from pathlib import Path
from threading import Lock
from typing import Dict, Optional

import geoip2.database
import geoip2.errors

from .models import UNKNOWN_LOCATION

logger = logging.getLogger(__name__)


def format_location(geo: Optional[Dict[str, Optional[str]]]) -> str:
    """Join city and country into "city, country", or "Unknown" when both are missing."""
    if not geo:
        return UNKNOWN_LOCATION
    parts = [geo.get("city"), geo.get("country")]
    return ", ".join(p for p in parts if p) or UNKNOWN_LOCATION


class GeoLocator:
    """Looks up approximate locations for client IPs."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._reader = None
        self._open_failed = False
        self._lock = Lock()

    def _get_reader(self):
        # Opened at most once; a database that fails to open is not retried
        with self._lock:
            if self._reader is None and not self._open_failed and self.db_path.exists():
                try:
                    self._reader = geoip2.database.Reader(str(self.db_path))
                except (OSError, ValueError, RuntimeError) as e:
                    self._open_failed = True
                    logger.warning(f"Could not open GeoIP database {self.db_path}: {e}")
            return self._reader

    def lookup(self, ip: str) -> Optional[Dict[str, Optional[str]]]:
        """Return ``{"city", "country"}`` for ``ip``, or None if it cannot be located."""
        reader = self._get_reader()
        if reader is None or not ip:
            return None
        try:
            resp = reader.city(ip)
        except (geoip2.errors.GeoIP2Error, ValueError, TypeError):
            return None
        return {
            "city": resp.city.name,
            "country": resp.country.iso_code or resp.registered_country.iso_code
        }

    def describe(self, ip: str) -> str:
        return format_location(self.lookup(ip))

    def close(self) -> None:
        with self._lock:
            if self._reader is not None:
                self._reader.close()
                self._reader = None
