"""
Analytics Store

File-backed persistence for the visit log. Every access round-trips through
the JSON file; there is no in-memory cache and no locking, so concurrent
load/modify/save sequences can overwrite each other (last writer wins).
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .models import MAX_VISITS, AnalyticsLog, VisitRecord

logger = logging.getLogger(__name__)


class AnalyticsStore:
    """Bounded visit log stored as ``{"visits": [...]}`` in a single file."""

    def __init__(self, analytics_file: Path, max_visits: int = MAX_VISITS):
        """
        Initialize AnalyticsStore.

        Args:
            analytics_file: Path to the analytics JSON file
            max_visits: Number of most recent visits kept on save
        """
        self.analytics_file = Path(analytics_file)
        self.max_visits = max_visits

    def load(self) -> AnalyticsLog:
        """Load the visit log.

        A missing file is created with an empty log. An unreadable or
        malformed file yields an empty log; its contents are lost on the
        next save.
        """
        if not self.analytics_file.exists():
            self._write(AnalyticsLog.empty())
            return AnalyticsLog.empty()

        try:
            with open(self.analytics_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected an object, got {type(data).__name__}")
            return AnalyticsLog.from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Unreadable analytics file {self.analytics_file}, starting empty: {e}")
            return AnalyticsLog.empty()

    def save(self, log: AnalyticsLog) -> None:
        """Overwrite the file with ``log``, keeping only the newest ``max_visits`` records."""
        if len(log) > self.max_visits:
            dropped = len(log) - self.max_visits
            log.visits = log.visits[-self.max_visits:]
            logger.debug(f"Evicted {dropped} oldest visits")
        self._write(log)

    def find_by_id(self, log: AnalyticsLog, session_id: str) -> Optional[VisitRecord]:
        return log.find_by_id(session_id)

    def append(self, visit: VisitRecord) -> None:
        """Load the log, append ``visit`` and save."""
        log = self.load()
        log.append(visit)
        self.save(log)

    def _write(self, log: AnalyticsLog) -> None:
        try:
            self.analytics_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.analytics_file, 'w', encoding='utf-8') as f:
                json.dump(log.to_dict(), f, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Error saving analytics data: {e}")
