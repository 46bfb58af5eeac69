"""
Session Updater

Applies heartbeat and navigation updates to a visit already in the log.
Each update is a full load/modify/save round trip; unknown session ids are
ignored.
"""

import logging
from typing import Optional, Union

from visit_analytics.store import AnalyticsStore

logger = logging.getLogger(__name__)


class SessionUpdater:
    """Mutates stored visits by session id."""

    def __init__(self, store: AnalyticsStore):
        self.store = store

    def update_duration(self, session_id: str, seconds: Optional[Union[int, float]]) -> bool:
        """Overwrite the visit's duration with ``seconds``.

        A falsy ``seconds`` leaves the stored duration unchanged so a late
        zero heartbeat never resets a session.

        Returns:
            True if the session was found
        """
        log = self.store.load()
        visit = self.store.find_by_id(log, session_id)
        if visit is None:
            logger.debug(f"Heartbeat for unknown session {session_id}")
            return False

        if seconds:
            visit.duration = seconds
        self.store.save(log)
        return True

    def increment_nav(self, session_id: str) -> bool:
        """Count one navigation event for the session.

        Returns:
            True if the session was found
        """
        log = self.store.load()
        visit = self.store.find_by_id(log, session_id)
        if visit is None:
            logger.debug(f"Navigation for unknown session {session_id}")
            return False

        visit.nav_count = (visit.nav_count or 0) + 1
        self.store.save(log)
        return True
