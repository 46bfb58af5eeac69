"""
Visit Recorder

Decides whether an inbound request is a page view worth logging and, if so,
turns its headers into a VisitRecord appended to the analytics store.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from visit_analytics.models import UNKNOWN_LOCATION, VisitRecord
from visit_analytics.referral import source_from_referrer
from visit_analytics.session_identity import mint_session_id
from visit_analytics.store import AnalyticsStore
from visit_analytics.user_agent import classify, is_bot

logger = logging.getLogger(__name__)

PAGE_PATHS = ("/", "/index.html")


class VisitRecorder:
    """Ingestion pipeline for page views."""

    def __init__(
        self,
        store: AnalyticsStore,
        locate: Callable[[str], str],
        excluded_ips: Iterable[str] = (),
        page_paths: Iterable[str] = PAGE_PATHS,
    ):
        """Initialize the visit recorder.

        Args:
            store: Store the visit log is persisted in
            locate: Maps a client IP to a "city, country" string
            excluded_ips: Client addresses that are never logged
            page_paths: Request paths that count as a page view
        """
        self.store = store
        self.locate = locate
        self.excluded_ips = set(excluded_ips)
        self.page_paths = tuple(page_paths)

    def should_record(self, path: str, user_agent: str, ip: str) -> bool:
        """Apply the path, bot and excluded-IP filters in that order."""
        if path not in self.page_paths:
            return False
        if is_bot(user_agent):
            logger.debug(f"Skipping bot visit from {ip}")
            return False
        if ip in self.excluded_ips:
            return False
        return True

    def _location(self, ip: str) -> str:
        try:
            return self.locate(ip) or UNKNOWN_LOCATION
        except Exception as e:
            logger.warning(f"Geolocation failed for {ip}: {e}")
            return UNKNOWN_LOCATION

    def build_visit(
        self,
        user_agent: str,
        ip: str,
        referrer: Optional[str],
        now: Optional[datetime] = None,
    ) -> VisitRecord:
        """Classify the request and build a fresh visit with zero duration and navigation."""
        now = now or datetime.now(timezone.utc)
        ua_info = classify(user_agent)
        return VisitRecord(
            id=mint_session_id(ip, now),
            timestamp=now.isoformat(timespec="milliseconds"),
            ip=ip,
            location=self._location(ip),
            device=ua_info.device.value,
            browser=ua_info.browser.value,
            os=ua_info.os.value,
            source=source_from_referrer(referrer),
            user_agent=user_agent,
            duration=0,
            nav_count=0
        )

    def record(
        self,
        path: str,
        user_agent: str,
        ip: str,
        referrer: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Optional[str]:
        """Record a page view.

        Returns:
            The new session id, or None if the request was filtered out
        """
        user_agent = user_agent or ""
        if not self.should_record(path, user_agent, ip):
            return None

        visit = self.build_visit(user_agent, ip, referrer, now)
        self.store.append(visit)
        logger.info(f"Recorded visit {visit.id}: {visit.device}/{visit.browser}/{visit.os} from {visit.source}")
        return visit.id
