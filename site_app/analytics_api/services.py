"""
Analytics Summary Service

Aggregates the visit log into per-attribute counts for the dashboard.
"""

from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from visit_analytics.models import AnalyticsLog
from visit_analytics.store import AnalyticsStore

from .models import AnalyticsSummary


def _ranked(values: Iterable[str], limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Count values, most common first."""
    return [
        {"name": name, "count": count}
        for name, count in Counter(values).most_common(limit)
    ]


class AnalyticsSummaryService:
    """Service for summarizing stored visits."""

    def __init__(self, store: AnalyticsStore):
        self.store = store

    def get_log(self) -> AnalyticsLog:
        return self.store.load()

    def get_summary(self, top_limit: Optional[int] = None) -> AnalyticsSummary:
        """Build an AnalyticsSummary over the whole log.

        Args:
            top_limit: Cap on entries returned for sources and locations

        Returns:
            AnalyticsSummary with totals and breakdowns
        """
        visits = self.store.load().visits
        if not visits:
            return AnalyticsSummary()

        total_duration = sum(v.duration or 0 for v in visits)
        return AnalyticsSummary(
            total_visits=len(visits),
            average_duration=round(total_duration / len(visits), 1),
            total_navigations=sum(v.nav_count or 0 for v in visits),
            devices=_ranked(v.device for v in visits),
            browsers=_ranked(v.browser for v in visits),
            operating_systems=_ranked(v.os for v in visits),
            sources=_ranked((v.source for v in visits), top_limit),
            locations=_ranked((v.location for v in visits), top_limit)
        )
