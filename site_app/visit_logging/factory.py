"""
Factory for creating visit logging module.
"""
from typing import Callable, Iterable

from visit_analytics.store import AnalyticsStore

from .recorder import VisitRecorder
from .routes import create_visit_logging_blueprint


def create_visit_logging_module(
    store: AnalyticsStore,
    locate: Callable[[str], str],
    excluded_ips: Iterable[str] = ()
) -> dict:
    """Create visit logging module with service and request hooks.

    Args:
        store: Analytics store visits are appended to
        locate: Maps a client IP to a location string
        excluded_ips: Client addresses that are never logged

    Returns:
        Dictionary containing the service and blueprint
    """
    visit_recorder = VisitRecorder(store, locate, excluded_ips)

    blueprint = create_visit_logging_blueprint(visit_recorder)

    return {
        "service": visit_recorder,
        "blueprint": blueprint
    }
