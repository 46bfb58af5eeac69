"""
Factory for creating session tracking module.
"""
from visit_analytics.store import AnalyticsStore

from .routes import create_session_tracking_blueprint
from .updater import SessionUpdater


def create_session_tracking_module(store: AnalyticsStore) -> dict:
    """Create session tracking module with service and routes.

    Args:
        store: Analytics store holding the visits to update

    Returns:
        Dictionary containing the service and blueprint
    """
    session_updater = SessionUpdater(store)

    blueprint = create_session_tracking_blueprint(session_updater)

    return {
        "service": session_updater,
        "blueprint": blueprint
    }
