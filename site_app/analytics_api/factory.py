"""
Factory for creating analytics API module.
"""
from pathlib import Path

from visit_analytics.store import AnalyticsStore

from .routes import create_analytics_api_blueprint
from .services import AnalyticsSummaryService


def create_analytics_api_module(
    store: AnalyticsStore,
    site_dir: Path,
    dashboard_file: str = "analytics-dashboard.html"
) -> dict:
    """Create analytics API module with service and routes.

    Args:
        store: Analytics store to read visits from
        site_dir: Directory holding the dashboard page
        dashboard_file: File name of the dashboard page

    Returns:
        Dictionary containing the service and blueprint
    """
    summary_service = AnalyticsSummaryService(store)

    blueprint = create_analytics_api_blueprint(
        summary_service=summary_service,
        site_dir=site_dir,
        dashboard_file=dashboard_file
    )

    return {
        "service": summary_service,
        "blueprint": blueprint
    }
