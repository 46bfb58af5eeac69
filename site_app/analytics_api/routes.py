"""
Analytics API Routes

JSON endpoints over the visit log and the dashboard page that reads them.
"""

from pathlib import Path

from flask import Blueprint, abort, request, jsonify, send_from_directory

from .services import AnalyticsSummaryService


def create_analytics_api_blueprint(
    summary_service: AnalyticsSummaryService,
    site_dir: Path,
    dashboard_file: str
) -> Blueprint:
    """Create analytics API blueprint with routes.

    Args:
        summary_service: The analytics summary service instance
        site_dir: Directory holding the dashboard page
        dashboard_file: File name of the dashboard page

    Returns:
        Flask blueprint with analytics routes
    """
    blueprint = Blueprint('analytics_api', __name__)

    @blueprint.route('/api/analytics', methods=['GET'])
    def api_analytics():
        """Return the full visit log."""
        return jsonify(summary_service.get_log().to_dict())

    @blueprint.route('/api/analytics/summary', methods=['GET'])
    def api_analytics_summary():
        """Return aggregated counts over the visit log."""
        limit = request.args.get('limit', type=int)
        return jsonify(summary_service.get_summary(limit).to_dict())

    @blueprint.route('/analytics', methods=['GET'])
    def analytics_dashboard():
        """Serve the analytics dashboard page."""
        if not (Path(site_dir) / dashboard_file).is_file():
            abort(404)
        return send_from_directory(site_dir, dashboard_file)

    return blueprint
