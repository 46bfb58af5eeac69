"""
Session Tracking Routes

Flask routes the page calls to report session duration and navigation.
"""

from flask import Blueprint, request, jsonify

from .models import HeartbeatPayload, NavigationPayload
from .updater import SessionUpdater


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_session_tracking_blueprint(session_updater: SessionUpdater) -> Blueprint:
    """Create a Flask blueprint for session tracking routes.

    Args:
        session_updater: Service that applies updates to stored visits

    Returns:
        Flask blueprint with heartbeat and navigation endpoints
    """
    bp = Blueprint('session_tracking', __name__, url_prefix='/api')

    @bp.route("/heartbeat", methods=["POST"])
    def heartbeat():
        """Update how long the session has been open."""
        payload = HeartbeatPayload.from_dict(_json_body())
        if not payload.validate():
            return jsonify({"error": "missing-session-id"}), 400

        # Unknown sessions are acknowledged without effect
        session_updater.update_duration(payload.session_id, payload.duration)
        return jsonify({"status": "ok"})

    @bp.route("/track-nav", methods=["POST"])
    def track_nav():
        """Count a navigation inside the page."""
        payload = NavigationPayload.from_dict(_json_body())
        if not payload.validate():
            return jsonify({"error": "missing-session-id"}), 400

        session_updater.increment_nav(payload.session_id)
        return jsonify({"status": "ok"})

    return bp
