"""
Visit Logging Hooks

Flask request hooks that run the visit recorder ahead of normal request
handling and hand the minted session id back to the browser.
"""

from flask import Blueprint, g, request

from visit_analytics.referral import referrer_from_headers
from visit_analytics.session_identity import resolve_client_ip

from .recorder import VisitRecorder

SESSION_HEADER = "X-Session-Id"
SESSION_COOKIE = "sessionId"


def create_visit_logging_blueprint(visit_recorder: VisitRecorder) -> Blueprint:
    """Create a Flask blueprint whose app-wide hooks log page views.

    Args:
        visit_recorder: The recorder that filters and stores visits

    Returns:
        Flask blueprint with before/after request hooks
    """
    bp = Blueprint('visit_logging', __name__)

    @bp.before_app_request
    def log_visit():
        """Record the request as a visit if it is a page view."""
        if request.path not in visit_recorder.page_paths:
            return None
        session_id = visit_recorder.record(
            path=request.path,
            user_agent=request.headers.get("User-Agent", ""),
            ip=resolve_client_ip(request),
            referrer=referrer_from_headers(request.headers)
        )
        if session_id:
            g.session_id = session_id
        return None

    @bp.after_app_request
    def attach_session_id(response):
        """Expose the session id so the page can send heartbeats for it.

        The cookie mirrors the header for scripts on the page itself, which
        cannot read the headers of their own document load.
        """
        session_id = g.get("session_id")
        if session_id:
            response.headers[SESSION_HEADER] = session_id
            response.set_cookie(SESSION_COOKIE, session_id, samesite="Lax")
        return response

    return bp
