"""
Session Identity

Session ids correlate a visit with the heartbeat and navigation calls the
page makes afterwards. They are built from the client IP and the arrival
time in milliseconds, so two requests from one address in the same
millisecond share an id.
"""

from datetime import datetime, timezone
from typing import Optional


def mint_session_id(ip: str, now: Optional[datetime] = None) -> str:
    """Build the session id for a visit arriving from ``ip`` at ``now``."""
    now = now or datetime.now(timezone.utc)
    return f"{ip}-{int(now.timestamp() * 1000)}"


def resolve_client_ip(request) -> str:
    """Get client IP address, handling proxy headers.

    Only used to label analytics, never for access decisions.
    """
    forwarded = request.headers.get('X-Forwarded-For')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.remote_addr or ""
