"""
Session Tracking Subsystem

Heartbeat and navigation updates for visits already in the analytics log.
"""

from .factory import create_session_tracking_module
from .models import HeartbeatPayload, NavigationPayload
from .updater import SessionUpdater

__all__ = [
    "create_session_tracking_module",
    "HeartbeatPayload",
    "NavigationPayload",
    "SessionUpdater",
]
