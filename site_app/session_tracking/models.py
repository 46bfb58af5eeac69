"""
Data Models for Session Tracking

Payloads the page sends back for a session after the initial visit.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


def _session_id_from(data: Dict[str, Any]) -> Optional[str]:
    session_id = data.get("sessionId")
    if isinstance(session_id, str) and session_id.strip():
        return session_id
    return None


@dataclass
class HeartbeatPayload:
    """Periodic duration update for a session."""

    session_id: Optional[str]
    duration: Optional[Union[int, float]] = None

    def validate(self) -> bool:
        return self.session_id is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HeartbeatPayload':
        """Create HeartbeatPayload from a request body.

        Non-numeric durations are dropped rather than rejected. Numbers are
        kept as sent, so a fractional heartbeat still counts as non-zero.
        """
        duration = data.get("duration")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            duration = None
        elif not math.isfinite(duration):
            duration = None
        return cls(
            session_id=_session_id_from(data),
            duration=duration
        )


@dataclass
class NavigationPayload:
    """Navigation event for a session."""

    session_id: Optional[str]

    def validate(self) -> bool:
        return self.session_id is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NavigationPayload':
        return cls(session_id=_session_id_from(data))
