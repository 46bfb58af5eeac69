"""
Data Models for Visit Analytics

Defines the visit record stored per page view and the bounded log that holds them.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


MAX_VISITS = 10000
UNKNOWN_LOCATION = "Unknown"
DIRECT_SOURCE = "direct"


def _number(value: Any) -> Union[int, float]:
    """Coerce a stored counter to a finite number, falling back to 0."""
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return 0
        if math.isfinite(value) and value.is_integer():
            value = int(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value if math.isfinite(value) else 0


class DeviceType(str, Enum):
    """Device classes derived from a user agent."""
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


class Browser(str, Enum):
    """Browser families derived from a user agent."""
    EDGE = "Edge"
    OPERA = "Opera"
    CHROME = "Chrome"
    SAFARI = "Safari"
    FIREFOX = "Firefox"
    IE = "IE"
    OTHER = "Other"


class OperatingSystem(str, Enum):
    """Operating systems derived from a user agent."""
    WINDOWS = "Windows"
    MACOS = "macOS"
    IOS = "iOS"
    ANDROID = "Android"
    LINUX = "Linux"
    OTHER = "Other"


@dataclass
class VisitRecord:
    """One qualifying page view.

    Everything except ``duration`` and ``nav_count`` is fixed when the record
    is created.
    """

    id: str
    timestamp: str
    ip: str
    location: str = UNKNOWN_LOCATION
    device: str = DeviceType.DESKTOP.value
    browser: str = Browser.OTHER.value
    os: str = OperatingSystem.OTHER.value
    source: str = DIRECT_SOURCE
    user_agent: str = ""
    duration: Union[int, float] = 0
    nav_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "ip": self.ip,
            "location": self.location,
            "device": str(getattr(self.device, "value", self.device)),
            "browser": str(getattr(self.browser, "value", self.browser)),
            "os": str(getattr(self.os, "value", self.os)),
            "source": self.source,
            "userAgent": self.user_agent,
            "duration": self.duration,
            "navCount": self.nav_count
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VisitRecord':
        """Create VisitRecord from dictionary.

        Older files stored the raw user agent under ``ua``. Counters that are
        not numbers load as 0.
        """
        return cls(
            id=str(data.get("id", "")),
            timestamp=data.get("timestamp", ""),
            ip=data.get("ip", ""),
            location=data.get("location") or UNKNOWN_LOCATION,
            device=data.get("device") or DeviceType.DESKTOP.value,
            browser=data.get("browser") or Browser.OTHER.value,
            os=data.get("os") or OperatingSystem.OTHER.value,
            source=data.get("source") or DIRECT_SOURCE,
            user_agent=data.get("userAgent", data.get("ua", "")) or "",
            duration=_number(data.get("duration")),
            nav_count=int(_number(data.get("navCount")))
        )


@dataclass
class AnalyticsLog:
    """Ordered visit records, oldest first."""

    visits: List[VisitRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.visits)

    def append(self, visit: VisitRecord) -> None:
        self.visits.append(visit)

    def find_by_id(self, session_id: str) -> Optional[VisitRecord]:
        """Return the first visit whose id equals ``session_id``."""
        for visit in self.visits:
            if visit.id == session_id:
                return visit
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"visits": [visit.to_dict() for visit in self.visits]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalyticsLog':
        """Create AnalyticsLog from dictionary, skipping entries that are not objects."""
        visits = data.get("visits") or []
        return cls(visits=[VisitRecord.from_dict(v) for v in visits if isinstance(v, dict)])

    @classmethod
    def empty(cls) -> 'AnalyticsLog':
        return cls()
