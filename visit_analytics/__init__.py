# Visit analytics package: classification, session identity and the visit log store

from .models import (
    MAX_VISITS,
    UNKNOWN_LOCATION,
    DIRECT_SOURCE,
    DeviceType,
    Browser,
    OperatingSystem,
    VisitRecord,
    AnalyticsLog,
)
from .user_agent import (
    UserAgentInfo,
    is_bot,
    device_type,
    browser,
    operating_system,
    classify,
)
from .referral import source_from_referrer, referrer_from_headers
from .session_identity import mint_session_id, resolve_client_ip
from .store import AnalyticsStore
from .geolocation import GeoLocator, format_location
from .logging_config import (
    setup_logging,
    stop_logging,
    get_logger,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "MAX_VISITS",
    "UNKNOWN_LOCATION",
    "DIRECT_SOURCE",
    "DeviceType",
    "Browser",
    "OperatingSystem",
    "VisitRecord",
    "AnalyticsLog",
    "UserAgentInfo",
    "is_bot",
    "device_type",
    "browser",
    "operating_system",
    "classify",
    "source_from_referrer",
    "referrer_from_headers",
    "mint_session_id",
    "resolve_client_ip",
    "AnalyticsStore",
    "GeoLocator",
    "format_location",
    "setup_logging",
    "stop_logging",
    "get_logger",
    "ThreadSafeLoggingConfig",
]
