"""
Visit Logging Subsystem

Records qualifying page views into the analytics log.
"""

from .factory import create_visit_logging_module
from .recorder import VisitRecorder

__all__ = ["create_visit_logging_module", "VisitRecorder"]
