"""
Data Models for the Analytics API
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class AnalyticsSummary:
    """Aggregated view over the visit log."""

    total_visits: int = 0
    average_duration: float = 0.0
    total_navigations: int = 0
    devices: List[Dict[str, Any]] = field(default_factory=list)
    browsers: List[Dict[str, Any]] = field(default_factory=list)
    operating_systems: List[Dict[str, Any]] = field(default_factory=list)
    sources: List[Dict[str, Any]] = field(default_factory=list)
    locations: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_visits": self.total_visits,
            "average_duration": self.average_duration,
            "total_navigations": self.total_navigations,
            "devices": self.devices,
            "browsers": self.browsers,
            "operating_systems": self.operating_systems,
            "sources": self.sources,
            "locations": self.locations
        }
