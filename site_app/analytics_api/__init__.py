"""
Analytics API Module

JSON access to the collected visits and the dashboard that displays them.
"""

from .factory import create_analytics_api_module

__all__ = ["create_analytics_api_module"]
