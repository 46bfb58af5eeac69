"""
Static Site Module

Serves the website itself.
"""

from .factory import create_static_site_module

__all__ = ["create_static_site_module"]
