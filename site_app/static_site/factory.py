"""
Factory for creating static site module.
"""
from pathlib import Path

from .routes import create_static_site_blueprint


def create_static_site_module(site_dir: Path) -> dict:
    """Create static site module.

    Args:
        site_dir: Directory containing the website's files

    Returns:
        Dictionary containing the blueprint
    """
    return {
        "blueprint": create_static_site_blueprint(site_dir)
    }
