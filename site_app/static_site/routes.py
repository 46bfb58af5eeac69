"""
Static Site Routes

Serves the website's files with cache headers and falls back to the index
document for unknown paths so client-side routes resolve.
"""

import re
from pathlib import Path

from flask import Blueprint, abort, send_from_directory
from werkzeug.security import safe_join

INDEX_DOCUMENT = "index.html"
LONG_CACHE = "public, max-age=2592000, immutable"
MEDIA_PATTERN = re.compile(r"\.(mp3|mp4|ogg|webm|flac)$", re.IGNORECASE)
IMAGE_PATTERN = re.compile(r"\.(jpg|jpeg|png|webp|gif)$", re.IGNORECASE)


def apply_cache_headers(response, filename: str):
    """Set caching headers by file type."""
    if Path(filename).name == INDEX_DOCUMENT:
        response.headers['Cache-Control'] = 'no-cache'
    elif MEDIA_PATTERN.search(filename):
        response.headers['Accept-Ranges'] = 'bytes'
        response.headers['Cache-Control'] = LONG_CACHE
    elif IMAGE_PATTERN.search(filename):
        response.headers['Cache-Control'] = LONG_CACHE
    return response


def create_static_site_blueprint(site_dir: Path) -> Blueprint:
    """Create a Flask blueprint that serves the static site.

    Args:
        site_dir: Directory containing index.html and the site's assets

    Returns:
        Flask blueprint with the catch-all file routes
    """
    bp = Blueprint('static_site', __name__)
    site_dir = Path(site_dir)

    def serve(filename: str):
        response = send_from_directory(site_dir, filename)
        return apply_cache_headers(response, filename)

    def serve_index():
        if not (site_dir / INDEX_DOCUMENT).is_file():
            abort(404)
        return serve(INDEX_DOCUMENT)

    @bp.get("/")
    def index():
        """Serve the site's index document."""
        return serve_index()

    @bp.get("/<path:filename>")
    def site_file(filename):
        """Serve a site asset, or the index document if none matches."""
        candidate = safe_join(str(site_dir), filename)
        if candidate is not None and Path(candidate).is_file():
            return serve(filename)
        return serve_index()

    return bp
