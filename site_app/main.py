import argparse
import atexit
import logging
from pathlib import Path
from typing import Callable, Optional

# Import configuration management
import sys
sys.path.append(str(Path(__file__).parent.parent))
from config_manager import ConfigManager

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from visit_analytics.geolocation import GeoLocator
from visit_analytics.store import AnalyticsStore

from site_app.analytics_api.factory import create_analytics_api_module
from site_app.session_tracking.factory import create_session_tracking_module
from site_app.static_site.factory import create_static_site_module
from site_app.visit_logging.factory import create_visit_logging_module

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent


def _resolve(path_value: str) -> Path:
    """Resolve relative configured paths against the project directory."""
    path = Path(path_value)
    return path if path.is_absolute() else BASE_DIR / path


def create_app(
    config_manager: Optional[ConfigManager] = None,
    locate: Optional[Callable[[str], str]] = None
) -> Flask:
    """Build the site server.

    Args:
        config_manager: Configuration source (defaults to site_config.json + env)
        locate: Override for IP geolocation, mapping an IP to "city, country"

    Returns:
        Configured Flask application
    """
    config_manager = config_manager or ConfigManager()
    analytics_config = config_manager.get_analytics_config()
    paths_config = config_manager.get_paths_config()

    site_dir = _resolve(paths_config.site_dir)

    app = Flask(__name__, static_folder=None)
    app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_proto = 1,     # trust 1 hop for X-Forwarded-Proto
            x_host  = 1)     # trust 1 hop for X-Forwarded-Host

    # -------------------------------------------------------------------------
    # Analytics storage
    # -------------------------------------------------------------------------

    store = AnalyticsStore(
        _resolve(analytics_config.analytics_file),
        max_visits=analytics_config.max_visits
    )

    if locate is None:
        geo_locator = GeoLocator(_resolve(analytics_config.geoip_db_path))
        locate = geo_locator.describe
        atexit.register(geo_locator.close)

    # -------------------------------------------------------------------------
    # Modules
    # -------------------------------------------------------------------------

    visit_logging_module = create_visit_logging_module(
        store=store,
        locate=locate,
        excluded_ips=analytics_config.excluded_ips
    )

    session_tracking_module = create_session_tracking_module(store)

    analytics_api_module = create_analytics_api_module(
        store=store,
        site_dir=site_dir,
        dashboard_file=paths_config.dashboard_file
    )

    static_site_module = create_static_site_module(site_dir)

    # Register blueprints
    app.register_blueprint(visit_logging_module["blueprint"])
    app.register_blueprint(session_tracking_module["blueprint"])
    app.register_blueprint(analytics_api_module["blueprint"])
    app.register_blueprint(static_site_module["blueprint"])

    @app.get("/actuator/health")
    def actuator_health():
        """Health check endpoint for monitoring tools."""
        return jsonify({
            "status": "UP",
            "service": "site-visit-analytics"
        }), 200

    logger.info(f"Serving {site_dir} with analytics in {store.analytics_file}")
    return app


app = create_app()

# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    from visit_analytics.logging_config import setup_logging

    parser = argparse.ArgumentParser(description="Static site server with visit analytics")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    app_config = ConfigManager().get_app_config()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    setup_logging(app_config.debug)
    logger.info(f"Site server running on port {app_config.port}")
    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )
