"""
Test cases for the configuration management system.
Tests config loading, environment overrides, and access functionality.
"""

import os
import json
from unittest.mock import patch

import pytest

from config_manager import (
    ConfigManager,
    AppConfig,
    AnalyticsConfig,
    PathsConfig,
)


ENV_KEYS = [
    "APP_HOST", "APP_PORT", "APP_DEBUG", "ANALYTICS_FILE",
    "ANALYTICS_MAX_VISITS", "EXCLUDED_IPS", "GEOIP_DB_PATH", "SITE_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of these tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfigManager:
    """Test the ConfigManager class functionality."""

    def test_defaults_without_file(self, tmp_path):
        """Test that defaults apply when no config file exists."""
        manager = ConfigManager(str(tmp_path / "missing.json"))

        app_config = manager.get_app_config()
        assert isinstance(app_config, AppConfig)
        assert app_config.host == "0.0.0.0"
        assert app_config.port == 3002
        assert app_config.debug is False

        analytics_config = manager.get_analytics_config()
        assert isinstance(analytics_config, AnalyticsConfig)
        assert analytics_config.analytics_file == "analytics.json"
        assert analytics_config.max_visits == 10000
        assert analytics_config.excluded_ips == ["38.49.72.41"]

        paths_config = manager.get_paths_config()
        assert isinstance(paths_config, PathsConfig)
        assert paths_config.site_dir == "ui"
        assert paths_config.dashboard_file == "analytics-dashboard.html"

    def test_load_config_from_file(self, tmp_path):
        """Test that file values are merged over the defaults per section."""
        config_file = tmp_path / "site_config.json"
        config_file.write_text(json.dumps({
            "app": {"port": 8080},
            "analytics": {"max_visits": 500, "excluded_ips": []}
        }))

        manager = ConfigManager(str(config_file))
        assert manager.get_app_config().port == 8080
        assert manager.get_app_config().host == "0.0.0.0"
        assert manager.get_analytics_config().max_visits == 500
        assert manager.get_analytics_config().excluded_ips == []
        assert manager.get_analytics_config().analytics_file == "analytics.json"

    def test_invalid_file_keeps_defaults(self, tmp_path):
        config_file = tmp_path / "site_config.json"
        config_file.write_text("{broken")

        manager = ConfigManager(str(config_file))
        assert manager.get_app_config().port == 3002

    def test_environment_overrides(self, tmp_path):
        """Test that environment variables win over file and defaults."""
        env = {
            "APP_HOST": "127.0.0.1",
            "APP_PORT": "9000",
            "APP_DEBUG": "true",
            "ANALYTICS_FILE": "/var/lib/site/analytics.json",
            "ANALYTICS_MAX_VISITS": "250",
            "EXCLUDED_IPS": "10.0.0.1, 10.0.0.2,",
            "GEOIP_DB_PATH": "/usr/share/GeoIP/GeoLite2-City.mmdb",
            "SITE_DIR": "public",
        }
        with patch.dict(os.environ, env):
            manager = ConfigManager(str(tmp_path / "missing.json"))

        assert manager.get_app_config() == AppConfig(host="127.0.0.1", port=9000, debug=True)
        analytics_config = manager.get_analytics_config()
        assert analytics_config.analytics_file == "/var/lib/site/analytics.json"
        assert analytics_config.max_visits == 250
        assert analytics_config.excluded_ips == ["10.0.0.1", "10.0.0.2"]
        assert analytics_config.geoip_db_path == "/usr/share/GeoIP/GeoLite2-City.mmdb"
        assert manager.get_paths_config().site_dir == "public"

    def test_save_and_reload(self, tmp_path):
        config_file = tmp_path / "site_config.json"
        manager = ConfigManager(str(config_file))
        manager._config["app"]["port"] = 4000
        manager.save_config()

        reloaded = ConfigManager(str(config_file))
        assert reloaded.get_app_config().port == 4000

    def test_get_config_returns_copy(self, tmp_path):
        manager = ConfigManager(str(tmp_path / "missing.json"))
        config = manager.get_config()
        config["app"] = {}
        assert "port" in manager.get_config()["app"]
