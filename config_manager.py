"""
Configuration management for the site server.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


@dataclass
class AnalyticsConfig:
    """Visit analytics configuration settings."""
    analytics_file: str
    max_visits: int
    excluded_ips: list[str]
    geoip_db_path: str


@dataclass
class PathsConfig:
    """Path configuration settings."""
    site_dir: str
    dashboard_file: str


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "site_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        # Start with default config
        self._config = self._get_default_config()

        # Load base config from file
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        # Override with environment variables
        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 3002,
                "debug": False
            },
            "analytics": {
                "analytics_file": "analytics.json",
                "max_visits": 10000,
                "excluded_ips": ["38.49.72.41"],
                "geoip_db_path": "GeoLite2-City.mmdb"
            },
            "paths": {
                "site_dir": "ui",
                "dashboard_file": "analytics-dashboard.html"
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config:
                if isinstance(values, dict):
                    self._config[section].update(values)
                else:
                    self._config[section] = values
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

        # Analytics settings
        if os.getenv("ANALYTICS_FILE"):
            self._config["analytics"]["analytics_file"] = os.getenv("ANALYTICS_FILE")

        if os.getenv("ANALYTICS_MAX_VISITS"):
            self._config["analytics"]["max_visits"] = int(os.getenv("ANALYTICS_MAX_VISITS"))

        if os.getenv("EXCLUDED_IPS"):
            self._config["analytics"]["excluded_ips"] = [
                ip.strip() for ip in os.getenv("EXCLUDED_IPS").split(",") if ip.strip()
            ]

        if os.getenv("GEOIP_DB_PATH"):
            self._config["analytics"]["geoip_db_path"] = os.getenv("GEOIP_DB_PATH")

        # Path settings
        if os.getenv("SITE_DIR"):
            self._config["paths"]["site_dir"] = os.getenv("SITE_DIR")

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_analytics_config(self) -> AnalyticsConfig:
        """Get visit analytics configuration."""
        analytics_config = self._config["analytics"]
        return AnalyticsConfig(
            analytics_file=analytics_config["analytics_file"],
            max_visits=analytics_config["max_visits"],
            excluded_ips=list(analytics_config["excluded_ips"]),
            geoip_db_path=analytics_config["geoip_db_path"]
        )

    def get_paths_config(self) -> PathsConfig:
        """Get paths configuration."""
        paths_config = self._config["paths"]
        return PathsConfig(
            site_dir=paths_config["site_dir"],
            dashboard_file=paths_config["dashboard_file"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def get_analytics_config() -> AnalyticsConfig:
    """Get visit analytics configuration."""
    return config_manager.get_analytics_config()


def get_paths_config() -> PathsConfig:
    """Get paths configuration."""
    return config_manager.get_paths_config()


def reload_config() -> None:
    """Reload configuration."""
    config_manager.reload()


def save_config() -> None:
    """Save configuration to file."""
    config_manager.save_config()
