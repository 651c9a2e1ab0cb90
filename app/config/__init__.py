"""Configuration package for runtime settings and startup validation."""

from .settings import APPLICATION_HOST, AppSettings, SettingsLoadError, config_load_settings

__all__ = ["APPLICATION_HOST", "AppSettings", "SettingsLoadError", "config_load_settings"]
