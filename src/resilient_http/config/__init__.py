"""Config – 12-factor settings and loaders."""

from resilient_http.config.settings import ClientSettings, EnvSettingsLoader, Settings, SettingsLoader
from resilient_http.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ClientSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
