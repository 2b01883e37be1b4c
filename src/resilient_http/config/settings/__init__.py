"""Config settings – 12-factor env-based configuration."""
from resilient_http.config.settings.base import ClientSettings, Settings
from resilient_http.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["ClientSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
