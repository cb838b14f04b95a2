"""Config settings – 12-factor env-based configuration."""
from pipeliner_client.config.settings.base import ClientSettings, Settings
from pipeliner_client.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["ClientSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
