"""Config settings – 12-factor env-based configuration."""
from togglekit.config.settings.base import FeatureSettings, Settings
from togglekit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "FeatureSettings", "Settings", "SettingsLoader"]
