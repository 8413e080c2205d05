"""Config – 12-factor settings, loaders, and validation errors.

The repository builder lives in :mod:`togglekit.config.builder` and is not
re-exported here.
"""

from togglekit.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FeatureSettings,
    Settings,
    SettingsLoader,
)
from togglekit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MarkerConfigurationError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeatureSettings",
    "InvalidSettingValueError",
    "MarkerConfigurationError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
