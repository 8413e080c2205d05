"""Config validation – error types."""
from togglekit.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MarkerConfigurationError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MarkerConfigurationError",
    "MissingRequiredSettingError",
]
