"""Config validation errors."""
from togglekit.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class MarkerConfigurationError(ConfigError):
    """A feature declaration or marker kind is misdeclared.

    Raised for attribute-contributing markers whose accessor is missing or
    fails, and for feature groups declaring the same identifier twice.  This
    is a programming error and is never swallowed by the metadata resolver.
    """
    default_code = "marker_configuration_error"

    def __init__(self, marker_kind: str, reason: str, **kwargs: object) -> None:
        super().__init__(f"Misconfigured marker '{marker_kind}': {reason}", **kwargs)  # type: ignore[arg-type]
        self.marker_kind = marker_kind
        self.reason = reason


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MarkerConfigurationError",
    "MissingRequiredSettingError",
]
