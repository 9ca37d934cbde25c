"""Config – 12-factor settings and feature provider wiring."""

from mp_features.config.features import FeatureSettings, create_feature_provider, load_feature_enum
from mp_features.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from mp_features.kernel.errors import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeatureSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "create_feature_provider",
    "load_feature_enum",
]
