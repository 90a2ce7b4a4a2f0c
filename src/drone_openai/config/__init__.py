"""Configuration APIs."""

from drone_openai.config.settings import (
    ENV_KEYS,
    PluginSettings,
    SettingsError,
    load_settings,
    settings_summary,
)

__all__ = [
    "ENV_KEYS",
    "PluginSettings",
    "SettingsError",
    "load_settings",
    "settings_summary",
]
