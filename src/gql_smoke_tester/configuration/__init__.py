"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_SETTINGS_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .loader import ConfigurationError, build_generation_settings, load_settings_file
from .runtime_settings import GenerationSettings, SettingsFile

__all__ = [
    "GenerationSettings",
    "SettingsFile",
    "ConfigurationError",
    "build_generation_settings",
    "load_settings_file",
    "DEFAULT_SETTINGS_FILENAME",
    "build_placeholder_settings",
    "write_placeholder_settings",
]
