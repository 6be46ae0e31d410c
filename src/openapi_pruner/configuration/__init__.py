"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_remote_endpoint
from .runtime_settings import Configuration, OutputSettings, SourceSettings

__all__ = [
    "Configuration",
    "OutputSettings",
    "SourceSettings",
    "ConfigurationError",
    "load_configuration",
    "resolve_remote_endpoint",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
