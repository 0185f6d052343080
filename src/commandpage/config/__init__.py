"""Configuration management for commandpage.

Loads and validates the YAML route table with Pydantic models, plus
process settings (logging) with environment variable overrides.
"""

from commandpage.config.settings import (
    CommandInfo,
    Configuration,
    ConfigurationError,
    LoggingConfig,
    Settings,
    StaticPathInfo,
    load_configuration,
)

__all__ = [
    "CommandInfo",
    "Configuration",
    "ConfigurationError",
    "LoggingConfig",
    "Settings",
    "StaticPathInfo",
    "load_configuration",
]
