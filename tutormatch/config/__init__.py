"""Configuration management module for tutormatch."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AlertConfig,
    AppConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    MatchingConfig,
    VocabularyConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "MatchingConfig",
    "AlertConfig",
    "VocabularyConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
