"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "key-value"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        app_env: Optional[str] = None,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        self.app_env = app_env or "local"
        self.log_level = log_level
        self.log_format = log_format
        self.config_path = config_path


def load_environment_config(dotenv_path: Optional[Path] = None) -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Variables already present in the process environment win over values
    from the ``.env`` file.

    Optional environment variables:
    - APP_ENV: Environment label stamped on log records (default: local)
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Override log format (json, key-value)
    - TUTORMATCH_CONFIG: Path to the YAML configuration file

    Args:
        dotenv_path: Explicit .env file (defaults to searching from the working directory)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If any variable has an invalid value
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)

    errors = []

    app_env = os.getenv("APP_ENV")
    log_level = os.getenv("LOG_LEVEL")
    log_format = os.getenv("LOG_FORMAT")
    config_path_str = os.getenv("TUTORMATCH_CONFIG")

    if log_level:
        log_level = log_level.upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if log_format:
        log_format = log_format.lower()
        if log_format not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(VALID_LOG_FORMATS)}"
            )

    config_path = None
    if config_path_str:
        config_path = Path(config_path_str)
        if not config_path.exists():
            errors.append(f"TUTORMATCH_CONFIG points to a missing file: {config_path_str}")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            sections=["environment"],
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        app_env=app_env,
        log_level=log_level,
        log_format=log_format,
        config_path=config_path,
    )
