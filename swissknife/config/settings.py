"""
Configuration management for SwissKnife.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx
import yaml

from swissknife._version import __version__
from swissknife.exceptions import InvalidConfigurationError
from swissknife.logging_config import get_logger

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${API_BASE_URL}" -> value of API_BASE_URL env var
        "${API_BASE_URL:https://localhost/}" -> value of API_BASE_URL or the default
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def _as_bool(value: Any) -> bool:
    """Interpret YAML booleans and env-expanded strings such as "false"."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class HttpConfig:
    """HTTP client configuration."""

    base_url: str = ""
    timeout_seconds: float = 30.0
    user_agent: str = f"SwissKnife/{__version__}"
    headers: Dict[str, str] = field(default_factory=dict)
    follow_redirects: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class SwissKnifeConfig:
    """Main SwissKnife configuration."""

    http: HttpConfig = field(default_factory=HttpConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.swissknife/config.yaml")


def get_default_config() -> SwissKnifeConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        SwissKnifeConfig: Default configuration object
    """
    return SwissKnifeConfig(
        http=HttpConfig(),
        logging=LoggingConfig(),
    )


def load_config(config_path: Optional[str] = None) -> SwissKnifeConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises ConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        SwissKnifeConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping, "
            f"got {type(config_data).__name__}"
        )

    config_data = _expand_env_vars(config_data)
    logger.debug("Expanded environment variables in configuration")

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> SwissKnifeConfig:
    """
    Build SwissKnifeConfig from dictionary loaded from YAML.

    Merges user configuration with defaults.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        SwissKnifeConfig: Configuration object

    Raises:
        InvalidConfigurationError: If a section has the wrong type
    """
    default_config = get_default_config()

    http_data = config_data.get('http') or {}
    logging_data = config_data.get('logging') or {}
    for name, section in (('http', http_data), ('logging', logging_data)):
        if not isinstance(section, dict):
            raise InvalidConfigurationError(f"'{name}' section must be a mapping")

    headers = http_data.get('headers') or {}
    if not isinstance(headers, dict):
        raise InvalidConfigurationError("http.headers must be a mapping")

    try:
        http = HttpConfig(
            base_url=str(http_data.get('base_url', default_config.http.base_url)),
            timeout_seconds=float(
                http_data.get('timeout_seconds', default_config.http.timeout_seconds)
            ),
            user_agent=str(http_data.get('user_agent', default_config.http.user_agent)),
            headers={str(k): str(v) for k, v in headers.items()},
            follow_redirects=_as_bool(
                http_data.get('follow_redirects', default_config.http.follow_redirects)
            ),
        )
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Invalid 'http' section: {e}") from e

    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=os.path.expanduser(str(logging_data.get('file', default_config.logging.file))),
        json_format=_as_bool(logging_data.get('json_format', default_config.logging.json_format)),
    )

    return SwissKnifeConfig(http=http, logging=logging)


def _validate_config(config: SwissKnifeConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if config.http.base_url:
        try:
            base_url = httpx.URL(config.http.base_url)
        except httpx.InvalidURL as e:
            raise InvalidConfigurationError(
                f"base_url is not a valid URL: {config.http.base_url!r}"
            ) from e
        if base_url.scheme not in ("http", "https"):
            raise InvalidConfigurationError(
                f"base_url must have an http or https scheme, got '{config.http.base_url}'"
            )

    if config.http.timeout_seconds <= 0:
        raise InvalidConfigurationError(
            f"timeout_seconds must be positive, got {config.http.timeout_seconds}"
        )

    if not config.http.user_agent:
        raise InvalidConfigurationError("user_agent cannot be empty")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )
