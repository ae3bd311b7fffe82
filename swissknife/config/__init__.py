"""
Configuration management for SwissKnife.

Handles loading and validation of configuration files.
"""

from swissknife.config.settings import (
    HttpConfig,
    LoggingConfig,
    SwissKnifeConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "HttpConfig",
    "LoggingConfig",
    "SwissKnifeConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
