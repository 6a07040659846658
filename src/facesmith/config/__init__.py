"""Configuration management for facesmith.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ServerConfig: HTTP server and response header settings
- LibraryConfig: Font library, templates and whitelist locations
- LoggingConfig: Logging settings
- FacesmithSettings: Main application settings
"""

from facesmith.config.settings import (
    DEFAULT_MAX_AGE,
    FacesmithSettings,
    LibraryConfig,
    LoggingConfig,
    ServerConfig,
    get_default_settings,
    parse_bind_address,
)

__all__ = [
    "DEFAULT_MAX_AGE",
    "FacesmithSettings",
    "LibraryConfig",
    "LoggingConfig",
    "ServerConfig",
    "get_default_settings",
    "parse_bind_address",
]
