"""Utility functions for facesmith.

This module provides utility functions including:

- Logging setup and configuration
- Request outcome logging
"""

from facesmith.utils.logging import RequestLogger, configure_logging

__all__ = [
    "RequestLogger",
    "configure_logging",
]
