"""
Core utilities and configuration for actionwire.

This package provides settings, logging configuration and the HTTP status table.
"""

from actionwire.core.config import Settings
from actionwire.core.logging_config import get_logger, setup_logging

__all__ = ["Settings", "get_logger", "setup_logging"]
