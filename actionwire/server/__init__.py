"""
FastAPI integration for actionwire.

This package mounts actions on a FastAPI application and provides the
application factory and exception handlers.
"""

from .adapter import as_endpoint, mount_action
from .main import ActionRoute, create_app

__all__ = ["ActionRoute", "as_endpoint", "create_app", "mount_action"]
