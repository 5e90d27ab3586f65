"""
Core module containing configuration and error handling.

This module provides:
    - config: Application settings and environment variable management
    - errors: Application exceptions and FastAPI error handlers
"""

from autopay.core.config import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
