"""
whatsapp-dispatch core components.

Provides access to configuration and logging.
"""

# Configuration & Settings
from .config.settings import settings

# Logging System
from .logging import get_logger, setup_app_logging

__all__ = [
    "settings",
    "get_logger",
    "setup_app_logging",
]
