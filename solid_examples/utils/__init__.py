"""
Utility modules for the SOLID examples.
"""

from .logger import setup_logging, WrappingFormatter, get_logger
from .config_manager import ConfigManager
from .formatting import format_number, format_cents

from . import error_handling
from . import logging_utils
from . import constants

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "ConfigManager",
    "format_number",
    "format_cents",
    "error_handling",
    "logging_utils",
    "constants",
]
