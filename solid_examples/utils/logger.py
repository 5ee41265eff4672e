"""
Logging configuration and utilities for the SOLID examples package.

This module provides logging setup, custom formatters, and logging utilities
to ensure consistent and readable logging across the package.
"""

import logging
from typing import Optional

from .constants import DEFAULT_LOG_WIDTH

# ============================================================================
# Custom Formatters
# ============================================================================


class WrappingFormatter(logging.Formatter):
    """
    Custom formatter that wraps long log messages for better readability.

    This formatter extends the standard logging formatter to handle
    long messages by wrapping them at a specified width.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        """
        Initialize the wrapping formatter.

        Args:
            fmt: Format string for log messages
            datefmt: Date format string
            width: Maximum width for log message wrapping
        """
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record, wrapping it on word boundaries at ``self.width``.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with wrapping
        """
        formatted = super().format(record)

        if len(formatted) <= self.width:
            return formatted

        lines = []
        current_line = ""
        for word in formatted.split():
            if len(current_line + " " + word) <= self.width:
                current_line += (" " + word) if current_line else word
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word

        if current_line:
            lines.append(current_line)

        return "\n".join(lines)


# ============================================================================
# Logging Setup Functions
# ============================================================================


def verbosity_to_level(verbosity: int) -> int:
    """Map a ``-d`` count to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, use_wrapping: bool = False, width: int = DEFAULT_LOG_WIDTH) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Log records go to stderr so they never interleave with the
    demonstration text examples print on stdout.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
        use_wrapping: If True, use wrapping formatter for long messages
        width: Line width used by the wrapping formatter

    Verbosity Levels:
        0 (default): WARNING - Only warnings and errors
        1 (-d):      INFO - Which examples run and when they finish
        2 (-dd):     DEBUG - Registry, configuration and dispatch details

    Example:
        >>> from solid_examples.utils import setup_logging
        >>> setup_logging(0)  # WARNING level (default)
        >>> setup_logging(2)  # DEBUG level
    """
    level = verbosity_to_level(verbosity)

    if use_wrapping:
        formatter = WrappingFormatter(fmt="%(asctime)s - %(levelname)s - %(message)s", width=width)
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


# ============================================================================
# Convenience Functions
# ============================================================================


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = [
    "WrappingFormatter",
    "verbosity_to_level",
    "setup_logging",
    "get_logger",
]
