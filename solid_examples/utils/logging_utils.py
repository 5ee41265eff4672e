"""
Logging utilities for consistent operation logging.

This module provides standardized logging functions so every command
reports the examples it runs in the same format.
"""

import logging
from typing import Dict, List, Optional

from .constants import SEPARATOR_WIDTH


def log_operation_start(operation: str, **details) -> None:
    """
    Log the start of an operation with standardized format.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        detail_str = ", ".join(f"{k}={v}" for k, v in details.items())
        logging.info("Starting %s (%s)", operation, detail_str)
    else:
        logging.info("Starting %s", operation)


def log_operation_complete(operation: str, **details) -> None:
    """
    Log the completion of an operation with standardized format.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        detail_str = ", ".join(f"{k}={v}" for k, v in details.items())
        logging.info("Completed %s (%s)", operation, detail_str)
    else:
        logging.info("Completed %s", operation)


def format_count_with_unit(count: int, unit: str, *, singular: Optional[str] = None) -> str:
    """
    Format a count with proper pluralization.

    Args:
        count: Number to format
        unit: Unit name (will be pluralized if count != 1)
        singular: Optional explicit singular form (defaults to unit)

    Returns:
        Formatted string like "5 examples" or "1 example"

    Examples:
        >>> format_count_with_unit(1, "example")
        '1 example'
        >>> format_count_with_unit(5, "example")
        '5 examples'
        >>> format_count_with_unit(1, "principles", singular="principle")
        '1 principle'
    """
    if count == 1:
        return f"{count} {singular or unit}"

    plural = unit if unit.endswith("s") else f"{unit}s"
    return f"{count} {plural}"


def format_principle_counts(counts: Dict[str, int]) -> str:
    """
    Format per-principle example counts as a comma-separated string.

    Examples:
        >>> format_principle_counts({"SRP": 2, "OCP": 1, "LSP": 0})
        'SRP: 2, OCP: 1'
    """
    parts = [f"{principle}: {count}" for principle, count in counts.items() if count > 0]
    return ", ".join(parts) if parts else "No examples"


def log_summary_separator(title: Optional[str] = None, width: int = SEPARATOR_WIDTH) -> None:
    """
    Log a visual separator line with optional title.

    Args:
        title: Optional title to display in separator
        width: Width of separator line
    """
    logging.info("=" * width)
    if title:
        logging.info(title)
        logging.info("=" * width)


def log_list_items(items: List[str], prefix: str = "  - ", level: int = logging.INFO) -> None:
    """
    Log a list of items with consistent formatting.

    Args:
        items: List of items to log
        prefix: Prefix for each item
        level: Logging level to use
    """
    for item in items:
        logging.log(level, "%s%s", prefix, item)


__all__ = [
    "log_operation_start",
    "log_operation_complete",
    "format_count_with_unit",
    "format_principle_counts",
    "log_summary_separator",
    "log_list_items",
]
