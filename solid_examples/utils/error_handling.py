"""
Error handling utilities for standardized error logging and handling.

This module provides reusable error handling patterns shared by the
CLI commands and the examples they run.
"""

import logging
import sys
import traceback
from functools import wraps
from typing import Any, Callable, TypeVar

# Type variable for generic function decorators
F = TypeVar("F", bound=Callable[..., Any])


class SolidExamplesError(Exception):
    """Base class for errors raised by this package."""


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback (at DEBUG level)
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_example_error(error: SolidExamplesError, operation: str) -> None:
    """
    Handle errors this package raises on purpose.

    These carry a message meant for the user, so no traceback is logged.

    Args:
        error: The package error to handle
        operation: Description of the operation that failed
    """
    logging.error("%s failed: %s", operation, error)


def with_error_handling(
    operation: str, *, exit_on_error: bool = False, exit_code: int = 1, reraise: bool = True
) -> Callable[[F], F]:
    """
    Decorator to wrap functions with consistent error handling.

    Args:
        operation: Description of the operation for logging
        exit_on_error: If True, call sys.exit on error
        exit_code: Exit code to use if exit_on_error is True
        reraise: If True, reraise the exception after logging (unless exiting)

    Returns:
        Decorator function

    Example:
        @with_error_handling("run example", exit_on_error=True)
        def run_example():
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SolidExamplesError as e:
                handle_example_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            except Exception as e:
                handle_generic_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise

        return wrapper  # type: ignore[return-value]

    return decorator


def log_and_exit(message: str, exit_code: int = 1) -> None:
    """
    Log an error message and exit the program.

    Args:
        message: Error message to log
        exit_code: Exit code (default: 1)
    """
    logging.error(message)
    sys.exit(exit_code)


__all__ = [
    "SolidExamplesError",
    "handle_generic_error",
    "handle_example_error",
    "with_error_handling",
    "log_and_exit",
]
