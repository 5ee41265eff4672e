"""
Central constants for the SOLID examples package.

This module consolidates the constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Principles
# ============================================================================

# SOLID principles in the order examples are registered and listed
PRINCIPLES = ["SRP", "OCP", "LSP", "ISP", "DIP"]

# ============================================================================
# Configuration
# ============================================================================

# Default configuration file location
DEFAULT_CONFIG_PATH = "~/.config/solid-examples/config.toml"

# Default base directory for the file-backed storage examples
DEFAULT_STORAGE_PATH = "."

# ============================================================================
# Payroll (SRP examples)
# ============================================================================

# Hours per week paid at the regular rate
REGULAR_HOURS_LIMIT = 40.0

# Multiplier applied to the rate for overtime hours
OVERTIME_MULTIPLIER = 1.5

# ============================================================================
# Storage (LSP examples)
# ============================================================================

# Longest key FileStorage accepts (a portable file name length)
MAX_STORAGE_KEY_LENGTH = 255

# Substrings that would let a key escape the storage directory
FORBIDDEN_KEY_PARTS = ["..", "/", "\\"]

# ============================================================================
# Logging and Display Constants
# ============================================================================

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

# Width for separator lines in console output
SEPARATOR_WIDTH = 80


__all__ = [
    "PRINCIPLES",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_STORAGE_PATH",
    "REGULAR_HOURS_LIMIT",
    "OVERTIME_MULTIPLIER",
    "MAX_STORAGE_KEY_LENGTH",
    "FORBIDDEN_KEY_PARTS",
    "DEFAULT_LOG_WIDTH",
    "SEPARATOR_WIDTH",
]
