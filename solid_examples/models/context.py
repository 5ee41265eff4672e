"""Context models for running examples."""

from pydantic import Field

from ..utils.constants import DEFAULT_STORAGE_PATH
from .base import ValueModel


class RunContext(ValueModel):
    """
    Settings handed to every example run.

    Attributes:
        storage_path: Base directory for the file-backed storage examples
        debug: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
    """

    storage_path: str = DEFAULT_STORAGE_PATH
    debug: int = Field(default=0, ge=0)


__all__ = ["RunContext"]
