"""
Pydantic models for solid-examples.

This package contains the data models shared between examples:
- base: Base model classes
- example: Registry metadata
- context: Settings passed to every example run
- employee, documents, editor: Domain models used by the examples
"""

from .base import SolidBaseModel, ValueModel
from .example import ExampleInfo, Principle
from .employee import Employee
from .documents import Comment, Metadata, Permission, User, Version
from .editor import EditorContent, Report
from .context import RunContext

__all__ = [
    "SolidBaseModel",
    "ValueModel",
    "ExampleInfo",
    "Principle",
    "Employee",
    "Comment",
    "Metadata",
    "Permission",
    "User",
    "Version",
    "EditorContent",
    "Report",
    "RunContext",
]
