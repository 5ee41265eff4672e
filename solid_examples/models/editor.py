"""Report and editor models used by the open/closed examples."""

from typing import List

from pydantic import Field

from .base import SolidBaseModel, ValueModel


class Report(ValueModel):
    """
    A titled list of report lines.

    Attributes:
        title: Report title
        data: One entry per report line
    """

    title: str
    data: List[str] = Field(default_factory=list)


class EditorContent(SolidBaseModel):
    """Text shared by every processing step of an editor pipeline."""

    content: str


__all__ = ["Report", "EditorContent"]
