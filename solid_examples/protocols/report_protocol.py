"""
Report and editor protocols.

This module defines the extension points of the open/closed examples:
new report formats and new editor processing steps plug in here.
"""

from typing import List, Protocol, runtime_checkable

from ..models.editor import EditorContent


@runtime_checkable
class ReportFormatter(Protocol):
    """Renders a report in one output format."""

    # Section header shown above the rendered report, e.g. "HTML"
    label: str

    def format(self, title: str, data: List[str]) -> str:
        """
        Render a report.

        Args:
            title: Report title
            data: Report lines

        Returns:
            The rendered report
        """
        ...


@runtime_checkable
class Processing(Protocol):
    """One step of an editor pipeline."""

    @property
    def name(self) -> str:
        """Name printed when the step runs."""
        ...

    def apply(self, context: EditorContent) -> None:
        """
        Apply the step to the shared editor content in place.

        Args:
            context: Content shared by every step of the pipeline
        """
        ...


__all__ = ["ReportFormatter", "Processing"]
