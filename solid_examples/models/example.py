"""Metadata models for registered examples."""

from typing import Literal

from pydantic import Field

from .base import ValueModel

Principle = Literal["SRP", "OCP", "LSP", "ISP", "DIP"]


class ExampleInfo(ValueModel):
    """
    Describes one runnable example.

    Attributes:
        name: Registry name, e.g. "ocp_02"
        principle: SOLID principle the example demonstrates
        title: One-line title shown by ``list``
        summary: Short explanation of what the output shows
    """

    name: str = Field(pattern=r"^[a-z]+_\d{2}$")
    principle: Principle
    title: str = Field(min_length=1)
    summary: str = ""

    @property
    def label(self) -> str:
        """Header line printed before the example runs."""
        return f"[{self.name}] {self.principle}: {self.title}"


__all__ = ["Principle", "ExampleInfo"]
