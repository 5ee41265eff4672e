"""
LSP, the fix: immutable shapes with a read-only contract.

``Shape`` only promises ``area`` and ``perimeter``. Neither variant can
surprise a caller, so any one can stand in for the other.
"""

from pydantic import Field

from ..dispatch import CapabilityDriver
from ..models.base import ValueModel
from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.shape_protocol import Shape
from ..utils.formatting import format_number

INFO = ExampleInfo(
    name="lsp_02",
    principle="LSP",
    title="Immutable shapes are substitutable",
    summary="Square and Rectangle honour the same read-only Shape contract.",
)


class Rectangle(ValueModel):
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2.0 * (self.width + self.height)


class Square(ValueModel):
    side: float = Field(ge=0)

    def area(self) -> float:
        return self.side * self.side

    def perimeter(self) -> float:
        return 4.0 * self.side


def describe(shape: Shape) -> str:
    return f"Area: {format_number(shape.area())}, Perimeter: {format_number(shape.perimeter())}"


def run(echo: Echo, context: RunContext) -> None:
    driver: CapabilityDriver[Shape, str] = CapabilityDriver(
        describe, [Square(side=20.0), Rectangle(width=6.0, height=7.0)]
    )
    for line in driver.run():
        echo(line)


__all__ = ["INFO", "Rectangle", "Square", "describe", "run"]
