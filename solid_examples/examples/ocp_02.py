"""
OCP, the pattern: shapes behind one capability.

The driver asks every shape for its area through ``HasArea`` and never
checks which shape it holds. ``Triangle`` is the extension: it is added
with one more entry in the sequence and no change to the driver.
"""

import math
from typing import Iterable

from pydantic import Field

from ..dispatch import CapabilityDriver
from ..models.base import ValueModel
from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.shape_protocol import HasArea
from ..utils.formatting import format_number

INFO = ExampleInfo(
    name="ocp_02",
    principle="OCP",
    title="Shapes: new variants without touching the driver",
    summary="Circle, Square and Triangle all answer area(); the driver stays unchanged.",
)


class Circle(ValueModel):
    radius: float = Field(ge=0)

    def area(self) -> float:
        return math.pi * self.radius**2


class Square(ValueModel):
    side: float = Field(ge=0)

    def area(self) -> float:
        return self.side * self.side


class Triangle(ValueModel):
    base: float = Field(ge=0)
    height: float = Field(ge=0)

    def area(self) -> float:
        return 0.5 * self.base * self.height


def area_line(shape: HasArea) -> str:
    """One output line for a shape."""
    return f"{shape!r} area: {format_number(shape.area())}"


def shape_driver(shapes: Iterable[HasArea] = ()) -> CapabilityDriver[HasArea, str]:
    return CapabilityDriver(area_line, shapes)


def run(echo: Echo, context: RunContext) -> None:
    driver = shape_driver([Circle(radius=2.0), Square(side=3.0)])
    # Extension: one new variant, one more registration
    driver.register(Triangle(base=4.0, height=3.0))

    echo("=== Shape areas ===")
    for line in driver.run():
        echo(line)


__all__ = ["INFO", "Circle", "Square", "Triangle", "area_line", "shape_driver", "run"]
