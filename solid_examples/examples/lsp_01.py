"""
LSP, the problem: a square that is not a substitutable rectangle.

Callers of ``Shape`` expect ``set_width`` and ``set_height`` to be
independent. ``Square`` quietly couples them, so code that is correct
for rectangles computes the wrong area for squares.
"""

from pydantic import Field

from ..models.base import SolidBaseModel
from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..utils.formatting import format_number

INFO = ExampleInfo(
    name="lsp_01",
    principle="LSP",
    title="Mutable Square breaks the Rectangle contract",
    summary="Setting width then height on a Square gives 169 where 130 was expected.",
)


class Rectangle(SolidBaseModel):
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    def set_width(self, width: float) -> None:
        self.width = width

    def set_height(self, height: float) -> None:
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Square(SolidBaseModel):
    side: float = Field(ge=0)

    def set_width(self, width: float) -> None:
        self.side = width

    def set_height(self, height: float) -> None:
        # Also overwrites the width
        self.side = height

    def area(self) -> float:
        return self.side * self.side


def run(echo: Echo, context: RunContext) -> None:
    my_square = Square(side=20.0)
    echo(f"Expected area: 400, Got: {format_number(my_square.area())}")

    my_square.set_width(10.0)
    my_square.set_height(13.0)
    echo(f"Expected area: 130, Got: {format_number(my_square.area())}")


__all__ = ["INFO", "Rectangle", "Square", "run"]
