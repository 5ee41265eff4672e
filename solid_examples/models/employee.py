"""Employee model shared by the payroll examples."""

from pydantic import Field

from .base import ValueModel


class Employee(ValueModel):
    """
    An employee and the hours worked this week.

    Attributes:
        id: Employee identifier
        name: Display name
        hours_worked: Hours worked this week
        rate: Hourly rate in dollars
    """

    id: int = Field(ge=0)
    name: str
    hours_worked: float = Field(ge=0)
    rate: float = Field(ge=0)


__all__ = ["Employee"]
